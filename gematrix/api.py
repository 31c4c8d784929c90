from __future__ import annotations
from typing import List, Literal, Optional

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel

from .config import Settings
from .context import GematriaBuilder, GematriaContext
from .exceptions import ConfigurationError, UnknownMethodError
from .grouping import group_words
from .methods import Method

app = FastAPI(title="gematrix")

class MethodOut(BaseModel):
    key: str
    label: str

class ValueOut(BaseModel):
    text: str
    method: str
    value: int

class WordOut(BaseModel):
    word: str
    count: int

class BucketOut(BaseModel):
    value: int
    count: int
    words: List[WordOut]

class GroupIn(BaseModel):
    text: str
    method: Optional[str] = None
    count_nikkud: Optional[bool] = None
    distinct_vowelizations: Optional[bool] = None
    shared_only: bool = False
    sort: Literal["none", "value", "size"] = "none"

class SearchOut(BaseModel):
    value: int
    words: List[str]

def _context(
    method: Optional[str] = None,
    count_nikkud: Optional[bool] = None,
    distinct_vowelizations: Optional[bool] = None,
) -> GematriaContext:
    try:
        s = Settings.from_env()
    except ConfigurationError as e:
        # Bad GEMATRIX_* environment on the server.
        raise HTTPException(status_code=503, detail=str(e)) from e
    try:
        return (
            GematriaBuilder()
            .with_method(method or s.method)
            .with_count_nikkud(s.count_nikkud if count_nikkud is None else count_nikkud)
            .with_distinct_vowelizations(
                s.distinct_vowelizations if distinct_vowelizations is None else distinct_vowelizations
            )
            .build()
        )
    except UnknownMethodError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

@app.get("/methods", response_model=List[MethodOut])
def api_methods():
    return [MethodOut(key=m.key, label=m.label) for m in Method]

@app.get("/gematria", response_model=ValueOut)
def api_gematria(
    text: str = Query(..., min_length=1, description="Hebrew word or phrase"),
    method: Optional[str] = Query(None, description="Calculation method key"),
    count_nikkud: Optional[bool] = None,
):
    ctx = _context(method, count_nikkud)
    return ValueOut(text=text, method=ctx.method.key, value=ctx.calculate_value(text))

@app.post("/group", response_model=List[BucketOut])
def api_group(body: GroupIn):
    ctx = _context(body.method, body.count_nikkud, body.distinct_vowelizations)
    result = group_words(body.text, ctx)
    if body.shared_only:
        result = result.shared()
    if body.sort == "value":
        result = result.sorted_by_value()
    elif body.sort == "size":
        result = result.sorted_by_size()
    return [
        BucketOut(
            value=value,
            count=sum(e.count for e in entries),
            words=[WordOut(word=e.word, count=e.count) for e in entries],
        )
        for value, entries in result.items()
    ]

@app.get("/search", response_model=SearchOut)
def api_search(
    text: str = Query(..., description="Text to search in"),
    word: Optional[str] = Query(None, description="Match words with the value of this word"),
    value: Optional[int] = Query(None, ge=0, description="Match words with this value"),
    method: Optional[str] = None,
):
    ctx = _context(method)
    if value is None:
        if not word:
            raise HTTPException(status_code=400, detail="Provide either word or value")
        value = ctx.calculate_value(word)
    return SearchOut(value=value, words=ctx.search_matching_values(value, text))
