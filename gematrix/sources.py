from __future__ import annotations
import json
import sys
from pathlib import Path
from typing import IO, Any, Iterator, List, Optional, Tuple

from ._logging import get_logger
from .exceptions import SourceError

logger = get_logger(__name__)

VerseRow = Tuple[str, int, int, str]  # (book, chapter, verse, text)

FORMATS = ("text", "tsv", "sefaria_json")

def iter_tsv(path: Path) -> Iterator[VerseRow]:
    with path.open("r", encoding="utf-8") as f:
        for ln, line in enumerate(f, 1):
            line = line.rstrip("\n")
            if not line.strip():
                continue
            parts = line.split("\t")
            if len(parts) < 4:
                raise SourceError(f"Bad TSV line {ln}: expected 4 columns, got {len(parts)}", str(path))
            try:
                chapter = int(parts[1])
                verse = int(parts[2])
            except ValueError:
                raise SourceError(f"Bad TSV line {ln}: chapter and verse must be numbers", str(path)) from None
            yield (parts[0].strip(), chapter, verse, "\t".join(parts[3:]).strip())

def _emit(book: str, chapters: List[Any]) -> Iterator[VerseRow]:
    for c_idx, verses in enumerate(chapters, 1):
        if verses is None:
            continue
        if isinstance(verses, str):
            # Single-level export: one string per verse.
            yield (book, 1, c_idx, verses)
            continue
        for v_idx, vtext in enumerate(verses, 1):
            if vtext is None:
                continue
            yield (book, c_idx, v_idx, str(vtext))

def _iter_books(books: List[Any]) -> Iterator[VerseRow]:
    for b in books:
        if not isinstance(b, dict):
            continue
        title = b.get("title") or b.get("book") or b.get("name")
        chapters = b.get("chapters") or b.get("text")
        if not title or not isinstance(chapters, list):
            continue
        yield from _emit(str(title), chapters)

def iter_sefaria_json(path: Path) -> Iterator[VerseRow]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise SourceError(f"Invalid JSON: {e.msg} at line {e.lineno}", str(path)) from e

    if isinstance(data, dict) and isinstance(data.get("books"), list):
        yield from _iter_books(data["books"])
    elif isinstance(data, dict):
        for book, chapters in data.items():
            if isinstance(chapters, list):
                yield from _emit(str(book), chapters)
    elif isinstance(data, list):
        yield from _iter_books(data)
    else:
        raise SourceError("Unsupported JSON shape", str(path))

def read_text(
    path: Optional[str] = None,
    fmt: str = "text",
    stream: Optional[IO[str]] = None,
) -> str:
    """Return the text body of a file, or of ``stream`` (stdin) when no path is given.

    Structured formats (tsv, sefaria_json) are flattened to their verse texts,
    one verse per line, in file order.
    """
    if fmt not in FORMATS:
        raise SourceError(f"format must be one of: {' | '.join(FORMATS)}")

    if path is None:
        if fmt != "text":
            raise SourceError(f"format {fmt!r} needs an input file")
        return (stream or sys.stdin).read()

    in_path = Path(path)
    if not in_path.is_file():
        raise SourceError("Input file not found", str(in_path))

    try:
        if fmt == "text":
            return in_path.read_text(encoding="utf-8")
        rows = iter_tsv(in_path) if fmt == "tsv" else iter_sefaria_json(in_path)
        lines = [text for (_book, _chapter, _verse, text) in rows]
    except UnicodeDecodeError as e:
        raise SourceError(f"Input is not valid UTF-8: {e.reason}", str(in_path)) from e

    logger.debug("Read %d verses from %s (%s)", len(lines), in_path, fmt)
    return "\n".join(lines)
