from __future__ import annotations
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Iterable, Iterator, List, NamedTuple, Optional, Sequence, Tuple, Union

from ._logging import get_logger
from .context import GematriaContext, split_words

logger = get_logger(__name__)

Words = Union[str, Iterable[str]]

class GroupEntry(NamedTuple):
    word: str
    count: int

class GroupResult:
    """Words bucketed by gematria value.

    Buckets iterate in the order their value was first seen, and words inside
    a bucket in the order they were first seen. Repeated words are counted,
    not duplicated.
    """

    def __init__(self, buckets: Optional[Dict[int, Dict[str, int]]] = None) -> None:
        self._buckets: Dict[int, Dict[str, int]] = {}
        for value, words in (buckets or {}).items():
            self._buckets[value] = dict(words)

    def _add(self, value: int, word: str, count: int = 1) -> None:
        bucket = self._buckets.setdefault(value, {})
        bucket[word] = bucket.get(word, 0) + count

    def __len__(self) -> int:
        return len(self._buckets)

    def __iter__(self) -> Iterator[int]:
        return iter(self._buckets)

    def __contains__(self, value: object) -> bool:
        return value in self._buckets

    def __getitem__(self, value: int) -> List[GroupEntry]:
        return [GroupEntry(w, c) for w, c in self._buckets[value].items()]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GroupResult):
            return NotImplemented
        return self.as_entries() == other.as_entries()

    def __repr__(self) -> str:
        return f"GroupResult({self.as_pairs()!r})"

    def values(self) -> List[int]:
        return list(self._buckets)

    def words(self, value: int) -> List[str]:
        return list(self._buckets.get(value, ()))

    def items(self) -> Iterator[Tuple[int, List[GroupEntry]]]:
        for value in self._buckets:
            yield value, self[value]

    def as_pairs(self) -> List[Tuple[int, List[str]]]:
        return [(value, list(words)) for value, words in self._buckets.items()]

    def as_entries(self) -> List[Tuple[int, List[GroupEntry]]]:
        return list(self.items())

    @property
    def total_count(self) -> int:
        return sum(sum(words.values()) for words in self._buckets.values())

    def merge(self, other: "GroupResult") -> "GroupResult":
        """New result with ``other`` appended after this one; counts add up."""
        merged = GroupResult(self._buckets)
        for value, words in other._buckets.items():
            for word, count in words.items():
                merged._add(value, word, count)
        return merged

    def shared(self) -> "GroupResult":
        """Only the buckets holding more than one distinct word."""
        return GroupResult({v: w for v, w in self._buckets.items() if len(w) > 1})

    def sorted_by_value(self) -> "GroupResult":
        return GroupResult(dict(sorted(self._buckets.items())))

    def sorted_by_size(self) -> "GroupResult":
        # Largest bucket first, then by value.
        ordered = sorted(self._buckets.items(), key=lambda kv: (-len(kv[1]), kv[0]))
        return GroupResult(dict(ordered))

def _tokens(words: Words) -> Iterator[str]:
    if isinstance(words, str):
        words = (words,)
    for item in words:
        yield from split_words(item)

def group_words(words: Words, context: Optional[GematriaContext] = None) -> GroupResult:
    """Group the words of ``words`` (a text or a sequence of texts) by value."""
    ctx = context or GematriaContext.default()
    result = GroupResult()
    seen = 0
    for token in _tokens(words):
        # Value follows the word identity, so merged vowelizations share one bucket.
        key = ctx.word_key(token)
        result._add(ctx.calculate_value(key), key)
        seen += 1
    logger.debug("Grouped %d words into %d values (method=%s)", seen, len(result), ctx.method.key)
    return result

def group_words_parallel(
    chunks: Sequence[Words],
    context: Optional[GematriaContext] = None,
    max_workers: Optional[int] = None,
) -> GroupResult:
    """Group each chunk on a worker thread and merge in chunk order.

    The result equals ``group_words`` over the concatenated chunks.
    """
    ctx = context or GematriaContext.default()
    if isinstance(chunks, str):
        chunks = (chunks,)
    result = GroupResult()
    if not chunks:
        return result
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        for partial in pool.map(lambda chunk: group_words(chunk, ctx), chunks):
            result = result.merge(partial)
    return result
