from __future__ import annotations
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, List, Union

from ._logging import get_logger
from .letters import MAQAF, lookup, strip_marks
from .methods import DEFAULT_METHOD, Method

if TYPE_CHECKING:
    from .config import Settings

logger = get_logger(__name__)

MethodLike = Union[Method, str]

def split_words(text: str) -> List[str]:
    """Split on Unicode whitespace and on maqaf, dropping empty tokens."""
    if not text:
        return []
    return [w for chunk in text.split() for w in chunk.split(MAQAF) if w]

@dataclass(frozen=True)
class GematriaResult:
    value: int
    method: Method
    word: str

@dataclass(frozen=True)
class GematriaContext:
    """Immutable calculation settings plus the operations that use them.

    Build one with :class:`GematriaBuilder` (or ``GematriaContext.default()``)
    and share it freely: it holds no mutable state.
    """

    method: Method = DEFAULT_METHOD
    count_nikkud: bool = False
    distinct_vowelizations: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", Method.from_name(self.method))
        object.__setattr__(self, "count_nikkud", bool(self.count_nikkud))
        object.__setattr__(self, "distinct_vowelizations", bool(self.distinct_vowelizations))

    @classmethod
    def default(cls) -> "GematriaContext":
        return GematriaBuilder().build()

    @classmethod
    def from_settings(cls, settings: "Settings") -> "GematriaContext":
        return (
            GematriaBuilder()
            .with_method(settings.method)
            .with_count_nikkud(settings.count_nikkud)
            .with_distinct_vowelizations(settings.distinct_vowelizations)
            .build()
        )

    def with_method(self, method: MethodLike) -> "GematriaContext":
        return replace(self, method=Method.from_name(method))

    def calculate_value(self, word: str) -> int:
        if not word:
            return 0
        values: List[int] = []
        marks = 0
        for ch in word:
            letter = lookup(ch)
            if letter is None:
                continue
            if letter.nikkud:
                if self.count_nikkud:
                    marks += letter.value
                continue
            values.append(self.method.letter_value(letter))
        return self.method.fold(values) + marks

    def calculate_char_value(self, ch: str) -> int:
        if len(ch) != 1:
            return 0
        return self.calculate_value(ch)

    def word_key(self, word: str) -> str:
        """The identity of ``word`` when comparing words under this context."""
        if self.distinct_vowelizations:
            return word
        return strip_marks(word)

    def evaluate(self, word: str) -> GematriaResult:
        return GematriaResult(self.calculate_value(word), self.method, self.word_key(word))

    def search_matching_values(self, target_value: int, text: str) -> List[str]:
        return [
            self.word_key(w)
            for w in split_words(text)
            if self.calculate_value(w) == target_value
        ]

    def search_matching_words(self, target_word: str, text: str) -> List[str]:
        return self.search_matching_values(self.calculate_value(target_word), text)

@dataclass
class GematriaBuilder:
    """Fluent builder for :class:`GematriaContext`.

    Method names are resolved as soon as they are given, so an unknown name
    fails before any calculation is attempted.
    """

    method: Method = DEFAULT_METHOD
    count_nikkud: bool = False
    distinct_vowelizations: bool = True

    def with_method(self, method: MethodLike) -> "GematriaBuilder":
        self.method = Method.from_name(method)
        return self

    def with_count_nikkud(self, enable: bool = True) -> "GematriaBuilder":
        self.count_nikkud = enable
        return self

    def with_distinct_vowelizations(self, enable: bool = True) -> "GematriaBuilder":
        self.distinct_vowelizations = enable
        return self

    def build(self) -> GematriaContext:
        ctx = GematriaContext(
            method=self.method,
            count_nikkud=self.count_nikkud,
            distinct_vowelizations=self.distinct_vowelizations,
        )
        logger.debug(
            "Built context: method=%s count_nikkud=%s distinct_vowelizations=%s",
            ctx.method.key, ctx.count_nikkud, ctx.distinct_vowelizations,
        )
        return ctx
