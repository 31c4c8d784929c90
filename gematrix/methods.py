from __future__ import annotations
from enum import Enum
from typing import Callable, Dict, Iterable, List, Union

from .exceptions import UnknownMethodError
from .letters import ALPHABET, FINALS, Letter, standard_value

LetterTransform = Callable[[Letter], int]
WordFold = Callable[[Iterable[int]], int]

_GADOL_FINALS: Dict[str, int] = dict(zip(FINALS, (500, 600, 700, 800, 900)))

# Kidmi: running total of standard values from Aleph up to each position.
_KIDMI: Dict[int, int] = {}
_running = 0
for _pos, _ch in enumerate(ALPHABET, 1):
    _running += standard_value(_ch)
    _KIDMI[_pos] = _running

def reduce_digits(value: int) -> int:
    """Repeated digit sum, i.e. ``value mod 9`` with 0 mapped to 9 (0 stays 0)."""
    if value <= 0:
        return 0
    return value % 9 or 9

def _standard(letter: Letter) -> int:
    return letter.value

def _gadol(letter: Letter) -> int:
    return _GADOL_FINALS.get(letter.char, letter.value)

def _katan(letter: Letter) -> int:
    return reduce_digits(letter.value)

def _siduri(letter: Letter) -> int:
    return letter.position

def _kidmi(letter: Letter) -> int:
    return _KIDMI.get(letter.position, 0)

def _musafi(letter: Letter) -> int:
    return letter.value + 1

def _milui(letter: Letter) -> int:
    return sum(standard_value(ch) for ch in letter.name)

def _sum(values: Iterable[int]) -> int:
    return sum(values)

def _building(values: Iterable[int]) -> int:
    # Each letter adds the running total of the word so far.
    total = 0
    running = 0
    for v in values:
        running += v
        total += running
    return total

class Method(Enum):
    """Gematria calculation methods.

    Each member carries its CLI/API key, a display label, the per-letter
    transform and the fold that turns the letter values of a word into one
    number.
    """

    HECHRECHI = ("hechrechi", "Mispar Hechrechi (standard)", _standard, _sum)
    GADOL = ("gadol", "Mispar Gadol (final forms 500-900)", _gadol, _sum)
    KATAN = ("katan", "Mispar Katan (reduced to one digit)", _katan, _sum)
    SIDURI = ("siduri", "Mispar Siduri (ordinal 1-22)", _siduri, _sum)
    BONEH = ("boneh", "Mispar Bone'eh (building)", _standard, _building)
    KIDMI = ("kidmi", "Mispar Kidmi (triangular)", _kidmi, _sum)
    MUSAFI = ("musafi", "Mispar Musafi (standard plus letter count)", _musafi, _sum)
    MILUI = ("milui", "Otiyot BeMilui (spelled-out letters)", _milui, _sum)

    def __init__(self, key: str, label: str, transform: LetterTransform, fold: WordFold) -> None:
        self.key = key
        self.label = label
        self._transform = transform
        self._fold = fold

    def __str__(self) -> str:
        return self.key

    def letter_value(self, letter: Letter) -> int:
        if letter.nikkud:
            return 0
        return self._transform(letter)

    def fold(self, values: Iterable[int]) -> int:
        return self._fold(values)

    @classmethod
    def keys(cls) -> List[str]:
        return [m.key for m in cls]

    @classmethod
    def from_name(cls, name: Union[str, "Method"]) -> "Method":
        if isinstance(name, Method):
            return name
        if not isinstance(name, str):
            raise UnknownMethodError(repr(name), cls.keys())
        key = name.strip().lower().replace("-", "_").replace(" ", "_")
        if key.startswith("mispar_"):
            key = key[len("mispar_"):]
        key = _ALIASES.get(key, key)
        for m in cls:
            if m.key == key:
                return m
        raise UnknownMethodError(name, cls.keys())

_ALIASES: Dict[str, str] = {
    "standard": "hechrechi",
    "hechrachi": "hechrechi",
    "great": "gadol",
    "small": "katan",
    "ordinal": "siduri",
    "building": "boneh",
    "boneeh": "boneh",
    "triangular": "kidmi",
    "otiyot_be_milui": "milui",
    "otiyot_bemilui": "milui",
    "otiyotbemilui": "milui",
}

DEFAULT_METHOD = Method.HECHRECHI
