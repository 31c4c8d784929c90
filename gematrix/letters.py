from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

# Regular letters in alphabet order; finals are listed separately.
ALPHABET = "אבגדהוזחטיכלמנסעפצקרשת"
FINALS = "ךםןףץ"

_FINALS_MAP = str.maketrans({
    "ך": "כ",
    "ם": "מ",
    "ן": "נ",
    "ף": "פ",
    "ץ": "צ",
})

_STANDARD: Dict[str, int] = {
    "א": 1, "ב": 2, "ג": 3, "ד": 4, "ה": 5, "ו": 6, "ז": 7, "ח": 8, "ט": 9,
    "י": 10, "כ": 20, "ל": 30, "מ": 40, "נ": 50, "ס": 60, "ע": 70, "פ": 80, "צ": 90,
    "ק": 100, "ר": 200, "ש": 300, "ת": 400,
}

# Full spelling of each letter's name, used by Otiyot BeMilui.
_NAMES: Dict[str, str] = {
    "א": "אלף", "ב": "בית", "ג": "גימל", "ד": "דלת", "ה": "הא", "ו": "ויו",
    "ז": "זין", "ח": "חית", "ט": "טית", "י": "יוד", "כ": "כף", "ל": "למד",
    "מ": "מם", "נ": "נון", "ס": "סמך", "ע": "עין", "פ": "פא", "צ": "צדי",
    "ק": "קוף", "ר": "ריש", "ש": "שין", "ת": "תיו",
}

# Nikkud marks valued by the number of dots and strokes that draw them.
_NIKKUD: Dict[str, Tuple[str, int]] = {
    "\u05B0": ("shva", 2),
    "\u05B1": ("hataf segol", 5),
    "\u05B2": ("hataf patah", 3),
    "\u05B3": ("hataf qamats", 4),
    "\u05B4": ("hiriq", 1),
    "\u05B5": ("tsere", 2),
    "\u05B6": ("segol", 3),
    "\u05B7": ("patah", 1),
    "\u05B8": ("qamats", 2),
    "\u05B9": ("holam", 1),
    "\u05BA": ("holam haser for vav", 1),
    "\u05BB": ("qubuts", 3),
    "\u05BC": ("dagesh", 1),
    "\u05BD": ("meteg", 1),
    "\u05BF": ("rafe", 1),
    "\u05C1": ("shin dot", 1),
    "\u05C2": ("sin dot", 1),
    "\u05C7": ("qamats qatan", 2),
}

MAQAF = "\u05BE"

# Points and cantillation, minus the punctuation that lives in the same block
# (maqaf, paseq, sof pasuq, nun hafukha).
_MARKS_RE = re.compile("[\u0591-\u05BD\u05BF\u05C1\u05C2\u05C4\u05C5\u05C7]")

@dataclass(frozen=True)
class Letter:
    char: str
    value: int
    position: int = 0
    final: bool = False
    name: str = ""
    nikkud: bool = False

    @property
    def codepoint(self) -> int:
        return ord(self.char)

def normalize_finals(text: str) -> str:
    return text.translate(_FINALS_MAP)

def _build_table() -> Dict[str, Letter]:
    table: Dict[str, Letter] = {}
    for pos, ch in enumerate(ALPHABET, 1):
        table[ch] = Letter(ch, _STANDARD[ch], pos, False, _NAMES[ch])
    for ch in FINALS:
        base = table[normalize_finals(ch)]
        table[ch] = Letter(ch, base.value, base.position, True, base.name)
    for ch, (name, value) in _NIKKUD.items():
        table[ch] = Letter(ch, value, name=name, nikkud=True)
    return table

LETTERS: Dict[str, Letter] = _build_table()

def lookup(ch: str) -> Optional[Letter]:
    """Return the table entry for ``ch`` or None when it carries no value."""
    return LETTERS.get(ch)

def is_consonant(ch: str) -> bool:
    letter = LETTERS.get(ch)
    return letter is not None and not letter.nikkud

def is_nikkud(ch: str) -> bool:
    letter = LETTERS.get(ch)
    return letter is not None and letter.nikkud

def standard_value(ch: str) -> int:
    letter = LETTERS.get(ch)
    if letter is None or letter.nikkud:
        return 0
    return letter.value

def strip_marks(text: str) -> str:
    """Remove nikkud and cantillation, leaving letters and punctuation."""
    if not text:
        return ""
    return _MARKS_RE.sub("", text)
