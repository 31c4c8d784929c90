"""
gematrix: Hebrew gematria values and word grouping.

Usage:
    from gematrix import GematriaBuilder, group_words

    ctx = GematriaBuilder().with_method("gadol").build()
    ctx.calculate_value("שלום")        # 936

    for value, entries in group_words("נכנס יין יצא סוד").items():
        print(value, [e.word for e in entries])
"""

from gematrix.context import GematriaBuilder, GematriaContext, GematriaResult, split_words
from gematrix.exceptions import (
    ConfigurationError,
    GematrixError,
    SourceError,
    UnknownMethodError,
)
from gematrix.grouping import GroupEntry, GroupResult, group_words, group_words_parallel
from gematrix.letters import Letter, lookup
from gematrix.methods import Method

__version__ = "0.1.0"
__all__ = [
    "__version__",
    # Core
    "GematriaBuilder",
    "GematriaContext",
    "GematriaResult",
    "Letter",
    "Method",
    "lookup",
    "split_words",
    # Grouping
    "GroupEntry",
    "GroupResult",
    "group_words",
    "group_words_parallel",
    # Exceptions
    "GematrixError",
    "UnknownMethodError",
    "ConfigurationError",
    "SourceError",
]
