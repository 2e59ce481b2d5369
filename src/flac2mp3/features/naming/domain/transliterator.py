"""
Summary: Fold arbitrary tag text into printable ASCII.
Why: Tags feed both file names and ID3 frames, which must not carry mojibake.
"""

from __future__ import annotations

import re
from typing import Final

from unidecode import unidecode

# Single control characters stand in for literal ':' and '?' while folding
# runs. unidecode passes ASCII through untouched, and any occurrence in the
# input is removed first, so restoring them is unambiguous.
_COLON_MARKER: Final[str] = "\x01"
_QUESTION_MARKER: Final[str] = "\x02"
_FOLD_REPLACEMENT: Final[str] = "?"

# Characters generic folding handles poorly.
SUBSTITUTIONS: Final[dict[str, str]] = {
    "«": '"',
    "»": '"',
    "‹": '"',
    "›": '"',
    "“": '"',
    "”": '"',
    "„": '"',
    "‟": '"',
    "‘": "'",
    "’": "'",
    "‚": "'",
    "‛": "'",
    "÷": "/",
    "±": "+-",
    "×": "x",
    "¹": "1",
    "²": "2",
    "³": "3",
    "¦": "|",
    "¡": "!",
    "¿": _QUESTION_MARKER,
    "Ä": "Ae",
    "ä": "ae",
    "Ö": "Oe",
    "ö": "oe",
    "Ü": "Ue",
    "ü": "ue",
    "ß": "ss",
    "Ø": "Oe",
    "ø": "oe",
    "Å": "Aa",
    "å": "aa",
    "Æ": "Ae",
    "æ": "ae",
    "Ð": "Dh",
    "ð": "dh",
    "Þ": "Th",
    "þ": "th",
}

_TABLE: Final[dict[int, str]] = str.maketrans(SUBSTITUTIONS)
_WHITESPACE_CONTROLS: Final[re.Pattern[str]] = re.compile(r"[\t\n\v\f\r]")
_NON_PRINTABLE: Final[re.Pattern[str]] = re.compile(r"[^\x20-\x7e]")


def transliterate(text: str) -> str:
    """Map ``text`` to printable ASCII (0x20-0x7E).

    Original ':' and '?' survive, the substitution table runs before
    unidecode, and characters unidecode cannot represent are dropped.
    Never raises; the result may be empty.
    """
    if not text:
        return ""

    protected = text.replace(_COLON_MARKER, "").replace(_QUESTION_MARKER, "")
    protected = protected.replace(":", _COLON_MARKER)
    protected = protected.replace("?", _QUESTION_MARKER)
    substituted = protected.translate(_TABLE)

    folded = unidecode(substituted, errors="replace", replace_str=_FOLD_REPLACEMENT)
    folded = folded.replace(_FOLD_REPLACEMENT, "")
    folded = _WHITESPACE_CONTROLS.sub(" ", folded)

    restored = folded.replace(_QUESTION_MARKER, "?").replace(_COLON_MARKER, ":")
    return _NON_PRINTABLE.sub("", restored)


__all__ = ["SUBSTITUTIONS", "transliterate"]
