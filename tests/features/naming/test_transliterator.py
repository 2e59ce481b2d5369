"""
Summary: Verify tag text folds to printable ASCII with meaningful punctuation kept.
Why: File names and ID3 frames are built from the transliterated text.
"""

from __future__ import annotations

import pytest

from flac2mp3.features.naming.domain import transliterate
from flac2mp3.features.naming.domain.transliterator import SUBSTITUTIONS


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Café Müller", "Cafe Mueller"),
        ("Déjà Vu?", "Deja Vu?"),
        ("Naïve (Remix)", "Naive (Remix)"),
        ("Björk: Ørestad", "Bjoerk: Oerestad"),
        ("Þórður Guðmundsson", "Thordhur Gudhmundsson"),
        ("Straße", "Strasse"),
        ("«Quoted» “Curly”", '"Quoted" "Curly"'),
        ("Don’t", "Don't"),
        ("¿Qué? ¡Sí!", "?Que? !Si!"),
        ("A ± B ÷ C", "A +- B / C"),
        ("x² y³ z¹", "x2 y3 z1"),
        ("left ¦ right", "left | right"),
    ],
)
def test_transliterate_known_values(text: str, expected: str) -> None:
    """Table substitutions run before generic folding."""

    assert transliterate(text) == expected


def test_transliterate_keeps_original_question_marks_and_colons() -> None:
    assert transliterate("Who? What: Why?") == "Who? What: Why?"


def test_transliterate_drops_unrepresentable_characters() -> None:
    """Characters that neither the table nor folding can map vanish."""

    result = transliterate("A\U000f0000B")

    assert result == "AB"
    assert "?" not in result


def test_transliterate_replaces_control_whitespace_and_drops_other_controls() -> None:
    assert transliterate("one\ttwo\nthree\x07") == "one two three"


def test_transliterate_control_characters_cannot_forge_punctuation() -> None:
    """Raw control characters in the input never turn into ':' or '?'."""

    assert transliterate("a\x01b\x02c") == "abc"


def test_transliterate_adjacent_punctuation_and_letters() -> None:
    assert transliterate(":Q:?C?") == ":Q:?C?"


def test_transliterate_empty_string() -> None:
    assert transliterate("") == ""


@pytest.mark.parametrize(
    "text",
    [
        "東京事変 – 能動的三分間",
        "Ŝtiŋ ŧest 🎵 ∞ ≠ ≤",
        "​﻿zero width",
        "Мумий Тролль",
        "".join(SUBSTITUTIONS),
        "::??¿¿",
    ],
)
def test_transliterate_output_is_printable_ascii(text: str) -> None:
    """No byte outside 0x20-0x7E and no protection marker leaks out."""

    result = transliterate(text)

    assert all(0x20 <= ord(char) <= 0x7E for char in result)
    assert "\x01" not in result
    assert "\x02" not in result
