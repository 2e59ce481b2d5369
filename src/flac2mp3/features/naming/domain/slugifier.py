"""
Summary: Reduce ASCII text to a lowercase, underscore-delimited path token.
Why: Path components must be filesystem-safe and stable across runs.
"""

from __future__ import annotations

import re
from typing import Final

MAX_SLUG_LENGTH: Final[int] = 200

# "?" becomes a standalone "q" token.
_QUESTION_MARK: Final[re.Pattern[str]] = re.compile(r"\?")
_SEPARATOR_RUN: Final[re.Pattern[str]] = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """Return the slug of ``text``, or an empty string.

    The result matches ``^[a-z0-9](_?[a-z0-9]+)*$`` when non-empty, is at
    most ``MAX_SLUG_LENGTH`` characters long, and ``slugify`` is idempotent.
    """
    slug = _QUESTION_MARK.sub("_q_", text.lower())
    slug = _SEPARATOR_RUN.sub("_", slug).strip("_")
    return slug[:MAX_SLUG_LENGTH].rstrip("_")


__all__ = ["MAX_SLUG_LENGTH", "slugify"]
