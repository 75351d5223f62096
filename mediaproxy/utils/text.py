"""Text helpers for cleaning upstream fields."""

from __future__ import annotations

import re
from typing import Any

# KMDB wraps query hits in !HS ... !HE highlight tokens.
_MARKUP_RE = re.compile(r"!HS|!HE|<[^>]*>")


def strip_markup(value: Any) -> str:
    if value is None:
        return ""
    return _MARKUP_RE.sub("", str(value)).strip()


def first_segment(value: Any, separator: str = "|") -> str:
    """Return the first entry of a delimiter-separated list."""

    if not value:
        return ""
    return str(value).split(separator, 1)[0].strip()


def as_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


__all__ = ["as_text", "first_segment", "strip_markup"]
