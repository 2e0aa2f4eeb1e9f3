# -*- coding: utf-8 -*-
"""
Offset unit arithmetic.

Every range the engine reports is expressed in one offset unit, fixed per call:
- "utf16": UTF-16 code units, the way NSString, JavaScript and Qt text
  buffers address their contents. Characters outside the Basic Multilingual
  Plane (most emoji) count as 2.
- "codepoint": Unicode code points, the way Python ``str`` indexing works.

Helpers here convert between the configured unit and Python string indices
so that ranges can be sliced back against the original text.
"""

from typing import Literal

OffsetUnit = Literal["utf16", "codepoint"]

OFFSET_UNITS = ("utf16", "codepoint")


def _check_unit(unit: str) -> None:
    if unit not in OFFSET_UNITS:
        raise ValueError(
            f"offset unit must be 'utf16' or 'codepoint', got '{unit}'"
        )


def unit_length(text: str, unit: OffsetUnit = "utf16") -> int:
    """
    Length of text measured in the given offset unit.

    Args:
        text: Text to measure.
        unit: "utf16" or "codepoint".

    Returns:
        Number of units text occupies.
    """
    _check_unit(unit)
    if unit == "codepoint":
        return len(text)
    # Astral code points take a surrogate pair
    return len(text) + sum(1 for ch in text if ord(ch) > 0xFFFF)


def to_codepoint_index(text: str, offset: int, unit: OffsetUnit = "utf16") -> int:
    """
    Convert an offset in the given unit into a Python string index.

    Offsets that land in the middle of a surrogate pair snap forward to the
    next code point. Offsets past the end clamp to len(text).
    """
    _check_unit(unit)
    if offset <= 0:
        return 0
    if unit == "codepoint":
        return min(offset, len(text))

    units = 0
    for index, ch in enumerate(text):
        if units >= offset:
            return index
        units += 2 if ord(ch) > 0xFFFF else 1
    return len(text)


def slice_range(text: str, location: int, length: int, unit: OffsetUnit = "utf16") -> str:
    """Return the substring of text covered by (location, length) in unit."""
    start = to_codepoint_index(text, location, unit)
    end = to_codepoint_index(text, location + length, unit)
    return text[start:end]
