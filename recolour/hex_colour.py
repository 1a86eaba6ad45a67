# recolour/hex_colour.py
from __future__ import annotations

"""
Hex colour parsing for interactive replacement input.
"""

import re
from typing import Optional

from .core_types import RGBTuple

_HEX_COLOUR = re.compile(r"#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})", re.IGNORECASE)


def parse_hex_colour(text: str) -> Optional[RGBTuple]:
    """
    Parse '#rrggbb' or 'rrggbb' (case-insensitive, surrounding whitespace ignored).

    Returns None for anything else, including empty input and 3-digit shorthand.
    Never reads an alpha channel.
    """
    m = _HEX_COLOUR.fullmatch(text.strip())
    if m is None:
        return None
    return (int(m.group(1), 16), int(m.group(2), 16), int(m.group(3), 16))


__all__ = ["parse_hex_colour"]
