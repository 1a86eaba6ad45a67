# recolour/constants.py
"""
Tunables and fixed strings used across the project.

- Output defaults (DEFAULT_OUTPUT_NAME)
- Preview and swatch sizes
- Interactive prompt text
- Pillow modes accepted at the load boundary
"""
from __future__ import annotations

from typing import FrozenSet

# =========================
# Output
# =========================
DEFAULT_OUTPUT_NAME: str = "recolor_output.png"

# =========================
# Preview
# =========================
PREVIEW_LOCATIONS: int = 10
SWATCH_WIDTH: int = 4

# =========================
# Prompts
# =========================
COLOUR_PROMPT: str = (
    "Enter new color for this color (in hex format, e.g. #ff00ff), "
    "or press Enter to keep the same color:"
)
OUTPUT_PROMPT: str = "Enter a filename for the recolored image: (default: {default})"

# =========================
# Pixel formats
# =========================
# 8 bits per channel; Pillow converts these to RGBA without losing precision.
EIGHT_BIT_MODES: FrozenSet[str] = frozenset(
    {
        "1",
        "L",
        "LA",
        "La",
        "P",
        "PA",
        "RGB",
        "RGBA",
        "RGBa",
        "RGBX",
        "CMYK",
        "YCbCr",
    }
)
