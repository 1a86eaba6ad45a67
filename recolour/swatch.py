# recolour/swatch.py
from __future__ import annotations

"""
Terminal colour swatches using 24-bit ANSI background escapes.
"""

import os
from typing import Callable, Optional

from .constants import SWATCH_WIDTH
from .core_types import RGBTuple

SwatchRenderer = Callable[[RGBTuple], str]


def ansi_swatch(rgb: RGBTuple, width: int = SWATCH_WIDTH) -> str:
    """Block of `width` spaces on a truecolor background."""
    r, g, b = rgb
    return f"\033[48;2;{r};{g};{b}m{' ' * width}\033[0m"


def plain_swatch(rgb: RGBTuple, width: int = SWATCH_WIDTH) -> str:
    """Uncoloured placeholder so the preview line keeps its shape."""
    return " " * width


def choose_swatch_renderer(
    enabled: bool, environ: Optional[dict] = None
) -> SwatchRenderer:
    """ANSI swatches unless disabled on the command line or NO_COLOR is set."""
    env = os.environ if environ is None else environ
    if not enabled or env.get("NO_COLOR"):
        return plain_swatch
    return ansi_swatch


__all__ = ["SwatchRenderer", "ansi_swatch", "plain_swatch", "choose_swatch_renderer"]
