# recolour/image_io.py
from __future__ import annotations

from pathlib import Path
from typing import Tuple

import numpy as np
from PIL import Image, UnidentifiedImageError

from .constants import EIGHT_BIT_MODES
from .core_types import U8RGBA, assert_u8_rgba
from .errors import (
    DecodeFailure,
    OutputWriteFailure,
    SourceNotFound,
    UnsupportedPixelFormat,
)

"""
Image I/O at the codec boundary.

Everything past load_image_rgba sees a single representation: a (H, W, 4)
uint8 array in RGBA order.
"""


def to_canonical_rgba(im: Image.Image) -> U8RGBA:
    """Convert an 8-bit-per-channel Pillow image to a writable (H,W,4) uint8 array."""
    if im.mode not in EIGHT_BIT_MODES:
        raise UnsupportedPixelFormat(
            f"unsupported pixel format {im.mode!r}; "
            "only 8-bit channel images can be recoloured"
        )
    if im.mode != "RGBA":
        try:
            im = im.convert("RGBA")
        except ValueError as e:
            raise UnsupportedPixelFormat(
                f"cannot convert pixel format {im.mode!r} to RGBA"
            ) from e
    arr = np.array(im, dtype=np.uint8)
    return assert_u8_rgba(arr)


def load_image_rgba(path: Path) -> Tuple[U8RGBA, str]:
    """
    Decode `path` and return (rgba, source_mode).

    Raises SourceNotFound, DecodeFailure or UnsupportedPixelFormat.
    """
    path = Path(path)
    if not path.is_file():
        raise SourceNotFound(f"not found: {path}")
    try:
        with Image.open(path) as im:
            im.load()
            return to_canonical_rgba(im), im.mode
    except UnidentifiedImageError as e:
        raise DecodeFailure(f"cannot identify image file {path}") from e
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        raise DecodeFailure(f"failed to decode {path}: {e}") from e


def save_image_rgba(path: Path, rgba: U8RGBA) -> Path:
    """Write an RGBA grid; the format follows the file extension."""
    path = Path(path)
    try:
        Image.fromarray(assert_u8_rgba(rgba)).save(path)
    except (OSError, ValueError, KeyError) as e:
        raise OutputWriteFailure(f"failed to write {path}: {e}") from e
    return path


__all__ = [
    "to_canonical_rgba",
    "load_image_rgba",
    "save_image_rgba",
]
