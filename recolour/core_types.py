# recolour/core_types.py
from __future__ import annotations

"""
Core type aliases and small value objects shared by the recolour engine.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

# Basic aliases

RGBTuple = Tuple[int, int, int]
RGBATuple = Tuple[int, int, int, int]
Coordinate = Tuple[int, int]  # (column, row)
HexStr = str

U8RGBA = NDArray[np.uint8]  # (H, W, 4)
CoordArray = NDArray[np.int64]  # (N, 2) as (x, y)

# Value objects


@dataclass(frozen=True, eq=False)
class ColourGroup:
    """All visible pixels sharing one exact RGBA value, in scan order."""

    colour: RGBATuple
    locations: CoordArray  # shape (N, 2), columns are (x, y)

    def __len__(self) -> int:
        return int(self.locations.shape[0])

    @property
    def rgb(self) -> RGBTuple:
        return (self.colour[0], self.colour[1], self.colour[2])

    @property
    def alpha(self) -> int:
        return self.colour[3]

    def coordinates(self, limit: Optional[int] = None) -> List[Coordinate]:
        """Locations as plain (x, y) int tuples, optionally only the first `limit`."""
        rows = self.locations if limit is None else self.locations[: max(0, limit)]
        return [(int(x), int(y)) for x, y in rows.tolist()]


@dataclass(frozen=True)
class RecolourDecision:
    """Either replace a group's RGB (alpha kept) or leave it alone."""

    replacement: Optional[RGBTuple] = None

    @classmethod
    def keep(cls) -> "RecolourDecision":
        return cls(None)

    @classmethod
    def replace(cls, rgb: RGBTuple) -> "RecolourDecision":
        return cls((int(rgb[0]), int(rgb[1]), int(rgb[2])))

    @property
    def is_keep(self) -> bool:
        return self.replacement is None


# Small helpers


def rgb_to_hex(rgb: RGBTuple) -> HexStr:
    """RGB tuple to lowercase hex string '#rrggbb'."""
    return f"#{rgb[0]:02x}{rgb[1]:02x}{rgb[2]:02x}"


def assert_u8_rgba(image: np.ndarray) -> U8RGBA:
    """Validate a uint8 (H,W,4) image and return it typed as U8RGBA."""
    if image.dtype != np.uint8 or image.ndim != 3 or image.shape[-1] != 4:
        raise TypeError("expected uint8 (H,W,4) image")
    return image  # type: ignore[return-value]


__all__ = [
    # aliases / types
    "RGBTuple",
    "RGBATuple",
    "Coordinate",
    "HexStr",
    "U8RGBA",
    "CoordArray",
    # value objects
    "ColourGroup",
    "RecolourDecision",
    # helpers
    "rgb_to_hex",
    "assert_u8_rgba",
]
