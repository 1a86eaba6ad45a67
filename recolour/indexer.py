# recolour/indexer.py
from __future__ import annotations

"""
Pixel indexer.

Groups the visible pixels of an RGBA grid by exact colour. Groups come back
ordered by the first row-major position at which their colour appears, and
each group's locations keep row-major scan order. Pixels with alpha == 0 are
left out entirely.
"""

from typing import List, Tuple

import numpy as np

from .core_types import ColourGroup, U8RGBA, assert_u8_rgba


def _visible_colour_keys(rgba: U8RGBA) -> Tuple[np.ndarray, np.ndarray]:
    """
    Flat indices of visible pixels (row-major) and their packed RGBA keys.

    Returns:
      flat_idx: int64 [Nvis]
      keys: uint32 [Nvis], r<<24 | g<<16 | b<<8 | a
    """
    flat = rgba.reshape(-1, 4)
    flat_idx = np.flatnonzero(flat[:, 3] != 0).astype(np.int64, copy=False)
    px = flat[flat_idx].astype(np.uint32)
    keys = (px[:, 0] << 24) | (px[:, 1] << 16) | (px[:, 2] << 8) | px[:, 3]
    return flat_idx, keys


def index_colour_groups(rgba: U8RGBA) -> List[ColourGroup]:
    """
    Build one ColourGroup per distinct visible RGBA value.

    The input is only read. Location arrays are fresh copies, so later writes
    to the grid never change group membership.
    """
    rgba = assert_u8_rgba(rgba)
    width = rgba.shape[1]
    flat_idx, keys = _visible_colour_keys(rgba)
    if flat_idx.size == 0:
        return []

    uniques, first_pos, inverse, counts = np.unique(
        keys, return_index=True, return_inverse=True, return_counts=True
    )
    inverse = inverse.reshape(-1)

    # stable sort keeps scan order inside each colour
    by_group = np.argsort(inverse, kind="stable")
    starts = np.concatenate(([0], np.cumsum(counts)[:-1]))

    groups: List[ColourGroup] = []
    for u in np.argsort(first_pos, kind="stable").tolist():
        members = flat_idx[by_group[starts[u] : starts[u] + counts[u]]]
        locations = np.stack([members % width, members // width], axis=1).astype(
            np.int64
        )
        key = int(uniques[u])
        colour = (
            (key >> 24) & 0xFF,
            (key >> 16) & 0xFF,
            (key >> 8) & 0xFF,
            key & 0xFF,
        )
        groups.append(ColourGroup(colour=colour, locations=locations))
    return groups


def summarise_groups(groups: List[ColourGroup]) -> Tuple[int, int]:
    """Return (distinct colours, visible pixels) for a list of groups."""
    return len(groups), sum(len(g) for g in groups)


__all__ = ["index_colour_groups", "summarise_groups"]
