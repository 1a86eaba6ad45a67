# recolour/mutator.py
from __future__ import annotations

"""
Image mutator: writes one decision into the grid in place.
"""

import numpy as np

from .core_types import ColourGroup, RecolourDecision, U8RGBA


def apply_decision(
    rgba: U8RGBA, group: ColourGroup, decision: RecolourDecision
) -> int:
    """
    Apply `decision` to every location of `group`.

    Replace overwrites R, G and B and leaves alpha as it was. Keep does
    nothing. Only the group's own locations are touched; disjointness is
    the indexer's job. Returns the number of pixels written.
    """
    if decision.is_keep or len(group) == 0:
        return 0
    xs = group.locations[:, 0]
    ys = group.locations[:, 1]
    rgba[ys, xs, :3] = np.asarray(decision.replacement, dtype=np.uint8)
    return len(group)


__all__ = ["apply_decision"]
