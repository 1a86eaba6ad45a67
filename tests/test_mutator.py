import numpy as np

from recolour.core_types import RecolourDecision
from recolour.indexer import index_colour_groups
from recolour.mutator import apply_decision


def test_replace_keeps_alpha_and_sets_rgb(mixed_rgba):
    rgba = mixed_rgba.copy()
    groups = index_colour_groups(rgba)
    target = next(g for g in groups if g.colour == (10, 20, 30, 128))

    written = apply_decision(rgba, target, RecolourDecision.replace((1, 2, 3)))

    assert written == len(target)
    for x, y in target.coordinates():
        assert tuple(rgba[y, x].tolist()) == (1, 2, 3, 128)


def test_replace_touches_only_group_locations(mixed_rgba):
    rgba = mixed_rgba.copy()
    target = index_colour_groups(rgba)[0]
    apply_decision(rgba, target, RecolourDecision.replace((7, 7, 7)))

    mask = np.ones(rgba.shape[:2], dtype=bool)
    mask[target.locations[:, 1], target.locations[:, 0]] = False
    assert np.array_equal(rgba[mask], mixed_rgba[mask])


def test_keep_is_a_no_op(mixed_rgba):
    rgba = mixed_rgba.copy()
    for group in index_colour_groups(rgba):
        assert apply_decision(rgba, group, RecolourDecision.keep()) == 0
    assert np.array_equal(rgba, mixed_rgba)


def test_later_groups_unaffected_by_earlier_replacement(quad_rgba):
    rgba = quad_rgba.copy()
    red, green = index_colour_groups(rgba)
    # paint red as green; the green group must still hold only its own pixel
    apply_decision(rgba, red, RecolourDecision.replace((0, 255, 0)))
    apply_decision(rgba, green, RecolourDecision.replace((1, 1, 1)))
    assert tuple(rgba[0, 0].tolist()) == (0, 255, 0, 255)
    assert tuple(rgba[0, 1].tolist()) == (0, 255, 0, 255)
    assert tuple(rgba[1, 0].tolist()) == (1, 1, 1, 255)
    assert tuple(rgba[1, 1].tolist()) == (0, 0, 0, 0)
