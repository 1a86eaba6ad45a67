# recolour/__init__.py
"""
recolour package.

Purpose:
  Interactive, one-colour-at-a-time recolouring of RGBA images. See recolour.cli for the CLI.

Public API:
  index_colour_groups : group visible pixels by exact RGBA value (first-occurrence order).
  parse_hex_colour    : '#rrggbb' / 'rrggbb' -> (r, g, b) or None.
  apply_decision      : write a Keep/Replace decision into the grid in place.
  RecolourSession     : the interactive prompt loop and output step.
  image_io            : Pillow load/save at the 8-bit RGBA boundary.
  core_types          : shared aliases and value objects (ColourGroup, RecolourDecision).
  errors              : RecolourError and its subclasses.
  utils               : shared helpers (input, logging).

Quick start:
  from recolour import RecolourSession
  from recolour.image_io import load_image_rgba
  rgba, _mode = load_image_rgba(path)
  RecolourSession(rgba).run()
"""

__version__ = "0.1.0"

# Re-export namespaces for convenience.
from . import core_types
from . import errors
from . import image_io
from . import utils

from .core_types import ColourGroup, RecolourDecision
from .hex_colour import parse_hex_colour
from .indexer import index_colour_groups
from .mutator import apply_decision
from .session import RecolourSession

__all__ = [
    "__version__",
    "core_types",
    "errors",
    "image_io",
    "utils",
    "ColourGroup",
    "RecolourDecision",
    "parse_hex_colour",
    "index_colour_groups",
    "apply_decision",
    "RecolourSession",
]
