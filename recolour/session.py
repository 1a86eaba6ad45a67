# recolour/session.py
from __future__ import annotations

"""
Interactive recolour session.

Walks every colour group once, in indexer order:
  preview -> prompt -> read line -> parse -> decide -> mutate
then asks for an output file name and writes the grid.

Groups are frozen when the session is created, so replacements made for one
colour never move pixels into or out of a group visited later.
"""

from pathlib import Path
from typing import List, Literal, Optional, TextIO, Tuple

from .constants import COLOUR_PROMPT, DEFAULT_OUTPUT_NAME, PREVIEW_LOCATIONS
from .core_types import (
    ColourGroup,
    RecolourDecision,
    U8RGBA,
    assert_u8_rgba,
    rgb_to_hex,
)
from .hex_colour import parse_hex_colour
from .indexer import index_colour_groups
from .mutator import apply_decision
from .output_writer import prompt_output_path, write_output
from .swatch import SwatchRenderer, ansi_swatch
from .utils import debug_log, log, read_response, warn

SessionState = Literal["awaiting_input", "deciding", "done"]


def format_preview(
    group: ColourGroup,
    swatch: SwatchRenderer = ansi_swatch,
    limit: int = PREVIEW_LOCATIONS,
) -> str:
    """'Color: #rrggbb <swatch> at locations: [(x, y), ...]...'"""
    sample = group.coordinates(min(limit, len(group)))
    hex_code = rgb_to_hex(group.rgb)
    return f"Color: {hex_code} {swatch(group.rgb)} at locations: {sample}..."


def decide(response: str) -> RecolourDecision:
    """Replace when the response is a hex colour; anything else keeps the colour."""
    rgb = parse_hex_colour(response)
    if rgb is None:
        return RecolourDecision.keep()
    return RecolourDecision.replace(rgb)


class RecolourSession:
    """
    One interactive pass over an RGBA grid.

    The grid is mutated in place and belongs to the session until run()
    returns. Streams default to sys.stdin / sys.stdout.
    """

    def __init__(
        self,
        rgba: U8RGBA,
        *,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        swatch: SwatchRenderer = ansi_swatch,
        preview_limit: int = PREVIEW_LOCATIONS,
        default_output: str = DEFAULT_OUTPUT_NAME,
        debug: bool = False,
    ) -> None:
        self.rgba = assert_u8_rgba(rgba)
        self.stdin = stdin
        self.stdout = stdout
        self.swatch = swatch
        self.preview_limit = max(0, int(preview_limit))
        self.default_output = default_output
        self.debug = debug
        self.groups: List[ColourGroup] = index_colour_groups(self.rgba)
        self.decisions: List[Tuple[ColourGroup, RecolourDecision]] = []
        self.state: SessionState = "done" if not self.groups else "awaiting_input"

    @property
    def replaced_colours(self) -> int:
        return sum(1 for _g, d in self.decisions if not d.is_keep)

    @property
    def replaced_pixels(self) -> int:
        return sum(len(g) for g, d in self.decisions if not d.is_keep)

    def prompt_group(self, group: ColourGroup) -> RecolourDecision:
        """Run one preview/prompt/decide/mutate round for `group`."""
        self.state = "awaiting_input"
        log(format_preview(group, self.swatch, self.preview_limit), stream=self.stdout)
        log(COLOUR_PROMPT, stream=self.stdout)
        response = read_response(self.stdin)

        self.state = "deciding"
        decision = decide(response)
        if decision.is_keep and response.strip():
            warn(
                f"not a hex colour: {response.strip()!r}; "
                f"keeping {rgb_to_hex(group.rgb)}",
                stream=self.stdout,
            )

        written = apply_decision(self.rgba, group, decision)
        self.decisions.append((group, decision))
        if self.debug:
            if decision.is_keep:
                debug_log(
                    f"kept {rgb_to_hex(group.rgb)} ({len(group):,} px)", self.stdout
                )
            else:
                debug_log(
                    f"{rgb_to_hex(group.rgb)} -> {rgb_to_hex(decision.replacement)} "
                    f"({written:,} px)",
                    self.stdout,
                )
        return decision

    def prompt_all(self) -> None:
        """Visit every group in order. Stops at the first unreadable input."""
        for group in self.groups:
            self.prompt_group(group)
        self.state = "done"

    def run(self) -> Path:
        """Prompt for every colour, then for the output name, then write. Returns the path."""
        self.prompt_all()
        out_path = prompt_output_path(self.stdin, self.stdout, self.default_output)
        return write_output(out_path, self.rgba)


__all__ = ["SessionState", "RecolourSession", "format_preview", "decide"]
