#!/usr/bin/env python3
"""
recolour CLI.
Swap the colours of an image one distinct colour at a time.

Usage:
  recolour recolor INPUT [--output-default NAME] [--preview N] [--no-swatch] [--debug]
  recolour deconstruct INPUT
  recolour reconstruct INPUT

Commands:
  recolor     : For each distinct visible colour, show a swatch and sample
                locations, read a replacement hex colour (Enter keeps it),
                then ask for an output file name and write the result.
  deconstruct : Placeholder. Decodes INPUT and exits without writing.
  reconstruct : Placeholder. Decodes INPUT and exits without writing.

Input:
  Any Pillow-readable image with 8 bits per channel. It is converted to RGBA.
  Fully transparent pixels are never offered or changed.

Output:
  Format follows the extension of the chosen file name.
  Defaults to recolor_output.png in the working directory.
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional

from .constants import DEFAULT_OUTPUT_NAME, PREVIEW_LOCATIONS
from .core_types import U8RGBA
from .errors import RecolourError
from .image_io import load_image_rgba
from .indexer import summarise_groups
from .session import RecolourSession
from .swatch import choose_swatch_renderer
from .utils import (
    debug_log,
    enable_line_buffered_stdout,
    error,
    format_total_duration_compact,
    key_value_pairs_to_string,
    log,
    print_banner,
    warn,
)

# CLI args & small helpers


def _non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {text!r}")
    if value < 0:
        raise argparse.ArgumentTypeError("must be >= 0")
    return value


def parse_cli_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse CLI arguments.

    Returns:
      argparse.Namespace with:
        command: "recolor" | "deconstruct" | "reconstruct"
        target: Path to the source image
        output_default: file name used when the output prompt is left blank
        preview: number of sample locations shown per colour
        swatch: bool, draw ANSI colour swatches
        debug: bool for verbose details
    """
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("target", type=Path, help="The source image file path")
    common.add_argument("--debug", action="store_true", help="Verbose details")

    parser = argparse.ArgumentParser(
        prog="recolour",
        description="Interactively swap the colours of an image, one colour at a time.",
    )
    sub = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    p_recolor = sub.add_parser(
        "recolor",
        parents=[common],
        help="Go through the colours in an image and change them to a chosen colour",
    )
    p_recolor.add_argument(
        "--output-default",
        default=DEFAULT_OUTPUT_NAME,
        help="File name used when the output prompt is left blank (default: %(default)s)",
    )
    p_recolor.add_argument(
        "--preview",
        type=_non_negative_int,
        default=PREVIEW_LOCATIONS,
        help="Sample locations shown per colour",
    )
    p_recolor.add_argument(
        "--no-swatch",
        dest="swatch",
        action="store_false",
        help="Do not draw ANSI colour swatches (also off when NO_COLOR is set)",
    )

    sub.add_parser(
        "deconstruct",
        parents=[common],
        help="Deconstruct the image into a json of its pixels (not implemented)",
    )
    sub.add_parser(
        "reconstruct",
        parents=[common],
        help="Reconstruct an image from a json of its pixels (not implemented)",
    )
    return parser.parse_args(argv)


def _load(target: Path, debug: bool) -> U8RGBA:
    rgba, mode = load_image_rgba(target)
    if debug:
        height, width = rgba.shape[:2]
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Image is encoded as", mode),
                    ("Converted", mode != "RGBA"),
                    ("Size", f"{width}x{height}"),
                ]
            )
        )
    return rgba


# Commands


def run_recolor(args: argparse.Namespace) -> None:
    """Load -> index -> prompt per colour -> prompt for output -> save -> report."""
    t_start = time.perf_counter()
    log(f"Recoloring image at path: {args.target}")
    rgba = _load(args.target, args.debug)
    height, width = rgba.shape[:2]

    print_banner(args.target.name)
    session = RecolourSession(
        rgba,
        swatch=choose_swatch_renderer(args.swatch),
        preview_limit=args.preview,
        default_output=args.output_default,
        debug=args.debug,
    )
    n_colours, n_visible = summarise_groups(session.groups)
    log(
        key_value_pairs_to_string(
            [("Colours", n_colours), ("Visible pixels", n_visible)]
        )
    )

    out_path = session.run()

    log(
        f"Wrote {out_path.name} | size={width}x{height} | colours={n_colours} "
        f"| replaced={session.replaced_colours}"
    )
    if args.debug:
        debug_log(f"replaced pixels: {session.replaced_pixels:,}")
    log(f"Total time {format_total_duration_compact(time.perf_counter() - t_start)}")


def run_placeholder(args: argparse.Namespace) -> None:
    """deconstruct / reconstruct: decode the target, report, write nothing."""
    if args.command == "deconstruct":
        log(f"Deconstructing image at path: {args.target}")
    else:
        log(f"Reconstructing image from data at path: {args.target}")
    _load(args.target, args.debug)
    warn(f"{args.command} is not implemented; nothing was written")


# Entry point


def main(argv: Optional[List[str]] = None) -> int:
    """
    CLI entry point.

    Returns the process exit status: 0 on success, the error's exit code on
    the first unrecoverable failure, 130 on Ctrl-C.
    """
    enable_line_buffered_stdout()
    args = parse_cli_args(argv)
    try:
        if args.command == "recolor":
            run_recolor(args)
        else:
            run_placeholder(args)
    except RecolourError as e:
        error(str(e))
        return e.exit_code
    except KeyboardInterrupt:
        error("interrupted")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
