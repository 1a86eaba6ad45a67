# recolour/output_writer.py
from __future__ import annotations

"""
Output writer: asks for a destination file name and saves the grid there.
"""

from pathlib import Path
from typing import Optional, TextIO

from .constants import DEFAULT_OUTPUT_NAME, OUTPUT_PROMPT
from .core_types import U8RGBA
from .image_io import save_image_rgba
from .utils import log, read_response


def prompt_output_path(
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    default: str = DEFAULT_OUTPUT_NAME,
) -> Path:
    """Prompt for a file name; blank input picks `default`."""
    log(OUTPUT_PROMPT.format(default=default), stream=stdout)
    name = read_response(stdin).strip()
    return Path(name or default)


def write_output(path: Path, rgba: U8RGBA) -> Path:
    """Serialise the grid to `path`. Raises OutputWriteFailure on any failure."""
    return save_image_rgba(path, rgba)


__all__ = ["prompt_output_path", "write_output"]
