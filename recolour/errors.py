# recolour/errors.py
"""
Errors that end a recolouring run.

Every class carries the process exit status the CLI returns for it.
Malformed colour input is not an error: it is treated as "keep".
"""

from __future__ import annotations


class RecolourError(Exception):
    """Base class for unrecoverable recolouring failures."""

    exit_code = 1


class SourceNotFound(RecolourError):
    """The source image path does not exist or is not a file."""

    exit_code = 2


class DecodeFailure(RecolourError):
    """Pillow could not identify or decode the source image."""


class UnsupportedPixelFormat(RecolourError):
    """The decoded image cannot be represented as 8-bit RGBA."""


class InputStreamFailure(RecolourError):
    """Interactive input was closed or could not be read."""


class OutputWriteFailure(RecolourError):
    """The recoloured image could not be written."""


__all__ = [
    "RecolourError",
    "SourceNotFound",
    "DecodeFailure",
    "UnsupportedPixelFormat",
    "InputStreamFailure",
    "OutputWriteFailure",
]
