# recolour/utils.py
from __future__ import annotations

"""
Shared utilities for recolour.

Includes duration formatting, key/value formatting for summaries, and tidy
print-based logging. Every logging helper takes an optional stream so the
interactive session can run against in-memory streams.
"""

import sys
from typing import Any, Iterable, List, Optional, TextIO, Tuple

from .errors import InputStreamFailure


#  Time formatting


def format_total_duration_compact(seconds: float) -> str:
    """Compact total duration: 'Mm Ss', 'Ss.s', or 'ms'."""
    if seconds >= 60.0:
        minutes = int(seconds // 60)
        rem = int(round(seconds - 60 * minutes))
        return f"{minutes}m {rem}s"
    if seconds >= 1.0:
        return f"{seconds:.1f}s"
    return f"{seconds * 1000.0:.1f}ms"


# Pretty formatting


def format_bool_on_off(value: Any) -> str:
    """Pretty boolean: 'on'/'off' for bools; str(value) otherwise."""
    if isinstance(value, bool):
        return "on" if value else "off"
    return str(value)


def format_number_compact(value: Any) -> str:
    """Pretty number: 1,234 style for ints; compact for floats; passthrough otherwise."""
    if isinstance(value, int):
        return f"{value:,}"
    if isinstance(value, float):
        return f"{value:.3f}".rstrip("0").rstrip(".")
    return str(value)


def key_value_pairs_to_string(
    pairs: Iterable[Tuple[str, Any]], sep: str = "  ", eq: str = ": "
) -> str:
    """Format (name, value) pairs as 'Name: value' blocks separated by sep."""
    out: List[str] = []
    for name, value in pairs:
        display = (
            format_bool_on_off(value)
            if isinstance(value, bool)
            else format_number_compact(value)
        )
        out.append(f"{name}{eq}{display}")
    return sep.join(out)


#  Interactive input


def read_response(stream: Optional[TextIO] = None) -> str:
    """
    Read one line of user input without its line terminator.

    End of input or a failing stream raises InputStreamFailure; there is no
    default to fall back on.
    """
    src = stream or sys.stdin
    try:
        line = src.readline()
    except (OSError, ValueError) as e:
        raise InputStreamFailure(f"failed to read input: {e}") from e
    if line == "":
        raise InputStreamFailure("input stream closed before a response was given")
    return line.rstrip("\r\n")


#  CLI logging


def enable_line_buffered_stdout() -> None:
    """
    Enable line-buffered stdout when supported.
    Keeps prompts visible before blocking on input when stdout is a pipe.
    """
    reconfig = getattr(sys.stdout, "reconfigure", None)
    if callable(reconfig):
        try:
            reconfig(line_buffering=True, write_through=True)
        except (OSError, ValueError):
            pass


def print_banner(title: str, stream: Optional[TextIO] = None) -> None:
    """Section banner."""
    print(f"\n=== {title} ===", file=stream or sys.stdout, flush=True)


def log(message: str, stream: Optional[TextIO] = None) -> None:
    """Plain log line."""
    print(message, file=stream or sys.stdout, flush=True)


def debug_log(message: str, stream: Optional[TextIO] = None) -> None:
    """Debug log line."""
    print(f"[debug] {message}", file=stream or sys.stdout, flush=True)


def warn(message: str, stream: Optional[TextIO] = None) -> None:
    """Warning log line."""
    print(f"[warn] {message}", file=stream or sys.stdout, flush=True)


def error(message: str, stream: Optional[TextIO] = None) -> None:
    """Error log line to stderr."""
    print(f"[error] {message}", file=stream or sys.stderr, flush=True)


__all__ = [
    "format_total_duration_compact",
    "format_bool_on_off",
    "format_number_compact",
    "key_value_pairs_to_string",
    "read_response",
    "enable_line_buffered_stdout",
    "print_banner",
    "log",
    "debug_log",
    "warn",
    "error",
]
