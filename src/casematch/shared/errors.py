"""
Error Reporting

Diagnostics for pattern text, rendered rustc style, plus the exception
hierarchy used by the parser, the compile passes and the dispatcher.
"""

import os
import sys
from dataclasses import dataclass, field
from typing import Any, List, Optional

from ..utils.config import COLOR_ENV_VAR, DEFAULT_SOURCE_NAME
from .source_location import Interval


# ---------------------------------------------------------------------------
# ANSI color helpers (disabled when NO_COLOR is set or not a TTY)
# ---------------------------------------------------------------------------

def _use_color() -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    explicit = os.environ.get(COLOR_ENV_VAR, "").lower()
    if explicit in ("0", "false", "no", "never"):
        return False
    return True

_BOLD   = "\033[1m"
_RED    = "\033[31m"
_BLUE   = "\033[34m"
_CYAN   = "\033[36m"
_RESET  = "\033[0m"

def _style(text: str, *codes: str, color: bool = True) -> str:
    if not color:
        return text
    prefix = "".join(codes)
    return f"{prefix}{text}{_RESET}" if prefix else text


# ---------------------------------------------------------------------------
# Error dataclass
# ---------------------------------------------------------------------------

@dataclass
class Error:
    """A single diagnostic about a pattern."""
    message: str
    location: Optional[Interval]
    code: Optional[str] = None
    help: Optional[str] = None
    note: Optional[str] = None
    label: Optional[str] = None
    source_name: str = DEFAULT_SOURCE_NAME


# ---------------------------------------------------------------------------
# Formatting engine
# ---------------------------------------------------------------------------

def _format_diagnostic(error: Error, color: bool = False) -> str:
    """
    Render a single diagnostic in rustc style.

    Example output (plain, no color)::

        error[E0101]: splat must be the last element of an array pattern
         --> <pattern>:1:5
          |
        1 | [1, *a, b]
          |     ^^ splat is followed by more elements
          |
          = help: move `*a` to the end of the pattern
    """
    out: List[str] = []

    code_str = f"[{error.code}]" if error.code else ""
    out.append(
        _style(f"error{code_str}", _BOLD, _RED, color=color)
        + _style(f": {error.message}", _BOLD, color=color)
    )

    if error.location is None:
        out.append(_style(" --> ", _BOLD, _BLUE, color=color) + "<unknown location>")
        _append_annotations(out, error, 1, color)
        return "\n".join(out)

    loc = error.location
    src_lines = loc.source_text.split("\n")
    line_num = loc.line
    gw = max(len(str(line_num)), 1)

    out.append(
        _style(" " * gw + "--> ", _BOLD, _BLUE, color=color)
        + f"{error.source_name}:{line_num}:{loc.column}"
    )
    out.append(_style(" " * (gw + 1) + "|", _BOLD, _BLUE, color=color))

    idx = line_num - 1
    code_line = src_lines[idx] if 0 <= idx < len(src_lines) else ""
    out.append(_style(str(line_num).rjust(gw) + " | ", _BOLD, _BLUE, color=color) + code_line)

    col_start = loc.column - 1
    span_len = max(1, min(loc.end, loc.start + len(code_line) - col_start) - loc.start)
    carets = " " * col_start + "^" * span_len
    label_suffix = f" {error.label}" if error.label else ""
    out.append(
        _style(" " * (gw + 1) + "| ", _BOLD, _BLUE, color=color)
        + _style(carets + label_suffix, _BOLD, _RED, color=color)
    )

    _append_annotations(out, error, gw, color)
    return "\n".join(out)


def _append_annotations(out: List[str], error: Error, gw: int, color: bool) -> None:
    if not (error.help or error.note):
        return
    out.append(_style(" " * (gw + 1) + "|", _BOLD, _BLUE, color=color))
    pad = " " * (gw + 1)
    if error.help:
        out.append(
            _style(f"{pad}= ", _BOLD, _CYAN, color=color)
            + _style("help: ", _BOLD, color=color)
            + error.help
        )
    if error.note:
        out.append(
            _style(f"{pad}= ", _BOLD, _CYAN, color=color)
            + _style("note: ", _BOLD, color=color)
            + error.note
        )


# ---------------------------------------------------------------------------
# ErrorReporter
# ---------------------------------------------------------------------------

class ErrorReporter:
    """Collects diagnostics for one compilation."""

    def __init__(self, source_name: str = DEFAULT_SOURCE_NAME):
        self.source_name = source_name
        self.errors: List[Error] = []

    def report_error(
        self,
        message: str,
        location: Optional[Interval],
        code: Optional[str] = None,
        help: Optional[str] = None,
        note: Optional[str] = None,
        label: Optional[str] = None,
    ) -> None:
        self.errors.append(Error(
            message=message,
            location=location,
            code=code,
            help=help,
            note=note,
            label=label,
            source_name=self.source_name,
        ))

    def report_exception(self, exc: "PatternSourceError") -> None:
        self.report_error(
            exc.message,
            exc.location,
            code=exc.error_code,
            help=exc.help_text,
            note=exc.note_text,
            label=exc.label_text,
        )

    def format_error(self, error: Error, color: Optional[bool] = None) -> str:
        use_color = color if color is not None else _use_color()
        return _format_diagnostic(error, color=use_color)

    def format_all_errors(self, color: Optional[bool] = None) -> str:
        use_color = color if color is not None else _use_color()
        parts = [self.format_error(e, color=use_color) for e in self.errors]
        count = len(self.errors)
        summary = f"aborting due to {count} previous error{'s' if count != 1 else ''}"
        parts.append(
            _style("error", _BOLD, _RED, color=use_color)
            + _style(f": {summary}", _BOLD, color=use_color)
        )
        return "\n\n".join(parts)

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def print_errors(self) -> None:
        if self.errors:
            print(self.format_all_errors(), file=sys.stderr)


# ============================================================================
# Exception Classes
# ============================================================================

class CasematchError(Exception):
    """Base exception for all casematch errors"""
    def __init__(self, message: str, location: Optional[Interval] = None):
        super().__init__(message)
        self.message = message
        self.location = location

    def show_position(self) -> Optional[str]:
        return self.location.show_position() if self.location else None

    def __str__(self):
        if self.location:
            return f"{self.message}\n{self.location.show_position()}"
        return self.message


class PatternSourceError(CasematchError):
    """
    Error in pattern text with rich rustc-style formatting.

    Use this for any problem with what the user wrote:
    - syntax errors
    - splat placement
    - duplicate binding names
    """
    def __init__(self,
                 message: str,
                 location: Optional[Interval] = None,
                 error_code: str = "E0001",
                 source_name: str = DEFAULT_SOURCE_NAME,
                 help: Optional[str] = None,
                 note: Optional[str] = None,
                 label: Optional[str] = None):
        super().__init__(message, location)
        self.error_code = error_code
        self.source_name = source_name
        self.help_text = help
        self.note_text = note
        self.label_text = label

    def to_error(self) -> Error:
        return Error(
            message=self.message,
            location=self.location,
            code=self.error_code,
            help=self.help_text,
            note=self.note_text,
            label=self.label_text,
            source_name=self.source_name,
        )

    def __str__(self):
        return _format_diagnostic(self.to_error(), color=_use_color())


class PatternSyntaxError(PatternSourceError):
    """Malformed pattern text"""


class PatternValidationError(PatternSourceError):
    """Well-formed pattern that cannot be compiled (splat placement, duplicate names)"""


class MatchError(CasematchError):
    """No pattern (or partial function) is defined at the given value"""
    def __init__(self, message: str, value: Any = None, location: Optional[Interval] = None):
        super().__init__(message, location)
        self.value = value


class NoMatchError(MatchError):
    """Bindings requested for a candidate the pattern does not match"""


class BindingConflictError(CasematchError):
    """Two sub-matches produced the same binding name"""
    def __init__(self, name: str, location: Optional[Interval] = None):
        super().__init__(f"name `{name}` is bound more than once", location)
        self.name = name


class CasematchImplementationError(Exception):
    """
    Error in Python implementation code (not in the user's pattern).

    Never use this for errors in pattern text - use PatternSourceError instead.
    """
    def __init__(self, message: str, error_code: str = "E9999"):
        super().__init__(message)
        self.message = message
        self.error_code = error_code

    def __str__(self):
        return f"[{self.error_code}] {self.message}"
