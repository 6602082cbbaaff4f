"""
Source Interval

A span of pattern text kept on every AST node for diagnostics.
"""

from dataclasses import dataclass

from ..utils.config import CARET_CHAR, CARET_FILL_CHAR


@dataclass(frozen=True)
class Interval:
    """
    Source interval (span) of a pattern node.

    - start/end are character offsets into source_text (end exclusive)
    - source_text is the whole pattern the node was parsed from
    - Immutable (frozen) for hashability
    """
    start: int
    end: int
    source_text: str

    @property
    def text(self) -> str:
        """The spanned part of the source"""
        return self.source_text[self.start:self.end]

    @property
    def line(self) -> int:
        return self.source_text.count("\n", 0, self.start) + 1

    @property
    def column(self) -> int:
        """1-based column of start"""
        line_start = self.source_text.rfind("\n", 0, self.start) + 1
        return self.start - line_start + 1

    def show_position(self) -> str:
        """
        Two-line caret diagnostic::

            [1, *a, b]
            ~~~~^
        """
        return f"{self.source_text}\n{CARET_FILL_CHAR * self.start}{CARET_CHAR}"

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"
