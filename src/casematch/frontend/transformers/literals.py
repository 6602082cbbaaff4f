"""
Literal Parser
Turns number and string tokens into tagged literal nodes
"""

import re
from typing import Union

from ...shared import FloatLiteral, IntegerLiteral, Interval, StringLiteral
from ...utils.config import DECIMAL_SEPARATOR, SCIENTIFIC_NOTATION_INDICATOR, STRING_QUOTE_CHARS

_ESCAPES = {
    "\\": "\\",
    "'": "'",
    '"': '"',
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "0": "\0",
}
_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)


class LiteralParser:
    """Dedicated parser for literal values"""

    @staticmethod
    def parse_number(text: str, location: Interval) -> Union[IntegerLiteral, FloatLiteral]:
        """Integer unless the text has a decimal point or an exponent"""
        lowered = text.lower()
        if DECIMAL_SEPARATOR in lowered or SCIENTIFIC_NOTATION_INDICATOR in lowered:
            return FloatLiteral(value=float(text), location=location)
        return IntegerLiteral(value=int(text), location=location)

    @staticmethod
    def parse_string(quoted: str, location: Interval) -> StringLiteral:
        """Strip the quotes and resolve backslash escapes (\\\\ \\' \\" \\n \\t \\r \\0)"""
        if len(quoted) < 2 or quoted[0] not in STRING_QUOTE_CHARS or quoted[-1] != quoted[0]:
            raise ValueError(f"not a quoted string: {quoted!r}")
        return StringLiteral(value=_ESCAPE_RE.sub(_resolve_escape, quoted[1:-1]), location=location)


def _resolve_escape(match: "re.Match[str]") -> str:
    char = match.group(1)
    if char not in _ESCAPES:
        raise ValueError(f"unknown escape `\\{char}`")
    return _ESCAPES[char]
