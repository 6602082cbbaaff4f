"""
Parser

Pattern text -> AST, using a Lark LALR parser built once per process.
"""

import logging
import threading
from pathlib import Path
from typing import Iterable, Optional

from lark import Lark
from lark.exceptions import UnexpectedCharacters, UnexpectedInput, UnexpectedToken, VisitError

from ..shared import ASTNode, Interval, PatternSourceError, PatternSyntaxError
from ..utils.config import (
    DEFAULT_PARSER_CACHE_FILE, DEFAULT_SOURCE_NAME, GRAMMAR_FILE_NAME, GRAMMAR_START_RULE,
)
from .transformers.base import PatternTransformer

logger = logging.getLogger("casematch.frontend.parser")

_END_TOKEN = "$END"


class Parser:
    """
    Pattern parser.

    - Takes pattern text, returns AST
    - Preserves source intervals on every node
    - Converts Lark errors into PatternSyntaxError with a caret diagnostic
    """

    _lark: Optional[Lark] = None
    _lark_lock = threading.Lock()

    def __init__(self, cache_file: str = DEFAULT_PARSER_CACHE_FILE):
        self.parser = self._shared_lark(cache_file)

    @classmethod
    def _shared_lark(cls, cache_file: str) -> Lark:
        with cls._lark_lock:
            if cls._lark is None:
                grammar_path = Path(__file__).parent / GRAMMAR_FILE_NAME
                logger.debug("Building pattern parser from %s", grammar_path)
                cls._lark = Lark.open(
                    str(grammar_path),
                    start=GRAMMAR_START_RULE,
                    parser='lalr',              # Required for caching
                    cache=cache_file,
                    propagate_positions=True,   # Intervals for diagnostics
                    maybe_placeholders=False,
                )
            return cls._lark

    def parse(self, source: str, source_name: str = DEFAULT_SOURCE_NAME) -> ASTNode:
        """Parse pattern text to its AST root node"""
        try:
            tree = self.parser.parse(source)
        except UnexpectedInput as e:
            raise self._syntax_error(e, source, source_name) from e

        try:
            return PatternTransformer(source).transform(tree)
        except VisitError as e:
            if isinstance(e.orig_exc, PatternSourceError):
                raise e.orig_exc from e
            if isinstance(e.orig_exc, (ValueError, SyntaxError)):
                location = self._meta_location(e, source)
                raise PatternSyntaxError(
                    f"invalid literal: {e.orig_exc}",
                    location=location,
                    source_name=source_name,
                ) from e
            raise

    @staticmethod
    def _meta_location(e: VisitError, source: str) -> Optional[Interval]:
        meta = getattr(e.obj, "meta", None)
        if meta is None or getattr(meta, "empty", True):
            return None
        return Interval(start=meta.start_pos, end=meta.end_pos, source_text=source)

    def _syntax_error(self, e: UnexpectedInput, source: str, source_name: str) -> PatternSyntaxError:
        """Convert a Lark parse error to PatternSyntaxError"""
        pos = getattr(e, "pos_in_stream", None)
        expected: Iterable[str] = ()
        if isinstance(e, UnexpectedToken):
            expected = e.expected
            if e.token.type == _END_TOKEN:
                pos = len(source)
                message = "unexpected end of pattern"
            else:
                message = f"unexpected token `{e.token}`"
        elif isinstance(e, UnexpectedCharacters):
            expected = e.allowed or ()
            message = f"unexpected character `{source[pos]}`" if pos is not None and pos < len(source) else "unexpected character"
        else:
            message = "invalid pattern"
        if pos is None or pos < 0:
            pos = len(source)

        note = None
        readable = sorted(self._describe_terminal(name) for name in expected)
        if readable:
            note = "expected one of: " + ", ".join(readable)
        logger.debug("Syntax error in %r at %d: %s", source, pos, message)
        return PatternSyntaxError(
            message,
            location=Interval(start=pos, end=pos + 1, source_text=source),
            error_code="E0001",
            source_name=source_name,
            note=note,
        )

    def _describe_terminal(self, name: str) -> str:
        if name == _END_TOKEN:
            return "end of pattern"
        try:
            terminal = self.parser.get_terminal(name)
        except KeyError:
            return name
        if terminal.pattern.type == "str":
            return f"`{terminal.pattern.value}`"
        return name.lower()
