"""
casematch AST Transformer
Converts the Lark parse tree of a pattern into AST nodes
"""

import logging
from typing import Optional, Union

from lark import Transformer, v_args
from lark.lexer import Token
from typing_extensions import TypeAlias

from ...shared import (
    AnonymousArraySplat, ArrayHead, ArrayLiteral, ArraySplat, ArrayTail,
    ArrayTailSplat, ArrayValueList, ASTNode, Identifier, Interval, StringLiteral,
    is_splat,
)
from ...utils.config import ANONYMOUS_SPLAT_NAME
from .literals import LiteralParser

# Lark Meta object carries start_pos/end_pos when propagate_positions is on
LarkMeta: TypeAlias = object
Continuation: TypeAlias = Union[ArrayTail, ArrayHead, ArrayTailSplat]

logger: logging.Logger = logging.getLogger(__name__)


@v_args(inline=True, meta=True)
class PatternTransformer(Transformer):
    """
    Pattern AST Transformer

    One instance per parse: it holds the source text every Interval refers to.
    Anonymous tokens ("[", "]", ",", "*") are filtered by Lark before they
    reach these methods.
    """

    def __init__(self, source_text: str) -> None:
        super().__init__()
        self.source_text = source_text

    def _extract_location(self, meta: LarkMeta) -> Interval:
        """Extract location from Lark meta object"""
        if meta is None or getattr(meta, 'empty', True):
            return Interval(start=0, end=0, source_text=self.source_text)
        return Interval(start=meta.start_pos, end=meta.end_pos, source_text=self.source_text)

    def _token_location(self, token: Token) -> Interval:
        return Interval(start=token.start_pos, end=token.end_pos, source_text=self.source_text)

    # =========================================================================
    # ENTRY
    # =========================================================================

    def start(self, meta: LarkMeta, pattern: ASTNode) -> ASTNode:
        return pattern

    # =========================================================================
    # ARRAYS
    # =========================================================================

    def array_literal(self, meta: LarkMeta, value_list: Optional[ArrayValueList] = None) -> ArrayLiteral:
        """Grammar: "[" array_value_list? "]" - brackets filtered"""
        return ArrayLiteral(value_list=value_list, location=self._extract_location(meta))

    def array_value_list(self, meta: LarkMeta, head: ASTNode,
                         continuation: Optional[Continuation] = None) -> ArrayValueList:
        return ArrayValueList(head=head, continuation=continuation, location=self._extract_location(meta))

    def array_tail(self, meta: LarkMeta, item: ASTNode, continuation: Continuation) -> ArrayTail:
        """`, item` with more items after it"""
        return ArrayTail(element=item, continuation=continuation, location=self._extract_location(meta))

    def array_end(self, meta: LarkMeta, item: ASTNode) -> Union[ArrayHead, ArrayTailSplat]:
        """Last item of a non-empty array: a splat or a fixed-arity element"""
        location = self._extract_location(meta)
        if is_splat(item):
            return ArrayTailSplat(splat=item, location=location)
        return ArrayHead(element=item, location=location)

    def splat(self, meta: LarkMeta, name: Token) -> Union[ArraySplat, AnonymousArraySplat]:
        """Grammar: "*" NAME - `*_` is the anonymous splat"""
        location = self._extract_location(meta)
        if str(name) == ANONYMOUS_SPLAT_NAME:
            return AnonymousArraySplat(location=location)
        identifier = Identifier(name=str(name), location=self._token_location(name))
        return ArraySplat(identifier=identifier, location=location)

    # =========================================================================
    # SCALARS
    # =========================================================================

    def integer_literal(self, meta: LarkMeta, token: Token):
        return LiteralParser.parse_number(str(token), self._extract_location(meta))

    def float_literal(self, meta: LarkMeta, token: Token):
        return LiteralParser.parse_number(str(token), self._extract_location(meta))

    def string_literal(self, meta: LarkMeta, token: Token) -> StringLiteral:
        return LiteralParser.parse_string(str(token), self._extract_location(meta))

    def identifier(self, meta: LarkMeta, name: Token) -> Identifier:
        return Identifier(name=str(name), location=self._extract_location(meta))
