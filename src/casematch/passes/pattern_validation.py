"""
Pattern Validation Pass

Checks the AST before lowering:
- a splat may only close an array pattern (so at most one per array)
- a name may be bound at most once per pattern

The result stored in the context is the list of bound names in source order.
"""

import logging
from typing import Dict, List

from ..shared import (
    AnonymousArraySplat, ArrayHead, ArrayLiteral, ArraySplat, ArrayTail,
    ArrayTailSplat, ArrayValueList, ASTNode, ASTVisitor, FloatLiteral, Identifier,
    IntegerLiteral, StringLiteral, is_splat,
)
from .base import BasePass, CompileContext

logger = logging.getLogger("casematch.passes.pattern_validation")

SPLAT_NOT_LAST = "E0101"
DUPLICATE_BINDING = "E0102"


class PatternValidationPass(BasePass):
    """Reports splat placement and duplicate-name errors; returns the AST unchanged"""
    requires = []

    def run(self, ast: ASTNode, ctx: CompileContext) -> ASTNode:
        visitor = PatternValidationVisitor(ctx)
        ast.accept(visitor)
        ctx.set_analysis(PatternValidationPass, visitor.names)
        if ctx.reporter.has_errors():
            logger.debug(f"Pattern validation failed with {len(ctx.reporter.errors)} error(s)")
        return ast


class PatternValidationVisitor(ASTVisitor[None]):

    def __init__(self, ctx: CompileContext):
        self.ctx = ctx
        self.seen: Dict[str, Identifier] = {}

    def _check_splat_is_last(self, item: ASTNode, has_more: bool) -> None:
        if not (has_more and is_splat(item)):
            return
        self.ctx.reporter.report_error(
            "splat must be the last element of an array pattern",
            item.location,
            code=SPLAT_NOT_LAST,
            label="followed by more elements",
            help=f"move `{item.location.text}` to the end of the pattern",
            note="an array pattern may contain at most one splat",
        )

    def visit_array_literal(self, node: ArrayLiteral) -> None:
        if node.value_list is not None:
            node.value_list.accept(self)

    def visit_array_value_list(self, node: ArrayValueList) -> None:
        self._check_splat_is_last(node.head, node.continuation is not None)
        node.head.accept(self)
        if node.continuation is not None:
            node.continuation.accept(self, 1)

    def visit_array_tail(self, node: ArrayTail, index: int) -> None:
        self._check_splat_is_last(node.element, True)
        node.element.accept(self)
        node.continuation.accept(self, index + 1)

    def visit_array_head(self, node: ArrayHead, index: int) -> None:
        node.element.accept(self)

    def visit_array_tail_splat(self, node: ArrayTailSplat, index: int) -> None:
        node.splat.accept(self)

    def visit_array_splat(self, node: ArraySplat) -> None:
        node.identifier.accept(self)

    def visit_anonymous_array_splat(self, node: AnonymousArraySplat) -> None:
        pass

    def visit_integer_literal(self, node: IntegerLiteral) -> None:
        pass

    def visit_float_literal(self, node: FloatLiteral) -> None:
        pass

    def visit_string_literal(self, node: StringLiteral) -> None:
        pass

    def visit_identifier(self, node: Identifier) -> None:
        first = self.seen.get(node.name)
        if first is None:
            self.seen[node.name] = node
            return
        self.ctx.reporter.report_error(
            f"identifier `{node.name}` is bound more than once in the same pattern",
            node.location,
            code=DUPLICATE_BINDING,
            label="bound again here",
            note=f"first bound at {first.location}",
            help="use a different name for each captured value",
        )

    @property
    def names(self) -> List[str]:
        return list(self.seen)
