"""
AST -> Matcher Lowering Pass

Compiles a validated pattern AST into a matcher tree.

Array patterns lower to a right-leaning chain of ArrayListMatcher nodes, one
per element, each owning the subscript of its element:

    [a, 1, *rest]

    ArrayListMatcher(index=0, head=IdentifierMatcher(a),
      tail=ArrayListMatcher(index=1, head=LiteralMatcher(1),
        tail=ArrayListMatcher(index=2, splat=True, head=IdentifierMatcher(rest),
          tail=EmptyListMatcher(3))))

A chain without a splat ends in ArrayHeadMatcher (fixed arity) or, for a
single element, EmptyListMatcher(1).
"""

import logging

from ..matchers.nodes import (
    AnonymousSplatMatcher, ArrayHeadMatcher, ArrayListMatcher, EmptyListMatcher,
    IdentifierMatcher, LiteralMatcher, Matcher,
)
from ..shared import (
    AnonymousArraySplat, ArrayHead, ArrayLiteral, ArraySplat, ArrayTail,
    ArrayTailSplat, ArrayValueList, ASTNode, ASTVisitor, CasematchImplementationError,
    FloatLiteral, Identifier, IntegerLiteral, StringLiteral, is_splat,
)
from ..utils.config import FIRST_ELEMENT_INDEX
from .base import BasePass, CompileContext
from .pattern_validation import PatternValidationPass

logger = logging.getLogger(__name__)


class MatcherLoweringPass(BasePass):
    """Lowers the AST to a Matcher tree (requires a validated AST)"""
    requires = [PatternValidationPass]

    def run(self, ast: ASTNode, ctx: CompileContext) -> Matcher:
        matcher = ast.accept(MatcherLoweringVisitor())
        logger.debug(f"[matcher_lowering] {ctx.source!r} -> {type(matcher).__name__}")
        ctx.set_analysis(MatcherLoweringPass, matcher)
        return matcher


class MatcherLoweringVisitor(ASTVisitor[Matcher]):
    """Pure recursive transform; holds no state between calls"""

    def visit_array_literal(self, node: ArrayLiteral) -> Matcher:
        if node.value_list is None:
            return EmptyListMatcher(index=FIRST_ELEMENT_INDEX, node=node)
        return node.value_list.accept(self)

    def visit_array_value_list(self, node: ArrayValueList) -> Matcher:
        index = FIRST_ELEMENT_INDEX
        if is_splat(node.head):
            if node.continuation is not None:
                raise CasematchImplementationError("non-trailing splat reached lowering")
            return self._splat_terminal(node.head, index, node)
        if node.continuation is not None:
            tail = node.continuation.accept(self, index + 1)
        else:
            tail = EmptyListMatcher(index=index + 1, node=node)
        return ArrayListMatcher(head=node.head.accept(self), tail=tail, index=index, node=node)

    def visit_array_tail(self, node: ArrayTail, index: int) -> Matcher:
        if is_splat(node.element):
            raise CasematchImplementationError("non-trailing splat reached lowering")
        return ArrayListMatcher(
            head=node.element.accept(self),
            tail=node.continuation.accept(self, index + 1),
            index=index,
            node=node,
        )

    def visit_array_head(self, node: ArrayHead, index: int) -> Matcher:
        return ArrayHeadMatcher(element=node.element.accept(self), index=index, node=node)

    def visit_array_tail_splat(self, node: ArrayTailSplat, index: int) -> Matcher:
        return self._splat_terminal(node.splat, index, node)

    def _splat_terminal(self, splat: ASTNode, index: int, owner: ASTNode) -> Matcher:
        """The splat matches the suffix from `index`; nothing may follow it"""
        return ArrayListMatcher(
            head=splat.accept(self),
            tail=EmptyListMatcher(index=index + 1, node=owner),
            index=index,
            splat=True,
            node=owner,
        )

    def visit_array_splat(self, node: ArraySplat) -> Matcher:
        return node.identifier.accept(self)

    def visit_anonymous_array_splat(self, node: AnonymousArraySplat) -> Matcher:
        return AnonymousSplatMatcher(node=node)

    def visit_integer_literal(self, node: IntegerLiteral) -> Matcher:
        return LiteralMatcher(value=node.value, node=node)

    def visit_float_literal(self, node: FloatLiteral) -> Matcher:
        return LiteralMatcher(value=node.value, node=node)

    def visit_string_literal(self, node: StringLiteral) -> Matcher:
        return LiteralMatcher(value=node.value, node=node)

    def visit_identifier(self, node: Identifier) -> Matcher:
        return IdentifierMatcher(name=node.name, node=node)
