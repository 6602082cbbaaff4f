"""
AST Visitor Pattern

Abstract base class with one visit_* method per AST node type. Every method
is abstract, so a concrete visitor that forgets a node kind cannot be
instantiated.

Array continuation nodes receive the element index they start at as an
extra positional argument (see nodes.ASTNode.accept).
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from .nodes import (
        AnonymousArraySplat, ArrayHead, ArrayLiteral, ArraySplat, ArrayTail,
        ArrayTailSplat, ArrayValueList, FloatLiteral, Identifier,
        IntegerLiteral, StringLiteral,
    )

T = TypeVar('T')


class ASTVisitor(ABC, Generic[T]):
    """
    Abstract visitor over pattern AST nodes.

    Usage:
        class NameCollector(ASTVisitor[list]):
            def visit_identifier(self, node):
                return [node.name]
            ...

        names = pattern_ast.accept(NameCollector())
    """

    @abstractmethod
    def visit_array_literal(self, node: 'ArrayLiteral') -> T:
        raise NotImplementedError

    @abstractmethod
    def visit_array_value_list(self, node: 'ArrayValueList') -> T:
        raise NotImplementedError

    @abstractmethod
    def visit_array_tail(self, node: 'ArrayTail', index: int) -> T:
        raise NotImplementedError

    @abstractmethod
    def visit_array_head(self, node: 'ArrayHead', index: int) -> T:
        raise NotImplementedError

    @abstractmethod
    def visit_array_tail_splat(self, node: 'ArrayTailSplat', index: int) -> T:
        raise NotImplementedError

    @abstractmethod
    def visit_array_splat(self, node: 'ArraySplat') -> T:
        raise NotImplementedError

    @abstractmethod
    def visit_anonymous_array_splat(self, node: 'AnonymousArraySplat') -> T:
        raise NotImplementedError

    @abstractmethod
    def visit_integer_literal(self, node: 'IntegerLiteral') -> T:
        raise NotImplementedError

    @abstractmethod
    def visit_float_literal(self, node: 'FloatLiteral') -> T:
        raise NotImplementedError

    @abstractmethod
    def visit_string_literal(self, node: 'StringLiteral') -> T:
        raise NotImplementedError

    @abstractmethod
    def visit_identifier(self, node: 'Identifier') -> T:
        raise NotImplementedError
