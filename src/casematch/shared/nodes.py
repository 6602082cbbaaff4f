"""
casematch AST (Abstract Syntax Tree) Definitions

One class per pattern construct. Nodes are built once by the transformer
and never modified afterwards; passes read them and produce new structures
(validation diagnostics, matcher trees).

Visitor Pattern Support:
- All AST nodes have accept() methods for polymorphic dispatch
- Array continuation nodes forward the element index they sit at
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Iterator, Optional, TypeVar, Union

from .source_location import Interval

if TYPE_CHECKING:
    from .ast_visitor import ASTVisitor

T = TypeVar('T')


class NodeType(Enum):
    """AST node types"""
    ARRAY_LITERAL = "array_literal"
    ARRAY_VALUE_LIST = "array_value_list"
    ARRAY_HEAD = "array_head"
    ARRAY_TAIL = "array_tail"
    ARRAY_TAIL_SPLAT = "array_tail_splat"
    ARRAY_SPLAT = "array_splat"
    ANONYMOUS_ARRAY_SPLAT = "anonymous_array_splat"
    INTEGER_LITERAL = "integer_literal"
    FLOAT_LITERAL = "float_literal"
    STRING_LITERAL = "string_literal"
    IDENTIFIER = "identifier"


class ASTNode:
    """
    Base class for all AST nodes

    Every node owns its children and the Interval it was parsed from.
    """
    __slots__ = ('node_type', 'location')

    def __init__(self, node_type: NodeType, location: Interval):
        self.node_type = node_type
        self.location = location

    def accept(self, visitor: 'ASTVisitor[T]', *args: Any) -> 'T':
        raise NotImplementedError(f"accept() not implemented for {self.__class__.__name__}")

    def children(self) -> Iterator['ASTNode']:
        return iter(())

    def walk(self) -> Iterator['ASTNode']:
        """Pre-order traversal of this subtree"""
        yield self
        for child in self.children():
            yield from child.walk()

    def show_position(self) -> str:
        return self.location.show_position()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.location.text!r})"


# =====================================================================
# Array patterns
# =====================================================================

class ArrayLiteral(ASTNode):
    """Array pattern: [] or [items...]"""
    __slots__ = ('value_list',)

    def __init__(self, value_list: Optional[ArrayValueList], location: Interval):
        super().__init__(NodeType.ARRAY_LITERAL, location)
        self.value_list = value_list

    @property
    def is_empty(self) -> bool:
        return self.value_list is None

    def children(self) -> Iterator[ASTNode]:
        if self.value_list is not None:
            yield self.value_list

    def accept(self, visitor: 'ASTVisitor[T]', *args: Any) -> 'T':
        return visitor.visit_array_literal(self, *args)


class ArrayValueList(ASTNode):
    """First item of an array pattern plus the continuation after it"""
    __slots__ = ('head', 'continuation')

    def __init__(self, head: Item, continuation: Optional[Continuation], location: Interval):
        super().__init__(NodeType.ARRAY_VALUE_LIST, location)
        self.head = head
        self.continuation = continuation

    def children(self) -> Iterator[ASTNode]:
        yield self.head
        if self.continuation is not None:
            yield self.continuation

    def accept(self, visitor: 'ASTVisitor[T]', *args: Any) -> 'T':
        return visitor.visit_array_value_list(self, *args)


class ArrayTail(ASTNode):
    """`, item` followed by further items"""
    __slots__ = ('element', 'continuation')

    def __init__(self, element: Item, continuation: Continuation, location: Interval):
        super().__init__(NodeType.ARRAY_TAIL, location)
        self.element = element
        self.continuation = continuation

    def children(self) -> Iterator[ASTNode]:
        yield self.element
        yield self.continuation

    def accept(self, visitor: 'ASTVisitor[T]', *args: Any) -> 'T':
        return visitor.visit_array_tail(self, *args)


class ArrayHead(ASTNode):
    """`, element` closing the array (fixed arity terminal)"""
    __slots__ = ('element',)

    def __init__(self, element: Element, location: Interval):
        super().__init__(NodeType.ARRAY_HEAD, location)
        self.element = element

    def children(self) -> Iterator[ASTNode]:
        yield self.element

    def accept(self, visitor: 'ASTVisitor[T]', *args: Any) -> 'T':
        return visitor.visit_array_head(self, *args)


class ArrayTailSplat(ASTNode):
    """`, *rest` closing the array"""
    __slots__ = ('splat',)

    def __init__(self, splat: Splat, location: Interval):
        super().__init__(NodeType.ARRAY_TAIL_SPLAT, location)
        self.splat = splat

    def children(self) -> Iterator[ASTNode]:
        yield self.splat

    def accept(self, visitor: 'ASTVisitor[T]', *args: Any) -> 'T':
        return visitor.visit_array_tail_splat(self, *args)


class ArraySplat(ASTNode):
    """Named splat: *rest (binds the remaining elements)"""
    __slots__ = ('identifier',)

    def __init__(self, identifier: Identifier, location: Interval):
        super().__init__(NodeType.ARRAY_SPLAT, location)
        self.identifier = identifier

    def children(self) -> Iterator[ASTNode]:
        yield self.identifier

    def accept(self, visitor: 'ASTVisitor[T]', *args: Any) -> 'T':
        return visitor.visit_array_splat(self, *args)


class AnonymousArraySplat(ASTNode):
    """Anonymous splat: *_ (matches the remaining elements, binds nothing)"""
    __slots__ = ()

    def __init__(self, location: Interval):
        super().__init__(NodeType.ANONYMOUS_ARRAY_SPLAT, location)

    def accept(self, visitor: 'ASTVisitor[T]', *args: Any) -> 'T':
        return visitor.visit_anonymous_array_splat(self, *args)


# =====================================================================
# Scalars
# =====================================================================

class NumberLiteral(ASTNode):
    """Numeric literal; the value is tagged by subclass (integer or float)"""
    __slots__ = ('value',)

    def __init__(self, node_type: NodeType, value: Union[int, float], location: Interval):
        super().__init__(node_type, location)
        self.value = value


class IntegerLiteral(NumberLiteral):
    """Integer literal: 42, -7"""
    __slots__ = ()

    def __init__(self, value: int, location: Interval):
        super().__init__(NodeType.INTEGER_LITERAL, value, location)

    def accept(self, visitor: 'ASTVisitor[T]', *args: Any) -> 'T':
        return visitor.visit_integer_literal(self, *args)


class FloatLiteral(NumberLiteral):
    """Float literal: 1.5, 2e3"""
    __slots__ = ()

    def __init__(self, value: float, location: Interval):
        super().__init__(NodeType.FLOAT_LITERAL, value, location)

    def accept(self, visitor: 'ASTVisitor[T]', *args: Any) -> 'T':
        return visitor.visit_float_literal(self, *args)


class StringLiteral(ASTNode):
    """String literal: "abc" or 'abc' (value is unquoted)"""
    __slots__ = ('value',)

    def __init__(self, value: str, location: Interval):
        super().__init__(NodeType.STRING_LITERAL, location)
        self.value = value

    def accept(self, visitor: 'ASTVisitor[T]', *args: Any) -> 'T':
        return visitor.visit_string_literal(self, *args)


class Identifier(ASTNode):
    """Identifier: captures whatever sits at its position"""
    __slots__ = ('name',)

    def __init__(self, name: str, location: Interval):
        super().__init__(NodeType.IDENTIFIER, location)
        self.name = name

    def accept(self, visitor: 'ASTVisitor[T]', *args: Any) -> 'T':
        return visitor.visit_identifier(self, *args)


Element = Union[ArrayLiteral, IntegerLiteral, FloatLiteral, StringLiteral, Identifier]
Splat = Union[ArraySplat, AnonymousArraySplat]
Item = Union[Element, Splat]
Continuation = Union[ArrayTail, ArrayHead, ArrayTailSplat]

SPLAT_TYPES = (ArraySplat, AnonymousArraySplat)


def is_splat(node: ASTNode) -> bool:
    return isinstance(node, SPLAT_TYPES)
