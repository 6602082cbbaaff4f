"""
Shared components: source intervals, diagnostics and the pattern AST.
"""

from .source_location import Interval
from .errors import (
    Error, ErrorReporter, CasematchError, PatternSourceError, PatternSyntaxError,
    PatternValidationError, MatchError, NoMatchError, BindingConflictError,
    CasematchImplementationError,
)
from .nodes import (
    ASTNode, NodeType,
    ArrayLiteral, ArrayValueList, ArrayHead, ArrayTail, ArrayTailSplat,
    ArraySplat, AnonymousArraySplat,
    NumberLiteral, IntegerLiteral, FloatLiteral, StringLiteral, Identifier,
    is_splat,
)
from .ast_visitor import ASTVisitor
