"""
Matchers: the compiled, executable form of a pattern
"""

from .bindings import BindingMap, merge_bindings
from .nodes import (
    Matcher, IdentifierMatcher, LiteralMatcher, EmptyListMatcher,
    ArrayListMatcher, ArrayHeadMatcher, AnonymousSplatMatcher,
)

__all__ = [
    "BindingMap", "merge_bindings",
    "Matcher", "IdentifierMatcher", "LiteralMatcher", "EmptyListMatcher",
    "ArrayListMatcher", "ArrayHeadMatcher", "AnonymousSplatMatcher",
]
