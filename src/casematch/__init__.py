"""
casematch: structural pattern matching and extraction for Python values.

    >>> from casematch import compile_pattern
    >>> pattern = compile_pattern("[head, *tail]")
    >>> pattern.defined_at([1, 2, 3])
    True
    >>> pattern.bindings([1, 2, 3])
    {'head': 1, 'tail': [2, 3]}
"""

from .compiler import CompiledPattern, CompilationResult, CompilerDriver, compile_pattern
from .matchers import (
    Matcher, IdentifierMatcher, LiteralMatcher, EmptyListMatcher,
    ArrayListMatcher, ArrayHeadMatcher, AnonymousSplatMatcher, merge_bindings,
)
from .runtime import Case, CaseMatcher, PartialFunction, match, matcher
from .shared import (
    Interval, CasematchError, PatternSourceError, PatternSyntaxError,
    PatternValidationError, MatchError, NoMatchError, BindingConflictError,
)

__version__ = "0.1.0"

__all__ = [
    "compile_pattern", "CompiledPattern", "CompilationResult", "CompilerDriver",
    "Matcher", "IdentifierMatcher", "LiteralMatcher", "EmptyListMatcher",
    "ArrayListMatcher", "ArrayHeadMatcher", "AnonymousSplatMatcher", "merge_bindings",
    "Case", "CaseMatcher", "PartialFunction", "match", "matcher",
    "Interval", "CasematchError", "PatternSourceError", "PatternSyntaxError",
    "PatternValidationError", "MatchError", "NoMatchError", "BindingConflictError",
]
