"""
Pattern dispatcher.

Tries patterns in declaration order against a value and runs the branch of
the first one that matches, passing the captured names as keyword
arguments:

    m = CaseMatcher()

    @m.case("[]")
    def empty():
        return 0

    @m.case("[head, *tail]")
    def cons(head, tail):
        return head + m(tail)

    m([1, 2, 3])  # 6
"""

import logging
from typing import Any, Callable, List, Optional, Tuple, Union

from ..compiler.driver import CompiledPattern, compile_pattern
from ..matchers.bindings import BindingMap
from ..shared.errors import MatchError
from .partial_function import PartialFunction

logger = logging.getLogger(__name__)

Branch = Callable[..., Any]
Guard = Callable[..., bool]
PatternLike = Union[str, CompiledPattern]


class Case:
    """One pattern, an optional guard over its bindings, and the branch to run"""
    __slots__ = ('pattern', 'branch', 'guard')

    def __init__(self, pattern: CompiledPattern, branch: Branch, guard: Optional[Guard] = None):
        self.pattern = pattern
        self.branch = branch
        self.guard = guard

    def select(self, value: Any) -> Optional[BindingMap]:
        """Bindings if this case applies to value, else None"""
        bindings = self.pattern.match(value)
        if bindings is None:
            return None
        if self.guard is not None and not self.guard(**bindings):
            return None
        return bindings

    def __repr__(self) -> str:
        return f"Case({self.pattern.source!r})"


class CaseMatcher:
    """Ordered set of cases with an optional fallback"""

    def __init__(self, *cases: Tuple[PatternLike, Branch]):
        self.cases: List[Case] = []
        self.fallback: Optional[Callable[[Any], Any]] = None
        for pattern, branch in cases:
            self.case(pattern, branch)

    def case(self, pattern: PatternLike, branch: Optional[Branch] = None, guard: Optional[Guard] = None):
        """Add a case. Without `branch`, returns a decorator."""
        compiled = compile_pattern(pattern) if isinstance(pattern, str) else pattern

        def register(fn: Branch) -> Branch:
            self.cases.append(Case(compiled, fn, guard))
            return fn

        if branch is None:
            return register
        register(branch)
        return self

    def else_(self, fallback: Callable[[Any], Any]):
        """Run fallback(value) when no case matches"""
        self.fallback = fallback
        return fallback

    def defined_at(self, value: Any) -> bool:
        if self.fallback is not None:
            return True
        return any(case.select(value) is not None for case in self.cases)

    def __call__(self, value: Any) -> Any:
        for case in self.cases:
            bindings = case.select(value)
            if bindings is not None:
                logger.debug("%r selected for %r", case, value)
                return case.branch(**bindings)
        if self.fallback is not None:
            return self.fallback(value)
        raise self._no_match(value)

    def _no_match(self, value: Any) -> MatchError:
        location = None
        if self.cases:
            last = self.cases[-1].pattern
            location = last.ast.location if last.ast is not None else None
        return MatchError(f"no pattern matched {value!r}", value=value, location=location)

    def to_partial_function(self) -> PartialFunction:
        return PartialFunction(self.defined_at, self)


def matcher(*cases: Tuple[PatternLike, Branch]) -> CaseMatcher:
    return CaseMatcher(*cases)


def match(value: Any, *cases: Tuple[PatternLike, Branch]) -> Any:
    """One-shot dispatch: match(value, ("[]", lambda: 0), ("[x, *_]", lambda x: x))"""
    return CaseMatcher(*cases)(value)
