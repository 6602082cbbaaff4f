"""
Compiler Driver

Orchestrates pattern compilation:
1. Parsing (text -> AST)
2. Validation (splat placement, duplicate names)
3. Lowering (AST -> Matcher)
"""

import logging
from functools import lru_cache
from typing import Any, List, Optional

from ..frontend.parser import Parser
from ..matchers.bindings import BindingMap
from ..matchers.nodes import Matcher
from ..passes.base import CompileContext, PassManager
from ..passes.matcher_lowering import MatcherLoweringPass
from ..passes.pattern_validation import PatternValidationPass
from ..shared.errors import NoMatchError, PatternSourceError, PatternValidationError
from ..shared.nodes import ASTNode
from ..shared.source_location import Interval
from ..utils.config import DEFAULT_SOURCE_NAME, PATTERN_CACHE_SIZE

logger = logging.getLogger(__name__)


class CompiledPattern:
    """
    A compiled pattern: source text plus its immutable matcher tree.

    Safe to share and evaluate concurrently; every call builds its own
    binding map.
    """
    __slots__ = ('source', 'matcher', 'names', 'ast')

    def __init__(self, source: str, matcher: Matcher, names: List[str], ast: Optional[ASTNode] = None):
        self.source = source
        self.matcher = matcher
        self.names = tuple(names)
        self.ast = ast

    def defined_at(self, candidate: Any) -> bool:
        return self.matcher.defined_at(candidate)

    def bindings(self, candidate: Any) -> BindingMap:
        """Captured values; raises NoMatchError if the candidate does not match"""
        if not self.matcher.defined_at(candidate):
            raise NoMatchError(
                f"pattern `{self.source}` does not match {candidate!r}",
                value=candidate,
                location=self._root_location(),
            )
        return self.matcher.bindings(candidate)

    def match(self, candidate: Any) -> Optional[BindingMap]:
        """Binding map on success, None on no match"""
        if not self.matcher.defined_at(candidate):
            return None
        return self.matcher.bindings(candidate)

    def show_position(self) -> str:
        location = self._root_location()
        return location.show_position() if location is not None else self.source

    def _root_location(self) -> Optional[Interval]:
        node = self.ast if self.ast is not None else self.matcher.node
        return node.location if node is not None else None

    def __eq__(self, other):
        if not isinstance(other, CompiledPattern):
            return NotImplemented
        return self.source == other.source and self.matcher == other.matcher

    def __hash__(self):
        return hash((self.source, self.matcher))

    def __repr__(self) -> str:
        return f"CompiledPattern({self.source!r})"


class CompilationResult:
    """Compilation result"""
    def __init__(
        self,
        pattern: Optional[CompiledPattern] = None,
        ctx: Optional[CompileContext] = None,
        error: Optional[PatternSourceError] = None,
        success: bool = False,
    ):
        self.pattern = pattern
        self.ctx = ctx
        self.error = error
        self.success = success

    @property
    def reporter(self):
        return self.ctx.reporter if self.ctx else None

    def has_errors(self) -> bool:
        if self.ctx and self.ctx.reporter.has_errors():
            return True
        return not self.success

    def get_errors(self) -> list:
        if self.ctx and self.ctx.reporter.has_errors():
            return [self.ctx.reporter.format_all_errors(color=False)]
        return []

    def unwrap(self) -> CompiledPattern:
        """The compiled pattern, or raise the first diagnostic as an exception"""
        if self.success and self.pattern is not None:
            return self.pattern
        if self.error is not None:
            raise self.error
        raise PatternValidationError("pattern compilation failed")


class CompilerDriver:
    """
    Compiler driver.

    - Stateless between compilations: fresh context and pass instances per call
    - Parser (Lark tables) is shared
    """

    def __init__(self):
        self.pass_manager = PassManager()
        self.parser = Parser()
        self._register_passes()

    def _register_passes(self) -> None:
        """
        Pass order:
        1. PatternValidationPass
        2. MatcherLoweringPass
        """
        self.pass_manager.register_pass(PatternValidationPass)
        self.pass_manager.register_pass(MatcherLoweringPass)

    def compile(self, source: str, source_name: str = DEFAULT_SOURCE_NAME) -> CompilationResult:
        """Compile pattern text; diagnostics are collected, not raised"""
        ctx = CompileContext(source, source_name)

        try:
            ast = self.parser.parse(source, source_name)
        except PatternSourceError as e:
            ctx.reporter.report_exception(e)
            return CompilationResult(ctx=ctx, error=e, success=False)

        matcher = self.pass_manager.run_all(ast, ctx)
        if matcher is None or ctx.reporter.has_errors():
            first = ctx.reporter.errors[0]
            error = PatternValidationError(
                first.message,
                location=first.location,
                error_code=first.code or "E0100",
                source_name=source_name,
                help=first.help,
                note=first.note,
                label=first.label,
            )
            return CompilationResult(ctx=ctx, error=error, success=False)

        names = ctx.get_analysis(PatternValidationPass)
        return CompilationResult(
            pattern=CompiledPattern(source, matcher, names, ast=ast),
            ctx=ctx,
            success=True,
        )


_default_driver: Optional[CompilerDriver] = None


def _driver() -> CompilerDriver:
    global _default_driver
    if _default_driver is None:
        _default_driver = CompilerDriver()
    return _default_driver


@lru_cache(maxsize=PATTERN_CACHE_SIZE)
def compile_pattern(source: str) -> CompiledPattern:
    """
    Compile pattern text, raising PatternSyntaxError / PatternValidationError.

    Results are cached by text; compiled patterns are immutable, so the
    cached object is shared by every caller.
    """
    logger.debug(f"Compiling pattern {source!r} (cache miss)")
    return _driver().compile(source).unwrap()
