"""
Base Pass System

Passes run over the pattern AST in dependency order. Diagnostics go to the
context's reporter; a pass never mutates the AST it is given.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Type

from ..shared.errors import ErrorReporter
from ..utils.config import DEFAULT_SOURCE_NAME

logger = logging.getLogger(__name__)


class CompileContext:
    """
    Compilation context - single source of truth for one pattern compilation.

    - Source text and display name
    - Error reporter shared by all passes
    - Analysis results stored here (not in passes)
    """

    def __init__(self, source: str, source_name: str = DEFAULT_SOURCE_NAME):
        self.source = source
        self.source_name = source_name
        self.reporter: ErrorReporter = ErrorReporter(source_name)
        self._analysis_results: Dict[Type['BasePass'], Any] = {}

    def get_analysis(self, pass_class: Type['BasePass']) -> Any:
        """Get analysis results from a pass"""
        if pass_class not in self._analysis_results:
            raise RuntimeError(f"Analysis {pass_class.__name__} not available")
        return self._analysis_results[pass_class]

    def set_analysis(self, pass_class: Type['BasePass'], results: Any) -> None:
        self._analysis_results[pass_class] = results


class BasePass(ABC):
    """
    Base class for all passes.

    - Explicit dependencies via `requires`
    - Results stored in CompileContext (not in the pass)
    """
    requires: List[Type['BasePass']] = []

    @abstractmethod
    def run(self, ast: Any, ctx: CompileContext) -> Any:
        raise NotImplementedError


class PassManager:
    """
    Pass manager with dependency resolution.

    - Passes run in dependency order (topological sort)
    - A single CompileContext is shared across all passes
    - Stops at the first pass that reports errors
    """

    def __init__(self):
        self.passes: List[Type[BasePass]] = []
        self._dependency_graph: Dict[Type[BasePass], set] = {}

    def register_pass(self, pass_class: Type[BasePass]) -> None:
        self.passes.append(pass_class)
        self._dependency_graph[pass_class] = set(pass_class.requires)

    def run_all(self, ast: Any, ctx: CompileContext) -> Any:
        """Run all passes in dependency order; each pass receives the previous pass's output"""
        result = ast
        for pass_class in self._topological_sort():
            logger.debug("Running %s on %r", pass_class.__name__, ctx.source)
            result = pass_class().run(result, ctx)
            if ctx.reporter.has_errors():
                logger.debug("%s reported %d error(s)", pass_class.__name__, len(ctx.reporter.errors))
                return None
        return result

    def _topological_sort(self) -> List[Type[BasePass]]:
        """Topological sort of passes by dependencies"""
        in_degree = {p: len(self._dependency_graph[p]) for p in self.passes}
        queue = [p for p, degree in in_degree.items() if degree == 0]
        result = []

        while queue:
            pass_class = queue.pop(0)
            result.append(pass_class)

            for other_pass in self.passes:
                if pass_class in self._dependency_graph[other_pass]:
                    in_degree[other_pass] -= 1
                    if in_degree[other_pass] == 0:
                        queue.append(other_pass)

        if len(result) != len(self.passes):
            raise RuntimeError("Circular dependency detected in passes")

        return result
