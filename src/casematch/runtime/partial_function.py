"""
Partial functions: a function paired with the condition saying where it is defined.
"""

from typing import Any, Callable, Union

from ..compiler.driver import CompiledPattern, compile_pattern
from ..shared.errors import MatchError

Condition = Callable[[Any], bool]


class PartialFunction:
    """
    Function defined only where `condition` holds.

    Calling it outside its domain raises MatchError instead of running
    the function.
    """

    def __init__(self, condition: Condition, function: Callable[[Any], Any]):
        self.condition = condition
        self.function = function

    @classmethod
    def from_pattern(cls, pattern: Union[str, CompiledPattern], branch: Callable[..., Any]) -> 'PartialFunction':
        """Defined where the pattern matches; branch receives the bindings as keyword arguments"""
        compiled = compile_pattern(pattern) if isinstance(pattern, str) else pattern
        return cls(compiled.defined_at, lambda value: branch(**compiled.bindings(value)))

    def defined_at(self, value: Any) -> bool:
        return bool(self.condition(value))

    def __call__(self, value: Any) -> Any:
        if not self.defined_at(value):
            raise MatchError(f"partial function not defined at: {value!r}", value=value)
        return self.function(value)

    def call_or_else(self, value: Any, default: Callable[[Any], Any]) -> Any:
        if self.defined_at(value):
            return self.function(value)
        return default(value)

    def and_then(self, other: Callable[[Any], Any]) -> 'PartialFunction':
        """Same domain; the result is fed to `other`"""
        return PartialFunction(self.condition, lambda value: other(self.function(value)))

    def or_else(self, other: 'PartialFunction') -> 'PartialFunction':
        """Defined where either is; this one wins where both are"""
        def condition(value: Any) -> bool:
            return self.defined_at(value) or other.defined_at(value)

        def function(value: Any) -> Any:
            if self.defined_at(value):
                return self.function(value)
            return other(value)

        return PartialFunction(condition, function)
