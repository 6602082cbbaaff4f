"""
Matcher Nodes

Executable form of a pattern. A matcher tree is built once by the lowering
pass and is never modified, so it can be shared between threads and reused
for any number of candidates.

Every matcher answers two questions about a candidate:

- defined_at(candidate): does the candidate have the required shape?
- bindings(candidate): the names the pattern captures, only meaningful after
  defined_at(candidate) returned True for the whole pattern.

Sequence matchers index into the full candidate sequence instead of slicing
it; each one carries the subscript it is responsible for.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from ..shared.errors import NoMatchError
from ..shared.nodes import ASTNode
from ..utils.sequences import as_sequence, is_number, suffix
from .bindings import BindingMap, merge_bindings


class Matcher(ABC):
    """Base class for all matchers"""

    node: Optional[ASTNode]

    @abstractmethod
    def defined_at(self, candidate: Any) -> bool:
        raise NotImplementedError

    @abstractmethod
    def bindings(self, candidate: Any) -> BindingMap:
        raise NotImplementedError

    def show_position(self) -> str:
        """Caret diagnostic of the pattern node this matcher came from"""
        if self.node is None:
            return ""
        return self.node.show_position()


def _require_sequence(matcher: Matcher, candidate: Any) -> Any:
    seq = as_sequence(candidate)
    if seq is None:
        raise NoMatchError(
            f"bindings requested for non-sequence {candidate!r}",
            value=candidate,
            location=matcher.node.location if matcher.node is not None else None,
        )
    return seq


# =====================================================================
# Scalars
# =====================================================================

@dataclass(frozen=True)
class IdentifierMatcher(Matcher):
    """Captures the candidate under `name`; imposes no constraint"""
    name: str
    node: Optional[ASTNode] = field(default=None, compare=False, repr=False)

    def defined_at(self, candidate: Any) -> bool:
        return True

    def bindings(self, candidate: Any) -> BindingMap:
        return {self.name: candidate}


@dataclass(frozen=True)
class LiteralMatcher(Matcher):
    """
    Literal value: numbers compare by numeric value (1 matches 1.0),
    strings by exact equality. Booleans are never numbers.
    """
    value: Union[int, float, str]
    node: Optional[ASTNode] = field(default=None, compare=False, repr=False)

    def defined_at(self, candidate: Any) -> bool:
        if isinstance(self.value, str):
            return isinstance(candidate, str) and candidate == self.value
        return is_number(candidate) and bool(candidate == self.value)

    def bindings(self, candidate: Any) -> BindingMap:
        return {}


# =====================================================================
# Sequences
# =====================================================================

@dataclass(frozen=True)
class EmptyListMatcher(Matcher):
    """Holds only for sequences of length exactly `index` (nothing left from there on)"""
    index: int
    node: Optional[ASTNode] = field(default=None, compare=False, repr=False)

    def defined_at(self, candidate: Any) -> bool:
        seq = as_sequence(candidate)
        return seq is not None and len(seq) == self.index

    def bindings(self, candidate: Any) -> BindingMap:
        return {}


@dataclass(frozen=True)
class ArrayListMatcher(Matcher):
    """
    Element at `index` must satisfy `head`, the rest of the sequence must
    satisfy `tail` (which carries its own index into the same sequence).

    With splat=True the head is a splat: it receives the suffix starting at
    `index` and the chain ends here.
    """
    head: Matcher
    tail: Matcher
    index: int
    splat: bool = False
    node: Optional[ASTNode] = field(default=None, compare=False, repr=False)

    def _slot(self, seq: Any) -> Any:
        return suffix(seq, self.index) if self.splat else seq[self.index]

    def defined_at(self, candidate: Any) -> bool:
        seq = as_sequence(candidate)
        if seq is None:
            return False
        if self.splat:
            # the splat consumes the remainder, the closing EmptyListMatcher holds by construction
            if self.index > len(seq):
                return False
            return isinstance(self.head, AnonymousSplatMatcher) or self.head.defined_at(self._slot(seq))
        return (
            self.index < len(seq)
            and self.head.defined_at(self._slot(seq))
            and self.tail.defined_at(seq)
        )

    def bindings(self, candidate: Any) -> BindingMap:
        seq = _require_sequence(self, candidate)
        if self.splat:
            if isinstance(self.head, AnonymousSplatMatcher):
                return {}
            return self.head.bindings(self._slot(seq))
        return merge_bindings(self.head.bindings(self._slot(seq)), self.tail.bindings(seq))


@dataclass(frozen=True)
class ArrayHeadMatcher(Matcher):
    """Last element of a fixed-arity array: position `index` exists and nothing follows it"""
    element: Matcher
    index: int
    node: Optional[ASTNode] = field(default=None, compare=False, repr=False)

    def defined_at(self, candidate: Any) -> bool:
        seq = as_sequence(candidate)
        if seq is None:
            return False
        return self.index + 1 == len(seq) and self.element.defined_at(seq[self.index])

    def bindings(self, candidate: Any) -> BindingMap:
        seq = _require_sequence(self, candidate)
        return self.element.bindings(seq[self.index])


@dataclass(frozen=True)
class AnonymousSplatMatcher(Matcher):
    """*_ : any remainder, including an empty one; binds nothing"""
    node: Optional[ASTNode] = field(default=None, compare=False, repr=False)

    def defined_at(self, candidate: Any) -> bool:
        return True

    def bindings(self, candidate: Any) -> BindingMap:
        return {}
