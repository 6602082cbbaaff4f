"""
Candidate Helpers

Which runtime values count as sequences and numbers, and how a splat takes
the remainder of a sequence.
"""

import itertools
import numbers
from collections.abc import Sequence
from typing import Any, Optional

import numpy as np

_TEXT_TYPES = (str, bytes, bytearray)


def as_sequence(candidate: Any) -> Optional[Any]:
    """Return candidate if it is an ordered, indexable sequence, else None.

    Text is not a sequence here, and a 0-d ndarray is a scalar.
    """
    if isinstance(candidate, np.ndarray):
        return candidate if candidate.ndim >= 1 else None
    if isinstance(candidate, _TEXT_TYPES):
        return None
    if isinstance(candidate, Sequence):
        return candidate
    return None


def is_number(value: Any) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, numbers.Real)


def suffix(seq: Any, index: int) -> Any:
    """Elements from index onward.

    Sliceable sequences keep their container kind; others (deque, plain
    Sequence subclasses) yield a list.
    """
    try:
        return seq[index:]
    except TypeError:
        return list(itertools.islice(seq, index, None))
