"""
Binding Maps

Name -> captured sub-value, one fresh dict per evaluation.
"""

from typing import Any, Dict

from ..shared.errors import BindingConflictError

BindingMap = Dict[str, Any]


def merge_bindings(left: BindingMap, right: BindingMap) -> BindingMap:
    """Union of two binding maps. A name present in both is an error, never overwritten."""
    merged = dict(left)
    for name, value in right.items():
        if name in merged:
            raise BindingConflictError(name)
        merged[name] = value
    return merged
