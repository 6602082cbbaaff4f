"""
Runtime: dispatch over compiled patterns
"""

from .partial_function import PartialFunction
from .case_matcher import Case, CaseMatcher, match, matcher

__all__ = ["PartialFunction", "Case", "CaseMatcher", "match", "matcher"]
