"""
Compile passes over the pattern AST
"""

from .base import BasePass, CompileContext, PassManager
from .pattern_validation import PatternValidationPass
from .matcher_lowering import MatcherLoweringPass

__all__ = ["BasePass", "CompileContext", "PassManager", "PatternValidationPass", "MatcherLoweringPass"]
