"""
Parse tree -> AST transformers
"""

from .base import PatternTransformer
from .literals import LiteralParser

__all__ = ["PatternTransformer", "LiteralParser"]
