"""
Frontend: pattern text -> AST
"""

from .parser import Parser

__all__ = ["Parser"]
