"""
casematch utilities package
"""

from .sequences import as_sequence, is_number, suffix

__all__ = ["as_sequence", "is_number", "suffix"]
