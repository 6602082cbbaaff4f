"""
Compiler: pattern text -> CompiledPattern
"""

from .driver import CompiledPattern, CompilationResult, CompilerDriver, compile_pattern

__all__ = ["CompiledPattern", "CompilationResult", "CompilerDriver", "compile_pattern"]
