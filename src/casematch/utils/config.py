"""
Configuration constants to replace magic numbers throughout casematch
"""

import os
import tempfile

# Parser configuration constants (cache under temp dir to avoid cluttering project root)
DEFAULT_PARSER_CACHE_FILE = os.path.join(tempfile.gettempdir(), "casematch_parser.cache")
GRAMMAR_FILE_NAME = "grammar.lark"
GRAMMAR_START_RULE = "start"

# Source naming
DEFAULT_SOURCE_NAME = "<pattern>"

# Compiled pattern cache (number of distinct pattern texts kept)
PATTERN_CACHE_SIZE = 512

# String literal constants
STRING_QUOTE_CHARS = ('"', "'")

# Numeric parsing constants
DECIMAL_SEPARATOR = "."
SCIENTIFIC_NOTATION_INDICATOR = "e"

# Splat constants
ANONYMOUS_SPLAT_NAME = "_"

# Error reporting constants
CARET_CHAR = "^"
CARET_FILL_CHAR = "~"
COLOR_ENV_VAR = "CASEMATCH_COLOR"

# Array indexing constants
FIRST_ELEMENT_INDEX = 0
