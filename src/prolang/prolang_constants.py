"""
Shared lexical tables for the prolang front end.

Exports:
    KEYWORDS: Reserved words classified as KEYWORD tokens.
    BINARY_OPERATORS: Single-symbol binary operators.
    SHIFT_OPERATORS: Two-symbol operators rebuilt by the parser from adjacent symbols.
    STRUCTURAL_SYMBOLS: Punctuation consumed through `Parser.expect`.
    WHITESPACE, LETTERS, DIGITS, PUNCTUATION: ASCII character classes used by the lexer.
"""

import string

KEYWORDS: frozenset[str] = frozenset(
    {"def", "int", "if", "else", "return", "while", "elif"}
)

BINARY_OPERATORS: frozenset[str] = frozenset({"+", "-", "*", "/"})

SHIFT_OPERATORS: frozenset[str] = frozenset({"<<", ">>"})

STRUCTURAL_SYMBOLS: frozenset[str] = frozenset({"(", ")", "{", "}", ";", "=", ","})

# C-locale classes: non-ASCII input falls through to "unrecognized"
WHITESPACE = string.whitespace
LETTERS = string.ascii_letters
DIGITS = string.digits
PUNCTUATION = string.punctuation

__all__ = [
    "BINARY_OPERATORS",
    "DIGITS",
    "KEYWORDS",
    "LETTERS",
    "PUNCTUATION",
    "SHIFT_OPERATORS",
    "STRUCTURAL_SYMBOLS",
    "WHITESPACE",
]
