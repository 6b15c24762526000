"""
Exceptions raised by the prolang lexer and parser.

Both error types subclass the builtin `SyntaxError`, so callers that only care
whether the input was well formed can catch `SyntaxError` and ignore the rest.

Classes:
    LexicalError: An unrecognized character met while lexing in strict mode.
    ParseError: A token that no grammar rule accepts at the cursor.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from prolang.prolang_lexer import Token


class LexicalError(SyntaxError):
    """Raised by the strict lexer for a character outside every token class.

    Attributes:
        char (str): The offending character.
        offset (int): Its 0-based index in the source string.
    """

    def __init__(self, char: str, offset: int) -> None:
        super().__init__(f"Unrecognized character {char!r} at offset {offset}")
        self.char = char
        self.offset = offset


class ParseError(SyntaxError):
    """Raised when the token at the cursor does not fit the grammar.

    Attributes:
        expected (str): Human-readable description of what the rule wanted.
        found (Token): The token actually at the cursor.
        position (int): Index of `found` in the token stream.
    """

    def __init__(self, expected: str, found: Token, position: int) -> None:
        super().__init__(
            f"Expected {expected}, got {describe_token(found)} at token {position}"
        )
        self.expected = expected
        self.found = found
        self.position = position


def describe_token(tok: Token) -> str:
    if tok.is_eof():
        return "end of input"
    return f"{tok.kind.name} {tok.text!r}"


__all__ = ["LexicalError", "ParseError", "describe_token"]
