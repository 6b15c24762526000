"""
Lexical analyzer for the prolang language.

This module converts raw source text into an ordered token sequence:

Classes:
    TokenType: The five token kinds (keyword, identifier, number, symbol, end of file).
    Token: An immutable (kind, text) pair.
    CharacterStream: Cursor over the source string.
    Lexer: Produces one Token at a time from a CharacterStream.

Functions:
    tokenize(source, strict=False): Lex a whole string into a list ending in EOF.

Scanning rules:
    - Whitespace is skipped.
    - A letter starts a maximal alphanumeric run; reserved words become KEYWORD,
      everything else IDENTIFIER. Underscores are not identifier characters.
    - A digit starts a maximal digit run (NUMBER, integers only).
    - Each punctuation character is its own SYMBOL; `<<` is two tokens.
    - Any other character is skipped, or raises LexicalError in strict mode.

Example:
    >>> [tok.text for tok in tokenize("x = 10 ;")]
    ['x', '=', '10', ';', '']
"""

from dataclasses import dataclass
from enum import Enum

from prolang.prolang_constants import (
    DIGITS,
    KEYWORDS,
    LETTERS,
    PUNCTUATION,
    WHITESPACE,
)
from prolang.prolang_errors import LexicalError


class TokenType(Enum):
    """Token kinds, valued with their display names."""

    KEYWORD = "Keyword"
    IDENTIFIER = "Identifier"
    NUMBER = "Number"
    SYMBOL = "Symbol"
    EOF = "EndOfFile"


@dataclass(frozen=True)
class Token:
    """A single lexical token.

    Attributes:
        kind (TokenType): The token's classification.
        text (str): The exact matched substring; empty for EOF.
    """

    kind: TokenType
    text: str

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.text!r})"

    def is_eof(self) -> bool:
        return self.kind is TokenType.EOF

    def is_symbol(self, text: str) -> bool:
        return self.kind is TokenType.SYMBOL and self.text == text

    def is_keyword(self, text: str) -> bool:
        return self.kind is TokenType.KEYWORD and self.text == text


EOF_TOKEN = Token(TokenType.EOF, "")


class CharacterStream:
    """
    A cursor over a source string.

    Attributes:
        source (str): The input source string.
        position (int): Index of the next unread character.
    """

    def __init__(self, source: str, position: int = 0):
        self.source = source
        self.position = position

    def next(self) -> str:
        """
        Consumes and returns the next character in the stream.

        Raises:
            IndexError: If reading past the end of the source.
        """
        if self.position >= len(self.source):
            raise IndexError(
                f"CharacterStreamError: Attempted to read past end of source at position=<{self.position}>"
            )
        char = self.source[self.position]
        self.position += 1
        return char

    def peek(self, offset: int = 0) -> str:
        """Returns the character `offset` places ahead, or "" when out of bounds."""
        index = self.position + offset
        if index < 0 or index >= len(self.source):
            return ""
        return self.source[index]

    def end_of_file(self) -> bool:
        return self.position >= len(self.source)


class Lexer:
    """Lexical analyzer for prolang.

    Pulls characters from a CharacterStream and returns one Token per call to
    `next_token`. Once the stream is exhausted every further call returns EOF.

    Attributes:
        stream (CharacterStream): The source stream to tokenize.
        strict (bool): Raise LexicalError on unrecognized characters instead of skipping them.
    """

    def __init__(self, stream: CharacterStream, strict: bool = False) -> None:
        self.stream = stream
        self.strict = strict

    def peek(self) -> str:
        return self.stream.peek()

    def advance(self) -> str:
        return self.stream.next()

    def skip_ignored(self) -> None:
        """Skips whitespace and, unless strict, characters no token can start with."""
        while not self.stream.end_of_file():
            ch = self.peek()
            if ch in WHITESPACE:
                self.advance()
            elif ch in LETTERS or ch in DIGITS or ch in PUNCTUATION:
                break
            elif self.strict:
                raise LexicalError(ch, self.stream.position)
            else:
                self.advance()

    def read_while(self, charset: str) -> str:
        start = self.stream.position
        while not self.stream.end_of_file() and self.peek() in charset:
            self.stream.position += 1
        return self.stream.source[start : self.stream.position]

    def next_token(self) -> Token:
        """Consumes and returns the next Token from the stream.

        Raises:
            LexicalError: In strict mode, on a character outside every token class.
        """
        self.skip_ignored()

        if self.stream.end_of_file():
            return EOF_TOKEN

        ch = self.peek()

        # 1. Identifier or keyword
        if ch in LETTERS:
            word = self.read_while(LETTERS + DIGITS)
            if word in KEYWORDS:
                return Token(TokenType.KEYWORD, word)
            return Token(TokenType.IDENTIFIER, word)

        # 2. Integer
        if ch in DIGITS:
            return Token(TokenType.NUMBER, self.read_while(DIGITS))

        # 3. Single punctuation character
        return Token(TokenType.SYMBOL, self.advance())


def tokenize(source: str, strict: bool = False) -> list[Token]:
    """Lex `source` completely.

    Args:
        source (str): Program text.
        strict (bool): Raise LexicalError instead of skipping unrecognized characters.

    Returns:
        list[Token]: Tokens in source order, always ending with exactly one EOF token.
    """
    lexer = Lexer(CharacterStream(source), strict=strict)
    tokens: list[Token] = []
    while True:
        tok = lexer.next_token()
        tokens.append(tok)
        if tok.is_eof():
            return tokens


__all__ = ["EOF_TOKEN", "CharacterStream", "Lexer", "Token", "TokenType", "tokenize"]
