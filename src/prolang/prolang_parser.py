"""
prolang Parser

Parses a prolang token sequence into an abstract syntax tree.

The parser is plain recursive descent over a single cursor into the token list.
Each grammar rule reads tokens starting at the cursor, advances past what it
consumes, and either returns a node or raises `ParseError`. There is no
backtracking: rules commit on one token of lookahead, except `parse_primary`,
which peeks one further to tell a call, an assignment and a plain name apart.

Grammar
-------
    Program        := Statement* EOF
    Statement      := FunctionDef | Expression ';'
    FunctionDef    := 'def' Identifier '(' ParamList? ')' '{' Statement* '}'
    ParamList      := Identifier (',' Identifier)*
    Expression     := Primary (BinOp Primary)*
    Primary        := Number | Identifier | FunctionCall | Assignment | TypedDecl
    Assignment     := Identifier '=' Expression
    TypedDecl      := 'int' Identifier '=' Expression
    FunctionCall   := Identifier '(' ArgList? ')'
    ArgList        := Expression (',' Expression)*
    BinOp          := '+' | '-' | '*' | '/' | '<' '<' | '>' '>'

All binary operators share one precedence level and associate to the left, so
`a + b * c` is `(a + b) * c`.

Parser Behavior
---------------
- Fails fast: the first error aborts the parse and no partial tree is returned.
- Never steps past the EOF sentinel; reading beyond the end keeps returning it.
- An unexpected token where an expression must start is an error, as is
  running out of input inside a function body or argument list.
- Nesting deeper than the interpreter's recursion limit allows is reported
  as a `ParseError` at the token where the limit was hit.
- Number literals of any length convert to `int` exactly.

Entry Points
------------
- `Parser(tokens).parse()`: Parse a full program into a `Block`.
- `parse(tokens)`: Shorthand for the above.
- `parse_source(source, strict=False)`: Tokenize and parse in one step.

Raises
------
ParseError
    A `SyntaxError` subclass carrying the expected construct, the token found
    and its index in the token stream.
"""

from __future__ import annotations

from collections.abc import Sequence

from prolang.prolang_ast import (
    Assignment,
    BinaryOp,
    Block,
    FunctionCall,
    FunctionDef,
    Identifier,
    Node,
    NumberLiteral,
    number_from_text,
)
from prolang.prolang_constants import BINARY_OPERATORS, SHIFT_OPERATORS
from prolang.prolang_errors import ParseError
from prolang.prolang_lexer import EOF_TOKEN, Token, TokenType, tokenize


class Parser:
    """
    prolang Parser Class

    Transforms a token list into a `Block` holding the program's top-level
    statements.

    Attributes
    ----------
    tokens : list[Token]
        The input token stream, guaranteed to end with exactly one EOF token.
    position : int
        Current index into the token stream.

    Methods
    -------
    parse() -> Block
        Parse a complete program.
    parse_statement() -> Node
        Parse a function definition or an expression statement.
    parse_expression() -> Node
        Parse a primary followed by any number of binary operator/operand pairs.
    parse_primary() -> Node
        Parse a number, name, call, assignment or `int` declaration.
    expect(symbol) -> Token
        Consume a structural symbol or raise without moving the cursor.
    """

    def __init__(self, tokens: Sequence[Token]) -> None:
        stream = list(tokens)
        for index, tok in enumerate(stream):
            if tok.is_eof():
                del stream[index + 1 :]
                break
        else:
            stream.append(EOF_TOKEN)
        self.tokens: list[Token] = stream
        self.position: int = 0

    # Cursor

    def current(self) -> Token:
        return self.tokens[self.position]

    def peek(self, offset: int = 1) -> Token:
        index = min(self.position + offset, len(self.tokens) - 1)
        return self.tokens[index]

    def advance(self) -> Token:
        """Consume and return the current token. EOF is never consumed."""
        tok = self.current()
        if not tok.is_eof():
            self.position += 1
        return tok

    def error(self, expected: str) -> ParseError:
        return ParseError(expected, self.current(), self.position)

    def expect(self, symbol: str) -> Token:
        tok = self.current()
        if tok.is_symbol(symbol):
            return self.advance()
        raise self.error(f"'{symbol}'")

    def expect_keyword(self, word: str) -> Token:
        tok = self.current()
        if tok.is_keyword(word):
            return self.advance()
        raise self.error(f"keyword '{word}'")

    def expect_identifier(self, what: str) -> Token:
        tok = self.current()
        if tok.kind is TokenType.IDENTIFIER:
            return self.advance()
        raise self.error(what)

    # Statements

    def parse(self) -> Block:
        """Parse a full program and return its statements as a Block.

        Raises:
            ParseError: On the first grammar violation, or when nesting exceeds
                the interpreter's recursion limit.
        """
        program = Block()
        try:
            while not self.current().is_eof():
                program.add_statement(self.parse_statement())
        except RecursionError:
            raise self.error("less deeply nested input") from None
        return program

    def parse_statement(self) -> Node:
        if self.current().is_keyword("def"):
            return self.parse_function()
        expr = self.parse_expression()
        self.expect(";")
        return expr

    def parse_function(self) -> FunctionDef:
        """Parse `def name(params) { body }`."""
        self.expect_keyword("def")
        name = self.expect_identifier("function name").text
        self.expect("(")
        parameters: list[str] = []
        if not self.current().is_symbol(")"):
            parameters.append(self.expect_identifier("parameter name").text)
            while self.current().is_symbol(","):
                self.advance()
                parameters.append(self.expect_identifier("parameter name").text)
        self.expect(")")
        body = self.parse_block(f"function '{name}'")
        return FunctionDef(name, tuple(parameters), body)

    def parse_block(self, owner: str) -> Block:
        """Parse a `{}`-enclosed statement list belonging to `owner`."""
        self.expect("{")
        block = Block()
        while not self.current().is_symbol("}"):
            if self.current().is_eof():
                raise self.error(f"'}}' to close body of {owner}")
            block.add_statement(self.parse_statement())
        self.expect("}")
        return block

    # Expressions

    def parse_expression(self) -> Node:
        left = self.parse_primary()
        return self.parse_binary_op(left)

    def match_operator(self) -> str | None:
        """Return the binary operator at the cursor without consuming it.

        Shift operators arrive as two adjacent single-character symbols and are
        joined here.
        """
        tok = self.current()
        if tok.kind is not TokenType.SYMBOL:
            return None
        if tok.text in BINARY_OPERATORS:
            return tok.text
        nxt = self.peek()
        if nxt.kind is TokenType.SYMBOL and tok.text + nxt.text in SHIFT_OPERATORS:
            return tok.text + nxt.text
        return None

    def parse_binary_op(self, left: Node) -> Node:
        """Fold `(op primary)*` onto `left`, left-associatively."""
        while True:
            op = self.match_operator()
            if op is None:
                return left
            for _ in op:
                self.advance()
            right = self.parse_primary()
            left = BinaryOp(op, left, right)

    def parse_primary(self) -> Node:
        tok = self.current()
        if tok.kind is TokenType.NUMBER:
            self.advance()
            return NumberLiteral(number_from_text(tok.text))
        if tok.kind is TokenType.IDENTIFIER:
            nxt = self.peek()
            if nxt.is_symbol("("):
                return self.parse_call()
            if nxt.is_symbol("="):
                return self.parse_assignment()
            self.advance()
            return Identifier(tok.text)
        if tok.is_keyword("int"):
            return self.parse_declaration()
        raise self.error("expression")

    def parse_assignment(self) -> Assignment:
        target = Identifier(self.expect_identifier("assignment target").text)
        self.expect("=")
        value = self.parse_expression()
        return Assignment(target, value)

    def parse_declaration(self) -> Assignment:
        """Parse `int name = expr`; the type keyword is kept as `type_annotation`."""
        type_tok = self.expect_keyword("int")
        target = Identifier(
            self.expect_identifier(f"variable name after '{type_tok.text}'").text
        )
        self.expect("=")
        value = self.parse_expression()
        return Assignment(target, value, type_annotation=type_tok.text)

    def parse_call(self) -> FunctionCall:
        name = self.expect_identifier("function name").text
        self.expect("(")
        arguments: list[Node] = []
        if not self.current().is_symbol(")"):
            arguments.append(self.parse_expression())
            while self.current().is_symbol(","):
                self.advance()
                arguments.append(self.parse_expression())
        self.expect(")")
        return FunctionCall(name, tuple(arguments))


def parse(tokens: Sequence[Token]) -> Block:
    """Parse a token sequence into the program's root Block."""
    return Parser(tokens).parse()


def parse_source(source: str, strict: bool = False) -> Block:
    """Tokenize and parse `source`.

    Raises:
        LexicalError: In strict mode, on an unrecognized character.
        ParseError: On the first grammar violation.
    """
    return parse(tokenize(source, strict=strict))


__all__ = ["Parser", "parse", "parse_source"]
