"""
Defines the abstract syntax tree (AST) node types for the prolang language.

The tree is a closed set of seven variants. Each variant is a dataclass with a
`kind` class tag that consumers (printers, future analysis passes) dispatch on:

    NumberLiteral   kind="number"      value: int
    Identifier      kind="identifier"  name: str
    BinaryOp        kind="binary"      operator, left, right
    Assignment      kind="assign"      target, value, type_annotation
    Block           kind="block"       statements
    FunctionDef     kind="func"        name, parameters, body
    FunctionCall    kind="call"        name, arguments

Every parent exclusively owns its children, so trees are finite and acyclic.
Only `Block` is mutable, and only through `add_statement` while the parser is
building it; all other variants are frozen.

Usage:
    Produced by `prolang.prolang_parser.Parser`, consumed by the printers and
    by test suites asserting structure. `to_dict()` gives a JSON-ready form.

Example:
    Assignment(Identifier("x"), NumberLiteral(10))
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, ClassVar, TypedDict, Union


class ASTDict(TypedDict, total=False):
    """
    Serialized form of a node, as returned by `to_dict()`.

    Only `kind` is always present; the remaining keys are the payload fields
    of the corresponding variant.
    """

    kind: str
    value: Any
    name: str
    operator: str
    left: "ASTDict"
    right: "ASTDict"
    target: "ASTDict"
    type_annotation: str | None
    statements: list["ASTDict"]
    parameters: list[str]
    body: "ASTDict"
    arguments: list["ASTDict"]


class ASTNode:
    """Base for all node variants; provides the `kind` tag and serialization."""

    kind: ClassVar[str] = ""

    def to_dict(self) -> ASTDict:
        out: dict[str, Any] = {"kind": self.kind}
        for f in fields(self):  # type: ignore[arg-type]
            out[f.name] = _serialize(getattr(self, f.name))
        return out  # type: ignore[return-value]


def _serialize(val: Any) -> Any:
    if isinstance(val, ASTNode):
        return val.to_dict()
    if isinstance(val, (list, tuple)):
        return [_serialize(v) for v in val]
    return val


# Below CPython's default int/str conversion limit (4300 digits)
INT_CHUNK_DIGITS = 4000


def number_from_text(text: str) -> int:
    """Convert a digit string of any length to an int, chunk by chunk."""
    value = 0
    for start in range(0, len(text), INT_CHUNK_DIGITS):
        chunk = text[start : start + INT_CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def number_to_text(value: int) -> str:
    """Decimal text of `value`, however many digits it has."""
    if value < 0:
        return "-" + number_to_text(-value)
    base = 10**INT_CHUNK_DIGITS
    chunks: list[str] = []
    while value >= base:
        value, low = divmod(value, base)
        chunks.append(str(low).zfill(INT_CHUNK_DIGITS))
    chunks.append(str(value))
    return "".join(reversed(chunks))


@dataclass(frozen=True)
class NumberLiteral(ASTNode):
    kind: ClassVar[str] = "number"

    value: int


@dataclass(frozen=True)
class Identifier(ASTNode):
    kind: ClassVar[str] = "identifier"

    name: str


@dataclass(frozen=True)
class BinaryOp(ASTNode):
    """A binary operation; `left` and `right` belong to this node alone."""

    kind: ClassVar[str] = "binary"

    operator: str
    left: Node
    right: Node


@dataclass(frozen=True)
class Assignment(ASTNode):
    """`target = value`, or `int target = value` when `type_annotation` is set.

    Attributes:
        target (Identifier): The assigned name.
        value (Node): The assigned expression.
        type_annotation (str | None): The declared type keyword, e.g. "int", or None
            for a bare assignment.
    """

    kind: ClassVar[str] = "assign"

    target: Identifier
    value: Node
    type_annotation: str | None = None


@dataclass
class Block(ASTNode):
    """An ordered list of statements: a whole program or a function body.

    Insertion order is execution order.
    """

    kind: ClassVar[str] = "block"

    statements: list[Node] = field(default_factory=list)

    def add_statement(self, statement: Node) -> None:
        self.statements.append(statement)


@dataclass(frozen=True)
class FunctionDef(ASTNode):
    kind: ClassVar[str] = "func"

    name: str
    parameters: tuple[str, ...]
    body: Block


@dataclass(frozen=True)
class FunctionCall(ASTNode):
    kind: ClassVar[str] = "call"

    name: str
    arguments: tuple[Node, ...] = ()


Node = Union[
    NumberLiteral, Identifier, BinaryOp, Assignment, Block, FunctionDef, FunctionCall
]
"""Closed union of every AST variant."""

NODE_TYPES: tuple[type[ASTNode], ...] = (
    NumberLiteral,
    Identifier,
    BinaryOp,
    Assignment,
    Block,
    FunctionDef,
    FunctionCall,
)

__all__ = [
    "ASTDict",
    "ASTNode",
    "Assignment",
    "BinaryOp",
    "Block",
    "FunctionCall",
    "FunctionDef",
    "Identifier",
    "NODE_TYPES",
    "Node",
    "NumberLiteral",
    "number_from_text",
    "number_to_text",
]
