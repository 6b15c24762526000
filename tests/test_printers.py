import json
from dataclasses import dataclass
from typing import ClassVar

import pytest

from prolang.printers.json_printer import JsonPrinter
from prolang.printers.source_printer import SourcePrinter
from prolang.printers.tree_printer import TreePrinter
from prolang.prolang_ast import (
    NODE_TYPES,
    ASTNode,
    Assignment,
    BinaryOp,
    Block,
    FunctionCall,
    FunctionDef,
    Identifier,
    Node,
    NumberLiteral,
)
from prolang.prolang_parser import parse_source


@dataclass(frozen=True)
class Bogus(ASTNode):
    kind: ClassVar[str] = "bogus"


def tree_dump(node: Node) -> str:
    printer = TreePrinter()
    printer.visit(node)
    return printer.get_output()


def source_of(node: Node) -> str:
    printer = SourcePrinter()
    printer.visit(node)
    return printer.get_output()


# TreePrinter


@pytest.mark.parametrize("cls", NODE_TYPES)
def test_tree_printer_handles_every_kind(cls: type[ASTNode]) -> None:
    assert hasattr(TreePrinter, f"emit_{cls.kind}")


@pytest.mark.parametrize("cls", NODE_TYPES)
def test_source_printer_handles_every_kind(cls: type[ASTNode]) -> None:
    assert hasattr(SourcePrinter, f"emit_expr_{cls.kind}")


def test_tree_printer_program() -> None:
    tree = parse_source("def f ( a , b ) { x = 1 ; } f ( 1 , 2 ) ;")
    assert tree_dump(tree) == "\n".join(
        [
            "Block:",
            "  Function: f with parameters: a b",
            "  Body:",
            "    Assignment:",
            "      Identifier: x",
            "      Number: 1",
            "  Function Call: f with arguments:",
            "    Number: 1",
            "    Number: 2",
        ]
    )


def test_tree_printer_binary_visits_left_operator_right() -> None:
    tree = parse_source("a + b - c;")
    assert tree_dump(tree) == "\n".join(
        [
            "Block:",
            "  BinaryOp:",
            "    BinaryOp:",
            "      Identifier: a",
            "      Operator: +",
            "      Identifier: b",
            "    Operator: -",
            "    Identifier: c",
        ]
    )


def test_tree_printer_typed_assignment_and_empty_params() -> None:
    tree = FunctionDef(
        "main", (), Block([Assignment(Identifier("x"), NumberLiteral(0), "int")])
    )
    assert tree_dump(tree) == "\n".join(
        [
            "Function: main with parameters:",
            "Body:",
            "  Assignment (int):",
            "    Identifier: x",
            "    Number: 0",
        ]
    )


def test_tree_printer_unknown_kind() -> None:
    with pytest.raises(NotImplementedError, match="bogus"):
        tree_dump(Bogus())  # type: ignore[arg-type]


# JsonPrinter


def test_json_printer_single_tree() -> None:
    tree = parse_source("x = 10;")
    printer = JsonPrinter()
    printer.visit(tree)
    assert json.loads(printer.get_output()) == tree.to_dict()


def test_json_printer_many_trees() -> None:
    printer = JsonPrinter(indent=None)
    printer.visit(Identifier("a"))
    printer.visit(NumberLiteral(1))
    assert printer.get_output() == (
        '[{"kind": "identifier", "name": "a"}, {"kind": "number", "value": 1}]'
    )


# SourcePrinter


def test_source_printer_layout() -> None:
    tree = parse_source("def f ( a , b ) { x = 1 ; } f ( 1 , 2 ) ;")
    assert source_of(tree) == "def f(a, b) {\n    x = 1;\n}\nf(1, 2);"


@pytest.mark.parametrize(
    "source",
    [
        "x = 10;",
        "int x = 10 + 20;",
        "a + b - c;",
        "a << 2 >> b;",
        "x = y = 3;",
        "a + x = b + c;",
        "f(g(1), x = 2, a + b);",
        "def outer() { def inner(x) { x; } inner(1); }",
        "def f() {}",
        "",
    ],
)
def test_source_printer_roundtrip(source: str) -> None:
    tree = parse_source(source)
    assert parse_source(source_of(tree)) == tree


def test_source_printer_rejects_right_nested_binary() -> None:
    node = BinaryOp("-", Identifier("a"), BinaryOp("+", Identifier("b"), Identifier("c")))
    with pytest.raises(ValueError, match="Right-nested"):
        source_of(node)


def test_source_printer_rejects_assignment_before_operator() -> None:
    node = BinaryOp("+", Assignment(Identifier("x"), NumberLiteral(1)), NumberLiteral(2))
    with pytest.raises(ValueError, match="must end its expression"):
        source_of(node)


def test_source_printer_rejects_nested_block_statement() -> None:
    with pytest.raises(ValueError, match="statement"):
        source_of(Block([Block([])]))


def test_source_printer_rejects_function_as_argument() -> None:
    node = FunctionCall("f", (FunctionDef("g", (), Block([])),))
    with pytest.raises(ValueError, match="expression position"):
        source_of(node)


def test_source_printer_unknown_kind() -> None:
    with pytest.raises(NotImplementedError, match="bogus"):
        source_of(Bogus())  # type: ignore[arg-type]


# Long number literals

HUGE = (10**5000 - 1) // 9


def test_tree_printer_long_number() -> None:
    assert tree_dump(NumberLiteral(HUGE)) == "Number: " + "1" * 5000


def test_source_printer_long_number_reparses() -> None:
    tree = Block([Assignment(Identifier("x"), NumberLiteral(HUGE))])
    assert parse_source(source_of(tree)) == tree


def test_json_printer_writes_oversized_ints_as_strings() -> None:
    printer = JsonPrinter()
    printer.visit(Block([NumberLiteral(HUGE), NumberLiteral(10**3999)]))
    doc = json.loads(printer.get_output())
    big, fits = doc["statements"]
    assert big == {"kind": "number", "value": "1" * 5000}
    assert fits == {"kind": "number", "value": 10**3999}
