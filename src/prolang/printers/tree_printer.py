"""
Debug dump of a prolang AST.

`TreePrinter` walks a tree depth-first and writes one line per node, indenting
children under their parent:

    Function: add with parameters: a b
    Body:
      Assignment:
        Identifier: x
        BinaryOp:
          Identifier: a
          Operator: +
          Identifier: b

Traversal order:
    - BinaryOp: left operand, then the operator, then the right operand.
    - Block and function bodies: statements in stored order.
    - FunctionCall: callee name, then each argument in order.

Raises:
    NotImplementedError: If a node kind has no `emit_*` method.
"""

from prolang.prolang_ast import (
    Assignment,
    BinaryOp,
    Block,
    FunctionCall,
    FunctionDef,
    Identifier,
    Node,
    NumberLiteral,
    number_to_text,
)


class TreePrinter:
    """Accumulates an indented, line-per-node description of a tree.

    Attributes:
        lines (list[str]): Lines written so far.
        indent (int): Current nesting depth.
    """

    def __init__(self) -> None:
        self.lines: list[str] = []
        self.indent = 0

    def indent_str(self) -> str:
        return "  " * self.indent

    def get_output(self) -> str:
        return "\n".join(self.lines)

    def write(self, text: str) -> None:
        self.lines.append(self.indent_str() + text)

    def visit(self, node: Node) -> None:
        method = getattr(self, f"emit_{node.kind}", None)
        if method is None:
            raise NotImplementedError(f"No printer method for node kind '{node.kind}'")
        method(node)

    def visit_nested(self, nodes: list[Node] | tuple[Node, ...]) -> None:
        self.indent += 1
        for child in nodes:
            self.visit(child)
        self.indent -= 1

    def emit_number(self, node: NumberLiteral) -> None:
        self.write(f"Number: {number_to_text(node.value)}")

    def emit_identifier(self, node: Identifier) -> None:
        self.write(f"Identifier: {node.name}")

    def emit_binary(self, node: BinaryOp) -> None:
        self.write("BinaryOp:")
        self.indent += 1
        self.visit(node.left)
        self.write(f"Operator: {node.operator}")
        self.visit(node.right)
        self.indent -= 1

    def emit_assign(self, node: Assignment) -> None:
        if node.type_annotation:
            self.write(f"Assignment ({node.type_annotation}):")
        else:
            self.write("Assignment:")
        self.visit_nested([node.target, node.value])

    def emit_block(self, node: Block) -> None:
        self.write("Block:")
        self.visit_nested(node.statements)

    def emit_func(self, node: FunctionDef) -> None:
        params = " ".join(node.parameters)
        self.write(f"Function: {node.name} with parameters: {params}".rstrip())
        self.write("Body:")
        self.visit_nested(node.body.statements)

    def emit_call(self, node: FunctionCall) -> None:
        self.write(f"Function Call: {node.name} with arguments:")
        self.visit_nested(node.arguments)
