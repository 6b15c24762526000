"""
Writes a prolang AST back out as canonical source text.

The output re-parses to an equal tree. Because the language has no
parentheses, a few hand-built shapes have no source form and are rejected:

    - a BinaryOp as the right operand of another BinaryOp
      (the parser only ever nests to the left);
    - an Assignment anywhere but at the end of an expression
      (its value would swallow whatever follows);
    - a Block or FunctionDef in expression position.

Example:
    def add(a, b) {
        x = a + b;
    }
    add(1, 2);

Raises:
    ValueError: For a tree with no source form.
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


class SourcePrinter:
    """Emits statements line by line, indenting function bodies.

    Attributes:
        lines (list[str]): Accumulated source lines.
        indent (int): Current indentation level for emitted code blocks.
    """

    def __init__(self) -> None:
        self.lines: list[str] = []
        self.indent = 0

    def indent_str(self) -> str:
        return "    " * self.indent

    def get_output(self) -> str:
        return "\n".join(self.lines)

    def visit(self, node: Node) -> None:
        """Emit a program Block statement by statement, or a single statement."""
        if isinstance(node, Block):
            for stmt in node.statements:
                self.emit_statement(stmt)
        else:
            self.emit_statement(node)

    def emit_statement(self, node: Node) -> None:
        if isinstance(node, Block):
            raise ValueError("A Block cannot appear as a statement")
        if isinstance(node, FunctionDef):
            self.emit_func(node)
        else:
            self.lines.append(f"{self.indent_str()}{self.emit_expr(node)};")

    def emit_func(self, node: FunctionDef) -> None:
        params = ", ".join(node.parameters)
        self.lines.append(f"{self.indent_str()}def {node.name}({params}) {{")
        self.indent += 1
        for stmt in node.body.statements:
            self.emit_statement(stmt)
        self.indent -= 1
        self.lines.append(f"{self.indent_str()}}}")

    def emit_expr(self, node: Node, tail: bool = True) -> str:
        """Render an expression.

        Args:
            node: The expression node.
            tail: True when nothing follows the expression before `;`, `,` or `)`.
        """
        method = getattr(self, f"emit_expr_{node.kind}", None)
        if method is None:
            raise NotImplementedError(f"No source form for node kind '{node.kind}'")
        return str(method(node, tail))

    def emit_expr_number(self, node: NumberLiteral, tail: bool) -> str:
        return number_to_text(node.value)

    def emit_expr_identifier(self, node: Identifier, tail: bool) -> str:
        return node.name

    def emit_expr_binary(self, node: BinaryOp, tail: bool) -> str:
        if isinstance(node.right, BinaryOp):
            raise ValueError(
                f"Right-nested '{node.right.operator}' has no source form without parentheses"
            )
        left = self.emit_expr(node.left, tail=False)
        right = self.emit_expr(node.right, tail=tail)
        return f"{left} {node.operator} {right}"

    def emit_expr_assign(self, node: Assignment, tail: bool) -> str:
        if not tail:
            raise ValueError(
                f"Assignment to '{node.target.name}' must end its expression"
            )
        prefix = f"{node.type_annotation} " if node.type_annotation else ""
        return f"{prefix}{node.target.name} = {self.emit_expr(node.value)}"

    def emit_expr_call(self, node: FunctionCall, tail: bool) -> str:
        args = ", ".join(self.emit_expr(arg) for arg in node.arguments)
        return f"{node.name}({args})"

    def emit_expr_block(self, node: Block, tail: bool) -> str:
        raise ValueError("A Block cannot appear in expression position")

    def emit_expr_func(self, node: FunctionDef, tail: bool) -> str:
        raise ValueError(
            f"Function '{node.name}' cannot appear in expression position"
        )
