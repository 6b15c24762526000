"""
Provides the `Renderer` class and printer interface for turning prolang ASTs into text.

Classes and Features:
    - Printer (Protocol): Interface for all tree printers. Requires `visit` and `get_output`.
    - TreePrinter: Indented debug dump (format "tree").
    - JsonPrinter: JSON serialization (format "json").
    - SourcePrinter: Canonical prolang source (format "source").
    - Renderer: Picks a printer by format name and runs it over a tree.

Example:
    >>> Renderer("source").render(parse_source("x=1+2;"))
    'x = 1 + 2;'

Raises:
    ValueError: If the format is not supported.
    TypeError: If asked to render something that is not an AST node.
"""

from typing import Protocol

from prolang.printers.json_printer import JsonPrinter
from prolang.printers.source_printer import SourcePrinter
from prolang.printers.tree_printer import TreePrinter
from prolang.prolang_ast import ASTNode, Node


class Printer(Protocol):  # pragma: no cover
    """Protocol for all prolang tree printers.

    Methods:
        visit(node): Consume a node (and its subtree).
        get_output(): Return everything written so far.
    """

    def visit(self, node: Node) -> None: ...  # pragma: no cover

    def get_output(self) -> str: ...  # pragma: no cover


PRINTERS: dict[str, type[Printer]] = {
    "tree": TreePrinter,
    "json": JsonPrinter,
    "source": SourcePrinter,
}
"""Format name to printer class."""


class Renderer:
    """Renders prolang AST nodes in the selected output format.

    Attributes:
        fmt (str): The normalized format name.
    """

    def __init__(self, fmt: str = "tree") -> None:
        """Initializes the renderer with the desired output format.

        Args:
            fmt: "tree", "json" or "source" (case-insensitive).

        Raises:
            ValueError: If the format is not supported.
        """
        fmt = fmt.lower()
        if fmt not in PRINTERS:
            raise ValueError(f"Unknown output format: {fmt!r}")
        self.fmt = fmt

    def render(self, node: Node) -> str:
        """Render one tree with a fresh printer.

        Raises:
            TypeError: If `node` is not an AST node.
        """
        if not isinstance(node, ASTNode):
            raise TypeError(f"Can only render AST nodes, got {type(node).__name__}")
        printer = PRINTERS[self.fmt]()
        printer.visit(node)
        return printer.get_output()


__all__ = ["PRINTERS", "Printer", "Renderer"]
