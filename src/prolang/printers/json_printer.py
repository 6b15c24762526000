"""Serializes a prolang AST to JSON via `ASTNode.to_dict()`.

Integers too long for `json.dumps` to format are written as decimal strings.
"""

import json
from typing import Any

from prolang.prolang_ast import INT_CHUNK_DIGITS, ASTDict, Node, number_to_text

LARGEST_JSON_INT = 10**INT_CHUNK_DIGITS - 1


def _json_safe(val: Any) -> Any:
    if isinstance(val, dict):
        return {key: _json_safe(v) for key, v in val.items()}
    if isinstance(val, list):
        return [_json_safe(v) for v in val]
    if isinstance(val, bool) or not isinstance(val, int):
        return val
    if abs(val) > LARGEST_JSON_INT:
        return number_to_text(val)
    return val


class JsonPrinter:
    def __init__(self, indent: int | None = 2) -> None:
        self.indent = indent
        self.documents: list[ASTDict] = []

    def visit(self, node: Node) -> None:
        self.documents.append(_json_safe(node.to_dict()))

    def get_output(self) -> str:
        if len(self.documents) == 1:
            return json.dumps(self.documents[0], indent=self.indent)
        return json.dumps(self.documents, indent=self.indent)
