"""Decode the parser's JSON AST into AST nodes.

The parser hands programs over as JSON: either a list of definitions or
an object with a ``"program"`` list. Every node is an object tagged with
``"type"``::

    {"type": "def", "name": {"value": "inc"}, "args": [{"value": "x"}],
     "body": [{"type": "call", "name": {"value": "add", "line": 1},
               "args": [{"type": "name", "value": "x"},
                        {"type": "int", "value": "1"}]}]}

Shape errors raise AstFormatError with the path of the offending node,
e.g. ``program[0].body[1]``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from tagc.ast_nodes import (
    ArrayLiteral,
    Branch,
    Call,
    FloatLiteral,
    FunctionDef,
    Identifier,
    IntLiteral,
    NameRef,
    StringLiteral,
    ValueNode,
)
from tagc.errors import AstFormatError


class _Decoder:
    def __init__(self, file: str | None = None) -> None:
        self._file = file

    def fail(self, message: str, path: str) -> AstFormatError:
        return AstFormatError(message, path, file=self._file)

    # ── Field access ───────────────────────────────────────────

    def obj(self, data: Any, path: str) -> dict[str, Any]:
        if not isinstance(data, dict):
            raise self.fail(f"expected an object, got {_kind(data)}", path)
        return data

    def field(self, data: dict[str, Any], key: str, path: str) -> Any:
        if key not in data:
            raise self.fail(f"missing field '{key}'", path)
        return data[key]

    def items(self, data: dict[str, Any], key: str, path: str) -> list[Any]:
        value = self.field(data, key, path)
        if not isinstance(value, list):
            raise self.fail(f"field '{key}' must be a list, got {_kind(value)}", path)
        return value

    def text(self, data: dict[str, Any], key: str, path: str) -> str:
        value = self.field(data, key, path)
        if not isinstance(value, str):
            raise self.fail(f"field '{key}' must be a string, got {_kind(value)}", path)
        return value

    def number_text(self, data: dict[str, Any], path: str, *, integral: bool) -> str:
        """Literal source text; JSON numbers are accepted and stringified."""
        value = self.field(data, "value", path)
        if isinstance(value, str):
            return value
        if isinstance(value, bool):
            raise self.fail("field 'value' must be a number, got boolean", path)
        if isinstance(value, int) or (not integral and isinstance(value, float)):
            return str(value)
        expected = "an integer" if integral else "a number"
        got = "float" if isinstance(value, float) else _kind(value)
        raise self.fail(f"field 'value' must be {expected}, got {got}", path)

    # ── Nodes ──────────────────────────────────────────────────

    def identifier(self, data: Any, path: str) -> Identifier:
        data = self.obj(data, path)
        line = data.get("line")
        if line is not None and (isinstance(line, bool) or not isinstance(line, int)):
            raise self.fail(f"field 'line' must be an integer, got {_kind(line)}", path)
        return Identifier(self.text(data, "value", path), line)

    def definition(self, data: Any, path: str) -> FunctionDef:
        data = self.obj(data, path)
        kind = data.get("type", "def")
        if kind != "def":
            raise self.fail(f"expected a definition, got node type '{kind}'", path)
        name = self.identifier(self.field(data, "name", path), f"{path}.name")
        args = [
            self.identifier(a, f"{path}.args[{i}]")
            for i, a in enumerate(self.items(data, "args", path))
        ]
        body: list[Call] = []
        for i, stmt in enumerate(self.items(data, "body", path)):
            stmt_path = f"{path}.body[{i}]"
            node = self.value(stmt, stmt_path)
            if not isinstance(node, Call):
                raise self.fail("body statements must be calls", stmt_path)
            body.append(node)
        return FunctionDef(name, args, body)

    def value(self, data: Any, path: str) -> ValueNode:
        data = self.obj(data, path)
        kind = self.field(data, "type", path)

        if kind == "int":
            return IntLiteral(self.number_text(data, path, integral=True))
        if kind == "float":
            return FloatLiteral(self.number_text(data, path, integral=False))
        if kind == "string":
            return StringLiteral(self.text(data, "value", path))
        if kind == "name":
            return NameRef(self.text(data, "value", path))
        if kind == "array":
            return ArrayLiteral([
                self.value(v, f"{path}.values[{i}]")
                for i, v in enumerate(self.items(data, "values", path))
            ])
        if kind == "branch":
            return Branch(
                self.value(self.field(data, "condition", path), f"{path}.condition"),
                self.value(self.field(data, "truthy", path), f"{path}.truthy"),
                self.value(self.field(data, "falsy", path), f"{path}.falsy"),
            )
        if kind == "call":
            return Call(
                self.identifier(self.field(data, "name", path), f"{path}.name"),
                [
                    self.value(a, f"{path}.args[{i}]")
                    for i, a in enumerate(self.items(data, "args", path))
                ],
            )
        raise self.fail(f"unknown node type {kind!r}", path)


def _kind(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "list"
    return "object"


def program_from_data(data: Any, *, file: str | None = None) -> list[FunctionDef]:
    """Decode already-parsed JSON data into a list of definitions."""
    dec = _Decoder(file)
    if isinstance(data, dict):
        data = dec.field(data, "program", "<root>")
    if not isinstance(data, list):
        raise dec.fail(f"expected a list of definitions, got {_kind(data)}", "program")
    return [dec.definition(d, f"program[{i}]") for i, d in enumerate(data)]


def loads_program(text: str, *, file: str | None = None) -> list[FunctionDef]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise AstFormatError(
            f"invalid JSON: {e.msg} (line {e.lineno}, column {e.colno})",
            "<root>",
            file=file,
        ) from e
    return program_from_data(data, file=file)


def load_program(path: Path) -> list[FunctionDef]:
    """Read a JSON AST file. Raises FileNotFoundError or AstFormatError."""
    return loads_program(path.read_text(), file=str(path))
