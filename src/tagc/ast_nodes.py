"""AST node definitions consumed by the C backend."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

# ── Identifiers ──────────────────────────────────────────────────


@dataclass(frozen=True)
class Identifier:
    value: str
    line: int | None = None  # only call sites carry a line


# ── Value expressions ────────────────────────────────────────────


@dataclass(frozen=True)
class IntLiteral:
    value: str  # source text, transcribed verbatim


@dataclass(frozen=True)
class FloatLiteral:
    value: str


@dataclass(frozen=True)
class StringLiteral:
    value: str


@dataclass(frozen=True)
class NameRef:
    value: str


@dataclass(frozen=True)
class ArrayLiteral:
    values: list[ValueNode]


@dataclass(frozen=True)
class Branch:
    condition: ValueNode
    truthy: ValueNode
    falsy: ValueNode


@dataclass(frozen=True)
class Call:
    name: Identifier
    args: list[ValueNode]


ValueNode = Union[
    IntLiteral,
    FloatLiteral,
    StringLiteral,
    NameRef,
    ArrayLiteral,
    Branch,
    Call,
]


# ── Declarations ─────────────────────────────────────────────────


@dataclass(frozen=True)
class FunctionDef:
    name: Identifier
    args: list[Identifier]
    body: list[Call]

