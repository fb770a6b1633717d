"""Function table: name -> arity and provenance, for call resolution."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from tagc.ast_nodes import FunctionDef


@dataclass(frozen=True)
class FunctionEntry:
    name: str
    argc: int
    userdef: bool = False


# Functions implemented by builtins.c. Generated programs link against
# these exact names and arities.
BUILTINS: tuple[FunctionEntry, ...] = (
    FunctionEntry("null", 0),
    FunctionEntry("false", 0),
    FunctionEntry("true", 0),
    FunctionEntry("add", 2),
    FunctionEntry("sub", 2),
    FunctionEntry("mul", 2),
    FunctionEntry("div", 2),
    FunctionEntry("mod", 2),
    FunctionEntry("pow", 2),
    FunctionEntry("sqrt", 1),
    FunctionEntry("string", 1),
    FunctionEntry("at", 2),
    FunctionEntry("length", 1),
    FunctionEntry("join", 2),
    FunctionEntry("split", 2),
    FunctionEntry("map", 1),
    FunctionEntry("reduce", 3),
    FunctionEntry("reduceRight", 3),
    FunctionEntry("repeat", 2),
    FunctionEntry("if", 3),
    FunctionEntry("return", 1),
    FunctionEntry("print", 1),
    FunctionEntry("input", 1),
)


def user_entries(program: Iterable[FunctionDef]) -> list[FunctionEntry]:
    """One entry per top-level definition, in source order."""
    return [
        FunctionEntry(d.name.value, len(d.args), userdef=True)
        for d in program
    ]


class FunctionTable:
    """Read-only, ordered registry of callable functions.

    Lookup is first-match in iteration order, and built-ins always come
    first. A user definition that reuses a built-in's name stays in the
    table (it still gets a forward declaration) but every call to that
    name resolves to the built-in.
    """

    def __init__(self, entries: Iterable[FunctionEntry]) -> None:
        self._entries: tuple[FunctionEntry, ...] = tuple(entries)

    @classmethod
    def build(
        cls,
        builtins: Iterable[FunctionEntry],
        program: Iterable[FunctionDef],
    ) -> FunctionTable:
        return cls([*builtins, *user_entries(program)])

    def __iter__(self) -> Iterator[FunctionEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def lookup(self, name: str) -> FunctionEntry | None:
        for entry in self._entries:
            if entry.name == name:
                return entry
        return None

    def user_defined(self) -> list[FunctionEntry]:
        return [e for e in self._entries if e.userdef]

    def shadowed(self) -> list[FunctionEntry]:
        """User entries hidden by an earlier entry with the same name."""
        return [
            e for e in self._entries
            if e.userdef and self.lookup(e.name) is not e
        ]
