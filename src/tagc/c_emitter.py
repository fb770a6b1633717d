"""Generate C source for function definitions from a resolved function table."""

from __future__ import annotations

from tagc.ast_nodes import (
    ArrayLiteral,
    Branch,
    Call,
    FloatLiteral,
    FunctionDef,
    IntLiteral,
    NameRef,
    StringLiteral,
    ValueNode,
)
from tagc.c_names import (
    ARRAY_CTOR,
    ARRAY_TERMINATOR,
    FLOAT_CTOR,
    INT_CTOR,
    NONE_CTOR,
    STRING_CTOR,
    TRUTHY_FUNC,
    VALUE_TYPE,
    escape_c_string,
    mangle_name,
)
from tagc.errors import ArityError, UndefinedFunction
from tagc.symbols import FunctionTable

DEFAULT_INDENT = 4


class CEmitter:
    """Emit C for function definitions against a read-only function table.

    The table is the only state; every method is a pure translation of
    its argument.
    """

    def __init__(self, table: FunctionTable, *, indent: int = DEFAULT_INDENT) -> None:
        self._table = table
        self._indent = indent

    # ── Definitions ────────────────────────────────────────────

    def emit_def(self, fd: FunctionDef) -> str:
        """Compile one top-level definition into a C function."""
        name = mangle_name(fd.name.value)
        params = ", ".join(f"{VALUE_TYPE} {mangle_name(a.value)}" for a in fd.args)
        body = self.emit_body(fd.body)
        text = f"{VALUE_TYPE} {name}({params})\n{{\n\t{body}\n}}"
        return text.replace("\t", " " * self._indent)

    def emit_forwards(self) -> str:
        """Forward declarations for user-defined functions only."""
        lines: list[str] = []
        for entry in self._table.user_defined():
            params = ", ".join([VALUE_TYPE] * entry.argc)
            lines.append(f"{VALUE_TYPE} {mangle_name(entry.name)}({params});")
        return "\n".join(lines)

    # ── Bodies ─────────────────────────────────────────────────

    def emit_body(self, calls: list[Call]) -> str:
        """Compile a call sequence; the last call's value is returned."""
        stmts = [self.emit_call(c) for c in calls]
        if not stmts:
            return f"return {NONE_CTOR}();"
        lines = [f"{s};" for s in stmts[:-1]]
        lines.append(f"return {stmts[-1]};")
        return "\n\t".join(lines)

    # ── Expressions ────────────────────────────────────────────

    def emit_value(self, node: ValueNode) -> str:
        if isinstance(node, IntLiteral):
            return f"{INT_CTOR}({node.value})"

        if isinstance(node, FloatLiteral):
            return f"{FLOAT_CTOR}({node.value})"

        if isinstance(node, StringLiteral):
            return f'{STRING_CTOR}("{escape_c_string(node.value)}")'

        if isinstance(node, Call):
            return self.emit_call(node)

        if isinstance(node, NameRef):
            return mangle_name(node.value)

        if isinstance(node, ArrayLiteral):
            return self._emit_array(node)

        if isinstance(node, Branch):
            return self._emit_branch(node)

        raise TypeError(f"not a value node: {type(node).__name__}")

    def emit_call(self, node: Call) -> str:
        """Resolve the callee, check arity and emit a direct call.

        Supplying more arguments than the callee's arity is accepted;
        every argument is passed through.
        """
        name = node.name.value
        entry = self._table.lookup(name)
        if entry is None:
            raise UndefinedFunction(name)
        # Arguments resolve first, so an error inside them wins.
        args = [self.emit_value(a) for a in node.args]
        if len(args) < entry.argc:
            raise ArityError(name, node.name.line, entry.argc, len(args))
        return f"{mangle_name(name)}({', '.join(args)})"

    def _emit_array(self, node: ArrayLiteral) -> str:
        elems = [self.emit_value(v) for v in node.values]
        elems.append(ARRAY_TERMINATOR)
        return f"{ARRAY_CTOR}(({VALUE_TYPE} []) {{{', '.join(elems)}}})"

    def _emit_branch(self, node: Branch) -> str:
        cond = self.emit_value(node.condition)
        truthy = self.emit_value(node.truthy)
        falsy = self.emit_value(node.falsy)
        return f"{TRUTHY_FUNC}({cond}) ? {truthy} : {falsy}"
