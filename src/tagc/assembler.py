"""Assemble runtime fragments and generated functions into one C unit."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from tagc.ast_nodes import FunctionDef
from tagc.c_emitter import DEFAULT_INDENT, CEmitter
from tagc.c_runtime import Fragment, RuntimeFragments
from tagc.errors import Diagnostic, Severity, TagcError
from tagc.symbols import BUILTINS, FunctionTable

logger = logging.getLogger(__name__)

_LOCAL_INCLUDE = re.compile(r'^\s*#\s*include\s*"([^"]+)"\s*$')


@dataclass
class CompileResult:
    """Outcome of compiling one program."""

    ok: bool
    text: str | None = None
    diagnostics: list[Diagnostic] = field(default_factory=list)


class _IncludeFilter:
    """Drops include directives made redundant by inlining.

    A ``#include "x.h"`` is redundant once fragment ``x.h`` is part of the
    unit. System includes are never touched. Matching is per directive
    line, so code that merely mentions a directive is left alone.
    """

    def __init__(self, inlined: set[str]) -> None:
        self._inlined = inlined
        self.removed = 0

    def apply(self, fragment: Fragment) -> str:
        kept: list[str] = []
        for line in fragment.text.split("\n"):
            if self._redundant(line):
                self.removed += 1
                continue
            kept.append(line)
        return "\n".join(kept)

    def _redundant(self, line: str) -> bool:
        m = _LOCAL_INCLUDE.match(line)
        return m is not None and m.group(1) in self._inlined


def assemble(
    program: list[FunctionDef],
    fragments: RuntimeFragments,
    *,
    indent: int = DEFAULT_INDENT,
) -> str:
    """Compile *program* and splice it into the runtime fragments.

    Raises CompileError on the first unresolved call; nothing is returned
    in that case.
    """
    table = FunctionTable.build(BUILTINS, program)
    logger.debug(
        "function table: %d entries (%d user-defined)",
        len(table), len(table.user_defined()),
    )
    emitter = CEmitter(table, indent=indent)

    forwards = emitter.emit_forwards()
    defs: list[str] = []
    for fd in program:
        defs.append(emitter.emit_def(fd))
        logger.debug("compiled %s/%d", fd.name.value, len(fd.args))
    body = "\n\n".join(defs)

    includes = _IncludeFilter({h.name for h in fragments.headers})
    headers = [includes.apply(h) for h in fragments.headers]
    sources = [includes.apply(s) for s in fragments.sources]
    entry = includes.apply(fragments.entry)
    logger.debug("removed %d redundant include directive(s)", includes.removed)

    before = "\n" + "\n".join(headers) + "\n" + "\n".join(sources)
    return f"{before}\n\n{forwards}\n\n{body}\n\n{entry}\n"


def compile_program(
    program: list[FunctionDef],
    fragments: RuntimeFragments,
    *,
    indent: int = DEFAULT_INDENT,
) -> CompileResult:
    """Like assemble(), but reports the outcome as a CompileResult.

    On failure the result carries the first error's diagnostic and no
    text. Functions shadowed by a built-in are reported as warnings.
    """
    table = FunctionTable.build(BUILTINS, program)
    warnings: list[Diagnostic] = []
    for entry in table.shadowed():
        winner = "an earlier definition" if table.lookup(entry.name).userdef else "the built-in"
        warnings.append(Diagnostic(
            Severity.WARNING,
            "W001",
            f"function '{entry.name}' is shadowed by {winner} of the same name",
            notes=[f"calls to '{entry.name}' resolve to {winner}"],
        ))
    for w in warnings:
        logger.warning(w.message)

    try:
        text = assemble(program, fragments, indent=indent)
    except TagcError as e:
        return CompileResult(ok=False, diagnostics=[*warnings, e.diagnostic])
    return CompileResult(ok=True, text=text, diagnostics=warnings)
