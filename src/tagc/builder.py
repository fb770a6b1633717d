"""Project build pipeline: JSON AST + runtime fragments -> one C file."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from tagc.assembler import compile_program
from tagc.ast_json import load_program
from tagc.c_runtime import load_runtime
from tagc.config import TagcConfig
from tagc.errors import Diagnostic, Severity, TagcError

logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    """Outcome of a build."""

    ok: bool
    output: Path | None = None
    diagnostics: list[Diagnostic] = field(default_factory=list)


def build_project(project_dir: Path, config: TagcConfig) -> BuildResult:
    """Run the full pipeline: load AST -> load runtime -> compile -> write.

    The output file is only written when compilation succeeds.
    """
    program_path = project_dir / config.build.program
    runtime_dir = project_dir / config.build.runtime

    if not program_path.is_file():
        return BuildResult(ok=False, diagnostics=[Diagnostic(
            Severity.ERROR,
            "E101",
            f"program file not found: {program_path}",
            file=str(program_path),
        )])

    try:
        program = load_program(program_path)
        fragments = load_runtime(runtime_dir)
    except TagcError as e:
        return BuildResult(ok=False, diagnostics=[e.diagnostic])
    logger.debug("loaded %d definition(s) from %s", len(program), program_path)

    result = compile_program(program, fragments, indent=config.build.indent)
    if not result.ok:
        return BuildResult(ok=False, diagnostics=result.diagnostics)

    out_dir = project_dir / config.build.out_dir
    out_dir.mkdir(parents=True, exist_ok=True)
    output = out_dir / f"{config.package.name or 'a'}.c"
    output.write_text(result.text or "")
    logger.debug("wrote %s", output)

    return BuildResult(ok=True, output=output, diagnostics=result.diagnostics)
