"""tagc command-line interface."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from tagc import __version__
from tagc.ast_json import load_program
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
from tagc.errors import DiagnosticRenderer, TagcError


@click.group()
@click.version_option(__version__, prog_name="tagc")
@click.option("-v", "--verbose", is_flag=True, help="Log pipeline steps to stderr.")
def main(verbose: bool) -> None:
    """C backend for tagged-value programs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("program", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--runtime", "runtime_dir", required=True,
    type=click.Path(exists=True, file_okay=False),
    help="Directory holding the runtime fragments.",
)
@click.option("-o", "--output", type=click.Path(dir_okay=False), default=None,
              help="Write the C unit here instead of stdout.")
@click.option("--indent", type=click.IntRange(min=0), default=4, show_default=True,
              help="Spaces per indentation level.")
def emit(program: str, runtime_dir: str, output: str | None, indent: int) -> None:
    """Compile a JSON AST into a single C translation unit."""
    from tagc.assembler import compile_program
    from tagc.c_runtime import load_runtime

    renderer = DiagnosticRenderer(color=True)
    try:
        defs = load_program(Path(program))
        fragments = load_runtime(Path(runtime_dir))
    except TagcError as e:
        click.echo(renderer.render(e.diagnostic), err=True)
        raise SystemExit(1)

    result = compile_program(defs, fragments, indent=indent)
    for diag in result.diagnostics:
        click.echo(renderer.render(diag), err=True)
    if not result.ok or result.text is None:
        raise SystemExit(1)

    if output is None:
        click.echo(result.text, nl=False)
    else:
        Path(output).write_text(result.text)
        click.echo(f"wrote {output}", err=True)


@main.command()
@click.argument("path", default=".", type=click.Path(exists=True))
def build(path: str) -> None:
    """Build a tagc project described by tagc.toml."""
    from tagc.builder import build_project
    from tagc.config import find_config, load_config

    try:
        config_path = find_config(Path(path))
    except FileNotFoundError:
        click.echo("error: no tagc.toml found", err=True)
        raise SystemExit(1)

    renderer = DiagnosticRenderer(color=True)
    try:
        config = load_config(config_path)
    except TagcError as e:
        click.echo(renderer.render(e.diagnostic), err=True)
        raise SystemExit(1)
    click.echo(f"building {config.package.name}...")

    result = build_project(config_path.parent, config)
    for diag in result.diagnostics:
        click.echo(renderer.render(diag), err=True)

    if not result.ok:
        raise SystemExit(1)
    click.echo(f"built {config.package.name} -> {result.output}")


@main.command()
def builtins() -> None:
    """List the built-in functions and their arities."""
    from tagc.symbols import BUILTINS

    width = max(len(e.name) for e in BUILTINS)
    for entry in BUILTINS:
        click.echo(f"{entry.name:<{width}}  {entry.argc}")


@main.command()
@click.argument("program", type=click.Path(exists=True, dir_okay=False))
def view(program: str) -> None:
    """View the AST of a JSON program."""
    try:
        defs = load_program(Path(program))
    except TagcError as e:
        renderer = DiagnosticRenderer(color=True)
        click.echo(renderer.render(e.diagnostic), err=True)
        raise SystemExit(1)

    for fd in defs:
        _dump_def(fd)


def _dump_def(fd: FunctionDef) -> None:
    """Print one definition and its call tree, one node per line."""
    params = ", ".join(a.value for a in fd.args)
    click.echo(f"def {fd.name.value}({params})")
    if not fd.body:
        click.echo("  (empty body)")
    for call in fd.body:
        _dump_value(call, 1)


def _dump_value(node: ValueNode, depth: int) -> None:
    indent = "  " * depth

    if isinstance(node, Call):
        line = f"  [line {node.name.line}]" if node.name.line is not None else ""
        click.echo(f"{indent}call {node.name.value}/{len(node.args)}{line}")
        for arg in node.args:
            _dump_value(arg, depth + 1)
    elif isinstance(node, ArrayLiteral):
        click.echo(f"{indent}array ({len(node.values)})")
        for v in node.values:
            _dump_value(v, depth + 1)
    elif isinstance(node, Branch):
        click.echo(f"{indent}branch")
        for label, arm in (("if", node.condition), ("then", node.truthy), ("else", node.falsy)):
            click.echo(f"{indent}  {label}:")
            _dump_value(arm, depth + 2)
    elif isinstance(node, StringLiteral):
        click.echo(f"{indent}string {node.value!r}")
    elif isinstance(node, IntLiteral):
        click.echo(f"{indent}int {node.value}")
    elif isinstance(node, FloatLiteral):
        click.echo(f"{indent}float {node.value}")
    elif isinstance(node, NameRef):
        click.echo(f"{indent}name {node.value}")
