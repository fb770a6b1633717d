"""Diagnostics, their colored rendering, and the compiler's error classes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"
    NOTE = "note"


# ANSI color codes
_COLORS = {
    Severity.ERROR: "\033[1;31m",    # bold red
    Severity.WARNING: "\033[1;33m",  # bold yellow
    Severity.NOTE: "\033[1;36m",     # bold cyan
}
_BOLD = "\033[1m"
_BLUE = "\033[1;34m"
_RESET = "\033[0m"


@dataclass
class Diagnostic:
    """A single diagnostic message, located by at most one source line."""

    severity: Severity
    code: str
    message: str
    line: int | None = None
    file: str | None = None
    notes: list[str] = field(default_factory=list)


class DiagnosticRenderer:
    """Renders diagnostics in Rust-style format with colors."""

    def __init__(self, *, color: bool = True) -> None:
        self.color = color

    def _c(self, code: str) -> str:
        return code if self.color else ""

    def render(self, diag: Diagnostic) -> str:
        lines: list[str] = []
        color = _COLORS[diag.severity]

        # Header: error[E002]: message
        lines.append(
            f"{self._c(color)}{diag.severity.value}[{diag.code}]{self._c(_RESET)}"
            f"{self._c(_BOLD)}: {diag.message}{self._c(_RESET)}"
        )

        if diag.file is not None or diag.line is not None:
            loc = diag.file or "<program>"
            if diag.line is not None:
                loc = f"{loc}:{diag.line}"
            lines.append(f"  {self._c(_BLUE)}-->{self._c(_RESET)} {loc}")

        for note in diag.notes:
            lines.append(f"  {self._c(_BLUE)}={self._c(_RESET)} note: {note}")

        return "\n".join(lines)


class TagcError(Exception):
    """Base error carrying a single diagnostic."""

    code = "E000"

    def __init__(
        self, message: str, *, line: int | None = None, file: str | None = None,
    ) -> None:
        self.diagnostic = Diagnostic(
            Severity.ERROR, self.code, message, line=line, file=file,
        )
        super().__init__(message)


class CompileError(TagcError):
    """Raised during call resolution; aborts the whole compilation."""


class UndefinedFunction(CompileError):
    code = "E001"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"function '{name}' not defined")


class ArityError(CompileError):
    code = "E002"

    def __init__(self, name: str, line: int | None, expected: int, got: int) -> None:
        self.name = name
        self.line = line
        self.expected = expected
        self.got = got
        super().__init__(
            f"not enough arguments to '{name}' on line {line} "
            f"(expected {expected}, got {got})",
            line=line,
        )


class AstFormatError(TagcError):
    """The AST handed over by the parser does not have the expected shape."""

    code = "E100"

    def __init__(self, message: str, path: str, *, file: str | None = None) -> None:
        self.path = path
        super().__init__(f"{path}: {message}", file=file)


class RuntimeFragmentError(TagcError):
    """A runtime fragment file is missing or unreadable."""

    code = "E200"

    def __init__(self, message: str, *, file: str | None = None) -> None:
        super().__init__(message, file=file)


class ConfigError(TagcError):
    """A tagc.toml value has the wrong type or range."""

    code = "E300"

    def __init__(self, message: str, *, file: str | None = None) -> None:
        super().__init__(message, file=file)
