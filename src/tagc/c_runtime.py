"""Load the C runtime fragments spliced around generated code."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from tagc.errors import RuntimeFragmentError

logger = logging.getLogger(__name__)

# Headers are inlined ahead of the sources, in this order.
HEADER_FILES = ("utils.h", "value.h")
SOURCE_FILES = ("utils.c", "value.c", "builtins.c")
ENTRY_FILE = "entry.c"

_RUNTIME_FILES = (*HEADER_FILES, *SOURCE_FILES, ENTRY_FILE)


@dataclass(frozen=True)
class Fragment:
    """One runtime file, kept as opaque text."""

    name: str
    text: str


@dataclass(frozen=True)
class RuntimeFragments:
    headers: tuple[Fragment, ...]
    sources: tuple[Fragment, ...]
    entry: Fragment

    @classmethod
    def from_texts(cls, texts: dict[str, str]) -> RuntimeFragments:
        """Build from a ``{file name: text}`` mapping holding every runtime file."""
        missing = [n for n in _RUNTIME_FILES if n not in texts]
        if missing:
            raise RuntimeFragmentError(
                f"missing runtime fragment(s): {', '.join(missing)}"
            )
        return cls(
            headers=tuple(Fragment(n, texts[n]) for n in HEADER_FILES),
            sources=tuple(Fragment(n, texts[n]) for n in SOURCE_FILES),
            entry=Fragment(ENTRY_FILE, texts[ENTRY_FILE]),
        )


def load_runtime(runtime_dir: Path) -> RuntimeFragments:
    """Read all runtime fragments from *runtime_dir*.

    Raises RuntimeFragmentError if the directory or any file is missing.
    """
    if not runtime_dir.is_dir():
        raise RuntimeFragmentError(
            f"runtime directory not found: {runtime_dir}", file=str(runtime_dir),
        )

    texts: dict[str, str] = {}
    for name in _RUNTIME_FILES:
        path = runtime_dir / name
        try:
            texts[name] = path.read_text()
        except OSError as e:
            raise RuntimeFragmentError(
                f"cannot read runtime fragment '{name}': {e.strerror or e}",
                file=str(path),
            ) from e
        logger.debug("loaded runtime fragment %s (%d bytes)", path, len(texts[name]))

    return RuntimeFragments.from_texts(texts)
