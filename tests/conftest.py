"""Shared pytest fixtures for the tagc test suite."""

from __future__ import annotations

import json

import pytest

from tagc.c_runtime import RuntimeFragments, load_runtime
from tests.helpers import HELLO_PROGRAM, RUNTIME_TEXTS


@pytest.fixture
def runtime_dir(tmp_path):
    """A directory holding all six runtime fragments."""
    d = tmp_path / "runtime"
    d.mkdir()
    for fname, text in RUNTIME_TEXTS.items():
        (d / fname).write_text(text)
    return d


@pytest.fixture
def fragments() -> RuntimeFragments:
    return RuntimeFragments.from_texts(RUNTIME_TEXTS)


@pytest.fixture
def loaded_fragments(runtime_dir) -> RuntimeFragments:
    return load_runtime(runtime_dir)


@pytest.fixture
def program_file(tmp_path):
    path = tmp_path / "program.json"
    path.write_text(json.dumps(HELLO_PROGRAM))
    return path


@pytest.fixture
def tmp_project(tmp_path, runtime_dir):
    """Create a minimal tagc project in a temp dir."""
    (tmp_path / "tagc.toml").write_text(
        '[package]\nname = "hello"\nversion = "1.0.0"\n'
        '[build]\nprogram = "program.json"\nruntime = "runtime"\n'
    )
    (tmp_path / "program.json").write_text(json.dumps(HELLO_PROGRAM))
    return tmp_path
