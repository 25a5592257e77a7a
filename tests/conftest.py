"""Shared fixtures for colextract tests.

Provides factory fixtures for writing input files and YAML configs, and for invoking the CLI entry point
programmatically.
"""

from __future__ import annotations

import io
import textwrap
from pathlib import Path

import pytest

from colextract.cli import main

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def make_input(tmp_path: Path):
    """Factory fixture: write an input file into the test's tmp_path."""

    def _factory(content: str, name: str = "input.txt") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _factory


@pytest.fixture
def make_yaml(tmp_path: Path):
    """Factory fixture: write a YAML config file into the test's tmp_path."""

    def _factory(yaml_text: str, name: str = "config.yaml") -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(yaml_text), encoding="utf-8")
        return path

    return _factory


@pytest.fixture
def fake_stdin(monkeypatch):
    """Factory fixture: replace ``sys.stdin`` with the given text."""

    def _factory(content: str) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO(content))

    return _factory


@pytest.fixture
def run_colextract(capsys):
    """Factory fixture: invoke ``colextract.cli.main()`` and return ``(exit_code, stdout)``."""

    def _factory(args: list[str]) -> tuple[int, str]:
        exit_code = main(args)
        return exit_code, capsys.readouterr().out

    return _factory
