"""Shared fixtures for the test suite."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Mapping, Union

import pytest

os.environ.setdefault("MPLBACKEND", "Agg")

NoteContent = Union[str, bytes]


@pytest.fixture
def make_vault(tmp_path: Path) -> Callable[[Mapping[str, NoteContent]], Path]:
    """Create a vault under ``tmp_path`` from a mapping of relative paths to note content."""

    def _make(files: Mapping[str, NoteContent]) -> Path:
        root = tmp_path / "vault"
        root.mkdir(exist_ok=True)
        for relative, content in files.items():
            target = root / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                target.write_bytes(content)
            else:
                target.write_text(content, encoding="utf-8")
        return root

    return _make


@pytest.fixture
def two_note_vault(make_vault) -> Path:
    return make_vault(
        {
            "a/one.md": "# One\n\nLinks to [[two]].\n",
            "a/two.md": "# Two\n\nNo links here.\n",
        }
    )
