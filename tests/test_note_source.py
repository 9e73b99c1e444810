"""Tests for note discovery and identity helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from note_graph.io.note_source import discover_notes, grouping_key, note_id, read_note


def test_discover_filters_by_extension_and_sorts(make_vault) -> None:
    root = make_vault(
        {
            "z.md": "z",
            "b/two.md": "two",
            "a/one.md": "one",
            "a/image.png": b"\x89PNG",
            "notes.txt": "not a note",
        }
    )

    ids = [note_id(path, root) for path in discover_notes(root)]

    assert ids == ["a/one.md", "b/two.md", "z.md"]


def test_hidden_directories_are_skipped(make_vault) -> None:
    root = make_vault({".obsidian/workspace.md": "x", "visible.md": "y"})

    assert [note_id(path, root) for path in discover_notes(root)] == ["visible.md"]
    assert len(discover_notes(root, skip_hidden=False)) == 2


def test_custom_extension(make_vault) -> None:
    root = make_vault({"a.markdown": "x", "b.md": "y"})

    assert [path.name for path in discover_notes(root, extension=".markdown")] == ["a.markdown"]


def test_missing_root(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        discover_notes(tmp_path / "absent")


@pytest.mark.parametrize(
    ("identifier", "expected"),
    [("a/one.md", "a/"), ("a/b/c.md", "a/b/"), ("index.md", "./")],
)
def test_grouping_key(identifier: str, expected: str) -> None:
    assert grouping_key(identifier) == expected


def test_read_note_returns_bytes(make_vault) -> None:
    root = make_vault({"n.md": "héllo"})

    assert read_note(root / "n.md") == "héllo".encode("utf-8")
