"""Discovery and reading of note files inside a vault directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path, PurePosixPath
from typing import Iterator, List

from note_graph.config import DEFAULT_EXTENSION

LOGGER = logging.getLogger(__name__)

ROOT_GROUP = "./"


def _is_hidden(name: str) -> bool:
    return name.startswith(".")


def iter_note_files(root: Path, *, extension: str = DEFAULT_EXTENSION, skip_hidden: bool = True) -> Iterator[Path]:
    """Yield files under ``root`` whose suffix matches ``extension``."""

    root = Path(root)

    def _on_error(exc: OSError) -> None:
        LOGGER.warning("Error accessing path %s: %s", exc.filename, exc)

    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
        if skip_hidden:
            dirnames[:] = [name for name in dirnames if not _is_hidden(name)]
        for filename in filenames:
            if skip_hidden and _is_hidden(filename):
                continue
            if Path(filename).suffix == extension:
                yield Path(dirpath) / filename


def discover_notes(root: Path, *, extension: str = DEFAULT_EXTENSION, skip_hidden: bool = True) -> List[Path]:
    """
    Return every note under ``root`` sorted by its vault-relative id.

    The sort fixes the processing order, which in turn fixes category ids, so
    repeated runs over an unchanged vault produce identical output.
    """

    root = Path(root)
    if not root.is_dir():
        raise FileNotFoundError(f"Vault root {root} is not a directory.")
    notes = list(iter_note_files(root, extension=extension, skip_hidden=skip_hidden))
    notes.sort(key=lambda path: note_id(path, root))
    return notes


def note_id(path: Path, root: Path) -> str:
    """Vault-relative POSIX path used as the node identity."""

    relative = Path(path).relative_to(root)
    return PurePosixPath(*relative.parts).as_posix()


def grouping_key(identifier: str) -> str:
    """Directory portion of a note id (``a/b/c.md`` -> ``a/b/``; root notes -> ``./``)."""

    parent = PurePosixPath(identifier).parent.as_posix()
    if parent in ("", "."):
        return ROOT_GROUP
    return f"{parent}/"


def read_note(path: Path) -> bytes:
    """Return the raw bytes of a note; ``OSError`` propagates to the caller."""

    with Path(path).open("rb") as handle:
        return handle.read()


__all__ = ["ROOT_GROUP", "discover_notes", "grouping_key", "iter_note_files", "note_id", "read_note"]
