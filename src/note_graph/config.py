"""Configuration primitives for the project."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_EXTENSION = ".md"
DEFAULT_OUTPUT = Path("graph.html")
DEFAULT_TITLE = "Note Graph"


def normalize_extension(extension: str) -> str:
    """Return ``extension`` with exactly one leading dot (``md`` -> ``.md``)."""

    extension = extension.strip()
    if not extension:
        raise ValueError("Note extension must not be empty.")
    return "." + extension.lstrip(".")


@dataclass(slots=True)
class GraphConfig:
    """Settings guiding a single graph build over a vault of notes."""

    root: Path
    extension: str = DEFAULT_EXTENSION
    output: Path = DEFAULT_OUTPUT
    workers: int = 1
    title: str = DEFAULT_TITLE
    skip_hidden: bool = True

    def __post_init__(self) -> None:
        self.root = Path(self.root)
        self.output = Path(self.output)
        self.extension = normalize_extension(self.extension)
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1 (got {self.workers}).")

    @classmethod
    def from_root(
        cls,
        root: Path,
        *,
        extension: str = DEFAULT_EXTENSION,
        output: Path | None = None,
        workers: int = 1,
        title: str = DEFAULT_TITLE,
        skip_hidden: bool = True,
    ) -> "GraphConfig":
        """Factory helper that resolves the vault root and fills in defaults."""

        return cls(
            root=Path(root).expanduser().resolve(),
            extension=extension,
            output=output if output is not None else DEFAULT_OUTPUT,
            workers=workers,
            title=title,
            skip_hidden=skip_hidden,
        )
