"""Run-scoped assignment of category ids to grouping keys."""

from __future__ import annotations

import threading
from typing import Iterable

from note_graph.analysis.graph_model import Category


class CategoryAssigner:
    """
    Map grouping keys to dense integer ids in first-seen order.

    One instance covers one pipeline run. Ids are never reassigned, and
    :meth:`assign` is the single place where they are allocated; the lock
    keeps allocation consistent when callers run on several threads.
    """

    def __init__(self) -> None:
        self._ids: dict[str, int] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_keys(cls, keys: Iterable[str]) -> "CategoryAssigner":
        """Pre-assign ids for ``keys`` in iteration order."""

        assigner = cls()
        for key in keys:
            assigner.assign(key)
        return assigner

    def assign(self, key: str) -> int:
        with self._lock:
            category_id = self._ids.get(key)
            if category_id is None:
                category_id = len(self._ids)
                self._ids[key] = category_id
            return category_id

    def lookup(self, key: str) -> int | None:
        with self._lock:
            return self._ids.get(key)

    def categories(self) -> list[Category]:
        """Categories sorted by id, which is also their discovery order."""

        with self._lock:
            items = sorted(self._ids.items(), key=lambda item: item[1])
        return [Category(name=name, id=category_id) for name, category_id in items]

    def __len__(self) -> int:
        with self._lock:
            return len(self._ids)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._ids


__all__ = ["CategoryAssigner"]
