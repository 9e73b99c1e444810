"""Tests for run-scoped category assignment."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from note_graph.analysis.categories import CategoryAssigner
from note_graph.analysis.graph_model import Category


def _assign_all(keys: list[str]) -> dict[str, int]:
    assigner = CategoryAssigner()
    for key in keys:
        assigner.assign(key)
    return {category.name: category.id for category in assigner.categories()}


def test_ids_follow_first_seen_order() -> None:
    assert _assign_all(["a/", "b/", "a/"]) == {"a/": 0, "b/": 1}
    assert _assign_all(["b/", "a/"]) == {"b/": 0, "a/": 1}


def test_existing_key_keeps_its_id() -> None:
    assigner = CategoryAssigner()

    assert assigner.assign("notes/") == 0
    assert assigner.assign("journal/") == 1
    assert assigner.assign("notes/") == 0
    assert len(assigner) == 2
    assert "journal/" in assigner
    assert assigner.lookup("journal/") == 1
    assert assigner.lookup("missing/") is None


def test_categories_sorted_by_id() -> None:
    assigner = CategoryAssigner.from_keys(["z/", "a/", "m/", "a/"])

    assert assigner.categories() == [Category("z/", 0), Category("a/", 1), Category("m/", 2)]


def test_fresh_assigners_do_not_share_state() -> None:
    CategoryAssigner().assign("a/")

    assert len(CategoryAssigner()) == 0


def test_concurrent_assignment_is_dense_and_consistent() -> None:
    assigner = CategoryAssigner()
    keys = [f"dir{idx % 25}/" for idx in range(500)]

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(assigner.assign, keys))

    ids = sorted({category.id for category in assigner.categories()})
    assert ids == list(range(25))
    for key, category_id in zip(keys, results):
        assert assigner.lookup(key) == category_id


def test_size_and_membership_during_concurrent_assignment() -> None:
    assigner = CategoryAssigner()
    keys = [f"dir{idx % 10}/" for idx in range(200)]

    def assign_and_check(key: str) -> bool:
        assigner.assign(key)
        return key in assigner and 1 <= len(assigner) <= 10

    with ThreadPoolExecutor(max_workers=8) as pool:
        assert all(pool.map(assign_and_check, keys))
    assert len(assigner) == 10
