"""
tests.test_sort_index

Ordered index: sorted traversal, collisions on the sort key, and prefix-aware ranges.
"""

from __future__ import annotations

from contact_store.store.sort_index import SortIndex


def _index(*entries: tuple[str, str]) -> SortIndex[str]:
    idx: SortIndex[str] = SortIndex()
    for sort_key, contact_id in entries:
        idx.put(sort_key, contact_id, f"{sort_key}#{contact_id}")
    return idx


def test_values_are_ascending_with_id_tiebreak() -> None:
    idx = _index(("Smith, Ann", "2"), ("Doe, John", "9"), ("Doe, John", "3"), ("Brown, Al", "1"))

    assert idx.values() == [
        "Brown, Al#1",
        "Doe, John#3",
        "Doe, John#9",
        "Smith, Ann#2",
    ]
    assert len(idx) == 4


def test_put_same_key_overwrites_value() -> None:
    idx = _index(("Doe, John", "1"))
    idx.put("Doe, John", "1", "replaced")

    assert len(idx) == 1
    assert idx.get("Doe, John", "1") == "replaced"


def test_remove() -> None:
    idx = _index(("Doe, Jane", "1"), ("Doe, John", "2"))

    assert idx.remove("Doe, Jane", "1") is True
    assert idx.remove("Doe, Jane", "1") is False
    assert idx.keys() == [("Doe, John", "2")]
    assert ("Doe, John", "2") in idx


def test_range_includes_keys_prefixed_by_upper_bound() -> None:
    idx = _index(("Adams, Zoe", "1"), ("Doe, Jane", "2"), ("Doe, John", "3"), ("Doex, Al", "4"))

    assert idx.range("Doe", "Doe") == ["Doe, Jane#2", "Doe, John#3", "Doex, Al#4"]
    assert idx.range("Doe, John", "Doe, John") == ["Doe, John#3"]
    assert idx.range("A", "C") == ["Adams, Zoe#1"]


def test_range_bounds_are_inclusive_and_inverted_range_is_empty() -> None:
    idx = _index(("B", "1"), ("C", "2"), ("D", "3"))

    assert idx.range("B", "D") == ["B#1", "C#2", "D#3"]
    assert idx.range("D", "B") == []
    assert idx.range("E", "Z") == []


def test_clear() -> None:
    idx = _index(("B", "1"))
    idx.clear()

    assert len(idx) == 0
    assert idx.values() == []


# --- Module Notes -----------------------------------------------------------
# Values are tagged strings so ordering failures show which key moved.
