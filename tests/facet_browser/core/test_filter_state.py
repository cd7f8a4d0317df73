from __future__ import annotations

from typing import List, Sequence, Tuple

import pytest

from facet_browser.core.dataset import Dataset
from facet_browser.core.exceptions import ConfigurationError
from facet_browser.core.facets import compute_options
from facet_browser.core.filter_state import FilterState, FilterStateManager, reconcile
from facet_browser.core.view import visible_rows


def _people() -> Dataset:
    return Dataset.from_records(
        [
            {"id": "1", "name": "Alice", "age": "30"},
            {"id": "2", "name": "Bob", "age": "25"},
            {"id": "3", "name": "Carol", "age": "30"},
        ],
        header=["id", "name", "age"],
        name="people",
    )


def _shapes() -> Dataset:
    header = ["id", "color", "size", "shape"]
    rows = [
        ("1", "red", "S", "circle"),
        ("2", "red", "M", "square"),
        ("3", "blue", "M", "circle"),
        ("4", "blue", "L", "triangle"),
        ("5", "green", "S", "square"),
        ("6", "green", "L", "circle"),
        ("7", "red", "L", "triangle"),
        ("8", "blue", "S", "square"),
    ]
    return Dataset.from_records([dict(zip(header, r)) for r in rows], header=header, name="shapes")


def _assert_reachable(ds: Dataset, state: FilterState) -> None:
    rows = ds.rows()
    for column, values in state.active():
        others = [(k, v) for k, v in state.active() if k != column]
        for value in values:
            assert any(
                row[column] == value and all(row[k] in v for k, v in others)
                for row in rows
            ), f"{column}={value!r} is unreachable in {state.to_dict()}"


# -----------------------------------------------------------------------------
# FilterState snapshot
# -----------------------------------------------------------------------------
def test_with_selection_dedupes_and_keeps_order():
    state = FilterState.empty(["a", "b"]).with_selection("a", ["y", "x", "y"])

    assert state.selected("a") == ("y", "x")
    assert state.keys() == ["a", "b"]


def test_bare_string_selection_is_a_single_value():
    manager = FilterStateManager(_people())

    state = manager.apply_filter("age", "30")

    assert state.to_dict() == {"name": [], "age": ["30"]}
    assert [r["id"] for r in manager.visible_rows()] == ["1", "3"]


def test_with_selection_does_not_mutate_original():
    original = FilterState.empty(["a"])
    original.with_selection("a", ["x"])

    assert original.selected("a") == ()
    assert original.is_clear


def test_missing_column_means_no_constraint():
    state = FilterState()
    assert state.selected("anything") == ()
    assert state.active() == []


def test_from_dict_drops_stale_keys_and_fills_missing():
    state = FilterState.from_dict({"name": ["Bob"], "colour": ["red"]}, ["name", "age"])

    assert state.to_dict() == {"name": ["Bob"], "age": []}


def test_from_dict_accepts_none():
    assert FilterState.from_dict(None, ["name"]).to_dict() == {"name": []}


# -----------------------------------------------------------------------------
# Update protocol
# -----------------------------------------------------------------------------
def test_scenario_from_people_dataset():
    ds = _people()
    manager = FilterStateManager(ds)

    manager.apply_filter("age", ["30"])
    assert [r["id"] for r in manager.visible_rows()] == ["1", "3"]
    assert compute_options(ds, manager.state, "name") == ["Alice", "Carol"]
    assert compute_options(ds, manager.state, "age") == ["25", "30"]

    state = manager.apply_filter("name", ["Bob"])
    assert state.to_dict() == {"name": ["Bob"], "age": []}
    assert manager.visible_rows() == [{"id": "2", "name": "Bob", "age": "25"}]


def test_edited_column_is_not_validated():
    ds = _people()
    manager = FilterStateManager(ds)
    manager.apply_filter("age", ["30"])

    state = manager.apply_filter("name", ["Zed"])

    assert state.selected("name") == ("Zed",)
    assert state.selected("age") == ()
    assert manager.visible_rows() == []


def test_edited_column_may_be_empty():
    ds = _people()
    manager = FilterStateManager(ds)
    manager.apply_filter("name", ["Alice"])

    state = manager.apply_filter("name", [])

    assert state.is_clear
    assert len(manager.visible_rows()) == 3


def test_phantom_values_never_survive_reconciliation_of_other_columns():
    ds = _people()
    state = FilterState.from_dict({"age": ["99", "30"]}, ds.filterable_keys)

    state = reconcile(ds, state, "name", ["Alice"])

    assert state.selected("age") == ("30",)


def test_reconciliation_preserves_remaining_order():
    ds = _shapes()
    manager = FilterStateManager(ds)
    manager.apply_filter("color", ["blue", "red"])
    manager.apply_filter("size", ["S", "M"])

    state = manager.apply_filter("shape", ["circle"])

    assert state.selected("color") == ("blue", "red")
    assert state.selected("size") == ("S", "M")


def test_reconciliation_uses_tentative_state_for_every_column():
    ds = _shapes()
    manager = FilterStateManager(ds)
    manager.apply_filter("color", ["green", "red"])
    manager.apply_filter("shape", ["square", "triangle"])

    # size=M leaves only row 2 (red, M, square)
    state = manager.apply_filter("size", ["M"])

    assert state.selected("color") == ("red",)
    assert state.selected("shape") == ("square",)
    _assert_reachable(ds, state)


@pytest.mark.parametrize("key", ["id", "height", ""])
def test_unknown_filter_key_is_rejected(key):
    manager = FilterStateManager(_people())
    before = manager.state

    with pytest.raises(ConfigurationError):
        manager.apply_filter(key, ["x"])
    assert manager.state == before


def test_apply_filter_is_idempotent():
    ds = _shapes()
    manager = FilterStateManager(ds)
    manager.apply_filter("color", ["red", "blue"])

    once = manager.apply_filter("size", ["L"])
    twice = manager.apply_filter("size", ["L"])

    assert once == twice


def test_final_rows_do_not_depend_on_filter_order():
    ds = _shapes()

    first = FilterStateManager(ds)
    first.apply_filter("color", ["red"])
    first.apply_filter("size", ["L"])

    second = FilterStateManager(ds)
    second.apply_filter("size", ["L"])
    second.apply_filter("color", ["red"])

    assert first.visible_rows() == second.visible_rows() == [
        {"id": "7", "color": "red", "size": "L", "shape": "triangle"}
    ]


Step = Tuple[str, Sequence[int]]

SEQUENCES: List[List[Step]] = [
    [("color", [0, 2]), ("size", [0]), ("shape", [0, 1])],
    [("shape", [1]), ("color", [0, 1, 2]), ("size", [1]), ("shape", [0])],
    [("size", [0, 1]), ("color", [1]), ("clear", []), ("shape", [2]), ("color", [0])],
    [("color", [2]), ("size", [2]), ("color", [0]), ("shape", [0]), ("size", [0, 1, 2])],
]


@pytest.mark.parametrize("steps", SEQUENCES)
def test_reachability_holds_after_any_sequence(steps):
    ds = _shapes()
    manager = FilterStateManager(ds)

    for column, picks in steps:
        if column == "clear":
            manager.clear_all()
            continue
        options = compute_options(ds, manager.state, column)
        chosen = [options[i] for i in picks if i < len(options)]
        manager.apply_filter(column, chosen)
        _assert_reachable(ds, manager.state)


def test_clear_all_restores_every_row():
    ds = _shapes()
    manager = FilterStateManager(ds)
    manager.apply_filter("color", ["red"])
    manager.apply_filter("size", ["L"])

    state = manager.clear_all()

    assert state.to_dict() == {"color": [], "size": [], "shape": []}
    assert manager.visible_rows() == ds.rows()


def test_dataset_switch_resets_everything():
    manager = FilterStateManager(_people())
    manager.apply_filter("name", ["Alice"])

    other = Dataset.from_records(
        [{"id": "9", "name": "Alice", "city": "Oslo"}],
        header=["id", "name", "city"],
    )
    state = manager.on_dataset_switch(other)

    assert state.to_dict() == {"name": [], "city": []}
    assert manager.dataset is other
    assert manager.visible_rows() == other.rows()


def test_empty_dataset_prunes_every_other_column():
    ds = Dataset.from_records([], header=["id", "name", "age"])
    state = FilterState.from_dict({"age": ["30"]}, ds.filterable_keys)

    state = reconcile(ds, state, "name", ["Alice"])

    assert state.to_dict() == {"name": ["Alice"], "age": []}
    assert visible_rows(ds, state) == []


def test_manager_without_dataset_columns_is_usable():
    manager = FilterStateManager(Dataset.empty())

    assert manager.all_options() == {}
    assert manager.visible_rows() == []
    assert manager.clear_all() == FilterState()
