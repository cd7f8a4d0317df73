from __future__ import annotations

import pytest

from facet_browser.core.type_inference import (
    ColumnKind,
    format_column_label,
    infer_column_kind,
    parse_number,
    sort_values,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("12", 12.0),
        (" 12 ", 12.0),
        ("-3.5", -3.5),
        ("1e3", 1000.0),
        ("", None),
        ("   ", None),
        ("abc", None),
        ("nan", None),
        (".5", 0.5),
        ("7.", 7.0),
        ("0x1F", 31.0),
        ("Infinity", float("inf")),
        ("-Infinity", float("-inf")),
        ("1_000", None),
        ("inf", None),
        ("infinity", None),
        ("NaN", None),
        ("1,000", None),
    ],
)
def test_parse_number(raw, expected):
    assert parse_number(raw) == expected


def test_infer_number_at_eighty_percent():
    # 4 of 5 numeric is exactly 80%
    assert infer_column_kind(["1", "2", "3", "4", "x"]) is ColumnKind.NUMBER


def test_infer_text_below_threshold():
    assert infer_column_kind(["1", "2", "x"]) is ColumnKind.TEXT


def test_infer_ignores_empty_values():
    assert infer_column_kind(["", "", "7", ""]) is ColumnKind.NUMBER


def test_infer_empty_column_is_text():
    assert infer_column_kind([]) is ColumnKind.TEXT
    assert infer_column_kind(["", ""]) is ColumnKind.TEXT


def test_infer_only_samples_first_hundred_values():
    values = [str(i) for i in range(100)] + ["text"] * 500
    assert infer_column_kind(values) is ColumnKind.NUMBER

    values = ["text"] * 100 + [str(i) for i in range(500)]
    assert infer_column_kind(values) is ColumnKind.TEXT


@pytest.mark.parametrize(
    "key, label",
    [
        ("id", "Id"),
        ("age", "Age"),
        ("firstName", "First Name"),
        ("unitPrice", "Unit Price"),
        ("first name", "First Name"),
    ],
)
def test_format_column_label(key, label):
    assert format_column_label(key) == label


def test_sort_numbers_by_value_with_unparsable_last():
    values = ["10", "abc", "9", "1.5", "100"]
    assert sort_values(values, ColumnKind.NUMBER) == ["1.5", "9", "10", "100", "abc"]


def test_sort_text_case_insensitive_lower_first():
    values = ["banana", "Apple", "Cherry", "apple"]
    assert sort_values(values, ColumnKind.TEXT) == ["apple", "Apple", "banana", "Cherry"]


def test_sort_text_accents_next_to_base_letter():
    values = ["zebra", "éclair", "Eve", "eclair"]
    assert sort_values(values, ColumnKind.TEXT) == ["eclair", "éclair", "Eve", "zebra"]


def test_separator_and_inf_spellings_sniff_as_text():
    assert infer_column_kind(["1_000", "2_500", "inf", "12"]) is ColumnKind.TEXT
