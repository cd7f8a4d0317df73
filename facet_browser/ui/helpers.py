from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence

from facet_browser.core.dataset import ColumnDescriptor, Row
from facet_browser.core.facets import FacetOption
from facet_browser.core.type_inference import ColumnKind, parse_number


@dataclass(frozen=True)
class PageWindow:
    """Zero-based page index plus the [start, stop) row slice it covers."""
    page: int
    page_count: int
    start: int
    stop: int


def page_window(n_rows: int, page: int | None, page_size: int) -> PageWindow:
    """
    Clamp `page` into range and compute its row slice.

    There is always at least one page, even for zero rows.
    """
    page_count = max(1, math.ceil(n_rows / page_size))
    page = min(max(page or 0, 0), page_count - 1)
    start = page * page_size
    stop = min(start + page_size, n_rows)
    return PageWindow(page=page, page_count=page_count, start=start, stop=stop)


def results_summary(window: PageWindow, n_rows: int) -> str:
    if n_rows == 0:
        return "No data available"
    return f"Showing {window.start + 1:,} to {window.stop:,} of {n_rows:,} results"


def format_cell_value(value: str, kind: ColumnKind) -> str:
    """Thousands separators and at most 3 fraction digits for numeric cells."""
    if kind is not ColumnKind.NUMBER:
        return value

    number = parse_number(value)
    if number is None or math.isinf(number):
        return value

    if number.is_integer():
        return f"{int(number):,}"
    return f"{number:,.3f}".rstrip("0").rstrip(".")


def format_rows(rows: Iterable[Row], columns: Sequence[ColumnDescriptor]) -> List[Dict[str, str]]:
    return [
        {c.key: format_cell_value(row.get(c.key, ""), c.kind) for c in columns}
        for row in rows
    ]


def table_columns(columns: Sequence[ColumnDescriptor]) -> List[dict]:
    return [{"name": c.label, "id": c.key} for c in columns]


def dropdown_options(options: Sequence[FacetOption]) -> List[dict]:
    return [o.to_dict() for o in options]
