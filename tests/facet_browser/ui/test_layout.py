from __future__ import annotations

from dash import dash_table, dcc, html

from facet_browser.ui.ids import IDs
from facet_browser.ui.layout.build_filter_panel import build_filter_panel
from facet_browser.ui.layout.build_table_panel import build_table_panel


def _walk(component, parent=None):
    yield component, parent
    children = getattr(component, "children", None)
    if children is None or isinstance(children, str):
        return
    if not isinstance(children, (list, tuple)):
        children = [children]
    for child in children:
        yield from _walk(child, component)


def _parent_of(tree, component_id):
    for component, parent in _walk(tree):
        if getattr(component, "id", None) == component_id:
            return component, parent
    raise AssertionError(f"{component_id!r} not in layout")


def test_table_shows_loading_state():
    table, parent = _parent_of(build_table_panel(50), IDs.Control.DATA_TABLE)

    assert isinstance(table, dash_table.DataTable)
    assert table.page_size == 50
    assert isinstance(parent, dcc.Loading)
    assert parent.id == IDs.Control.DATA_TABLE_LOADING


def test_filter_controls_show_loading_state():
    controls, parent = _parent_of(build_filter_panel(), IDs.Control.FILTER_CONTROLS)

    assert isinstance(controls, html.Div)
    assert isinstance(parent, dcc.Loading)
    assert parent.id == IDs.Control.FILTER_CONTROLS_LOADING
