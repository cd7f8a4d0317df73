from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dash_table, dcc, html

from facet_browser.ui.ids import IDs

FONT_FAMILY = 'system-ui, -apple-system, BlinkMacSystemFont, "SF Pro Text", "Segoe UI", sans-serif'


def build_table_panel(page_size: int) -> dbc.Card:
    """
    Paginated table of visible rows. Paging is done server-side
    (page_action="custom") so only one page is ever sent to the browser.
    """
    return dbc.Card(
        [
            dbc.CardHeader("Data", className="fw-semibold"),
            dbc.CardBody(
                [
                    dcc.Loading(
                        id=IDs.Control.DATA_TABLE_LOADING,
                        type="default",
                        children=dash_table.DataTable(
                            id=IDs.Control.DATA_TABLE,
                            data=[],
                            columns=[],
                            page_action="custom",
                            page_current=0,
                            page_size=page_size,
                            page_count=1,
                            style_table={"overflowX": "auto"},
                            style_as_list_view=True,
                            style_cell={
                                "fontFamily": FONT_FAMILY,
                                "fontSize": "12px",
                                "padding": "6px 8px",
                                "border": "none",
                                "textAlign": "left",
                                "minWidth": "80px",
                                "maxWidth": "260px",
                                "whiteSpace": "nowrap",
                                "textOverflow": "ellipsis",
                            },
                            style_header={
                                "fontFamily": FONT_FAMILY,
                                "fontSize": "12px",
                                "fontWeight": "600",
                                "backgroundColor": "#f3f4f6",
                                "borderBottom": "1px solid #e5e7eb",
                            },
                            style_data={"borderBottom": "1px solid #e5e7eb"},
                        ),
                    ),
                    html.Div(id=IDs.Control.RESULTS_SUMMARY, className="text-muted small mt-2"),
                ]
            ),
        ]
    )
