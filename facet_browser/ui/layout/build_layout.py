from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc

from facet_browser.ui.config import AppConfig
from facet_browser.ui.ids import IDs
from facet_browser.ui.layout.build_filter_panel import build_filter_panel
from facet_browser.ui.layout.build_navbar import build_navbar
from facet_browser.ui.layout.build_table_panel import build_table_panel


def build_layout(ctx: AppConfig) -> dbc.Container:
    navbar = build_navbar(ctx.datasets.options(), ctx.global_config, ctx.default_dataset_key)

    return dbc.Container(
        fluid=True,
        className="fb-root",
        children=[
            navbar,

            # {"dataset": key, "filters": FilterState.to_dict()}
            dcc.Store(id=IDs.Store.FILTER_STATE, storage_type="memory"),

            dbc.Row(
                [
                    dbc.Col(build_filter_panel(), md=3, className="mt-3"),
                    dbc.Col(build_table_panel(ctx.page_size), md=9, className="mt-3"),
                ],
                className="gx-3",
            ),
        ],
    )
