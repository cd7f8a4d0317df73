from __future__ import annotations

from typing import List, Optional

import dash_bootstrap_components as dbc
from dash import dcc, html

from facet_browser.config.model import GlobalConfig
from facet_browser.ui.ids import IDs


def build_navbar(
    dataset_options: List[dict],
    global_config: GlobalConfig,
    default_key: Optional[str],
) -> dbc.Navbar:
    title = global_config.ui_title
    subtitle = "Interactive Dataset Explorer"

    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.H2(title, className="mb-0"),
                        html.Small(subtitle, className="text-muted"),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
                html.Div(
                    [
                        html.Div("Active Dataset", className="navbar-dataset-title"),
                        dcc.Dropdown(
                            id=IDs.Control.DATASET_SELECT,
                            options=dataset_options,
                            value=default_key,
                            clearable=False,
                            placeholder="Select dataset",
                            className="mt-1",
                        ),
                    ],
                    className="ms-auto",
                    style={
                        "minWidth": "280px",
                        "maxWidth": "380px",
                        "marginRight": "24px",
                    },
                ),
            ],
        ),
        dark=False,
        className="shadow-sm",
    )
