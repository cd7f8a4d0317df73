from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from facet_browser.config.loader import default_dataset_key, load_dataset_registry
from facet_browser.services.dataset_service import DatasetManager
from facet_browser.ui.callbacks.callbacks_filters import register_filter_callbacks
from facet_browser.ui.callbacks.callbacks_table import register_table_callbacks
from facet_browser.ui.config import AppConfig
from facet_browser.ui.layout.build_layout import build_layout

logger = logging.getLogger(__name__)


def build_app_config(config_root: Path | str = Path("config")) -> AppConfig:
    config_root = Path(config_root)

    # 1) Load config (no CSV is read yet)
    global_config, cfg_by_key = load_dataset_registry(config_root)

    # 2) Service layer
    datasets = DatasetManager(cfg_by_key, global_config)

    return AppConfig(
        config_root=config_root,
        global_config=global_config,
        datasets=datasets,
        default_dataset_key=default_dataset_key(global_config, cfg_by_key),
        page_size=global_config.page_size,
    )


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    ctx = build_app_config(config_root)

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
    )
    app.title = ctx.global_config.ui_title
    app.layout = build_layout(ctx)

    register_filter_callbacks(app, ctx)
    register_table_callbacks(app, ctx)

    logger.info(
        "Dash app created",
        extra={"config_root": str(ctx.config_root), "default_dataset": ctx.default_dataset_key},
    )
    return app
