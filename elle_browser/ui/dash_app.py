from __future__ import annotations

import logging
import os
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from elle_browser.config.loader import load_dataset_registry
from elle_browser.services.browser_session import SwitchPolicy
from elle_browser.services.dataset_service import DatasetManager
from elle_browser.ui.callbacks.callbacks_filters import register_filter_callbacks
from elle_browser.ui.callbacks.callbacks_render import register_render_callbacks
from elle_browser.ui.config import AppConfig
from elle_browser.ui.layout.build_layout import build_layout

logger = logging.getLogger(__name__)


def create_dash_app(
    config_root: Path | str = Path("config"),
    switch_policy: SwitchPolicy | str | None = None,
) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    global_config, cfg_by_language = load_dataset_registry(config_root)
    if not cfg_by_language:
        raise RuntimeError("No dataset configs were loaded from config")

    # 2) Initialize Service Layer
    dataset_manager = DatasetManager(cfg_by_language, data_root=global_config.data_root)

    # 3) Choose Default Language
    default_language = global_config.default_language
    if default_language not in cfg_by_language:
        fallback = next(iter(cfg_by_language))
        logger.warning(
            "Default language has no dataset; falling back",
            extra={"default_language": default_language, "fallback": fallback},
        )
        default_language = fallback

    if switch_policy is None:
        switch_policy = os.getenv("ELLE_BROWSER_SWITCH_POLICY", SwitchPolicy.PRUNE.value)

    # 4) App Context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        datasets=dataset_manager,
        default_language=default_language,
        switch_policy=SwitchPolicy(switch_policy),
    )
    ctx.validate()

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )

    app.title = global_config.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_filter_callbacks(app, ctx)
    register_render_callbacks(app, ctx)

    logger.info(
        "Dash app created",
        extra={
            "config_root": str(config_root),
            "languages": ctx.languages,
            "default_language": default_language,
            "switch_policy": ctx.switch_policy.value,
        },
    )

    return app
