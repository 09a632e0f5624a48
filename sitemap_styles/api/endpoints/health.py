from __future__ import annotations

from fastapi import APIRouter
from starlette.responses import JSONResponse

from sitemap_styles.core.config import StylesheetConfig
from sitemap_styles.core.observability.metrics import inc_named
from sitemap_styles.core.plugins.registry import PluginRegistry

router = APIRouter()


@router.get("/health/live")
def live():
    inc_named("health_live")
    return {"status": "ok"}


@router.get("/health/ready")
def ready():
    """
    Readiness reflects ability to serve stylesheets:
    the configured locale file exists and the plugin directory is present.
    """
    inc_named("health_ready")

    cfg = StylesheetConfig.from_env()
    problems: list[str] = []

    if cfg.locale_file is not None and not cfg.locale_file.exists():
        problems.append(f"missing_file:SITEMAPS_LOCALE_FILE={cfg.locale_file}")

    registry = PluginRegistry()
    if not registry.plugins_dir.exists():
        problems.append(f"missing_dir:plugins={registry.plugins_dir}")

    if problems:
        return JSONResponse(
            status_code=503,
            content={"status": "not_ready", "problems": problems},
        )

    return {"status": "ready"}
