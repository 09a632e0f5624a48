from __future__ import annotations

from typing import Tuple

from fastapi import APIRouter, Query
from starlette.responses import Response

from sitemap_styles.core.config import StylesheetConfig
from sitemap_styles.core.plugins.registry import PluginRegistry, PluginResolution
from sitemap_styles.core.stylesheet.composer import StylesheetComposer
from sitemap_styles.core.stylesheet.i18n import Translator
from sitemap_styles.core.stylesheet.renderer import StylesheetRenderer
from sitemap_styles.core.stylesheet.transport import ResponseTransport

router = APIRouter(tags=["stylesheets"])


def _composer() -> Tuple[StylesheetComposer, PluginResolution]:
    # Built per request: hooks, columns and CSS never outlive one render.
    cfg = StylesheetConfig.from_env()
    hooks, resolution = PluginRegistry().build_hooks(cfg)
    translator = Translator.from_file(cfg.locale_file)
    return StylesheetComposer(hooks=hooks, translator=translator, domain=cfg.text_domain), resolution


def _render(stylesheet_type: str) -> Response:
    composer, _ = _composer()
    transport = ResponseTransport()
    StylesheetRenderer(composer).render(stylesheet_type, transport)
    return transport.to_response()


@router.get("/sitemap.xsl")
def sitemap_stylesheet():
    return _render("sitemap")


@router.get("/sitemap-index.xsl")
def sitemap_index_stylesheet():
    return _render("index")


@router.get("/sitemap-stylesheet")
def stylesheet_by_type(stylesheet_type: str = Query(default="", alias="type")):
    # Unknown types get an empty application/xml body, not a 4xx.
    return _render(stylesheet_type)


@router.get("/api/v1/stylesheet/columns")
def list_columns():
    composer, resolution = _composer()
    column_map = composer.columns.get_column_map()

    return {
        "columns": [
            {
                "namespace_uri": c.namespace_uri,
                "local_name": c.local_name,
                "heading_text": c.heading_text,
            }
            for c in composer.columns.get_columns()
        ],
        "namespaces": list(column_map.keys()),
        "plugins": [p.name for p in resolution.plugins],
        "fingerprint": resolution.fingerprint,
        "warnings": resolution.warnings,
    }
