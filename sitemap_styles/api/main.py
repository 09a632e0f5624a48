from __future__ import annotations

from fastapi import FastAPI

from sitemap_styles import __version__
from sitemap_styles.api.endpoints import health
from sitemap_styles.api.endpoints import metrics_export
from sitemap_styles.api.endpoints import stylesheets
from sitemap_styles.api.middleware.error_shaping import SafeErrorMiddleware
from sitemap_styles.api.middleware.request_context import (
    RequestContextMiddleware,
    SecurityHeadersMiddleware,
)
from sitemap_styles.core.config import StylesheetConfig

app = FastAPI(
    title="Sitemap Stylesheets",
    version=__version__,
)

# ------------------------------------------------------------
# Middleware stack (ORDER MATTERS)
# Starlette reverses add_middleware order: the LAST call = OUTERMOST wrapper.
# Runtime order (outermost → innermost):
#   SafeErrorMiddleware → SecurityHeaders → RequestContext → handler
# ------------------------------------------------------------

cfg = StylesheetConfig.from_env()

app.add_middleware(RequestContextMiddleware)
app.add_middleware(SecurityHeadersMiddleware, enabled=cfg.security_headers_enabled)
app.add_middleware(SafeErrorMiddleware)


app.include_router(stylesheets.router)
app.include_router(health.router)
app.include_router(metrics_export.router)
