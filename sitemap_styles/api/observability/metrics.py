from __future__ import annotations

import re
from prometheus_client import Counter, Histogram


def normalize_path(path: str) -> str:
    """Reduce high-cardinality paths for metrics labels."""
    p = path or "/"

    # long hex / ints
    p = re.sub(r"/[0-9a-fA-F]{16,}", "/:hex", p)
    p = re.sub(r"/\d+", "/:id", p)

    # numbered sitemap files: /sitemap-posts-3.xml -> /sitemap-posts-:n.xml
    p = re.sub(r"-\d+(\.xml|\.xsl)$", r"-:n\1", p)

    return p


HTTP_REQUESTS_TOTAL = Counter(
    "sitemaps_http_requests_total",
    "Total HTTP requests",
    ["method", "path", "status"],
)

HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "sitemaps_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "path"],
)
