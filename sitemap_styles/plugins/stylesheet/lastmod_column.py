from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from sitemap_styles.core.stylesheet.columns import SITEMAP_NS
from sitemap_styles.core.stylesheet.hooks import STYLESHEET_COLUMNS, STYLESHEET_CSS
from sitemap_styles.core.stylesheet.models import ColumnMap


@dataclass
class LastModifiedColumnPlugin:
    name: str = "lastmod_column"
    version: str = "0.1.0"
    enabled_by_default: bool = False
    priority: int = 20
    heading: str = "Last Modified"

    def add_column(self, columns: ColumnMap) -> ColumnMap:
        out = {ns: dict(cols) for ns, cols in (columns or {}).items()}
        out.setdefault(SITEMAP_NS, {})["lastmod"] = self.heading
        return out

    def add_css(self, css: str) -> str:
        # td class is "<namespace-uri> <local-name>"
        return css + "\n\t\t\t#sitemap__table td.lastmod {\n\t\t\t\twhite-space: nowrap;\n\t\t\t}\n"

    @property
    def hooks(self) -> Dict[str, Any]:
        return {
            STYLESHEET_COLUMNS: self.add_column,
            STYLESHEET_CSS: self.add_css,
        }


PLUGIN = LastModifiedColumnPlugin()
