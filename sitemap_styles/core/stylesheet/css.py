from __future__ import annotations

from typing import Optional

from .hooks import STYLESHEET_CSS, StylesheetHooks

DEFAULT_CSS = """
			body {
				font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Oxygen-Sans, Ubuntu, Cantarell, "Helvetica Neue", sans-serif;
				color: #444;
			}

			#sitemap__table {
				border: solid 1px #ccc;
				border-collapse: collapse;
			}

			#sitemap__table tr th {
				text-align: left;
			}

			#sitemap__table tr td,
			#sitemap__table tr th {
				padding: 10px;
			}

			#sitemap__table tr:nth-child(odd) td {
				background-color: #eee;
			}

			a:hover {
				text-decoration: none;
			}
"""


class CssProvider:
    def __init__(self, hooks: Optional[StylesheetHooks] = None):
        self.hooks = hooks or StylesheetHooks()

    def get_css(self) -> str:
        # Embedded verbatim in the <style> block; not validated.
        return self.hooks.apply(STYLESHEET_CSS, DEFAULT_CSS)
