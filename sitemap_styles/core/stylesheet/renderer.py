from __future__ import annotations

import logging
from typing import Any

from sitemap_styles.core.observability.metrics import inc_render

from .composer import StylesheetComposer
from .models import StylesheetVariant
from .transport import Transport

log = logging.getLogger("sitemaps.stylesheet")

CONTENT_TYPE = "application/xml"
CHARSET = "UTF-8"


class StylesheetRenderer:
    def __init__(self, composer: StylesheetComposer):
        self.composer = composer

    def render(self, variant: Any, transport: Transport) -> None:
        """
        Write the stylesheet for `variant` to `transport`, then terminate it.

        Unrecognized variants write nothing; the transport is still
        terminated. Termination happens even if the transport or composition
        raises.
        """
        try:
            transport.set_content_type(CONTENT_TYPE, CHARSET)
            parsed = StylesheetVariant.parse(variant)
            if parsed is StylesheetVariant.SITEMAP:
                transport.write_raw(self.composer.compose_leaf())
            elif parsed is StylesheetVariant.INDEX:
                transport.write_raw(self.composer.compose_index())
            else:
                log.debug("stylesheet.render unknown variant=%r", variant)

            inc_render(parsed.value if parsed is not None else "unknown")
        finally:
            transport.terminate()
