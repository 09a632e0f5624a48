from .models import Column, ColumnMap, ColumnSet, StylesheetVariant
from .hooks import (
    HOOK_NAMES,
    STYLESHEET_COLUMNS,
    STYLESHEET_CONTENT,
    STYLESHEET_CSS,
    STYLESHEET_INDEX_CONTENT,
    StylesheetHooks,
    UnknownHookError,
)
from .i18n import DEFAULT_TEXT_DOMAIN, Translator, load_catalog
from .columns import SITEMAP_NS, ColumnRegistry, flatten_columns, serialize_columns
from .css import DEFAULT_CSS, CssProvider
from .composer import StylesheetComposer
from .transport import ResponseTransport, Transport, TransportClosedError
from .renderer import StylesheetRenderer

__all__ = [
    "Column",
    "ColumnMap",
    "ColumnSet",
    "StylesheetVariant",
    "HOOK_NAMES",
    "STYLESHEET_COLUMNS",
    "STYLESHEET_CONTENT",
    "STYLESHEET_CSS",
    "STYLESHEET_INDEX_CONTENT",
    "StylesheetHooks",
    "UnknownHookError",
    "DEFAULT_TEXT_DOMAIN",
    "Translator",
    "load_catalog",
    "SITEMAP_NS",
    "ColumnRegistry",
    "flatten_columns",
    "serialize_columns",
    "DEFAULT_CSS",
    "CssProvider",
    "StylesheetComposer",
    "ResponseTransport",
    "Transport",
    "TransportClosedError",
    "StylesheetRenderer",
]
