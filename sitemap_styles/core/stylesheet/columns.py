from __future__ import annotations

from typing import Iterable, Optional

from .escape import escape_xml, escape_xml_attr
from .hooks import STYLESHEET_COLUMNS, StylesheetHooks
from .i18n import DEFAULT_TEXT_DOMAIN, Translator
from .models import Column, ColumnMap, ColumnSet

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"

COLUMN_SEPARATOR = "\n\t\t"


class ColumnRegistry:
    """
    Builds the ordered column set for the leaf sitemap table.

    The default map holds a single column (sitemap:loc). The stylesheet_columns
    hook receives it as {namespace_uri: {local_name: heading_text}} and returns
    the same shape; namespaces and local names keep the order it returns.
    """

    def __init__(
        self,
        hooks: Optional[StylesheetHooks] = None,
        translator: Optional[Translator] = None,
        domain: str = DEFAULT_TEXT_DOMAIN,
    ):
        self.hooks = hooks or StylesheetHooks()
        self.translator = translator or Translator()
        self.domain = domain

    def default_column_map(self) -> ColumnMap:
        return {
            SITEMAP_NS: {
                "loc": self.translator.translate("URL", self.domain),
            },
        }

    def get_column_map(self) -> ColumnMap:
        return self.hooks.apply(STYLESHEET_COLUMNS, self.default_column_map())

    def get_columns(self) -> ColumnSet:
        return flatten_columns(self.get_column_map())


def flatten_columns(column_map: ColumnMap) -> ColumnSet:
    columns: ColumnSet = []
    for namespace_uri, namespace_columns in (column_map or {}).items():
        for local_name, heading_text in (namespace_columns or {}).items():
            columns.append(Column(namespace_uri, local_name, heading_text))
    return columns


def serialize_columns(columns: Iterable[Column]) -> str:
    """
    Render columns as <column> elements for the embedded lookup table.

    Heading text is escaped as character data. Namespace URIs and local
    names are trusted identifiers; attribute escaping leaves well-formed
    ones untouched.
    """
    return COLUMN_SEPARATOR.join(
        '<column namespace-uri="%s" local-name="%s">%s</column>'
        % (escape_xml_attr(c.namespace_uri), escape_xml_attr(c.local_name), escape_xml(c.heading_text))
        for c in columns
    )
