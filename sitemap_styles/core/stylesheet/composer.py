from __future__ import annotations

import logging
from string import Template
from typing import Optional

from .columns import ColumnRegistry, serialize_columns
from .css import CssProvider
from .escape import escape_xml, escape_xml_attr
from .hooks import STYLESHEET_CONTENT, STYLESHEET_INDEX_CONTENT, StylesheetHooks
from .i18n import DEFAULT_TEXT_DOMAIN, Translator

log = logging.getLogger("sitemaps.stylesheet")

COLUMNS_NS = "urn:sitemap-stylesheets:columns"

URL_COUNT_EXPR = '<xsl:value-of select="count( sitemap:urlset/sitemap:url )"/>'
SITEMAP_COUNT_EXPR = '<xsl:value-of select="count( sitemap:sitemapindex/sitemap:sitemap )"/>'

# Private-use character: survives escaping and never appears in catalog text.
_SLOT = "\ue000"

# Placeholders use string.Template syntax; "$$" is a literal "$" for XSL variables.
LEAF_TEMPLATE = Template("""<?xml version="1.0" encoding="UTF-8"?>
<xsl:stylesheet
		version="1.0"
		xmlns:xsl="http://www.w3.org/1999/XSL/Transform"
		xmlns:sitemap="http://www.sitemaps.org/schemas/sitemap/0.9"
		xmlns:cols="$columns_ns"
		exclude-result-prefixes="sitemap cols"
		>
	<xsl:output method="html" encoding="UTF-8" indent="yes" />

	<!-- Column lookup table, read back below through document(''). -->
	<columns xmlns="$columns_ns">
		$columns
	</columns>

	<xsl:variable name="columns" select="document( '' )/*/cols:columns" />

	<xsl:template match="/">
		<html>
			<head>
				<title>$title</title>
				<meta http-equiv="Content-Type" content="text/html; charset=UTF-8" />
				<style type="text/css">$css</style>
			</head>
			<body>
				<div id="sitemap__header">
					<h1>$title</h1>
					<p>$description</p>
				</div>
				<div id="sitemap__content">
					<p class="text">$text</p>

					<table id="sitemap__table">
						<thead>
							<xsl:apply-templates select="$$columns" mode="table-header" />
						</thead>
						<tbody>
							<xsl:apply-templates select="sitemap:urlset/sitemap:url" />
						</tbody>
					</table>
				</div>
			</body>
		</html>
	</xsl:template>

	<!-- One row per sitemap:url, one cell per column. -->
	<xsl:template match="sitemap:url">
		<tr>
			<xsl:apply-templates select="$$columns/cols:column" mode="table-data">
				<xsl:with-param name="current-url" select="current()" />
			</xsl:apply-templates>
		</tr>
	</xsl:template>

	<xsl:template match="sitemap:loc">
		<a href="{.}">
			<xsl:value-of select="." />
		</a>
	</xsl:template>

	<!-- Any other child of sitemap:url renders as its text, whatever its namespace. -->
	<xsl:template match="*">
		<xsl:value-of select="." />
	</xsl:template>

	<xsl:template match="cols:columns" mode="table-header">
		<tr>
			<xsl:apply-templates select="cols:column" mode="table-header" />
		</tr>
	</xsl:template>

	<xsl:template match="cols:column" mode="table-header">
		<th>
			<xsl:call-template name="add-css-class" />
			<xsl:value-of select="." />
		</th>
	</xsl:template>

	<!-- Empty td when the url has no child for this column. -->
	<xsl:template match="cols:column" mode="table-data">
		<xsl:param name="current-url" />

		<td>
			<xsl:call-template name="add-css-class" />
			<xsl:apply-templates select="$$current-url/*[namespace-uri() = current()/@namespace-uri and local-name() = current()/@local-name]" />
		</td>
	</xsl:template>

	<!-- class="<namespace-uri> <local-name>" so each column can be styled on its own. -->
	<xsl:template name="add-css-class">
		<xsl:attribute name="class">
			<xsl:value-of select="concat( @namespace-uri, ' ', @local-name )" />
		</xsl:attribute>
	</xsl:template>
</xsl:stylesheet>
""")

INDEX_TEMPLATE = Template("""<?xml version="1.0" encoding="UTF-8"?>
<xsl:stylesheet
		version="1.0"
		xmlns:sitemap="http://www.sitemaps.org/schemas/sitemap/0.9"
		xmlns:xsl="http://www.w3.org/1999/XSL/Transform"
		exclude-result-prefixes="sitemap"
		>
	<xsl:output method="html" encoding="UTF-8" indent="yes" />

	<xsl:template match="/">
		<html>
			<head>
				<title>$title</title>
				<meta http-equiv="Content-Type" content="text/html; charset=UTF-8" />
				<style type="text/css">$css</style>
			</head>
			<body>
				<div id="sitemap__header">
					<h1>$title</h1>
					<p>$description</p>
				</div>
				<div id="sitemap__content">
					<p class="text">$text</p>

					<table id="sitemap__table">
						<thead>
							<tr>
								<th>$url</th>
							</tr>
						</thead>
						<tbody>
							<xsl:apply-templates select="sitemap:sitemapindex/sitemap:sitemap" />
						</tbody>
					</table>
				</div>
			</body>
		</html>
	</xsl:template>

	<xsl:template match="sitemap:sitemap">
		<tr>
			<xsl:apply-templates select="sitemap:loc" />
		</tr>
	</xsl:template>

	<xsl:template match="sitemap:loc">
		<td>
			<a href="{.}">
				<xsl:value-of select="." />
			</a>
		</td>
	</xsl:template>
</xsl:stylesheet>
""")


class StylesheetComposer:
    """
    Assembles the leaf sitemap and sitemap index XSL stylesheets.

    Every dynamic string is escaped before interpolation, except the CSS
    (embedded verbatim) and the count expressions (XSL markup). The final
    document goes through stylesheet_content / stylesheet_index_content and
    is returned as-is.
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
        self.columns = ColumnRegistry(self.hooks, self.translator, domain)
        self.css = CssProvider(self.hooks)

    def _t(self, key: str) -> str:
        return escape_xml(self.translator.translate(key, self.domain))

    def _sentence(self, key: str, markup: str) -> str:
        # Format with a placeholder, escape, then swap in the trusted markup.
        text = self.translator.translate_formatted(key, self.domain, _SLOT)
        return escape_xml(text).replace(_SLOT, markup, 1)

    def _title(self) -> str:
        return self._t("XML Sitemap")

    def _description(self) -> str:
        link = '<a href="%s">sitemaps.org</a>' % escape_xml_attr(
            self.translator.translate("https://www.sitemaps.org/", self.domain)
        )
        return self._sentence(
            "This XML Sitemap is generated to make your content more visible for search engines. "
            "Learn more about XML sitemaps on %s.",
            link,
        )

    def _count_text(self, count_expr: str) -> str:
        return self._sentence("This XML Sitemap contains %s URLs.", count_expr)

    def compose_leaf(self) -> str:
        columns = self.columns.get_columns()
        content = LEAF_TEMPLATE.substitute(
            columns_ns=COLUMNS_NS,
            columns=serialize_columns(columns),
            title=self._title(),
            description=self._description(),
            text=self._count_text(URL_COUNT_EXPR),
            css=self.css.get_css(),
        )
        log.debug("stylesheet.composed variant=sitemap columns=%s", len(columns))
        return self.hooks.apply(STYLESHEET_CONTENT, content)

    def compose_index(self) -> str:
        content = INDEX_TEMPLATE.substitute(
            title=self._title(),
            description=self._description(),
            text=self._count_text(SITEMAP_COUNT_EXPR),
            url=self._t("URL"),
            css=self.css.get_css(),
        )
        log.debug("stylesheet.composed variant=index")
        return self.hooks.apply(STYLESHEET_INDEX_CONTENT, content)
