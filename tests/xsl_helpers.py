from lxml import etree

XSL_NS = "http://www.w3.org/1999/XSL/Transform"
COLS_NS = "urn:sitemap-stylesheets:columns"
NSMAP = {"xsl": XSL_NS, "cols": COLS_NS}


def parse_xsl(content: str):
    """Parse a generated stylesheet; fails the test if it is not well-formed XML."""
    return etree.fromstring(content.encode("utf-8"))


def column_elements(root):
    return root.xpath("/xsl:stylesheet/cols:columns/cols:column", namespaces=NSMAP)


def style_text(root):
    styles = root.xpath("//style")
    assert len(styles) == 1
    return styles[0].text


def apply_xsl(content: str, document: str, tmp_path):
    """
    Run a generated stylesheet over `document` with libxslt.

    The stylesheet is loaded from a file so that document('') resolves.
    """
    path = tmp_path / "sitemap.xsl"
    path.write_text(content, encoding="utf-8")
    transform = etree.XSLT(etree.parse(str(path)))
    return transform(etree.fromstring(document.encode("utf-8")))
