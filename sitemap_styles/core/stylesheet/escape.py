from __future__ import annotations

from typing import Any
from xml.sax.saxutils import escape


def escape_xml(text: Any) -> str:
    """Escape a value for use as XML character data (&, <, >)."""
    return escape(str(text))


def escape_xml_attr(text: Any) -> str:
    """Escape a value for use inside a double-quoted XML attribute."""
    return escape(str(text), {'"': "&quot;"})
