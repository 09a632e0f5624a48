from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional


# namespace URI -> local name -> heading text
ColumnMap = Dict[str, Dict[str, str]]


@dataclass(frozen=True)
class Column:
    namespace_uri: str
    local_name: str
    heading_text: str


ColumnSet = List[Column]


class StylesheetVariant(str, Enum):
    SITEMAP = "sitemap"
    INDEX = "index"

    @classmethod
    def parse(cls, value: Any) -> Optional["StylesheetVariant"]:
        """
        Returns the matching variant, or None for anything unrecognized.
        Matching is exact; "Sitemap" or " index" are not variants.
        """
        if isinstance(value, cls):
            return value
        for v in cls:
            if value == v.value:
                return v
        return None
