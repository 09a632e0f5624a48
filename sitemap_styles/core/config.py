from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field

from sitemap_styles.core.stylesheet.i18n import DEFAULT_TEXT_DOMAIN

_TRUTHY = ("1", "true", "yes")


def _env(name: str, default: str = "") -> str:
    return (os.getenv(name) or default).strip()


def _csv(raw: str) -> List[str]:
    return [x.strip() for x in (raw or "").split(",") if x.strip()]


class StylesheetConfig(BaseModel):
    env: str = "dev"
    text_domain: str = DEFAULT_TEXT_DOMAIN
    locale_file: Optional[Path] = None

    # None => not explicitly set (use each plugin's enabled_by_default)
    plugins_enabled: Optional[List[str]] = None
    plugins_disabled: List[str] = Field(default_factory=list)

    security_headers_enabled: bool = False

    @classmethod
    def from_env(cls) -> "StylesheetConfig":
        """
        Env:
          SITEMAPS_ENV=dev|prod
          SITEMAPS_TEXT_DOMAIN=sitemap-stylesheets
          SITEMAPS_LOCALE_FILE=/path/to/catalog.yaml
          SITEMAPS_PLUGINS_ENABLED=lastmod_column,...
          SITEMAPS_PLUGINS_DISABLED=...
          SITEMAPS_SECURITY_HEADERS_ENABLED=true/false (default: on in prod)
        """
        env = _env("SITEMAPS_ENV", "dev").lower()
        locale_file = _env("SITEMAPS_LOCALE_FILE")
        enabled_raw = os.getenv("SITEMAPS_PLUGINS_ENABLED")
        sec = _env("SITEMAPS_SECURITY_HEADERS_ENABLED", "true" if env == "prod" else "false").lower()

        return cls(
            env=env,
            text_domain=_env("SITEMAPS_TEXT_DOMAIN", DEFAULT_TEXT_DOMAIN),
            locale_file=Path(locale_file) if locale_file else None,
            plugins_enabled=_csv(enabled_raw) if enabled_raw is not None else None,
            plugins_disabled=_csv(_env("SITEMAPS_PLUGINS_DISABLED")),
            security_headers_enabled=sec in _TRUTHY,
        )

    def is_plugin_enabled(self, name: str, *, enabled_by_default: bool = True) -> bool:
        if name in (self.plugins_disabled or []):
            return False

        # enabled explicitly set => allowlist semantics
        if self.plugins_enabled is not None:
            return name in self.plugins_enabled

        return bool(enabled_by_default)
