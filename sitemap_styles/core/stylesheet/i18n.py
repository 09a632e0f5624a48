"""
Translation provider for stylesheet strings.

Catalog file format (YAML or JSON), keyed by text domain then msgid:

    sitemap-stylesheets:
      "XML Sitemap": "Plan du site XML"
      "URL": "URL"

Environment variable:
    SITEMAPS_LOCALE_FILE - path to the catalog file (optional).

Lookups fall back to the msgid, so an empty catalog renders English.
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

_log = logging.getLogger("sitemaps.i18n")

DEFAULT_TEXT_DOMAIN = "sitemap-stylesheets"

Catalog = Dict[str, Dict[str, str]]


def _parse_catalog(raw: dict) -> Catalog:
    """Keep only {domain: {msgid: msgstr}} entries with string values."""
    out: Catalog = {}
    for domain, messages in raw.items():
        if not isinstance(messages, dict):
            _log.warning("Skipping catalog domain %r: expected a mapping, got %s", domain, type(messages).__name__)
            continue
        entries: Dict[str, str] = {}
        for msgid, msgstr in messages.items():
            if msgstr is None:
                continue
            entries[str(msgid)] = str(msgstr)
        out[str(domain)] = entries
    return out


def load_catalog(path: Optional[Path] = None) -> Catalog:
    """
    Load a translation catalog from a YAML or JSON file.

    Returns an empty catalog if no file is configured, or if it is absent,
    unreadable or malformed.
    """
    resolved = _resolve_path(path)
    if resolved is None or not resolved.exists():
        return {}

    try:
        raw_text = resolved.read_text(encoding="utf-8")
    except OSError as exc:
        _log.warning("Cannot read locale file %s: %s", resolved, exc)
        return {}

    try:
        data = json.loads(raw_text)
    except json.JSONDecodeError:
        try:
            data = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            _log.warning("Failed to parse locale file %s as JSON or YAML: %s", resolved, exc)
            return {}

    if not isinstance(data, dict):
        _log.warning("Locale file %s must be a mapping of domains, got %s", resolved, type(data).__name__)
        return {}

    catalog = _parse_catalog(data)
    _log.info("Loaded %d translation domains from %s", len(catalog), resolved)
    return catalog


def _resolve_path(path: Optional[Path]) -> Optional[Path]:
    if path is not None:
        return Path(path)
    env_path = os.getenv("SITEMAPS_LOCALE_FILE", "").strip()
    if env_path:
        return Path(env_path)
    return None


class Translator:
    def __init__(self, catalog: Optional[Catalog] = None):
        self._catalog: Catalog = dict(catalog or {})

    @classmethod
    def from_file(cls, path: Optional[Path] = None) -> "Translator":
        return cls(load_catalog(path))

    def translate(self, key: str, domain: str = DEFAULT_TEXT_DOMAIN) -> str:
        return self._catalog.get(domain, {}).get(key, key)

    def translate_formatted(self, template: str, domain: str = DEFAULT_TEXT_DOMAIN, *args: Any) -> str:
        """
        Translate `template` and fill its %-placeholders with `args`.

        A translation whose placeholders do not match `args` is logged and
        replaced by the source string. Errors in the source string itself
        propagate.
        """
        translated = self.translate(template, domain)
        if translated != template:
            try:
                return translated % args
            except (TypeError, ValueError) as exc:
                _log.warning("Bad placeholders in translation of %r (%s): %s", template, domain, exc)
        return template % args
