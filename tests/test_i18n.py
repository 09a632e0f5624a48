"""
Translation catalog loader tests.
"""
from __future__ import annotations

import json

import pytest

from sitemap_styles.core.stylesheet.i18n import Translator, _parse_catalog, load_catalog


def test_parse_skips_non_mapping_domains():
    out = _parse_catalog({"ok": {"URL": "Adresse"}, "bad": ["URL"]})
    assert out == {"ok": {"URL": "Adresse"}}


def test_parse_drops_null_translations():
    assert _parse_catalog({"d": {"URL": None, "XML Sitemap": "Plan"}}) == {"d": {"XML Sitemap": "Plan"}}


def test_load_returns_empty_when_file_missing(tmp_path):
    assert load_catalog(tmp_path / "nope.yaml") == {}


def test_load_returns_empty_when_unconfigured(monkeypatch):
    monkeypatch.delenv("SITEMAPS_LOCALE_FILE", raising=False)
    assert load_catalog() == {}


def test_load_json_file(tmp_path):
    f = tmp_path / "fr.json"
    f.write_text(json.dumps({"sitemap-stylesheets": {"XML Sitemap": "Plan du site XML"}}), encoding="utf-8")
    assert load_catalog(f) == {"sitemap-stylesheets": {"XML Sitemap": "Plan du site XML"}}


def test_load_yaml_file(tmp_path):
    f = tmp_path / "fr.yaml"
    f.write_text('sitemap-stylesheets:\n  "URL": "Adresse"\n', encoding="utf-8")
    assert load_catalog(f) == {"sitemap-stylesheets": {"URL": "Adresse"}}


def test_load_from_env(tmp_path, monkeypatch):
    f = tmp_path / "de.yaml"
    f.write_text("sitemap-stylesheets:\n  URL: Adresse\n", encoding="utf-8")
    monkeypatch.setenv("SITEMAPS_LOCALE_FILE", str(f))
    assert Translator.from_file().translate("URL") == "Adresse"


def test_load_malformed_yaml_returns_empty(tmp_path):
    f = tmp_path / "broken.yaml"
    f.write_text("sitemap-stylesheets: [unclosed\n", encoding="utf-8")
    assert load_catalog(f) == {}


def test_load_non_mapping_returns_empty(tmp_path):
    f = tmp_path / "list.json"
    f.write_text("[1, 2, 3]", encoding="utf-8")
    assert load_catalog(f) == {}


def test_translate_falls_back_to_msgid():
    tr = Translator({"other": {"URL": "Adresse"}})
    assert tr.translate("URL") == "URL"
    assert tr.translate("URL", "other") == "Adresse"


def test_translate_formatted():
    tr = Translator({"d": {"%s URLs": "%s adresses"}})
    assert tr.translate_formatted("%s URLs", "d", 3) == "3 adresses"


def test_translate_formatted_bad_placeholders_use_source():
    tr = Translator({"d": {"%s URLs": "adresses"}})
    assert tr.translate_formatted("%s URLs", "d", 3) == "3 URLs"


def test_translate_formatted_untranslated_source_is_formatted():
    assert Translator().translate_formatted("%s URLs", "d", 3) == "3 URLs"


def test_translate_formatted_literal_percent_in_translation():
    tr = Translator({"d": {"%s URLs": "%s adresses (100%%)"}})
    assert tr.translate_formatted("%s URLs", "d", 3) == "3 adresses (100%)"


def test_translate_formatted_bad_source_raises():
    tr = Translator({"d": {"%s and %s": "%s et %s"}})
    with pytest.raises(TypeError):
        tr.translate_formatted("%s and %s", "d", 1)
    with pytest.raises(TypeError):
        Translator().translate_formatted("%d URLs", "d", "three")
