import os

import pytest
from fastapi.testclient import TestClient

from sitemap_styles.api.main import app
from sitemap_styles.core.observability.metrics import reset_metrics
from sitemap_styles.core.stylesheet import StylesheetComposer, StylesheetHooks, Translator


@pytest.fixture(scope="session", autouse=True)
def _force_test_env():
    # Make runtime behave deterministically in tests
    os.environ.setdefault("SITEMAPS_ENV", "dev")
    for key in ("SITEMAPS_LOCALE_FILE", "SITEMAPS_PLUGINS_ENABLED", "SITEMAPS_PLUGINS_DISABLED"):
        os.environ.pop(key, None)


@pytest.fixture(autouse=True)
def _reset_named_metrics():
    reset_metrics()


@pytest.fixture()
def client():
    return TestClient(app)


@pytest.fixture()
def hooks():
    return StylesheetHooks()


@pytest.fixture()
def composer(hooks):
    return StylesheetComposer(hooks=hooks, translator=Translator())
