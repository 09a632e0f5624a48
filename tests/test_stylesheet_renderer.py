import pytest

from sitemap_styles.core.observability.metrics import snapshot_named
from sitemap_styles.core.stylesheet import (
    STYLESHEET_CSS,
    ResponseTransport,
    StylesheetComposer,
    StylesheetHooks,
    StylesheetRenderer,
    StylesheetVariant,
    Transport,
    TransportClosedError,
)


class RecordingTransport(Transport):
    def __init__(self):
        self.content_type = None
        self.writes = []
        self.terminated = 0

    def set_content_type(self, mime_type, charset):
        self.content_type = (mime_type, charset)

    def write_raw(self, data):
        self.writes.append(data)

    def terminate(self):
        self.terminated += 1


@pytest.fixture()
def renderer(composer):
    return StylesheetRenderer(composer)


def test_render_sitemap_writes_leaf_stylesheet(renderer, composer):
    t = RecordingTransport()
    renderer.render("sitemap", t)

    assert t.content_type == ("application/xml", "UTF-8")
    assert t.writes == [composer.compose_leaf()]
    assert t.terminated == 1


def test_render_index_writes_index_stylesheet(renderer, composer):
    t = RecordingTransport()
    renderer.render(StylesheetVariant.INDEX, t)

    assert t.writes == [composer.compose_index()]
    assert t.terminated == 1


@pytest.mark.parametrize("variant", ["bogus", "", "Sitemap", None, 1])
def test_unknown_variant_writes_nothing_but_terminates(renderer, variant):
    t = RecordingTransport()
    renderer.render(variant, t)

    assert t.writes == []
    assert t.terminated == 1
    assert t.content_type == ("application/xml", "UTF-8")


def test_terminates_even_when_composition_fails():
    def boom(css):
        raise RuntimeError("broken hook")

    renderer = StylesheetRenderer(StylesheetComposer(hooks=StylesheetHooks({STYLESHEET_CSS: boom})))
    t = RecordingTransport()

    with pytest.raises(RuntimeError, match="broken hook"):
        renderer.render("index", t)
    assert t.writes == []
    assert t.terminated == 1


def test_terminates_even_when_content_type_fails(renderer):
    class RejectingTransport(RecordingTransport):
        def set_content_type(self, mime_type, charset):
            raise TransportClosedError("headers already sent")

    t = RejectingTransport()

    with pytest.raises(TransportClosedError, match="headers already sent"):
        renderer.render("sitemap", t)
    assert t.writes == []
    assert t.terminated == 1


def test_render_counts_by_variant(renderer):
    renderer.render("sitemap", RecordingTransport())
    renderer.render("nope", RecordingTransport())

    named = snapshot_named()
    assert named["stylesheet_render_sitemap"] == 1
    assert named["stylesheet_render_unknown"] == 1


def test_response_transport_builds_xml_response(renderer):
    t = ResponseTransport()
    renderer.render("index", t)

    resp = t.to_response()
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/xml; charset=UTF-8"
    assert resp.body.startswith(b'<?xml version="1.0" encoding="UTF-8"?>')


def test_response_transport_rejects_writes_after_terminate():
    t = ResponseTransport()
    t.set_content_type("application/xml", "UTF-8")
    t.terminate()

    with pytest.raises(TransportClosedError):
        t.write_raw("late")


def test_response_transport_requires_termination():
    t = ResponseTransport()
    t.write_raw("x")
    with pytest.raises(RuntimeError):
        t.to_response()


def test_variant_parse():
    assert StylesheetVariant.parse("sitemap") is StylesheetVariant.SITEMAP
    assert StylesheetVariant.parse("index") is StylesheetVariant.INDEX
    assert StylesheetVariant.parse(StylesheetVariant.INDEX) is StylesheetVariant.INDEX
    assert StylesheetVariant.parse("INDEX") is None
