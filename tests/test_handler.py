from unittest.mock import patch

from ebike_status.errors import FeedError, RenderError
from ebike_status.handler import HTML_CONTENT_TYPE, TEXT_CONTENT_TYPE, StatusRequest, handle, report


def _failing_fetch():
    raise FeedError("upstream down")


def test_browser_gets_html(feed):
    resp = handle(StatusRequest(accept="text/html", user_agent="Mozilla/5.0"), fetch=lambda: feed)

    assert resp.status_code == 200
    assert resp.content_type == HTML_CONTENT_TYPE
    assert resp.headers() == {"Content-Type": HTML_CONTENT_TYPE}
    assert "<h2>Mission:</h2>" in resp.body


def test_curl_gets_text(feed):
    resp = handle(StatusRequest(accept="*/*", user_agent="curl/8.4.0"), fetch=lambda: feed)

    assert resp.status_code == 200
    assert resp.content_type == TEXT_CONTENT_TYPE
    assert "Embarcadero:" in resp.body
    assert "<html>" not in resp.body


def test_upstream_failure_is_500():
    resp = handle(StatusRequest(), fetch=_failing_fetch)

    assert resp.status_code == 500
    assert resp.body == "Get Status Failed"


def test_template_failure_is_500(feed):
    with patch("ebike_status.handler.render_html", side_effect=RenderError("Template Error")):
        resp = handle(StatusRequest(), fetch=lambda: feed)

    assert resp.status_code == 500
    assert resp.body == "Template Error"


def test_default_fetch_uses_feed(mock_get):
    resp = handle(StatusRequest(fmt="text"))

    assert resp.status_code == 200
    mock_get.assert_called_once()


def test_report(feed):
    data = report(fetch=lambda: feed)

    assert data["last_updated"] == 1528845200.0
    first = data["regions"][0]
    assert first["name"] == "Embarcadero"
    assert first["stations"][0] == {"id": "22", "name": "Howard St at Beale St", "count": 5, "color": "green"}
    assert data["regions"][1]["stations"][0]["color"] == "red"
