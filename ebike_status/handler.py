"""
The one request handler behind both the local server and Lambda.

Entry adapters build a StatusRequest from whatever they were called with and
turn the StatusResponse back into their own response shape.
"""

from dataclasses import dataclass

from ebike_status.errors import FeedError, RenderError
from ebike_status.feed import fetch_station_status
from ebike_status.log import get_logger
from ebike_status.render import render_html, render_text, wants_text
from ebike_status.stations import populate_counts

logger = get_logger(__name__)

HTML_CONTENT_TYPE = "text/html; charset=utf-8"
TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"


@dataclass(frozen=True)
class StatusRequest:
    accept: str | None = None
    user_agent: str | None = None
    fmt: str | None = None


@dataclass(frozen=True)
class StatusResponse:
    status_code: int
    body: str
    content_type: str = TEXT_CONTENT_TYPE

    def headers(self) -> dict[str, str]:
        return {"Content-Type": self.content_type}


def handle(request, fetch=fetch_station_status):
    """Fetch, join, render. Upstream or template failures come back as 500."""
    try:
        feed = fetch()
    except FeedError:
        return StatusResponse(500, "Get Status Failed")

    regions = populate_counts(feed.by_id())
    as_text = wants_text(request.accept, request.user_agent, request.fmt)
    try:
        if as_text:
            body = render_text(regions, feed.last_updated)
        else:
            body = render_html(regions, feed.last_updated)
    except RenderError:
        return StatusResponse(500, "Template Error")

    logger.info(
        "status_rendered",
        format="text" if as_text else "html",
        stations=sum(len(r.stations) for r in regions),
    )
    return StatusResponse(200, body, TEXT_CONTENT_TYPE if as_text else HTML_CONTENT_TYPE)


def report(fetch=fetch_station_status):
    """
    Joined station data as JSON-ready dicts.

    Raises FeedError if the upstream fetch fails.
    """
    feed = fetch()
    regions = populate_counts(feed.by_id())
    return {
        "last_updated": feed.last_updated,
        "regions": [
            {
                "name": r.name,
                "stations": [
                    {"id": s.id, "name": s.name, "count": s.count, "color": s.color.value}
                    for s in r.stations
                ],
            }
            for r in regions
        ],
    }
