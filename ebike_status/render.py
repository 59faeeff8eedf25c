"""
Render joined station data as an HTML page or fixed-width text.

wants_text() decides which one a client gets: browsers get HTML, curl and
friends get text, and ?format=text|html overrides both.
"""

from datetime import datetime, timezone
from pathlib import Path
from zoneinfo import ZoneInfo

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape

from ebike_status.errors import RenderError
from ebike_status.log import get_logger

logger = get_logger(__name__)

PACIFIC = ZoneInfo("America/Los_Angeles")

# User-agent prefixes of clients that can't show HTML
TEXT_USER_AGENTS = ("curl", "wget", "httpie", "python-requests")

_env = Environment(
    loader=FileSystemLoader(Path(__file__).resolve().parent / "templates"),
    autoescape=select_autoescape(["html"]),
)


def _epoch_to_local(epoch):
    """Feed timestamp (epoch seconds) to Pacific time, e.g. '8:41 AM PST'."""
    if not epoch:
        return None
    try:
        local = datetime.fromtimestamp(float(epoch), tz=timezone.utc).astimezone(PACIFIC)
    except (ValueError, TypeError, OverflowError, OSError):
        return None
    h = local.hour % 12 or 12
    return f"{h}:{local.minute:02d} {local.strftime('%p %Z')}"


def wants_text(accept=None, user_agent=None, fmt=None):
    """True if the client should get plain text instead of HTML."""
    if fmt:
        f = fmt.strip().lower()
        if f in ("text", "txt", "plain"):
            return True
        if f == "html":
            return False
    ua = (user_agent or "").strip().lower()
    if ua.startswith(TEXT_USER_AGENTS):
        return True
    a = (accept or "").lower()
    return "text/plain" in a and "text/html" not in a


def render_html(regions, last_updated=None):
    """Status page as HTML. Raises RenderError if the template fails."""
    try:
        tmpl = _env.get_template("index.html")
        return tmpl.render(regions=regions, updated=_epoch_to_local(last_updated))
    except TemplateError as e:
        logger.error("template_render_failed", error=str(e), error_type=type(e).__name__)
        raise RenderError("Template Error") from e


def render_text(regions, last_updated=None):
    """
    Status as fixed-width text, one line per station:

        Embarcadero:
           22  Howard St at Beale St       3  yellow  ###
    """
    width = max((len(s.name) for r in regions for s in r.stations), default=0)
    lines = []
    updated = _epoch_to_local(last_updated)
    if updated:
        lines.append(f"Updated {updated}")
        lines.append("")
    for region in regions:
        lines.append(f"{region.name}:")
        for s in region.stations:
            lines.append(f"  {s.id:>4}  {s.name:<{width}}  {s.count:>3}  {s.color.value:<6}  {'#' * max(s.count, 0)}".rstrip())
        lines.append("")
    return "\n".join(lines)
