"""
Station status from the bike-share GBFS feed.

fetch_station_status() does the HTTP GET; decode_station_status() turns the
parsed envelope into StationStatus records so callers never touch raw dicts.
"""

import math
from dataclasses import dataclass, field

import requests

from ebike_status.config import FEED_TIMEOUT, STATUS_URL
from ebike_status.errors import FeedError
from ebike_status.log import get_logger

logger = get_logger(__name__)


def _int(value):
    """GBFS counts are ints, but some feeds send bools or numeric strings."""
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return 0


def _float(value):
    """Epoch seconds or ttl; anything non-numeric or non-finite reads as 0."""
    try:
        f = float(value or 0)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    return f if math.isfinite(f) else 0.0


@dataclass(frozen=True)
class StationStatus:
    station_id: str
    num_bikes_available: int = 0
    num_ebikes_available: int = 0
    num_bikes_disabled: int = 0
    num_docks_available: int = 0
    num_docks_disabled: int = 0
    is_installed: int = 0
    is_renting: int = 0
    is_returning: int = 0
    last_reported: int = 0
    eightd_has_available_keys: bool = False

    @classmethod
    def from_dict(cls, raw):
        return cls(
            station_id=str(raw.get("station_id") or ""),
            num_bikes_available=_int(raw.get("num_bikes_available")),
            num_ebikes_available=_int(raw.get("num_ebikes_available")),
            num_bikes_disabled=_int(raw.get("num_bikes_disabled")),
            num_docks_available=_int(raw.get("num_docks_available")),
            num_docks_disabled=_int(raw.get("num_docks_disabled")),
            is_installed=_int(raw.get("is_installed")),
            is_renting=_int(raw.get("is_renting")),
            is_returning=_int(raw.get("is_returning")),
            last_reported=_int(raw.get("last_reported")),
            eightd_has_available_keys=bool(raw.get("eightd_has_available_keys", False)),
        )


@dataclass(frozen=True)
class StationStatusResponse:
    stations: list[StationStatus] = field(default_factory=list)
    last_updated: float = 0.0
    ttl: float = 0.0

    def by_id(self) -> dict[str, StationStatus]:
        """Station ID -> status. Later duplicates replace earlier ones."""
        return {s.station_id: s for s in self.stations}


def decode_station_status(payload) -> StationStatusResponse:
    """
    Decode a parsed station_status.json envelope.

    Raises FeedError if the envelope has no data object or the stations
    list is not a list. Station entries that are not objects are skipped.
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("data"), dict):
        raise FeedError("Invalid station status response: missing 'data' object")
    raw_stations = payload["data"].get("stations", [])
    if not isinstance(raw_stations, list):
        raise FeedError("Invalid station status response: 'stations' is not a list")

    stations = [StationStatus.from_dict(s) for s in raw_stations if isinstance(s, dict)]
    return StationStatusResponse(
        stations=stations,
        last_updated=_float(payload.get("last_updated")),
        ttl=_float(payload.get("ttl")),
    )


def fetch_station_status(url=STATUS_URL, timeout=FEED_TIMEOUT) -> StationStatusResponse:
    """
    GET the station_status feed and decode it.

    - url: the station_status.json URL (default from STATUS_URL).
    - timeout: seconds before giving up on the upstream.

    Raises FeedError on network errors, non-2xx responses, bad JSON or a bad envelope.
    """
    try:
        r = requests.get(url, timeout=timeout)
        r.raise_for_status()
        r.encoding = "utf-8-sig"
        payload = r.json()
    except requests.exceptions.JSONDecodeError as e:
        logger.error("station_status_decode_failed", url=url, error=str(e), error_type=type(e).__name__)
        raise FeedError(f"Failed to parse station status from {url}: {e}") from e
    except requests.exceptions.RequestException as e:
        logger.error("station_status_fetch_failed", url=url, error=str(e), error_type=type(e).__name__)
        raise FeedError(f"Failed to fetch station status from {url}: {e}") from e

    try:
        resp = decode_station_status(payload)
    except FeedError as e:
        logger.error("station_status_decode_failed", url=url, error=str(e), error_type=type(e).__name__)
        raise

    logger.debug("station_status_fetched", url=url, stations=len(resp.stations), last_updated=resp.last_updated)
    return resp
