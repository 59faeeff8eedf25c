"""
Hardcoded station directory and the join against live status.

REGIONS is the only "database": stations we care about, grouped by
neighborhood, in display order. populate_counts() copies it and fills in the
e-bike count and color tier from the feed.
"""

from dataclasses import dataclass, field, replace
from enum import Enum

from ebike_status.config import GREEN_THRESHOLD


class Color(str, Enum):
    """Availability tier; the value doubles as the CSS class."""

    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"


@dataclass(frozen=True)
class StationInfo:
    id: str
    name: str
    count: int = 0
    color: Color = Color.RED

    @property
    def bars(self):
        """One item per available e-bike; the template draws a bar for each."""
        return [None] * max(self.count, 0)


@dataclass(frozen=True)
class Region:
    name: str
    stations: list[StationInfo] = field(default_factory=list)


REGIONS = [
    Region(
        name="Embarcadero",
        stations=[
            StationInfo(id="22", name="Howard St at Beale St"),
            StationInfo(id="17", name="Beale St at Market St"),
            StationInfo(id="20", name="Market St at Bush St"),
        ],
    ),
    Region(
        name="Mission",
        stations=[
            StationInfo(id="139", name="25th St at Harrison St"),
            StationInfo(id="129", name="Harrison St at 20th St"),
            StationInfo(id="125", name="20th St at Bryant St"),
            StationInfo(id="124", name="19th St at Florida St"),
        ],
    ),
    Region(
        name="Potrero",
        stations=[
            StationInfo(id="130", name="22nd St Caltrain Station"),
            StationInfo(id="126", name="Esprit Park"),
        ],
    ),
]


def station_ids(regions=REGIONS):
    """All configured station IDs, in display order."""
    return [s.id for r in regions for s in r.stations]


def classify(count, present=True, green_threshold=GREEN_THRESHOLD):
    """
    Color tier for a station.

    Red when the station is missing from the feed or has nothing available,
    yellow below green_threshold, green otherwise.
    """
    if not present or count <= 0:
        return Color.RED
    if count < green_threshold:
        return Color.YELLOW
    return Color.GREEN


def populate_counts(stations_by_id, regions=REGIONS, green_threshold=GREEN_THRESHOLD):
    """
    Join the static directory with live status.

    - stations_by_id: station ID -> StationStatus (see StationStatusResponse.by_id()).
    - regions: directory to fill in; never mutated.

    Returns a new list of Region with count and color set on every station.
    """
    out_regions = []
    for region in regions:
        out = []
        for info in region.stations:
            status = stations_by_id.get(info.id)
            count = status.num_ebikes_available if status is not None else 0
            out.append(
                replace(
                    info,
                    count=count,
                    color=classify(count, present=status is not None, green_threshold=green_threshold),
                )
            )
        out_regions.append(replace(region, stations=out))
    return out_regions
