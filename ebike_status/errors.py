"""Exceptions raised at the fetch and render seams."""


class EbikeStatusError(Exception):
    """Base class for errors that turn into a failed status page."""


class FeedError(EbikeStatusError):
    """The upstream station_status feed could not be fetched or decoded."""


class RenderError(EbikeStatusError):
    """The status page template failed to render."""
