"""Domain exceptions."""


class CounterpickError(Exception):
    """Base class for all counterpick errors."""


class CatalogUnavailableError(CounterpickError):
    """The champion catalog (version list or champion data) could not be loaded."""


class MatchupFetchError(CounterpickError):
    """A single matchup page request failed."""

    def __init__(self, key: str, reason: str):
        super().__init__(f"Fetch failed for {key}: {reason}")
        self.key = key
        self.reason = reason


class MalformedPayloadError(CounterpickError):
    """The relay answered successfully but the page has no summary node."""
