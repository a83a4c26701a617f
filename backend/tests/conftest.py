"""Shared fixtures for matchup fetching tests."""
from urllib.parse import urlsplit

import httpx
import pytest


def summary_text(win_rate, vs_average, normalized):
    return (
        f"This champion wins {win_rate}% of the time which is {vs_average}% different "
        f"than its average. After normalising both champions win rates it wins "
        f"{normalized}% different than expected."
    )


def matchup_page(summary, games="1,234"):
    return (
        "<html><body>"
        f'<div class="lolx-links"><span>{summary}</span><span>Builds</span></div>'
        '<div class="w-44"><div><div>Win Rate</div>'
        f"<div><div>{games}</div><div>Games</div></div>"
        "</div></div></body></html>"
    )


def target_own_slug(request: httpx.Request) -> str:
    """Own champion slug from a relayed matchup request."""
    target = request.url.params["url"]
    return urlsplit(target).path.split("/")[2]


class FakeStatsSite:
    """MockTransport handler serving matchup pages per own champion slug.

    ``pages`` maps own slug -> summary text; ``failures`` maps own slug ->
    status code; slugs in ``malformed`` get a page with no summary node.
    """

    def __init__(self, pages=None, failures=None, malformed=()):
        self.pages = dict(pages or {})
        self.failures = dict(failures or {})
        self.malformed = set(malformed)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        own = target_own_slug(request)
        if own in self.failures:
            return httpx.Response(self.failures[own], text="error")
        if own in self.malformed:
            return httpx.Response(200, text="<html><body>Relay error</body></html>")
        summary = self.pages.get(own, "No data")
        return httpx.Response(200, text=matchup_page(summary))

    @property
    def requested_slugs(self) -> list[str]:
        return [target_own_slug(r) for r in self.requests]


@pytest.fixture
def stats_site():
    return FakeStatsSite(
        pages={
            "aatrox": summary_text(51.2, 1.1, 0.8),
            "garen": summary_text(53.4, 2.6, 1.9),
            "sett": summary_text(49.0, -0.5, -1.2),
        }
    )


@pytest.fixture
def make_fetcher():
    from counterpick.services.matchup_fetcher import MatchupFetcher

    def _make(handler):
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return MatchupFetcher(
            relay_base_url="https://relay.test",
            stats_base_url="https://stats.test",
            client=client,
        )

    return _make


@pytest.fixture
def anyio_backend():
    return "asyncio"
