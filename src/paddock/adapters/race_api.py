"""Race schedule API adapter - HTTP client with endpoint fallback."""

import logging
from collections.abc import Callable, Iterable
from datetime import date
from typing import TypeVar

import requests

from paddock.core.races import NoUpcomingRace, Race, parse_schedule, select_next_race
from paddock.errors import AllEndpointsFailedError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Errors that count as "this endpoint failed": transport errors, non-200
# status (HTTPError), bad JSON (ValueError) and a malformed envelope.
ENDPOINT_ERRORS = (requests.RequestException, ValueError, KeyError, TypeError)


def first_success(attempts: Iterable[tuple[str, Callable[[], T]]]) -> T:
    """
    Run labelled attempts in order and return the first successful result.

    Each attempt runs only after the previous one has settled. Raises
    AllEndpointsFailedError carrying every (label, error) pair if none succeed.
    """
    errors: list[tuple[str, Exception]] = []
    for label, attempt in attempts:
        try:
            return attempt()
        except ENDPOINT_ERRORS as e:
            logger.warning(f"Race endpoint failed, trying next: {label} ({e})")
            errors.append((label, e))
    raise AllEndpointsFailedError(errors)


class RaceAPIAdapter:
    """
    Ergast-style race schedule adapter.

    Implements RaceSource protocol. No business logic - just I/O and
    the fallback chain.
    """

    def __init__(self, timeout: float | None = 10.0, session: requests.Session | None = None):
        self.timeout = timeout
        self._session = session or requests.Session()

    def fetch_schedule(self, endpoint: str) -> list[Race]:
        """Fetch and parse the schedule from one endpoint. Raises on failure."""
        resp = self._session.get(endpoint, timeout=self.timeout)
        if resp.status_code != 200:
            raise requests.HTTPError(f"Unexpected status {resp.status_code} from {endpoint}", response=resp)
        return parse_schedule(resp.json())

    def fetch_next(self, endpoints: list[str], as_of: date | None = None) -> Race | NoUpcomingRace:
        """
        Next race on or after as_of, from the first endpoint that answers.

        Returns NO_UPCOMING_RACE if the schedule has no future race.
        """
        attempts = [
            (endpoint, lambda endpoint=endpoint: self.fetch_schedule(endpoint))
            for endpoint in endpoints
        ]
        races = first_success(attempts)
        return select_next_race(races, as_of)
