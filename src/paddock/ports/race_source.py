"""Race schedule source interface."""

from datetime import date
from typing import Protocol

from paddock.core.races import NoUpcomingRace, Race


class RaceSource(Protocol):
    """Interface for fetching a race schedule from ordered endpoints."""

    def fetch_schedule(self, endpoint: str) -> list[Race]:
        """Fetch and parse the schedule from one endpoint. Raises on any failure."""
        ...

    def fetch_next(self, endpoints: list[str], as_of: date | None = None) -> Race | NoUpcomingRace:
        """Next race from the first endpoint that answers."""
        ...
