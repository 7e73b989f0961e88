"""Next-race lookup wired to configuration."""

import logging
from dataclasses import dataclass
from datetime import date

from .adapters.race_api import RaceAPIAdapter
from .config import Config, load_config
from .core.races import NO_UPCOMING_RACE, NoUpcomingRace, Race
from .errors import AllEndpointsFailedError
from .ports.race_source import RaceSource

logger = logging.getLogger(__name__)

SEASON_FINISHED = "Season Finished"
UNAVAILABLE = "Unable to load race data"


@dataclass
class RaceDisplay:
    """The three lines of the next-race block."""

    name: str
    location: str = ""
    date: str = ""

    def lines(self) -> list[str]:
        return [line for line in (self.name, self.location, self.date) if line]


def fetch_next_race(
    config: Config | None = None,
    adapter: RaceSource | None = None,
    as_of: date | None = None,
) -> Race | NoUpcomingRace:
    """Next race from the configured endpoints. Raises AllEndpointsFailedError."""
    config = config or load_config()
    adapter = adapter or RaceAPIAdapter(timeout=config.request_timeout)
    return adapter.fetch_next(config.race_endpoints, as_of)


def next_race_display(
    config: Config | None = None,
    adapter: RaceSource | None = None,
    as_of: date | None = None,
) -> RaceDisplay:
    """Next-race block text; lookup failures degrade to a placeholder."""
    try:
        race = fetch_next_race(config, adapter, as_of)
    except AllEndpointsFailedError as e:
        logger.error(f"Race lookup failed: {e}")
        return RaceDisplay(UNAVAILABLE)

    if race is NO_UPCOMING_RACE:
        return RaceDisplay(SEASON_FINISHED)
    return RaceDisplay(race.name, race.format_location(), race.date.isoformat())
