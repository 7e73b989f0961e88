"""Pure race schedule logic - parsing and next-race selection."""

import logging
from dataclasses import dataclass
from datetime import date

logger = logging.getLogger(__name__)


@dataclass
class Race:
    """A scheduled race."""

    name: str
    date: date
    circuit_name: str = ""
    locality: str = ""
    country: str = ""

    def format_location(self) -> str:
        """Circuit - locality, country (missing parts render empty)."""
        return f"{self.circuit_name} - {self.locality}, {self.country}"

    @classmethod
    def from_api(cls, data: dict) -> "Race":
        """Create Race from an Ergast-style race record."""
        circuit = data.get("Circuit") or {}
        location = circuit.get("Location") or {}
        return cls(
            name=data.get("raceName") or "",
            date=date.fromisoformat(data["date"]),
            circuit_name=circuit.get("circuitName") or "",
            locality=location.get("locality") or "",
            country=location.get("country") or "",
        )


class NoUpcomingRace:
    """Sentinel: the schedule has no race on or after today."""

    def __repr__(self) -> str:
        return "NO_UPCOMING_RACE"

    def __bool__(self) -> bool:
        return False


NO_UPCOMING_RACE = NoUpcomingRace()


def parse_schedule(payload: dict) -> list[Race]:
    """
    Extract races from an MRData.RaceTable.Races payload.

    Raises KeyError/TypeError if the envelope is malformed. Individual
    records without a usable date are skipped.
    """
    records = payload["MRData"]["RaceTable"]["Races"]
    if not isinstance(records, list):
        raise TypeError("Races is not a list")

    races = []
    for record in records:
        try:
            races.append(Race.from_api(record))
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.warning(f"Skipping malformed race record: {e}")
    return races


def select_next_race(races: list[Race], as_of: date | None = None) -> Race | NoUpcomingRace:
    """
    First race dated on or after as_of.

    Input is assumed to be in ascending date order; no sort is applied.
    """
    as_of = as_of or date.today()
    return next((r for r in races if r.date >= as_of), NO_UPCOMING_RACE)
