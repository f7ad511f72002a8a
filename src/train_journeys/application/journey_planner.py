"""Journey planner service."""

import logging
from collections.abc import Iterable

from train_journeys.domain.errors import InvalidArgumentError
from train_journeys.domain.models import Station, Time, Train

logger = logging.getLogger(__name__)


class JourneyPlanner:
    """Answers journey queries over a fixed set of trains.

    The planner is immutable: construct a new one whenever the trains change.
    """

    def __init__(self, trains: Iterable[Train]) -> None:
        """Initialize with the trains to plan journeys for."""
        if trains is None:
            raise InvalidArgumentError("trains must not be None!")
        self._trains: frozenset[Train] = frozenset(trains)
        self._stations: frozenset[Station] = frozenset(
            station for train in self._trains for station in train.station_set
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                f"Initialized with the following {len(self._trains)} trains:\n"
                + "\n".join(sorted(str(train) for train in self._trains))
            )

    @property
    def trains(self) -> frozenset[Train]:
        """All trains known to the planner."""
        return self._trains

    @property
    def stations(self) -> frozenset[Station]:
        """All stations served by at least one train."""
        return self._stations

    def trains_at(self, station: Station) -> set[Train]:
        """Trains stopping at the given station."""
        _require(station, "station")
        return {train for train in self._trains if station in train.station_set}

    def departures(self, station: Station) -> set[tuple[Time, Train]]:
        """Departure times at the given station, paired with their trains.

        A train stopping at the station more than once contributes one pair per
        visit.
        """
        _require(station, "station")
        return {
            (time, train)
            for train in self._trains
            for time, stop in train.schedule
            if stop == station
        }

    def is_short_trip(self, from_station: Station, to_station: Station) -> bool:
        """Check whether a single train connects the stations with at most one stop between.

        Only the first visit of each train to ``from_station`` is considered, and
        a trip from a station to itself is never short.
        """
        _require(from_station, "from_station")
        _require(to_station, "to_station")
        if from_station == to_station:
            return False
        return any(
            _reaches_within_one_stop(train.stations, from_station, to_station)
            for train in self._trains
        )


def _reaches_within_one_stop(
    stations: tuple[Station, ...], from_station: Station, to_station: Station
) -> bool:
    if from_station not in stations:
        return False
    remaining = stations[stations.index(from_station) :]
    # Adjacent: [from, to, ...]; one stop between: [from, _, to, ...]
    return to_station in remaining[1:3]


def _require(value: object, name: str) -> None:
    if value is None:
        raise InvalidArgumentError(f"{name} must not be None!")
