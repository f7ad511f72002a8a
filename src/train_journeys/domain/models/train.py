"""Train domain model."""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from train_journeys.domain.errors import InvalidArgumentError
from train_journeys.domain.models.station import Station
from train_journeys.domain.models.time_of_day import Time

Stop = tuple[Time, Station]


class TrainKind(str, Enum):
    """Category of a train."""

    ICE = "ICE"
    RE = "RE"
    BRB = "BRB"

    @classmethod
    def parse(cls, text: str) -> "TrainKind":
        """Parse a train kind case-insensitively."""
        if text is None:
            raise InvalidArgumentError("kind must not be None!")
        try:
            return cls(str(text).strip().upper())
        except ValueError as e:
            known = ", ".join(kind.value for kind in cls)
            raise InvalidArgumentError(f"Unknown train kind '{text}' (expected one of {known})") from e

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Train:
    """A train running a fixed schedule of stops.

    The schedule is an ordered sequence of ``(Time, Station)`` stops. A train may
    visit the same station more than once (loops and round trips).
    """

    kind: TrainKind
    number: str
    schedule: tuple[Stop, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.kind, TrainKind):
            raise InvalidArgumentError("kind must be a TrainKind!")
        if not isinstance(self.number, str) or not self.number.strip():
            raise InvalidArgumentError("number must be a non-empty string!")
        if self.schedule is None:
            raise InvalidArgumentError("schedule must not be None!")
        # Frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "schedule", _freeze_schedule(self.schedule))
        if len(self.schedule) < 2:
            raise InvalidArgumentError("schedule must contain at least two stops!")

    @property
    def stations(self) -> tuple[Station, ...]:
        """Stations in the order the train stops at them."""
        return tuple(station for _, station in self.schedule)

    @property
    def station_set(self) -> frozenset[Station]:
        """Distinct stations served by the train."""
        return frozenset(self.stations)

    def __str__(self) -> str:
        return f"{self.kind.value} {self.number}"


def _freeze_schedule(schedule: Iterable[Stop]) -> tuple[Stop, ...]:
    stops: list[Stop] = []
    for entry in schedule:
        if not isinstance(entry, tuple) or len(entry) != 2:
            raise InvalidArgumentError(f"schedule entry must be a (Time, Station) pair: {entry!r}")
        time, station = entry
        if not isinstance(time, Time) or not isinstance(station, Station):
            raise InvalidArgumentError(f"schedule entry must be a (Time, Station) pair: {entry!r}")
        stops.append((time, station))
    return tuple(stops)
