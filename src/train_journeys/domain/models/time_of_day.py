"""Wall-clock time domain model."""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from train_journeys.domain.errors import InvalidArgumentError

MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24

_TIME_PATTERN = re.compile(r"([0-9]{2}):([0-9]{2})")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Time:
    """A time of day with minute precision and no date component.

    Instances are immutable, compare by value and are totally ordered by the
    number of minutes since midnight.
    """

    hours: int = 0
    minutes: int = 0

    def __post_init__(self) -> None:
        if not _is_int(self.hours):
            raise InvalidArgumentError("hours must be an integer!")
        if not _is_int(self.minutes):
            raise InvalidArgumentError("minutes must be an integer!")
        if self.hours < 0:
            raise InvalidArgumentError("hours must not be negative!")
        if self.hours >= HOURS_PER_DAY:
            raise InvalidArgumentError("hours must be less than 24!")
        if self.minutes < 0:
            raise InvalidArgumentError("minutes must not be negative!")
        if self.minutes >= MINUTES_PER_HOUR:
            raise InvalidArgumentError("minutes must be less than 60!")

    @classmethod
    def from_minutes(cls, minutes: int) -> "Time":
        """Create a Time from the number of minutes since midnight."""
        if minutes is None:
            raise InvalidArgumentError("minutes must not be None!")
        if not _is_int(minutes):
            raise InvalidArgumentError("minutes must be an integer!")
        if minutes < 0:
            raise InvalidArgumentError("minutes must not be negative!")
        return cls(minutes // MINUTES_PER_HOUR, minutes % MINUTES_PER_HOUR)

    @classmethod
    def parse(cls, text: str) -> "Time":
        """Parse a time formatted as ``HH:MM``.

        Args:
            text: Two-digit hours and two-digit minutes separated by a colon.

        Returns:
            The parsed Time.

        Raises:
            InvalidArgumentError: If text is None, does not match the pattern or
                holds out-of-range values.
        """
        if text is None:
            raise InvalidArgumentError("text must not be None!")
        if not isinstance(text, str):
            raise InvalidArgumentError(f"text must be a string, got {type(text).__name__}!")
        match = _TIME_PATTERN.fullmatch(text)
        if match is None:
            raise InvalidArgumentError(f"'{text}' does not match the time pattern HH:MM!")
        return cls(int(match.group(1)), int(match.group(2)))

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Time":
        """Create a Time from a mapping with ``hours`` and ``minutes`` entries.

        Values may be integers or digit strings (e.g. XML attributes).
        """
        if record is None:
            raise InvalidArgumentError("record must not be None!")
        return cls(_field_as_int(record, "hours"), _field_as_int(record, "minutes"))

    @property
    def as_minutes(self) -> int:
        """Total minutes since midnight."""
        return self.minutes + MINUTES_PER_HOUR * self.hours

    def difference(self, other: "Time") -> int:
        """Signed difference in minutes between this time and other."""
        if other is None:
            raise InvalidArgumentError("other must not be None!")
        if not isinstance(other, Time):
            raise InvalidArgumentError(f"other must be a Time, got {type(other).__name__}!")
        return self.as_minutes - other.as_minutes

    def __sub__(self, other: "Time") -> int:
        if not isinstance(other, Time):
            return NotImplemented
        return self.difference(other)

    def _compare_key(self, other: Any) -> int | None:
        if other is None:
            raise InvalidArgumentError("cannot compare a Time with None!")
        if not isinstance(other, Time):
            return None
        return other.as_minutes

    def __lt__(self, other: Any) -> bool:
        key = self._compare_key(other)
        if key is None:
            return NotImplemented
        return self.as_minutes < key

    def __le__(self, other: Any) -> bool:
        key = self._compare_key(other)
        if key is None:
            return NotImplemented
        return self.as_minutes <= key

    def __gt__(self, other: Any) -> bool:
        key = self._compare_key(other)
        if key is None:
            return NotImplemented
        return self.as_minutes > key

    def __ge__(self, other: Any) -> bool:
        key = self._compare_key(other)
        if key is None:
            return NotImplemented
        return self.as_minutes >= key

    def __str__(self) -> str:
        return f"{self.hours:02d}:{self.minutes:02d}"


def _field_as_int(record: Mapping[str, Any], name: str) -> int:
    if name not in record or record[name] is None:
        raise InvalidArgumentError(f"{name} must be present!")
    value = record[name]
    if _is_int(value):
        return value
    if isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)
    raise InvalidArgumentError(f"{name} must be numeric, got '{value}'!")
