"""Domain layer - core models and ports."""

from train_journeys.domain.errors import InvalidArgumentError
from train_journeys.domain.models import Station, Time, Train, TrainKind
from train_journeys.domain.ports import TimetableRepository

__all__ = [
    "InvalidArgumentError",
    "Station",
    "Time",
    "TimetableRepository",
    "Train",
    "TrainKind",
]
