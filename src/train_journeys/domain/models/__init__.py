"""Domain models for train journeys."""

from train_journeys.domain.models.station import Station
from train_journeys.domain.models.time_of_day import Time
from train_journeys.domain.models.train import Stop, Train, TrainKind

__all__ = [
    "Station",
    "Stop",
    "Time",
    "Train",
    "TrainKind",
]
