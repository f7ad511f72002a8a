"""Timetable repository port."""

from typing import Protocol

from train_journeys.domain.models.train import Train


class TimetableRepository(Protocol):
    """Port for retrieving the trains of a timetable."""

    def get_trains(self) -> set[Train]:
        """Load all trains of the timetable."""
        ...
