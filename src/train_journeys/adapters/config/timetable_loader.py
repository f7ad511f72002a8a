"""Timetable loaders turning configuration files into trains."""

import logging
from typing import Any

from train_journeys.adapters.config.app_config import AppConfig
from train_journeys.adapters.xml_format import XmlTimetableRepository
from train_journeys.domain.errors import InvalidArgumentError
from train_journeys.domain.models import Station, Time, Train, TrainKind
from train_journeys.domain.ports import TimetableRepository

logger = logging.getLogger(__name__)


class TomlTimetableRepository:
    """Loads trains from the ``[[trains]]`` tables of a TOML timetable."""

    def __init__(self, config: AppConfig) -> None:
        """Initialize with the app config naming the timetable file."""
        self._config = config

    def get_trains(self) -> set[Train]:
        """Load all trains of the timetable."""
        trains_data = self._config.get_trains_config()
        trains = {self.load_train_from_data(train_data) for train_data in trains_data}
        logger.info(f"Loaded {len(trains)} train(s) from {self._config.timetable_file}")
        return trains

    @staticmethod
    def load_train_from_data(train_data: dict[str, Any]) -> Train:
        """Load a single train from a TOML table.

        Expected shape::

            kind = "ICE"
            number = "724"
            schedule = [{time = "08:50", station = "Munich"}, ...]
        """
        number = train_data.get("number")
        if isinstance(number, int) and not isinstance(number, bool):
            number = str(number)
        label = f"{train_data.get('kind', '?')} {number or '?'}"

        schedule_data = train_data.get("schedule", [])
        if not isinstance(schedule_data, list):
            raise InvalidArgumentError(f"Train {label}: 'schedule' must be a list")

        try:
            kind = TrainKind.parse(train_data.get("kind"))
            schedule = [_load_stop(stop_data) for stop_data in schedule_data]
            return Train(kind, number, schedule)
        except InvalidArgumentError as e:
            raise InvalidArgumentError(f"Train {label}: {e}") from e


def _load_stop(stop_data: Any) -> tuple[Time, Station]:
    if not isinstance(stop_data, dict):
        raise InvalidArgumentError(f"schedule entries must be tables, got {stop_data!r}")
    return Time.parse(stop_data.get("time")), Station(stop_data.get("station"))


def load_timetable(config: AppConfig) -> TimetableRepository:
    """Pick the timetable repository matching the configured file's suffix."""
    path = config.timetable_path()
    if path.suffix.lower() == ".xml":
        return XmlTimetableRepository(path)
    return TomlTimetableRepository(config)
