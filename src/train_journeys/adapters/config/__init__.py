"""Configuration adapters."""

from train_journeys.adapters.config.app_config import AppConfig
from train_journeys.adapters.config.timetable_loader import (
    TomlTimetableRepository,
    load_timetable,
)

__all__ = ["AppConfig", "TomlTimetableRepository", "load_timetable"]
