"""Adapters layer - configuration, timetable files and XML interchange."""

from train_journeys.adapters.config import AppConfig, TomlTimetableRepository, load_timetable
from train_journeys.adapters.xml_format import XmlTimetableRepository

__all__ = [
    "AppConfig",
    "TomlTimetableRepository",
    "XmlTimetableRepository",
    "load_timetable",
]
