"""Ports (interfaces) for the ports-and-adapters architecture."""

from train_journeys.domain.ports.timetable_repository import TimetableRepository

__all__ = ["TimetableRepository"]
