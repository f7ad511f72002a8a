"""Railway journey queries over a fixed timetable."""

__version__ = "0.1.0"
