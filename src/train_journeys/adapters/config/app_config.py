"""12-factor configuration adapter using environment variables and TOML timetables."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Timetable source (.toml or .xml)
    timetable_file: str | None = Field(
        default="timetable.example.toml",
        description="Path to the timetable file listing the trains and their schedules",
    )

    # Logging configuration
    log_level: str = Field(
        default="WARNING",
        description="Log level: DEBUG, INFO, WARNING, ERROR or CRITICAL",
    )
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Format string passed to logging.basicConfig",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard logging level names."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(
                "log_level must be one of 'DEBUG', 'INFO', 'WARNING', 'ERROR' or 'CRITICAL'"
            )
        return level

    @property
    def log_level_number(self) -> int:
        """Numeric logging level for logging.basicConfig."""
        return logging.getLevelNamesMapping()[self.log_level]

    def timetable_path(self) -> Path:
        """Return the configured timetable path, checking that it exists."""
        if not self.timetable_file:
            raise ValueError("timetable_file must be set to load the timetable")

        path = Path(self.timetable_file)
        if not path.exists():
            raise FileNotFoundError(f"Timetable file not found: {path}")
        return path

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse the TOML timetable file."""
        with open(self.timetable_path(), "rb") as f:
            return tomllib.load(f)

    def get_trains_config(self) -> list[dict[str, Any]]:
        """Parse and return the ``[[trains]]`` tables of the TOML timetable.

        Raises ValueError if the file is not configured, 'trains' is not a list or one of
        its entries is not a table, and FileNotFoundError if the file does not exist.
        """
        toml_data = self._load_toml_data()

        trains = toml_data.get("trains", [])
        if not isinstance(trains, list):
            raise ValueError("TOML timetable 'trains' must be a list")
        if not all(isinstance(t, dict) for t in trains):
            raise ValueError("TOML timetable 'trains' entries must be tables")
        return trains
