"""Station domain model."""

from dataclasses import dataclass

from train_journeys.domain.errors import InvalidArgumentError


@dataclass(frozen=True)
class Station:
    """Represents a railway station, identified by its name."""

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidArgumentError("name must be a non-empty string!")

    def __str__(self) -> str:
        return self.name
