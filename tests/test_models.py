"""Tests for station and train domain models."""

import pytest

from train_journeys.domain.errors import InvalidArgumentError
from train_journeys.domain.models import Station, Time, Train, TrainKind


def test_station_creation() -> None:
    """Given a name, when creating a Station, then the name is set and used as str."""
    station = Station("Munich")

    assert station.name == "Munich"
    assert str(station) == "Munich"
    assert station == Station("Munich")


@pytest.mark.parametrize("name", [None, "", "   ", 42])
def test_station_rejects_invalid_names(name: object) -> None:
    """Given a missing or blank name, when creating a Station, then InvalidArgumentError is raised."""
    with pytest.raises(InvalidArgumentError, match="name must be a non-empty string"):
        Station(name)  # type: ignore[arg-type]


def test_station_is_frozen() -> None:
    """Given a Station, when trying to modify it, then AttributeError is raised."""
    station = Station("Munich")

    with pytest.raises(AttributeError):
        station.name = "Nuremberg"  # type: ignore[misc]


@pytest.mark.parametrize("text", ["ICE", "ice", " Re ", "brb"])
def test_train_kind_parse_is_case_insensitive(text: str) -> None:
    """Given a known kind in any case, when parsing, then the TrainKind is returned."""
    assert TrainKind.parse(text).value == text.strip().upper()


@pytest.mark.parametrize("text", [None, "", "TGV"])
def test_train_kind_parse_rejects_unknown_kinds(text: str | None) -> None:
    """Given an unknown kind, when parsing, then InvalidArgumentError is raised."""
    with pytest.raises(InvalidArgumentError):
        TrainKind.parse(text)  # type: ignore[arg-type]


def _schedule() -> list[tuple[Time, Station]]:
    return [
        (Time(8, 50), Station("Munich")),
        (Time(10, 10), Station("Nuremberg")),
        (Time(12, 10), Station("Frankfurt")),
    ]


def test_train_creation() -> None:
    """Given a schedule, when creating a Train, then stations follow the schedule order."""
    train = Train(TrainKind.ICE, "724", _schedule())

    assert train.kind is TrainKind.ICE
    assert train.number == "724"
    assert train.stations == (Station("Munich"), Station("Nuremberg"), Station("Frankfurt"))
    assert train.station_set == frozenset(train.stations)
    assert str(train) == "ICE 724"


def test_train_freezes_schedule_into_tuple() -> None:
    """Given a list schedule, when creating a Train, then it is stored as a tuple and hashable."""
    schedule = _schedule()
    train = Train(TrainKind.ICE, "724", schedule)
    schedule.append((Time(13, 39), Station("Cologne")))

    assert isinstance(train.schedule, tuple)
    assert len(train.schedule) == 3
    assert hash(train) == hash(Train(TrainKind.ICE, "724", tuple(_schedule())))
    assert len({train, Train(TrainKind.ICE, "724", _schedule())}) == 1


def test_train_keeps_repeated_stations() -> None:
    """Given a round trip schedule, when creating a Train, then repeated stations are kept in order."""
    train = Train(
        TrainKind.BRB,
        "79",
        [
            (Time(7, 15), Station("Munich")),
            (Time(8, 5), Station("Holzkirchen")),
            (Time(9, 0), Station("Munich")),
        ],
    )

    assert train.stations == (Station("Munich"), Station("Holzkirchen"), Station("Munich"))
    assert train.station_set == {Station("Munich"), Station("Holzkirchen")}


@pytest.mark.parametrize(
    ("kind", "number", "schedule", "message"),
    [
        ("ICE", "724", _schedule(), "kind must be a TrainKind"),
        (TrainKind.ICE, "", _schedule(), "number must be a non-empty string"),
        (TrainKind.ICE, None, _schedule(), "number must be a non-empty string"),
        (TrainKind.ICE, "724", None, "schedule must not be None"),
        (TrainKind.ICE, "724", _schedule()[:1], "at least two stops"),
        (TrainKind.ICE, "724", [("08:50", Station("Munich"))] * 2, "schedule entry"),
        (TrainKind.ICE, "724", [(Time(8, 50),)] * 2, "schedule entry"),
    ],
)
def test_train_rejects_invalid_arguments(
    kind: object, number: object, schedule: object, message: str
) -> None:
    """Given invalid train data, when creating a Train, then InvalidArgumentError is raised."""
    with pytest.raises(InvalidArgumentError, match=message):
        Train(kind, number, schedule)  # type: ignore[arg-type]
