"""Tests for timetable loading."""

from pathlib import Path

import pytest

from train_journeys.adapters.config import AppConfig, TomlTimetableRepository, load_timetable
from train_journeys.adapters.xml_format import XmlTimetableRepository, to_string
from train_journeys.domain.errors import InvalidArgumentError
from train_journeys.domain.models import Station, Time, Train, TrainKind

EXAMPLE_TIMETABLE = Path(__file__).resolve().parent.parent / "timetable.example.toml"


def _write(tmp_path: Path, name: str, content: str) -> str:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return str(path)


def test_load_train_from_data() -> None:
    """Given a TOML train table, when loading it, then the Train is built."""
    train = TomlTimetableRepository.load_train_from_data(
        {
            "kind": "re",
            "number": 4010,
            "schedule": [
                {"time": "08:00", "station": "Nuremberg"},
                {"time": "09:45", "station": "Frankfurt"},
            ],
        }
    )

    assert train == Train(
        TrainKind.RE,
        "4010",
        [(Time(8, 0), Station("Nuremberg")), (Time(9, 45), Station("Frankfurt"))],
    )


@pytest.mark.parametrize(
    ("train_data", "message"),
    [
        ({"kind": "TGV", "number": "1", "schedule": []}, "Unknown train kind"),
        ({"kind": "ICE", "number": "1", "schedule": "A,B"}, "'schedule' must be a list"),
        (
            {"kind": "ICE", "number": "1", "schedule": [{"time": "8:00", "station": "A"}] * 2},
            "does not match the time pattern",
        ),
        (
            {"kind": "ICE", "number": "1", "schedule": [{"time": "08:00"}] * 2},
            "name must be a non-empty string",
        ),
        ({"kind": "ICE", "number": "1", "schedule": ["A", "B"]}, "must be tables"),
        (
            {"kind": "ICE", "schedule": [{"time": "08:00", "station": "A"}] * 2},
            "number must be a non-empty string",
        ),
        (
            {"kind": "ICE", "number": "1", "schedule": [{"time": "08:00", "station": "A"}]},
            "at least two stops",
        ),
    ],
)
def test_load_train_from_data_rejects_invalid_tables(
    train_data: dict[str, object], message: str
) -> None:
    """Given an invalid train table, when loading it, then InvalidArgumentError names the train."""
    with pytest.raises(InvalidArgumentError, match=message) as exc_info:
        TomlTimetableRepository.load_train_from_data(train_data)

    assert str(exc_info.value).startswith("Train ")


def test_toml_repository_loads_example_timetable() -> None:
    """Given the example timetable, when loading trains, then all four trains are returned."""
    trains = TomlTimetableRepository(AppConfig(timetable_file=str(EXAMPLE_TIMETABLE))).get_trains()

    assert sorted(str(train) for train in trains) == ["BRB 79", "ICE 724", "ICE 726", "RE 4010"]


def test_load_timetable_picks_toml_repository(tmp_path: Path) -> None:
    """Given a .toml timetable, when picking the repository, then the TOML one is used."""
    path = _write(tmp_path, "timetable.toml", "")

    repository = load_timetable(AppConfig(timetable_file=path))

    assert isinstance(repository, TomlTimetableRepository)
    assert repository.get_trains() == set()


def test_load_timetable_picks_xml_repository(tmp_path: Path) -> None:
    """Given a .xml timetable, when picking the repository, then the XML one is used."""
    train = Train(TrainKind.ICE, "1", [(Time(8), Station("A")), (Time(9), Station("B"))])
    path = _write(tmp_path, "timetable.XML", to_string(XmlTimetableRepository.to_xml({train})))

    repository = load_timetable(AppConfig(timetable_file=path))

    assert isinstance(repository, XmlTimetableRepository)
    assert repository.get_trains() == {train}


def test_load_timetable_raises_for_missing_file(tmp_path: Path) -> None:
    """Given a missing timetable file, when picking the repository, then FileNotFoundError is raised."""
    with pytest.raises(FileNotFoundError):
        load_timetable(AppConfig(timetable_file=str(tmp_path / "missing.toml")))


def test_toml_repository_rejects_trains_that_are_not_tables(tmp_path: Path) -> None:
    """Given trains listed as strings, when loading trains, then ValueError is raised."""
    path = _write(tmp_path, "timetable.toml", 'trains = ["ICE 724", "RE 4010"]\n')

    with pytest.raises(ValueError, match="'trains' entries must be tables"):
        TomlTimetableRepository(AppConfig(timetable_file=path)).get_trains()
