"""XML interchange formats for times, stations and trains."""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from train_journeys.domain.errors import InvalidArgumentError
from train_journeys.domain.models import Station, Time, Train, TrainKind

logger = logging.getLogger(__name__)


def _require_element(element: ET.Element | None, tag: str) -> ET.Element:
    if element is None:
        raise InvalidArgumentError(f"{tag} xml must not be None!")
    if element.tag != tag:
        raise InvalidArgumentError(f"Expected <{tag}> element, got <{element.tag}>")
    return element


def _require_child(element: ET.Element, tag: str) -> ET.Element:
    child = element.find(tag)
    if child is None:
        raise InvalidArgumentError(f"<{element.tag}> is missing its <{tag}> element")
    return child


class TimeXmlFormat:
    """Converts Time values to and from ``<time hours="HH" minutes="MM"/>``."""

    TAG = "time"

    @staticmethod
    def to_xml(time: Time) -> ET.Element:
        if time is None:
            raise InvalidArgumentError("time must not be None!")
        return ET.Element(
            TimeXmlFormat.TAG,
            {"hours": f"{time.hours:02d}", "minutes": f"{time.minutes:02d}"},
        )

    @staticmethod
    def from_xml(element: ET.Element) -> Time:
        element = _require_element(element, TimeXmlFormat.TAG)
        return Time.from_record(element.attrib)


class StationXmlFormat:
    """Converts Station values to and from ``<station name="..."/>``."""

    TAG = "station"

    @staticmethod
    def to_xml(station: Station) -> ET.Element:
        if station is None:
            raise InvalidArgumentError("station must not be None!")
        return ET.Element(StationXmlFormat.TAG, {"name": station.name})

    @staticmethod
    def from_xml(element: ET.Element) -> Station:
        element = _require_element(element, StationXmlFormat.TAG)
        return Station(element.get("name"))


class TrainXmlFormat:
    """Converts Train values to and from XML.

    Example::

        <train kind="ICE" number="724">
          <stop><time hours="08" minutes="50"/><station name="Munich"/></stop>
          <stop><time hours="10" minutes="10"/><station name="Nuremberg"/></stop>
        </train>
    """

    TAG = "train"
    STOP_TAG = "stop"

    @staticmethod
    def to_xml(train: Train) -> ET.Element:
        if train is None:
            raise InvalidArgumentError("train must not be None!")
        element = ET.Element(
            TrainXmlFormat.TAG, {"kind": train.kind.value, "number": train.number}
        )
        for time, station in train.schedule:
            stop = ET.SubElement(element, TrainXmlFormat.STOP_TAG)
            stop.append(TimeXmlFormat.to_xml(time))
            stop.append(StationXmlFormat.to_xml(station))
        return element

    @staticmethod
    def from_xml(element: ET.Element) -> Train:
        element = _require_element(element, TrainXmlFormat.TAG)
        schedule = [
            (
                TimeXmlFormat.from_xml(_require_child(stop, TimeXmlFormat.TAG)),
                StationXmlFormat.from_xml(_require_child(stop, StationXmlFormat.TAG)),
            )
            for stop in element.findall(TrainXmlFormat.STOP_TAG)
        ]
        return Train(TrainKind.parse(element.get("kind")), element.get("number"), schedule)


def to_string(element: ET.Element) -> str:
    """Serialize an element to a unicode string."""
    return ET.tostring(element, encoding="unicode")


def from_string(text: str) -> ET.Element:
    """Parse a unicode string into an element."""
    if text is None:
        raise InvalidArgumentError("xml text must not be None!")
    try:
        return ET.fromstring(text)
    except ET.ParseError as e:
        raise InvalidArgumentError(f"Malformed XML: {e}") from e


class XmlTimetableRepository:
    """Loads trains from a ``<timetable>`` document of ``<train>`` elements."""

    TAG = "timetable"

    def __init__(self, path: Path | str) -> None:
        """Initialize with the path of the XML timetable."""
        self._path = Path(path)

    def get_trains(self) -> set[Train]:
        """Load all trains of the timetable."""
        if not self._path.exists():
            raise FileNotFoundError(f"Timetable file not found: {self._path}")
        root = from_string(self._path.read_text(encoding="utf-8"))
        root = _require_element(root, self.TAG)
        trains = {TrainXmlFormat.from_xml(element) for element in root}
        logger.info(f"Loaded {len(trains)} train(s) from {self._path}")
        return trains

    @staticmethod
    def to_xml(trains: set[Train]) -> ET.Element:
        """Build a ``<timetable>`` element holding the given trains."""
        if trains is None:
            raise InvalidArgumentError("trains must not be None!")
        root = ET.Element(XmlTimetableRepository.TAG)
        for train in sorted(trains, key=str):
            root.append(TrainXmlFormat.to_xml(train))
        return root
