"""Command line interface for journey queries."""

import json
import logging
import sys
from typing import Any

from train_journeys.adapters.config import AppConfig, load_timetable
from train_journeys.application import JourneyPlanner
from train_journeys.domain.models import Station, Time, Train

logger = logging.getLogger(__name__)


def _train_sort_key(train: Train) -> tuple[str, str]:
    return (train.kind.value, train.number)


def _train_to_dict(train: Train) -> dict[str, Any]:
    return {
        "kind": train.kind.value,
        "number": train.number,
        "schedule": [
            {"time": str(time), "station": station.name} for time, station in train.schedule
        ],
    }


def _sorted_departures(departures: set[tuple[Time, Train]]) -> list[tuple[Time, Train]]:
    return sorted(departures, key=lambda d: (d[0].as_minutes, _train_sort_key(d[1])))


def _handle_stations_command(planner: JourneyPlanner, as_json: bool) -> None:
    names = sorted(station.name for station in planner.stations)
    if as_json:
        print(json.dumps(names, indent=2, ensure_ascii=False))
        return
    for name in names:
        print(name)


def _handle_trains_command(planner: JourneyPlanner, station_name: str, as_json: bool) -> None:
    trains = sorted(planner.trains_at(Station(station_name)), key=_train_sort_key)
    if as_json:
        print(json.dumps([_train_to_dict(t) for t in trains], indent=2, ensure_ascii=False))
        return
    if not trains:
        print(f"No trains stop at {station_name}")
        return
    for train in trains:
        route = " -> ".join(station.name for station in train.stations)
        print(f"{train}: {route}")


def _handle_departures_command(planner: JourneyPlanner, station_name: str, as_json: bool) -> None:
    departures = _sorted_departures(planner.departures(Station(station_name)))
    if as_json:
        data = [
            {"time": str(time), "kind": train.kind.value, "number": train.number}
            for time, train in departures
        ]
        print(json.dumps(data, indent=2, ensure_ascii=False))
        return
    if not departures:
        print(f"No departures from {station_name}")
        return
    for time, train in departures:
        print(f"{time}  {train}")


def _handle_short_trip_command(
    planner: JourneyPlanner, from_name: str, to_name: str, as_json: bool
) -> None:
    is_short = planner.is_short_trip(Station(from_name), Station(to_name))
    if as_json:
        print(json.dumps({"from": from_name, "to": to_name, "short_trip": is_short}))
        return
    print("yes" if is_short else "no")


def _setup_argparse() -> Any:
    """Set up and configure argument parser."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Railway journey queries over a timetable",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List all stations of the timetable
  train-journeys stations

  # Trains stopping at a station
  train-journeys trains Nuremberg

  # Departures from a station, ordered by time
  train-journeys departures Munich

  # Is the trip reachable with at most one stop in between?
  train-journeys short-trip Munich Frankfurt

The timetable (.toml or .xml) is read from --timetable or TIMETABLE_FILE.
        """,
    )
    parser.add_argument("--timetable", help="Timetable file (overrides TIMETABLE_FILE)")
    parser.add_argument("--log-level", help="Log level (overrides LOG_LEVEL)")
    parser.add_argument("--json", action="store_true", help="Output as JSON")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    subparsers.add_parser("stations", help="List all stations")

    trains_parser = subparsers.add_parser("trains", help="List trains stopping at a station")
    trains_parser.add_argument("station", help="Station name")

    departures_parser = subparsers.add_parser("departures", help="List departures from a station")
    departures_parser.add_argument("station", help="Station name")

    short_trip_parser = subparsers.add_parser(
        "short-trip", help="Check whether a trip needs at most one intermediate stop"
    )
    short_trip_parser.add_argument("from_station", metavar="from", help="Departure station name")
    short_trip_parser.add_argument("to_station", metavar="to", help="Arrival station name")

    return parser


def _load_config(args: Any) -> AppConfig:
    """Build the app config, applying command line overrides."""
    overrides: dict[str, Any] = {}
    if args.timetable:
        overrides["timetable_file"] = args.timetable
    if args.log_level:
        overrides["log_level"] = args.log_level
    return AppConfig(**overrides)


def _configure_logging(config: AppConfig) -> None:
    logging.basicConfig(
        level=config.log_level_number,
        format=config.log_format,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _execute_command(args: Any, planner: JourneyPlanner) -> None:
    """Execute the appropriate command based on args."""
    if args.command == "stations":
        _handle_stations_command(planner, args.json)
    elif args.command == "trains":
        _handle_trains_command(planner, args.station, args.json)
    elif args.command == "departures":
        _handle_departures_command(planner, args.station, args.json)
    elif args.command == "short-trip":
        _handle_short_trip_command(planner, args.from_station, args.to_station, args.json)
    else:
        raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = _setup_argparse()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        config = _load_config(args)
        _configure_logging(config)
        planner = JourneyPlanner(load_timetable(config).get_trains())
        _execute_command(args, planner)
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        sys.exit(1)
    except (ValueError, FileNotFoundError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
