"""Demonstration entry point: run a train along a route and report its state."""

import argparse
import logging
import sys
from typing import Any

from rail_traffic.adapters.config import AppConfig, NetworkConfigurationLoader
from rail_traffic.domain.errors import RailTrafficError
from rail_traffic.domain.models import RailNetwork, Station, Train, TrainConfig, TrainType

logger = logging.getLogger(__name__)

LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]

# Minsk to Molodechno commuter line
DEMO_NETWORK: dict[str, Any] = {
    "stations": [
        {"key": "minsk", "name": "Minsk-Passazhirsky"},
        {"key": "severny", "name": "Minsk-Severny"},
        {"key": "masyukovshchina", "name": "Masyukovshchina"},
        {"key": "lebyazhy", "name": "Lebyazhy"},
        {"key": "zhdanovichi", "name": "Zhdanovichi"},
        {"key": "minskoye_more", "name": "Minskoye More"},
        {"key": "ratomka", "name": "Ratomka"},
        {"key": "kryzhovka", "name": "Kryzhovka"},
        {"key": "zelenoye", "name": "Zelenoye"},
        {"key": "belarus", "name": "Belarus"},
        {"key": "molodechno", "name": "Molodechno"},
    ],
    "routes": [
        {
            "name": "minsk-molodechno",
            "stations": [
                "minsk",
                "severny",
                "masyukovshchina",
                "lebyazhy",
                "zhdanovichi",
                "minskoye_more",
                "ratomka",
                "kryzhovka",
                "zelenoye",
                "belarus",
                "molodechno",
            ],
        }
    ],
}

# (type, wagon count) of the trains parked at the begin station at the end of the run
DEMO_PARKED_TRAINS: list[tuple[TrainType, int]] = [
    (TrainType.PASSENGER, 10),
    (TrainType.PASSENGER, 12),
    (TrainType.PASSENGER, 5),
    (TrainType.PASSENGER, 3),
    (TrainType.FREIGHT, 30),
    (TrainType.FREIGHT, 40),
    (TrainType.FREIGHT, 44),
]


def build_demo_network() -> RailNetwork:
    """Build the built-in demonstration network."""
    return NetworkConfigurationLoader.load_data(DEMO_NETWORK)


def _print_train(train: Train) -> None:
    print(f"train:{train.id} wagons: {train.wagon_count} speed: {train.speed}")


def _print_trains(station: Station, train_type: TrainType | None = None) -> None:
    title = train_type.value if train_type else "all"
    print(f"==== {title} trains at {station.name} ({station.count_trains(train_type)}) ====")
    for train in station.list_trains(train_type):
        print(f"{train.id} {train.type.value} {train.wagon_count}")


def run_demo(network: RailNetwork, wagons: int = 10, speed: float = 100) -> Train:
    """Walk a train along the first route of ``network`` and print what happens.

    Returns the demonstration train.
    """
    if not network.routes:
        raise ValueError("The network has no routes to run a train on")

    route_name, route = next(iter(network.routes.items()))
    print(f"route {route_name}: {' -> '.join(station.name for station in route)}")

    train = Train(TrainConfig(type=TrainType.PASSENGER))
    train.assign_route(route)

    print("forward:")
    while True:
        print(f"  {train.station.name}")
        if train.next_station() is None:
            break
        train.move_forward()

    if len(route) > 2:
        removed = route.stations[1]
        route.delete_stations(removed)
        print(f"deleted station {removed.name}")

    print("backward:")
    while True:
        print(f"  {train.station.name}")
        if train.prev_station() is None:
            break
        train.move_backward()

    for _ in range(wagons):
        train.hook_wagon()
    _print_train(train)
    while train.wagon_count:
        train.unhook_wagon()
    _print_train(train)

    train.speed = speed
    _print_train(train)
    train.stop()
    _print_train(train)

    station = route.begin_station
    for train_type, wagon_count in DEMO_PARKED_TRAINS:
        station.take(Train(TrainConfig(type=train_type, wagon_count=wagon_count)))

    _print_trains(station, TrainType.PASSENGER)
    _print_trains(station, TrainType.FREIGHT)
    _print_trains(station)

    return train


def _parse_args(argv: list[str] | None, config: AppConfig) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run a demonstration train through a rail network",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run on the built-in network
  rail-traffic

  # Run on a network described in TOML
  rail-traffic --config network.toml --wagons 3 --speed 80
        """,
    )
    parser.add_argument(
        "--config",
        default=config.network_file,
        help="TOML file with stations and routes (default: built-in network)",
    )
    parser.add_argument(
        "--log-level",
        default=config.log_level,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level",
    )
    parser.add_argument(
        "--wagons", type=int, default=config.demo_wagons, help="Wagons to hook on and off"
    )
    parser.add_argument(
        "--speed", type=float, default=config.demo_speed, help="Speed to accelerate to"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main application entry point."""
    config = AppConfig()
    args = _parse_args(argv, config)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    try:
        if args.config:
            network = NetworkConfigurationLoader.load(args.config)
        else:
            network = build_demo_network()
        run_demo(network, wagons=args.wagons, speed=args.speed)
    except (RailTrafficError, ValueError, FileNotFoundError) as e:
        logger.error(f"{type(e).__name__}: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
