"""Rail network configuration loader."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from rail_traffic.domain.models import RailNetwork, Route, Station

logger = logging.getLogger(__name__)


class NetworkConfigurationError(ValueError):
    """The network description is malformed."""


class NetworkConfigurationLoader:
    """Builds stations and routes from a TOML network description.

    Expected layout::

        [[stations]]
        key = "minsk"
        name = "Minsk-Passazhirsky"

        [[routes]]
        name = "minsk-molodechno"
        stations = ["minsk", "severny", "molodechno"]

    Route invariants are enforced by ``Route`` itself, so a route listing a
    station twice fails with the usual route errors.
    """

    @staticmethod
    def load_stations(stations_data: Any) -> dict[str, Station]:
        """Create stations from the ``[[stations]]`` tables."""
        if not isinstance(stations_data, list):
            raise NetworkConfigurationError("TOML config 'stations' must be a list")

        stations: dict[str, Station] = {}
        for station_data in stations_data:
            if not isinstance(station_data, dict):
                raise NetworkConfigurationError("Each station must be a table")
            key = station_data.get("key")
            if not key or not isinstance(key, str):
                raise NetworkConfigurationError("All stations must have a 'key' field")
            if key in stations:
                raise NetworkConfigurationError(f"Duplicate station key: {key!r}")
            # name defaults to the key
            name = station_data.get("name", key)
            stations[key] = Station(str(name))

        return stations

    @staticmethod
    def load_route(route_data: Any, stations: dict[str, Station]) -> tuple[str, Route]:
        """Create a single route from a ``[[routes]]`` table."""
        if not isinstance(route_data, dict):
            raise NetworkConfigurationError("Each route must be a table")
        name = route_data.get("name")
        if not name or not isinstance(name, str):
            raise NetworkConfigurationError("All routes must have a 'name' field")

        station_keys = route_data.get("stations")
        if not isinstance(station_keys, list) or not station_keys:
            raise NetworkConfigurationError(f"Route {name!r} must list its 'stations'")

        unknown = [key for key in station_keys if key not in stations]
        if unknown:
            raise NetworkConfigurationError(f"Route {name!r} refers to unknown stations: {unknown}")

        route_stations = [stations[key] for key in station_keys]
        return name, Route(*route_stations)

    @staticmethod
    def load_data(data: dict[str, Any]) -> RailNetwork:
        """Build a network from already parsed TOML data."""
        stations = NetworkConfigurationLoader.load_stations(data.get("stations", []))

        routes_data = data.get("routes", [])
        if not isinstance(routes_data, list):
            raise NetworkConfigurationError("TOML config 'routes' must be a list")

        routes: dict[str, Route] = {}
        for route_data in routes_data:
            name, route = NetworkConfigurationLoader.load_route(route_data, stations)
            if name in routes:
                raise NetworkConfigurationError(f"Duplicate route name: {name!r}")
            routes[name] = route

        logger.info(f"Loaded {len(stations)} station(s) and {len(routes)} route(s)")
        return RailNetwork(stations=stations, routes=routes)

    @staticmethod
    def load(path: str | Path) -> RailNetwork:
        """Load a network from a TOML file."""
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Network file not found: {config_path}")

        with open(config_path, "rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise NetworkConfigurationError(f"Invalid TOML in {config_path}: {e}") from e

        return NetworkConfigurationLoader.load_data(data)
