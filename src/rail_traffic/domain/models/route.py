"""Route domain model."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterator

from rail_traffic.domain.errors import (
    DuplicateStationError,
    ImmutableEndpointError,
    InvalidInsertionPointError,
    RouteTooShortError,
    StationNotFoundError,
    StationOccupiedError,
)

from .station import Station

logger = logging.getLogger(__name__)


class Route:
    """An ordered sequence of stations with fixed begin and end.

    Intermediate stations may be inserted or deleted after construction, the
    begin and end stations never change. Batch mutations are validated as a
    whole before the sequence is touched, so a failed call leaves the route
    as it was.
    """

    def __init__(self, begin_station: Station, *stations: Station) -> None:
        if not stations:
            raise RouteTooShortError("A route needs at least two stations")

        *intermediate, end_station = stations
        if begin_station == end_station:
            raise DuplicateStationError(
                f"Station {begin_station.name!r} cannot be both begin and end of a route"
            )

        self._id = uuid.uuid4().hex
        self._stations: list[Station] = [begin_station, end_station]
        if intermediate:
            self.insert_after(begin_station, *intermediate)

    @property
    def id(self) -> str:
        return self._id

    @property
    def stations(self) -> tuple[Station, ...]:
        """All stations in order, begin first and end last."""
        return tuple(self._stations)

    @property
    def begin_station(self) -> Station:
        return self._stations[0]

    @property
    def end_station(self) -> Station:
        return self._stations[-1]

    def contains(self, station: Station) -> bool:
        return station in self._stations

    def index_of(self, station: Station) -> int:
        """Position of a station on the route."""
        try:
            return self._stations.index(station)
        except ValueError:
            raise StationNotFoundError(f"Station {station.name!r} is not on this route") from None

    def station_after(self, station: Station) -> Station | None:
        """The next station, or None if ``station`` is the end."""
        index = self.index_of(station)
        if index == len(self._stations) - 1:
            return None
        return self._stations[index + 1]

    def station_before(self, station: Station) -> Station | None:
        """The previous station, or None if ``station`` is the begin."""
        index = self.index_of(station)
        if index == 0:
            return None
        return self._stations[index - 1]

    def insert_after(self, anchor: Station, *stations: Station) -> tuple[Station, ...]:
        """Insert stations right after ``anchor``, keeping their given order.

        Returns the inserted stations.
        """
        if anchor == self.end_station:
            raise InvalidInsertionPointError(
                f"Cannot insert after end station {anchor.name!r}, create a new route instead"
            )
        index = self.index_of(anchor)

        seen = set(self._stations)
        for station in stations:
            if station in seen:
                raise DuplicateStationError(f"Station {station.name!r} is already on the route")
            seen.add(station)

        self._stations[index + 1 : index + 1] = stations
        if stations:
            logger.debug(
                f"Inserted {[station.name for station in stations]} after {anchor.name!r}"
            )
        return stations

    def delete_stations(self, *stations: Station) -> tuple[Station, ...]:
        """Remove intermediate stations from the route.

        A station that currently holds a train running on this route cannot
        be removed. Returns the removed stations.
        """
        pending: set[Station] = set()
        for station in stations:
            if station == self.begin_station or station == self.end_station:
                raise ImmutableEndpointError(
                    f"Cannot delete begin or end station {station.name!r} of a route"
                )
            if station not in self._stations or station in pending:
                raise StationNotFoundError(f"Station {station.name!r} is not on this route")
            if any(train.route == self for train in station.list_trains()):
                raise StationOccupiedError(
                    f"Station {station.name!r} holds a train running on this route"
                )
            pending.add(station)

        self._stations = [station for station in self._stations if station not in pending]
        if stations:
            logger.debug(f"Deleted {[station.name for station in stations]} from route")
        return stations

    def __contains__(self, station: object) -> bool:
        return station in self._stations

    def __iter__(self) -> Iterator[Station]:
        return iter(tuple(self._stations))

    def __len__(self) -> int:
        return len(self._stations)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Route):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        names = " -> ".join(station.name for station in self._stations)
        return f"Route({names})"
