"""Train domain model."""

from __future__ import annotations

import logging
import math
import uuid
from collections.abc import Mapping
from typing import Any

from rail_traffic.domain.errors import (
    DuplicatePresenceError,
    NegativeSpeedError,
    NoWagonsError,
    TerminalStationError,
    TrainMovingError,
    TrainNotRoutedError,
)

from .route import Route
from .station import Station
from .train_config import TrainConfig
from .train_type import TrainType

logger = logging.getLogger(__name__)


class Train:
    """A train that runs along a route one station at a time.

    Assigning a route puts the train on the route's begin station. Moving
    hands the train over from the current station to the adjacent one:
    the current station sends it first, then the adjacent station takes it.
    """

    def __init__(self, config: TrainConfig | Mapping[str, Any] | None = None) -> None:
        if config is None:
            config = TrainConfig()
        elif not isinstance(config, TrainConfig):
            config = TrainConfig.model_validate(dict(config))

        self._id = uuid.uuid4().hex
        self._type = config.type
        self._wagon_count = config.wagon_count
        self._speed: float = 0
        self._station: Station | None = None
        self._route: Route | None = None

    @property
    def id(self) -> str:
        return self._id

    @property
    def type(self) -> TrainType:
        return self._type

    @property
    def wagon_count(self) -> int:
        return self._wagon_count

    @property
    def station(self) -> Station | None:
        return self._station

    @property
    def route(self) -> Route | None:
        return self._route

    @property
    def is_routed(self) -> bool:
        return self._route is not None

    @property
    def speed(self) -> float:
        return self._speed

    @speed.setter
    def speed(self, value: float) -> None:
        self.set_speed(value)

    def set_speed(self, value: float) -> None:
        """Accelerate or brake to ``value``. There is no upper limit."""
        if math.isnan(value) or value < 0:
            raise NegativeSpeedError(f"Speed must be a non-negative number, got {value}")
        self._speed = value

    def stop(self) -> None:
        self.set_speed(0)

    def hook_wagon(self) -> None:
        if self._speed > 0:
            raise TrainMovingError(f"Cannot hook a wagon to train {self._id} while it is moving")
        self._wagon_count += 1

    def unhook_wagon(self) -> None:
        if self._speed > 0:
            raise TrainMovingError(
                f"Cannot unhook a wagon from train {self._id} while it is moving"
            )
        if self._wagon_count == 0:
            raise NoWagonsError(f"Train {self._id} has no wagons to unhook")
        self._wagon_count -= 1

    def assign_route(self, route: Route) -> None:
        """Put the train on ``route`` at its begin station.

        A station the train was at before is not told that the train left.
        Call ``release()`` first to take the train off its current route.
        """
        if self._station is not None and self._station.is_present(self):
            logger.warning(
                f"Train {self._id} gets a new route while still at station "
                f"{self._station.name!r}, that station is not notified"
            )
        begin_station = route.begin_station
        begin_station.take(self)
        self._route = route
        self._station = begin_station
        logger.debug(f"Train {self._id} placed at {begin_station.name!r}")

    def release(self) -> None:
        """Take the train off its route and out of its current station."""
        station, _ = self._position()
        station.send(self)
        self._station = None
        self._route = None
        logger.debug(f"Train {self._id} released from {station.name!r}")

    def next_station(self) -> Station | None:
        """The station after the current one, or None at the end of the route."""
        station, route = self._position()
        return route.station_after(station)

    def prev_station(self) -> Station | None:
        """The station before the current one, or None at the begin of the route."""
        station, route = self._position()
        return route.station_before(station)

    def move_forward(self) -> None:
        target = self.next_station()
        if target is None:
            raise TerminalStationError(f"Train {self._id} is at the end of its route")
        self._move_to(target)

    def move_backward(self) -> None:
        target = self.prev_station()
        if target is None:
            raise TerminalStationError(f"Train {self._id} is at the begin of its route")
        self._move_to(target)

    def _move_to(self, target: Station) -> None:
        station, _ = self._position()
        if target.is_present(self):
            raise DuplicatePresenceError(
                f"Train {self._id} is already at station {target.name!r}"
            )
        station.send(self)
        target.take(self)
        self._station = target
        logger.debug(f"Train {self._id} moved {station.name!r} -> {target.name!r}")

    def _position(self) -> tuple[Station, Route]:
        if self._route is None or self._station is None:
            raise TrainNotRoutedError(f"Train {self._id} has no route assigned")
        return self._station, self._route

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Train):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        station = self._station.name if self._station is not None else None
        return (
            f"Train(id={self._id!r}, type={self._type.value}, wagons={self._wagon_count}, "
            f"speed={self._speed}, station={station!r})"
        )
