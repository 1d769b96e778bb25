"""Station domain model."""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING

from rail_traffic.domain.errors import DuplicatePresenceError, NotPresentError

from .train_type import TrainType

if TYPE_CHECKING:
    from .train import Train

logger = logging.getLogger(__name__)


class Station:
    """A named holding point for trains.

    Trains are kept in the order they were taken. Names need not be unique,
    stations are told apart by their generated ``id``.
    """

    def __init__(self, name: str) -> None:
        self._id = uuid.uuid4().hex
        self._name = name
        # dict keeps insertion order and gives O(1) membership
        self._trains: dict[str, Train] = {}

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    def take(self, train: Train) -> None:
        """Accept a train at this station."""
        if train.id in self._trains:
            raise DuplicatePresenceError(f"Train {train.id} is already at station {self._name!r}")
        self._trains[train.id] = train
        logger.debug(f"Station {self._name!r} took train {train.id}")

    def send(self, train: Train) -> None:
        """Release a train from this station."""
        if train.id not in self._trains:
            raise NotPresentError(f"Train {train.id} is not at station {self._name!r}")
        del self._trains[train.id]
        logger.debug(f"Station {self._name!r} sent train {train.id}")

    def is_present(self, train: Train) -> bool:
        return train.id in self._trains

    def list_trains(self, train_type: TrainType | None = None) -> list[Train]:
        """Return the trains present, optionally only those of one type."""
        if train_type is None:
            return list(self._trains.values())
        return [train for train in self._trains.values() if train.type == train_type]

    def count_trains(self, train_type: TrainType | None = None) -> int:
        """Count the trains present, optionally only those of one type."""
        if train_type is None:
            return len(self._trains)
        return sum(1 for train in self._trains.values() if train.type == train_type)

    def __contains__(self, train: object) -> bool:
        return getattr(train, "id", None) in self._trains

    def __len__(self) -> int:
        return len(self._trains)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Station):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Station(name={self._name!r}, trains={len(self._trains)})"
