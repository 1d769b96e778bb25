"""Train type domain model."""

from enum import Enum


class TrainType(str, Enum):
    """Kind of service a train runs."""

    PASSENGER = "passenger"
    FREIGHT = "freight"
