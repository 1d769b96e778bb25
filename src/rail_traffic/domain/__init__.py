"""Domain layer - stations, routes, trains and their errors."""

from rail_traffic.domain.errors import RailTrafficError
from rail_traffic.domain.models import Route, Station, Train, TrainConfig, TrainType

__all__ = [
    "RailTrafficError",
    "Route",
    "Station",
    "Train",
    "TrainConfig",
    "TrainType",
]
