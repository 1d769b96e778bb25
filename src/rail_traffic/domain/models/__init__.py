"""Domain models for the rail network."""

from rail_traffic.domain.models.rail_network import RailNetwork
from rail_traffic.domain.models.route import Route
from rail_traffic.domain.models.station import Station
from rail_traffic.domain.models.train import Train
from rail_traffic.domain.models.train_config import TrainConfig
from rail_traffic.domain.models.train_type import TrainType

__all__ = [
    "RailNetwork",
    "Route",
    "Station",
    "Train",
    "TrainConfig",
    "TrainType",
]
