"""Rail network domain model."""

from dataclasses import dataclass, field

from .route import Route
from .station import Station


@dataclass(frozen=True)
class RailNetwork:
    """Stations and routes of a network, addressed by their configured keys."""

    stations: dict[str, Station] = field(default_factory=dict)  # station key -> station
    routes: dict[str, Route] = field(default_factory=dict)  # route name -> route
