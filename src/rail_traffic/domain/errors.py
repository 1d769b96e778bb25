"""Domain errors raised by stations, routes and trains."""


class RailTrafficError(Exception):
    """Base class for all rail traffic domain errors."""


class PresenceError(RailTrafficError):
    """A station was asked to take or send a train inconsistently."""


class DuplicatePresenceError(PresenceError):
    """The train is already present at the station."""


class NotPresentError(PresenceError):
    """The train is not present at the station."""


class RouteError(RailTrafficError):
    """A route was constructed or mutated in a way that breaks its invariants."""


class RouteTooShortError(RouteError):
    """A route needs a begin and an end station."""


class DuplicateStationError(RouteError):
    """A station may appear on a route only once."""


class InvalidInsertionPointError(RouteError):
    """Nothing may be inserted after the end station."""


class ImmutableEndpointError(RouteError):
    """Begin and end stations cannot be removed from a route."""


class StationNotFoundError(RouteError):
    """The station is not on the route."""


class StationOccupiedError(RouteError):
    """The station holds a train that runs on this route."""


class TrainError(RailTrafficError):
    """A train was asked to do something its state does not allow."""


class TerminalStationError(TrainError):
    """There is no station further in the requested direction."""


class NegativeSpeedError(TrainError):
    """Speed cannot be negative."""


class TrainMovingError(TrainError):
    """Wagons can only be hooked or unhooked while the train stands still."""


class NoWagonsError(TrainError):
    """There is no wagon left to unhook."""


class TrainNotRoutedError(TrainError):
    """The operation needs a route assigned to the train."""
