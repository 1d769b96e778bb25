"""Tests for the Route domain model."""

import pytest

from rail_traffic.domain.errors import (
    DuplicateStationError,
    ImmutableEndpointError,
    InvalidInsertionPointError,
    RouteError,
    RouteTooShortError,
    StationNotFoundError,
    StationOccupiedError,
)
from rail_traffic.domain.models import Route, Station, Train


@pytest.fixture
def stations() -> dict[str, Station]:
    return {name: Station(name) for name in ("A", "B", "C", "D", "X", "Y")}


def test_route_with_begin_and_end(stations: dict[str, Station]) -> None:
    """Given two stations, when creating a Route, then they are begin and end."""
    route = Route(stations["A"], stations["C"])

    assert route.stations == (stations["A"], stations["C"])
    assert route.begin_station == stations["A"]
    assert route.end_station == stations["C"]
    assert len(route) == 2


def test_route_places_intermediate_stations_between_endpoints(
    stations: dict[str, Station],
) -> None:
    """Given more than two stations, when creating a Route, then the last is the end."""
    route = Route(stations["A"], stations["B"], stations["D"], stations["C"])

    assert route.stations == (stations["A"], stations["B"], stations["D"], stations["C"])
    assert route.end_station == stations["C"]


def test_route_with_single_station_is_too_short(stations: dict[str, Station]) -> None:
    """Given one station, when creating a Route, then RouteTooShortError is raised."""
    with pytest.raises(RouteTooShortError):
        Route(stations["A"])


@pytest.mark.parametrize(
    "names",
    [("A", "A"), ("A", "B", "A"), ("A", "B", "B"), ("A", "B", "B", "C")],
)
def test_route_with_repeated_station_is_rejected(
    stations: dict[str, Station], names: tuple[str, ...]
) -> None:
    """Given a repeated station, when creating a Route, then DuplicateStationError is raised."""
    with pytest.raises(DuplicateStationError):
        Route(*(stations[name] for name in names))


def test_insert_after_places_batch_contiguously(stations: dict[str, Station]) -> None:
    """Given several stations, when inserted after an anchor, then they follow it in order."""
    route = Route(stations["A"], stations["B"], stations["C"])

    inserted = route.insert_after(stations["A"], stations["X"], stations["Y"])

    assert inserted == (stations["X"], stations["Y"])
    assert route.stations == (
        stations["A"],
        stations["X"],
        stations["Y"],
        stations["B"],
        stations["C"],
    )


def test_insert_after_end_station_fails(stations: dict[str, Station]) -> None:
    """Given the end station as anchor, when inserting, then InvalidInsertionPointError is raised."""
    route = Route(stations["A"], stations["C"])

    with pytest.raises(InvalidInsertionPointError):
        route.insert_after(stations["C"], stations["X"])

    assert route.stations == (stations["A"], stations["C"])


def test_insert_after_unknown_anchor_fails(stations: dict[str, Station]) -> None:
    """Given an anchor not on the route, when inserting, then StationNotFoundError is raised."""
    route = Route(stations["A"], stations["C"])

    with pytest.raises(StationNotFoundError):
        route.insert_after(stations["B"], stations["X"])


def test_insert_existing_station_fails_without_partial_change(
    stations: dict[str, Station],
) -> None:
    """Given a batch with a station already on the route, when inserting, then nothing changes."""
    route = Route(stations["A"], stations["B"], stations["C"])

    with pytest.raises(DuplicateStationError):
        route.insert_after(stations["A"], stations["X"], stations["B"])

    assert route.stations == (stations["A"], stations["B"], stations["C"])


def test_insert_same_station_twice_in_batch_fails(stations: dict[str, Station]) -> None:
    """Given a batch repeating a station, when inserting, then DuplicateStationError is raised."""
    route = Route(stations["A"], stations["C"])

    with pytest.raises(DuplicateStationError):
        route.insert_after(stations["A"], stations["X"], stations["X"])


def test_delete_interior_station_removes_only_that_station(
    stations: dict[str, Station],
) -> None:
    """Given an interior station, when deleted, then only that station is gone."""
    route = Route(stations["A"], stations["B"], stations["D"], stations["C"])

    removed = route.delete_stations(stations["B"])

    assert removed == (stations["B"],)
    assert route.stations == (stations["A"], stations["D"], stations["C"])
    assert not route.contains(stations["B"])


@pytest.mark.parametrize("name", ["A", "C"])
def test_delete_endpoint_fails(stations: dict[str, Station], name: str) -> None:
    """Given begin or end station, when deleted, then ImmutableEndpointError is raised."""
    route = Route(stations["A"], stations["B"], stations["C"])

    with pytest.raises(ImmutableEndpointError):
        route.delete_stations(stations[name])

    assert len(route) == 3


def test_delete_absent_station_fails(stations: dict[str, Station]) -> None:
    """Given a station not on the route, when deleted, then StationNotFoundError is raised."""
    route = Route(stations["A"], stations["B"], stations["C"])

    with pytest.raises(StationNotFoundError):
        route.delete_stations(stations["X"])


def test_delete_batch_with_invalid_target_changes_nothing(
    stations: dict[str, Station],
) -> None:
    """Given a batch with one bad target, when deleting, then no station is removed."""
    route = Route(stations["A"], stations["B"], stations["D"], stations["C"])

    with pytest.raises(StationNotFoundError):
        route.delete_stations(stations["B"], stations["X"])

    assert route.stations == (stations["A"], stations["B"], stations["D"], stations["C"])


def test_delete_same_station_twice_fails(stations: dict[str, Station]) -> None:
    """Given a batch repeating a station, when deleting, then StationNotFoundError is raised."""
    route = Route(stations["A"], stations["B"], stations["C"])

    with pytest.raises(StationNotFoundError):
        route.delete_stations(stations["B"], stations["B"])


def test_delete_station_holding_route_train_fails(stations: dict[str, Station]) -> None:
    """Given a train of this route at a station, when deleting it, then StationOccupiedError."""
    route = Route(stations["A"], stations["B"], stations["C"])
    train = Train()
    train.assign_route(route)
    train.move_forward()

    with pytest.raises(StationOccupiedError):
        route.delete_stations(stations["B"])

    assert route.contains(stations["B"])


def test_delete_station_holding_unrelated_train_succeeds(
    stations: dict[str, Station],
) -> None:
    """Given only a train without this route at a station, when deleting it, then it is removed."""
    route = Route(stations["A"], stations["B"], stations["C"])
    stations["B"].take(Train())

    route.delete_stations(stations["B"])

    assert route.stations == (stations["A"], stations["C"])


def test_route_errors_share_a_base_class(stations: dict[str, Station]) -> None:
    """Given any route failure, when caught as RouteError, then it matches."""
    with pytest.raises(RouteError):
        Route(stations["A"])


def test_station_neighbours(stations: dict[str, Station]) -> None:
    """Given a route, when asking for neighbours, then terminals have None on the outside."""
    route = Route(stations["A"], stations["B"], stations["C"])

    assert route.station_after(stations["A"]) == stations["B"]
    assert route.station_after(stations["C"]) is None
    assert route.station_before(stations["A"]) is None
    assert route.station_before(stations["C"]) == stations["B"]
    assert route.index_of(stations["B"]) == 1
    assert list(route) == [stations["A"], stations["B"], stations["C"]]


def test_stations_returns_a_snapshot(stations: dict[str, Station]) -> None:
    """Given a stations snapshot, when the route changes, then the snapshot does not."""
    route = Route(stations["A"], stations["C"])
    snapshot = route.stations

    route.insert_after(stations["A"], stations["B"])

    assert snapshot == (stations["A"], stations["C"])
    assert stations["B"] in route
