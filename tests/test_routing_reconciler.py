from routeplanner.models.domain import Point, RouteOptions, Stop
from routeplanner.services.routing.reconciler import partition


def _stop(sid: str, lat: float, lng: float) -> Stop:
    return Stop(id=sid, address=f"Address {sid}", lat=lat, lng=lng)


def test_empty_stop_list_returns_none():
    assert partition([], RouteOptions()) is None


def test_one_way_with_origin_picks_farthest_destination():
    stops = [_stop("A", 1, 1), _stop("B", 5, 5), _stop("C", 2, 2)]
    result = partition(stops, RouteOptions(origin=Point(0, 0, "Depot")))

    assert result.has_origin
    assert (result.origin.lat, result.origin.lng) == (0, 0)
    assert (result.destination.lat, result.destination.lng) == (5, 5)
    assert [stop.id for stop in result.waypoints] == ["A", "C"]


def test_farthest_destination_ties_go_to_first_occurrence():
    stops = [_stop("A", 3, 0), _stop("B", 0, 3), _stop("C", 1, 1)]
    result = partition(stops, RouteOptions(origin=Point(0, 0)))

    assert (result.destination.lat, result.destination.lng) == (3, 0)
    assert [stop.id for stop in result.waypoints] == ["B", "C"]


def test_haversine_metric_can_change_destination():
    # Near the pole a degree of longitude is short on the ground but long in degree space.
    origin = Point(80.0, 0.0)
    stops = [_stop("EAST", 80.0, 10.0), _stop("NORTH", 85.0, 0.0)]

    planar = partition(stops, RouteOptions(origin=origin))
    geodesic = partition(stops, RouteOptions(origin=origin), metric="haversine")

    assert (planar.destination.lat, planar.destination.lng) == (80.0, 10.0)
    assert (geodesic.destination.lat, geodesic.destination.lng) == (85.0, 0.0)


def test_stop_matching_origin_is_excluded():
    stops = [_stop("HOME", 10.0000001, 20.0), _stop("A", 11, 21), _stop("B", 12, 22)]
    result = partition(stops, RouteOptions(origin=Point(10.0, 20.0), round_trip=True))

    assert [stop.id for stop in result.waypoints] == ["A", "B"]
    assert result.destination == result.origin
    assert result.round_trip


def test_only_origin_stops_gives_single_point():
    stops = [_stop("HOME", 10.0, 20.0)]
    result = partition(stops, RouteOptions(origin=Point(10.0, 20.0)))

    assert result.waypoints == []
    assert result.is_single_point


def test_without_origin_keeps_first_and_last_in_place():
    stops = [_stop("A", 1, 1), _stop("B", 2, 2), _stop("C", 3, 3), _stop("D", 4, 4)]
    result = partition(stops, RouteOptions())

    assert not result.has_origin
    assert (result.origin.lat, result.destination.lat) == (1, 4)
    assert [stop.id for stop in result.waypoints] == ["B", "C"]


def test_round_trip_without_origin_optimizes_all_but_first():
    stops = [_stop("A", 1, 1), _stop("B", 2, 2), _stop("C", 3, 3)]
    result = partition(stops, RouteOptions(round_trip=True))

    assert result.origin == result.destination
    assert [stop.id for stop in result.waypoints] == ["B", "C"]


def test_single_stop_without_origin_is_single_point():
    result = partition([_stop("A", 1, 1)], RouteOptions())

    assert result.is_single_point


def test_partition_is_deterministic():
    stops = [_stop("A", 1, 1), _stop("B", 5, 5), _stop("C", 2, 2), _stop("D", 5, 5)]
    options = RouteOptions(origin=Point(0, 0))

    first = partition(stops, options)
    second = partition(stops, options)

    assert first == second


def test_colocated_stops_without_origin_are_still_routed():
    stops = [_stop("A", 1, 1), _stop("B", 1, 1)]
    result = partition(stops, RouteOptions())

    assert not result.is_single_point
    assert (result.origin.lat, result.destination.lat) == (1, 1)
    assert result.waypoints == []
