import pytest

from picroute.models import Circuit, Net, NetSpec, Point
from picroute.routing import (
    estimate,
    initial_routes,
    net_loss,
    route,
    route_net,
)


def _empty_grid(width, height):
    return [[0] * height for _ in range(width)]


def _assert_valid_path(points, start, end):
    assert points[0] == start
    assert points[-1] == end
    for a, b in zip(points, points[1:]):
        assert abs(a.x - b.x) + abs(a.y - b.y) == 1


def test_estimate_at_target_is_zero():
    assert estimate(None, 3, 3, 3, 3, 1, 3) == 0
    assert estimate(Point(2, 3), 3, 3, 3, 3, 1, 3) == 0


def test_estimate_without_prev_charges_one_bend_for_diagonal_target():
    diagonal = estimate(None, 0, 0, 3, 4, 2, 5)
    straight = estimate(None, 0, 0, 0, 7, 2, 5)
    assert diagonal - straight == 5


def test_estimate_straight_ahead_matches_start_estimate():
    assert estimate(Point(0, 0), 1, 0, 5, 0, 2, 5) == estimate(None, 1, 0, 5, 0, 2, 5)


def test_estimate_moving_away_costs_more():
    towards = estimate(Point(0, 0), 1, 0, 5, 0, 1, 3)
    away = estimate(Point(2, 0), 1, 0, 5, 0, 1, 3)
    assert away > towards


def test_route_net_straight_line_on_empty_grid():
    grid = _empty_grid(5, 5)
    net, loss = route_net(grid, NetSpec(4, 0, 0, 3, 0), 1, 10, 3)
    assert net.id == 4
    assert net.points == [Point(x, 0) for x in range(4)]
    grid_with_net = _empty_grid(5, 5)
    for p in net.points:
        grid_with_net[p.x][p.y] += 1
    circuit = Circuit(5, 5, 1, 10, 3)
    assert loss == net_loss(net, grid_with_net, circuit)


def test_route_net_same_start_and_target():
    grid = _empty_grid(3, 3)
    net, loss = route_net(grid, NetSpec(1, 1, 1, 1, 1), 1, 10, 3)
    assert net.points == [Point(1, 1)]
    assert loss == 0


def test_route_net_avoids_occupied_cells():
    grid = _empty_grid(5, 5)
    for y in range(4):
        grid[2][y] = 1
    net, loss = route_net(grid, NetSpec(0, 0, 0, 4, 0), 1, 100, 3)
    _assert_valid_path(net.points, Point(0, 0), Point(4, 0))
    assert all(grid[p.x][p.y] == 0 for p in net.points)
    grid_with_net = [column[:] for column in grid]
    for p in net.points:
        grid_with_net[p.x][p.y] += 1
    assert loss == net_loss(net, grid_with_net, Circuit(5, 5, 1, 100, 3))


def test_route_net_rejects_points_outside_grid():
    with pytest.raises(ValueError):
        route_net(_empty_grid(3, 3), NetSpec(0, 0, 0, 3, 0), 1, 10, 3)


def test_net_loss_counts_bends_and_crossings():
    circuit = Circuit(4, 4, 1, 10, 3)
    straight = Net(0, [Point(0, 0), Point(1, 0), Point(2, 0)])
    bent = Net(0, [Point(0, 0), Point(1, 0), Point(1, 1)])
    grid = _empty_grid(4, 4)
    for p in straight.points + bent.points:
        grid[p.x][p.y] = 1
    assert net_loss(bent, grid, circuit) - net_loss(straight, grid, circuit) == 3
    grid[1][0] = 2
    crossed = net_loss(straight, grid, circuit)
    grid[1][0] = 1
    assert crossed - net_loss(straight, grid, circuit) == 10


def test_initial_routes_builds_l_shapes():
    circuit = Circuit(5, 5, 1, 10, 3, [NetSpec(0, 3, 4, 0, 1), NetSpec(1, 2, 2, 2, 2)])
    nets, grid = initial_routes(circuit)
    assert nets[0].points == [
        Point(3, 4), Point(2, 4), Point(1, 4), Point(0, 4),
        Point(0, 3), Point(0, 2), Point(0, 1),
    ]
    assert nets[1].points == [Point(2, 2)]
    assert sum(map(sum, grid)) == sum(len(n.points) for n in nets)
    for n in nets:
        for p in n.points:
            assert grid[p.x][p.y] >= 1


def test_initial_routes_rejects_points_outside_grid():
    with pytest.raises(ValueError):
        initial_routes(Circuit(2, 2, 1, 10, 3, [NetSpec(0, 0, 0, 2, 2)]))


def test_route_single_net_never_worse_than_l_route():
    circuit = Circuit(6, 6, 1, 10, 3, [NetSpec(0, 0, 0, 5, 5)])
    initial, initial_grid = initial_routes(circuit)
    before = net_loss(initial[0], initial_grid, circuit)
    nets = route(circuit)
    _assert_valid_path(nets[0].points, Point(0, 0), Point(5, 5))
    grid = _empty_grid(6, 6)
    for p in nets[0].points:
        grid[p.x][p.y] += 1
    assert net_loss(nets[0], grid, circuit) <= before


def test_route_separates_nets_when_crossing_is_expensive():
    circuit = Circuit(
        5, 5, 1, 100, 3, [NetSpec(0, 0, 1, 3, 1), NetSpec(1, 1, 0, 1, 3)]
    )
    nets = route(circuit)
    assert [n.id for n in nets] == [0, 1]
    _assert_valid_path(nets[0].points, Point(0, 1), Point(3, 1))
    _assert_valid_path(nets[1].points, Point(1, 0), Point(1, 3))
    assert set(nets[0].points).isdisjoint(nets[1].points)