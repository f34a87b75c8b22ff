"""Global L-shaped routing followed by iterative A* rip-up and reroute."""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from .models import Circuit, Net, NetSpec, Point

logger = logging.getLogger(__name__)

Grid = list[list[int]]

_DIRECTIONS = ((0, 1), (0, -1), (1, 0), (-1, 0))


class _HasXY(Protocol):
    x: int
    y: int


@dataclass(eq=False)
class _Node:
    x: int
    y: int
    cost: int
    estimate: int
    prev: Optional["_Node"]
    locked: bool = False
    alive: bool = True

    @property
    def total(self) -> int:
        return self.cost + self.estimate


def estimate(prev, x1, y1, x2, y2, propagation_loss, bending_loss):
    """Estimate the remaining loss from (x1, y1) to (x2, y2).

    ``prev`` is the cell the route came from, or None at the start; it is
    used to charge for the bends the remaining route cannot avoid.
    """
    if x1 == x2 and y1 == y2:
        return 0
    loss = propagation_loss * (abs(x1 - x2) + abs(y1 - y2))
    if prev is not None:
        px, py = prev.x, prev.y
        if (px == x1 and x1 != x2) or (py == y1 and y1 != y2):
            loss += bending_loss
        if (
            (x1 > px and x1 > x2)
            or (x1 < px and x1 < x2)
            or (y1 > py and y1 > y2)
            or (y1 < py and y1 < y2)
        ):
            loss += bending_loss
        if (y1 == y2 and (x1 > px > x2 or x1 < px < x2)) or (
            x1 == x2 and (y1 > py > y2 or y1 < py < y2)
        ):
            loss += 2 * bending_loss + 2 * propagation_loss
    elif x1 != x2 and y1 != y2:
        loss += bending_loss
    return loss


def _check_in_grid(x: int, y: int, width: int, height: int) -> None:
    if not (0 <= x < width and 0 <= y < height):
        raise ValueError(f"point ({x}, {y}) lies outside the {width}x{height} grid")


def _pop_open(heap: list) -> Optional[_Node]:
    while heap:
        node = heapq.heappop(heap)[-1]
        if node.alive and not node.locked:
            return node
    return None


def _trace(node: _Node, net_id: int) -> Net:
    points: list[Point] = []
    current: Optional[_Node] = node
    while current is not None:
        points.append(Point(current.x, current.y))
        current = current.prev
    points.reverse()
    return Net(net_id, points)


def route_net(grid, net, propagation_loss, crossing_loss, bending_loss):
    """Find a low-loss path for ``net`` over ``grid`` with A* search.

    ``grid[x][y]`` holds how many other nets use each cell.  Returns a
    ``(Net, loss)`` pair.
    """
    width = len(grid)
    height = len(grid[0]) if grid else 0
    _check_in_grid(net.x1, net.y1, width, height)
    _check_in_grid(net.x2, net.y2, width, height)

    sequence = itertools.count()
    heap: list = []
    nodes: dict[tuple[int, int], _Node] = {}

    def push(node: _Node) -> None:
        nodes[(node.x, node.y)] = node
        # Among equal scores the most recently found node is taken first.
        heapq.heappush(heap, (node.total, node.estimate, -next(sequence), node))

    push(
        _Node(
            net.x1,
            net.y1,
            grid[net.x1][net.y1] * crossing_loss,
            estimate(None, net.x1, net.y1, net.x2, net.y2, propagation_loss, bending_loss),
            None,
        )
    )

    while True:
        best = _pop_open(heap)
        if best is None:
            raise ValueError(f"net {net.id} cannot reach its target")
        best.locked = True
        logger.debug(
            "lock node (%d, %d), cost: %d + %d = %d",
            best.x, best.y, best.cost, best.estimate, best.total,
        )
        if best.x == net.x2 and best.y == net.y2:
            return _trace(best, net.id), best.cost

        prev = best.prev
        for dx, dy in _DIRECTIONS:
            x, y = best.x + dx, best.y + dy
            if not (0 <= x < width and 0 <= y < height):
                continue
            if prev is not None and x == prev.x and y == prev.y:
                continue
            cost = best.cost + propagation_loss
            if prev is not None and x != prev.x and y != prev.y:
                cost += bending_loss
            cost += grid[x][y] * crossing_loss
            node = _Node(
                x, y, cost,
                estimate(best, x, y, net.x2, net.y2, propagation_loss, bending_loss),
                best,
            )
            old = nodes.get((x, y))
            if old is None:
                push(node)
            elif node.total < old.total:
                old.alive = False
                push(node)


def net_loss(net, grid, circuit):
    """Loss of a routed net whose own cells are counted in ``grid``."""
    points = net.points
    total = 0
    for index, point in enumerate(points):
        total += circuit.crossing_loss * (grid[point.x][point.y] - 1)
        if index >= 1:
            total += circuit.propagation_loss
        if index >= 2:
            before = points[index - 2]
            if before.x != point.x and before.y != point.y:
                total += circuit.bending_loss
    return total


def initial_routes(circuit):
    """Route every net as an L: along x first, then along y.

    Returns ``(nets, grid)`` where ``grid[x][y]`` counts the nets using
    each cell.
    """
    grid: Grid = [[0] * circuit.grid_y for _ in range(circuit.grid_x)]
    nets: list[Net] = []
    logger.info("L routing...")
    for spec in circuit.nets:
        _check_in_grid(spec.x1, spec.y1, circuit.grid_x, circuit.grid_y)
        _check_in_grid(spec.x2, spec.y2, circuit.grid_x, circuit.grid_y)
        step_x = 1 if spec.x1 < spec.x2 else -1
        step_y = 1 if spec.y1 < spec.y2 else -1
        points = [Point(x, spec.y1) for x in range(spec.x1, spec.x2, step_x)]
        points += [Point(spec.x2, y) for y in range(spec.y1, spec.y2, step_y)]
        points.append(Point(spec.x2, spec.y2))
        for point in points:
            grid[point.x][point.y] += 1
        nets.append(Net(spec.id, points))
    return nets, grid


def _adjust(grid: Grid, points: list[Point], delta: int) -> None:
    for point in points:
        grid[point.x][point.y] += delta


def route(circuit):
    """Route all nets of ``circuit`` and return the list of routed nets."""
    nets, grid = initial_routes(circuit)
    logger.info("detailed routing...")
    improved = True
    while improved:
        improved = False
        for index, net in enumerate(nets):
            first, last = net.points[0], net.points[-1]
            spec = NetSpec(net.id, first.x, first.y, last.x, last.y)
            old_loss = net_loss(net, grid, circuit)
            logger.info(
                "net %d: (%d, %d) -> (%d, %d), loss: %d",
                spec.id, spec.x1, spec.y1, spec.x2, spec.y2, old_loss,
            )
            _adjust(grid, net.points, -1)
            candidate, new_loss = route_net(
                grid, spec,
                circuit.propagation_loss, circuit.crossing_loss, circuit.bending_loss,
            )
            if new_loss < old_loss:
                _adjust(grid, candidate.points, 1)
                nets[index] = candidate
                improved = True
                logger.info("new route loss: %d, replace with better route", new_loss)
            else:
                _adjust(grid, net.points, 1)
                logger.info("new route loss: %d", new_loss)
    return nets