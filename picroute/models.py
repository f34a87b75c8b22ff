"""Data types shared by the parser and the router."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Point:
    """A grid cell."""

    x: int
    y: int


@dataclass
class Net:
    """A routed net: its id and the cells it passes through, in order."""

    id: int
    points: list[Point] = field(default_factory=list)


@dataclass(frozen=True)
class NetSpec:
    """A net to be routed, given by its two end points."""

    id: int
    x1: int
    y1: int
    x2: int
    y2: int


@dataclass
class Circuit:
    """A routing problem: grid size, loss weights and the nets to connect."""

    grid_x: int = 0
    grid_y: int = 0
    propagation_loss: int = 0
    crossing_loss: int = 0
    bending_loss: int = 0
    nets: list[NetSpec] = field(default_factory=list)