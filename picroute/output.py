"""Writers for routing results: the segment list and a gnuplot script."""

from __future__ import annotations

import os
import random
from collections.abc import Iterable
from pathlib import Path

from .models import Circuit, Net


def format_circuit(circuit: Circuit) -> str:
    """Render a circuit in the same layout as its input description."""
    lines = [
        f"grid {circuit.grid_x} {circuit.grid_y}",
        f"propagation loss {circuit.propagation_loss}",
        f"crossing loss {circuit.crossing_loss}",
        f"bending loss {circuit.bending_loss}",
        f"num net {len(circuit.nets)}",
    ]
    lines += [f"{n.id} {n.x1} {n.y1} {n.x2} {n.y2}" for n in circuit.nets]
    return "".join(line + "\n" for line in lines)


def format_output(nets: Iterable[Net]) -> str:
    """Render routed nets as an id/segment-count header and one line per segment."""
    parts: list[str] = []
    for net in nets:
        points = net.points
        parts.append(f"{net.id} {max(len(points) - 1, 0)}\n")
        parts.extend(
            f"{a.x} {a.y} {b.x} {b.y}\n" for a, b in zip(points, points[1:])
        )
    return "".join(parts)


def write_output(nets: Iterable[Net], filename: str | os.PathLike[str]) -> None:
    """Write the routed nets to ``filename``."""
    with open(filename, "w", encoding="utf-8") as handle:
        handle.write(format_output(nets))


def _stem(filename: str | os.PathLike[str]) -> str:
    name = os.fspath(filename)
    dot = name.rfind(".")
    return name if dot < 0 else name[:dot]


def format_gnuplot(
    nets: Iterable[Net],
    filename: str | os.PathLike[str],
    grid_x: int,
    grid_y: int,
    rng: random.Random | None = None,
) -> str:
    """Build a gnuplot script that draws every net in a random colour.

    The picture is written next to ``filename`` with a ``.png`` suffix.
    """
    rng = rng if rng is not None else random.Random()
    nets = list(nets)
    stem = _stem(filename)
    parts = [
        f"set terminal pngcairo size {grid_x * 32 + 144},{grid_y * 32 + 106}\n",
        f"set output '{stem}.png'\n",
        "set title 'Net Plot'\n",
        "set xlabel 'X'\n",
        "set ylabel 'Y'\n",
        "set key off\n\n",
        "set xtics 1\n",
        "set ytics 1\n",
        "set grid xtics ytics\n",
        f"set xrange [-1:{grid_x}]\n",
        f"set yrange [-1:{grid_y}]\n",
        "set palette model HSV\n\n",
        "plot ",
    ]
    for index, _ in enumerate(nets):
        hue = rng.uniform(0.0, 1.0)
        sat = rng.uniform(0.6, 1.0)
        val = rng.uniform(0.6, 1.0)
        parts.append(
            f"'-' with lines lt rgb hsv2rgb({hue:.6g},{sat:.6g},{val:.6g}) lw 2"
        )
        parts.append(", \\\n     " if index + 1 < len(nets) else "\n\n")
    for net in nets:
        parts.extend(f"{p.x} {p.y}\n" for p in net.points)
        parts.append("e\n")
    return "".join(parts)


def write_gnuplot(
    nets: Iterable[Net],
    filename: str | os.PathLike[str],
    grid_x: int,
    grid_y: int,
    rng: random.Random | None = None,
) -> Path:
    """Write the gnuplot script beside ``filename`` and return its path."""
    path = Path(_stem(filename) + ".gp")
    try:
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(format_gnuplot(nets, filename, grid_x, grid_y, rng))
    except OSError as exc:
        raise OSError(f"Cannot open file {path} for writing") from exc
    return path