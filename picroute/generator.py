"""Random test case generator for the router."""

from __future__ import annotations

import os
import random
import sys
from pathlib import Path

_USAGE = "Usage: picroute-generate size [propagationLoss] [crossingLoss] [bendingLoss] [numNet]"


def generate_test(
    size: int,
    propagation_loss: int = 1,
    crossing_loss: int = 10,
    bending_loss: int = 3,
    num_net: int | None = None,
    rng: random.Random | None = None,
) -> str:
    """Return a random square circuit description with ``num_net`` nets."""
    if num_net is None:
        num_net = size
    if size < 1:
        raise ValueError("size must be positive")
    if size < 2 and num_net > 0:
        raise ValueError("a net needs two distinct cells; size must be at least 2")
    rng = rng if rng is not None else random.Random()
    lines = [
        f"grid {size} {size}",
        f"propagation loss {propagation_loss}",
        f"crossing loss {crossing_loss}",
        f"bending loss {bending_loss}",
        f"num net {num_net}",
    ]
    for index in range(num_net):
        while True:
            x1, y1, x2, y2 = (rng.randint(0, size - 1) for _ in range(4))
            if (x1, y1) != (x2, y2):
                break
        lines.append(f"{index} {x1} {y1} {x2} {y2}")
    return "".join(line + "\n" for line in lines)


def write_test_file(
    size: int,
    propagation_loss: int = 1,
    crossing_loss: int = 10,
    bending_loss: int = 3,
    num_net: int | None = None,
    directory: str | os.PathLike[str] = "test",
    rng: random.Random | None = None,
) -> Path:
    """Write ``pic<size>x<size>.in`` into ``directory`` and return its path."""
    path = Path(directory) / f"pic{size}x{size}.in"
    text = generate_test(size, propagation_loss, crossing_loss, bending_loss, num_net, rng)
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise OSError(f"Cannot open file {path}") from exc
    return path


def main(argv: list[str] | None = None) -> int:
    """Generate a test file from the command line arguments."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print(_USAGE)
        return 1
    try:
        values = [int(arg) for arg in args[:5]]
        size = values[0]
        propagation, crossing, bending, num_net = (values[1:] + [1, 10, 3, size][len(values) - 1 :])[:4]
        write_test_file(size, propagation, crossing, bending, num_net)
    except (ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())