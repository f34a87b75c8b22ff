"""Command line entry point: parse, route and write the results."""

from __future__ import annotations

import logging
import sys

from .output import write_gnuplot, write_output
from .parser import ParseError, parse
from .routing import route

_USAGE = "Usage: picroute [input file name] [output file name]"


def main(argv: list[str] | None = None) -> int:
    """Route the circuit in the input file and write the output file."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print(_USAGE)
        return 1
    input_name, output_name = args
    logging.basicConfig(level=logging.INFO, format="%(message)s", stream=sys.stdout)
    try:
        circuit = parse(input_name)
        nets = route(circuit)
        write_output(nets, output_name)
        write_gnuplot(nets, output_name, circuit.grid_x, circuit.grid_y)
    except (ParseError, OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())