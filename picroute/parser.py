"""Reader for the circuit description format."""

from __future__ import annotations

import os
import re
from collections.abc import Iterator

from .models import Circuit, NetSpec

_UINT = re.compile(r"\+?\d+")
_UINT_MAX = 0xFFFFFFFF


class ParseError(ValueError):
    """Raised when a circuit description is malformed."""


class _Tokens:
    def __init__(self, text: str) -> None:
        self._it: Iterator[str] = iter(text.split())

    def __iter__(self) -> Iterator[str]:
        return self._it

    def word(self) -> str:
        return next(self._it, "")

    def uint(self) -> int:
        token = next(self._it, None)
        if token is None:
            raise ParseError("expected unsigned int but reached end of input")
        if not _UINT.fullmatch(token) or int(token) > _UINT_MAX:
            raise ParseError(f"expected unsigned int but got {token!r}")
        return int(token)

    def nets(self) -> list[NetSpec]:
        count = self.uint()
        return [
            NetSpec(self.uint(), self.uint(), self.uint(), self.uint(), self.uint())
            for _ in range(count)
        ]


_LOSS_FIELDS = {
    "propagation": "propagation_loss",
    "crossing": "crossing_loss",
    "bending": "bending_loss",
}


def parse_text(text: str) -> Circuit:
    """Parse a circuit description held in a string."""
    tokens = _Tokens(text)
    circuit = Circuit()
    for token in tokens:
        if token == "grid":
            circuit.grid_x = tokens.uint()
            circuit.grid_y = tokens.uint()
        elif token in _LOSS_FIELDS:
            follower = tokens.word()
            if follower != "loss":
                raise ParseError(f"unexpected {follower!r} after {token!r}")
            setattr(circuit, _LOSS_FIELDS[token], tokens.uint())
        elif token == "num":
            follower = tokens.word()
            if follower != "net":
                raise ParseError(f"unexpected {follower!r} after 'num'")
            circuit.nets = tokens.nets()
        else:
            raise ParseError(f"unexpected {token!r}")
    return circuit


def parse(path: str | os.PathLike[str]) -> Circuit:
    """Parse the circuit description stored in the file at ``path``."""
    with open(path, encoding="utf-8") as handle:
        return parse_text(handle.read())