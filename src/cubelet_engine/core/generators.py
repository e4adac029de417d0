from __future__ import annotations

import json
import re
from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType

from .permutation import Permutation, compose, compose_all, cycle, identity, invert

INVERSE_SUFFIX = "⁻¹"
_ASCII_INVERSE = ("'", "-1", "^-1")

# face -> (axis, layer digit)
FACES: dict[str, tuple[int, str]] = {
    "U": (0, "2"),
    "D": (0, "0"),
    "L": (1, "2"),
    "R": (1, "0"),
    "F": (2, "2"),
    "B": (2, "0"),
}

# 90 degree rotation of a 3x3 grid; the centre "11" is fixed.
R2: Permutation = compose(
    cycle(["00", "20", "22", "02"]),
    cycle(["01", "10", "21", "12"]),
)


class UnknownGeneratorError(KeyError, ValueError):
    pass


def inject(p2d: Mapping[str, str], axis: int, layer_values: Iterable[str]) -> Permutation:
    """Lift a planar permutation into 3-D by inserting a digit at `axis`.

    Each selected layer is rotated independently; other layers are left out
    of the result (fixed points).

    inject(cycle(["00", "20", "22", "02"]), 1, "1")
        == cycle(["010", "210", "212", "012"])
    """
    if axis not in (0, 1, 2):
        raise ValueError(f"axis must be 0, 1 or 2, got {axis!r}")
    values = tuple(layer_values)

    def ins(label: str, v: str) -> str:
        return label[:axis] + v + label[axis:]

    out = Permutation()
    for src, dst in p2d.items():
        for v in values:
            out[ins(src, v)] = ins(dst, v)
    return out


def whole_cube(axis: int) -> Permutation:
    return inject(R2, axis, "012")


def build_generator_table() -> Mapping[str, Permutation]:
    table: dict[str, Permutation] = {}
    for face, (axis, layer) in FACES.items():
        table[face] = inject(R2, axis, layer)
    for face in FACES:
        table[face + INVERSE_SUFFIX] = invert(table[face])
    if len(table) != 12:
        raise AssertionError("generator table must hold exactly 12 entries")
    return MappingProxyType(table)


GENERATORS: Mapping[str, Permutation] = build_generator_table()


def parse_symbol(symbol: str) -> tuple[str, bool]:
    """Split a generator symbol into (face, inverse)."""
    inverse = symbol.endswith(INVERSE_SUFFIX)
    face = symbol[: -len(INVERSE_SUFFIX)] if inverse else symbol
    if face not in FACES:
        raise UnknownGeneratorError(symbol)
    return face, inverse


def inverse_symbol(symbol: str) -> str:
    face, inverse = parse_symbol(symbol)
    return face if inverse else face + INVERSE_SUFFIX


def normalize_symbol(token: str) -> str:
    for suffix in _ASCII_INVERSE:
        if token.endswith(suffix) and token[: -len(suffix)] in FACES:
            return token[: -len(suffix)] + INVERSE_SUFFIX
    return token


def parse_sequence(text: str) -> list[str]:
    """Parse a textual move sequence.

    Accepts a JSON list (``["U", "R⁻¹"]``) or tokens separated by whitespace
    and/or commas. ``U'`` and ``U-1`` are read as ``U⁻¹``. Unknown tokens are
    kept verbatim.
    """
    text = text.strip()
    if text.startswith("["):
        tokens = json.loads(text)
        if not isinstance(tokens, list) or not all(isinstance(t, str) for t in tokens):
            raise ValueError("JSON move sequence must be a list of strings")
    else:
        tokens = [t for t in re.split(r"[\s,]+", text) if t]
    return [normalize_symbol(t) for t in tokens]


def invert_sequence(seq: Sequence[str]) -> list[str]:
    out: list[str] = []
    for symbol in reversed(seq):
        try:
            out.append(inverse_symbol(symbol))
        except UnknownGeneratorError:
            out.append(symbol)
    return out


def sequence_permutation(seq: Iterable[str]) -> Permutation:
    """Net permutation of a sequence; unknown symbols act as the identity."""
    return compose_all(GENERATORS.get(symbol, identity()) for symbol in seq)
