from __future__ import annotations

from collections.abc import Mapping

from cubelet_engine.core.generators import FACES, GENERATORS, INVERSE_SUFFIX
from cubelet_engine.core.permutation import Permutation, compose, is_identity, order


def audit_bijection(p: Mapping[str, str]) -> None:
    keys = set(p.keys())
    values = list(p.values())
    if len(set(values)) != len(values):
        raise AssertionError("permutation is many-to-one")
    if set(values) != keys:
        raise AssertionError("permutation is not a bijection on its support")


def audit_generator_table(table: Mapping[str, Permutation] = GENERATORS) -> None:
    expected = set(FACES) | {f + INVERSE_SUFFIX for f in FACES}
    if set(table) != expected:
        raise AssertionError("generator table symbols mismatch")

    for p in table.values():
        audit_bijection(p)

    for face, (axis, layer) in FACES.items():
        g = table[face]
        g_inv = table[face + INVERSE_SUFFIX]
        if not is_identity(compose(g, g_inv)) or not is_identity(compose(g_inv, g)):
            raise AssertionError(f"{face} composed with its inverse is not the identity")
        if order(g) != 4:
            raise AssertionError(f"{face} must have order 4")
        for k, v in g.items():
            if k[axis] != layer or v[axis] != layer:
                raise AssertionError(f"{face} moves a cell off its layer: {k}->{v}")
