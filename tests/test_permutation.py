from __future__ import annotations

import random

import pytest

from cubelet_engine.core.generators import GENERATORS
from cubelet_engine.core.permutation import (
    Permutation,
    apply,
    compose,
    compose_all,
    cycle,
    invert,
    is_identity,
    order,
    support,
)


def _random_perm(rng: random.Random, labels: list[str], k: int) -> Permutation:
    picked = rng.sample(labels, k)
    return cycle(picked)


LABELS = [f"{a}{b}{c}" for a in "012" for b in "012" for c in "012"]


def test_cycle_successors():
    p = cycle(["a", "b", "c", "d"])
    assert apply(p, "a") == "b"
    assert apply(p, "d") == "a"
    for x in "abcd":
        y = x
        for _ in range(4):
            y = apply(p, y)
        assert y == x


def test_missing_label_is_fixed():
    p = cycle(["a", "b"])
    assert apply(p, "z") == "z"
    assert p["z"] == "z"
    assert "z" not in p


def test_apply_works_on_plain_dict():
    assert apply({"a": "b"}, "a") == "b"
    assert apply({"a": "b"}, "q") == "q"


def test_compose_order():
    p1 = cycle(["a", "b"])
    p2 = cycle(["b", "c"])
    c = compose(p1, p2)
    # a -> b (p1) -> c (p2)
    assert c["a"] == "c"
    assert c["b"] == "a"
    assert c["c"] == "b"


def test_compose_keeps_keys_only_in_second():
    p1 = cycle(["a", "b"])
    p2 = cycle(["x", "y"])
    c = compose(p1, p2)
    assert set(c) == {"a", "b", "x", "y"}
    assert c["x"] == "y"
    assert c["a"] == "b"


def test_cycle_duplicate_last_write_wins():
    p = cycle(["a", "b", "a"])
    # the second "a" overwrites a -> b with a -> a
    assert p["a"] == "a"
    assert p["b"] == "a"


@pytest.mark.parametrize("seed", range(10))
def test_inverse_law(seed: int):
    rng = random.Random(seed)
    p = compose(_random_perm(rng, LABELS, 5), _random_perm(rng, LABELS, 4))
    inv = invert(p)
    for x in set(p) | set(inv):
        assert apply(compose(p, inv), x) == x
        assert apply(compose(inv, p), x) == x


@pytest.mark.parametrize("seed", range(10))
def test_associativity(seed: int):
    rng = random.Random(seed)
    p1, p2, p3 = (_random_perm(rng, LABELS, rng.randint(2, 6)) for _ in range(3))
    left = compose(compose(p1, p2), p3)
    right = compose(p1, compose(p2, p3))
    for x in LABELS:
        assert apply(left, x) == apply(right, x)


def test_compose_all_matches_sequential_apply():
    seq = ["U", "R", "F⁻¹", "D", "L⁻¹", "B"]
    net = compose_all(GENERATORS[s] for s in seq)
    for x in LABELS:
        y = x
        for s in seq:
            y = apply(GENERATORS[s], y)
        assert apply(net, x) == y


def test_compose_all_empty_is_identity():
    assert is_identity(compose_all([]))


def test_support_and_order():
    p = compose(cycle(["a", "b", "c"]), cycle(["x", "y"]))
    assert support(p) == {"a", "b", "c", "x", "y"}
    assert order(p) == 6
    assert order(Permutation()) == 1
