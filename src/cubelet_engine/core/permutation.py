from __future__ import annotations

from collections.abc import Iterable, Sequence

Label = str


class Permutation(dict[Label, Label]):
    """Partial mapping over labels; unmapped labels are fixed points."""

    def __missing__(self, key: Label) -> Label:
        return key

    def __repr__(self) -> str:
        return f"Permutation({dict.__repr__(self)})"


def identity() -> Permutation:
    return Permutation()


def cycle(labels: Sequence[Label]) -> Permutation:
    """Single cycle sending each label to its successor (wrapping).

    Duplicates are not checked: the last write wins.
    """
    out = Permutation()
    n = len(labels)
    for i, label in enumerate(labels):
        out[label] = labels[(i + 1) % n]
    return out


def apply(p: dict[Label, Label], label: Label) -> Label:
    return p.get(label, label)


def compose(p1: dict[Label, Label], p2: dict[Label, Label]) -> Permutation:
    """Apply p1 first, then p2. Keys of the result cover both supports."""
    out = Permutation(p2)
    for k1, v1 in p1.items():
        out[k1] = apply(p2, v1)
    return out


def compose_all(perms: Iterable[dict[Label, Label]]) -> Permutation:
    out = identity()
    for p in perms:
        out = compose(out, p)
    return out


def invert(p: dict[Label, Label]) -> Permutation:
    return Permutation((v, k) for k, v in p.items())


def support(p: dict[Label, Label]) -> set[Label]:
    """Labels actually moved by p."""
    return {k for k, v in p.items() if k != v}


def is_identity(p: dict[Label, Label]) -> bool:
    return not support(p)


def order(p: dict[Label, Label], limit: int = 1 << 16) -> int:
    power = Permutation(p)
    for k in range(1, limit + 1):
        if is_identity(power):
            return k
        power = compose(power, p)
    raise AssertionError(f"permutation order exceeds {limit}")
