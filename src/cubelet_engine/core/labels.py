from __future__ import annotations

from collections.abc import Iterable, Iterator

DIGITS = "012"
CELL_SPACING = 1.1


def product(*iterables: Iterable) -> Iterator[tuple]:
    """Cartesian product in lexicographic input order.

    Inputs are materialized up front, so one-shot iterators are safe and the
    enumeration can be restarted by calling again. With no inputs, yields a
    single empty tuple.
    """
    pools = [tuple(it) for it in iterables]

    def _walk(i: int) -> Iterator[tuple]:
        if i == len(pools):
            yield ()
            return
        for x in pools[i]:
            for rest in _walk(i + 1):
                yield (x, *rest)

    return _walk(0)


def build_cells() -> tuple[str, ...]:
    cells = tuple("".join(c) for c in product(DIGITS, DIGITS, DIGITS))
    if len(set(cells)) != 27:
        raise AssertionError("cell label space must hold 27 distinct labels")
    return cells


CELLS: tuple[str, ...] = build_cells()
CELL_INDEX: dict[str, int] = {c: i for i, c in enumerate(CELLS)}


def validate_label(label: str, length: int = 3) -> str:
    if not isinstance(label, str) or len(label) != length:
        raise ValueError(f"label must be a {length}-character string, got {label!r}")
    if any(ch not in DIGITS for ch in label):
        raise ValueError(f"label digits must be in {{0,1,2}}, got {label!r}")
    return label


def rest_position(label: str, spacing: float = CELL_SPACING) -> tuple[float, float, float]:
    # digit 1 sits at the origin on its axis
    x, y, z = ((int(d) - 1) * spacing for d in label)
    return (x, y, z)
