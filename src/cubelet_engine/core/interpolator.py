from __future__ import annotations

import logging
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from functools import reduce

from .generators import FACES, GENERATORS, UnknownGeneratorError, parse_symbol
from .labels import CELL_SPACING, CELLS, rest_position, validate_label
from .permutation import Permutation, apply, compose, identity
from .transforms import (
    Matrix4,
    Vector3,
    identity4,
    invert_rigid,
    mat_mul,
    position_of,
    rotation_about,
    translation,
)

logger = logging.getLogger(__name__)

QUARTER_TURN = math.pi / 2

Diagnostics = Callable[[str], None]

# face -> sign of the rotation angle about the face's axis
_FACE_SIGN: dict[str, float] = {"U": 1.0, "D": 1.0, "L": -1.0, "R": -1.0, "F": 1.0, "B": 1.0}


def _log_diagnostic(message: str) -> None:
    logger.warning(message)


def clamp(x: float, lo: float = 0.0, hi: float = 1.0) -> float:
    return max(lo, min(x, hi))


def generator_rotation(
    symbol: str,
    label: str,
    fraction: float = 1.0,
    *,
    diagnostics: Diagnostics | None = None,
) -> Matrix4:
    """Rotation contributed by `symbol` to the cell currently at `label`.

    Identity when the cell is off the turning layer. Inverse symbols give the
    inverse of the forward matrix. Unknown symbols are reported through
    `diagnostics` (logger warning by default) and give the identity.
    """
    try:
        face, inverse = parse_symbol(symbol)
    except UnknownGeneratorError:
        (diagnostics or _log_diagnostic)(f"Invalid generator {symbol}. Skipping.")
        return identity4()

    axis, layer = FACES[face]
    if label[axis] != layer:
        return identity4()
    m = rotation_about(axis, _FACE_SIGN[face] * QUARTER_TURN * fraction)
    return invert_rigid(m) if inverse else m


@dataclass(frozen=True, slots=True)
class InterpolationState:
    tracked: Permutation = field(default_factory=identity)
    rotation: Matrix4 = field(default_factory=identity4)


def step_fraction(index: int, t: float, n: int) -> float:
    return clamp(t * n - index)


def step_started(index: int, t: float, n: int) -> bool:
    # at t == index / n the step is entered with fraction 0
    return not index > t * n


def step(
    state: InterpolationState,
    index: int,
    symbol: str,
    cid: str,
    t: float,
    n: int,
    *,
    diagnostics: Diagnostics | None = None,
) -> InterpolationState:
    """Advance the fold by one move. Pure: returns a new state."""
    if not step_started(index, t, n):
        return state
    label = apply(state.tracked, cid)
    m = generator_rotation(symbol, label, step_fraction(index, t, n), diagnostics=diagnostics)
    return InterpolationState(
        tracked=compose(state.tracked, GENERATORS.get(symbol, identity())),
        rotation=mat_mul(m, state.rotation),
    )


def cell_transform(
    seq: Sequence[str],
    cid: str,
    t: float = 1.0,
    *,
    spacing: float = CELL_SPACING,
    diagnostics: Diagnostics | None = None,
    validate: bool = False,
) -> Matrix4:
    """Transform of cell `cid` after executing fraction `t` of `seq`.

    `t` is expected in [0, 1]; it is not clamped here.
    """
    if validate:
        validate_label(cid)
    n = len(seq)
    moves = [(i, s) for i, s in enumerate(seq) if step_started(i, t, n)]
    state = reduce(
        lambda acc, move: step(acc, move[0], move[1], cid, t, n, diagnostics=diagnostics),
        moves,
        InterpolationState(),
    )
    return mat_mul(state.rotation, translation(*rest_position(cid, spacing)))


def cube_transforms(
    seq: Sequence[str],
    t: float = 1.0,
    *,
    spacing: float = CELL_SPACING,
    diagnostics: Diagnostics | None = None,
) -> dict[str, Matrix4]:
    return {cid: cell_transform(seq, cid, t, spacing=spacing, diagnostics=diagnostics) for cid in CELLS}


def cell_positions(
    seq: Sequence[str],
    t: float = 1.0,
    *,
    spacing: float = CELL_SPACING,
) -> dict[str, Vector3]:
    return {cid: position_of(m) for cid, m in cube_transforms(seq, t, spacing=spacing).items()}
