"""Cubelet Engine package."""

from .core.generators import GENERATORS, inject, parse_sequence
from .core.interpolator import cell_transform, cube_transforms
from .core.labels import CELLS
from .core.permutation import Permutation, apply, compose, cycle, invert

__all__ = [
    "CELLS",
    "GENERATORS",
    "Permutation",
    "apply",
    "cell_transform",
    "compose",
    "cube_transforms",
    "cycle",
    "inject",
    "invert",
    "parse_sequence",
]
