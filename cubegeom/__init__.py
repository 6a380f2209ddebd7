"""Geometric NxNxN cube simulator package."""

from .cube import GCube
from .facelet import FaceletModel
from .geometry import Face, GMove, Sticker
from .notation import Move, Movement, NotationError, Turn, parse_scramble
from .solved_check import is_solved_orientation_invariant
from .vec3 import Axis, Vec3

__all__ = [
    "Axis",
    "Face",
    "FaceletModel",
    "GCube",
    "GMove",
    "Move",
    "Movement",
    "NotationError",
    "Sticker",
    "Turn",
    "Vec3",
    "is_solved_orientation_invariant",
    "parse_scramble",
]
