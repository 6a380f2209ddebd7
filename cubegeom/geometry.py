"""Stickers and geometric moves.

Coordinates: every cubie is 2 units wide and the cube is centred on the
origin, so for a cube of size N the sticker centres along an axis run over
-(N-1), -(N-3), ..., N-1 and the outer faces sit at -N and +N. On a 3x3 the U
centre sticker is at (0, 3, 0) and the UF edge sticker on U is at (0, 3, 2).
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

import numpy as np

from .notation import Move, Movement
from .vec3 import COORD_DTYPE, Axis, Vec3, rotation_matrix


class Face(enum.Enum):
    U = "U"
    L = "L"
    F = "F"
    R = "R"
    B = "B"
    D = "D"
    NONE = "X"  # interior point, not on any outer face


ORDERED_FACES = (Face.U, Face.R, Face.F, Face.D, Face.L, Face.B)
FACE_INDEX = {face: i for i, face in enumerate(ORDERED_FACES)}
N_FACES = len(ORDERED_FACES)

# (component index, sign) of the outward normal
FACE_NORMALS = {
    Face.R: (0, +1),
    Face.L: (0, -1),
    Face.U: (1, +1),
    Face.D: (1, -1),
    Face.F: (2, +1),
    Face.B: (2, -1),
}


def face_of(pos: Vec3, size: int) -> Face:
    for face, (axis_idx, sign) in FACE_NORMALS.items():
        if pos[axis_idx] == sign * size:
            return face
    return Face.NONE


def faces_of(points: np.ndarray, size: int) -> list[Face]:
    """Vectorised face_of over an (M, 3) array of positions."""
    pts = np.asarray(points).reshape(-1, 3)
    out = np.full(pts.shape[0], -1, dtype=np.int8)
    # reverse so the first entry of FACE_NORMALS wins, matching face_of
    for face, (axis_idx, sign) in reversed(list(FACE_NORMALS.items())):
        out[pts[:, axis_idx] == sign * size] = FACE_INDEX[face]
    return [ORDERED_FACES[i] if i >= 0 else Face.NONE for i in out.tolist()]


class Comparator(enum.Enum):
    GE = ">="
    LE = "<="
    EQ = "=="
    ALL = "*"


@dataclass(frozen=True)
class LayerPredicate:
    """Selects positions by comparing one coordinate against a threshold.

    E.g. LayerPredicate(Axis.Y, Comparator.GE, 1) selects every position with
    y >= 1, which on a 3x3 is the U layer.
    """

    axis: Axis | None
    comparator: Comparator
    threshold: int = 0

    @classmethod
    def everything(cls) -> LayerPredicate:
        return cls(None, Comparator.ALL)

    def matches(self, pos: Vec3) -> bool:
        if self.comparator is Comparator.ALL:
            return True
        value = pos[self.axis.index]
        if self.comparator is Comparator.GE:
            return value >= self.threshold
        if self.comparator is Comparator.LE:
            return value <= self.threshold
        return value == self.threshold

    def mask(self, points: np.ndarray) -> np.ndarray:
        pts = np.asarray(points).reshape(-1, 3)
        if self.comparator is Comparator.ALL:
            return np.ones(pts.shape[0], dtype=bool)
        column = pts[:, self.axis.index]
        if self.comparator is Comparator.GE:
            return column >= self.threshold
        if self.comparator is Comparator.LE:
            return column <= self.threshold
        return column == self.threshold

    def __str__(self) -> str:
        if self.comparator is Comparator.ALL:
            return "*"
        return f"{self.axis.value} {self.comparator.value} {self.threshold}"


@dataclass(frozen=True)
class GMove:
    """A rotation about an axis restricted to positions matching a predicate.

    The angle comes from the movement's turn, the direction from the
    clockwise flag (clockwise as seen from the positive end of the axis).
    """

    movement: Movement
    axis: Axis
    clockwise: bool
    predicate: LayerPredicate

    @property
    def turns(self) -> int:
        turn = self.movement.turn.value
        return turn if self.clockwise else -turn

    def matrix(self) -> np.ndarray:
        return rotation_matrix(self.axis, self.turns)

    def apply_to(self, points: np.ndarray) -> np.ndarray:
        """Return a copy of an (M, 3) position array with this move applied."""
        out = np.array(points, dtype=COORD_DTYPE).reshape(-1, 3)
        selected = self.predicate.mask(out)
        out[selected] = out[selected] @ self.matrix().T
        return out


@dataclass(frozen=True)
class Sticker:
    initial: Vec3
    current: Vec3

    @classmethod
    def from_point(cls, point: Vec3) -> Sticker:
        return cls(point, point)

    def rotate(self, gmove: GMove) -> Sticker:
        if not gmove.predicate.matches(self.current):
            return self
        return Sticker(self.initial, self.current.rotate(gmove.axis, gmove.turns))


# move -> (axis, clockwise, comparator, layer depth); depth 0 marks a slice
_FACE_MOVE_TABLE = {
    Move.U: (Axis.Y, True, Comparator.GE, 1),
    Move.Uw: (Axis.Y, True, Comparator.GE, 2),
    Move.D: (Axis.Y, False, Comparator.LE, 1),
    Move.Dw: (Axis.Y, False, Comparator.LE, 2),
    Move.R: (Axis.X, True, Comparator.GE, 1),
    Move.Rw: (Axis.X, True, Comparator.GE, 2),
    Move.L: (Axis.X, False, Comparator.LE, 1),
    Move.Lw: (Axis.X, False, Comparator.LE, 2),
    Move.F: (Axis.Z, True, Comparator.GE, 1),
    Move.Fw: (Axis.Z, True, Comparator.GE, 2),
    Move.B: (Axis.Z, False, Comparator.LE, 1),
    Move.Bw: (Axis.Z, False, Comparator.LE, 2),
    Move.E: (Axis.Y, False, Comparator.EQ, 0),
    Move.M: (Axis.X, False, Comparator.EQ, 0),
    Move.S: (Axis.Z, True, Comparator.EQ, 0),
}

_ROTATION_AXES = {Move.X: Axis.X, Move.Y: Axis.Y, Move.Z: Axis.Z}


def create_gmove(movement: Movement, size: int) -> GMove:
    """Resolve a movement to the geometric move it performs on a size-N cube."""
    move = movement.move
    if move in _ROTATION_AXES:
        return GMove(movement, _ROTATION_AXES[move], True, LayerPredicate.everything())

    axis, clockwise, comparator, depth = _FACE_MOVE_TABLE[move]
    if comparator is Comparator.GE:
        threshold = size - 2 * depth
    elif comparator is Comparator.LE:
        threshold = -size + 2 * depth
    else:
        threshold = 0
    return GMove(movement, axis, clockwise, LayerPredicate(axis, comparator, threshold))
