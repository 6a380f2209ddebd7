"""Integer 3D vectors and exact quarter-turn rotations."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator

import numpy as np

COORD_DTYPE = np.int32
COORD_MIN = int(np.iinfo(COORD_DTYPE).min)
COORD_MAX = int(np.iinfo(COORD_DTYPE).max)

# cos/sin of 0, 90, 180, 270 degrees
COS = (1, 0, -1, 0)
SIN = (0, 1, 0, -1)


class Axis(enum.Enum):
    X = "x"
    Y = "y"
    Z = "z"

    @property
    def index(self) -> int:
        return {Axis.X: 0, Axis.Y: 1, Axis.Z: 2}[self]


def rotation_matrix(axis: Axis, n_turns: int) -> np.ndarray:
    """Return the integer matrix for n_turns clockwise quarter turns about axis.

    Clockwise is as seen looking down the axis from its positive end. The
    right-handed matrices turn counter-clockwise for a positive angle, so the
    turn count is negated before the table lookup.
    """
    quarter = -n_turns % 4
    c = COS[quarter]
    s = SIN[quarter]
    if axis is Axis.X:
        rows = [[1, 0, 0], [0, c, -s], [0, s, c]]
    elif axis is Axis.Y:
        rows = [[c, 0, s], [0, 1, 0], [-s, 0, c]]
    else:
        rows = [[c, -s, 0], [s, c, 0], [0, 0, 1]]
    return np.array(rows, dtype=COORD_DTYPE)


@dataclass(frozen=True)
class Vec3:
    x: int
    y: int
    z: int

    def __post_init__(self):
        for name in ("x", "y", "z"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise TypeError(f"Vec3.{name} must be an integer, got {value!r}")
            value = int(value)
            if value < COORD_MIN or value > COORD_MAX:
                raise OverflowError(f"Vec3.{name}={value} does not fit in {np.dtype(COORD_DTYPE).name}")
            object.__setattr__(self, name, value)

    @classmethod
    def zero(cls) -> Vec3:
        return cls(0, 0, 0)

    @classmethod
    def from_array(cls, arr: np.ndarray | list[int] | tuple[int, int, int]) -> Vec3:
        x, y, z = (int(v) for v in np.asarray(arr).reshape(3))
        return cls(x, y, z)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=COORD_DTYPE)

    @staticmethod
    def dot(lhs: Vec3, rhs: Vec3) -> int:
        return lhs.x * rhs.x + lhs.y * rhs.y + lhs.z * rhs.z

    @staticmethod
    def cross(lhs: Vec3, rhs: Vec3) -> Vec3:
        return Vec3(
            lhs.y * rhs.z - lhs.z * rhs.y,
            lhs.z * rhs.x - lhs.x * rhs.z,
            lhs.x * rhs.y - lhs.y * rhs.x,
        )

    def length_squared(self) -> int:
        return Vec3.dot(self, self)

    def rotate(self, axis: Axis, n_turns: int) -> Vec3:
        if n_turns % 4 == 0:
            return self
        return Vec3.from_array(rotation_matrix(axis, n_turns) @ self.as_array())

    def __iter__(self) -> Iterator[int]:
        return iter((self.x, self.y, self.z))

    def __getitem__(self, index: int) -> int:
        return (self.x, self.y, self.z)[index]

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return self + -other

    def __mul__(self, other: Vec3 | int) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, np.integer)):
            k = int(other)
            return Vec3(self.x * k, self.y * k, self.z * k)
        return NotImplemented

    def __rmul__(self, other: int) -> Vec3:
        return self.__mul__(other)

    def __str__(self) -> str:
        return f"{self.x} {self.y} {self.z}"


def rotate_around_axis(v: Vec3, axis: Axis, n_turns: int) -> Vec3:
    return v.rotate(axis, n_turns)
