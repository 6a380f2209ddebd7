"""Geometric N x N x N cube simulator."""

from __future__ import annotations

import logging
from typing import Iterable

import numpy as np

from .facelet import FaceletModel, project_facelets
from .geometry import Face, GMove, Sticker, create_gmove, face_of
from .notation import Movement, parse_scramble
from .solved_check import is_solved_orientation_invariant
from .vec3 import COORD_DTYPE, Vec3

logger = logging.getLogger(__name__)

MAX_CUBE_SIZE = 4096


def sticker_range(size: int) -> range:
    """Sticker centre coordinates along one axis: -N+1, -N+3, ..., N-1."""
    return range(-size + 1, size, 2)


def solved_positions(size: int) -> np.ndarray:
    """Return the (6*N*N, 3) sticker positions of a solved cube."""
    rows: list[tuple[int, int, int]] = []
    # each sticker sits on a face, the other two coordinates place it on that face
    for face in (-size, size):
        for coord1 in sticker_range(size):
            for coord2 in sticker_range(size):
                rows.append((face, coord1, coord2))
                rows.append((coord1, face, coord2))
                rows.append((coord1, coord2, face))
    return np.array(rows, dtype=COORD_DTYPE)


def _validate_size(size: int) -> int:
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
        raise ValueError(f"Cube size must be an integer, got {size!r}")
    size = int(size)
    if size < 1 or size > MAX_CUBE_SIZE:
        raise ValueError(f"Cube size must be in range 1..{MAX_CUBE_SIZE}, got {size}")
    return size


class GCube:
    """All stickers of a size-N cube, as initial and current 3D positions.

    Row i of the two position arrays describes sticker i. Moves only ever
    permute the current positions among the solved positions.
    """

    def __init__(self, size: int = 3):
        self.size = _validate_size(size)
        self._initial = solved_positions(self.size)
        self._current = self._initial.copy()
        self.history: list[Movement] = []

    def copy(self) -> GCube:
        clone = GCube.__new__(GCube)
        clone.size = self.size
        clone._initial = self._initial.copy()
        clone._current = self._current.copy()
        clone.history = list(self.history)
        return clone

    def initial_positions(self) -> np.ndarray:
        return self._initial.copy()

    def current_positions(self) -> np.ndarray:
        return self._current.copy()

    @property
    def stickers(self) -> tuple[Sticker, ...]:
        return tuple(self.sticker(i) for i in range(len(self)))

    def sticker(self, index: int) -> Sticker:
        return Sticker(Vec3.from_array(self._initial[index]), Vec3.from_array(self._current[index]))

    def current_face(self, sticker: Sticker) -> Face:
        return face_of(sticker.current, self.size)

    def initial_face(self, sticker: Sticker) -> Face:
        return face_of(sticker.initial, self.size)

    def create_gmove(self, movement: Movement) -> GMove:
        return create_gmove(movement, self.size)

    def create_gmoves(self, movements: Iterable[Movement]) -> list[GMove]:
        return [self.create_gmove(m) for m in movements]

    def apply_gmove(self, gmove: GMove) -> None:
        self._current = gmove.apply_to(self._current)
        self.history.append(gmove.movement)

    def apply_gmoves(self, gmoves: Iterable[GMove]) -> None:
        for gmove in gmoves:
            self.apply_gmove(gmove)

    def apply_movement(self, movement: Movement) -> None:
        gmove = self.create_gmove(movement)
        logger.debug("apply %s: axis=%s turns=%d where %s", movement, gmove.axis.value, gmove.turns, gmove.predicate)
        self.apply_gmove(gmove)

    def apply_movements(self, movements: Iterable[Movement]) -> None:
        for movement in movements:
            self.apply_movement(movement)

    def apply_notation(self, text: str) -> list[Movement]:
        """Parse and apply a scramble; nothing is applied if any token is bad."""
        movements = parse_scramble(text)
        self.apply_movements(movements)
        return movements

    def reset(self) -> None:
        self.resize(self.size)

    def resize(self, size: int) -> None:
        size = _validate_size(size)
        logger.debug("rebuild solved cube: size %d -> %d, dropping %d moves", self.size, size, len(self.history))
        self.size = size
        self._initial = solved_positions(size)
        self._current = self._initial.copy()
        self.history = []

    def grow(self) -> None:
        self.resize(min(self.size + 1, MAX_CUBE_SIZE))

    def shrink(self) -> None:
        self.resize(max(self.size - 1, 1))

    def to_facelet_model(self) -> FaceletModel:
        return project_facelets(self._initial, self._current, self.size)

    def is_solved(self) -> bool:
        return self.to_facelet_model().is_solved()

    def is_solved_any_orientation(self) -> bool:
        return is_solved_orientation_invariant(self)

    def __len__(self) -> int:
        return self._initial.shape[0]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GCube):
            return NotImplemented
        return (
            self.size == other.size
            and np.array_equal(self._initial, other._initial)
            and np.array_equal(self._current, other._current)
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"GCube(size={self.size}, moves={len(self.history)})"
