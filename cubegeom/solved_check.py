"""Solved-state checks for the cube simulator."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

import numpy as np

from .facelet import FaceletModel, project_facelets
from .geometry import create_gmove
from .notation import ROTATION_MOVES, Movement
from .vec3 import COORD_DTYPE

if TYPE_CHECKING:
    from .cube import GCube

N_ORIENTATIONS = 24


def orientations(current: np.ndarray, size: int) -> list[np.ndarray]:
    """Return the positions seen in each of the 24 ways to hold the cube.

    Found by breadth-first search over whole-cube x, y and z turns; two
    holdings are the same when every sticker ends up in the same place.
    """
    gmoves = [create_gmove(Movement(move), size) for move in ROTATION_MOVES]
    start = np.array(current, dtype=COORD_DTYPE).reshape(-1, 3)

    found: list[np.ndarray] = []
    seen: set[bytes] = set()
    q: deque[np.ndarray] = deque([start])

    while q:
        points = q.popleft()
        key = points.tobytes()
        if key in seen:
            continue
        seen.add(key)
        found.append(points)
        for gmove in gmoves:
            q.append(gmove.apply_to(points))

    if len(found) != N_ORIENTATIONS:
        raise RuntimeError(f"Expected {N_ORIENTATIONS} orientations, got {len(found)}")
    return found


def is_solved_orientation_invariant(cube: GCube) -> bool:
    """True if the cube is solved when held in any of its 24 orientations."""
    solved = FaceletModel.solved(cube.size)
    initial = cube.initial_positions()
    for points in orientations(cube.current_positions(), cube.size):
        if project_facelets(initial, points, cube.size) == solved:
            return True
    return False
