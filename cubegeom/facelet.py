"""Flat face-major facelet layout and its projection from 3D stickers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

import numpy as np

from .geometry import FACE_INDEX, N_FACES, ORDERED_FACES, Face, create_gmove, faces_of
from .notation import Move, Movement, Turn

# whole-cube rotation that brings each face round to F
FACE_TO_FRONT = {
    Face.U: Movement(Move.X, Turn.INVERSE),
    Face.R: Movement(Move.Y, Turn.SINGLE),
    Face.F: None,
    Face.D: Movement(Move.X, Turn.SINGLE),
    Face.L: Movement(Move.Y, Turn.INVERSE),
    Face.B: Movement(Move.Y, Turn.DOUBLE),
}


class FaceletValidationError(ValueError):
    """Raised when a facelet layout is invalid."""


def _size_for_length(length: int) -> int:
    size = int(round((length / N_FACES) ** 0.5))
    if size < 1 or N_FACES * size * size != length:
        raise FaceletValidationError(f"Facelet layout length {length} is not 6*N^2 for any N >= 1")
    return size


@dataclass(frozen=True)
class FaceletModel:
    """Faces of every sticker position, 6 blocks of N*N in U R F D L B order.

    Each block reads left to right, then top to bottom, as seen from outside
    that face.
    """

    size: int
    faces: tuple[Face, ...]

    def __post_init__(self):
        object.__setattr__(self, "faces", tuple(self.faces))
        expected = N_FACES * self.size * self.size
        if len(self.faces) != expected:
            raise FaceletValidationError(f"Facelet layout must have {expected} stickers, got {len(self.faces)}")

    @classmethod
    def solved(cls, size: int = 3) -> FaceletModel:
        per_face = size * size
        return cls(size, tuple(face for face in ORDERED_FACES for _ in range(per_face)))

    @classmethod
    def from_string(cls, text: str) -> FaceletModel:
        text = "".join(text.split())
        size = _size_for_length(len(text))

        valid = {face.value: face for face in ORDERED_FACES}
        unknown = sorted({ch for ch in text if ch not in valid})
        if unknown:
            raise FaceletValidationError(f"Facelet layout contains unknown faces: {', '.join(unknown)}")

        faces = tuple(valid[ch] for ch in text)
        per_face = size * size
        for face in ORDERED_FACES:
            count = faces.count(face)
            if count != per_face:
                raise FaceletValidationError(
                    f"Invalid sticker counts; face {face.value} appears {count} times, expected {per_face}"
                )
        return cls(size, faces)

    def to_string(self) -> str:
        return "".join(face.value for face in self.faces)

    def to_color_ids(self) -> np.ndarray:
        return np.array([FACE_INDEX[face] for face in self.faces], dtype=np.int8)

    def face_grid(self, face: Face) -> tuple[tuple[Face, ...], ...]:
        per_face = self.size * self.size
        start = FACE_INDEX[face] * per_face
        block = self.faces[start:start + per_face]
        return tuple(block[row * self.size:(row + 1) * self.size] for row in range(self.size))

    def is_solved(self) -> bool:
        return self == FaceletModel.solved(self.size)

    def __len__(self) -> int:
        return len(self.faces)

    def __getitem__(self, index: int) -> Face:
        return self.faces[index]

    def __iter__(self) -> Iterator[Face]:
        return iter(self.faces)

    def __str__(self) -> str:
        return self.to_string()


def project_facelets(initial: np.ndarray, current: np.ndarray, size: int) -> FaceletModel:
    """Read the facelet layout off a set of stickers.

    For each face the positions are turned so that face is at F, then the
    stickers on F are read top row first, left to right, reporting the face
    each one started on.
    """
    initial = np.asarray(initial).reshape(-1, 3)
    current = np.asarray(current).reshape(-1, 3)
    per_face = size * size

    out: list[Face] = []
    for face in ORDERED_FACES:
        to_front = FACE_TO_FRONT[face]
        rotated = current if to_front is None else create_gmove(to_front, size).apply_to(current)

        on_front = np.flatnonzero(rotated[:, 2] == size)
        if on_front.size != per_face:
            raise RuntimeError(f"Expected {per_face} stickers on face {face.value}, found {on_front.size}")

        # lexsort sorts by the last key first: y descending, then x ascending
        order = np.lexsort((rotated[on_front, 0], -rotated[on_front, 1]))
        out.extend(faces_of(initial[on_front[order]], size))
    return FaceletModel(size, tuple(out))
