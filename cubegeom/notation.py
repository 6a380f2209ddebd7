"""Move notation: base moves, turn amounts and their text form."""

from __future__ import annotations

import enum
from dataclasses import dataclass

import numpy as np


class NotationError(ValueError):
    """Raised when move notation cannot be parsed."""


class EmptyNotationError(NotationError):
    def __init__(self):
        super().__init__("Move notation must not be empty")


class UnknownTokenError(NotationError):
    def __init__(self, part: str, text: str, token: str):
        self.part = part
        self.text = text
        self.token = token
        super().__init__(f"Unknown {part} '{text}' in move '{token}'")


class Move(enum.Enum):
    U = "U"
    L = "L"
    F = "F"
    R = "R"
    B = "B"
    D = "D"
    Uw = "Uw"
    Lw = "Lw"
    Fw = "Fw"
    Rw = "Rw"
    Bw = "Bw"
    Dw = "Dw"
    E = "E"
    M = "M"
    S = "S"
    X = "x"
    Y = "y"
    Z = "z"

    @property
    def face(self) -> str:
        """Face letter turned by this move, e.g. "R" for both R and Rw."""
        return self.value[0].upper()

    @property
    def is_wide(self) -> bool:
        return self in WIDE_MOVES

    @property
    def is_slice(self) -> bool:
        return self in SLICE_MOVES

    @property
    def is_rotation(self) -> bool:
        return self in ROTATION_MOVES


class Turn(enum.Enum):
    SINGLE = 1
    DOUBLE = 2
    INVERSE = -1

    @property
    def notation(self) -> str:
        return TURN_NOTATION[self]

    @property
    def inverse(self) -> Turn:
        return {Turn.SINGLE: Turn.INVERSE, Turn.DOUBLE: Turn.DOUBLE, Turn.INVERSE: Turn.SINGLE}[self]


OUTER_MOVES = (Move.U, Move.L, Move.F, Move.R, Move.B, Move.D)
WIDE_MOVES = (Move.Uw, Move.Lw, Move.Fw, Move.Rw, Move.Bw, Move.Dw)
SLICE_MOVES = (Move.E, Move.M, Move.S)
ROTATION_MOVES = (Move.X, Move.Y, Move.Z)

TURN_NOTATION = {Turn.SINGLE: "", Turn.DOUBLE: "2", Turn.INVERSE: "'"}


def _build_move_grammar() -> dict[str, Move]:
    grammar: dict[str, Move] = {}
    for outer, wide in zip(OUTER_MOVES, WIDE_MOVES):
        grammar[outer.value] = outer
        grammar[outer.value.lower()] = wide
        grammar[wide.value] = wide
    for move in SLICE_MOVES:
        grammar[move.value] = move
    for move in ROTATION_MOVES:
        grammar[move.value.lower()] = move
        grammar[move.value.upper()] = move
    return grammar


MOVE_GRAMMAR = _build_move_grammar()
TURN_GRAMMAR = {text: turn for turn, text in TURN_NOTATION.items()}


@dataclass(frozen=True)
class Movement:
    move: Move
    turn: Turn = Turn.SINGLE

    @classmethod
    def parse(cls, token: str) -> Movement:
        """Parse a single token such as "R", "Rw2", "u'" or "x2"."""
        if not token:
            raise EmptyNotationError()

        turn_start = 2 if len(token) > 1 and token[1].isalpha() else 1
        move_text, turn_text = token[:turn_start], token[turn_start:]

        move = MOVE_GRAMMAR.get(move_text)
        if move is None:
            raise UnknownTokenError("move", move_text, token)
        turn = TURN_GRAMMAR.get(turn_text)
        if turn is None:
            raise UnknownTokenError("turn", turn_text, token)
        return cls(move, turn)

    def inverse(self) -> Movement:
        return Movement(self.move, self.turn.inverse)

    def __str__(self) -> str:
        return f"{self.move.value}{self.turn.notation}"


def parse_scramble(text: str) -> list[Movement]:
    """Parse whitespace separated notation, failing on the first bad token."""
    return [Movement.parse(token) for token in text.split()]


def format_scramble(movements: list[Movement] | tuple[Movement, ...]) -> str:
    return " ".join(str(m) for m in movements)


def random_scramble(steps: int, size: int = 3, seed: int | None = None) -> list[Movement]:
    """Return a random face-turn sequence with no face turned twice in a row."""
    if not isinstance(steps, int) or steps < 0:
        raise ValueError("Scramble steps must be a non-negative integer")

    rng = np.random.default_rng(seed)
    moves = OUTER_MOVES + WIDE_MOVES if size >= 4 else OUTER_MOVES
    turns = tuple(Turn)

    movements: list[Movement] = []
    prev_face: str | None = None
    for _ in range(steps):
        candidates = [m for m in moves if m.face != prev_face]
        move = candidates[int(rng.integers(len(candidates)))]
        turn = turns[int(rng.integers(len(turns)))]
        movements.append(Movement(move, turn))
        prev_face = move.face
    return movements
