"""CLI entrypoint for the cube simulator."""

from __future__ import annotations

import argparse
import logging

from .cube import GCube
from .geometry import ORDERED_FACES
from .notation import format_scramble, parse_scramble, random_scramble


def _load_moves(moves: str | None, moves_file: str | None) -> str:
    if moves and moves_file:
        raise ValueError("Use only one of --moves or --moves-file")
    if moves_file:
        with open(moves_file, "r", encoding="utf-8") as f:
            return f.read()
    return moves or ""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cubegeom", description="Geometric NxNxN cube simulator")
    parser.add_argument("--verbose", action="store_true", help="Log every applied move")
    sub = parser.add_subparsers(dest="mode", required=True)

    apply = sub.add_parser("apply", help="Apply moves to a solved cube and print its facelets")
    apply.add_argument("--size", type=int, default=3)
    apply.add_argument("--moves", type=str, default=None)
    apply.add_argument("--moves-file", type=str, default=None)

    parse = sub.add_parser("parse", help="Parse notation and print it in canonical form")
    parse.add_argument("text")

    scramble = sub.add_parser("scramble", help="Print a random scramble")
    scramble.add_argument("--size", type=int, default=3)
    scramble.add_argument("--steps", type=int, default=20)
    scramble.add_argument("--seed", type=int, default=None)

    return parser


def main(argv: list[str] | None = None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.mode == "apply":
            text = _load_moves(args.moves, args.moves_file)
            cube = GCube(size=args.size)
            cube.apply_notation(text)
            facelets = cube.to_facelet_model().to_string()
            per_face = cube.size * cube.size
            for i, face in enumerate(ORDERED_FACES):
                print(f"{face.value}: {facelets[i * per_face:(i + 1) * per_face]}")
            print(f"solved={cube.is_solved()} moves={len(cube.history)}")
            return

        if args.mode == "parse":
            for movement in parse_scramble(args.text):
                print(movement)
            return

        if args.mode == "scramble":
            print(format_scramble(random_scramble(args.steps, size=args.size, seed=args.seed)))
            return
    except ValueError as exc:
        parser.error(str(exc))

    parser.error(f"Unsupported mode: {args.mode}")


if __name__ == "__main__":
    main()
