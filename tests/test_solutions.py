"""Recorded scrambles followed by their human (Roux) solutions."""

import unittest

from cubegeom.cube import GCube
from cubegeom.facelet import FaceletModel
from cubegeom.notation import parse_scramble

SOLVES = [
    """
    L2 U L' F2 R F2 D2 B U B R2 D2 B2 R2 F' D2 B' U2 B2 L2

    x
    U' F' R D r' D U2 F2
    r2 U' F' U' F R'
    U R U2 R2 F R F' R U2 R'
    U M U2 M U' F2 M2 F2

    x2
    """,
    """
    F2 R' U' B2 L2 D' L2 F2 U B2 U' L2 R2 D2 F' L2 R D' L2 D U

    y' x
    D' r' D U2 F2 U' F
    r' U' M' R' U' R
    U r U' r2 D' r U r' D r2 U r'
    U2 M U M' U2 M U' M U' M2 U' M' U2 M U2 M2

    y z2
    """,
    """
    R L' U B2 R D2 B' D2 B2 R2 L2 U' L2 U F2 R2 D2 R2 D' L

    y2
    D B' M B'
    r U' R F' U' F
    r2 U M2 U' R
    U' r U' r2 D' r U' r' D r2 U r'
    M' U2 M' U M' U' M2 U M2 U2 M U2 M2

    y2
    """,
]


class TestRecordedSolves(unittest.TestCase):
    def test_scramble_then_solution_is_solved(self):
        for i, text in enumerate(SOLVES):
            movements = parse_scramble(text)
            cube = GCube(3)
            cube.apply_movements(movements)
            self.assertEqual(cube, GCube(3), msg=f"solve #{i}")
            self.assertEqual(cube.to_facelet_model(), FaceletModel.solved(3), msg=f"solve #{i}")

    def test_scramble_alone_is_not_solved(self):
        for i, text in enumerate(SOLVES):
            scramble = text.strip().splitlines()[0]
            self.assertGreaterEqual(len(parse_scramble(scramble)), 20)
            cube = GCube(3)
            cube.apply_notation(scramble)
            self.assertFalse(cube.is_solved_any_orientation(), msg=f"solve #{i}")


if __name__ == "__main__":
    unittest.main()
