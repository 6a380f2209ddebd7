import unittest

import numpy as np

from cubegeom.cube import GCube
from cubegeom.facelet import FaceletModel, FaceletValidationError
from cubegeom.geometry import Face

SOLVED_3 = "U" * 9 + "R" * 9 + "F" * 9 + "D" * 9 + "L" * 9 + "B" * 9


class TestSolvedLayout(unittest.TestCase):
    def test_solved_3x3_baseline(self):
        model = GCube(3).to_facelet_model()
        self.assertEqual(model.to_string(), SOLVED_3)
        self.assertEqual(
            list(model),
            [Face.U] * 9 + [Face.R] * 9 + [Face.F] * 9 + [Face.D] * 9 + [Face.L] * 9 + [Face.B] * 9,
        )
        self.assertEqual(model, FaceletModel.solved(3))
        self.assertTrue(model.is_solved())

    def test_solved_other_sizes(self):
        for size in (1, 2, 4, 7):
            model = GCube(size).to_facelet_model()
            self.assertEqual(len(model), 6 * size * size)
            self.assertEqual(model, FaceletModel.solved(size))
            self.assertNotIn(Face.NONE, model.faces)

    def test_color_ids(self):
        ids = FaceletModel.solved(2).to_color_ids()
        self.assertEqual(ids.dtype, np.int8)
        self.assertTrue(np.array_equal(ids, np.repeat(np.arange(6, dtype=np.int8), 4)))


class TestProjectionAfterMoves(unittest.TestCase):
    def _facelets(self, notation: str, size: int = 3) -> str:
        cube = GCube(size)
        cube.apply_notation(notation)
        return cube.to_facelet_model().to_string()

    def test_u_turn(self):
        expected = "U" * 9 + "BBB" + "R" * 6 + "RRR" + "F" * 6 + "D" * 9 + "FFF" + "L" * 6 + "LLL" + "B" * 6
        self.assertEqual(self._facelets("U"), expected)

    def test_r_turn(self):
        expected = "UUFUUFUUF" + "R" * 9 + "FFDFFDFFD" + "DDBDDBDDB" + "L" * 9 + "UBBUBBUBB"
        self.assertEqual(self._facelets("R"), expected)

    def test_f_turn(self):
        expected = "UUUUUULLL" + "URRURRURR" + "F" * 9 + "RRRDDDDDD" + "LLDLLDLLD" + "B" * 9
        self.assertEqual(self._facelets("F"), expected)

    def test_whole_cube_rotation_relabels_faces(self):
        # y turns the whole cube, so F now shows the old R stickers
        expected = "U" * 9 + "B" * 9 + "R" * 9 + "D" * 9 + "F" * 9 + "L" * 9
        self.assertEqual(self._facelets("y"), expected)

    def test_face_grid(self):
        cube = GCube(3)
        cube.apply_notation("R")
        grid = cube.to_facelet_model().face_grid(Face.U)
        self.assertEqual(grid, ((Face.U, Face.U, Face.F),) * 3)

    def test_projection_does_not_mutate_cube(self):
        cube = GCube(3)
        cube.apply_notation("R U")
        before = cube.current_positions()
        cube.to_facelet_model()
        self.assertTrue(np.array_equal(before, cube.current_positions()))


class TestFaceletCodec(unittest.TestCase):
    def test_string_roundtrip(self):
        cube = GCube(4)
        cube.apply_notation("Rw U2 Fw' D L2 B")
        model = cube.to_facelet_model()
        self.assertEqual(FaceletModel.from_string(model.to_string()), model)

    def test_whitespace_is_ignored(self):
        spaced = " ".join(SOLVED_3[i:i + 9] for i in range(0, 54, 9))
        self.assertEqual(FaceletModel.from_string(spaced), FaceletModel.solved(3))

    def test_invalid_length(self):
        with self.assertRaises(FaceletValidationError):
            FaceletModel.from_string("UUU")
        with self.assertRaises(FaceletValidationError):
            FaceletModel.from_string("")

    def test_unknown_face_letter(self):
        with self.assertRaises(FaceletValidationError):
            FaceletModel.from_string("Q" + SOLVED_3[1:])

    def test_wrong_counts(self):
        with self.assertRaises(FaceletValidationError):
            FaceletModel.from_string("R" + SOLVED_3[1:])

    def test_wrong_length_for_size(self):
        with self.assertRaises(FaceletValidationError):
            FaceletModel(2, FaceletModel.solved(3).faces)


if __name__ == "__main__":
    unittest.main()
