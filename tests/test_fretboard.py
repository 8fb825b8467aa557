import unittest

from guitar_dashboard.errors import DomainError, ParseError
from guitar_dashboard.fretboard import (
    MARKED_FRETS,
    STANDARD_TUNING,
    TUNINGS,
    PositionSequence,
    enumerate_positions,
    fret_cell,
    get_tuning,
    is_fret_marked,
    iter_cells,
    position_in_scale,
    position_pitch,
)
from guitar_dashboard.note_types import FretboardPosition, Key, Note, Scale, ScaleType


class TestPositionPitch(unittest.TestCase):
    def test_open_string_is_tuning_note(self):
        self.assertEqual(
            position_pitch(STANDARD_TUNING, FretboardPosition(0, 0)), STANDARD_TUNING[0]
        )
        self.assertEqual(
            position_pitch(STANDARD_TUNING, FretboardPosition(5, 0)), Note(Key.E, 4)
        )

    def test_twelfth_fret_is_one_octave_up(self):
        self.assertEqual(
            position_pitch(STANDARD_TUNING, FretboardPosition(0, 12)), Note(Key.E, 3)
        )

    def test_fret_crosses_octave_boundary(self):
        # B3 string, first fret
        self.assertEqual(
            position_pitch(STANDARD_TUNING, FretboardPosition(4, 1)), Note(Key.C, 4)
        )
        self.assertEqual(
            position_pitch(STANDARD_TUNING, FretboardPosition(1, 3)), Note(Key.C, 3)
        )

    def test_unison_between_strings(self):
        # Fifth fret of each string matches the next open string, except G to B
        for string in [0, 1, 2, 4]:
            with self.subTest(string=string):
                self.assertEqual(
                    position_pitch(STANDARD_TUNING, FretboardPosition(string, 5)),
                    STANDARD_TUNING[string + 1],
                )
        self.assertEqual(
            position_pitch(STANDARD_TUNING, FretboardPosition(3, 4)), STANDARD_TUNING[4]
        )

    def test_string_index_out_of_range(self):
        for string in [6, 100, -1, -6]:
            with self.subTest(string=string):
                with self.assertRaises(DomainError):
                    position_pitch(STANDARD_TUNING, FretboardPosition(string, 0))

    def test_domain_error_is_index_error(self):
        with self.assertRaises(IndexError):
            position_pitch(STANDARD_TUNING, FretboardPosition(6, 0))

    def test_negative_fret(self):
        with self.assertRaises(DomainError):
            position_pitch(STANDARD_TUNING, FretboardPosition(0, -1))

    def test_empty_tuning(self):
        with self.assertRaises(DomainError):
            position_pitch((), FretboardPosition(0, 0))

    def test_large_fret_numbers(self):
        self.assertEqual(
            position_pitch(STANDARD_TUNING, FretboardPosition(0, 48)), Note(Key.E, 6)
        )


class TestPositionInScale(unittest.TestCase):
    def test_c_major_on_low_e(self):
        c_major = Scale(Key.C, ScaleType.MAJOR)
        in_scale = [
            fret
            for fret in range(13)
            if position_in_scale(FretboardPosition(0, fret), STANDARD_TUNING, c_major)
        ]
        # E F G A B C D E
        self.assertEqual(in_scale, [0, 1, 3, 5, 7, 8, 10, 12])

    def test_octave_is_irrelevant(self):
        scale = Scale(Key.E, ScaleType.MINOR_PENTATONIC)
        for string in range(6):
            self.assertEqual(
                position_in_scale(FretboardPosition(string, 0), STANDARD_TUNING, scale),
                position_in_scale(FretboardPosition(string, 12), STANDARD_TUNING, scale),
            )

    def test_out_of_range_string(self):
        with self.assertRaises(DomainError):
            position_in_scale(
                FretboardPosition(7, 0), STANDARD_TUNING, Scale(Key.C, ScaleType.MAJOR)
            )


class TestEnumeratePositions(unittest.TestCase):
    def test_standard_tuning_twelve_frets(self):
        positions = list(enumerate_positions(STANDARD_TUNING, 12))
        self.assertEqual(len(positions), 78)
        self.assertEqual(positions[0], FretboardPosition(0, 0))
        self.assertEqual(positions[12], FretboardPosition(0, 12))
        self.assertEqual(positions[13], FretboardPosition(1, 0))
        self.assertEqual(positions[-1], FretboardPosition(5, 12))

    def test_ordering_is_string_major_fret_ascending(self):
        positions = list(enumerate_positions(STANDARD_TUNING, 12))
        keys = [(p.string, p.fret) for p in positions]
        self.assertEqual(keys, sorted(keys))

    def test_restartable(self):
        sequence = enumerate_positions(STANDARD_TUNING, 12)
        self.assertEqual(list(sequence), list(sequence))
        self.assertEqual(len(sequence), 78)

    def test_lazy_for_large_boards(self):
        tuning = [Note(Key.E, 2)] * 1000
        sequence = enumerate_positions(tuning, 10_000)
        self.assertEqual(len(sequence), 1000 * 10_001)
        iterator = iter(sequence)
        self.assertEqual(next(iterator), FretboardPosition(0, 0))
        self.assertEqual(next(iterator), FretboardPosition(0, 1))

    def test_size_beyond_len_limit(self):
        sequence = PositionSequence(10**10, 10**10)
        self.assertEqual(sequence.size, 10**10 * (10**10 + 1))
        with self.assertRaises(OverflowError):
            len(sequence)
        self.assertEqual(next(iter(sequence)), FretboardPosition(0, 0))
        self.assertIn(FretboardPosition(10**10 - 1, 10**10), sequence)

    def test_containment(self):
        sequence = enumerate_positions(STANDARD_TUNING, 5)
        self.assertIn(FretboardPosition(5, 5), sequence)
        self.assertNotIn(FretboardPosition(5, 6), sequence)
        self.assertNotIn(FretboardPosition(-1, 0), sequence)

    def test_zero_frets_and_empty_tuning(self):
        self.assertEqual(len(list(enumerate_positions(STANDARD_TUNING, 0))), 6)
        self.assertEqual(list(enumerate_positions((), 12)), [])

    def test_negative_fret_count(self):
        with self.assertRaises(DomainError):
            enumerate_positions(STANDARD_TUNING, -1)


class TestCells(unittest.TestCase):
    def setUp(self):
        self.scale = Scale(Key.A, ScaleType.MINOR_PENTATONIC)

    def test_fret_cell(self):
        cell = fret_cell(STANDARD_TUNING, FretboardPosition(0, 5), self.scale)
        self.assertEqual(cell.note, Note(Key.A, 2))
        self.assertTrue(cell.in_scale)
        self.assertTrue(cell.is_root)
        self.assertTrue(cell.is_marked)

        cell = fret_cell(STANDARD_TUNING, FretboardPosition(0, 6), self.scale)
        self.assertFalse(cell.in_scale)
        self.assertFalse(cell.is_root)
        self.assertFalse(cell.is_marked)

    def test_iter_cells_follows_enumeration(self):
        cells = list(iter_cells(STANDARD_TUNING, self.scale, 12))
        self.assertEqual(
            [cell.position for cell in cells],
            list(enumerate_positions(STANDARD_TUNING, 12)),
        )
        for cell in cells:
            self.assertEqual(cell.note, position_pitch(STANDARD_TUNING, cell.position))
            self.assertEqual(
                cell.in_scale,
                position_in_scale(cell.position, STANDARD_TUNING, self.scale),
            )

    def test_iter_cells_is_a_fresh_pass_each_call(self):
        first = list(iter_cells(STANDARD_TUNING, self.scale, 3))
        other = list(iter_cells(STANDARD_TUNING, Scale(Key.C, ScaleType.MAJOR), 3))
        self.assertEqual(len(first), len(other))
        self.assertNotEqual(
            [c.in_scale for c in first], [c.in_scale for c in other]
        )


class TestMarkersAndTunings(unittest.TestCase):
    def test_marked_frets(self):
        self.assertEqual(
            sorted(MARKED_FRETS), [3, 5, 7, 9, 12, 15, 17, 19, 21, 24]
        )
        self.assertFalse(is_fret_marked(0))
        self.assertFalse(is_fret_marked(4))
        self.assertTrue(is_fret_marked(27))
        self.assertTrue(is_fret_marked(36))
        self.assertFalse(is_fret_marked(26))

    def test_named_tunings(self):
        self.assertEqual(get_tuning("standard"), STANDARD_TUNING)
        self.assertEqual(get_tuning("Drop D")[0], Note(Key.D, 2))
        self.assertEqual(get_tuning("drop-c")[0], Note(Key.C, 2))
        self.assertEqual(get_tuning("half_step_down")[0], Note(Key.D_SHARP, 2))
        self.assertEqual(len(get_tuning("bass_standard")), 4)

    def test_tunings_are_low_to_high(self):
        for name, tuning in TUNINGS.items():
            with self.subTest(tuning=name):
                self.assertEqual(tuning[0], min(tuning))

    def test_unknown_tuning(self):
        with self.assertRaises(ParseError):
            get_tuning("banjo")


if __name__ == "__main__":
    unittest.main()
