import unittest

from cell_grid import CellGrid, Size
from termbox_errors import InvalidCellContent, InvalidDimensions

class TestCellGrid(unittest.TestCase):

    def setUp(self):
        self.grid = CellGrid(4, 3)

    def test_initialized_with_spaces(self):
        self.assertEqual(self.grid.render(), '    \n    \n    ')
        self.assertEqual(self.grid.size, Size(columns=4, rows=3))

    def test_negative_dimensions_rejected(self):
        with self.assertRaises(InvalidDimensions):
            CellGrid(-1, 3)
        with self.assertRaises(InvalidDimensions):
            CellGrid(3, -1)

    def test_empty_grid(self):
        self.assertEqual(CellGrid(0, 0).render(), '')
        self.assertEqual(CellGrid(0, 2).render(), '\n')

    def test_set_cell_in_bounds(self):
        for y in range(3):
            for x in range(4):
                grid = CellGrid(4, 3)
                grid.set_cell(x, y, '#')

                lines = grid.render().split('\n')
                self.assertEqual(lines[y][x], '#')
                self.assertEqual(grid.get_cell(x, y), '#')

    def test_set_cell_out_of_bounds_is_ignored(self):
        self.grid.set_cell(1, 1, 'a')
        before = self.grid.render()

        for x, y in [(-1, 0), (0, -1), (4, 0), (0, 3), (100, 100), (-5, -5)]:
            self.grid.set_cell(x, y, 'z')

        self.assertEqual(self.grid.render(), before)
        self.assertIsNone(self.grid.get_cell(4, 0))

    def test_set_cell_rejects_multiple_characters(self):
        self.grid.set_cell(0, 0, 'a')
        before = self.grid.render()

        for text in ['ab', 'Hello world!', '\x1b[31mab\x1b[0m']:
            with self.assertRaises(InvalidCellContent):
                self.grid.set_cell(0, 0, text)

        self.assertEqual(self.grid.render(), before)

    def test_out_of_bounds_check_comes_before_content_check(self):
        self.grid.set_cell(10, 10, 'too long')

    def test_styled_cell_stored_verbatim(self):
        styled = '\x1b[31mA\x1b[0m'
        self.grid.set_cell(2, 0, styled)

        self.assertEqual(self.grid.get_cell(2, 0), styled)
        self.assertEqual(self.grid.render().split('\n')[0], '  ' + styled + ' ')

    def test_empty_text_allowed(self):
        self.grid.set_cell(0, 0, '')
        self.assertEqual(self.grid.render().split('\n')[0], '   ')

if __name__ == '__main__':
    unittest.main()
