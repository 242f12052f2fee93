from dataclasses import dataclass

from termbox_constants import BLANK_CELL
from termbox_errors import InvalidCellContent, InvalidDimensions
from terminal_api import visible_length

@dataclass(frozen=True)
class Size:
    columns: int
    rows: int

class CellGrid:
    def __init__(self, columns: int, rows: int):
        if columns < 0 or rows < 0:
            raise InvalidDimensions(columns, rows)

        self._columns = columns
        self._rows = rows
        self._buffer: list[list[str]] = [[BLANK_CELL] * columns for _ in range(rows)]

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def size(self) -> Size:
        return Size(columns=self._columns, rows=self._rows)

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self._columns and 0 <= y < self._rows

    def set_cell(self, x: int, y: int, text: str) -> None:
        """
        Stores text in the cell at (x, y), styling codes included.

        Writes outside the grid are discarded without error. Raises
        InvalidCellContent, leaving the grid untouched, when text has more
        than one visible character once escape sequences are stripped.
        """
        if not self.contains(x, y):
            return

        length = visible_length(text)
        if length > 1:
            raise InvalidCellContent(text, length)

        self._buffer[y][x] = text

    def get_cell(self, x: int, y: int) -> str | None:
        """Returns the text stored at (x, y), or None outside the grid."""
        if not self.contains(x, y):
            return None

        return self._buffer[y][x]

    def render(self) -> str:
        """
        Flattens the whole grid into one string: each row's cells in column
        order, rows top to bottom joined by newlines.
        """
        return '\n'.join(''.join(row) for row in self._buffer)
