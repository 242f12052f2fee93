import logging

import terminal_api
from cell_grid import CellGrid, Size
from position_query import query_cursor_position
from size_probe import probe_size
from terminal_channel import TerminalChannel

logger = logging.getLogger(__name__)

class TermBox:
    """
    A fixed-size grid of cells drawn onto the terminal with ANSI escape sequences.

    Cells are written with set_cell() and the whole grid is sent to the terminal
    by flush(). The session owns its TerminalChannel and must be closed with
    end() exactly once, either directly or by leaving a with block.

    Example:
        >>> with TermBox(Size(columns=12, rows=1)) as box:
        ...     for x, char in enumerate("Hello world!"):
        ...         box.set_cell(x, 0, char)
        ...     box.flush()
    """

    def __init__(self, size: Size | None = None, channel: TerminalChannel | None = None):
        """
        Args:
            size: Grid dimensions. Defaults to the terminal's size (100x50 when not attached to a terminal).
            channel: The terminal devices to draw on. Defaults to stdout/stdin.
        """
        self._channel = channel if channel is not None else TerminalChannel()

        if size is None:
            size = probe_size(self._channel)

        self._grid = CellGrid(size.columns, size.rows)
        logger.debug(f"Session started with a {size.columns}x{size.rows} grid")

    def __enter__(self) -> 'TermBox':
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        if not self._channel.released:
            self.end()

    @property
    def columns(self) -> int:
        return self._grid.columns

    @property
    def rows(self) -> int:
        return self._grid.rows

    def set_cell(self, x: int, y: int, text: str) -> None:
        self._grid.set_cell(x, y, text)

    def render(self) -> str:
        """Returns the current frame without writing it."""
        return self._grid.render()

    def flush(self) -> None:
        """Writes the full frame, preceded by a move to the origin, in a single write."""
        frame = terminal_api.move_cursor_to(0, 0) + self._grid.render()
        self._channel.write(frame)
        logger.debug(f"Flushed frame of {len(frame)} characters")

    def cursor_hide(self) -> None:
        self._channel.write(terminal_api.hide_cursor())

    def cursor_show(self) -> None:
        self._channel.write(terminal_api.show_cursor())

    def cursor_save(self) -> None:
        self._channel.write(terminal_api.save_cursor())

    def cursor_restore(self) -> None:
        self._channel.write(terminal_api.restore_cursor())

    def cursor_to(self, x: int, y: int) -> None:
        self._channel.write(terminal_api.move_cursor_to(x, y))

    def cursor_position(self) -> Size:
        """Asks the terminal where the cursor is. Blocks until the terminal answers."""
        return query_cursor_position(self._channel)

    def screen_clear(self) -> None:
        self._channel.write(terminal_api.clear_screen())

    def screen_reset(self) -> None:
        self._channel.write(terminal_api.reset_screen(self._grid.rows))

    def size(self) -> Size:
        return probe_size(self._channel)

    def end(self) -> None:
        """Releases the output channel. Calling it a second time raises ChannelReleasedError."""
        self._channel.release()
        logger.debug("Session ended")
