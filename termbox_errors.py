class TermBoxError(Exception):
    """Base class for every error raised by the library."""


class InvalidDimensions(TermBoxError, ValueError):
    """Raised when a grid is constructed with a negative size."""

    def __init__(self, columns: int, rows: int):
        super().__init__(f"Invalid grid dimensions {columns}x{rows}: columns and rows must be >= 0.")
        self.columns = columns
        self.rows = rows


class InvalidCellContent(TermBoxError, ValueError):
    """Raised when a cell is given more than one visible character."""

    def __init__(self, text: str, length: int):
        super().__init__(f"Cell text {text!r} has a visible length of {length}, expected at most 1.")
        self.text = text
        self.length = length


class PositionParseError(TermBoxError, ValueError):
    """Raised when the terminal's reply to a cursor position request cannot be parsed."""

    def __init__(self, reply: bytes):
        super().__init__(f"Cannot get cursor position from terminal reply {reply!r}.")
        self.reply = reply


class ChannelReleasedError(TermBoxError, RuntimeError):
    """Raised when the output channel is used after it has been released."""
