"""
Cursor position query: the only exchange in which the terminal answers back.

The request is written, input is switched to raw mode, a single blocking read
collects the reply and raw mode is reverted before the reply is parsed. The
read has no timeout, so a terminal that never answers blocks the caller.
"""

import logging

from termbox_constants import OUTPUT_ENCODING, READ_BUFFER_SIZE
from cell_grid import Size
from termbox_errors import PositionParseError
from terminal_api import iter_sequences, request_cursor_position
from terminal_channel import TerminalChannel

logger = logging.getLogger(__name__)

def parse_cursor_position(reply: bytes) -> Size:
    """
    Extracts the cursor position from a terminal reply of the form ESC[<rows>;<cols>R.

    Args:
        reply: The raw bytes read from the terminal.

    Returns:
        The position as a Size, columns and rows as reported (1-indexed).

    Raises:
        PositionParseError: No cursor position report was found in the reply.
    """
    text = reply.decode(OUTPUT_ENCODING, errors='replace')

    for sequence in iter_sequences(text):
        if sequence.kind != 'csi' or sequence.final != 'R' or sequence.intermediates:
            continue

        fields = sequence.params.split(';')
        if len(fields) == 2 and all(field.isdigit() for field in fields):
            rows, columns = int(fields[0]), int(fields[1])
            return Size(columns=columns, rows=rows)

    raise PositionParseError(reply)

def query_cursor_position(channel: TerminalChannel, buffer_size: int = READ_BUFFER_SIZE) -> Size:
    if not channel.is_attached():
        return Size(columns=0, rows=0)

    channel.write(request_cursor_position())

    with channel.raw_mode():
        reply = channel.read(buffer_size)

    logger.debug(f"Cursor position reply: {reply!r}")
    return parse_cursor_position(reply)
