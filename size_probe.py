import logging

from termbox_constants import FALLBACK_COLUMNS, FALLBACK_ROWS
from cell_grid import Size
from terminal_channel import TerminalChannel

logger = logging.getLogger(__name__)

def probe_size(channel: TerminalChannel) -> Size:
    """
    Returns the terminal's current size as reported by the OS.

    When stdin/stdout are not attached to a terminal, the fixed fallback size
    is returned without asking the OS. Nothing is cached; every call probes again.
    """
    if not channel.is_attached():
        logger.debug(f"Not attached to a terminal, using fallback size {FALLBACK_COLUMNS}x{FALLBACK_ROWS}")
        return Size(columns=FALLBACK_COLUMNS, rows=FALLBACK_ROWS)

    return Size(columns=channel.terminal.width, rows=channel.terminal.height)
