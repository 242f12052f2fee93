import contextlib
import logging
import os
import sys
from typing import Iterator

from blessed import Terminal

from termbox_constants import OUTPUT_ENCODING
from termbox_errors import ChannelReleasedError

try:
    import termios
    import tty
    HAS_TTY = True
except ImportError:
    HAS_TTY = False

logger = logging.getLogger(__name__)

def enable_utf8_console() -> None:
    """Switches the Windows console to the UTF-8 code page; a no-op elsewhere."""
    if os.name == 'nt':
        os.system('chcp 65001 >nul')

def write_all(fd: int, data: bytes) -> None:
    """
    Robustly write all data to a file descriptor, handling partial writes.
    """
    view = memoryview(data)
    while view:
        # os.write returns the number of bytes actually written
        bytes_written = os.write(fd, view)
        if not bytes_written:
            raise OSError(f"Write to descriptor {fd} made no progress, {len(view)} bytes left unwritten.")
        view = view[bytes_written:]

class TerminalChannel:
    """
    The single owner of a session's terminal devices.

    Output is a sequential byte sink: every component writes through write(),
    which encodes to UTF-8. The sink is released exactly once, after which any
    write is a programming error. Input is read with read(), normally inside
    raw_mode() so the terminal's reply arrives unbuffered and unechoed.

    The blessed Terminal is bound to the output descriptor, so the window size
    it reports is the size of the device frames are written to.
    """

    def __init__(self, output_fd: int | None = None, input_fd: int | None = None):
        """
        Args:
            output_fd: Descriptor frames and escape sequences are written to. Defaults to stdout.
            input_fd: Descriptor terminal replies are read from. Defaults to stdin.
        """
        if output_fd is None:
            self._stream = sys.__stdout__
            output_fd = self._stream.fileno()
        else:
            self._stream = os.fdopen(output_fd, 'w', encoding=OUTPUT_ENCODING, closefd=False)

        self._output_fd = output_fd
        self._input_fd = input_fd if input_fd is not None else sys.__stdin__.fileno()
        self._released = False

        enable_utf8_console()
        self.terminal = Terminal(stream=self._stream)

    @property
    def released(self) -> bool:
        return self._released

    def is_attached(self) -> bool:
        """Whether both the output and the input descriptor are terminals. Queried on every call."""
        return os.isatty(self._output_fd) and os.isatty(self._input_fd)

    def write(self, text: str) -> None:
        if self._released:
            raise ChannelReleasedError("Cannot write to a terminal channel after it has been released.")

        write_all(self._output_fd, text.encode(OUTPUT_ENCODING))

    def read(self, size: int) -> bytes:
        """Performs a single blocking read of at most size bytes. There is no timeout."""
        return os.read(self._input_fd, size)

    @contextlib.contextmanager
    def raw_mode(self) -> Iterator[None]:
        """
        Puts the input descriptor into raw mode for the duration of the block,
        restoring its previous mode on every exit path. Does nothing when the
        input is not a terminal.
        """
        if not (HAS_TTY and os.isatty(self._input_fd)):
            yield
            return

        save_mode = termios.tcgetattr(self._input_fd)
        tty.setraw(self._input_fd, termios.TCSANOW)
        logger.debug("Input switched to raw mode")
        try:
            yield
        finally:
            termios.tcsetattr(self._input_fd, termios.TCSAFLUSH, save_mode)
            logger.debug("Input restored from raw mode")

    def release(self) -> None:
        if self._released:
            raise ChannelReleasedError("Terminal channel has already been released.")

        self._released = True
        logger.debug("Terminal channel released")
