import contextlib
import os
from unittest.mock import patch

from terminal_channel import TerminalChannel

class FakeTerminal:
    """Stands in for blessed.Terminal: records window size queries."""

    def __init__(self, width: int = 80, height: int = 24):
        self._width = width
        self._height = height
        self.size_queries = 0

    @property
    def width(self) -> int:
        self.size_queries += 1
        return self._width

    @property
    def height(self) -> int:
        self.size_queries += 1
        return self._height

class PipeTerminal:
    """
    A TerminalChannel wired to pipes instead of the real stdout/stdin.

    Pipes cannot enter raw mode, so the channel's raw_mode() is replaced by one
    that records when raw mode would be entered and left.
    """

    def __init__(self, width: int = 80, height: int = 24):
        self.terminal = FakeTerminal(width, height)
        self.events = []
        self._out_r, self._out_w = os.pipe()
        self._in_r, self._in_w = os.pipe()
        os.set_blocking(self._out_r, False)

        with patch('terminal_channel.Terminal', return_value=self.terminal):
            self.channel = TerminalChannel(output_fd=self._out_w, input_fd=self._in_r)
        self.channel.raw_mode = self._raw_mode

    @contextlib.contextmanager
    def _raw_mode(self):
        self.events.append('raw')
        try:
            yield
        finally:
            self.events.append('restore')

    def written(self) -> bytes:
        try:
            return os.read(self._out_r, 65536)
        except BlockingIOError:
            return b''

    def reply(self, data: bytes) -> None:
        os.write(self._in_w, data)

    def close(self) -> None:
        for fd in (self._out_r, self._out_w, self._in_r, self._in_w):
            os.close(fd)
