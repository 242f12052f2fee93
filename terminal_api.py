"""
ANSI escape sequence encoding for cursor and screen control, plus a scanner
for the CSI/OSC grammar used to measure the visible length of styled text.

Nothing in this module performs I/O; every function returns text that the
caller hands to a TerminalChannel.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Iterator

ESC = '\x1b'
CSI = ESC + '['
BEL = '\x07'
ST = ESC + '\\'

# 8-bit forms of the introducers and string terminator
C1_CSI = '\x9b'
C1_OSC = '\x9d'
C1_ST = '\x9c'

HIDE_CURSOR = CSI + '?25l'
SHOW_CURSOR = CSI + '?25h'
SAVE_CURSOR = ESC + '7'
RESTORE_CURSOR = ESC + '8'
CLEAR_SCREEN = CSI + '2J'
REQUEST_CURSOR_POSITION = CSI + '6n'


def hide_cursor() -> str:
    """Returns the sequence that hides the cursor."""
    return HIDE_CURSOR

def show_cursor() -> str:
    """Returns the sequence that shows the cursor."""
    return SHOW_CURSOR

def save_cursor() -> str:
    return SAVE_CURSOR

def restore_cursor() -> str:
    return RESTORE_CURSOR

def clear_screen() -> str:
    """Returns the sequence that erases the whole screen."""
    return CLEAR_SCREEN

def request_cursor_position() -> str:
    """Returns the Device Status Report query; the terminal answers with ESC[<rows>;<cols>R."""
    return REQUEST_CURSOR_POSITION

@lru_cache(maxsize=4096)
def move_cursor_to(x: int, y: int) -> str:
    """Returns the terminal escape sequence to move the cursor to the target position.

    Args:
        x: The column, passed through as given (terminals count from 1).
        y: The row, passed through as given (terminals count from 1).

    Returns:
        The escape sequence, row first: ESC[{y};{x}H.
    """
    return f'{CSI}{y};{x}H'

@lru_cache(maxsize=256)
def reset_screen(rows: int) -> str:
    """Returns the sequence that moves the cursor up rows - 1 lines, back to
    column 0, and erases from there to the end of the screen.

    Args:
        rows: The number of rows of the frame being reset.
    """
    return f'{CSI}{rows - 1}A\r{CSI}?0J'


@dataclass(frozen=True)
class Sequence:
    """A recognized escape sequence inside a string, spanning text[start:end]."""
    kind: str
    start: int
    end: int
    params: str = ''
    intermediates: str = ''
    final: str = ''

def _is_parameter(ch: str) -> bool:
    return '\x30' <= ch <= '\x3f'

def _is_intermediate(ch: str) -> bool:
    return '\x20' <= ch <= '\x2f'

def _is_csi_final(ch: str) -> bool:
    return '\x40' <= ch <= '\x7e'

def _is_escape_final(ch: str) -> bool:
    return '\x30' <= ch <= '\x7e'

def _scan_csi(text: str, start: int, body: int) -> Sequence | None:
    i = body
    n = len(text)

    while i < n and _is_parameter(text[i]):
        i += 1
    params_end = i

    while i < n and _is_intermediate(text[i]):
        i += 1

    if i < n and _is_csi_final(text[i]):
        return Sequence('csi', start, i + 1, text[body:params_end], text[params_end:i], text[i])

    return None

def _scan_osc(text: str, start: int, body: int) -> Sequence | None:
    i = body
    n = len(text)

    while i < n:
        ch = text[i]
        if ch == BEL or ch == C1_ST:
            return Sequence('osc', start, i + 1, params=text[body:i], final=ch)
        if ch == ESC:
            if i + 1 < n and text[i + 1] == '\\':
                return Sequence('osc', start, i + 2, params=text[body:i], final=ST)
            # a new escape starts before the string was terminated
            return None
        i += 1

    return None

def _scan_escape(text: str, start: int) -> Sequence | None:
    i = start + 1
    n = len(text)

    while i < n and _is_intermediate(text[i]):
        i += 1

    if i < n and _is_escape_final(text[i]):
        return Sequence('esc', start, i + 1, intermediates=text[start + 1:i], final=text[i])

    return None

def _scan(text: str, start: int) -> Sequence | None:
    ch = text[start]

    if ch == C1_CSI:
        return _scan_csi(text, start, start + 1)
    if ch == C1_OSC:
        return _scan_osc(text, start, start + 1)

    if start + 1 >= len(text):
        return None

    introducer = text[start + 1]
    if introducer == '[':
        return _scan_csi(text, start, start + 2)
    if introducer == ']':
        return _scan_osc(text, start, start + 2)

    return _scan_escape(text, start)

def iter_sequences(text: str) -> Iterator[Sequence]:
    """
    Yields every well-formed escape sequence found in text, left to right.

    Recognized forms:
        CSI: ESC [ (or 0x9B), parameter bytes 0x30-0x3F, intermediate bytes
             0x20-0x2F, one final byte 0x40-0x7E.
        OSC: ESC ] (or 0x9D), any payload, terminated by BEL or ST.
        ESC: ESC, intermediate bytes 0x20-0x2F, one final byte 0x30-0x7E
             (ESC 7, ESC 8, ESC ( B, ...).

    An introducer that does not complete one of these forms is skipped over and
    left in the text, so malformed sequences are never reported as recognized.
    """
    i = 0
    n = len(text)

    while i < n:
        if text[i] in (ESC, C1_CSI, C1_OSC):
            sequence = _scan(text, i)
            if sequence is not None:
                yield sequence
                i = sequence.end
                continue
        i += 1

def strip_ansi(text: str) -> str:
    """Removes every recognized escape sequence from text."""
    pieces = []
    last = 0

    for sequence in iter_sequences(text):
        pieces.append(text[last:sequence.start])
        last = sequence.end

    pieces.append(text[last:])
    return ''.join(pieces)

def visible_length(text: str) -> int:
    """Returns the number of code points left once styling is stripped."""
    return len(strip_ansi(text))
