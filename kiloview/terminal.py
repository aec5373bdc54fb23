"""Raw-mode terminal session: termios for the mode, Blessed for the window size."""

import logging
import os
import termios
from dataclasses import dataclass
from typing import Optional

import blessed

from .constants import EditorConstants, Sequences
from .errors import CursorReportError, NotATerminal

logger = logging.getLogger(__name__)

# Indices into the list returned by termios.tcgetattr
IFLAG, OFLAG, CFLAG, LFLAG, ISPEED, OSPEED, CC = range(7)

STDIN_FILENO = 0
STDOUT_FILENO = 1


@dataclass(frozen=True)
class ScreenSize:
    rows: int
    cols: int


def parse_cursor_report(report: bytes) -> ScreenSize:
    """Parse a cursor position report of the form ``ESC [ rows ; cols R``.

    Raises:
        CursorReportError: if either field is missing, not a number, or zero.
    """
    prefix = bytes([EditorConstants.ESCAPE]) + b"["
    if not report.startswith(prefix):
        raise CursorReportError("row", report)
    separator = report.find(b";", len(prefix))
    if separator == -1:
        raise CursorReportError("row", report[len(prefix):])
    row_text = report[len(prefix):separator]
    if report.endswith(b"R"):
        col_text = report[separator + 1:-1]
    else:
        # Bound reached or the reply was cut short
        raise CursorReportError("column", report[separator + 1:])
    rows = _parse_dimension("row", row_text)
    cols = _parse_dimension("column", col_text)
    return ScreenSize(rows=rows, cols=cols)


def _parse_dimension(field: str, text: bytes) -> int:
    if not text.isdigit():
        raise CursorReportError(field, text)
    value = int(text)
    if value < 1:
        raise CursorReportError(field, text)
    return value


class TerminalSession:
    """Owns the raw terminal mode for the lifetime of the viewer.

    Use as a context manager so the original mode is restored on every
    exit path::

        with TerminalSession() as session:
            size = session.query_size()
    """

    def __init__(self, stdin_fd: int = STDIN_FILENO, stdout_fd: int = STDOUT_FILENO,
                 terminal: Optional[blessed.Terminal] = None):
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._term = terminal
        self._original_mode: Optional[list] = None

    @property
    def term(self) -> blessed.Terminal:
        if self._term is None:
            self._term = blessed.Terminal()
        return self._term

    @property
    def is_raw(self) -> bool:
        return self._original_mode is not None

    def __enter__(self) -> "TerminalSession":
        self.enter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.exit()

    def enter(self) -> None:
        """Capture the current mode and switch the terminal to raw mode."""
        if not os.isatty(self.stdin_fd):
            raise NotATerminal(EditorConstants.NOT_A_TERMINAL_MESSAGE)
        try:
            original = termios.tcgetattr(self.stdin_fd)
        except termios.error as e:
            raise NotATerminal(EditorConstants.NOT_A_TERMINAL_MESSAGE) from e

        raw = list(original)
        raw[CC] = list(original[CC])
        raw[LFLAG] &= ~(termios.ICANON | termios.ECHO | termios.ISIG | termios.IEXTEN)
        raw[IFLAG] &= ~(termios.IXON | termios.ICRNL | termios.BRKINT
                        | termios.INPCK | termios.ISTRIP)
        raw[OFLAG] &= ~termios.OPOST
        raw[CFLAG] = (raw[CFLAG] & ~termios.CSIZE) | termios.CS8
        raw[CC][termios.VMIN] = EditorConstants.READ_MIN_BYTES
        raw[CC][termios.VTIME] = EditorConstants.READ_TIMEOUT_DECISECONDS

        try:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, raw)
        except termios.error as e:
            raise OSError(*e.args) from e
        self._original_mode = original
        logger.debug("entered raw mode on fd %d", self.stdin_fd)

    def exit(self) -> None:
        """Restore the captured mode and clear the screen.

        Only the first call after a successful enter() has any effect.
        """
        if self._original_mode is None:
            return
        original, self._original_mode = self._original_mode, None
        try:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, original)
        except termios.error as e:
            raise OSError(*e.args) from e
        finally:
            try:
                self.write(Sequences.ERASE_SCREEN + Sequences.CURSOR_HOME)
            except OSError as e:
                # Output may already be gone (closed pty); the mode is restored.
                logger.warning("could not clear screen on exit: %s", e)
        logger.debug("restored terminal mode on fd %d", self.stdin_fd)

    def read_byte(self) -> Optional[int]:
        """Read one byte from standard input, or None if the read timed out."""
        data = os.read(self.stdin_fd, 1)
        if not data:
            return None
        return data[0]

    def write(self, data: bytes) -> None:
        """Write all of ``data`` to standard output."""
        view = memoryview(data)
        while view:
            written = os.write(self.stdout_fd, view)
            view = view[written:]

    def query_size(self) -> ScreenSize:
        """Return the terminal size in character cells.

        Asks the OS first and queries the cursor position only when the
        OS cannot tell.
        """
        rows, cols = self._query_window_size()
        if rows >= 1 and cols >= 1:
            logger.debug("window size from OS: %dx%d", rows, cols)
            return ScreenSize(rows=rows, cols=cols)
        logger.debug("window size query failed; asking for the cursor position")
        return self._cursor_query_size()

    def _query_window_size(self) -> tuple[int, int]:
        # Blessed falls back to $LINES/$COLUMNS when the ioctl fails, so
        # only its TTY check is used here; the size itself must be able to fail.
        if not self.term.is_a_tty:
            return 0, 0
        try:
            size = os.get_terminal_size(self.stdout_fd)
        except OSError as e:
            logger.debug("window size ioctl failed: %s", e)
            return 0, 0
        return size.lines, size.columns

    def _cursor_query_size(self) -> ScreenSize:
        # Terminals clamp cursor movement at the real edge of the screen
        self.write(Sequences.CURSOR_FAR_RIGHT + Sequences.CURSOR_FAR_DOWN
                   + Sequences.REPORT_CURSOR_POSITION)
        report = self.read_cursor_report()
        size = parse_cursor_report(report)
        logger.debug("window size from cursor report: %dx%d", size.rows, size.cols)
        return size

    def read_cursor_report(self) -> bytes:
        """Read a cursor position reply, stopping at ``R``, the size bound, or a timeout."""
        report = bytearray()
        while len(report) < EditorConstants.CURSOR_REPORT_MAX_BYTES:
            byte = self.read_byte()
            if byte is None:
                break
            report.append(byte)
            if byte == ord("R"):
                break
        return bytes(report)
