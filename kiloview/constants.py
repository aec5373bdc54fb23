"""Constants and configuration for the kiloview viewer."""


def ctrl_key(char: str) -> int:
    """Return the byte a terminal sends for Ctrl+<char>."""
    return ord(char) & 0x1f


class EditorConstants:
    """Central configuration constants for the viewer."""

    # Product identity (welcome banner)
    PRODUCT_NAME = "Kiloview"

    # Keyboard timing
    READ_TIMEOUT_DECISECONDS = 1  # VTIME: read() returns empty after 100 ms
    READ_MIN_BYTES = 0  # VMIN: read() may return without any byte

    # Window size from the cursor position report
    CURSOR_REPORT_MAX_BYTES = 32  # Upper bound on an ESC[<r>;<c>R reply

    # Key bytes
    ESCAPE = 0x1b
    QUIT_KEY = ctrl_key('q')
    NEUTRAL_KEY = 0  # Read timed out; nothing to do this tick

    # Rendering
    FILLER_MARKER = b"~"  # Rows past the end of the buffer
    ROW_SEPARATOR = b"\r\n"  # OPOST is off, so CR must be sent explicitly

    # Status messages
    NOT_A_TERMINAL_MESSAGE = "Not a terminal"


class Sequences:
    """VT100 control sequences written to standard output."""

    ERASE_SCREEN = b"\x1b[2J"
    CURSOR_HOME = b"\x1b[H"
    ERASE_LINE_RIGHT = b"\x1b[K"
    HIDE_CURSOR = b"\x1b[?25l"
    SHOW_CURSOR = b"\x1b[?25h"
    CURSOR_FAR_RIGHT = b"\x1b[999C"
    CURSOR_FAR_DOWN = b"\x1b[999B"
    REPORT_CURSOR_POSITION = b"\x1b[6n"

    @staticmethod
    def cursor_position(row: int, col: int) -> bytes:
        """Move the cursor to a 1-based (row, col)."""
        return b"\x1b[%d;%dH" % (row, col)
