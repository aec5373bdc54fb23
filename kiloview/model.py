import logging
from dataclasses import dataclass
from typing import Iterator, Optional

from .errors import OpenError
from .keyboard import SpecialKey
from .terminal import ScreenSize

logger = logging.getLogger(__name__)


@dataclass
class CursorPosition:
    column: int = 0
    file_row: int = 0


class LineStore:
    """The loaded file as an ordered list of byte lines, newlines stripped."""

    def __init__(self, lines: Optional[list[bytes]] = None):
        self.lines: list[bytes] = list(lines) if lines else []

    def __len__(self) -> int:
        return len(self.lines)

    def __getitem__(self, index: int) -> bytes:
        return self.lines[index]

    def __iter__(self) -> Iterator[bytes]:
        return iter(self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def append(self, line: bytes) -> None:
        self.lines.append(bytes(line))

    def load(self, path: Optional[str]) -> None:
        """Append every line of ``path``; a partial last line is kept.

        Raises:
            OpenError: if the file does not exist or cannot be read.
        """
        if path is None:
            return
        try:
            with open(path, 'rb') as f:
                for chunk in f:
                    if chunk.endswith(b'\n'):
                        chunk = chunk[:-1]
                    self.append(chunk)
        except OSError as e:
            raise OpenError(path, e.strerror or str(e)) from e
        logger.debug("loaded %d lines from %s", len(self.lines), path)


class ViewportModel:
    """Cursor cell and scroll offsets over a LineStore.

    The cursor column is clamped to the screen, not to the line it is on.
    """

    def __init__(self, store: LineStore, size: ScreenSize):
        self.store = store
        self.size = size
        self.cursor = CursorPosition()
        self.row_offset = 0
        self.column_offset = 0

    def recompute_scroll(self) -> None:
        """Scroll just enough to put the cursor row on screen."""
        if self.cursor.file_row < self.row_offset:
            self.row_offset = self.cursor.file_row
        if self.cursor.file_row >= self.row_offset + self.size.rows:
            self.row_offset = self.cursor.file_row - self.size.rows + 1

    def set_column_offset(self, column_offset: int) -> None:
        # Nothing scrolls horizontally yet
        self.column_offset = max(0, column_offset)

    def move_cursor(self, key: SpecialKey) -> None:
        cursor = self.cursor
        if key == SpecialKey.UP:
            if cursor.file_row > 0:
                cursor.file_row -= 1
        elif key == SpecialKey.DOWN:
            if cursor.file_row < len(self.store):
                cursor.file_row += 1
        elif key == SpecialKey.LEFT:
            if cursor.column > 0:
                cursor.column -= 1
        elif key == SpecialKey.RIGHT:
            if cursor.column < self.size.cols - 1:
                cursor.column += 1

    def page(self, key: SpecialKey) -> None:
        """Move a full screen up or down, one row at a time."""
        step = SpecialKey.UP if key == SpecialKey.PAGE_UP else SpecialKey.DOWN
        for _ in range(self.size.rows):
            self.move_cursor(step)

    def home(self) -> None:
        self.cursor.column = 0

    def end(self) -> None:
        self.cursor.column = self.size.cols - 1
