"""Frame composition for the terminal view."""

from typing import Optional

from .constants import EditorConstants, Sequences
from .model import LineStore, ViewportModel
from .version import get_banner


def welcome_row(banner: str, cols: int) -> bytes:
    """Center ``banner`` in a row ``cols`` wide, truncating it if needed.

    The first column of the left padding carries the filler marker, so the
    banner row still lines up with the empty rows around it.
    """
    text = banner.encode('utf-8')[:cols]
    padding = (cols - len(text)) // 2
    out = bytearray()
    if padding:
        out += EditorConstants.FILLER_MARKER
        padding -= 1
    out += b" " * padding
    out += text
    return bytes(out)


class Renderer:
    """Builds one output frame from a LineStore and a ViewportModel."""

    def __init__(self, store: LineStore, viewport: ViewportModel,
                 banner: Optional[str] = None):
        self.store = store
        self.viewport = viewport
        self.banner = banner if banner is not None else get_banner(EditorConstants.PRODUCT_NAME)

    def draw_rows(self) -> bytes:
        """Return the text rows of the frame, each ending in erase-to-EOL.

        There is no separator after the last row so the terminal does not
        scroll by one line.
        """
        size = self.viewport.size
        rows = []
        for i in range(size.rows):
            file_row = i + self.viewport.row_offset
            if file_row < len(self.store):
                line = self.store[file_row]
                start = self.viewport.column_offset
                row = line[start:start + size.cols]
            elif self.store.is_empty and i == size.rows // 3:
                row = welcome_row(self.banner, size.cols)
            else:
                row = EditorConstants.FILLER_MARKER
            rows.append(row + Sequences.ERASE_LINE_RIGHT)
        return EditorConstants.ROW_SEPARATOR.join(rows)

    def render_frame(self) -> bytes:
        viewport = self.viewport
        frame = bytearray()
        frame += Sequences.HIDE_CURSOR
        frame += Sequences.CURSOR_HOME
        frame += self.draw_rows()
        frame += Sequences.cursor_position(
            viewport.cursor.file_row - viewport.row_offset + 1,
            max(1, viewport.cursor.column - viewport.column_offset + 1),
        )
        frame += Sequences.SHOW_CURSOR
        return bytes(frame)

    def refresh(self, session) -> None:
        """Scroll to the cursor, then draw the frame with a single write."""
        self.viewport.recompute_scroll()
        session.write(self.render_frame())
