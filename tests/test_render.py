"""Test frame rendering."""

from unittest.mock import Mock

from kiloview.constants import Sequences
from kiloview.model import LineStore, ViewportModel
from kiloview.terminal import ScreenSize
from kiloview.view import Renderer, welcome_row

EL = b"\x1b[K"
BANNER = "Kiloview -- version 1.2.3"


def make_renderer(lines, rows, cols, banner=BANNER):
    store = LineStore(lines)
    viewport = ViewportModel(store, ScreenSize(rows=rows, cols=cols))
    return Renderer(store, viewport, banner=banner)


def test_rows_for_short_file():
    r = make_renderer([b"abc", b"de"], rows=5, cols=10)
    rows = r.draw_rows().split(b"\r\n")
    assert rows == [b"abc" + EL, b"de" + EL, b"~" + EL, b"~" + EL, b"~" + EL]


def test_no_line_break_after_last_row():
    r = make_renderer([b"abc", b"de"], rows=5, cols=10)
    out = r.draw_rows()
    assert out.count(b"\r\n") == 4
    assert out.endswith(b"~" + EL)


def test_full_frame_layout():
    r = make_renderer([b"abc", b"de"], rows=5, cols=10)
    frame = r.render_frame()
    expected = (
        b"\x1b[?25l"
        b"\x1b[H"
        b"abc\x1b[K\r\nde\x1b[K\r\n~\x1b[K\r\n~\x1b[K\r\n~\x1b[K"
        b"\x1b[1;1H"
        b"\x1b[?25h"
    )
    assert frame == expected


def test_long_lines_are_cut_at_screen_width():
    r = make_renderer([b"0123456789abcdef"], rows=2, cols=10)
    rows = r.draw_rows().split(b"\r\n")
    assert rows[0] == b"0123456789" + EL


def test_column_offset_slices_lines():
    r = make_renderer([b"0123456789abcdef", b"xy"], rows=2, cols=4)
    r.viewport.set_column_offset(3)
    rows = r.draw_rows().split(b"\r\n")
    assert rows[0] == b"3456" + EL
    # Offset past the end of the line leaves the row blank
    assert rows[1] == EL


def test_control_bytes_are_written_verbatim():
    r = make_renderer([b"a\tb\x07"], rows=1, cols=10)
    assert r.draw_rows() == b"a\tb\x07" + EL


def test_row_offset_selects_visible_lines():
    lines = [f"L{i}".encode() for i in range(10)]
    r = make_renderer(lines, rows=3, cols=10)
    r.viewport.cursor.file_row = 7
    r.viewport.recompute_scroll()
    rows = r.draw_rows().split(b"\r\n")
    assert rows == [b"L5" + EL, b"L6" + EL, b"L7" + EL]
    assert b"\x1b[3;1H" in r.render_frame()


def test_cursor_placement_is_one_based_and_relative():
    lines = [b"x" * 20 for _ in range(10)]
    r = make_renderer(lines, rows=4, cols=20)
    r.viewport.cursor.file_row = 6
    r.viewport.cursor.column = 9
    r.viewport.recompute_scroll()
    frame = r.render_frame()
    assert frame.endswith(Sequences.cursor_position(4, 10) + b"\x1b[?25h")


def test_banner_only_on_empty_buffer():
    r = make_renderer([b"abc"], rows=6, cols=40)
    assert BANNER.encode() not in r.draw_rows()


def test_banner_row_is_a_third_down():
    r = make_renderer([], rows=9, cols=40)
    rows = r.draw_rows().split(b"\r\n")
    assert len(rows) == 9
    for i, row in enumerate(rows):
        if i == 3:
            assert BANNER.encode() in row
        else:
            assert row == b"~" + EL


def test_banner_centers_for_40_columns():
    row = welcome_row(BANNER, 40)
    # 25 bytes of banner leave 15 columns; 7 go on the left
    assert row == b"~" + b" " * 6 + BANNER.encode()
    assert len(row) == 7 + len(BANNER)


def test_banner_truncates_on_narrow_screen():
    row = welcome_row(BANNER, 10)
    assert row == BANNER.encode()[:10]
    assert len(row) == 10


def test_banner_with_one_column_of_slack_has_no_marker():
    row = welcome_row(BANNER, len(BANNER) + 1)
    assert row == BANNER.encode()


def test_refresh_scrolls_then_writes_once():
    lines = [f"L{i}".encode() for i in range(10)]
    r = make_renderer(lines, rows=3, cols=10)
    r.viewport.cursor.file_row = 9
    session = Mock()
    r.refresh(session)
    assert r.viewport.row_offset == 7
    session.write.assert_called_once()
    frame = session.write.call_args[0][0]
    assert frame.startswith(b"\x1b[?25l\x1b[H")
    assert frame.endswith(b"\x1b[?25h")


def test_default_banner_uses_product_name():
    store = LineStore()
    viewport = ViewportModel(store, ScreenSize(rows=3, cols=80))
    r = Renderer(store, viewport)
    assert r.banner.startswith("Kiloview -- version ")


def test_cursor_column_never_below_one():
    r = make_renderer([b"0123456789"], rows=2, cols=10)
    r.viewport.cursor.column = 2
    r.viewport.set_column_offset(5)
    assert Sequences.cursor_position(1, 1) in r.render_frame()
