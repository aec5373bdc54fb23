"""Test loading files into the line store."""

import os

import pytest
from kiloview.errors import OpenError
from kiloview.model import LineStore


def test_load_splits_on_newline(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_bytes(b"abc\nde\n")
    store = LineStore()
    store.load(str(path))
    assert list(store) == [b"abc", b"de"]


def test_partial_last_line_is_kept(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_bytes(b"first\nsecond")
    store = LineStore()
    store.load(str(path))
    assert store.lines == [b"first", b"second"]


def test_empty_file_has_no_lines(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_bytes(b"")
    store = LineStore()
    store.load(str(path))
    assert len(store) == 0
    assert store.is_empty


def test_blank_lines_and_carriage_returns_are_preserved(tmp_path):
    path = tmp_path / "crlf.txt"
    path.write_bytes(b"one\r\n\n\tthree\n")
    store = LineStore()
    store.load(str(path))
    assert store.lines == [b"one\r", b"", b"\tthree"]


def test_load_none_is_noop():
    store = LineStore()
    store.load(None)
    assert store.is_empty


def test_append_preserves_order():
    store = LineStore()
    store.append(b"x")
    store.append(bytearray(b"y"))
    assert store[0] == b"x"
    assert store[1] == b"y"
    assert isinstance(store[1], bytes)


def test_missing_file_raises_open_error(tmp_path):
    missing = tmp_path / "nope.txt"
    store = LineStore()
    with pytest.raises(OpenError) as excinfo:
        store.load(str(missing))
    assert excinfo.value.path == str(missing)
    assert "nope.txt" in str(excinfo.value)
    assert store.is_empty


def test_directory_raises_open_error(tmp_path):
    store = LineStore()
    with pytest.raises(OpenError):
        store.load(str(tmp_path))


@pytest.mark.skipif(os.geteuid() == 0, reason="root can read anything")
def test_unreadable_file_raises_open_error(tmp_path):
    path = tmp_path / "secret.txt"
    path.write_bytes(b"hidden\n")
    path.chmod(0)
    store = LineStore()
    with pytest.raises(OpenError):
        store.load(str(path))
