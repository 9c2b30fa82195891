import sys

import pytest

from wcount.errors import UndecodableFileError
from wcount.reader import FileReader


def test_reads_utf8_across_chunks(tmp_path):
    p = tmp_path / "t.txt"
    p.write_text("héllo wörld " * 50, encoding="utf-8")
    r = FileReader(chunk_size=7)
    assert r.read_text(p) == "héllo wörld " * 50


def test_buffer_is_reused(tmp_path):
    big = tmp_path / "big.txt"
    small = tmp_path / "small.txt"
    big.write_text("x" * 1000)
    small.write_text("yy")
    r = FileReader()
    buf = r._buf
    assert r.read_text(big) == "x" * 1000
    assert r.read_text(small) == "yy"
    assert r._buf is buf


def test_non_utf8(tmp_path):
    p = tmp_path / "bin.dat"
    p.write_bytes(b"ok \xff\xfe nope")
    with pytest.raises(UndecodableFileError) as ei:
        FileReader().read_text(p)
    assert ei.value.path == p
    assert isinstance(ei.value.cause, UnicodeDecodeError)
    assert isinstance(ei.value, ValueError)


def test_missing_file(tmp_path):
    with pytest.raises(OSError):
        FileReader().read_text(tmp_path / "gone.txt")


def test_buffer_keeps_capacity_after_small_file(tmp_path):
    big = tmp_path / "big.txt"
    small = tmp_path / "small.txt"
    big.write_bytes(b"w " * 1_000_000)
    small.write_bytes(b"hi")
    r = FileReader(chunk_size=64 * 1024)
    r.read_text(big)
    grown = sys.getsizeof(r._buf)
    assert grown > 2_000_000
    assert r.read_text(small) == "hi"
    assert sys.getsizeof(r._buf) >= grown
    assert r.read_text(big) == "w " * 1_000_000
    assert sys.getsizeof(r._buf) == grown


def test_empty_file(tmp_path):
    p = tmp_path / "empty.txt"
    p.write_bytes(b"")
    r = FileReader()
    assert r.read_text(tmp_path / "empty.txt") == ""
