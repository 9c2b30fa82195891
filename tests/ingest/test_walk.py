import os

import pytest

from wcount.errors import RootNotADirectoryError
from wcount.walk import walk_files


def test_walks_nested_dirs(tmp_path):
    (tmp_path / "a" / "b").mkdir(parents=True)
    (tmp_path / "top.txt").write_text("x")
    (tmp_path / "a" / "mid.txt").write_text("x")
    (tmp_path / "a" / "b" / "deep.txt").write_text("x")
    found = sorted(p.relative_to(tmp_path).as_posix() for p in walk_files(tmp_path))
    assert found == ["a/b/deep.txt", "a/mid.txt", "top.txt"]


def test_breadth_first(tmp_path):
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "inner.txt").write_text("x")
    (tmp_path / "outer.txt").write_text("x")
    names = [p.name for p in walk_files(tmp_path)]
    assert names == ["outer.txt", "inner.txt"]


def test_follows_symlinks(tmp_path):
    real = tmp_path / "real"
    real.mkdir()
    (real / "f.txt").write_text("x")
    scan_root = tmp_path / "root"
    scan_root.mkdir()
    os.symlink(real, scan_root / "linked_dir")
    os.symlink(real / "f.txt", scan_root / "linked_file.txt")
    found = sorted(p.relative_to(scan_root).as_posix() for p in walk_files(scan_root))
    assert found == ["linked_dir/f.txt", "linked_file.txt"]


def test_dangling_symlink_warns_and_skips(tmp_path, caplog):
    (tmp_path / "ok.txt").write_text("x")
    os.symlink(tmp_path / "missing", tmp_path / "dangling")
    found = [p.name for p in walk_files(tmp_path)]
    assert found == ["ok.txt"]
    assert "dangling" in caplog.text


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="needs mkfifo")
def test_fifo_is_skipped(tmp_path, caplog):
    os.mkfifo(tmp_path / "pipe")
    assert list(walk_files(tmp_path)) == []
    assert "not a file, directory, or symlink" in caplog.text


def test_root_must_be_a_directory(tmp_path):
    f = tmp_path / "file.txt"
    f.write_text("x")
    with pytest.raises(RootNotADirectoryError):
        walk_files(f)
    with pytest.raises(NotADirectoryError):
        walk_files(tmp_path / "nope")
