import pytest
from embedfs import VirtualFileSystem
from tests.helpers.asserts import assert_stats_consistent
from tests.helpers.data import NOW


def test_stat_file_and_dir(populated):
    info = populated.stat("/d/beta")
    assert info.name == "beta"
    assert info.size == 8
    assert populated.stat("d").is_dir
    assert populated.stat("/").name == ""
    assert populated.stat("/").is_dir


def test_stat_missing(populated):
    with pytest.raises(FileNotFoundError):
        populated.stat("/nope")


def test_stat_never_falls_back(tmp_path, monkeypatch):
    (tmp_path / "host.txt").write_bytes(b"x")
    monkeypatch.chdir(tmp_path)
    vfs = VirtualFileSystem(fallback=True)
    assert not vfs.exists("host.txt")
    with pytest.raises(FileNotFoundError):
        vfs.stat("host.txt")


def test_exists_is_dir_is_file(populated):
    assert populated.exists("/")
    assert populated.exists("d/alpha")
    assert not populated.exists("d/omega")
    assert populated.is_dir("d")
    assert not populated.is_dir("foo")
    assert populated.is_file("foo")
    assert not populated.is_file("d")
    assert not populated.is_file("missing")


def test_listdir_sorted(populated):
    assert populated.listdir("/") == ["bar", "d", "foo"]
    assert populated.listdir("./d") == ["alpha", "beta", "gamma"]


def test_listdir_errors(populated):
    with pytest.raises(FileNotFoundError):
        populated.listdir("/nope")
    with pytest.raises(NotADirectoryError):
        populated.listdir("/foo")


def test_walk_top_down(populated):
    populated.add("d/sub/leaf", 1, 0o100644, NOW, b"l")
    assert list(populated.walk()) == [
        ("/", ["d"], ["bar", "foo"]),
        ("/d", ["sub"], ["alpha", "beta", "gamma"]),
        ("/d/sub", [], ["leaf"]),
    ]


def test_walk_subtree(populated):
    assert list(populated.walk("d/")) == [("/d", [], ["alpha", "beta", "gamma"])]


def test_walk_errors(populated):
    with pytest.raises(NotADirectoryError):
        list(populated.walk("foo"))
    with pytest.raises(FileNotFoundError):
        list(populated.walk("nope"))


def test_stats_counts(populated):
    s = populated.stats()
    assert s["file_count"] == 5
    assert s["dir_count"] == 2
    assert s["total_bytes"] == 4 + 8 * 4
    assert s["node_limit"] is None
    assert_stats_consistent(populated)


def test_stats_empty(vfs):
    assert vfs.stats() == {"file_count": 0, "dir_count": 1, "total_bytes": 0, "node_limit": None}
