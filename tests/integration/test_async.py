import pytest
from embedfs import AsyncVirtualFileSystem, VirtualFileSystem
from tests.helpers.data import NOW, SAMPLE_ENTRIES


@pytest.fixture
def async_vfs():
    return AsyncVirtualFileSystem()


@pytest.mark.asyncio
async def test_async_add_open_read(async_vfs):
    await async_vfs.add("/data/test.bin", 17, 0o100644, NOW, b"hello async world")
    async with await async_vfs.open("data/test.bin") as f:
        assert await f.read(5) == b"hello"
        assert await f.tell() == 5
        await f.seek(0)
        assert await f.read() == b"hello async world"
        info = await f.stat()
        assert info.size == 17
        assert f.name == "test.bin"


@pytest.mark.asyncio
async def test_async_populate_and_readdir(async_vfs):
    assert await async_vfs.populate(SAMPLE_ENTRIES) == len(SAMPLE_ENTRIES)
    async with await async_vfs.open("/") as d:
        entries, eof = await d.readdir(2)
        assert [e.name for e in entries] == ["bar", "d"]
        assert not eof
        entries, eof = await d.readdir(2)
        assert [e.name for e in entries] == ["foo"]
        entries, eof = await d.readdir(2)
        assert entries == []
        assert eof


@pytest.mark.asyncio
async def test_async_queries(async_vfs):
    await async_vfs.populate(SAMPLE_ENTRIES)
    assert await async_vfs.exists("d/beta")
    assert await async_vfs.is_dir("d")
    assert await async_vfs.is_file("foo")
    assert await async_vfs.listdir("d") == ["alpha", "beta", "gamma"]
    assert (await async_vfs.stat("foo")).size == 4
    walked = await async_vfs.walk()
    assert walked[0] == ("/", ["d"], ["bar", "foo"])
    assert (await async_vfs.stats())["file_count"] == 5


@pytest.mark.asyncio
async def test_async_errors_propagate(async_vfs):
    await async_vfs.add("x", 1, 0o100644, NOW, b"x")
    with pytest.raises(FileExistsError):
        await async_vfs.add("x", 1, 0o100644, NOW, b"x")
    with pytest.raises(FileNotFoundError):
        await async_vfs.open("/missing")


@pytest.mark.asyncio
async def test_async_wraps_existing_instance():
    sync = VirtualFileSystem()
    sync.add("shared.txt", 2, 0o100644, NOW, b"ok")
    async_vfs = AsyncVirtualFileSystem(sync=sync)
    assert async_vfs.sync is sync
    async with await async_vfs.open("shared.txt") as f:
        assert await f.read() == b"ok"


def test_async_facade_validates_config():
    with pytest.raises(ValueError):
        AsyncVirtualFileSystem(max_nodes=0)
