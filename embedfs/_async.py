"""Async wrapper around VirtualFileSystem.

All calls are delegated to :func:`asyncio.to_thread`, so the tree lock is
never held on the event-loop thread.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable

from ._fs import Entry, VirtualFileSystem
from ._handle import Handle
from ._info import FileInfo
from ._typing import ReaddirResult, VFSStats


class AsyncFileHandle:
    """Async wrapper for a handle returned by ``VirtualFileSystem.open``."""

    def __init__(self, _sync_handle: Handle) -> None:
        self._h = _sync_handle

    @property
    def name(self) -> str:
        return self._h.name

    async def read(self, size: int = -1) -> bytes:
        return await asyncio.to_thread(self._h.read, size)

    async def seek(self, offset: int, whence: int = 0) -> int:
        return await asyncio.to_thread(self._h.seek, offset, whence)

    async def tell(self) -> int:
        return await asyncio.to_thread(self._h.tell)

    async def readdir(self, count: int = 0) -> ReaddirResult:
        return await asyncio.to_thread(self._h.readdir, count)

    async def stat(self) -> FileInfo:
        return await asyncio.to_thread(self._h.stat)

    async def close(self) -> None:
        await asyncio.to_thread(self._h.close)

    async def __aenter__(self) -> AsyncFileHandle:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()


class AsyncVirtualFileSystem:
    """Thin async facade over :class:`VirtualFileSystem`.

    Takes the same keyword arguments.  Pass *sync* to share an existing,
    already populated instance with synchronous callers.
    """

    def __init__(
        self,
        fallback: bool = False,
        max_nodes: int | None = None,
        sync: VirtualFileSystem | None = None,
    ) -> None:
        self._sync = (
            sync if sync is not None
            else VirtualFileSystem(fallback=fallback, max_nodes=max_nodes)
        )

    @property
    def sync(self) -> VirtualFileSystem:
        return self._sync

    async def add(
        self,
        path: str,
        size: int,
        mode: int,
        mod_time: float,
        data: bytes | bytearray | memoryview | str | None,
    ) -> None:
        await asyncio.to_thread(self._sync.add, path, size, mode, mod_time, data)

    async def populate(self, entries: Iterable[Entry]) -> int:
        return await asyncio.to_thread(self._sync.populate, entries)

    async def open(self, path: str) -> AsyncFileHandle:
        h = await asyncio.to_thread(self._sync.open, path)
        return AsyncFileHandle(h)

    async def stat(self, path: str) -> FileInfo:
        return await asyncio.to_thread(self._sync.stat, path)

    async def exists(self, path: str) -> bool:
        return await asyncio.to_thread(self._sync.exists, path)

    async def is_dir(self, path: str) -> bool:
        return await asyncio.to_thread(self._sync.is_dir, path)

    async def is_file(self, path: str) -> bool:
        return await asyncio.to_thread(self._sync.is_file, path)

    async def listdir(self, path: str) -> list[str]:
        return await asyncio.to_thread(self._sync.listdir, path)

    async def walk(self, path: str = "/") -> list[tuple[str, list[str], list[str]]]:
        return await asyncio.to_thread(lambda: list(self._sync.walk(path)))

    async def stats(self) -> VFSStats:
        return await asyncio.to_thread(self._sync.stats)
