from __future__ import annotations

import io
import os
from collections.abc import Sequence
from typing import BinaryIO

from ._info import FileInfo
from ._typing import ReaddirResult


def _resolve_seek(cursor: int, size: int, offset: int, whence: int) -> int:
    if whence == io.SEEK_SET:
        if offset < 0:
            raise ValueError("seek offset must be >= 0 for SEEK_SET")
        new_pos = offset
    elif whence == io.SEEK_CUR:
        new_pos = cursor + offset
    elif whence == io.SEEK_END:
        new_pos = size + offset
    else:
        raise ValueError(f"Invalid whence value: {whence}. Must be 0, 1, or 2.")
    if new_pos < 0:
        raise ValueError(f"Resulting cursor position {new_pos} is negative.")
    return new_pos


class FileHandle:
    """Read-only view of a file's content returned by ``VirtualFileSystem.open``.

    The payload is immutable and owned by the tree, so ``close()`` does nothing
    and the handle stays usable without holding any lock.
    """

    def __init__(self, info: FileInfo, data: bytes) -> None:
        self._info = info
        self._data = data
        self._cursor: int = 0

    @property
    def name(self) -> str:
        return self._info.name

    def read(self, size: int = -1) -> bytes:
        length = len(self._data)
        if self._cursor >= length:
            return b""
        if size < 0:
            end = length
        else:
            end = min(self._cursor + size, length)
        chunk = self._data[self._cursor:end]
        self._cursor = end
        return chunk

    def readinto(self, buffer: bytearray | memoryview) -> int:
        chunk = self.read(len(buffer))
        n = len(chunk)
        buffer[:n] = chunk
        return n

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        self._cursor = _resolve_seek(self._cursor, len(self._data), offset, whence)
        return self._cursor

    def tell(self) -> int:
        return self._cursor

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return True

    def stat(self) -> FileInfo:
        return self._info

    def readdir(self, count: int = 0) -> ReaddirResult:
        raise io.UnsupportedOperation(f"readdir {self._info.name}: not a directory")

    def close(self) -> None:
        return None

    def __enter__(self) -> FileHandle:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<FileHandle name={self._info.name!r} pos={self._cursor}>"


class DirectoryHandle:
    """Listing of one directory taken when it was opened.

    ``entries`` is a sorted copy, so later inserts into the tree are not seen.
    The enumeration cursor belongs to this handle alone.
    """

    def __init__(self, info: FileInfo, entries: Sequence[FileInfo]) -> None:
        self._info = info
        self._entries: tuple[FileInfo, ...] = tuple(entries)
        self._pos: int = 0

    @property
    def name(self) -> str:
        return self._info.name

    def read(self, size: int = -1) -> bytes:
        raise io.UnsupportedOperation(f"read {self._info.name}: is a directory")

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        raise io.UnsupportedOperation(f"seek {self._info.name}: is a directory")

    def tell(self) -> int:
        raise io.UnsupportedOperation(f"tell {self._info.name}: is a directory")

    def readable(self) -> bool:
        return False

    def seekable(self) -> bool:
        return False

    def stat(self) -> FileInfo:
        return self._info

    def readdir(self, count: int = 0) -> ReaddirResult:
        """Return up to *count* entries from the cursor.

        ``count <= 0`` returns the whole listing no matter how far the cursor
        has moved, and leaves the cursor alone.  Otherwise the cursor advances
        by the number of entries returned; once nothing is left the result is
        empty and ``eof`` is true.
        """
        if count <= 0:
            return ReaddirResult(list(self._entries), False)
        end = min(self._pos + count, len(self._entries))
        page = list(self._entries[self._pos:end])
        self._pos = end
        return ReaddirResult(page, not page)

    def close(self) -> None:
        self._pos = 0

    def __enter__(self) -> DirectoryHandle:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"<DirectoryHandle name={self._info.name!r} "
            f"entries={len(self._entries)} pos={self._pos}>"
        )


class HostFileHandle:
    """A file on the host filesystem, opened when a lookup falls back to the OS."""

    def __init__(self, path: str, fp: BinaryIO) -> None:
        self._path = path
        self._fp = fp

    @property
    def name(self) -> str:
        return os.path.basename(self._path)

    def read(self, size: int = -1) -> bytes:
        return self._fp.read(size)

    def readinto(self, buffer: bytearray | memoryview) -> int:
        return self._fp.readinto(buffer)  # type: ignore[attr-defined]

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        return self._fp.seek(offset, whence)

    def tell(self) -> int:
        return self._fp.tell()

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return self._fp.seekable()

    def stat(self) -> FileInfo:
        return FileInfo.from_stat_result(self.name, os.fstat(self._fp.fileno()))

    def readdir(self, count: int = 0) -> ReaddirResult:
        raise io.UnsupportedOperation(f"readdir {self._path}: not a directory")

    def close(self) -> None:
        self._fp.close()

    @property
    def closed(self) -> bool:
        return self._fp.closed

    def __enter__(self) -> HostFileHandle:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<HostFileHandle path={self._path!r}>"


Handle = FileHandle | DirectoryHandle | HostFileHandle
