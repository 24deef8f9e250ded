from typing import TYPE_CHECKING

from ._exceptions import (
    VFSFallbackError,
    VFSFallbackNotFoundError,
    VFSNodeLimitExceededError,
    VFSNotADirectoryError,
)
from ._fs import VirtualFileSystem
from ._handle import DirectoryHandle, FileHandle, HostFileHandle
from ._info import FileInfo
from ._path import normalize_path
from ._text import TextReader
from ._typing import ReaddirResult, VFSStats

if TYPE_CHECKING:
    from ._async import AsyncFileHandle, AsyncVirtualFileSystem


def __getattr__(name: str):  # type: ignore[no-untyped-def]
    if name in ("AsyncVirtualFileSystem", "AsyncFileHandle"):
        from ._async import AsyncFileHandle, AsyncVirtualFileSystem

        globals()["AsyncVirtualFileSystem"] = AsyncVirtualFileSystem
        globals()["AsyncFileHandle"] = AsyncFileHandle
        return globals()[name]
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "VirtualFileSystem",
    "FileHandle",
    "DirectoryHandle",
    "HostFileHandle",
    "FileInfo",
    "ReaddirResult",
    "VFSStats",
    "TextReader",
    "VFSNotADirectoryError",
    "VFSNodeLimitExceededError",
    "VFSFallbackError",
    "VFSFallbackNotFoundError",
    "normalize_path",
    "AsyncVirtualFileSystem",
    "AsyncFileHandle",
]
__version__ = "0.1.0"
