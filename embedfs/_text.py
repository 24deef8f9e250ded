"""TextReader: decoding line reader over a VFS handle.

Works on anything ``VirtualFileSystem.open()`` returns for a file.  Reads
one byte at a time while scanning for line endings, which is fine for the
small text assets an embedded tree usually holds.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ._handle import FileHandle, HostFileHandle


class TextReader:
    """Decode a binary file handle as text.

    Parameters
    ----------
    handle:
        File handle obtained from ``VirtualFileSystem.open()``.
    encoding:
        Text encoding (default ``"utf-8"``).
    errors:
        Decode error handling (default ``"strict"``).

    The wrapped handle is left open on exit; close it with its own
    ``with vfs.open(...)`` block.

    Example
    -------
    >>> with vfs.open("/static/robots.txt") as f:
    ...     for line in TextReader(f):
    ...         print(line.rstrip())
    """

    def __init__(
        self,
        handle: FileHandle | HostFileHandle,
        encoding: str = "utf-8",
        errors: str = "strict",
    ) -> None:
        self._handle = handle
        self._encoding = encoding
        self._errors = errors

    @property
    def encoding(self) -> str:
        return self._encoding

    @property
    def errors(self) -> str:
        return self._errors

    def read(self, size: int = -1) -> str:
        """Read up to *size* bytes (everything when negative) and decode them.

        *size* counts bytes, so a multi-byte character may be split at the
        boundary and fail to decode under ``errors="strict"``.
        """
        return self._handle.read(size).decode(self._encoding, self._errors)

    def readline(self, limit: int = -1) -> str:
        """Read one line, keeping its terminator.

        Recognizes ``\\n``, ``\\r\\n``, and bare ``\\r``.  *limit* caps the
        number of bytes read (``-1`` means unlimited).
        """
        buf = bytearray()
        while limit < 0 or len(buf) < limit:
            b = self._handle.read(1)
            if not b:
                break
            buf.extend(b)
            if b == b"\n":
                break
            if b == b"\r":
                if limit >= 0 and len(buf) >= limit:
                    break
                next_b = self._handle.read(1)
                if next_b == b"\n":
                    buf.extend(next_b)
                elif next_b:
                    self._handle.seek(-1, 1)
                break
        return buf.decode(self._encoding, self._errors)

    def readlines(self) -> list[str]:
        return list(self)

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        line = self.readline()
        if not line:
            raise StopIteration
        return line

    def __enter__(self) -> TextReader:
        return self

    def __exit__(self, *args: object) -> None:
        pass
