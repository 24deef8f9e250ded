from __future__ import annotations

import os
import stat
import time
from dataclasses import dataclass

DIR_SIZE: int = 4096
DIR_MODE: int = stat.S_IFDIR | 0o755


@dataclass(frozen=True)
class FileInfo:
    """Metadata of a single filesystem entry.

    ``mode`` holds POSIX ``st_mode`` bits; the directory flag is
    ``stat.S_IFDIR``.  ``mod_time`` is a POSIX timestamp.
    """

    name: str
    size: int
    mode: int
    mod_time: float

    @property
    def is_dir(self) -> bool:
        return stat.S_ISDIR(self.mode)

    @property
    def permissions(self) -> int:
        return stat.S_IMODE(self.mode)

    @property
    def filemode(self) -> str:
        """``ls -l`` style mode string, e.g. ``drwxr-xr-x``."""
        return stat.filemode(self.mode)

    @classmethod
    def directory(cls, name: str) -> FileInfo:
        """Synthetic metadata for a directory nobody added explicitly."""
        return cls(name=name, size=DIR_SIZE, mode=DIR_MODE, mod_time=time.time())

    @classmethod
    def from_stat_result(cls, name: str, st: os.stat_result) -> FileInfo:
        return cls(name=name, size=st.st_size, mode=st.st_mode, mod_time=st.st_mtime)
