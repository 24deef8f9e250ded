from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator

from ._exceptions import (
    VFSFallbackError,
    VFSNodeLimitExceededError,
    VFSNotADirectoryError,
)
from ._handle import DirectoryHandle, FileHandle, Handle, HostFileHandle
from ._info import FileInfo
from ._lock import ReadWriteLock
from ._path import normalize_path, split_path
from ._typing import VFSStats

logger = logging.getLogger(__name__)

Entry = tuple[str, int, int, float, "bytes | bytearray | memoryview | str | None"]

# ---------------------------------------------------------------------------
#  Node arena
# ---------------------------------------------------------------------------


class DirNode:
    __slots__ = ("node_id", "info", "children")

    def __init__(self, node_id: int, info: FileInfo) -> None:
        self.node_id: int = node_id
        self.info: FileInfo = info
        self.children: dict[str, int] = {}


class FileNode:
    __slots__ = ("node_id", "info", "data")

    def __init__(self, node_id: int, info: FileInfo, data: bytes) -> None:
        self.node_id: int = node_id
        self.info: FileInfo = info
        self.data: bytes = data


Node = DirNode | FileNode


def _to_bytes(data: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


# ---------------------------------------------------------------------------
#  VirtualFileSystem
# ---------------------------------------------------------------------------


class VirtualFileSystem:
    """In-memory, read-mostly file tree.

    The tree is filled once with :meth:`add` and then served with :meth:`open`.
    When *fallback* is set, paths missing from the tree are opened on the host
    filesystem instead.

    A single readers–writer lock guards the whole tree: ``add`` holds it
    exclusively, lookups share it.  Handles returned by ``open`` carry their
    own copies and never touch the lock again.
    """

    def __init__(self, fallback: bool = False, max_nodes: int | None = None) -> None:
        if max_nodes is not None and max_nodes < 1:
            raise ValueError(f"Invalid max_nodes value: {max_nodes!r}. Expected >= 1 or None.")
        self._fallback: bool = fallback
        self._max_nodes: int | None = max_nodes
        self._lock = ReadWriteLock()
        self._nodes: dict[int, Node] = {}
        self._next_node_id: int = 0
        self._root = self._alloc_dir("")

    @property
    def fallback(self) -> bool:
        return self._fallback

    # -- node allocation helpers --

    def _alloc_dir(self, name: str, info: FileInfo | None = None) -> DirNode:
        nid = self._next_node_id
        self._next_node_id += 1
        node = DirNode(nid, info if info is not None else FileInfo.directory(name))
        self._nodes[nid] = node
        return node

    def _alloc_file(self, info: FileInfo, data: bytes) -> FileNode:
        nid = self._next_node_id
        self._next_node_id += 1
        node = FileNode(nid, info, data)
        self._nodes[nid] = node
        return node

    def _check_node_limit(self, requested: int) -> None:
        if self._max_nodes is None:
            return
        if len(self._nodes) + requested > self._max_nodes:
            raise VFSNodeLimitExceededError(len(self._nodes), requested, self._max_nodes)

    # -- path helpers --

    def _resolve(self, parts: list[str]) -> Node | None:
        current: Node = self._root
        for part in parts:
            if not isinstance(current, DirNode):
                return None
            child_id = current.children.get(part)
            if child_id is None:
                return None
            current = self._nodes[child_id]
        return current

    def _resolve_dir(self, path: str) -> DirNode:
        node = self._resolve(split_path(path))
        if node is None:
            raise FileNotFoundError(f"No such directory: '{path}'")
        if not isinstance(node, DirNode):
            raise NotADirectoryError(f"Not a directory: '{path}'")
        return node

    def _listing(self, node: DirNode) -> list[FileInfo]:
        return [self._nodes[node.children[name]].info for name in sorted(node.children)]

    # -- population --

    def add(
        self,
        path: str,
        size: int,
        mode: int,
        mod_time: float,
        data: bytes | bytearray | memoryview | str | None,
    ) -> None:
        """Insert a file at *path*, creating missing parent directories.

        A *mode* with the directory bit set inserts an empty directory carrying
        the given metadata; *data* is ignored then and may be None.

        Never overwrites: an existing entry at *path* raises FileExistsError,
        and a file in the way of a parent raises VFSNotADirectoryError.  The
        tree is left untouched when the call fails.
        """
        parts = split_path(path)
        if not parts:
            raise FileExistsError(f"Cannot add the root directory: '{path}'")
        info = FileInfo(parts[-1], size, mode, mod_time)
        payload = b"" if info.is_dir else _to_bytes(data)
        with self._lock.write_locked():
            current = self._root
            depth = 0
            for part in parts[:-1]:
                child_id = current.children.get(part)
                if child_id is None:
                    break
                child = self._nodes[child_id]
                if not isinstance(child, DirNode):
                    logger.debug("add %r rejected: %r is a file", path, part)
                    raise VFSNotADirectoryError(path, part)
                current = child
                depth += 1
            else:
                if parts[-1] in current.children:
                    logger.debug("add %r rejected: entry exists", path)
                    raise FileExistsError(f"File exists: '{path}'")

            # Everything from parts[depth] on is new: one node per segment.
            self._check_node_limit(len(parts) - depth)
            for part in parts[depth:-1]:
                new_dir = self._alloc_dir(part)
                current.children[part] = new_dir.node_id
                current = new_dir
                logger.debug("created implicit directory %r for %r", part, path)
            name = parts[-1]
            leaf: Node
            if info.is_dir:
                leaf = self._alloc_dir(name, info)
            else:
                leaf = self._alloc_file(info, payload)
            current.children[name] = leaf.node_id

    def populate(self, entries: Iterable[Entry]) -> int:
        """Add every ``(path, size, mode, mod_time, data)`` tuple in order.

        Stops at the first failing entry and re-raises its error; entries
        before it stay added.  Returns the number of entries added.
        """
        count = 0
        for path, size, mode, mod_time, data in entries:
            self.add(path, size, mode, mod_time, data)
            count += 1
        return count

    # -- lookup --

    def open(self, path: str) -> Handle:
        """Open *path* for reading.

        Directories give a :class:`DirectoryHandle`, files a
        :class:`FileHandle`.  A missing path raises FileNotFoundError, or with
        fallback enabled is opened on the host as given.
        """
        parts = split_path(path)
        with self._lock.read_locked():
            node = self._resolve(parts)
            if isinstance(node, DirNode):
                return DirectoryHandle(node.info, self._listing(node))
            if isinstance(node, FileNode):
                return FileHandle(node.info, node.data)
        if not self._fallback:
            raise FileNotFoundError(f"No such file or directory: '{path}'")
        return self._open_host(path)

    def _open_host(self, path: str) -> Handle:
        logger.debug("%r not in tree, falling back to OS", path)
        try:
            if os.path.isdir(path):
                st = os.stat(path)
                with os.scandir(path) as it:
                    entries = [
                        FileInfo.from_stat_result(
                            entry.name, entry.stat(follow_symlinks=False)
                        )
                        for entry in it
                    ]
                entries.sort(key=lambda info: info.name)
                name = os.path.basename(os.path.normpath(path))
                return DirectoryHandle(FileInfo.from_stat_result(name, st), entries)
            return HostFileHandle(path, open(path, "rb"))
        except OSError as exc:
            raise VFSFallbackError.wrap(path, exc) from exc

    # -- read-only queries --

    def stat(self, path: str) -> FileInfo:
        with self._lock.read_locked():
            node = self._resolve(split_path(path))
            if node is None:
                raise FileNotFoundError(f"No such file or directory: '{path}'")
            return node.info

    def exists(self, path: str) -> bool:
        with self._lock.read_locked():
            return self._resolve(split_path(path)) is not None

    def is_dir(self, path: str) -> bool:
        with self._lock.read_locked():
            return isinstance(self._resolve(split_path(path)), DirNode)

    def is_file(self, path: str) -> bool:
        with self._lock.read_locked():
            return isinstance(self._resolve(split_path(path)), FileNode)

    def listdir(self, path: str) -> list[str]:
        with self._lock.read_locked():
            return sorted(self._resolve_dir(path).children)

    def walk(self, path: str = "/") -> Iterator[tuple[str, list[str], list[str]]]:
        """Walk the tree top-down like :func:`os.walk`.

        Each directory is listed under the lock when it is reached, so entries
        added while the walk is in progress may or may not show up.
        """
        npath = normalize_path(path)
        with self._lock.read_locked():
            node = self._resolve_dir(npath)
        yield from self._walk_dir(npath, node)

    def _walk_dir(
        self, dir_path: str, dir_node: DirNode
    ) -> Iterator[tuple[str, list[str], list[str]]]:
        dirnames: list[str] = []
        filenames: list[str] = []
        child_dirs: list[tuple[str, DirNode]] = []
        with self._lock.read_locked():
            for name in sorted(dir_node.children):
                child = self._nodes[dir_node.children[name]]
                if isinstance(child, DirNode):
                    dirnames.append(name)
                    child_dirs.append((dir_path.rstrip("/") + "/" + name, child))
                else:
                    filenames.append(name)
        yield dir_path, dirnames, filenames
        for child_path, child_dir in child_dirs:
            yield from self._walk_dir(child_path, child_dir)

    def stats(self) -> VFSStats:
        with self._lock.read_locked():
            file_count = 0
            dir_count = 0
            total_bytes = 0
            for node in self._nodes.values():
                if isinstance(node, DirNode):
                    dir_count += 1
                else:
                    file_count += 1
                    total_bytes += len(node.data)
        return VFSStats(
            file_count=file_count,
            dir_count=dir_count,
            total_bytes=total_bytes,
            node_limit=self._max_nodes,
        )

    def __repr__(self) -> str:
        return f"<VirtualFileSystem nodes={len(self._nodes)} fallback={self._fallback}>"
