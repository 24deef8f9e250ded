from typing import NamedTuple, TypedDict

from ._info import FileInfo


class ReaddirResult(NamedTuple):
    entries: list[FileInfo]
    eof: bool


class VFSStats(TypedDict):
    file_count: int
    dir_count: int
    total_bytes: int
    node_limit: int | None
