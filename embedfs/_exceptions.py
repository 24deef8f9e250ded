from __future__ import annotations


class VFSNotADirectoryError(FileExistsError, NotADirectoryError):
    """Raised by ``add`` when a path runs through an existing file.

    Subclass of both FileExistsError and NotADirectoryError.
    """

    def __init__(self, path: str, segment: str) -> None:
        self.path = path
        self.segment = segment
        super().__init__(f"Not a directory: '{segment}' already exists as a file in '{path}'")


class VFSNodeLimitExceededError(OSError):
    """Raised when an insert would exceed ``max_nodes``. Subclass of OSError."""

    def __init__(self, current: int, requested: int, limit: int) -> None:
        self.current = current
        self.requested = requested
        self.limit = limit
        super().__init__(
            f"VFS node limit exceeded: {current} nodes + {requested} requested, "
            f"limit is {limit}."
        )


class VFSFallbackError(OSError):
    """Raised when opening a path on the host filesystem fails during fallback.

    The host error is kept as ``__cause__``; ``errno`` and ``filename`` are
    copied from it.
    """

    @classmethod
    def wrap(cls, path: str, exc: OSError) -> VFSFallbackError:
        err_cls = VFSFallbackNotFoundError if isinstance(exc, FileNotFoundError) else cls
        reason = exc.strerror or str(exc)
        err = err_cls(exc.errno, f"falling back to OS: {reason}", path)
        err.__cause__ = exc
        return err


class VFSFallbackNotFoundError(VFSFallbackError, FileNotFoundError):
    """Fallback lookup found nothing on the host either."""
