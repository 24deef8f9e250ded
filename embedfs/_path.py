import posixpath


def normalize_path(path: str) -> str:
    """Return the canonical rooted form of *path*.

    Both separator styles are accepted, relative paths are rooted at ``/``,
    and ``..`` never climbs above the root.
    """
    converted = path.replace("\\", "/")
    if not converted:
        return "/"
    normalized = posixpath.normpath("/" + converted.lstrip("/"))
    return normalized


def split_path(path: str) -> list[str]:
    """Return the segments of *path* below the root; ``[]`` for the root itself."""
    return [part for part in normalize_path(path).split("/") if part and part != "."]
