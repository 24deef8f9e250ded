import errno

from embedfs import (
    VFSFallbackError,
    VFSFallbackNotFoundError,
    VFSNodeLimitExceededError,
    VFSNotADirectoryError,
)


def test_not_a_directory_error_is_both_kinds():
    err = VFSNotADirectoryError("/a/b", "a")
    assert isinstance(err, FileExistsError)
    assert isinstance(err, NotADirectoryError)
    assert err.path == "/a/b"
    assert err.segment == "a"
    assert "'a'" in str(err)
    assert "/a/b" in str(err)


def test_node_limit_error_fields():
    err = VFSNodeLimitExceededError(current=3, requested=2, limit=4)
    assert isinstance(err, OSError)
    assert (err.current, err.requested, err.limit) == (3, 2, 4)
    assert "limit is 4" in str(err)


def test_fallback_wrap_not_found():
    cause = FileNotFoundError(errno.ENOENT, "No such file or directory", "missing")
    err = VFSFallbackError.wrap("missing", cause)
    assert isinstance(err, VFSFallbackNotFoundError)
    assert isinstance(err, FileNotFoundError)
    assert err.errno == errno.ENOENT
    assert err.filename == "missing"
    assert err.__cause__ is cause
    assert "falling back to OS" in str(err)


def test_fallback_wrap_other_error():
    cause = PermissionError(errno.EACCES, "Permission denied", "secret")
    err = VFSFallbackError.wrap("secret", cause)
    assert type(err) is VFSFallbackError
    assert not isinstance(err, FileNotFoundError)
    assert err.errno == errno.EACCES
    assert err.__cause__ is cause
