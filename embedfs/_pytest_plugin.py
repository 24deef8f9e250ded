"""pytest fixture plugin.

Usage::

    # conftest.py
    pytest_plugins = ["embedfs._pytest_plugin"]

This makes the ``vfs`` fixture automatically available::

    def test_something(vfs):
        vfs.add("/a.txt", 5, 0o100644, 0.0, b"hello")
        with vfs.open("/a.txt") as f:
            assert f.read() == b"hello"
"""

import pytest

from ._fs import VirtualFileSystem


@pytest.fixture
def vfs() -> VirtualFileSystem:
    """An empty :class:`VirtualFileSystem` without OS fallback.

    Provides an independent instance per test (function scope).
    """
    return VirtualFileSystem()
