import pytest
from embedfs import VirtualFileSystem
from tests.helpers.data import SAMPLE_ENTRIES


@pytest.fixture
def vfs() -> VirtualFileSystem:
    """Empty filesystem without OS fallback."""
    return VirtualFileSystem()


@pytest.fixture
def populated(vfs: VirtualFileSystem) -> VirtualFileSystem:
    """Filesystem holding ``SAMPLE_ENTRIES``: ``/bar``, ``/d/{alpha,beta,gamma}``, ``/foo``."""
    vfs.populate(SAMPLE_ENTRIES)
    return vfs
