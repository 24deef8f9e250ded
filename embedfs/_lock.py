import threading
import time
from collections.abc import Iterator
from contextlib import contextmanager


def _calc_deadline(timeout: float | None) -> float | None:
    if timeout is None:
        return None
    if timeout == 0.0:
        return 0.0
    return time.monotonic() + timeout


def _remaining(deadline: float | None) -> float | None:
    if deadline is None:
        return None
    return max(0.0, deadline - time.monotonic())


class ReadWriteLock:
    """A readers–writer lock that prefers writers.

    Any number of readers may hold the lock together; a writer needs it alone.
    Once a writer is waiting, new readers queue behind it, so a steady stream of
    readers cannot starve population.  Readers already inside finish normally.
    The lock is not reentrant.
    """

    def __init__(self) -> None:
        self._condition = threading.Condition(threading.Lock())
        self._read_count: int = 0
        self._write_held: bool = False
        self._writers_waiting: int = 0

    def _wait(self, deadline: float | None, kind: str) -> None:
        remaining = _remaining(deadline)
        if remaining == 0.0 or not self._condition.wait(timeout=remaining):
            raise BlockingIOError(f"Could not acquire {kind} lock within timeout.")

    def acquire_read(self, timeout: float | None = None) -> None:
        deadline = _calc_deadline(timeout)
        with self._condition:
            while self._write_held or self._writers_waiting:
                self._wait(deadline, "read")
            self._read_count += 1

    def release_read(self) -> None:
        with self._condition:
            if self._read_count <= 0:
                raise RuntimeError("release_read called without matching acquire_read")
            self._read_count -= 1
            if self._read_count == 0:
                self._condition.notify_all()

    def acquire_write(self, timeout: float | None = None) -> None:
        deadline = _calc_deadline(timeout)
        with self._condition:
            self._writers_waiting += 1
            try:
                while self._write_held or self._read_count > 0:
                    self._wait(deadline, "write")
            finally:
                self._writers_waiting -= 1
                if not self._writers_waiting:
                    # readers parked behind a writer that gave up may proceed
                    self._condition.notify_all()
            self._write_held = True

    def release_write(self) -> None:
        with self._condition:
            if not self._write_held:
                raise RuntimeError("release_write called without matching acquire_write")
            self._write_held = False
            self._condition.notify_all()

    @contextmanager
    def read_locked(self, timeout: float | None = None) -> Iterator[None]:
        self.acquire_read(timeout)
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self, timeout: float | None = None) -> Iterator[None]:
        self.acquire_write(timeout)
        try:
            yield
        finally:
            self.release_write()

    @property
    def is_locked(self) -> bool:
        with self._condition:
            return self._write_held or self._read_count > 0

    @property
    def writers_waiting(self) -> int:
        with self._condition:
            return self._writers_waiting
