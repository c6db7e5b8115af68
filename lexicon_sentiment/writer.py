from __future__ import annotations

import logging
import os
import threading
import weakref

from .lexicon import PathLike
from .models import ScoreResult

logger = logging.getLogger(__name__)


class _PathLock:
    """Append lock for one destination; dropped from the registry once no writer holds it."""

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def __enter__(self) -> "_PathLock":
        self._lock.acquire()
        return self

    def __exit__(self, *exc_info) -> None:
        self._lock.release()


_LOCKS: "weakref.WeakValueDictionary[str, _PathLock]" = weakref.WeakValueDictionary()
_LOCKS_GUARD = threading.Lock()


def _lock_for(path: str) -> _PathLock:
    key = os.path.abspath(path)
    with _LOCKS_GUARD:
        lock = _LOCKS.get(key)
        if lock is None:
            lock = _PathLock()
            _LOCKS[key] = lock
        return lock


def format_record(result: ScoreResult) -> str:
    # float repr: 1e7 renders as 10000000.0, 1e16 as 1e+16.
    return f"Text: {result.text}\nSentiment score: {result.score!r}\n\n"


class RecordWriter:
    """Appends scored records to a text file, one locked open/write/close per record."""

    def __init__(self, path: PathLike, encoding: str = "utf-8") -> None:
        self.path = os.fspath(path)
        self.encoding = encoding
        self._lock = _lock_for(self.path)

    def append(self, result: ScoreResult) -> bool:
        record = format_record(result)
        with self._lock:
            try:
                with open(self.path, "a", encoding=self.encoding) as handle:
                    handle.write(record)
            except OSError:
                logger.exception("Failed to append record for %r to %s", result.text, self.path)
                return False
        return True

    def __repr__(self) -> str:
        return f"RecordWriter(path={self.path!r})"
