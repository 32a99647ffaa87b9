# link-shortener/database.py
import logging
import threading
from contextlib import contextmanager
from typing import Dict, Iterator

from exceptions import LinkNotFoundError
from models import Link

logger = logging.getLogger(__name__)


class ReadWriteLock:
    """
    Many concurrent readers or one writer. Waiting writers block new readers
    so a steady stream of lookups cannot starve inserts.
    """

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class LinkStore:
    """
    In-memory mapping from token to Link, scoped to the process lifetime.
    The last write for a token wins; nothing is ever evicted.
    """

    def __init__(self):
        self._links: Dict[str, Link] = {}
        self._lock = ReadWriteLock()

    def put(self, token: str, link: Link) -> None:
        with self._lock.write():
            replaced = token in self._links
            self._links[token] = link
        if replaced:
            logger.debug("Overwrote link for token %s", token)

    def get(self, token: str) -> Link:
        with self._lock.read():
            link = self._links.get(token)
        if link is None:
            raise LinkNotFoundError(token)
        return link

    def __contains__(self, token: object) -> bool:
        with self._lock.read():
            return token in self._links

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._links)


# Process-wide store shared by every request
link_store = LinkStore()


def get_link_store() -> LinkStore:
    """
    Dependency that provides the process-wide link store.
    Tests override it to get a clean store per test.
    """
    return link_store
