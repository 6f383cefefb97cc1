"""
Per-call deadline for HTTP requests

requests only bounds each socket connect and read, so a server that trickles
bytes can hold a call open indefinitely. CallDeadline arms one timer for the
whole call; when it fires, every socket opened for that call is shut down,
which makes the blocked read in the calling thread fail immediately.
"""
import logging
import socket
import threading
import time
from typing import List

from requests.adapters import HTTPAdapter
from urllib3.connectionpool import HTTPConnectionPool, HTTPSConnectionPool
from urllib3.poolmanager import PoolManager

logger = logging.getLogger(__name__)


class CallDeadline:
    """Timer that aborts the connections of a single call when it expires"""

    def __init__(self, seconds: float):
        self.seconds = seconds
        self.expired = False
        self._ends_at = time.monotonic() + seconds
        self._lock = threading.Lock()
        self._connections: List = []
        self._timer = threading.Timer(seconds, self._expire)
        self._timer.daemon = True

    def __enter__(self):
        self._timer.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self._timer.cancel()
        self._timer.join()
        return False

    def remaining(self) -> float:
        return max(self._ends_at - time.monotonic(), 0.001)

    def track(self, conn):
        with self._lock:
            self._connections.append(conn)

    def _expire(self):
        with self._lock:
            self.expired = True
            connections = list(self._connections)
        logger.debug(f"Deadline of {self.seconds}s reached, aborting {len(connections)} connection(s)")
        for conn in connections:
            sock = getattr(conn, 'sock', None)
            if sock is None:
                continue
            try:
                sock.shutdown(socket.SHUT_RDWR)
            except OSError as e:
                # already closed by the peer or by the caller
                logger.debug(f"Socket shutdown on abort failed: {e}")


class _TrackedPoolMixin:
    deadline = None

    def _new_conn(self):
        conn = super()._new_conn()
        if self.deadline is not None:
            self.deadline.track(conn)
        return conn


class _TrackedHTTPConnectionPool(_TrackedPoolMixin, HTTPConnectionPool):
    pass


class _TrackedHTTPSConnectionPool(_TrackedPoolMixin, HTTPSConnectionPool):
    pass


class _TrackedPoolManager(PoolManager):
    def __init__(self, deadline: CallDeadline, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.deadline = deadline
        self.pool_classes_by_scheme = {
            'http': _TrackedHTTPConnectionPool,
            'https': _TrackedHTTPSConnectionPool
        }

    def _new_pool(self, *args, **kwargs):
        pool = super()._new_pool(*args, **kwargs)
        pool.deadline = self.deadline
        return pool


class DeadlineAdapter(HTTPAdapter):
    """Transport adapter whose connections are registered with a CallDeadline"""

    def __init__(self, deadline: CallDeadline, **kwargs):
        self.deadline = deadline
        super().__init__(**kwargs)

    def init_poolmanager(self, connections, maxsize, block=False, **pool_kwargs):
        self._pool_connections = connections
        self._pool_maxsize = maxsize
        self._pool_block = block
        self.poolmanager = _TrackedPoolManager(
            self.deadline,
            num_pools=connections,
            maxsize=maxsize,
            block=block,
            **pool_kwargs
        )
