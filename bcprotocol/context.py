"""A restartable, thread-safe holder for a messaging context."""

from __future__ import annotations

import threading
from typing import Optional

import zmq


class Context:
    """Owns a messaging context that can be started and stopped repeatedly."""

    def __init__(self, started: bool = True) -> None:
        self._lock = threading.Lock()
        self._handle: Optional[zmq.Context] = None
        if started:
            self.start()

    def start(self) -> bool:
        """Create the context; false if it is already started."""
        with self._lock:
            if self._handle is not None:
                return False
            self._handle = zmq.Context()
            return True

    def stop(self) -> bool:
        """Terminate the context, blocking until its sockets are closed.

        Returns true if already stopped or terminated cleanly.
        """
        with self._lock:
            if self._handle is None:
                return True
            try:
                self._handle.term()
                result = True
            except zmq.ZMQError:
                result = False
            self._handle = None
            return result

    @property
    def handle(self) -> Optional[zmq.Context]:
        """The underlying context, or None when stopped."""
        return self._handle

    def __bool__(self) -> bool:
        return self._handle is not None

    def __enter__(self) -> Context:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()