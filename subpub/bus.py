"""In-process publish/subscribe event bus."""

from __future__ import annotations

import logging
import threading
import time
from collections import deque
from typing import Any, Callable

logger = logging.getLogger(__name__)

MessageHandler = Callable[[Any], None]


class SubPubError(Exception):
    """Base class for event bus errors."""


class SubPubClosedError(SubPubError):
    def __init__(self) -> None:
        super().__init__("already closed")


class NotSubscribedError(SubPubError):
    def __init__(self, subject: str) -> None:
        super().__init__("not subscribed")
        self.subject = subject


class _Subscriber:
    """Bounded FIFO queue (capacity 100) drained by its own thread."""

    def __init__(self, handler: MessageHandler, capacity: int = 100) -> None:
        self._handler = handler
        self._capacity = capacity
        self._pending: deque[Any] = deque()
        self._cond = threading.Condition()
        self._stopped = False
        self.thread = threading.Thread(target=self._run, daemon=True)
        self.thread.start()

    def put(self, msg: Any) -> None:
        with self._cond:
            self._cond.wait_for(lambda: self._stopped or len(self._pending) < self._capacity)
            if not self._stopped:
                self._pending.append(msg)
                self._cond.notify_all()

    def stop(self) -> None:
        with self._cond:
            self._stopped = True
            self._pending.clear()
            self._cond.notify_all()

    def _run(self) -> None:
        while True:
            with self._cond:
                self._cond.wait_for(lambda: self._stopped or self._pending)
                if self._stopped:
                    return
                msg = self._pending.popleft()
                self._cond.notify_all()
            try:
                self._handler(msg)
            except Exception:
                logger.exception("message handler failed")


class Subscription:
    """Handle returned by :meth:`SubPub.subscribe`."""

    def __init__(self, bus: SubPub, subject: str, subscriber: _Subscriber) -> None:
        self._bus = bus
        self._subject = subject
        self._subscriber = subscriber

    def unsubscribe(self) -> None:
        """Stop delivery to this subscription's handler."""
        bus = self._bus
        with bus._lock:
            if bus._closed:
                return
            self._subscriber.stop()
            subscribers = bus._subscribers.get(self._subject, [])
            if self._subscriber in subscribers:
                subscribers.remove(self._subscriber)


class SubPub:
    """Subject-based event bus delivering messages asynchronously in FIFO order."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._subscribers: dict[str, list[_Subscriber]] = {}
        self._closed = False
        self._stopping: list[_Subscriber] = []

    def subscribe(self, subject: str, handler: MessageHandler) -> Subscription:
        with self._lock:
            if self._closed:
                raise SubPubClosedError()
            subscriber = _Subscriber(handler)
            self._subscribers.setdefault(subject, []).append(subscriber)
        return Subscription(self, subject, subscriber)

    def publish(self, subject: str, msg: Any) -> None:
        with self._lock:
            if self._closed:
                raise SubPubClosedError()
            if subject not in self._subscribers:
                raise NotSubscribedError(subject)
            targets = list(self._subscribers[subject])
        for subscriber in targets:
            subscriber.put(msg)

    def close(self, timeout: float | None = None) -> None:
        """Shut the bus down; raise TimeoutError if handlers outlive ``timeout`` seconds."""
        with self._lock:
            if not self._closed:
                self._closed = True
                for subscribers in self._subscribers.values():
                    for subscriber in subscribers:
                        subscriber.stop()
                        self._stopping.append(subscriber)
                self._subscribers = {}
            stopping = list(self._stopping)

        deadline = None if timeout is None else time.monotonic() + timeout
        for subscriber in stopping:
            if subscriber.thread is threading.current_thread():
                continue
            remaining = None if deadline is None else max(0.0, deadline - time.monotonic())
            subscriber.thread.join(remaining)
            if subscriber.thread.is_alive():
                raise TimeoutError("timed out waiting for subscribers to stop")