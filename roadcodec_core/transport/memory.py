"""RoadCodec Memory Transport - In-Memory Queue Transport.

Runs the middleware pipeline on every send and receive, storing
messages exactly as they would travel on the wire.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import threading
from collections import defaultdict, deque
from typing import Deque, Dict, Iterable, List, Optional

from roadcodec_core.middleware.pipeline import Pipeline
from roadcodec_core.queue.message import Message

logger = logging.getLogger(__name__)


class InMemoryTransport:
    """In-memory queue transport."""

    def __init__(self, pipeline: Optional[Pipeline] = None):
        self.pipeline = pipeline or Pipeline()
        self._queues: Dict[str, Deque[Message]] = defaultdict(deque)
        self._lock = threading.RLock()

    def send(self, queue_name: str, message: Message) -> Optional[Message]:
        """Send a message.

        Returns:
            The message as stored, or None if the pipeline rejected it
        """
        wire = self.pipeline.on_send(message)
        if wire is None:
            logger.debug(f"Message {message.id} rejected by pipeline")
            return None
        with self._lock:
            self._queues[queue_name].append(wire)
        return wire

    def send_batch(self, queue_name: str, messages: Iterable[Message]) -> List[Message]:
        """Send batch entries, each processed independently."""
        wire = self.pipeline.on_send_batch(messages)
        with self._lock:
            self._queues[queue_name].extend(wire)
        return wire

    def receive(self, queue_name: str, max_messages: int = 1) -> List[Message]:
        """Receive up to max_messages, oldest first.

        A message the pipeline rejects is removed from the queue and its
        error propagates; the other messages taken with it are put back
        in their original order.
        """
        with self._lock:
            queue = self._queues[queue_name]
            taken = [queue.popleft() for _ in range(min(max_messages, len(queue)))]

        received: List[Message] = []
        for index, wire in enumerate(taken):
            try:
                message = self.pipeline.on_receive(wire)
            except Exception:
                untouched = taken[:index] + taken[index + 1:]
                with self._lock:
                    self._queues[queue_name].extendleft(reversed(untouched))
                logger.debug(
                    f"Message {wire.id} rejected on {queue_name}, "
                    f"{len(untouched)} message(s) requeued"
                )
                raise
            if message is not None:
                received.append(message)
        return received

    def peek(self, queue_name: str) -> List[Message]:
        """Messages in wire form, without running the pipeline."""
        with self._lock:
            return list(self._queues[queue_name])

    def count(self, queue_name: str) -> int:
        with self._lock:
            return len(self._queues[queue_name])

    def clear(self, queue_name: str) -> int:
        with self._lock:
            count = len(self._queues[queue_name])
            self._queues[queue_name].clear()
            return count


__all__ = ["InMemoryTransport"]
