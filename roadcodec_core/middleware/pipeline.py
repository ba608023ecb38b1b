"""RoadCodec Pipeline - Transport Hook Pipeline.

A transport calls ``on_send`` once per outbound message (or batch
entry) before transmission and ``on_receive`` once per inbound
message after receipt.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from roadcodec_core.queue.message import Message


class Middleware(ABC):
    """Abstract transport hook."""

    @abstractmethod
    def on_send(self, message: Message) -> Optional[Message]:
        """Transform an outbound message. Return None to drop it."""
        pass

    @abstractmethod
    def on_receive(self, message: Message) -> Optional[Message]:
        """Transform an inbound message. Return None to drop it."""
        pass


class BaseMiddleware(Middleware):
    """Middleware that leaves messages as they are."""

    def on_send(self, message: Message) -> Optional[Message]:
        return message

    def on_receive(self, message: Message) -> Optional[Message]:
        return message


class Pipeline:
    """Ordered chain of middlewares.

    Outbound hooks run in insertion order, inbound hooks in reverse so
    the last outbound transform is undone first. Middleware exceptions
    propagate to the transport caller.
    """

    def __init__(self, middlewares: Optional[List[Middleware]] = None):
        self._middlewares: List[Middleware] = list(middlewares or [])

    def add(self, middleware: Middleware) -> "Pipeline":
        """Append a middleware."""
        self._middlewares.append(middleware)
        return self

    def remove(self, middleware: Middleware) -> bool:
        """Remove a middleware, returning whether it was present."""
        try:
            self._middlewares.remove(middleware)
        except ValueError:
            return False
        return True

    def __len__(self) -> int:
        return len(self._middlewares)

    def on_send(self, message: Message) -> Optional[Message]:
        current: Optional[Message] = message
        for middleware in self._middlewares:
            current = middleware.on_send(current)
            if current is None:
                break
        return current

    def on_send_batch(self, messages: Iterable[Message]) -> List[Message]:
        """Run ``on_send`` per entry; dropped entries are left out."""
        sent = (self.on_send(m) for m in messages)
        return [m for m in sent if m is not None]

    def on_receive(self, message: Message) -> Optional[Message]:
        current: Optional[Message] = message
        for middleware in reversed(self._middlewares):
            current = middleware.on_receive(current)
            if current is None:
                break
        return current


__all__ = ["Middleware", "BaseMiddleware", "Pipeline"]
