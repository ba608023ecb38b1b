"""RoadCodec Queue Module - Message Types.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from roadcodec_core.queue.message import (
    Message,
    MessageAttributeValue,
)

__all__ = [
    "Message",
    "MessageAttributeValue",
]
