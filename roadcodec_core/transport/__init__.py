"""RoadCodec Transport Module - Queue Transports.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from roadcodec_core.transport.memory import InMemoryTransport

__all__ = ["InMemoryTransport"]
