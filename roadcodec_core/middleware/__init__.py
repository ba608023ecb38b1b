"""RoadCodec Middleware Module - Message Processing Pipeline.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from roadcodec_core.middleware.pipeline import Pipeline, Middleware, BaseMiddleware
from roadcodec_core.middleware.codec import PayloadCodecMiddleware

__all__ = [
    "Pipeline", "Middleware", "BaseMiddleware",
    "PayloadCodecMiddleware",
]
