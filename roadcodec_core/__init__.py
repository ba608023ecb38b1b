"""RoadCodec - Message Payload Codec for Queue Clients.

RoadCodec compresses, encodes and checksums outbound message bodies,
tags each message with the metadata describing that transform, and
reverses it on inbound messages while validating integrity and
protocol version.

Architecture Overview:
┌─────────────────────────────────────────────────────────────────────────┐
│                            RoadCodec System                             │
├─────────────────────────────────────────────────────────────────────────┤
│  ┌─────────────┐   ┌──────────────────┐   ┌─────────────┐              │
│  │   Client    │──▶│     Pipeline     │──▶│  Transport  │──▶ wire      │
│  │             │   │ • on_send        │   │ • send      │              │
│  │ • send      │◀──│ • on_receive     │◀──│ • receive   │◀── wire      │
│  │ • receive   │   └──────────────────┘   └─────────────┘              │
│  └─────────────┘            │                                           │
│                             ▼                                           │
│              ┌────────────────────────────┐                             │
│              │   PayloadCodecMiddleware   │                             │
│              │ • idempotency guard        │                             │
│              │ • metadata + checksum      │                             │
│              └────────────────────────────┘                             │
├─────────────────────────────────────────────────────────────────────────┤
│                           Core Components                               │
├─────────────────────────────────────────────────────────────────────────┤
│  ┌───────────────────────────────────────────────────────────────────┐ │
│  │                       Protocol Module                             │ │
│  │  • Algorithms - Compression/Encoding/Checksum ids + registry      │ │
│  │  • Compressor - zstd, gzip, snappy, none                          │ │
│  │  • Encoder - base64 (url), base64-std, none                       │ │
│  │  • Digestor - md5, sha256                                         │ │
│  │  • PayloadCodec - compress then encode                            │ │
│  │  • CodecMetadata - x-codec-* attribute protocol                   │ │
│  └───────────────────────────────────────────────────────────────────┘ │
│  ┌───────────────────────────────────────────────────────────────────┐ │
│  │                        Queue Module                               │ │
│  │  • Message - Body plus typed attributes                           │ │
│  │  • MessageAttributeValue - Typed String or Number attribute       │ │
│  └───────────────────────────────────────────────────────────────────┘ │
└─────────────────────────────────────────────────────────────────────────┘

Example:
    >>> from roadcodec_core import (
    ...     CodecConfiguration, CompressionAlgorithm, Message,
    ...     PayloadCodecMiddleware,
    ... )
    >>> middleware = PayloadCodecMiddleware(
    ...     CodecConfiguration(compression=CompressionAlgorithm.ZSTD))
    >>> sent = middleware.encode_message(Message.create('{"value":42}'))
    >>> middleware.decode_message(sent).body
    '{"value":42}'

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

# Errors
from roadcodec_core.errors import (
    CodecError,
    UnsupportedAlgorithmError,
    MissingAttributeError,
    UnsupportedVersionError,
    CorruptPayloadError,
    ChecksumMismatchError,
)

# Queue components
from roadcodec_core.queue.message import Message, MessageAttributeValue

# Protocol components
from roadcodec_core.protocol.algorithms import (
    AlgorithmKind,
    CompressionAlgorithm,
    EncodingAlgorithm,
    ChecksumAlgorithm,
    effective_encoding,
    resolve,
)
from roadcodec_core.protocol.codec import CodecConfiguration, PayloadCodec
from roadcodec_core.protocol.attributes import CodecMetadata, PROTOCOL_VERSION

# Middleware components
from roadcodec_core.middleware.pipeline import Pipeline, Middleware, BaseMiddleware
from roadcodec_core.middleware.codec import PayloadCodecMiddleware

# Transport components
from roadcodec_core.transport.memory import InMemoryTransport

__version__ = "1.0.0"
__author__ = "BlackRoad OS"
__license__ = "Proprietary"

__all__ = [
    # Version
    "__version__",
    # Errors
    "CodecError",
    "UnsupportedAlgorithmError",
    "MissingAttributeError",
    "UnsupportedVersionError",
    "CorruptPayloadError",
    "ChecksumMismatchError",
    # Queue
    "Message",
    "MessageAttributeValue",
    # Protocol
    "AlgorithmKind",
    "CompressionAlgorithm",
    "EncodingAlgorithm",
    "ChecksumAlgorithm",
    "effective_encoding",
    "resolve",
    "CodecConfiguration",
    "PayloadCodec",
    "CodecMetadata",
    "PROTOCOL_VERSION",
    # Middleware
    "Pipeline",
    "Middleware",
    "BaseMiddleware",
    "PayloadCodecMiddleware",
    # Transport
    "InMemoryTransport",
]
