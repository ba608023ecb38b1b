"""RoadCodec Protocol Module - Payload Codec & Metadata Protocol.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from roadcodec_core.protocol.algorithms import (
    AlgorithmKind,
    ChecksumAlgorithm,
    CompressionAlgorithm,
    EncodingAlgorithm,
    effective_encoding,
    resolve,
)
from roadcodec_core.protocol.compressor import Compressor, GzipCompressor, ZstdCompressor, SnappyCompressor, NoCompressor
from roadcodec_core.protocol.encoder import Encoder, Base64UrlEncoder, Base64StdEncoder, UnencodedEncoder
from roadcodec_core.protocol.checksum import Digestor, Md5Digestor, Sha256Digestor, UndigestedDigestor
from roadcodec_core.protocol.codec import CodecConfiguration, PayloadCodec
from roadcodec_core.protocol.attributes import CodecMetadata, PROTOCOL_VERSION, RESERVED_ATTRIBUTES

__all__ = [
    "AlgorithmKind", "CompressionAlgorithm", "EncodingAlgorithm", "ChecksumAlgorithm",
    "resolve", "effective_encoding",
    "Compressor", "GzipCompressor", "ZstdCompressor", "SnappyCompressor", "NoCompressor",
    "Encoder", "Base64UrlEncoder", "Base64StdEncoder", "UnencodedEncoder",
    "Digestor", "Md5Digestor", "Sha256Digestor", "UndigestedDigestor",
    "CodecConfiguration", "PayloadCodec",
    "CodecMetadata", "PROTOCOL_VERSION", "RESERVED_ATTRIBUTES",
]
