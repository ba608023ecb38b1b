"""RoadCodec Algorithms - Algorithm Identifiers and Registry.

Each algorithm family is a closed enum whose value is its wire
identifier. Strategy instances are bound to members through lookup
tables built once at import.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Type, Union

from roadcodec_core.errors import UnsupportedAlgorithmError
from roadcodec_core.protocol.checksum import (
    Digestor,
    Md5Digestor,
    Sha256Digestor,
    UndigestedDigestor,
)
from roadcodec_core.protocol.compressor import (
    Compressor,
    GzipCompressor,
    NoCompressor,
    SnappyCompressor,
    ZstdCompressor,
)
from roadcodec_core.protocol.encoder import (
    Base64StdEncoder,
    Base64UrlEncoder,
    Encoder,
    UnencodedEncoder,
)


class AlgorithmKind(Enum):
    """Algorithm families carried in codec attributes."""

    COMPRESSION = "payload compression"
    ENCODING = "payload encoding"
    CHECKSUM = "checksum algorithm"

    @property
    def label(self) -> str:
        return self.value


class CompressionAlgorithm(Enum):
    """Payload compression algorithms."""

    ZSTD = "zstd"
    GZIP = "gzip"
    SNAPPY = "snappy"
    NONE = "none"

    @property
    def id(self) -> str:
        return self.value

    @property
    def compressor(self) -> Compressor:
        return _COMPRESSORS[self]

    @classmethod
    def from_id(cls, value: Optional[str]) -> "CompressionAlgorithm":
        """Resolve a wire identifier."""
        return resolve(AlgorithmKind.COMPRESSION, value)


class EncodingAlgorithm(Enum):
    """Payload encoding algorithms."""

    BASE64_URL = "base64"
    BASE64_STD = "base64-std"
    NONE = "none"

    @property
    def id(self) -> str:
        return self.value

    @property
    def encoder(self) -> Encoder:
        return _ENCODERS[self]

    @classmethod
    def from_id(cls, value: Optional[str]) -> "EncodingAlgorithm":
        """Resolve a wire identifier."""
        return resolve(AlgorithmKind.ENCODING, value)


class ChecksumAlgorithm(Enum):
    """Payload checksum algorithms."""

    MD5 = "md5"
    SHA256 = "sha256"
    NONE = "none"

    @property
    def id(self) -> str:
        return self.value

    @property
    def enabled(self) -> bool:
        return self is not ChecksumAlgorithm.NONE

    @property
    def digestor(self) -> Digestor:
        return _DIGESTORS[self]

    @classmethod
    def from_id(cls, value: Optional[str]) -> "ChecksumAlgorithm":
        """Resolve a wire identifier."""
        return resolve(AlgorithmKind.CHECKSUM, value)


Algorithm = Union[CompressionAlgorithm, EncodingAlgorithm, ChecksumAlgorithm]

_COMPRESSORS: Dict[CompressionAlgorithm, Compressor] = {
    CompressionAlgorithm.ZSTD: ZstdCompressor(),
    CompressionAlgorithm.GZIP: GzipCompressor(),
    CompressionAlgorithm.SNAPPY: SnappyCompressor(),
    CompressionAlgorithm.NONE: NoCompressor(),
}

_ENCODERS: Dict[EncodingAlgorithm, Encoder] = {
    EncodingAlgorithm.BASE64_URL: Base64UrlEncoder(),
    EncodingAlgorithm.BASE64_STD: Base64StdEncoder(),
    EncodingAlgorithm.NONE: UnencodedEncoder(),
}

_DIGESTORS: Dict[ChecksumAlgorithm, Digestor] = {
    ChecksumAlgorithm.MD5: Md5Digestor(),
    ChecksumAlgorithm.SHA256: Sha256Digestor(),
    ChecksumAlgorithm.NONE: UndigestedDigestor(),
}

_FAMILIES: Dict[AlgorithmKind, Type[Enum]] = {
    AlgorithmKind.COMPRESSION: CompressionAlgorithm,
    AlgorithmKind.ENCODING: EncodingAlgorithm,
    AlgorithmKind.CHECKSUM: ChecksumAlgorithm,
}


def resolve(kind: AlgorithmKind, wire_id: Optional[str]) -> Algorithm:
    """Resolve a wire identifier to an algorithm member.

    Matching is case-insensitive. There is no default: a blank or
    missing identifier is rejected like an unknown one.

    Args:
        kind: Algorithm family to search
        wire_id: Identifier read from message attributes

    Returns:
        The matching algorithm member

    Raises:
        UnsupportedAlgorithmError: If no member matches
    """
    if wire_id is None or not wire_id.strip():
        raise UnsupportedAlgorithmError(kind, wire_id)
    wanted = wire_id.lower()
    for member in _FAMILIES[kind]:
        if member.value == wanted:
            return member
    raise UnsupportedAlgorithmError(kind, wire_id)


def effective_encoding(
    compression: CompressionAlgorithm,
    encoding: EncodingAlgorithm,
) -> EncodingAlgorithm:
    """Encoding actually applied for a compression/encoding pair.

    Compressed bytes are not text, so a compressed payload is never
    carried unencoded: NONE is replaced by BASE64_URL whenever
    compression is enabled.
    """
    if encoding is EncodingAlgorithm.NONE and compression is not CompressionAlgorithm.NONE:
        return EncodingAlgorithm.BASE64_URL
    return encoding


__all__ = [
    "AlgorithmKind",
    "CompressionAlgorithm",
    "EncodingAlgorithm",
    "ChecksumAlgorithm",
    "resolve",
    "effective_encoding",
]
