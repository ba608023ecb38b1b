"""RoadCodec Codec - Compression and Encoding Pipeline.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from roadcodec_core.protocol.algorithms import (
    ChecksumAlgorithm,
    CompressionAlgorithm,
    EncodingAlgorithm,
    effective_encoding,
)


@dataclass(frozen=True)
class CodecConfiguration:
    """Codec configuration.

    Chosen once per client and never changed afterwards.

    Attributes:
        compression: Compression applied to outbound payloads
        encoding: Requested encoding (see ``effective_encoding``)
        checksum: Digest written outbound and required inbound
    """

    compression: CompressionAlgorithm = CompressionAlgorithm.NONE
    encoding: EncodingAlgorithm = EncodingAlgorithm.NONE
    checksum: ChecksumAlgorithm = ChecksumAlgorithm.MD5

    def __post_init__(self):
        if not isinstance(self.compression, CompressionAlgorithm):
            raise TypeError(f"compression must be a CompressionAlgorithm, got {self.compression!r}")
        if not isinstance(self.encoding, EncodingAlgorithm):
            raise TypeError(f"encoding must be an EncodingAlgorithm, got {self.encoding!r}")
        if not isinstance(self.checksum, ChecksumAlgorithm):
            raise TypeError(f"checksum must be a ChecksumAlgorithm, got {self.checksum!r}")

    @property
    def effective_encoding(self) -> EncodingAlgorithm:
        return effective_encoding(self.compression, self.encoding)

    @property
    def checksum_enabled(self) -> bool:
        return self.checksum.enabled

    def to_dict(self) -> Dict[str, str]:
        """Convert configuration to wire identifiers."""
        return {
            "compression": self.compression.id,
            "encoding": self.encoding.id,
            "checksum": self.checksum.id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CodecConfiguration":
        """Create configuration from wire identifiers.

        Missing keys fall back to the defaults; present keys must name
        a supported algorithm.
        """
        kwargs: Dict[str, Any] = {}
        if "compression" in data:
            kwargs["compression"] = CompressionAlgorithm.from_id(data["compression"])
        if "encoding" in data:
            kwargs["encoding"] = EncodingAlgorithm.from_id(data["encoding"])
        if "checksum" in data:
            kwargs["checksum"] = ChecksumAlgorithm.from_id(data["checksum"])
        return cls(**kwargs)


class PayloadCodec:
    """Payload codec combining compression and encoding.

    Stateless apart from the two strategies it was built with.
    """

    def __init__(
        self,
        compression: CompressionAlgorithm = CompressionAlgorithm.NONE,
        encoding: EncodingAlgorithm = EncodingAlgorithm.NONE,
    ):
        self.compression = compression
        self.encoding = effective_encoding(compression, encoding)
        self.compressor = compression.compressor
        self.encoder = self.encoding.encoder

    def encode(self, data: bytes) -> str:
        """Compress, then encode."""
        return self.encoder.encode(self.compressor.compress(data))

    def decode(self, data: str) -> bytes:
        """Decode, then decompress."""
        return self.compressor.decompress(self.encoder.decode(data))

    def __repr__(self) -> str:
        return f"PayloadCodec(compression={self.compression.id!r}, encoding={self.encoding.id!r})"


__all__ = ["CodecConfiguration", "PayloadCodec"]
