"""RoadCodec Compressor - Payload Compression.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import gzip
import zlib
from abc import ABC, abstractmethod

import snappy
import zstandard

from roadcodec_core.errors import CorruptPayloadError


class Compressor(ABC):
    """Abstract payload compressor.

    Implementations are stateless and may be shared between threads.
    """

    @abstractmethod
    def compress(self, data: bytes) -> bytes:
        """Compress data."""
        pass

    @abstractmethod
    def decompress(self, data: bytes) -> bytes:
        """Decompress data.

        Raises:
            CorruptPayloadError: If data is not a valid stream
        """
        pass

    @property
    @abstractmethod
    def algorithm_id(self) -> str:
        """Get the wire identifier."""
        pass


class GzipCompressor(Compressor):
    """Gzip compressor."""

    def __init__(self, level: int = 9):
        self.level = level

    def compress(self, data: bytes) -> bytes:
        return gzip.compress(data, compresslevel=self.level)

    def decompress(self, data: bytes) -> bytes:
        try:
            return gzip.decompress(data)
        except (OSError, EOFError, zlib.error) as e:
            raise CorruptPayloadError("Invalid gzip payload") from e

    @property
    def algorithm_id(self) -> str:
        return "gzip"


class ZstdCompressor(Compressor):
    """Zstandard compressor."""

    def __init__(self, level: int = 3):
        self.level = level

    def compress(self, data: bytes) -> bytes:
        # zstandard contexts are not thread-safe, build one per call
        return zstandard.ZstdCompressor(level=self.level).compress(data)

    def decompress(self, data: bytes) -> bytes:
        try:
            return zstandard.ZstdDecompressor().decompress(data)
        except zstandard.ZstdError as e:
            raise CorruptPayloadError("Invalid zstd payload") from e

    @property
    def algorithm_id(self) -> str:
        return "zstd"


class SnappyCompressor(Compressor):
    """Snappy compressor (fast)."""

    def compress(self, data: bytes) -> bytes:
        return snappy.compress(data)

    def decompress(self, data: bytes) -> bytes:
        try:
            return snappy.decompress(data)
        except snappy.UncompressError as e:
            raise CorruptPayloadError("Invalid snappy payload") from e

    @property
    def algorithm_id(self) -> str:
        return "snappy"


class NoCompressor(Compressor):
    """No compression (passthrough)."""

    def compress(self, data: bytes) -> bytes:
        return data

    def decompress(self, data: bytes) -> bytes:
        return data

    @property
    def algorithm_id(self) -> str:
        return "none"


__all__ = ["Compressor", "GzipCompressor", "ZstdCompressor", "SnappyCompressor", "NoCompressor"]
