"""RoadCodec Checksum - Payload Digests.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import hashlib
from abc import ABC, abstractmethod

from roadcodec_core.errors import CodecError


class Digestor(ABC):
    """Abstract payload digestor."""

    @abstractmethod
    def checksum(self, data: bytes) -> str:
        """Compute a lowercase hex digest."""
        pass

    @property
    @abstractmethod
    def algorithm_id(self) -> str:
        """Get the wire identifier."""
        pass


class Md5Digestor(Digestor):
    """MD5 digest for lightweight integrity checks."""

    def checksum(self, data: bytes) -> str:
        return hashlib.md5(data, usedforsecurity=False).hexdigest()

    @property
    def algorithm_id(self) -> str:
        return "md5"


class Sha256Digestor(Digestor):
    """SHA-256 digest."""

    def checksum(self, data: bytes) -> str:
        return hashlib.sha256(data).hexdigest()

    @property
    def algorithm_id(self) -> str:
        return "sha256"


class UndigestedDigestor(Digestor):
    """Placeholder for a disabled checksum.

    Callers check that checksums are enabled before asking for one.
    """

    def checksum(self, data: bytes) -> str:
        raise CodecError("Checksum algorithm is none")

    @property
    def algorithm_id(self) -> str:
        return "none"


__all__ = ["Digestor", "Md5Digestor", "Sha256Digestor", "UndigestedDigestor"]
