"""RoadCodec Errors - Codec Failure Taxonomy.

Every failure is raised at the point of detection and is never retried.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import Any, Optional


class CodecError(Exception):
    """Base class for payload codec failures."""


class UnsupportedAlgorithmError(CodecError):
    """Unknown or disallowed algorithm identifier.

    Attributes:
        kind: Algorithm family (an ``AlgorithmKind`` member)
        wire_id: The offending wire identifier, as received
    """

    def __init__(self, kind: Any, wire_id: Optional[str]):
        self.kind = kind
        self.wire_id = wire_id
        super().__init__(f"Unsupported {kind.label}: {wire_id}")


class MissingAttributeError(CodecError):
    """A required codec attribute is absent or blank."""

    def __init__(self, attribute: str):
        self.attribute = attribute
        super().__init__(f"Missing required attribute: {attribute}")


class UnsupportedVersionError(CodecError):
    """Protocol version attribute does not match the expected constant."""

    def __init__(self, version: str):
        self.version = version
        super().__init__(f"Unsupported codec version: {version}")


class CorruptPayloadError(CodecError):
    """Payload bytes could not be decoded or decompressed."""


class ChecksumMismatchError(CodecError):
    """Recomputed digest differs from the stored one."""

    def __init__(self, message: str = "Payload checksum mismatch"):
        super().__init__(message)


__all__ = [
    "CodecError",
    "UnsupportedAlgorithmError",
    "MissingAttributeError",
    "UnsupportedVersionError",
    "CorruptPayloadError",
    "ChecksumMismatchError",
]
