"""RoadCodec Attributes - Codec Metadata Protocol.

Codec metadata travels as message attributes next to the payload:

    x-codec-compression-alg   compression id (always written)
    x-codec-encoding-alg      effective encoding id (always written)
    x-codec-checksum-alg      checksum id (only with checksums)
    x-codec-checksum          hex digest of the raw payload (only with checksums)
    x-codec-version           protocol version, Number (always written)
    x-codec-raw-length        raw payload length in bytes, Number (always written)

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

from roadcodec_core.errors import (
    ChecksumMismatchError,
    MissingAttributeError,
    UnsupportedAlgorithmError,
    UnsupportedVersionError,
)
from roadcodec_core.protocol.algorithms import (
    AlgorithmKind,
    ChecksumAlgorithm,
    CompressionAlgorithm,
    EncodingAlgorithm,
    effective_encoding,
)
from roadcodec_core.protocol.codec import CodecConfiguration, PayloadCodec
from roadcodec_core.queue.message import MessageAttributeValue

logger = logging.getLogger(__name__)

COMPRESSION_ALG = "x-codec-compression-alg"
ENCODING_ALG = "x-codec-encoding-alg"
CHECKSUM_ALG = "x-codec-checksum-alg"
CHECKSUM = "x-codec-checksum"
VERSION = "x-codec-version"
RAW_LENGTH = "x-codec-raw-length"

RESERVED_ATTRIBUTES = frozenset({
    COMPRESSION_ALG,
    ENCODING_ALG,
    CHECKSUM_ALG,
    CHECKSUM,
    VERSION,
    RAW_LENGTH,
})

PROTOCOL_VERSION = 1

Attributes = Mapping[str, MessageAttributeValue]


def attribute_value(attributes: Attributes, name: str) -> Optional[str]:
    """Get an attribute's string value, or None when absent."""
    value = attributes.get(name)
    if value is None:
        return None
    return value.string_value


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def required_attribute(attributes: Attributes, name: str) -> str:
    """Get a non-blank attribute value.

    Raises:
        MissingAttributeError: If the attribute is absent or blank
    """
    value = attribute_value(attributes, name)
    if _is_blank(value):
        raise MissingAttributeError(name)
    return value


def has_codec_attributes(attributes: Attributes) -> bool:
    """Check whether a message was already transformed."""
    return (
        not _is_blank(attribute_value(attributes, COMPRESSION_ALG))
        or not _is_blank(attribute_value(attributes, ENCODING_ALG))
    )


def strip_codec_attributes(attributes: Attributes) -> Dict[str, MessageAttributeValue]:
    """Copy of attributes without the reserved codec names."""
    return {
        name: value
        for name, value in attributes.items()
        if name not in RESERVED_ATTRIBUTES
    }


@dataclass(frozen=True)
class CodecMetadata:
    """Codec metadata of a single message.

    ``encoding`` is always the effective encoding. ``checksum`` is the
    algorithm written outbound; inbound metadata leaves it at NONE
    because checksum verification is driven by the receiver's own
    configuration (see ``verify_checksum``).

    Attributes:
        compression: Compression algorithm
        encoding: Effective encoding algorithm
        checksum: Checksum algorithm
        version: Protocol version
    """

    compression: CompressionAlgorithm
    encoding: EncodingAlgorithm
    checksum: ChecksumAlgorithm = ChecksumAlgorithm.NONE
    version: int = PROTOCOL_VERSION

    @classmethod
    def for_outbound(cls, configuration: CodecConfiguration) -> "CodecMetadata":
        """Metadata for a sender using the given configuration."""
        return cls(
            compression=configuration.compression,
            encoding=effective_encoding(configuration.compression, configuration.encoding),
            checksum=configuration.checksum,
        )

    def codec(self) -> PayloadCodec:
        """Build the codec matching this metadata."""
        return PayloadCodec(self.compression, self.encoding)

    def to_attributes(self, payload: bytes) -> Dict[str, MessageAttributeValue]:
        """Build the codec attributes for a raw payload.

        Args:
            payload: Raw bytes, before compression and encoding

        Returns:
            Attribute map holding only codec attributes
        """
        attributes = {
            COMPRESSION_ALG: MessageAttributeValue.string(self.compression.id),
            ENCODING_ALG: MessageAttributeValue.string(self.encoding.id),
            VERSION: MessageAttributeValue.number(self.version),
            RAW_LENGTH: MessageAttributeValue.number(len(payload)),
        }
        if self.checksum.enabled:
            attributes[CHECKSUM_ALG] = MessageAttributeValue.string(self.checksum.id)
            attributes[CHECKSUM] = MessageAttributeValue.string(self.checksum.digestor.checksum(payload))
        return attributes

    @classmethod
    def from_attributes(cls, attributes: Attributes) -> Optional["CodecMetadata"]:
        """Read and validate inbound codec metadata.

        Returns:
            None if the message carries no codec attributes at all

        Raises:
            MissingAttributeError: If only one algorithm attribute is set
            UnsupportedAlgorithmError: On unknown ids, or compression
                without encoding
            UnsupportedVersionError: On a version other than ours
        """
        compression_value = attribute_value(attributes, COMPRESSION_ALG)
        encoding_value = attribute_value(attributes, ENCODING_ALG)
        if compression_value is None and encoding_value is None:
            return None
        if _is_blank(compression_value):
            raise MissingAttributeError(COMPRESSION_ALG)
        if _is_blank(encoding_value):
            raise MissingAttributeError(ENCODING_ALG)

        compression = CompressionAlgorithm.from_id(compression_value)
        encoding = EncodingAlgorithm.from_id(encoding_value)
        if compression is not CompressionAlgorithm.NONE and encoding is EncodingAlgorithm.NONE:
            # never produced by an outbound path, see effective_encoding
            raise UnsupportedAlgorithmError(AlgorithmKind.ENCODING, encoding_value)

        version = attribute_value(attributes, VERSION)
        if _is_blank(version):
            logger.debug(f"No codec version attribute, assuming version {PROTOCOL_VERSION}")
        elif version != str(PROTOCOL_VERSION):
            raise UnsupportedVersionError(version)

        return cls(compression=compression, encoding=encoding)


def verify_checksum(
    attributes: Attributes,
    algorithm: ChecksumAlgorithm,
    payload: bytes,
) -> None:
    """Verify the stored digest against a restored payload.

    Args:
        attributes: Inbound message attributes
        algorithm: The receiver's configured checksum algorithm
        payload: Raw bytes after decoding and decompression

    Raises:
        MissingAttributeError: If checksum attributes are absent or blank
        UnsupportedAlgorithmError: If the sender used another algorithm
        ChecksumMismatchError: If the digests differ
    """
    algorithm_value = required_attribute(attributes, CHECKSUM_ALG)
    expected = required_attribute(attributes, CHECKSUM)
    if ChecksumAlgorithm.from_id(algorithm_value) is not algorithm:
        raise UnsupportedAlgorithmError(AlgorithmKind.CHECKSUM, algorithm_value)
    if algorithm.digestor.checksum(payload) != expected:
        raise ChecksumMismatchError()


__all__ = [
    "COMPRESSION_ALG",
    "ENCODING_ALG",
    "CHECKSUM_ALG",
    "CHECKSUM",
    "VERSION",
    "RAW_LENGTH",
    "RESERVED_ATTRIBUTES",
    "PROTOCOL_VERSION",
    "CodecMetadata",
    "attribute_value",
    "required_attribute",
    "has_codec_attributes",
    "strip_codec_attributes",
    "verify_checksum",
]
