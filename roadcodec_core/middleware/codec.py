"""RoadCodec Codec Middleware - Payload Transform Gateway.

Outbound, the middleware checksums the raw body, compresses and
encodes it, and tags the message with codec attributes. Inbound, it
validates those attributes and restores the original body.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from roadcodec_core.errors import CodecError, CorruptPayloadError
from roadcodec_core.middleware.pipeline import BaseMiddleware
from roadcodec_core.protocol.attributes import (
    CodecMetadata,
    has_codec_attributes,
    strip_codec_attributes,
    verify_checksum,
)
from roadcodec_core.protocol.codec import CodecConfiguration
from roadcodec_core.queue.message import Message

logger = logging.getLogger(__name__)


class PayloadCodecMiddleware(BaseMiddleware):
    """Payload compression, encoding and checksum middleware.

    A message is transformed at most once: messages already carrying
    codec attributes are sent untouched. Messages without codec
    attributes are received untouched.

    Args:
        configuration: Algorithms for outbound messages and the checksum
            required on inbound ones
        strip_attributes: Remove codec attributes from restored messages
    """

    def __init__(
        self,
        configuration: Optional[CodecConfiguration] = None,
        strip_attributes: bool = False,
    ):
        self.configuration = configuration or CodecConfiguration()
        self.strip_attributes = strip_attributes
        self._outbound = CodecMetadata.for_outbound(self.configuration)
        self._codec = self._outbound.codec()

    def encode_message(self, message: Message) -> Message:
        """Transform an outbound message."""
        if has_codec_attributes(message.attributes):
            logger.debug(f"Message {message.id} already carries codec attributes, skipping")
            return message

        payload = message.body.encode("utf-8")
        # reserved names left by the caller never reach the wire
        attributes = strip_codec_attributes(message.attributes)
        attributes.update(self._outbound.to_attributes(payload))
        body = self._codec.encode(payload)
        logger.debug(
            f"Encoded message {message.id}: {len(payload)} -> {len(body)} bytes "
            f"({self._outbound.compression.id}/{self._outbound.encoding.id})"
        )
        return message.with_body(body, attributes)

    def encode_batch(self, messages: Iterable[Message]) -> List[Message]:
        """Transform outbound batch entries independently."""
        return [self.encode_message(m) for m in messages]

    def decode_message(self, message: Message) -> Message:
        """Restore an inbound message.

        Raises:
            CodecError: If metadata or payload fail validation
        """
        try:
            return self._decode(message)
        except CodecError as e:
            logger.warning(f"Rejected message {message.id}: {e}")
            raise

    def decode_batch(self, messages: Iterable[Message]) -> List[Message]:
        """Restore received messages independently."""
        return [self.decode_message(m) for m in messages]

    def _decode(self, message: Message) -> Message:
        metadata = CodecMetadata.from_attributes(message.attributes)
        if metadata is None:
            logger.debug(f"Message {message.id} has no codec attributes, passing through")
            return message

        payload = metadata.codec().decode(message.body)
        if self.configuration.checksum_enabled:
            verify_checksum(message.attributes, self.configuration.checksum, payload)

        try:
            body = payload.decode("utf-8")
        except UnicodeDecodeError as e:
            raise CorruptPayloadError("Invalid UTF-8 payload") from e

        attributes = message.attributes
        if self.strip_attributes:
            attributes = strip_codec_attributes(attributes)
        logger.debug(f"Decoded message {message.id} ({metadata.compression.id}/{metadata.encoding.id})")
        return message.with_body(body, attributes)

    def on_send(self, message: Message) -> Optional[Message]:
        return self.encode_message(message)

    def on_receive(self, message: Message) -> Optional[Message]:
        return self.decode_message(message)


__all__ = ["PayloadCodecMiddleware"]
