"""RoadCodec Encoder - Transport-Safe Payload Encoding.

Encoders sit on the boundary between payload bytes and the string
body a queue carries.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import base64
import binascii
from abc import ABC, abstractmethod

from roadcodec_core.errors import CorruptPayloadError


class Encoder(ABC):
    """Abstract payload encoder."""

    @abstractmethod
    def encode(self, data: bytes) -> str:
        """Encode bytes to a transportable string."""
        pass

    @abstractmethod
    def decode(self, encoded: str) -> bytes:
        """Decode a transportable string back to bytes.

        Raises:
            CorruptPayloadError: If the string is malformed
        """
        pass

    @property
    @abstractmethod
    def algorithm_id(self) -> str:
        """Get the wire identifier."""
        pass


class _Base64Encoder(Encoder):
    """Padded base64 with strict decoding."""

    altchars: bytes = b"+/"
    foreign: bytes = b""

    def encode(self, data: bytes) -> str:
        return base64.b64encode(data, altchars=self.altchars).decode("ascii")

    def decode(self, encoded: str) -> bytes:
        try:
            raw = encoded.encode("ascii")
            # b64decode maps altchars onto "+/" before validating
            if any(c in raw for c in self.foreign):
                raise binascii.Error("Non-base64 digit found")
            return base64.b64decode(raw, altchars=self.altchars, validate=True)
        except (binascii.Error, UnicodeEncodeError) as e:
            raise CorruptPayloadError("Invalid base64 payload") from e


class Base64UrlEncoder(_Base64Encoder):
    """URL-safe base64 ("-" and "_")."""

    altchars = b"-_"
    foreign = b"+/"

    @property
    def algorithm_id(self) -> str:
        return "base64"


class Base64StdEncoder(_Base64Encoder):
    """Standard base64 ("+" and "/")."""

    @property
    def algorithm_id(self) -> str:
        return "base64-std"


class UnencodedEncoder(Encoder):
    """Carries payload bytes as UTF-8 text."""

    def encode(self, data: bytes) -> str:
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise CorruptPayloadError("Invalid UTF-8 payload") from e

    def decode(self, encoded: str) -> bytes:
        return encoded.encode("utf-8")

    @property
    def algorithm_id(self) -> str:
        return "none"


__all__ = ["Encoder", "Base64UrlEncoder", "Base64StdEncoder", "UnencodedEncoder"]
