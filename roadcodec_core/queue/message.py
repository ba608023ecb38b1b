"""RoadCodec Message - Queue Message Types.

This module defines the message structures exchanged with a queue
transport: a string body plus a map of typed attributes.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import dataclasses
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

STRING_TYPE = "String"
NUMBER_TYPE = "Number"


@dataclass(frozen=True)
class MessageAttributeValue:
    """A typed message attribute.

    Numbers travel as their decimal string, the way queue services
    carry them.

    Attributes:
        data_type: "String" or "Number"
        string_value: The value as text
    """

    data_type: str
    string_value: str

    def __post_init__(self):
        if self.data_type not in (STRING_TYPE, NUMBER_TYPE):
            raise ValueError(f"Unsupported attribute data type: {self.data_type}")

    @classmethod
    def string(cls, value: str) -> "MessageAttributeValue":
        """Create a String attribute."""
        return cls(STRING_TYPE, value)

    @classmethod
    def number(cls, value: int) -> "MessageAttributeValue":
        """Create a Number attribute."""
        return cls(NUMBER_TYPE, str(value))

    def to_dict(self) -> Dict[str, str]:
        return {"data_type": self.data_type, "string_value": self.string_value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MessageAttributeValue":
        return cls(
            data_type=data.get("data_type", STRING_TYPE),
            string_value=str(data.get("string_value", "")),
        )


@dataclass
class Message:
    """A queue message.

    Attributes:
        id: Unique message identifier
        body: Message payload as text
        attributes: Typed message attributes
        queue_name: Target queue name
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    body: str = ""
    attributes: Dict[str, MessageAttributeValue] = field(default_factory=dict)
    queue_name: Optional[str] = None

    @classmethod
    def create(
        cls,
        body: str,
        queue_name: Optional[str] = None,
        attributes: Optional[Dict[str, str]] = None,
    ) -> "Message":
        """Create a new message.

        Args:
            body: Message payload
            queue_name: Target queue name
            attributes: Plain string attributes

        Returns:
            New message instance
        """
        typed = {
            name: MessageAttributeValue.string(value)
            for name, value in (attributes or {}).items()
        }
        return cls(body=body, attributes=typed, queue_name=queue_name)

    def attribute(self, name: str) -> Optional[str]:
        """Get an attribute's string value."""
        value = self.attributes.get(name)
        if value is None:
            return None
        return value.string_value

    def with_body(
        self,
        body: str,
        attributes: Optional[Dict[str, MessageAttributeValue]] = None,
    ) -> "Message":
        """Copy of this message with a new body (and attributes)."""
        return dataclasses.replace(
            self,
            body=body,
            attributes=dict(self.attributes if attributes is None else attributes),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize message to dictionary."""
        return {
            "id": self.id,
            "body": self.body,
            "attributes": {name: value.to_dict() for name, value in self.attributes.items()},
            "queue_name": self.queue_name,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Message":
        """Deserialize message from dictionary."""
        return cls(
            id=data.get("id", str(uuid.uuid4())),
            body=data.get("body", ""),
            attributes={
                name: MessageAttributeValue.from_dict(value)
                for name, value in data.get("attributes", {}).items()
            },
            queue_name=data.get("queue_name"),
        )

    def __repr__(self) -> str:
        return f"Message(id={self.id!r}, queue={self.queue_name!r}, attributes={sorted(self.attributes)!r})"


__all__ = [
    "Message",
    "MessageAttributeValue",
    "STRING_TYPE",
    "NUMBER_TYPE",
]
