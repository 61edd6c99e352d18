"""
WhatsApp message model.

Messages are immutable once created. Threads are displayed oldest first;
"most recent" lookups sort newest first.
"""

from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from .timestamps import LocalTimestamp, local_now


class MessageDirection(str, Enum):
    """Who sent the message, relative to the business."""

    INCOMING = 'INCOMING'
    OUTGOING = 'OUTGOING'


class MessageType(str, Enum):
    """Message payload kind. VOICE is reserved for voice notes."""

    TEXT = 'TEXT'
    VOICE = 'VOICE'


class Message(BaseModel):
    """A single message in a customer conversation."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid4().hex, description='Message identifier')
    business_id: str = Field(..., description='Owning business (tenant) identifier')
    customer_id: str = Field(..., description='Conversation the message belongs to')

    direction: MessageDirection = Field(..., description='INCOMING or OUTGOING')
    content: str = Field(..., description='Text content')
    message_type: MessageType = Field(default=MessageType.TEXT)

    timestamp: LocalTimestamp = Field(default_factory=local_now)

    def as_transcript_line(self) -> str:
        """Render as a `DIRECTION: content` line for prompts."""
        return f'{self.direction.value}: {self.content}'
