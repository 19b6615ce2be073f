"""Customer notification and order chat models."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field


class Notification(BaseModel):
    """A notification sent to a user."""

    model_config = ConfigDict(frozen=True)

    user_id: str = Field(..., description="Recipient user identifier")
    message: str = Field(..., description="Notification text")
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class ChatMessage(BaseModel):
    """A message in an order's chat thread."""

    model_config = ConfigDict(frozen=True)

    order_id: str = Field(..., description="Order the thread belongs to")
    sender: str = Field(..., description="Display name of the sender")
    text: str = Field(..., description="Message text", min_length=1)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
