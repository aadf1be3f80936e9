from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from vinemanager.models.message import AssistantCategory, MessageRole
from vinemanager.schemas.display import DisplayRead


class MessageCreate(BaseModel):
    content: str

    @field_validator("content")
    @classmethod
    def check_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Message cannot be empty")
        return value


class MessageRead(BaseModel):
    id: str
    role: MessageRole
    content: str
    timestamp: datetime
    category: Optional[AssistantCategory] = None
    display: Optional[DisplayRead] = None


class ExchangeRead(BaseModel):
    message: MessageRead
    reply: MessageRead
