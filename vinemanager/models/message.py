from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class MessageRole(str, Enum):
    user = "user"
    assistant = "assistant"


class AssistantCategory(str, Enum):
    general = "general"
    disease = "disease"
    irrigation = "irrigation"
    pest = "pest"
    nutrition = "nutrition"
    pruning = "pruning"


@dataclass
class Message:
    id: str
    role: MessageRole
    content: str
    timestamp: datetime
    category: Optional[AssistantCategory] = None
