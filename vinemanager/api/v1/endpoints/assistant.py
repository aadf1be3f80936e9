from dataclasses import asdict

from fastapi import APIRouter, status

from vinemanager.core.config import settings
from vinemanager.core.deps import CurrentStore
from vinemanager.models.message import Message, MessageRole
from vinemanager.schemas.assistant import ExchangeRead, MessageCreate, MessageRead
from vinemanager.schemas.display import DisplayRead
from vinemanager.services.assistant import QUICK_QUESTIONS, send_message
from vinemanager.services.display import ASSISTANT_CATEGORY_DISPLAY, describe

router = APIRouter(prefix="/assistant", tags=["assistant"])


def _message_to_read(message: Message) -> MessageRead:
    display = None
    if message.role == MessageRole.assistant:
        display = DisplayRead.model_validate(describe(ASSISTANT_CATEGORY_DISPLAY, message.category))
    return MessageRead(**asdict(message), display=display)


@router.get("/messages", response_model=list[MessageRead])
async def list_messages(store: CurrentStore):
    return [_message_to_read(m) for m in store.messages]


@router.post("/messages", response_model=ExchangeRead, status_code=status.HTTP_201_CREATED)
async def post_message(data: MessageCreate, store: CurrentStore):
    message, reply = await send_message(store, data.content, settings.ASSISTANT_REPLY_DELAY_SECONDS)
    return ExchangeRead(message=_message_to_read(message), reply=_message_to_read(reply))


@router.get("/quick-questions", response_model=list[str])
async def quick_questions():
    return QUICK_QUESTIONS
