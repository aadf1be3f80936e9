import asyncio

import pytest

from vinemanager.db.store import VineyardStore
from vinemanager.models.message import AssistantCategory, MessageRole
from vinemanager.services.assistant import generate_response, send_message


@pytest.mark.parametrize(
    "message, category",
    [
        ("How do I identify powdery MILDEW?", AssistantCategory.disease),
        ("When should I water my vines?", AssistantCategory.irrigation),
        ("Spider mites everywhere", AssistantCategory.pest),
        ("How do I prune young vines?", AssistantCategory.pruning),
        ("What are signs of nutrient deficiency?", AssistantCategory.nutrition),
        ("When is harvest?", AssistantCategory.general),
    ],
)
def test_keyword_categories(message, category):
    _, matched = generate_response(message)
    assert matched == category


def test_first_matching_rule_wins():
    # "rot" (disease) is checked before "water" (irrigation)
    _, category = generate_response("Is root rot caused by too much water?")
    assert category == AssistantCategory.disease


def test_substring_matching_is_literal():
    # "cut" inside "execute" still selects the pruning rule
    _, category = generate_response("how do I execute my plan")
    assert category == AssistantCategory.pruning


async def test_send_message_appends_both_sides():
    store = VineyardStore()
    message, reply = await send_message(store, "Aphids on the leaves", delay=0)
    assert store.messages == [message, reply]
    assert message.role == MessageRole.user
    assert reply.role == MessageRole.assistant
    assert reply.category == AssistantCategory.pest


async def test_reply_survives_caller_cancellation():
    store = VineyardStore()
    pending = asyncio.create_task(send_message(store, "fungus", delay=0.05))
    await asyncio.sleep(0.01)
    pending.cancel()
    with pytest.raises(asyncio.CancelledError):
        await pending

    await asyncio.sleep(0.1)
    assert [m.role for m in store.messages] == [MessageRole.user, MessageRole.assistant]
    assert store.messages[-1].category == AssistantCategory.disease
