from httpx import AsyncClient


async def test_history_starts_with_greeting(client: AsyncClient):
    res = await client.get("/api/v1/assistant/messages")
    assert res.status_code == 200
    data = res.json()
    assert len(data) == 1
    assert data[0]["role"] == "assistant"
    assert data[0]["category"] == "general"
    assert data[0]["display"]["icon"] == "lightbulb"


async def test_send_message(client: AsyncClient):
    res = await client.post("/api/v1/assistant/messages", json={"content": "How do I identify powdery mildew?"})
    assert res.status_code == 201
    data = res.json()
    assert data["message"]["role"] == "user"
    assert data["message"]["display"] is None
    assert data["reply"]["category"] == "disease"
    assert "Powdery Mildew" in data["reply"]["content"]

    res = await client.get("/api/v1/assistant/messages")
    assert [m["role"] for m in res.json()] == ["assistant", "user", "assistant"]


async def test_blank_message_rejected(client: AsyncClient):
    res = await client.post("/api/v1/assistant/messages", json={"content": "   "})
    assert res.status_code == 422


async def test_quick_questions(client: AsyncClient):
    res = await client.get("/api/v1/assistant/quick-questions")
    assert res.status_code == 200
    assert len(res.json()) == 5
