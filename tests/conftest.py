import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from vinemanager.core.config import settings
from vinemanager.core.deps import get_store
from vinemanager.db.store import VineyardStore
from vinemanager.main import app
from vinemanager.tasks.seed_mock_data import seed_store


@pytest.fixture(autouse=True)
def no_simulated_delay(monkeypatch):
    monkeypatch.setattr(settings, "ASSISTANT_REPLY_DELAY_SECONDS", 0.0)
    monkeypatch.setattr(settings, "WEATHER_REFRESH_DELAY_SECONDS", 0.0)


@pytest.fixture
def store() -> VineyardStore:
    # Fresh demo vineyard per test; nothing leaks between tests
    return seed_store(VineyardStore())


@pytest_asyncio.fixture
async def client(store: VineyardStore):
    app.dependency_overrides[get_store] = lambda: store

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
