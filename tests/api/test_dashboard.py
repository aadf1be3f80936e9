from httpx import AsyncClient


async def test_dashboard(client: AsyncClient):
    res = await client.get("/api/v1/dashboard")
    assert res.status_code == 200
    data = res.json()
    assert data["total_plots"] == 3
    assert data["active_plots"] == 2
    assert data["total_area"] == 7.5
    assert data["pending_tasks"] == 2
    assert data["completed_tasks"] == 1
    assert data["high_priority_tasks"] == 1
    assert data["overdue_tasks"] == 2
    assert data["schedules"] == 1
    assert data["temperature_c"] == 22


async def test_dashboard_recomputes_after_changes(client: AsyncClient):
    await client.post("/api/v1/tasks", json={"title": "Net the rows", "due_date": "2099-01-01", "priority": "high"})
    await client.post("/api/v1/tasks/2/toggle")
    data = (await client.get("/api/v1/dashboard")).json()
    assert data["pending_tasks"] == 2
    assert data["completed_tasks"] == 2
    assert data["high_priority_tasks"] == 2
    assert data["pending_tasks"] + data["completed_tasks"] == 4


async def test_health(client: AsyncClient):
    res = await client.get("/api/health")
    assert res.json() == {"status": "ok"}
