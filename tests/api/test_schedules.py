from httpx import AsyncClient


async def test_seeded_schedule_has_computed_date(client: AsyncClient):
    res = await client.get("/api/v1/schedules/1")
    assert res.status_code == 200
    data = res.json()
    assert data["title"] == "Fungicide Application"
    assert data["schedule_type"] == "spraying"
    assert data["scheduled_date"] == "2024-02-14"
    assert data["display"]["icon"] == "sparkles"


async def test_create_schedule(client: AsyncClient):
    res = await client.post("/api/v1/schedules", json={
        "plot_id": "2",
        "schedule_type": "fertigation",
        "title": "Bloom fertigation",
        "days_from_pruning": 15,
        "pruning_type": "winter",
        "description": "Potassium nitrate",
    })
    assert res.status_code == 201
    data = res.json()
    assert data["scheduled_date"] == "2024-02-04"
    assert data["display"]["icon"] == "droplets"


async def test_create_schedule_zero_offset(client: AsyncClient):
    res = await client.post("/api/v1/schedules", json={
        "plot_id": "1", "title": "Shoot thinning", "days_from_pruning": 0, "pruning_type": "summer",
    })
    assert res.status_code == 201
    assert res.json()["scheduled_date"] == "2024-06-15"


async def test_schedule_for_plot_without_pruning_date(client: AsyncClient):
    res = await client.post("/api/v1/schedules", json={
        "plot_id": "3", "schedule_type": "tasks", "title": "Tie canes", "days_from_pruning": 7,
    })
    assert res.status_code == 201
    assert res.json()["scheduled_date"] is None


async def test_create_schedule_unknown_plot(client: AsyncClient):
    res = await client.post("/api/v1/schedules", json={
        "plot_id": "404", "title": "Spray", "days_from_pruning": 10,
    })
    assert res.status_code == 422


async def test_create_schedule_requires_title_and_offset(client: AsyncClient):
    res = await client.post("/api/v1/schedules", json={"plot_id": "1", "title": "", "days_from_pruning": 10})
    assert res.status_code == 422
    res = await client.post("/api/v1/schedules", json={"plot_id": "1", "title": "Spray", "days_from_pruning": "soon"})
    assert res.status_code == 422


async def test_list_schedules_by_plot(client: AsyncClient):
    await client.post("/api/v1/schedules", json={"plot_id": "2", "title": "Spray", "days_from_pruning": 10})

    res = await client.get("/api/v1/schedules", params={"plot_id": "2"})
    assert res.status_code == 200
    assert [s["plot_id"] for s in res.json()] == ["2"]

    res = await client.get("/api/v1/schedules")
    assert len(res.json()) == 2

    res = await client.get("/api/v1/plots/1/schedules")
    assert [s["title"] for s in res.json()] == ["Fungicide Application"]


async def test_plot_schedules_unknown_plot(client: AsyncClient):
    res = await client.get("/api/v1/plots/999/schedules")
    assert res.status_code == 404


async def test_compute_date_year_rollover(client: AsyncClient):
    await client.patch("/api/v1/plots/2", json={"winter_pruning_date": "2024-12-20"})
    res = await client.get("/api/v1/schedules/compute-date", params={
        "plot_id": "2", "days_from_pruning": 15, "pruning_type": "winter",
    })
    assert res.status_code == 200
    assert res.json()["scheduled_date"] == "2025-01-04"


async def test_compute_date_unknown_plot_is_null(client: AsyncClient):
    res = await client.get("/api/v1/schedules/compute-date", params={
        "plot_id": "nope", "days_from_pruning": 15,
    })
    assert res.status_code == 200
    assert res.json()["scheduled_date"] is None


async def test_schedule_date_tracks_plot_edits(client: AsyncClient):
    await client.patch("/api/v1/plots/1", json={"winter_pruning_date": "2024-01-20"})
    res = await client.get("/api/v1/schedules/1")
    assert res.json()["scheduled_date"] == "2024-02-19"


async def test_get_unknown_schedule(client: AsyncClient):
    res = await client.get("/api/v1/schedules/999")
    assert res.status_code == 404
