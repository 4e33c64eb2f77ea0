import pytest


@pytest.mark.asyncio
async def test_service_crud(api_client) -> None:
    created = await api_client.post("/api/v1/services", json={"name": "Filling", "duration": 60, "price": 300})
    assert created.status_code == 201
    service = created.json()
    assert service["color"] == "#3B82F6"

    updated = await api_client.put(
        f"/api/v1/services/{service['id']}",
        json={"name": "Filling", "duration": 50, "price": 320, "color": "#EF4444"},
    )
    assert updated.json()["duration"] == 50

    listing = await api_client.get("/api/v1/services")
    assert [s["name"] for s in listing.json()] == ["Filling"]

    assert (await api_client.delete(f"/api/v1/services/{service['id']}")).status_code == 204
    assert (await api_client.delete(f"/api/v1/services/{service['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_service_validation(api_client) -> None:
    response = await api_client.post("/api/v1/services", json={"name": "X", "duration": 0, "price": -1})

    assert response.status_code == 422

    too_long = await api_client.post("/api/v1/services", json={"name": "Full-day surgery", "duration": 1441, "price": 10})
    assert too_long.status_code == 422


@pytest.mark.asyncio
async def test_client_crud_and_detail(api_client) -> None:
    created = await api_client.post("/api/v1/clients", json={"name": "Joao Souza", "email": "", "phone": "555-0199"})
    assert created.status_code == 201
    client = created.json()
    assert client["email"] is None

    await api_client.post(
        "/api/v1/tasks",
        json={"title": "Checkup", "start_time": "2024-06-10T09:00", "client_id": client["id"]},
    )
    await api_client.post(
        "/api/v1/tasks",
        json={"title": "Follow-up", "start_time": "2024-06-17T09:00", "client_id": client["id"]},
    )

    detail = await api_client.get(f"/api/v1/clients/{client['id']}")
    assert detail.status_code == 200
    assert [t["title"] for t in detail.json()["tasks"]] == ["Follow-up", "Checkup"]

    renamed = await api_client.put(f"/api/v1/clients/{client['id']}", json={"name": "Joao P. Souza"})
    assert renamed.json()["name"] == "Joao P. Souza"

    assert (await api_client.delete(f"/api/v1/clients/{client['id']}")).status_code == 204
    assert (await api_client.get(f"/api/v1/clients/{client['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_client_rejects_short_name_and_bad_email(api_client) -> None:
    short = await api_client.post("/api/v1/clients", json={"name": "J"})
    bad_email = await api_client.post("/api/v1/clients", json={"name": "Joao", "email": "not-an-email"})

    assert short.status_code == 422
    assert bad_email.status_code == 422
