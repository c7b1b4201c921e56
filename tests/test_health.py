import pytest


@pytest.mark.asyncio
async def test_liveness(client):
    resp = await client.get("/api/v1/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


@pytest.mark.asyncio
async def test_readiness_needs_seeded_muscle_groups(client):
    resp = await client.get("/api/v1/health/ready")
    assert resp.status_code == 503
    assert resp.json()["database"] == "not seeded"


@pytest.mark.asyncio
async def test_readiness_with_seeded_database(client, muscle_groups):
    resp = await client.get("/api/v1/health/ready")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "database": "connected", "muscle_groups": len(muscle_groups)}


@pytest.mark.asyncio
async def test_root(client):
    resp = await client.get("/")
    assert resp.json()["status"] == "ok"
