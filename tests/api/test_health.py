"""Health Probes — liveness always 200, readiness reports user count."""


async def test_health_check(client):
    res = await client.get("/api/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"
    assert res.json()["service"] == "apicrud"


async def test_readiness_reports_user_count(client, valid_body):
    await client.post("/api/users", json=valid_body)
    res = await client.get("/api/health/ready")
    assert res.status_code == 200
    assert res.json() == {
        "status": "ready", "checks": {"store": "healthy"}, "users": 1,
    }
