"""Integration tests for API endpoints."""

import pytest
from httpx import AsyncClient, ASGITransport

from wifi_score.api.dependencies import LinkScoringRuntime, get_link_scoring_runtime
from wifi_score.domain.models.report import HISTORY_HEADER


@pytest.fixture
def runtime():
    """Fresh scoring runtime per test."""
    return LinkScoringRuntime()


@pytest.fixture
def app(runtime):
    """App with the scoring runtime overridden."""
    from wifi_score.main import app

    app.dependency_overrides[get_link_scoring_runtime] = lambda: runtime
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


def _poll_body(rssi=-70, frequency=5180, net_id=3):
    body = {
        "measurement": {
            "rssi": rssi,
            "frequency": frequency,
            "link_speed": 433,
            "tx_success_rate": 10.0,
            "tx_retries_rate": 0.5,
            "tx_bad_rate": 0.1,
            "rx_success_rate": 15.0,
        }
    }
    if net_id is not None:
        body["net_id"] = net_id
    return body


@pytest.mark.asyncio
async def test_root_endpoint(client):
    """Root endpoint returns basic info."""
    response = await client.get("/")

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Wifi Score Report"
    assert data["status"] == "running"


@pytest.mark.asyncio
async def test_health_endpoint(client):
    """Health endpoint reports the score reporter state."""
    response = await client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["components"]["score_report"]["report_valid"] is False
    assert "X-Request-ID" in response.headers


@pytest.mark.asyncio
async def test_liveness(client):
    response = await client.get("/health/live")

    assert response.json() == {"status": "alive"}


@pytest.mark.asyncio
async def test_poll_publishes_score(client, runtime):
    """A first 5 GHz sample at -70 dBm scores the transition score + 10."""
    response = await client.post("/link/poll", json=_poll_body())

    assert response.status_code == 200
    data = response.json()
    assert data["score"] == 60
    assert data["report"] == " score=60"
    assert data["session"] == 0
    assert data["net_id"] == 3
    assert runtime.network_agent.last_sent_score == 60
    assert runtime.wifi_metrics.get_score_counts() == {60: 1}


@pytest.mark.asyncio
async def test_poll_without_agent(client, runtime):
    response = await client.post("/link/poll", json=_poll_body(net_id=None))

    assert response.status_code == 200
    assert response.json()["net_id"] == 0
    assert runtime.network_agent is None


@pytest.mark.asyncio
async def test_poll_rejects_bad_measurement(client):
    body = _poll_body()
    body["measurement"]["tx_bad_rate"] = -1.0

    response = await client.post("/link/poll", json=body)

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_poll_rejects_out_of_range_rssi(client, runtime):
    response = await client.post("/link/poll", json=_poll_body(rssi=1000))

    assert response.status_code == 422
    assert runtime.score_report.is_last_report_valid() is False


@pytest.mark.asyncio
async def test_new_net_id_gets_new_agent(client, runtime):
    await client.post("/link/poll", json=_poll_body(net_id=3))
    first_agent = runtime.network_agent

    await client.post("/link/poll", json=_poll_body(net_id=4))

    assert runtime.network_agent is not first_agent
    assert runtime.network_agent.net_id == 4


@pytest.mark.asyncio
async def test_reset_starts_new_session(client):
    await client.post("/link/poll", json=_poll_body())

    response = await client.post("/link/reset")

    assert response.json() == {"valid": False, "report": "", "session": 1}

    report = await client.get("/link/report")
    assert report.json()["valid"] is False


@pytest.mark.asyncio
async def test_last_report(client):
    await client.post("/link/poll", json=_poll_body())

    response = await client.get("/link/report")

    assert response.json() == {"valid": True, "report": " score=60", "session": 0}


@pytest.mark.asyncio
async def test_verbose_toggle(client):
    response = await client.put("/link/verbose", json={"enabled": True})

    assert response.status_code == 200
    assert response.json() == {"verbose_logging": True}


@pytest.mark.asyncio
async def test_dump_score_report(client):
    await client.post("/link/poll", json=_poll_body())
    await client.post("/link/poll", json=_poll_body(rssi=-72))

    response = await client.get("/dump", params={"target": "WifiScoreReport"})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    lines = response.text.splitlines()
    assert lines[0] == HISTORY_HEADER
    assert len(lines) == 3
    assert [line.split(",")[3] for line in lines[1:]] == ["-70.0", "-72.0"]


@pytest.mark.asyncio
async def test_dump_all_targets(client):
    await client.post("/link/poll", json=_poll_body())

    response = await client.get("/dump")

    assert "== WifiScoreReport ==" in response.text
    assert "== WifiMetrics ==" in response.text
    assert "60,1" in response.text.splitlines()


@pytest.mark.asyncio
async def test_dump_unknown_target_is_404(client):
    response = await client.get("/dump", params={"target": "WifiScanner"})

    assert response.status_code == 404
    assert response.json()["error"]["type"] == "DumpTargetNotFoundError"
