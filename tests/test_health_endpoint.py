from __future__ import annotations

import uuid

from settings import settings


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["ok"] is True
    assert body["env"] == "dev"
    assert body["version"] == settings.APP_VERSION
    assert body["providers"] == 3


def test_healthz_reports_version_and_cache(client, monkeypatch):
    monkeypatch.setenv("GIT_SHA", "test-sha")
    client.get("/api/transfer/validate", params={"method": "mobile_wallet", "country": "ph"})
    r = client.get("/healthz")
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["ok"] is True
    assert body["git_sha"] == "test-sha"
    assert body["simulated_latency"] is False
    assert body["cache_size"] == 1


def test_metrics_counts_payouts(client):
    client.post(
        "/api/transfer/send",
        json={
            "payoutMethod": "digital_wallet",
            "destinationCountry": "in",
            "amount": 500,
            "currency": "INR",
            "recipientName": "Test User",
            "recipientEmail": "someone@example.in",
        },
    )
    r = client.get("/metrics")
    assert r.status_code == 200, r.text
    assert r.headers["content-type"].startswith("text/plain")
    assert "# TYPE payout_attempts_total counter" in r.text
    assert 'payout_attempts_total{provider="PAYTM",result="success"}' in r.text
    assert 'processor_cache_total{result="miss"}' in r.text


def _http_series(text: str) -> list[str]:
    return [line for line in text.splitlines() if line.startswith("http_requests_total{")]


def test_metrics_label_requests_by_route_template(client):
    client.get("/health")
    client.get("/api/transfer/validate", params={"method": "bank_transfer", "country": "np"})
    text = client.get("/metrics").text
    assert 'http_requests_total{route="/health",status="200"}' in text
    assert 'route="/api/transfer/validate"' in text


def test_unknown_paths_share_one_metrics_series(client):
    client.get(f"/no-such-route/{uuid.uuid4()}")
    before = _http_series(client.get("/metrics").text)

    for _ in range(20):
        r = client.get(f"/no-such-route/{uuid.uuid4()}")
        assert r.status_code == 404

    after = _http_series(client.get("/metrics").text)
    assert len(after) == len(before)
    assert any('route="unmatched",status="404"' in line for line in after)
