"""Snapshot API tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from ledgerlab.api import server
from ledgerlab.data.ledger_client import FetchError, LedgerClient


@pytest.fixture
def snapshot(tmp_path: Path, ledger_payload) -> Path:
    path = tmp_path / "ledger.json"
    path.write_text(json.dumps(ledger_payload), encoding="utf-8")
    return path


@pytest.fixture
def client(snapshot: Path):
    server.app.dependency_overrides[server.get_snapshot_path] = lambda: snapshot
    with TestClient(server.app) as test_client:
        yield test_client
    server.app.dependency_overrides.clear()


def test_health(client: TestClient) -> None:
    assert client.get("/health").json() == {"status": "ok"}


def test_public_ledger(client: TestClient) -> None:
    response = client.get("/api/public/ledger")
    assert response.status_code == 200
    body = response.json()
    assert body["nba"]["total_bets"] == 18
    assert body["audit"]["github_repo"] == "sindicato/ledger"


def test_verify_returns_stored_chain(client: TestClient) -> None:
    response = client.get("/api/public/audit/verify", params={"chain": "lottery"})
    assert response.status_code == 200
    assert response.json()["broken_at"] == 7


def test_verify_unknown_chain(client: TestClient) -> None:
    assert client.get("/api/public/audit/verify", params={"chain": "poker"}).status_code == 404


def test_missing_snapshot_is_503(tmp_path: Path) -> None:
    server.app.dependency_overrides[server.get_snapshot_path] = lambda: tmp_path / "absent.json"
    try:
        with TestClient(server.app) as test_client:
            response = test_client.get("/api/public/ledger")
    finally:
        server.app.dependency_overrides.clear()
    assert response.status_code == 503


def test_invalid_snapshot_is_503(snapshot: Path, client: TestClient) -> None:
    snapshot.write_text(json.dumps({"experiment": {}}), encoding="utf-8")
    assert client.get("/api/public/ledger").status_code == 503


def test_ledger_client_against_snapshot_api(client: TestClient) -> None:
    ledger_client = LedgerClient("http://testserver", client=client)
    ledger = ledger_client.fetch_ledger()
    assert (ledger.nba.wins, ledger.nba.losses, ledger.nba.pushes, ledger.nba.pending) == (10, 5, 1, 2)
    assert ledger_client.verify_chain("nba").valid
    with pytest.raises(FetchError) as excinfo:
        ledger_client.verify_chain("poker")
    assert excinfo.value.status_code == 404
