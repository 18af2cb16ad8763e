"""Ledger API client tests."""

from __future__ import annotations

import httpx
import pytest

from ledgerlab.data import ledger_client as lc
from ledgerlab.data.schemas import AuditChain, LedgerData

BASE = "https://ledger.example"


def _client(handler, attempts: int = 1) -> lc.LedgerClient:
    http = httpx.Client(transport=httpx.MockTransport(handler))
    return lc.LedgerClient(BASE, client=http, attempts=attempts)


def test_fetch_ledger_decodes_payload(ledger_payload) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=ledger_payload)

    ledger = _client(handler).fetch_ledger()
    assert isinstance(ledger, LedgerData)
    assert ledger.nba.wins == 10
    assert ledger.audit.lottery_chain.broken_at == 7
    assert str(seen[0].url) == f"{BASE}/api/public/ledger"
    assert seen[0].method == "GET"


def test_fetch_ledger_http_error_carries_status() -> None:
    client = _client(lambda request: httpx.Response(500, text="boom"))
    with pytest.raises(lc.FetchError) as excinfo:
        client.fetch_ledger()
    assert excinfo.value.status_code == 500
    assert "500" in str(excinfo.value)
    assert str(excinfo.value) == "API error: 500"


def test_transport_failure_is_fetch_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(lc.FetchError) as excinfo:
        _client(handler).fetch_ledger()
    assert excinfo.value.status_code is None
    assert "connection refused" in str(excinfo.value)


def test_transport_failure_retried_when_configured(ledger_payload) -> None:
    calls = {"count": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        calls["count"] += 1
        if calls["count"] == 1:
            raise httpx.ReadError("reset", request=request)
        return httpx.Response(200, json=ledger_payload)

    ledger = _client(handler, attempts=2).fetch_ledger()
    assert calls["count"] == 2
    assert ledger.experiment.name == "Sindicato Preditivo"


def test_http_errors_are_not_retried() -> None:
    calls = {"count": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        calls["count"] += 1
        return httpx.Response(503)

    with pytest.raises(lc.FetchError):
        _client(handler, attempts=3).fetch_ledger()
    assert calls["count"] == 1


def test_invalid_json_is_decode_error() -> None:
    client = _client(lambda request: httpx.Response(200, text="<html>oops</html>"))
    with pytest.raises(lc.DecodeError):
        client.fetch_ledger()


def test_schema_mismatch_is_decode_error(ledger_payload) -> None:
    del ledger_payload["nba"]["wins"]
    client = _client(lambda request: httpx.Response(200, json=ledger_payload))
    with pytest.raises(lc.DecodeError) as excinfo:
        client.fetch_ledger()
    assert "LedgerData" in str(excinfo.value)
    assert isinstance(excinfo.value, lc.LedgerClientError)


def test_confidence_out_of_range_rejected(ledger_payload) -> None:
    ledger_payload["nba"]["bets"][0]["confidence"] = 140
    client = _client(lambda request: httpx.Response(200, json=ledger_payload))
    with pytest.raises(lc.DecodeError):
        client.fetch_ledger()


def test_verify_chain() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"valid": False, "entries": 9, "broken_at": 7})

    chain = _client(handler).verify_chain("lottery")
    assert chain == AuditChain(valid=False, entries=9, broken_at=7)
    assert seen[0].url.path == "/api/public/audit/verify"
    assert seen[0].url.params["chain"] == "lottery"


def test_verify_chain_error_message() -> None:
    client = _client(lambda request: httpx.Response(404))
    with pytest.raises(lc.FetchError, match="Verify error: 404"):
        client.verify_chain("nope")


def test_injected_client_left_open() -> None:
    http = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200)))
    with lc.LedgerClient(BASE, client=http):
        pass
    assert not http.is_closed
    http.close()


def test_base_url_defaults_to_settings(monkeypatch) -> None:
    monkeypatch.setenv("LEDGER_API_URL", "https://api.sindicato.example/")
    lc.get_settings.cache_clear()
    try:
        client = lc.LedgerClient(client=httpx.Client())
        assert client.base_url == "https://api.sindicato.example"
        assert client.attempts == 1
    finally:
        lc.get_settings.cache_clear()
