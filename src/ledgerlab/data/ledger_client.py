"""Thin client for the public ledger API."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, TypeVar

import httpx
from pydantic import ValidationError
from tenacity import RetryCallState, Retrying, retry_if_exception_type, stop_after_attempt

from ledgerlab.config import get_settings
from ledgerlab.data.schemas import AuditChain, LedgerData, LedgerRecord

logger = logging.getLogger(__name__)

LEDGER_PATH = "/api/public/ledger"
VERIFY_PATH = "/api/public/audit/verify"

RecordT = TypeVar("RecordT", bound=LedgerRecord)


class LedgerClientError(Exception):
    """Base class for failures surfaced by :class:`LedgerClient`."""


class FetchError(LedgerClientError):
    """Transport failure or non-2xx response. ``status_code`` is None for transport errors."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodeError(LedgerClientError):
    """Response body is not valid JSON or does not match the ledger schema."""


def _retry_log(retry_state: RetryCallState) -> None:
    attempt = retry_state.attempt_number
    exception = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning("Ledger API attempt %s failed: %s", attempt, exception)


def decode(model: type[RecordT], payload: Any) -> RecordT:
    """Validate a decoded JSON document against ``model``."""

    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise DecodeError(
            f"Invalid {model.__name__} payload ({exc.error_count()} errors): {exc.errors()[0]['msg']}"
        ) from exc


class LedgerClient:
    """Read-only wrapper for the public ledger endpoints."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        client: httpx.Client | None = None,
        attempts: int | None = None,
    ) -> None:
        settings = get_settings()
        base = settings.ledger_api_url if base_url is None else base_url
        self.base_url = base.rstrip("/")
        self.attempts = attempts or settings.fetch_attempts
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=settings.request_timeout, follow_redirects=True)

    def __enter__(self) -> "LedgerClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def _request(self, path: str, params: Optional[Dict[str, Any]] = None, *, label: str) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug("GET %s params=%s", url, params)
        retrying = Retrying(
            stop=stop_after_attempt(self.attempts),
            retry=retry_if_exception_type(httpx.TransportError),
            after=_retry_log,
            reraise=True,
        )
        try:
            response = retrying(self._client.get, url, params=params)
        except httpx.TransportError as exc:
            logger.warning("Ledger API unreachable at %s: %s", url, exc)
            raise FetchError(str(exc) or exc.__class__.__name__) from exc
        if not response.is_success:
            logger.warning("Ledger API %s returned %s", url, response.status_code)
            raise FetchError(f"{label}: {response.status_code}", status_code=response.status_code)
        try:
            return response.json()
        except ValueError as exc:
            raise DecodeError(f"Response from {path} is not valid JSON") from exc

    def fetch_ledger(self) -> LedgerData:
        """Return the full ledger snapshot."""

        payload = self._request(LEDGER_PATH, label="API error")
        return decode(LedgerData, payload)

    def verify_chain(self, chain_name: str) -> AuditChain:
        """Ask the backend to re-verify one hash chain and return its summary."""

        payload = self._request(VERIFY_PATH, {"chain": chain_name}, label="Verify error")
        return decode(AuditChain, payload)


def fetch_ledger() -> LedgerData:
    with LedgerClient() as client:
        return client.fetch_ledger()


def verify_chain(chain_name: str) -> AuditChain:
    with LedgerClient() as client:
        return client.verify_chain(chain_name)
