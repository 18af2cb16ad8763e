"""Per-session ledger state: ``loading -> ready | error``."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from ledgerlab.data.ledger_client import LedgerClientError
from ledgerlab.data.schemas import LedgerData

logger = logging.getLogger(__name__)

MISSING_DATA_MESSAGE = "Dados indisponiveis"


class Phase(str, Enum):
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class MissingDataError(RuntimeError):
    """Raised when a view asks for the ledger before any fetch has succeeded."""

    def __init__(self, message: str = MISSING_DATA_MESSAGE) -> None:
        super().__init__(message)


@dataclass
class DashboardState:
    """Single owned ledger slot, replaced wholesale on every successful fetch.

    A failure after a successful load only records the message; the last good
    snapshot keeps rendering. There is no request sequencing: whichever fetch
    settles last decides the slot.
    """

    data: LedgerData | None = None
    error: str = ""
    loading: bool = True

    @property
    def phase(self) -> Phase:
        if self.loading:
            return Phase.LOADING
        if self.data is None:
            return Phase.ERROR
        return Phase.READY

    @property
    def is_stale(self) -> bool:
        return self.data is not None and bool(self.error)

    def record_success(self, data: LedgerData) -> None:
        self.data = data
        self.error = ""
        self.loading = False

    def record_failure(self, message: str) -> None:
        if self.data is not None:
            logger.info("Ledger refresh failed, keeping last snapshot: %s", message)
        self.error = message
        self.loading = False

    def refresh(self, fetch: Callable[[], LedgerData]) -> Phase:
        """Run one fetch and fold its outcome into the state."""

        try:
            data = fetch()
        except LedgerClientError as exc:
            self.record_failure(str(exc))
        else:
            self.record_success(data)
        return self.phase

    def error_message(self) -> str:
        return self.error or MISSING_DATA_MESSAGE

    def require_data(self) -> LedgerData:
        if self.data is None:
            raise MissingDataError()
        return self.data
