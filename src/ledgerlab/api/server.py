"""FastAPI development backend serving a ledger snapshot.

Mirrors the two public read routes of the production ledger API so the
dashboard can run locally. It only replays a stored JSON document; chain
summaries are returned exactly as stored, never recomputed.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated

from fastapi import Depends, FastAPI, HTTPException, Query, status
from fastapi.middleware.cors import CORSMiddleware

from ledgerlab import __version__
from ledgerlab.config import get_settings
from ledgerlab.data.ledger_client import DecodeError, decode
from ledgerlab.data.schemas import AuditChain, LedgerData

logger = logging.getLogger(__name__)

app = FastAPI(
    title="LedgerLab Snapshot API",
    version=__version__,
    description="Read-only replay of a public ledger snapshot for local development.",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)


def get_snapshot_path() -> Path:
    return get_settings().snapshot_path


def load_snapshot(path: Annotated[Path, Depends(get_snapshot_path)]) -> LedgerData:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Snapshot not found: {path}",
        ) from exc
    except json.JSONDecodeError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Snapshot is not valid JSON: {exc}",
        ) from exc
    try:
        ledger = decode(LedgerData, payload)
    except DecodeError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    logger.debug("Loaded ledger snapshot from %s", path)
    return ledger


SnapshotDep = Annotated[LedgerData, Depends(load_snapshot)]
ChainQuery = Annotated[str, Query(min_length=1)]


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/api/public/ledger", response_model=LedgerData)
def public_ledger(ledger: SnapshotDep) -> LedgerData:
    return ledger


@app.get("/api/public/audit/verify", response_model=AuditChain)
def verify_chain(chain: ChainQuery, ledger: SnapshotDep) -> AuditChain:
    chains = {"nba": ledger.audit.nba_chain, "lottery": ledger.audit.lottery_chain}
    if chain not in chains:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown chain: {chain}")
    return chains[chain]
