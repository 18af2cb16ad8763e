"""Pydantic read models for the public ledger payload."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class LedgerRecord(BaseModel):
    """Immutable value object decoded from the ledger API."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class Experiment(LedgerRecord):
    name: str
    description: str = ""
    started_at: str
    initial_nba: float
    initial_lottery: float


class NBABet(LedgerRecord):
    id: int
    game_date: str
    team_a: str
    team_b: str
    bet_type: str
    bet_pick: str
    confidence: float = Field(ge=0.0, le=100.0)
    odds: float
    bet_amount: float
    result: str
    profit_loss: float = 0.0
    actual_score: str | None = None
    prop_type: str | None = None
    player_name: str | None = None
    created_at: str
    resolved_at: str | None = None

    @property
    def is_pending(self) -> bool:
        return self.result == "pending"


class BankrollPoint(LedgerRecord):
    date: str
    balance: float
    pnl: float
    cumulative_pnl: float


class NBAData(LedgerRecord):
    current_bankroll: float
    total_pnl: float
    roi_pct: float
    total_bets: int
    wins: int
    losses: int
    pushes: int
    pending: int
    win_rate: float
    streak: str = ""
    bets: list[NBABet] = Field(default_factory=list)
    bankroll_history: list[BankrollPoint] = Field(default_factory=list)


class LotteryPrediction(LedgerRecord):
    id: int
    lottery_key: str
    predicted_numbers: list[int]
    confidence: str
    target_concurso: int | None = None
    actual_numbers: list[int] | None = None
    matches: int | None = None
    draw_date: str | None = None
    created_at: str
    resolved_at: str | None = None


class BestMatch(LedgerRecord):
    lottery_key: str
    matches: int
    predicted: list[int] = Field(default_factory=list)
    actual: list[int] = Field(default_factory=list)


class LotteryData(LedgerRecord):
    total_predictions: int
    total_resolved: int
    avg_matches: float
    best_match: BestMatch | None = None
    predictions: list[LotteryPrediction] = Field(default_factory=list)


class AuditChain(LedgerRecord):
    valid: bool
    entries: int
    last_hash: str | None = None
    broken_at: int | None = None


class AuditEntryData(LedgerRecord):
    id: int
    chain: str
    sequence: int
    event_type: str
    entry_hash: str
    prev_hash: str
    data_hash: str
    git_sha: str | None = None
    created_at: str


class AuditData(LedgerRecord):
    nba_chain: AuditChain
    lottery_chain: AuditChain
    total_entries: int
    github_repo: str | None = None
    recent_entries: list[AuditEntryData] = Field(default_factory=list)


class LedgerData(LedgerRecord):
    """Root envelope returned by ``GET /api/public/ledger``."""

    experiment: Experiment
    nba: NBAData
    lottery: LotteryData
    audit: AuditData
