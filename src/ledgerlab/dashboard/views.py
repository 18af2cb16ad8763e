"""View models derived from a ledger snapshot.

Every function here is a pure function of :class:`LedgerData` (or one of its
parts); the Streamlit script only lays the results out. Aggregates such as
win/loss counts are taken from the payload as-is and never recomputed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence

import pandas as pd

from ledgerlab.dashboard import formatting as fmt
from ledgerlab.data.schemas import (
    AuditChain,
    AuditData,
    AuditEntryData,
    BankrollPoint,
    Experiment,
    LedgerData,
    LotteryPrediction,
    NBABet,
)

CHART_PLACEHOLDER = "Grafico disponivel apos 2+ dias de operacao"
CHART_MIN_POINTS = 2
NO_BETS_TEXT = "Nenhuma aposta registrada ainda"
NO_PREDICTIONS_TEXT = "Nenhum palpite de loteria registrado ainda"
AWAITING_DRAW_TEXT = "Aguardando sorteio"

TABS: tuple[tuple[str, str], ...] = (
    ("nba", "Apostas NBA"),
    ("lottery", "Loterias"),
    ("audit", "Auditoria"),
)

VERIFY_STEPS: tuple[str, ...] = (
    "Cada palpite e registrado **ANTES** do evento com um hash SHA-256",
    "Cada hash encadeia ao anterior: `SHA256(prev_hash | payload)`",
    "Alterar qualquer entrada quebra todos os hashes subsequentes",
    "Commits no GitHub provam a data exata do registro (timestamp imutavel)",
    "Qualquer pessoa pode clonar o repositorio e re-calcular os hashes para verificacao independente",
)


@dataclass(frozen=True)
class HeaderView:
    title: str
    caption: str
    badge: str = "Hash Chain Auditavel"


@dataclass(frozen=True)
class StatRow:
    label: str
    value: str


@dataclass(frozen=True)
class StatCardView:
    label: str
    accent: str
    bankroll: str
    change: str
    change_tone: str
    initial: str
    stats: List[StatRow] = field(default_factory=list)

    def stat(self, label: str) -> str:
        for row in self.stats:
            if row.label == label:
                return row.value
        raise KeyError(label)


@dataclass(frozen=True)
class BankrollChartView:
    title: str
    frame: pd.DataFrame | None = None
    placeholder: str | None = None

    @property
    def has_chart(self) -> bool:
        return self.frame is not None


@dataclass(frozen=True)
class NBABetRow:
    date: str
    game: str
    bet_type: str
    pick: str
    odds: str
    amount: str
    confidence: str
    result: str
    result_tone: str
    pnl: str
    pnl_tone: str


@dataclass(frozen=True)
class Ball:
    number: int
    label: str
    highlighted: bool = False


@dataclass(frozen=True)
class LotteryRow:
    draw_date: str
    lottery: str
    contest: str
    predicted: List[Ball]
    actual: List[Ball] | None
    matches: str
    match_tone: str
    confidence: str
    confidence_tone: str


@dataclass(frozen=True)
class ChainCardView:
    label: str
    intact: bool
    badge: str
    badge_tone: str
    entries: int
    last_hash: str | None = None


@dataclass(frozen=True)
class AuditEntryRow:
    sequence: int
    chain: str
    event_type: str
    event_tone: str
    entry_hash: str
    git_sha: str
    created_at: str


@dataclass(frozen=True)
class AuditView:
    chains: List[ChainCardView]
    entries: List[AuditEntryRow]
    repo_url: str | None
    steps: Sequence[str] = VERIFY_STEPS


def header(experiment: Experiment) -> HeaderView:
    return HeaderView(
        title=experiment.name,
        caption=f"Experimento publico de IA preditiva · Inicio: {experiment.started_at}",
    )


def _card(
    label: str,
    accent: str,
    bankroll: float,
    initial: float,
    pnl: float,
    stats: List[StatRow],
) -> StatCardView:
    roi = ((bankroll - initial) / initial) * 100 if initial else 0.0
    change_tone = fmt.GREEN if pnl >= 0 else fmt.RED
    return StatCardView(
        label=label,
        accent=accent,
        bankroll=fmt.format_currency(bankroll),
        change=f"{fmt.format_signed_currency(pnl, strict=False)} ({fmt.format_percent(roi)})",
        change_tone=change_tone,
        initial=f"Capital inicial: {fmt.format_currency(initial)}",
        stats=stats,
    )


def nba_stat_card(ledger: LedgerData) -> StatCardView:
    """Bankroll card for the NBA pool, using the server-side aggregates verbatim."""

    nba = ledger.nba
    stats = [
        StatRow("Apostas", str(nba.total_bets)),
        StatRow("Record", f"{nba.wins}W {nba.losses}L {nba.pushes}P"),
        StatRow("Win Rate", f"{fmt.format_number(nba.win_rate)}%"),
        StatRow("Streak", nba.streak or "-"),
        StatRow("Pendentes", str(nba.pending)),
        StatRow("ROI", fmt.format_percent(nba.roi_pct)),
    ]
    return _card(
        "NBA Betting",
        fmt.GREEN,
        bankroll=nba.current_bankroll,
        initial=ledger.experiment.initial_nba,
        pnl=nba.total_pnl,
        stats=stats,
    )


def lottery_stat_card(ledger: LedgerData) -> StatCardView:
    lottery = ledger.lottery
    best = lottery.best_match
    best_text = f"{best.matches} em {fmt.lottery_label(best.lottery_key)}" if best else "-"
    stats = [
        StatRow("Palpites", str(lottery.total_predictions)),
        StatRow("Resolvidos", str(lottery.total_resolved)),
        StatRow("Media Acertos", f"{lottery.avg_matches:.1f}"),
        StatRow("Melhor", best_text),
    ]
    # The lottery pool has no running balance; it is shown at its initial capital.
    initial = ledger.experiment.initial_lottery
    return _card("Loterias BR", fmt.VIOLET, bankroll=initial, initial=initial, pnl=0.0, stats=stats)


def bankroll_chart(history: Sequence[BankrollPoint], initial: float) -> BankrollChartView:
    """Balance series for the NBA pool, or a placeholder when there is no trend to draw."""

    title = "Evolucao do Bankroll NBA"
    if len(history) < CHART_MIN_POINTS:
        return BankrollChartView(title=title, placeholder=CHART_PLACEHOLDER)
    frame = pd.DataFrame(
        {
            "date": [point.date for point in history],
            "Saldo": [point.balance for point in history],
            "Capital inicial": [initial] * len(history),
        }
    ).set_index("date")
    return BankrollChartView(title=title, frame=frame)


def nba_bet_rows(bets: Iterable[NBABet]) -> List[NBABetRow]:
    rows = []
    for bet in bets:
        bet_type = f"{bet.bet_type} ({bet.prop_type})" if bet.prop_type else bet.bet_type
        pnl = "-" if bet.is_pending else fmt.format_signed_currency(bet.profit_loss)
        rows.append(
            NBABetRow(
                date=bet.game_date,
                game=f"{bet.team_a} @ {bet.team_b}",
                bet_type=bet_type,
                pick=bet.player_name or bet.bet_pick,
                odds=f"{bet.odds:.2f}",
                amount=fmt.format_currency(bet.bet_amount),
                confidence=f"{bet.confidence:.0f}%",
                result=bet.result.upper(),
                result_tone=fmt.result_color(bet.result),
                pnl=pnl,
                pnl_tone=fmt.pnl_color(bet.profit_loss),
            )
        )
    return rows


NBA_COLUMNS = {
    "date": "Data",
    "game": "Jogo",
    "bet_type": "Tipo",
    "pick": "Pick",
    "odds": "Odds",
    "amount": "Valor",
    "confidence": "Confianca",
    "result": "Resultado",
    "pnl": "P&L",
}


def nba_bets_frame(rows: Sequence[NBABetRow]) -> pd.DataFrame:
    return pd.DataFrame(
        [{label: getattr(row, attr) for attr, label in NBA_COLUMNS.items()} for row in rows],
        columns=list(NBA_COLUMNS.values()),
    )


def nba_bets_styler(rows: Sequence[NBABetRow]):
    """Color the result and P&L columns of :func:`nba_bets_frame`."""

    frame = nba_bets_frame(rows)
    css = pd.DataFrame("", index=frame.index, columns=frame.columns)
    css["Resultado"] = [f"color: {fmt.color_hex(row.result_tone)}; font-weight: 600" for row in rows]
    css["P&L"] = [f"color: {fmt.color_hex(row.pnl_tone)}" for row in rows]
    return frame.style.apply(lambda _: css, axis=None)


def number_balls(numbers: Iterable[int], highlights: Iterable[int] | None = None) -> List[Ball]:
    """Number balls, highlighting those present in ``highlights`` when it is given."""

    hits = set(highlights) if highlights is not None else set()
    return [Ball(number=n, label=fmt.format_ball(n), highlighted=n in hits) for n in numbers]


def lottery_rows(predictions: Iterable[LotteryPrediction]) -> List[LotteryRow]:
    rows = []
    for pred in predictions:
        if pred.matches is not None:
            matches = f"{pred.matches}/{len(pred.predicted_numbers)}"
            match_tone = fmt.match_color(pred.matches)
        else:
            matches, match_tone = "-", fmt.NEUTRAL
        actual = number_balls(pred.actual_numbers) if pred.actual_numbers is not None else None
        rows.append(
            LotteryRow(
                draw_date=pred.draw_date or "-",
                lottery=fmt.lottery_label(pred.lottery_key),
                contest=f"#{pred.target_concurso or '-'}",
                predicted=number_balls(pred.predicted_numbers, pred.actual_numbers),
                actual=actual,
                matches=matches,
                match_tone=match_tone,
                confidence=pred.confidence,
                confidence_tone=fmt.confidence_color(pred.confidence),
            )
        )
    return rows


def chain_card(label: str, chain: AuditChain) -> ChainCardView:
    if chain.valid:
        badge, tone = "Integro", fmt.GREEN
    else:
        position = chain.broken_at if chain.broken_at is not None else "?"
        badge, tone = f"Quebrado #{position}", fmt.RED
    last_hash = fmt.truncate(chain.last_hash, 24) if chain.last_hash else None
    return ChainCardView(
        label=label,
        intact=chain.valid,
        badge=badge,
        badge_tone=tone,
        entries=chain.entries,
        last_hash=last_hash,
    )


def audit_entry_rows(entries: Iterable[AuditEntryData]) -> List[AuditEntryRow]:
    return [
        AuditEntryRow(
            sequence=entry.sequence,
            chain=entry.chain,
            event_type=entry.event_type,
            event_tone=fmt.event_color(entry.event_type),
            entry_hash=fmt.truncate(entry.entry_hash, 16),
            git_sha=fmt.short_sha(entry.git_sha) if entry.git_sha else "-",
            created_at=fmt.format_timestamp(entry.created_at),
        )
        for entry in entries
    ]


def repo_url(github_repo: str | None) -> str | None:
    return f"https://github.com/{github_repo}" if github_repo else None


def audit_view(audit: AuditData) -> AuditView:
    return AuditView(
        chains=[
            chain_card("NBA Chain", audit.nba_chain),
            chain_card("Lottery Chain", audit.lottery_chain),
        ],
        entries=audit_entry_rows(audit.recent_entries),
        repo_url=repo_url(audit.github_repo),
    )


def footer_lines(audit: AuditData) -> List[str]:
    lines = [
        "Sindicato Preditivo · Todos os dados sao publicos e auditaveis",
        f"Hash chain SHA-256 com {audit.total_entries} entradas verificadas",
    ]
    url = repo_url(audit.github_repo)
    if url:
        lines[-1] += f" · [GitHub]({url})"
    return lines
