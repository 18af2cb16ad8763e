"""HTML snippets rendered through ``st.markdown(..., unsafe_allow_html=True)``."""

from __future__ import annotations

from html import escape
from typing import Sequence

from ledgerlab.dashboard import formatting as fmt
from ledgerlab.dashboard.views import (
    AWAITING_DRAW_TEXT,
    AuditEntryRow,
    Ball,
    ChainCardView,
    LotteryRow,
)

BALL_STYLE = (
    "display:inline-flex;align-items:center;justify-content:center;width:28px;height:28px;"
    "margin:1px;border-radius:50%;font-size:11px;font-weight:700;"
)
HIGHLIGHT_BALL = "background:#059669;color:#ffffff;"
PLAIN_BALL = "background:#1f2937;color:#9ca3af;"
CELL = "padding:8px 10px;border-bottom:1px solid #111827;"
HEAD = "padding:6px 10px;text-align:left;font-size:11px;text-transform:uppercase;color:#6b7280;"


def ball_html(ball: Ball) -> str:
    css_class = "ball hit" if ball.highlighted else "ball"
    colors = HIGHLIGHT_BALL if ball.highlighted else PLAIN_BALL
    return f'<span class="{css_class}" style="{BALL_STYLE}{colors}">{escape(ball.label)}</span>'


def balls_html(balls: Sequence[Ball]) -> str:
    return '<div style="display:flex;flex-wrap:wrap">' + "".join(ball_html(b) for b in balls) + "</div>"


def badge_html(text: str, tone: str) -> str:
    color = fmt.color_hex(tone)
    return (
        f'<span class="badge badge-{escape(tone)}" style="padding:2px 8px;border-radius:9999px;'
        f'font-size:12px;font-weight:500;color:{color};border:1px solid {color}">{escape(text)}</span>'
    )


def colored_text(text: str, tone: str, *, bold: bool = False) -> str:
    weight = "font-weight:700;" if bold else ""
    return f'<span style="color:{fmt.color_hex(tone)};{weight}">{escape(text)}</span>'


def _table(headers: Sequence[str], body: Sequence[Sequence[str]]) -> str:
    head = "".join(f'<th style="{HEAD}">{escape(h)}</th>' for h in headers)
    rows = "".join(
        "<tr>" + "".join(f'<td style="{CELL}">{cell}</td>' for cell in row) + "</tr>" for row in body
    )
    return (
        '<div style="overflow-x:auto"><table style="width:100%;border-collapse:collapse;font-size:14px">'
        f"<thead><tr>{head}</tr></thead><tbody>{rows}</tbody></table></div>"
    )


def lottery_table_html(rows: Sequence[LotteryRow]) -> str:
    headers = [
        "Data",
        "Loteria",
        "Concurso",
        "Numeros Previstos",
        "Resultado Real",
        "Acertos",
        "Confianca",
    ]
    body = []
    for row in rows:
        if row.actual is not None:
            actual = balls_html(row.actual)
        else:
            actual = colored_text(AWAITING_DRAW_TEXT, fmt.GRAY)
        body.append(
            [
                escape(row.draw_date),
                f"<strong>{escape(row.lottery)}</strong>",
                escape(row.contest),
                balls_html(row.predicted),
                actual,
                colored_text(row.matches, row.match_tone, bold=True),
                badge_html(row.confidence, row.confidence_tone),
            ]
        )
    return _table(headers, body)


def audit_entries_html(rows: Sequence[AuditEntryRow]) -> str:
    headers = ["#", "Chain", "Tipo", "Hash", "Git", "Data"]
    body = [
        [
            str(row.sequence),
            escape(row.chain),
            badge_html(row.event_type, row.event_tone),
            f"<code>{escape(row.entry_hash)}</code>",
            colored_text(row.git_sha, fmt.GREEN if row.git_sha != "-" else fmt.GRAY),
            escape(row.created_at),
        ]
        for row in rows
    ]
    return _table(headers, body)


def chain_card_html(card: ChainCardView) -> str:
    lines = [
        '<div style="border:1px solid #1f2937;border-radius:16px;padding:16px">',
        '<div style="display:flex;justify-content:space-between;margin-bottom:8px">',
        f'<strong>{escape(card.label)}</strong>{badge_html(card.badge, card.badge_tone)}',
        "</div>",
        f'<div style="font-size:12px;color:#6b7280">Entradas: <span style="color:#fff">{card.entries}</span></div>',
    ]
    if card.last_hash:
        lines.append(
            f'<div style="font-size:12px;color:#6b7280;font-family:monospace">'
            f"Ultimo hash: {escape(card.last_hash)}</div>"
        )
    lines.append("</div>")
    return "".join(lines)
