"""Shared ledger payload fixtures."""

from __future__ import annotations

from typing import Any

import pytest


def _bet(bet_id: int, result: str, profit_loss: float) -> dict[str, Any]:
    return {
        "id": bet_id,
        "game_date": "2025-01-07",
        "team_a": "DEN",
        "team_b": "LAL",
        "bet_type": "spread",
        "bet_pick": "DEN -3.5",
        "confidence": 68.0,
        "odds": 1.91,
        "bet_amount": 50.0,
        "result": result,
        "profit_loss": profit_loss,
        "actual_score": None,
        "prop_type": None,
        "player_name": None,
        "created_at": "2025-01-07T14:00:00.000Z",
        "resolved_at": None,
    }


@pytest.fixture
def ledger_payload() -> dict[str, Any]:
    return {
        "experiment": {
            "name": "Sindicato Preditivo",
            "description": "Test experiment",
            "started_at": "2025-01-06",
            "initial_nba": 1000.0,
            "initial_lottery": 500.0,
        },
        "nba": {
            "current_bankroll": 1120.0,
            "total_pnl": 120.0,
            "roi_pct": 12.0,
            "total_bets": 18,
            "wins": 10,
            "losses": 5,
            "pushes": 1,
            "pending": 2,
            "win_rate": 66.7,
            "streak": "W3",
            "bets": [_bet(2, "pending", 0.0), _bet(1, "win", 45.5)],
            "bankroll_history": [
                {"date": "2025-01-06", "balance": 1000.0, "pnl": 0.0, "cumulative_pnl": 0.0},
                {"date": "2025-01-07", "balance": 1120.0, "pnl": 120.0, "cumulative_pnl": 120.0},
            ],
        },
        "lottery": {
            "total_predictions": 2,
            "total_resolved": 1,
            "avg_matches": 2.0,
            "best_match": {
                "lottery_key": "quina",
                "matches": 2,
                "predicted": [5, 7, 10, 40, 60],
                "actual": [5, 10, 22, 33, 44],
            },
            "predictions": [
                {
                    "id": 2,
                    "lottery_key": "mega-sena",
                    "predicted_numbers": [1, 2, 3, 4, 5, 6],
                    "confidence": "alto",
                    "target_concurso": 2800,
                    "actual_numbers": None,
                    "matches": None,
                    "draw_date": "2025-01-11",
                    "created_at": "2025-01-09T12:00:00.000Z",
                    "resolved_at": None,
                },
                {
                    "id": 1,
                    "lottery_key": "quina",
                    "predicted_numbers": [5, 7, 10, 40, 60],
                    "confidence": "medio",
                    "target_concurso": 6600,
                    "actual_numbers": [5, 10, 22, 33, 44],
                    "matches": 2,
                    "draw_date": "2025-01-08",
                    "created_at": "2025-01-07T12:00:00.000Z",
                    "resolved_at": "2025-01-08T23:30:00.000Z",
                },
            ],
        },
        "audit": {
            "nba_chain": {"valid": True, "entries": 20, "last_hash": "ab" * 32},
            "lottery_chain": {"valid": False, "entries": 9, "broken_at": 7},
            "total_entries": 29,
            "github_repo": "sindicato/ledger",
            "recent_entries": [
                {
                    "id": 29,
                    "chain": "nba",
                    "sequence": 20,
                    "event_type": "prediction",
                    "entry_hash": "cd" * 32,
                    "prev_hash": "ef" * 32,
                    "data_hash": "01" * 32,
                    "git_sha": "1234567890abcdef",
                    "created_at": "2025-01-08T15:02:11.481000+00:00",
                }
            ],
        },
    }
