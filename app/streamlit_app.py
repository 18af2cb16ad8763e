"""Streamlit interface for the LedgerLab public ledger."""

from __future__ import annotations

import streamlit as st
from streamlit_autorefresh import st_autorefresh

from ledgerlab.config import get_settings
from ledgerlab.dashboard import formatting as fmt
from ledgerlab.dashboard import markup, views
from ledgerlab.dashboard.state import DashboardState, Phase
from ledgerlab.data.ledger_client import fetch_ledger
from ledgerlab.data.schemas import LedgerData

settings = get_settings()

st.set_page_config(page_title="Sindicato Preditivo", layout="wide", page_icon="📒")

tick = st_autorefresh(interval=settings.refresh_interval_seconds * 1000, key="ledger_refresh")


def get_state() -> DashboardState:
    if "ledger_state" not in st.session_state:
        st.session_state["ledger_state"] = DashboardState()
    return st.session_state["ledger_state"]


def sync_ledger(state: DashboardState, refresh_tick: int) -> None:
    """Fetch on first load and on every timer tick, not on widget reruns."""

    if state.phase is not Phase.LOADING and st.session_state.get("ledger_tick") == refresh_tick:
        return
    st.session_state["ledger_tick"] = refresh_tick
    if state.phase is Phase.LOADING:
        with st.spinner("Carregando ledger..."):
            state.refresh(fetch_ledger)
    else:
        state.refresh(fetch_ledger)


def render_error(message: str) -> None:
    with st.container(border=True):
        st.subheader("Erro ao carregar")
        st.write(message)
        if st.button("Tentar novamente"):
            st.session_state.clear()
            st.rerun()


def render_header(view: views.HeaderView) -> None:
    title_col, badge_col = st.columns([0.8, 0.2])
    title_col.title(view.title)
    title_col.caption(view.caption)
    badge_col.markdown(markup.badge_html(view.badge, fmt.GREEN), unsafe_allow_html=True)


def render_stat_card(card: views.StatCardView) -> None:
    with st.container(border=True):
        st.markdown(
            f"{markup.colored_text('●', card.accent)} <strong>{card.label.upper()}</strong>",
            unsafe_allow_html=True,
        )
        st.metric(card.label, card.bankroll, label_visibility="collapsed")
        st.markdown(markup.colored_text(card.change, card.change_tone, bold=True), unsafe_allow_html=True)
        st.caption(card.initial)
        left, right = st.columns(2)
        for row in card.stats:
            left.caption(row.label)
            right.markdown(f"**{row.value}**")


def render_chart(chart: views.BankrollChartView) -> None:
    with st.container(border=True):
        if not chart.has_chart:
            st.caption(chart.placeholder)
            return
        st.markdown(f"**{chart.title}**")
        st.line_chart(chart.frame, height=220, color=["#10b981", "#444444"], width="stretch")


def render_nba_tab(ledger: LedgerData) -> None:
    rows = views.nba_bet_rows(ledger.nba.bets)
    if not rows:
        st.info(views.NO_BETS_TEXT)
        return
    st.dataframe(views.nba_bets_styler(rows), width="stretch", hide_index=True)


def render_lottery_tab(ledger: LedgerData) -> None:
    rows = views.lottery_rows(ledger.lottery.predictions)
    if not rows:
        st.info(views.NO_PREDICTIONS_TEXT)
        return
    st.markdown(markup.lottery_table_html(rows), unsafe_allow_html=True)


def render_audit_tab(ledger: LedgerData) -> None:
    audit = views.audit_view(ledger.audit)
    cols = st.columns(len(audit.chains))
    for col, card in zip(cols, audit.chains):
        col.markdown(markup.chain_card_html(card), unsafe_allow_html=True)

    if audit.entries:
        with st.container(border=True):
            st.markdown("**Entradas Recentes**")
            st.markdown(markup.audit_entries_html(audit.entries), unsafe_allow_html=True)

    with st.container(border=True):
        st.markdown("**Como verificar a integridade**")
        st.markdown("\n".join(f"{idx}. {step}" for idx, step in enumerate(audit.steps, start=1)))
        if audit.repo_url:
            st.markdown(f"[Ver repositorio no GitHub →]({audit.repo_url})")


def render_dashboard(ledger: LedgerData) -> None:
    render_header(views.header(ledger.experiment))

    nba_col, lottery_col = st.columns(2, gap="large")
    with nba_col:
        render_stat_card(views.nba_stat_card(ledger))
    with lottery_col:
        render_stat_card(views.lottery_stat_card(ledger))

    render_chart(views.bankroll_chart(ledger.nba.bankroll_history, ledger.experiment.initial_nba))

    nba_tab, lottery_tab, audit_tab = st.tabs([label for _, label in views.TABS])
    with nba_tab:
        render_nba_tab(ledger)
    with lottery_tab:
        render_lottery_tab(ledger)
    with audit_tab:
        render_audit_tab(ledger)

    st.divider()
    for line in views.footer_lines(ledger.audit):
        st.caption(line)


# ----- Page Layout ------------------------------------------------------------
state = get_state()
sync_ledger(state, tick)

if state.phase is Phase.ERROR:
    render_error(state.error_message())
    st.stop()

render_dashboard(state.require_data())
