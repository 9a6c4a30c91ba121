"""Streamlit UI helpers for the bid form, flash messages, and the bid log.

Widget values live in `st.session_state` under the keys below. Callbacks run
before the script reruns, which is the only point where Streamlit allows
widget-backed keys (the form inputs) to be reset.
"""

from __future__ import annotations

from typing import Any, MutableMapping

import streamlit as st

from src.services.bid_session import BidSession, Outcome, split_spoken_bid
from src.utils.logger import get_logger

logger = get_logger()

SESSION_KEY = "bid_session"
NAME_KEY = "bidder_name"
AMOUNT_KEY = "bid_amount"
FLASH_KEY = "bid_flash"
TRANSCRIPT_KEY = "voice_transcript"

_FLASH_KIND = {
    Outcome.ACCEPTED: "success",
    Outcome.REJECTED: "error",
    Outcome.PARSE_ERROR: "warning",
}


def _state(state: MutableMapping[str, Any] | None) -> MutableMapping[str, Any]:
    return st.session_state if state is None else state


def get_session(state: MutableMapping[str, Any] | None = None) -> BidSession:
    """Return this browser session's BidSession, creating it on first use."""
    state = _state(state)
    if SESSION_KEY not in state:
        state[SESSION_KEY] = BidSession()
        logger.debug("Created new bid session")
    return state[SESSION_KEY]


def handle_submit(state: MutableMapping[str, Any] | None = None) -> None:
    """on_click callback for "Place Bid"."""
    state = _state(state)
    session = get_session(state)
    result = session.submit(state.get(NAME_KEY, ""), state.get(AMOUNT_KEY, ""))
    state[FLASH_KEY] = (_FLASH_KIND[result.outcome], result.message)
    if result.clear_inputs:
        state[NAME_KEY] = ""
        state[AMOUNT_KEY] = ""


def apply_transcript(transcript: str, state: MutableMapping[str, Any] | None = None) -> None:
    """Copy a dictated "<name> <amount>" phrase into the form inputs."""
    state = _state(state)
    name, amount_text = split_spoken_bid(transcript)
    state[NAME_KEY] = name
    state[AMOUNT_KEY] = amount_text
    state[TRANSCRIPT_KEY] = None


def render_flash(state: MutableMapping[str, Any] | None = None, st=st) -> None:
    """Show and clear the message left by the last submission, if any."""
    if state is None:
        state = st.session_state
    flash = state.get(FLASH_KEY)
    if not flash:
        return
    kind, message = flash
    getattr(st, kind)(message)
    state[FLASH_KEY] = None


def render_bid_form(st=st) -> None:
    st.text_input("Bidder Name:", key=NAME_KEY)
    st.text_input("Bid Amount:", key=AMOUNT_KEY)
    st.button("Place Bid", on_click=handle_submit, type="primary")


def render_bid_log(session: BidSession, st=st) -> None:
    """Read-only log of accepted bids, oldest first."""
    st.subheader("Bids")
    lines = session.log.lines
    if not lines:
        st.caption("No bids yet.")
        return
    st.text_area(
        "Bid log",
        value=session.log.as_text(),
        height=240,
        disabled=True,
        label_visibility="collapsed",
    )
    st.caption(f"{len(lines)} bid(s) placed this session.")
