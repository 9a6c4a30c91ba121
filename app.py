"""
Bidding App — Streamlit UI entry point.
"""

import streamlit as st
from streamlit_mic_recorder import speech_to_text

# Load .env first so LOG_LEVEL / APP_TITLE changes are picked up on restart
from src.utils.config import (
    app_title,
    load_config,
    log_file,
    log_level,
    voice_input_enabled,
    voice_input_language,
)
load_config()

from src.utils.logger import setup_logger, get_logger
from src.ui.bid_display import (
    TRANSCRIPT_KEY,
    apply_transcript,
    get_session,
    render_bid_form,
    render_bid_log,
    render_flash,
)

setup_logger("bidding_app", level=log_level(), log_file=log_file())
log = get_logger()

title = app_title()
st.set_page_config(page_title=title)
st.title(title)

# One BidSession (controller + repository + log observer) per browser session
session = get_session()

if TRANSCRIPT_KEY not in st.session_state:
    st.session_state[TRANSCRIPT_KEY] = None

if voice_input_enabled():
    with st.sidebar:
        st.subheader("🎤 Voice Input")
        st.caption('Say the bidder and amount, e.g. "Alice 100".')

        # Speech-to-text using Web Speech API (browser-based, free)
        transcript = speech_to_text(
            language=voice_input_language(),
            start_prompt="🎤 Start speaking",
            stop_prompt="⏹️ Stop",
            just_once=True,
            use_container_width=True,
            key="voice_input",
        )
        if transcript:
            log.debug("Voice transcript: %s", transcript)
            st.session_state[TRANSCRIPT_KEY] = transcript

        if st.session_state[TRANSCRIPT_KEY]:
            st.success(f"**Understood:** {st.session_state[TRANSCRIPT_KEY]}")
            st.button(
                "✅ Use this as input",
                on_click=apply_transcript,
                args=(st.session_state[TRANSCRIPT_KEY],),
                use_container_width=True,
            )

render_bid_form()
render_flash()
render_bid_log(session)
