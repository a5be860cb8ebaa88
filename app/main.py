import logging
import os
import time

import streamlit as st
from pyrsistent import thaw

from config import get_assist_client, reset_game, set_default_state
from components import display_assist, display_board, display_status
from savannah_chase.actions import Action
from savannah_chase.state import GameState
from savannah_chase.step import step
from savannah_chase.systems.turn import abort_ai_turn
from savannah_chase.types import TurnPhase

logger = logging.getLogger("savannah_chase.app")

script_dir: str = os.path.dirname(os.path.realpath(__file__))

st.set_page_config(layout="wide", page_title="Savannah Chase")

with open(os.path.join(script_dir, "styles.css")) as f:
    st.markdown(f"<style>{f.read()}</style>", unsafe_allow_html=True)


# --------- Main App ---------

settings = set_default_state()
tab_game, tab_state = st.tabs(["Game", "State"])

with tab_game:
    st.title("Savannah Chase")
    middle_col, right_col = st.columns([0.6, 0.4])

    with right_col:
        if st.button("🔁 Reset Game", key="reset_btn", use_container_width=True):
            reset_game(settings)
            st.toast("A new game has started.", icon="🔁")

        state: GameState = st.session_state["game"]
        display_status(state)
        st.divider()
        display_assist(state, get_assist_client(settings))

    with middle_col:
        state = st.session_state["game"]
        display_board(state)
        if state.is_game_over:
            st.success(f"🎉 **{state.message}** 🎉")
            st.balloons()
        else:
            st.info(state.message, icon="💬")

with tab_state:
    st.json(thaw(st.session_state["game"].description), expanded=1)


# --------- Deferred transitions ---------

state = st.session_state["game"]
# An interrupted run can leave AI_TURN_IN_PROGRESS behind; finish that turn here.
if state.phase in (TurnPhase.AI_TURN, TurnPhase.AI_TURN_IN_PROGRESS):
    state = step(state, Action.BEGIN_AI_TURN)
    st.session_state["game"] = state
    time.sleep(settings.AI_MOVE_DELAY_SECONDS)
    try:
        state = step(state, Action.AI_MOVE)
    except Exception as e:
        logger.exception("AI turn failed")
        state = abort_ai_turn(state, str(e))
    st.session_state["game"] = state
    st.rerun()
elif state.is_game_over:
    time.sleep(settings.AUTO_RESET_SECONDS)
    reset_game(settings)
    st.rerun()
