import asyncio
from typing import Dict, Optional

import streamlit as st

from savannah_chase.actions import Action
from savannah_chase.assist import (
    AssistClient,
    AssistSuccess,
    analyze_game_state,
    apply_analysis,
    apply_suggestion,
    suggest_move,
)
from savannah_chase.components import Position
from savannah_chase.state import GameState
from savannah_chase.step import step
from savannah_chase.types import Animal, Player, TurnPhase

ANIMAL_ICONS: Dict[Animal, str] = {
    Animal.ELEPHANT: "🐘",
    Animal.LION: "🦁",
    Animal.ZEBRA: "🦓",
    Animal.CHEETAH: "🐆",
}

OWNER_MARKS: Dict[Player, str] = {
    Player.HUMAN: "⚫",
    Player.AI: "⚪",
}

RIFT_ICON = "🌀"
MOVE_ICON = "✅"
EMPTY_ICON = "·"


def do_action(action: Action, position: Optional[Position] = None) -> None:
    state: GameState = st.session_state["game"]
    st.session_state["game"] = step(state, action, position)


def square_label(state: GameState, pos: Position) -> str:
    square = state.square_at(pos)
    if square.occupant is not None:
        piece = state.pieces[square.occupant]
        return f"{OWNER_MARKS[piece.owner]}{ANIMAL_ICONS[piece.animal]}"
    if pos in state.valid_moves:
        return MOVE_ICON
    if square.is_rift:
        return RIFT_ICON
    return EMPTY_ICON


def display_board(state: GameState) -> None:
    clickable = state.phase == TurnPhase.HUMAN_TURN
    for row in range(state.board_size):
        cols = st.columns(state.board_size)
        for col in range(state.board_size):
            pos = Position(row, col)
            occupant = state.square_at(pos).occupant
            with cols[col]:
                st.button(
                    square_label(state, pos),
                    key=f"square_{row}_{col}",
                    type="primary" if occupant and occupant == state.selected_piece_id else "secondary",
                    disabled=not clickable,
                    on_click=do_action,
                    args=(Action.CLICK, pos),
                    use_container_width=True,
                )


def display_status(state: GameState) -> None:
    turn_icon = "👤" if state.current_player == Player.HUMAN else "🤖"
    st.info(f"**Turn:** {state.name_of(state.current_player)}", icon=turn_icon)
    if state.winner is not None:
        st.success(f"🏆 **Winner:** {state.name_of(state.winner)}")
    st.info(f"**Turns:** {state.turn}", icon="⏳")
    st.caption(
        f"{OWNER_MARKS[Player.HUMAN]} {state.name_of(Player.HUMAN)} (bottom, goal row "
        f"{state.goal_rows[Player.HUMAN]}) · {OWNER_MARKS[Player.AI]} "
        f"{state.name_of(Player.AI)} (top, goal row {state.goal_rows[Player.AI]}) · "
        f"{RIFT_ICON} Rift keeps the turn"
    )


def display_assist(state: GameState, client: Optional[AssistClient]) -> None:
    st.subheader("AI Assistance")
    if client is None:
        st.caption("Set SAVANNAH_GEMINI_API_KEY to enable board analysis and move suggestions.")
        return

    busy = state.phase in (TurnPhase.AI_TURN, TurnPhase.AI_TURN_IN_PROGRESS)
    disabled = busy or state.is_game_over

    if st.button("📊 Analyze Game State", key="analyze_btn", disabled=disabled, use_container_width=True):
        with st.spinner("AI is thinking..."):
            result = asyncio.run(analyze_game_state(state, client))
        st.session_state["game"] = apply_analysis(st.session_state["game"], result)
        if not isinstance(result, AssistSuccess):
            st.toast("Could not analyze game state.", icon="⚠️")

    if st.button("💡 Get AI Move Suggestion", key="suggest_btn", disabled=disabled, use_container_width=True):
        with st.spinner("AI is thinking..."):
            result = asyncio.run(suggest_move(state, client))
        st.session_state["game"] = apply_suggestion(st.session_state["game"], result)
        if not isinstance(result, AssistSuccess):
            st.toast("Could not get AI suggestion.", icon="⚠️")

    current: GameState = st.session_state["game"]
    if current.analysis is not None:
        st.markdown(
            f"**{current.name_of(Player.AI)} (AI):** {current.analysis.player_one_summary}\n\n"
            f"**{current.name_of(Player.HUMAN)} (Human):** {current.analysis.player_two_summary}"
        )
        if current.analysis.overall_assessment:
            st.markdown(f"**Overall:** {current.analysis.overall_assessment}")
    if current.suggestion:
        st.info(current.suggestion, icon="💡")
