import streamlit as st

from savannah_chase.assist import AssistClient, GeminiClient
from savannah_chase.config import Settings, get_settings
from savannah_chase.levels.standard import create_initial_state
from savannah_chase.state import GameState
from savannah_chase.utils.logger_config import configure_logging

__all__ = [
    "get_assist_client",
    "reset_game",
    "set_default_state",
]


def reset_game(settings: Settings) -> GameState:
    """Replace the session game with a fresh one."""
    state = create_initial_state(
        player_one_name=settings.PLAYER_ONE_NAME,
        player_two_name=settings.PLAYER_TWO_NAME,
    )
    st.session_state["game"] = state
    return state


def set_default_state() -> Settings:
    settings = get_settings()
    if "game" not in st.session_state:
        configure_logging(settings.LOG_LEVEL)
        reset_game(settings)
    return settings


def get_assist_client(settings: Settings) -> AssistClient | None:
    """Session-wide assist client, ``None`` when no API key is configured."""
    if "assist_client" not in st.session_state:
        client = None
        if settings.assist_enabled:
            client = GeminiClient(
                api_key=settings.GEMINI_API_KEY, model_name=settings.ASSIST_MODEL
            )
        st.session_state["assist_client"] = client
    return st.session_state["assist_client"]
