"""Remote assist collaborators (board analysis and move suggestion).

Everything here is advisory. The game rules never depend on these calls.
"""

from .client import AssistClient, GeminiClient
from .exceptions import (
    AssistConfigurationError,
    AssistError,
    AssistRequestError,
    AssistResponseError,
)
from .results import AssistFailure, AssistResult, AssistSuccess
from .service import analyze_game_state, apply_analysis, apply_suggestion, suggest_move

__all__ = [
    "AssistClient",
    "GeminiClient",
    "AssistError",
    "AssistConfigurationError",
    "AssistRequestError",
    "AssistResponseError",
    "AssistFailure",
    "AssistResult",
    "AssistSuccess",
    "analyze_game_state",
    "apply_analysis",
    "apply_suggestion",
    "suggest_move",
]
