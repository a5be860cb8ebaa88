from pydantic import BaseModel, ConfigDict, Field


class AssistModel(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)


# Data sent to the analysis prompt
class AnalyzeGameStateInput(AssistModel):
    board_state: str = Field(min_length=1)
    player_one_name: str = Field(description="Name of player one (AI, top).")
    player_two_name: str = Field(description="Name of player two (Human, bottom).")


class AnalyzeGameStateOutput(AssistModel):
    player_one_summary: str = Field(
        min_length=1,
        description="Short summary of advantages/disadvantages for player one (AI, top).",
    )
    player_two_summary: str = Field(
        min_length=1,
        description="Short summary of advantages/disadvantages for player two (Human, bottom).",
    )
    overall_assessment: str = Field(
        default="",
        description="Brief overall assessment of who is better placed.",
    )


# Data sent to the suggestion prompt
class SuggestMoveInput(AssistModel):
    board_state: str = Field(min_length=1)
    player_turn: str = Field(description="Name and side of the player to move.")


class SuggestMoveOutput(AssistModel):
    suggested_move: str = Field(
        min_length=1,
        description='Suggested move, e.g. "Move Elephant from (4,1) to (3,1)".',
    )
