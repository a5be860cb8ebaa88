from savannah_chase.assist.schemas import AnalyzeGameStateInput, SuggestMoveInput

GAME_RULES = """
Savannah Chase is played on a 5x5 board. Rows are 0-indexed from the top (AI side),
columns 0-indexed from the left.
Board notation: each cell is two characters, cells are not separated, rows end with a newline.
- First character: owner, A = AI (top), H = Human (bottom).
- Second character: animal, E = Elephant, L = Lion, Z = Zebra, C = Cheetah.
- ".." is an empty square, "RF" is the empty Rift square in the centre.
Rules:
- On each turn the player moves one piece one square up, down, left or right into an empty square.
- There are no captures and no jumps. All animals move the same way.
- A piece that lands on the Rift keeps the turn with its owner.
- The Human wins when one of their pieces reaches row 0.
- The AI wins when one of its pieces reaches row 4.
"""


def get_analysis_prompt(data: AnalyzeGameStateInput) -> dict:
    prompt = {
        "system_prompt": (
            f"You are an expert game analyst for the board game Savannah Chase. {GAME_RULES}"
            "Return ONLY a valid JSON object with the keys "
            "'player_one_summary', 'player_two_summary' and 'overall_assessment'. "
            "Be concise and strategic."
        ),
        "user_prompt": f"""
        Board State:
        {data.board_state}

        Player One: {data.player_one_name} (AI, top)
        Player Two: {data.player_two_name} (Human, bottom)

        Analyze the board state. Provide:
        1. A summary for {data.player_one_name} (advantages, disadvantages, progress to the goal row).
        2. A summary for {data.player_two_name} (same as above).
        3. A brief overall assessment of who is in a better position.
        """,
    }
    return prompt


def get_suggestion_prompt(data: SuggestMoveInput) -> dict:
    prompt = {
        "system_prompt": (
            f"You are a strategic game AI for the board game Savannah Chase. {GAME_RULES}"
            "Return ONLY a valid JSON object with the key 'suggested_move'."
        ),
        "user_prompt": f"""
        Current Board State:
        {data.board_state}

        It is {data.player_turn}'s turn.
        Suggest the best move for {data.player_turn}, naming the piece and its start and end
        coordinates, e.g. "Move Elephant from (4,1) to (3,1)".
        Prefer a move that wins immediately, then a move that blocks the opponent from reaching
        their goal row, then a move that advances towards your own goal row.
        If no valid move is possible, say so clearly.
        """,
    }
    return prompt
