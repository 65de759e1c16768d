from typing import Optional

from models import Board


def handle_click(board: Board, category_index: int, clue_index: int) -> Optional[str]:
    """Advance the clue at (category_index, clue_index) and return the text to show.

    None means the click changed nothing. Coordinates outside the board raise
    IndexError; the UI only ever emits coordinates it rendered.
    """
    clue = board.clue_at(category_index, clue_index)
    return clue.reveal()
