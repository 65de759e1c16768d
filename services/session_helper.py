# services/session_helper.py - owns the Board behind each browser session
import os
import threading
import uuid
from typing import Dict, Optional

from models import Board

# game id -> Board; the Flask session cookie only carries the game id
_BOARDS: Dict[str, Board] = {}
_BOARDS_LOCK = threading.Lock()
try:
    _MAX_BOARDS = int(os.getenv("JEOPARDY_MAX_BOARDS", "500"))
except ValueError:
    _MAX_BOARDS = 500

SESSION_KEY = "game_id"


class SessionHelper:
    @staticmethod
    def start_game(session, board: Board) -> str:
        """Register a new board for this session, dropping its previous one."""
        old_id = session.get(SESSION_KEY)
        game_id = uuid.uuid4().hex
        with _BOARDS_LOCK:
            if old_id:
                _BOARDS.pop(old_id, None)
            _BOARDS[game_id] = board
            # evict oldest boards once the store is full (dicts keep insertion order)
            while len(_BOARDS) > max(1, _MAX_BOARDS):
                _BOARDS.pop(next(iter(_BOARDS)))
        session[SESSION_KEY] = game_id
        return game_id

    @staticmethod
    def current_board(session) -> Optional[Board]:
        game_id = session.get(SESSION_KEY)
        if not game_id:
            return None
        with _BOARDS_LOCK:
            return _BOARDS.get(game_id)
