# routes/board_routes.py - board setup, rendering and clue clicks
from flask import (
    Blueprint,
    abort,
    current_app,
    flash,
    redirect,
    render_template,
    request,
    session,
    url_for,
)

from services.board_loader import BoardLoader, NetworkError
from services.interaction import handle_click
from services.session_helper import SessionHelper

board_bp = Blueprint("board", __name__)


def _wants_json() -> bool:
    accept = request.accept_mimetypes
    return request.is_json or (accept.accept_json and not accept.accept_html)


def _make_loader() -> BoardLoader:
    cfg = current_app.config
    return BoardLoader(
        base_url=cfg.get("JEOPARDY_API_URL"),
        timeout=cfg.get("JEOPARDY_TIMEOUT_SECONDS"),
        id_limit=cfg.get("JEOPARDY_CATEGORY_ID_LIMIT"),
        clues_per_category=cfg.get("JEOPARDY_CLUES_PER_CATEGORY"),
    )


@board_bp.route("/start", methods=["POST"])
def start():
    """
    Start or restart a game: build a brand new board and store it for this
    session, then redirect to /board. On a failed fetch nothing is stored.
    """
    loader = _make_loader()
    try:
        board = loader.build_board(current_app.config.get("NUM_CATEGORIES", 6))
    except NetworkError as e:
        current_app.logger.warning("board setup failed: %s", e)
        flash("Unable to load the board. Please try again.", "error")
        has_board = SessionHelper.current_board(session) is not None
        return render_template("index.html", has_board=has_board), 503

    game_id = SessionHelper.start_game(session, board)
    current_app.logger.info(
        "board ready game_id=%s categories=%s", game_id, [c.title for c in board.categories]
    )
    return redirect(url_for("board.show_board"))


@board_bp.route("/board", methods=["GET"])
def show_board():
    """Render category headers and one row of cells per clue index."""
    board = SessionHelper.current_board(session)
    if board is None:
        return redirect(url_for("main.index"))
    return render_template("board.html", board=board, rows=board.clue_count, has_board=True)


@board_bp.route("/board/<int:category_index>/<int:clue_index>", methods=["POST"])
def reveal_clue(category_index, clue_index):
    """Advance one clue: hidden -> question -> answer; further clicks are no-ops."""
    board = SessionHelper.current_board(session)
    if board is None:
        if _wants_json():
            return {"error": "no active board"}, 409
        return redirect(url_for("main.index"))

    try:
        text = handle_click(board, category_index, clue_index)
    except IndexError:
        # coordinates from a board this session no longer has
        current_app.logger.warning(
            "click outside board category=%s clue=%s", category_index, clue_index
        )
        abort(404)

    if not _wants_json():
        return redirect(url_for("board.show_board"))

    clue = board.clue_at(category_index, clue_index)
    return {
        "category": category_index,
        "clue": clue_index,
        "state": clue.state.value,
        "text": clue.displayed_text,
        "changed": text is not None,
    }
