# routes/main_routes.py - start page
from flask import Blueprint, render_template, session

from services.session_helper import SessionHelper

main_bp = Blueprint("main", __name__)


@main_bp.route("/", methods=["GET"])
def index():
    """Home page: Start (or Restart) button."""
    has_board = SessionHelper.current_board(session) is not None
    return render_template("index.html", has_board=has_board)
