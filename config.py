# config.py - configuration constants
import os


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "supersecretkey")

    # Remote category service; GET {JEOPARDY_API_URL}/category?id=<n>
    JEOPARDY_API_URL = os.getenv("JEOPARDY_API_URL", "https://jservice.io/api")
    JEOPARDY_TIMEOUT_SECONDS = int(os.getenv("JEOPARDY_TIMEOUT_SECONDS", "5"))
    # Category ids are drawn from [0, JEOPARDY_CATEGORY_ID_LIMIT)
    JEOPARDY_CATEGORY_ID_LIMIT = int(os.getenv("JEOPARDY_CATEGORY_ID_LIMIT", "15000"))

    # Board shape: columns x rows
    NUM_CATEGORIES = int(os.getenv("NUM_CATEGORIES", "6"))
    JEOPARDY_CLUES_PER_CATEGORY = int(os.getenv("JEOPARDY_CLUES_PER_CATEGORY", "5"))

    # Cookie/session security (tunable via env for local vs prod)
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = os.getenv("SESSION_COOKIE_SAMESITE", "Lax")
    # Don't force Secure cookies locally unless explicitly enabled
    SESSION_COOKIE_SECURE = os.getenv("SESSION_COOKIE_SECURE", "0") == "1"

    # Preferred scheme for URL generation in prod behind HTTPS
    PREFERRED_URL_SCHEME = os.getenv("PREFERRED_URL_SCHEME", "https")
