import os


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./database.db")
DB_TIMEOUT = float(os.getenv("DB_TIMEOUT", 5))

PORT = int(os.getenv("PORT", 4001))
ALLOWED_ORIGINS = [
    origin.strip() for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",")
]

DEFAULT_PAGE = int(os.getenv("DEFAULT_PAGE", 1))
DEFAULT_LIMIT = int(os.getenv("DEFAULT_LIMIT", 10))

# Every post created together with its user gets this title.
DEFAULT_POST_TITLE = os.getenv("DEFAULT_POST_TITLE", "Sample Title")

AGGREGATE_DEDUPE = os.getenv("AGGREGATE_DEDUPE", "false").lower() in ("1", "true", "yes")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:4001")
