import os

# --- SERVER ---
HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "1234"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# --- PATHS ---
# Seed data ships next to the app modules
APP_DIR = os.path.dirname(os.path.abspath(__file__))
MOVIES_PATH = os.getenv("MOVIES_PATH", os.path.join(APP_DIR, "movies.json"))

# --- CORS ---
DEFAULT_ORIGINS = [
    "http://localhost:8080",
    "http://localhost:1234",
    "https://movies.com",
    "https://midu.dev",
]


def parse_origins(raw):
    """Splits a comma-separated origin list, ignoring blanks."""
    return [o.strip().rstrip("/") for o in raw.split(",") if o.strip()]


ACCEPTED_ORIGINS = parse_origins(os.getenv("ACCEPTED_ORIGINS", "")) or DEFAULT_ORIGINS
ALLOWED_METHODS = ["GET", "POST", "PATCH", "DELETE", "OPTIONS"]
