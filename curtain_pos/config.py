import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent

# .env next to the package or in the working directory; real env wins
load_dotenv(BASE_DIR.parent / ".env")
load_dotenv()

API_BASE_URL = os.getenv("CURTAIN_POS_API_BASE_URL", "http://localhost:5000/api").rstrip("/")
PRINT_URL = os.getenv("CURTAIN_POS_PRINT_URL", "http://localhost:4000/print")
LOG_LEVEL = os.getenv("CURTAIN_POS_LOG_LEVEL", "INFO").upper()


def _timeout_from_env(raw: str | None) -> float | None:
    """Empty or unparsable means no timeout (requests waits indefinitely)."""
    if not raw or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if value > 0 else None


HTTP_TIMEOUT = _timeout_from_env(os.getenv("CURTAIN_POS_HTTP_TIMEOUT"))
