import os

PAGE_SIZE = 10
NO_POSTER = "N/A"
PLACEHOLDER_POSTER_URL = "https://via.placeholder.com/100x150?text=No+Image"


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except Exception:
        return default


def _parse_backend_url() -> str:
    raw = os.getenv("MOVIE_REVIEWS_BACKEND_URL", "http://127.0.0.1:8000")
    return raw.strip().rstrip("/")


# BACKEND NETWORKING
BACKEND_URL = _parse_backend_url()
CONNECT_TIMEOUT_SEC = _env_float("CONNECT_TIMEOUT_SEC", 2.0)
READ_TIMEOUT_SEC = _env_float("READ_TIMEOUT_SEC", 10.0)

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
