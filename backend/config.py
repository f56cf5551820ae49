import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
repo_root = Path(__file__).resolve().parents[1]
environment = os.getenv("ENVIRONMENT", "development")
env_file = repo_root / f".env.{environment}"
if env_file.exists():
    load_dotenv(env_file, override=True)
else:
    env_path = repo_root / ".env"
    if env_path.exists():
        load_dotenv(env_path, override=True)
load_dotenv()


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name, "").strip()
    return float(value) if value else default


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name, "").strip()
    return int(value) if value else default


class Config:
    # Upstream provider. A missing key is reported per request, not at startup.
    SERPAPI_KEY = os.getenv("SERPAPI_KEY", "").strip()
    SERPAPI_BASE_URL = os.getenv("SERPAPI_BASE_URL", "https://serpapi.com").strip()
    SERPAPI_TIMEOUT = _env_float("SERPAPI_TIMEOUT", 30.0)
    SERPAPI_MAX_RETRIES = _env_int("SERPAPI_MAX_RETRIES", 0)
    # Minimum seconds between upstream calls; 0 disables spacing
    SERPAPI_RATE_LIMIT_DELAY = _env_float("SERPAPI_RATE_LIMIT_DELAY", 0.0)

    # Result cache
    CACHE_TTL_SECONDS = _env_float("CACHE_TTL_SECONDS", 3600.0)

    DEFAULT_LOCATION = os.getenv("DEFAULT_LOCATION", "").strip() or "United States"

    # CORS configuration: allow frontend origin(s) via env (comma-separated)
    _cors_env = os.getenv("CORS_ORIGINS", "").strip()
    CORS_ORIGINS = (
        [o.strip() for o in _cors_env.split(",") if o.strip()]
        if _cors_env
        else [
            "https://google-job-scraper.vercel.app",
            "http://localhost:5173",
            "http://localhost:3000",
        ]
    )
    CORS_METHODS = ["GET", "POST", "OPTIONS"]
    CORS_HEADERS = ["Content-Type", "Authorization"]

    PORT = _env_int("PORT", 5001)
