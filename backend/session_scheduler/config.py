import os

from dotenv import load_dotenv

load_dotenv()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "")
    if not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


APP_NAME = os.getenv("APP_NAME", "Session Scheduler API")
APP_VERSION = os.getenv("APP_VERSION", "0.1.0")

CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]
_extra = os.getenv("CORS_ORIGINS", "")
if _extra:
    CORS_ORIGINS.extend(o.strip() for o in _extra.split(",") if o.strip())

# Form defaults (same as the session form: 60 min session, 5 min rest)
DEFAULT_SESSION_MINUTES = _env_int("SCHEDULER_DEFAULT_SESSION_MINUTES", 60)
DEFAULT_REST_MINUTES = _env_int("SCHEDULER_DEFAULT_REST_MINUTES", 5)

# Upper bound on team_count accepted over HTTP (match count grows as n^2)
MAX_TEAMS = _env_int("SCHEDULER_MAX_TEAMS", 64)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": LOG_LEVEL,
    },
}
