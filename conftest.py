import os

# Settings are read once and cached; point them at test-friendly values before any app import
os.environ.setdefault("ENABLE_RATE_LIMITER", "false")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("DB_CHECK_QUERY", "SELECT CURRENT_TIMESTAMP")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from settings.config import get_settings  # noqa: E402

get_settings.cache_clear()
