"""
Service settings.
Read once from environment variables at import time, with defaults suited
to local development.
"""

import os


def _csv_env(name: str, default: str) -> list[str]:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


class Settings:
    """Centralized settings with environment variable overrides"""

    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///../app.db")

    # JSON cache of the last catalog read from the database
    CARDS_CACHE_PATH = os.getenv(
        "CARDS_CACHE_PATH",
        os.path.join(os.path.dirname(os.path.dirname(__file__)), "data", "cards_cache.json"),
    )
    try:
        CARDS_CACHE_TTL_SECONDS = int(os.getenv("CARDS_CACHE_TTL_SECONDS", str(24 * 60 * 60)))
    except ValueError:
        CARDS_CACHE_TTL_SECONDS = 24 * 60 * 60

    # Cards new wallets start with; the first one becomes the default card
    DEFAULT_WALLET_CARD_IDS = _csv_env(
        "DEFAULT_WALLET_CARD_IDS",
        "amex-gold,chase-sapphire-preferred,citi-double-cash,chase-freedom-unlimited",
    )

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
