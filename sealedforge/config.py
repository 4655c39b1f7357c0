from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "SealedForge"
    debug: bool = False

    scryfall_api_url: str = "https://api.scryfall.com"
    booster_data_url: str = "https://bensonperry.com/booster-data"
    sets_url: str = "https://bensonperry.com/shared/sets.json"

    user_agent: str = "SealedForge/1.0"
    request_timeout: float = 30.0

    # Generic failures back off linearly: retry_backoff * attempt
    max_retries: int = 3
    retry_backoff: float = 0.1

    # 429 responses pause for a fixed delay and do not count against max_retries
    rate_limit_delay: float = 1.0
    max_rate_limit_retries: int = 10

    # Scryfall asks for 50-100ms between requests
    page_delay: float = 0.1


settings = Settings()


# =============================================================================
# SEALED POOL DEFAULTS
# =============================================================================

# Six boosters is a standard sealed event
DEFAULT_NUM_PACKS = 6

# Upper bound accepted by the API (a full booster box)
MAX_PACKS = 36

# Chance a rare slot is upgraded to mythic (roughly 1 in 8)
DEFAULT_MYTHIC_RATE = 0.125


# =============================================================================
# DAILY CHALLENGE
# =============================================================================

DAILY_SEED_PREFIX = "daily-"

# Only sets released on or after this date are eligible for the daily pick
DAILY_SET_CUTOFF = "2020-01-01"
