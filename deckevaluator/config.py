from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "Deck Evaluator"
    debug: bool = False
    log_level: str = "INFO"

    scryfall_api_url: str = "https://api.scryfall.com"
    archidekt_api_url: str = "https://archidekt.com/api"
    moxfield_api_url: str = "https://api2.moxfield.com/v2"

    user_agent: str = "Mozilla/5.0 (compatible; deck-evaluator/1.0)"

    # Seconds before an external request is abandoned
    http_timeout: float = 10.0

    # Scryfall accepts at most 75 identifiers per /cards/collection request
    scryfall_batch_size: int = 75

    # Scryfall asks for 50-100ms between requests
    scryfall_request_delay: float = 0.1


settings = Settings()


# =============================================================================
# REQUEST LIMITS
# =============================================================================

# Longest decklist text accepted by /deck-parse
MAX_DECKLIST_LENGTH = 50_000

# Most distinct card names accepted by /deck-enrich in one request
MAX_UNIQUE_CARD_NAMES = 250

# Longest single card name accepted by /deck-enrich
MAX_CARD_NAME_LENGTH = 200
