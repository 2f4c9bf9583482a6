"""
Configuration management using Pydantic Settings.
Loads configuration from environment variables and .env file.
"""
from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application Configuration
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    # CORS Configuration
    CORS_ORIGINS: str = "*"

    # Development/Debug
    DEBUG: bool = False
    RELOAD: bool = False

    # Spell-check Configuration
    SPELLCHECK_ENABLED: bool = True  # Load the dictionary at startup
    SPELLCHECK_WORDLIST_PATH: str = "/app/data/dictionaries/words.txt"  # One word per line
    SPELLCHECK_ALPHABET: str = "abcdefghijklmnopqrstuvwxyz'"  # Every dictionary character must be listed
    SPELLCHECK_LOWERCASE: bool = True  # Lower-case words before insertion and checking
    SPELLCHECK_MIN_WORD_LENGTH: int = 3  # Words shorter than this are never flagged
    SPELLCHECK_MAX_INSERTIONS: int = 1  # Letters the typed word may be missing
    SPELLCHECK_MAX_DELETIONS: int = 1  # Extra letters the typed word may have
    SPELLCHECK_MAX_SWAPS: int = 1  # Adjacent transpositions
    SPELLCHECK_MAX_SUBSTITUTIONS: int = 1  # Wrong letters
    SPELLCHECK_SUGGESTION_COUNT: int = 5  # Max suggestions per misspelled word
    SPELLCHECK_MAX_FUZZY_WORD_LENGTH: int = 64  # Longer words skip the fuzzy search
    SPELLCHECK_MAX_REQUEST_BUDGET: int = 2  # Upper bound on each budget in per-request checkers

    # Logging Configuration (Optional - per-module log levels)
    APP_LOG_LEVEL: Optional[str] = None
    UVICORN_LOG_LEVEL: Optional[str] = None
    HTTPX_LOG_LEVEL: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True
    )

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins from comma-separated string."""
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]


settings = Settings()
