import logging
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from .env_utils import load_env

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    # Brief titles are cut to this many characters; the description keeps
    # the full transcript.
    TITLE_MAX_LENGTH: int = 60

    # When True, a "go to ..." command with no known destination returns the
    # lower-cased text in UnknownIntent.raw_text instead of the transcript.
    LEGACY_NAV_UNKNOWN_CASE: bool = False

    # Fold curly quotes/dashes and collapse whitespace before parsing
    NORMALIZE_TRANSCRIPT: bool = False

    # HTTP layer only; the parser itself accepts any length
    MAX_TRANSCRIPT_CHARS: int = 2000

    HOST: str = "127.0.0.1"
    PORT: int = 8000

    model_config = SettingsConfigDict(env_prefix="VOICEFLOW_", case_sensitive=False)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, loading ``.env`` files first.

    Cached; tests call ``get_settings.cache_clear()`` after changing env.
    """
    load_env()
    settings = Settings()
    logger.debug(
        "settings loaded: title_max_length=%d legacy_nav_unknown_case=%s normalize=%s",
        settings.TITLE_MAX_LENGTH,
        settings.LEGACY_NAV_UNKNOWN_CASE,
        settings.NORMALIZE_TRANSCRIPT,
    )
    return settings
