# config.py
import os
from dataclasses import dataclass
from functools import lru_cache

# First match wins; Netlify's AI gateway injects the first name
GEMINI_KEY_VARS = ("GOOGLE_GENERATIVE_AI_API_KEY", "GEMINI_API_KEY", "GOOGLE_API_KEY")


class ConfigurationError(ValueError):
    pass


def _env(name: str) -> str | None:
    value = os.environ.get(name, "").strip()
    return value or None


@dataclass(frozen=True)
class Settings:
    """Process-wide settings read from the environment."""

    openai_api_key: str | None
    openai_base_url: str | None
    gemini_api_key: str | None
    log_level: str
    cors_origins: list[str]

    def require(self, field: str, env_names: tuple[str, ...] = ()) -> str:
        """Return a configured value or fail naming the variable(s) it is read from."""
        value = getattr(self, field)
        if not value:
            names = " or ".join(env_names or (field.upper(),))
            raise ConfigurationError(f"Configuration value is invalid: {names}")
        return value


def load_settings() -> Settings:
    gemini_api_key = None
    for name in GEMINI_KEY_VARS:
        gemini_api_key = _env(name)
        if gemini_api_key:
            break

    origins = _env("CORS_ORIGINS") or "*"

    return Settings(
        openai_api_key=_env("OPENAI_API_KEY"),
        openai_base_url=_env("OPENAI_BASE_URL"),
        gemini_api_key=gemini_api_key,
        log_level=(_env("LOG_LEVEL") or "INFO").upper(),
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings are read once per process."""
    return load_settings()
