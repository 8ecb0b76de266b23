import os
from functools import lru_cache

from dotenv import load_dotenv, find_dotenv

# Values from a local .env file take effect before the Settings class is evaluated
_env_path = find_dotenv(usecwd=True)
if _env_path:
    load_dotenv(_env_path, override=False)


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./storefront.db")
    # WARNING: the default key is for local development only
    SECRET_KEY: str = os.getenv("SECRET_KEY", "change-me")
    ALGORITHM: str = os.getenv("ALGORITHM", "HS256")
    # Default to 7 days so users stay logged in for a week
    ACCESS_TOKEN_EXPIRE_MINUTES: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(7 * 24 * 60)))
    # Insert the sample catalog on first start when the products table is empty
    SEED_SAMPLE_DATA: bool = _as_bool(os.getenv("SEED_SAMPLE_DATA", "1"))
    # Comma separated list of allowed origins
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "*")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in (self.CORS_ORIGINS or "").split(",") if o.strip()]


@lru_cache
def get_settings():
    return Settings()
