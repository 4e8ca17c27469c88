# storefront/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict


# ======================
# Server / storage settings (env vars STOREFRONT_*, or .env)
# ======================
class Settings(BaseSettings):
    DATABASE_PATH: str = "./users.db"

    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # seed ten mock users at startup
    PRELOAD: bool = False

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_",
        env_file=".env",
        extra="ignore",
        case_sensitive=False
    )

settings = Settings()
