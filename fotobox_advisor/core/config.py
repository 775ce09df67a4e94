from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "Fobi Fotobox Advisor"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    # JSON knowledge document; the bundled default catalog is used when unset
    CATALOG_PATH: str | None = None

    # Sessions kept in memory, oldest evicted first
    SESSION_LIMIT: int = 1000


settings = Settings()
