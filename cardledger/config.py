from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "CardLedger"
    debug: bool = False

    database_url: str = "sqlite+aiosqlite:///cards.db"

    host: str = "0.0.0.0"
    port: int = 3000

    log_level: str = "INFO"

    wiki_base_url: str = "https://yugioh.fandom.com/wiki/"

    # Output template used by `cardledger list`
    default_formatter: str = "|{series}|{number}|{name}|"


settings = Settings()


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def sqlite_url(path: str | Path) -> str:
    """Build an aiosqlite database URL for a file path (or ``:memory:``)."""
    if str(path) == ":memory:":
        return "sqlite+aiosqlite:///:memory:"
    return f"sqlite+aiosqlite:///{Path(path)}"
