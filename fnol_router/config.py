"""Application configuration."""
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Description terms that send a claim to investigation / to a bodily-injury specialist
FRAUD_KEYWORDS = ("fraud", "inconsistent", "staged", "suspicious", "false")
INJURY_KEYWORDS = ("injury", "injured", "hurt", "hospital", "medical", "ambulance")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="FNOL_",
        extra="ignore",
    )

    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    fast_track_damage_threshold: float = 25_000.0
    # Lists are read from the environment as JSON, e.g. FNOL_FRAUD_KEYWORDS='["fraud"]'
    fraud_keywords: list[str] = Field(default_factory=lambda: list(FRAUD_KEYWORDS))
    injury_keywords: list[str] = Field(default_factory=lambda: list(INJURY_KEYWORDS))


settings = Settings()
