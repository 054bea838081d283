from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Display
    CURRENCY_SYMBOL: str = "₹"
    LOCALE: str = "en"
    UNLIMITED_MARKER: str = "∞"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"

    # Data integrity: usageCount above usageLimit
    WARN_ON_USAGE_OVERFLOW: bool = Field(default=True)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("CURRENCY_SYMBOL", "UNLIMITED_MARKER")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must not be blank")
        return v.strip()

    @field_validator("LOCALE", mode="before")
    @classmethod
    def _normalize_locale(cls, v):
        if v in (None, ""):
            return "en"
        return str(v).split("-")[0].split("_")[0].strip().lower() or "en"


settings = Settings()
