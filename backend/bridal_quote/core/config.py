from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from pydantic import field_validator, model_validator
from typing import Annotated, Any
import json
from pathlib import Path
import os


class Settings(BaseSettings):
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "Bridal Beauty Quote API"

    # CORS origins
    CORS_ORIGINS: Annotated[list[str], NoDecode] = ["http://localhost:3000", "http://localhost:5173"]
    CORS_ALLOW_ALL: bool = False

    # Currency label shown next to every amount in quotes
    DEFAULT_CURRENCY: str = "EUR"

    LOG_LEVEL: str = "INFO"

    # Artist-specific rate cards keyed by "<service>:<artist>", e.g.
    # {"makeup:Lola": {"bridal_unit": "150"}}. Fields left out fall back to
    # the service default card.
    ARTIST_RATE_CARDS: Annotated[dict[str, dict[str, Any]], NoDecode] = {}

    model_config = SettingsConfigDict(extra="ignore", case_sensitive=True)

    @field_validator("CORS_ORIGINS", mode="before")
    def split_origins(cls, v: Any) -> list[str]:
        """Parse comma-separated or JSON list of origins from environment."""
        if isinstance(v, str):
            try:
                parsed = json.loads(v)
                if isinstance(parsed, list):
                    return parsed
            except json.JSONDecodeError:
                pass
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @field_validator("ARTIST_RATE_CARDS", mode="before")
    def parse_rate_cards(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip()
            if not v:
                return {}
            return json.loads(v)
        return v

    @field_validator("LOG_LEVEL", "DEFAULT_CURRENCY", mode="before")
    def upper_strip(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @model_validator(mode="after")
    def allow_all_if_requested(self) -> "Settings":
        if self.CORS_ALLOW_ALL:
            self.CORS_ORIGINS = ["*"]
        return self


def load_settings() -> "Settings":
    return Settings(_env_file=os.getenv("ENV_FILE", str(Path(__file__).resolve().parents[3] / ".env")))


settings = load_settings()
