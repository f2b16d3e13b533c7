from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from pydantic import field_validator, model_validator
from typing import Annotated, Any, ClassVar
import json
from pathlib import Path
import os


class Settings(BaseSettings):
    API_V1_STR: str = "/api/v1"

    # Database URL
    # Use an absolute path so running the app from different directories
    # (e.g., repo root or backend/) always resolves the same DB file.
    BASE_DIR: ClassVar[Path] = Path(__file__).resolve().parents[2]
    SQLALCHEMY_DATABASE_URL: str = f"sqlite:///{BASE_DIR / 'console.db'}"

    # CORS origins
    CORS_ORIGINS: Annotated[list[str], NoDecode] = ["http://localhost:3000"]
    CORS_ALLOW_ALL: bool = False

    # Logging / tracing
    LOG_LEVEL: str = "INFO"
    ENABLE_TRACING: bool = False
    ENABLE_CONSOLE_TRACING: bool = True

    # Reverse geocoding used to turn a drawn service area into zip codes.
    GOOGLE_MAPS_API_KEY: str = ""
    # Shared .env with the frontend; accepted as a fallback key.
    NEXT_PUBLIC_GOOGLE_MAPS_API_KEY: str = ""
    GEOCODE_URL: str = "https://maps.googleapis.com/maps/api/geocode/json"
    GEOCODE_TIMEOUT: float = 3.0
    ZIPCODE_SAMPLE_LIMIT: int = 20

    # Bearer secret for the auto-complete cron endpoint; empty disables the check.
    CRON_SECRET: str = ""

    # Bookings console
    CALENDAR_CELL_LIMIT: int = 2
    DEFAULT_JOB_LENGTH_MINUTES: int = 60
    # In-process auto-complete loop; 0 leaves it to the cron endpoint.
    AUTO_COMPLETE_INTERVAL_SECONDS: int = 0
    # Assigning a provider always confirms the booking. When False, assignment
    # to completed/cancelled bookings is rejected instead.
    ALLOW_ASSIGNMENT_ON_CLOSED_BOOKINGS: bool = True

    model_config = SettingsConfigDict(
        extra="forbid",
        case_sensitive=True,
    )

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

    @field_validator("GOOGLE_MAPS_API_KEY", "NEXT_PUBLIC_GOOGLE_MAPS_API_KEY", "CRON_SECRET", mode="before")
    def strip_whitespace(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v

    @model_validator(mode="after")
    def allow_all_if_requested(cls, values: "Settings") -> "Settings":
        if values.CORS_ALLOW_ALL:
            values.CORS_ORIGINS = ["*"]
        return values

    @property
    def maps_api_key(self) -> str:
        return self.GOOGLE_MAPS_API_KEY or self.NEXT_PUBLIC_GOOGLE_MAPS_API_KEY


def load_settings() -> "Settings":
    return Settings(_env_file=os.getenv("ENV_FILE", str(Path(__file__).resolve().parents[3] / ".env")))


settings = load_settings()
