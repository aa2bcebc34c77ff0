import json
from typing import Annotated

from pydantic import AliasChoices, Field, PositiveInt, field_validator
from pydantic_settings import BaseSettings, NoDecode


class Settings(BaseSettings):
    gemini_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("gemini_api_key", "google_api_key"),
    )
    gemini_model: str = "gemini-2.5-flash"
    gemini_temperature: float | None = None
    gemini_max_output_tokens: int | None = None

    # None keeps prompts uncapped
    prompt_field_max_chars: PositiveInt | None = None

    log_resume_text: bool = False
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: Annotated[list[str], NoDecode] = ["*"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _parse_cors_origins(cls, raw):
        """Accept CORS_ORIGINS as comma-separated string or JSON list."""
        if not isinstance(raw, str):
            return raw
        if raw.startswith("["):
            return json.loads(raw)
        return [o.strip() for o in raw.split(",") if o.strip()]


settings = Settings()
