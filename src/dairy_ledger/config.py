"""Application configuration and settings management."""

from pathlib import Path
from typing import Any, Literal, Optional

import json
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="DAIRY_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Dairy Ledger API"
    api_prefix: str = "/api"
    data_root: Path = Field(default=Path("data"), description="Root directory for persisted data.")
    store_file: Optional[Path] = Field(
        default=None,
        description="Snapshot file holding every location ledger. Defaults to data_root/dairy_pro_v1.json.",
    )
    default_location_name: str = Field(
        default="Main Farm",
        min_length=1,
        description="Location created when the store is empty.",
    )
    search_limit: int = Field(default=50, ge=1, description="Maximum number of search hits returned.")
    reverse_balances_on_product_delete: bool = Field(
        default=True,
        description=(
            "Reverse customer balances and history for entries removed by a product delete. "
            "Disable to keep the legacy behavior, which leaves balances stale."
        ),
    )
    log_level: Literal["debug", "info", "warning", "error"] = "info"
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("data_root", "store_file", mode="before")
    @classmethod
    def _expand_path(cls, value: Any) -> Optional[Path]:
        if value is None or value == "":
            return None
        path_value = value if isinstance(value, Path) else Path(str(value))
        return path_value.expanduser().resolve()

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()

    @model_validator(mode="after")
    def _default_store_file(self) -> "Settings":
        if self.store_file is None:
            self.store_file = self.data_root / "dairy_pro_v1.json"
        return self


settings = Settings()
