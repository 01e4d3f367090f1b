"""Application configuration from environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings

_DEFAULT_SEMANTIC_MAP = Path(__file__).parent / "semantic" / "semantic_map_v2.json"


class Settings(BaseSettings):
    sfcm_log_level: str = "info"

    # Static keyword dictionary (normalized keyword -> 4 axes)
    sfcm_semantic_map_path: Path = _DEFAULT_SEMANTIC_MAP

    # Input contract
    sfcm_max_keywords: int = 10

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
