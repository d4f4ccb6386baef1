"""Centralised configuration handling for SalesDash."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Literal, Mapping

import streamlit as st
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_APP_ID = "default-app-id"
DEFAULT_USER_ID = "local-user"


def _streamlit_section(name: str) -> Mapping[str, Any] | None:
    """Return a mapping from Streamlit secrets for the given section."""

    try:
        if hasattr(st, "secrets") and name in st.secrets:
            section = st.secrets[name]
            if isinstance(section, Mapping):
                return section
            return dict(section)
    except Exception:  # pragma: no cover - accessing secrets may fail in tests
        return None
    return None


class Settings(BaseSettings):
    """Application settings sourced from env vars and Streamlit secrets."""

    app_id: str = DEFAULT_APP_ID
    user_id: str = DEFAULT_USER_ID
    store_backend: Literal["memory", "csv"] = "memory"
    data_dir: Path = Path("data")
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="SALESDASH_", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """Load and cache application settings."""

    overrides: dict[str, Any] = {}
    secrets_section = _streamlit_section("salesdash")
    if secrets_section:
        overrides = {
            field: secrets_section.get(field)
            for field in ("app_id", "user_id", "store_backend", "data_dir", "log_level")
        }

    return Settings(**{k: v for k, v in overrides.items() if v is not None})
