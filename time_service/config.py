"""
Runtime settings for the time service.

Values come from environment variables prefixed with ``TIME_SERVICE_`` so they
can be supplied through a Kubernetes ConfigMap. Every field has a default that
matches the manifests in ``kubernetes/``.
"""
from __future__ import annotations

import logging
import os
from typing import Mapping, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "TIME_SERVICE_"


class Settings(BaseModel):
    model_config = {"extra": "ignore", "frozen": True}

    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=9095, ge=1, le=65535, description="Listen port")
    base_path: str = Field(default="/localtime", description="Mount point of the time route")
    timezone: Optional[str] = Field(
        default=None,
        description="IANA zone for currentTime; unset means server local time",
    )
    log_level: str = Field(default="INFO", description="Root log level")
    metrics_enabled: bool = Field(default=True, description="Expose /metrics")

    @field_validator("base_path")
    @classmethod
    def _normalise_base_path(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("base_path must start with '/'")
        value = value.rstrip("/")
        if not value:
            raise ValueError("base_path must not be the root path")
        return value

    @field_validator("timezone")
    @classmethod
    def _check_timezone(cls, value: Optional[str]) -> Optional[str]:
        if value is None or value == "":
            return None
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"unknown timezone: {value!r}") from exc
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value!r}")
        return level

    @property
    def tzinfo(self) -> Optional[ZoneInfo]:
        return ZoneInfo(self.timezone) if self.timezone else None


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from ``TIME_SERVICE_*`` variables (defaults to ``os.environ``)."""
    if environ is None:
        environ = os.environ
    values = {
        key[len(ENV_PREFIX):].lower(): value
        for key, value in environ.items()
        if key.startswith(ENV_PREFIX)
    }
    return Settings(**values)
