"""Runtime settings for the validator, read from the environment and CLI flags."""

import os
from typing import Mapping, Optional, Set, Tuple

from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "SCHEMA_VALIDATOR_"


class ValidatorSettings(BaseModel):
    """Registry connection and batch settings."""
    registry_url: Optional[str] = None
    timeout_seconds: float = Field(10.0, gt=0)
    max_workers: int = Field(4, ge=1)
    extensions: Set[str] = Field(default_factory=lambda: {".avsc"})
    username: Optional[str] = None
    password: Optional[str] = None

    @field_validator("registry_url")
    @classmethod
    def validate_registry_url(cls, v: Optional[str]) -> Optional[str]:
        """Require an http(s) URL and drop any trailing slash."""
        if v is None:
            return v
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Registry URL '{v}' must start with http:// or https://")
        return v.rstrip("/")

    @property
    def auth(self) -> Optional[Tuple[str, str]]:
        if self.username is None:
            return None
        return (self.username, self.password or "")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "ValidatorSettings":
        """Build settings from SCHEMA_VALIDATOR_* variables; non-None overrides win."""
        env = os.environ if environ is None else environ
        values = {}
        for field_name, env_name in (
            ("registry_url", "REGISTRY_URL"),
            ("timeout_seconds", "TIMEOUT"),
            ("max_workers", "MAX_WORKERS"),
            ("username", "USERNAME"),
            ("password", "PASSWORD"),
        ):
            raw = env.get(ENV_PREFIX + env_name)
            if raw:
                values[field_name] = raw
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
