"""
config.py

Client configuration: connection options, the unknown-field policy used when
decoding payloads, and helpers that read both from the environment.

Environment variables
---------------------
CURSEFORGE_API_KEY / CURSEFORGE_API_TOKEN
    x-api-key sent to the official API (the first one wins).
CURSEFORGE_API_BASE
    Alternative API root, e.g. a proxy that does not need a key.
CURSEFORGE_TIMEOUT
    Per-request timeout in seconds.
CURSEFORGE_MAX_CONNECTIONS
    Connection pool ceiling for the underlying HTTP client.
CURSEFORGE_USER_AGENT
    User-Agent header value.
CURSEFORGE_UNKNOWN_FIELDS
    One of ``ignore``, ``allow`` or ``deny``.
"""

from __future__ import annotations

import os
from enum import Enum
from typing import Any, Mapping, Optional, Union

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError

DEFAULT_USER_AGENT = "curseforge-python/0.3.1"
DEFAULT_TIMEOUT = 15.0

ENV_PREFIX = "CURSEFORGE_"
ENV_API_KEY = "CURSEFORGE_API_KEY"
ENV_API_TOKEN = "CURSEFORGE_API_TOKEN"
ENV_API_BASE = "CURSEFORGE_API_BASE"
ENV_TIMEOUT = "CURSEFORGE_TIMEOUT"
ENV_MAX_CONNECTIONS = "CURSEFORGE_MAX_CONNECTIONS"
ENV_USER_AGENT = "CURSEFORGE_USER_AGENT"
ENV_UNKNOWN_FIELDS = "CURSEFORGE_UNKNOWN_FIELDS"


class UnknownFields(str, Enum):
    """
    Policy applied when a payload carries keys (or enum values) the typed
    model does not know about.

    IGNORE
        Drop unknown keys; unknown enum values are still an error.
    ALLOW
        Keep unknown keys in ``other_fields`` and decode unknown enum values
        to the enum's ``UNKNOWN`` member.
    DENY
        Reject unknown keys with a DataValidationError. Useful in tests to
        make sure every field the API returns is accounted for.
    """

    IGNORE = "ignore"
    ALLOW = "allow"
    DENY = "deny"

    @classmethod
    def parse(cls, value: Union["UnknownFields", str, None]) -> "UnknownFields":
        if value is None:
            return cls.IGNORE
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ConfigurationError(
            f"unknown_fields must be one of {[m.value for m in cls]}, got {value!r}"
        )


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        name = ".".join(str(p) for p in err["loc"]) or "options"
        parts.append(f"{name} ({ENV_PREFIX}{name.upper()}): {err['msg']}")
    return "; ".join(parts)


class ClientOptions(BaseSettings):
    """
    Tunables shared by the CurseForge and CFWidget clients.

    Values passed as keyword arguments win; anything not passed is read from
    the ``CURSEFORGE_*`` environment variables, then falls back to the
    defaults below. Invalid values raise ConfigurationError.

    Attributes
    ----------
    timeout : float
        Per-request timeout in seconds.
    max_connections : Optional[int]
        Maximum simultaneous connections to the host (None = httpx default).
    user_agent : str
        User-Agent header sent with every request.
    unknown_fields : UnknownFields
        Decoding policy for keys not described by the models.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        case_sensitive=False,
        env_ignore_empty=True,
    )

    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    max_connections: Optional[int] = Field(default=None, ge=1)
    user_agent: str = Field(default=DEFAULT_USER_AGENT, min_length=1)
    unknown_fields: UnknownFields = UnknownFields.IGNORE

    def __init__(self, **values: Any):
        try:
            super().__init__(**values)
        except ValidationError as exc:
            raise ConfigurationError(f"invalid client options: {_describe(exc)}") from exc

    @field_validator("unknown_fields", mode="before")
    @classmethod
    def _normalize_unknown_fields(cls, value: Any) -> Any:
        if value is None:
            return UnknownFields.IGNORE
        if isinstance(value, str) and not isinstance(value, UnknownFields):
            return value.strip().lower()
        return value


def options_from_env(environ: Optional[Mapping[str, str]] = None) -> ClientOptions:
    """
    Build ClientOptions from ``CURSEFORGE_*`` environment variables.

    With `environ` given, its values take precedence over the process
    environment. Variables that are unset or empty keep the defaults.
    """
    if environ is None:
        return ClientOptions()
    values = {}
    for name in ClientOptions.model_fields:
        raw = environ.get(ENV_PREFIX + name.upper())
        if raw is not None and raw.strip():
            values[name] = raw.strip()
    return ClientOptions(**values)


def api_key_from_env(environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    environ = os.environ if environ is None else environ
    return environ.get(ENV_API_KEY) or environ.get(ENV_API_TOKEN) or None


def api_base_from_env(environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    environ = os.environ if environ is None else environ
    return environ.get(ENV_API_BASE) or None
