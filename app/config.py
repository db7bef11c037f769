"""Runtime configuration helpers for environment-driven settings."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final, Optional, Sequence


FORMAT_PLAIN: Final[str] = "plain"
FORMAT_LABELED: Final[str] = "labeled"
FORMAT_JSON: Final[str] = "json"
FORMATS: Final[tuple] = (FORMAT_PLAIN, FORMAT_LABELED, FORMAT_JSON)


def env_flag(name: str, *, default: bool = False) -> bool:
    """Return a boolean flag from environment variables.

    The helper treats common truthy values (``1``, ``true``, ``yes``, ``on``)
    as ``True`` and common falsy ones (``0``, ``false``, ``no``, ``off``) as
    ``False``.  If the variable is unset or contains an unrecognised value, the
    provided ``default`` is used.
    """
    value = os.getenv(name)
    if value is None:
        return default

    normalised = value.strip().lower()
    if normalised in {"1", "true", "yes", "on"}:
        return True
    if normalised in {"0", "false", "no", "off"}:
        return False
    return default


def env_int(name: str, *, default: Optional[int] = None) -> Optional[int]:
    """Return an integer from environment variables.

    Unset or blank variables yield ``default``.  Anything that is not an
    integer raises ``ValueError`` naming the variable.
    """
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value.strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


def env_choice(name: str, choices: Sequence[str], *, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    normalised = value.strip().lower()
    return normalised if normalised in choices else default


@dataclass(frozen=True)
class Settings:
    seed: Optional[int] = None
    timing: bool = False
    output_format: str = FORMAT_PLAIN
    log_level: str = "WARNING"


def load_settings() -> Settings:
    return Settings(
        seed=env_int("FLEET_SEED"),
        timing=env_flag("FLEET_TIMING", default=False),
        output_format=env_choice("FLEET_FORMAT", FORMATS, default=FORMAT_PLAIN),
        log_level=(os.getenv("FLEET_LOG_LEVEL") or "WARNING").strip().upper(),
    )


__all__ = [
    "FORMAT_PLAIN",
    "FORMAT_LABELED",
    "FORMAT_JSON",
    "FORMATS",
    "Settings",
    "env_flag",
    "env_int",
    "env_choice",
    "load_settings",
]
