"""Environment settings for the decoder CLI and HTTP API."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, TypeVar

T = TypeVar("T")

TRUE_WORDS = {"1", "true", "t", "yes", "y", "on"}
FALSE_WORDS = {"0", "false", "f", "no", "n", "off"}


class ErrorPolicy(str, Enum):
    HALT = "halt"
    SKIP = "skip"


def _raw(key: str) -> Optional[str]:
    """Stripped value of `key`, or None when unset or blank."""
    value = (os.getenv(key) or "").strip()
    return value or None


def _setting(key: str, default: T, parse: Callable[[str], T], expected: str) -> T:
    value = _raw(key)
    if value is None:
        return default
    try:
        return parse(value)
    except ValueError as exc:
        raise ValueError(f"Environment variable {key} must be {expected}") from exc


def _parse_bool(value: str) -> bool:
    word = value.lower()
    if word in TRUE_WORDS:
        return True
    if word in FALSE_WORDS:
        return False
    raise ValueError(value)


def _parse_policy(value: str) -> ErrorPolicy:
    return ErrorPolicy(value.lower())


@dataclass(frozen=True)
class AppConfig:
    log_level: str
    error_policy: ErrorPolicy
    api_host: str
    api_port: int
    api_debug: bool
    max_lines: int


def load_config() -> AppConfig:
    policies = " or ".join(p.value for p in ErrorPolicy)
    return AppConfig(
        log_level=_setting("LOG_LEVEL", "WARNING", str.upper, "a log level"),
        error_policy=_setting("OCR_ERROR_POLICY", ErrorPolicy.HALT, _parse_policy, policies),
        api_host=_setting("OCR_API_HOST", "0.0.0.0", str, "a host name"),
        api_port=_setting("OCR_API_PORT", 8000, int, "an integer"),
        api_debug=_setting("OCR_API_DEBUG", False, _parse_bool, "a boolean"),
        max_lines=max(1, _setting("OCR_MAX_LINES", 40_000, int, "an integer")),
    )
