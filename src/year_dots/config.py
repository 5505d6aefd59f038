"""Environment-driven settings shared by the CLI and the web app."""

import os
from dataclasses import dataclass

DEFAULT_MAX_CANVAS = 2048
DEFAULT_CACHE_MAX_AGE = 60
DEFAULT_SUPERSAMPLE = 2


@dataclass(frozen=True)
class Settings:
    max_canvas_size: int = DEFAULT_MAX_CANVAS
    cache_max_age: int = DEFAULT_CACHE_MAX_AGE
    supersample: int = DEFAULT_SUPERSAMPLE


def load_settings() -> Settings:
    """
    Build settings from ``YEAR_DOTS_*`` environment variables.

    Entry points call ``load_dotenv()`` first so a local ``.env`` file is honoured.

    Raises:
        ValueError: If a variable is set to something other than a positive integer
    """
    return Settings(
        max_canvas_size=_int_from_env("YEAR_DOTS_MAX_CANVAS", DEFAULT_MAX_CANVAS),
        cache_max_age=_int_from_env("YEAR_DOTS_CACHE_MAX_AGE", DEFAULT_CACHE_MAX_AGE, minimum=0),
        supersample=_int_from_env("YEAR_DOTS_SUPERSAMPLE", DEFAULT_SUPERSAMPLE),
    )


def _int_from_env(name: str, default: int, minimum: int = 1) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{raw}'")
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value
