"""Runtime configuration sourced from environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Mapping, Optional, TypeVar

LOGGER = logging.getLogger(__name__)

ENV_PREFIX = "PORTFOLIO_BANDS_"

T = TypeVar("T")


@dataclass(frozen=True)
class Settings:
    """Process-wide defaults for band percentiles, formatting and exports."""

    low_percentile: float = 5.0
    high_percentile: float = 95.0
    currency_symbol: str = "$"
    sample_paths: int = 10
    output_dir: str = "output"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``PORTFOLIO_BANDS_*`` variables."""
        env = os.environ if environ is None else environ
        defaults = cls()
        low = _read(env, "LOW_PERCENTILE", float, defaults.low_percentile)
        high = _read(env, "HIGH_PERCENTILE", float, defaults.high_percentile)
        # NaN fails every comparison, so it lands here too.
        if not 0.0 <= low <= 50.0 <= high <= 100.0:
            LOGGER.warning(
                "Ignoring band %s-%s; percentiles must satisfy 0 <= low <= 50 <= high <= 100, "
                "using %s-%s",
                low,
                high,
                defaults.low_percentile,
                defaults.high_percentile,
            )
            low, high = defaults.low_percentile, defaults.high_percentile
        return cls(
            low_percentile=low,
            high_percentile=high,
            currency_symbol=env.get(ENV_PREFIX + "CURRENCY_SYMBOL", defaults.currency_symbol),
            sample_paths=_read(env, "SAMPLE_PATHS", int, defaults.sample_paths),
            output_dir=env.get(ENV_PREFIX + "OUTPUT_DIR", defaults.output_dir),
            log_level=env.get(ENV_PREFIX + "LOG_LEVEL", defaults.log_level).upper(),
        )


def _read(env: Mapping[str, str], name: str, cast: Callable[[str], T], default: T) -> T:
    raw = env.get(ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw.strip())
    except ValueError:
        LOGGER.warning("Ignoring invalid %s%s=%r; using %r", ENV_PREFIX, name, raw, default)
        return default


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the settings for this process (read once)."""
    return Settings.from_env()


__all__ = ["ENV_PREFIX", "Settings", "get_settings"]
