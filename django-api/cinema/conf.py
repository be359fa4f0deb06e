"""App settings read from the `CINEMA` dict in Django settings."""

from dataclasses import dataclass
from datetime import date

from django.conf import settings

DEFAULTS = {
    "HOLIDAYS": ["2025-01-01", "2025-07-04", "2025-12-25"],
    "GATEWAY_LATENCY_SCALE": 1.0,
    "GATEWAY_TIMEOUT_SECONDS": 5.0,
    "RANDOM_SEED": None,
    "MOVIES_CACHE_TIMEOUT": 300,
}


@dataclass(frozen=True)
class CinemaSettings:
    holidays: frozenset[date]
    gateway_latency_scale: float
    gateway_timeout_seconds: float
    random_seed: int | None
    movies_cache_timeout: int


def cinema_settings() -> CinemaSettings:
    """Merge `settings.CINEMA` over the defaults."""
    values = {**DEFAULTS, **getattr(settings, "CINEMA", {})}
    return CinemaSettings(
        holidays=frozenset(date.fromisoformat(d) for d in values["HOLIDAYS"] or ()),
        gateway_latency_scale=float(values["GATEWAY_LATENCY_SCALE"]),
        gateway_timeout_seconds=float(values["GATEWAY_TIMEOUT_SECONDS"]),
        random_seed=values["RANDOM_SEED"],
        movies_cache_timeout=int(values["MOVIES_CACHE_TIMEOUT"]),
    )
