from __future__ import annotations

from dataclasses import dataclass
import os

from .coding import DEFAULT_CHUNK_SIZE

DEFAULT_CHARSET = "UTF-8"


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    normalized = raw.strip().casefold()
    return normalized not in {"0", "false", "off", ""}


def _env_positive_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip(), 0)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


@dataclass(frozen=True)
class DumpConfig:
    charset: str
    trace: bool
    chunk_size: int


def load_config() -> DumpConfig:
    return DumpConfig(
        charset=os.getenv("CHARDUMP_CHARSET") or DEFAULT_CHARSET,
        trace=_env_flag("CHARDUMP_TRACE", default=False),
        chunk_size=_env_positive_int("CHARDUMP_CHUNK_SIZE", DEFAULT_CHUNK_SIZE),
    )


__all__ = ["DEFAULT_CHARSET", "DumpConfig", "load_config"]
