"""Library configuration: VariatesConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

import psutil

from variates._logging import configure_logging
from variates._source import DEFAULT_SEED, UniformSource, set_source

__all__ = [
    'VariatesConfig',
    'current_workers',
    'get_config',
    'init',
]

MAX_WORKERS = 256


@dataclass(frozen=True)
class VariatesConfig:
    """Configuration for the variates library.

    Attributes:
        seed: Seed of the process-wide uniform source.
        workers: Default number of child streams for ``UniformSource.spawn()``.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_logs: Render logs as JSON (True) or colored console output (False).
    """

    seed: int = DEFAULT_SEED
    workers: int = 4
    log_level: str | None = None
    json_logs: bool = True


# Global configuration (set by init())
_config: VariatesConfig | None = None


def _detect_seed() -> int:
    """Detect the default seed from the environment.

    Reads ``VARIATES_SEED``; unset, malformed or negative values fall back to
    ``DEFAULT_SEED``.
    """
    raw = os.environ.get('VARIATES_SEED', '').strip()
    if not raw:
        return DEFAULT_SEED
    try:
        value = int(raw, 0)
    except ValueError:
        logging.warning("Invalid VARIATES_SEED value '%s', defaulting to %d", raw, DEFAULT_SEED)
        return DEFAULT_SEED
    if value < 0:
        logging.warning("Negative VARIATES_SEED value '%s', defaulting to %d", raw, DEFAULT_SEED)
        return DEFAULT_SEED
    return value


def _detect_workers() -> int:
    """Detect a worker count from local system resources.

    Uses physical CPU cores, capped by available memory at roughly one worker
    per GB, clamped to 1..256.
    """
    physical_cores = psutil.cpu_count(logical=False)
    if not physical_cores:
        physical_cores = psutil.cpu_count(logical=True) or 4

    available_memory_gb = psutil.virtual_memory().available / (1024**3)
    memory_limit = max(1, int(available_memory_gb))
    physical_cores = min(physical_cores, memory_limit)

    return max(1, min(MAX_WORKERS, physical_cores))


def init(
    seed: int | None = None,
    workers: int | None = None,
    log_level: str | None = None,
    *,
    json_logs: bool = True,
) -> VariatesConfig:
    """Initialize the library with specified configuration.

    Installs a fresh process-wide ``UniformSource`` seeded with the resolved
    seed, so calling ``init()`` twice with the same seed restarts the same
    sequence.

    Args:
        seed: Seed for the process-wide source. Falls back to ``VARIATES_SEED``,
            then 0.
        workers: Default child stream count for ``spawn()``. Auto-detected if None.
        log_level: Logging level ("DEBUG", "INFO", etc.). None = leave logging alone.
        json_logs: Render logs as JSON when logging is configured.

    Returns:
        The VariatesConfig that was set.

    Example:
        ```python
        import variates

        variates.init(seed=42, log_level='DEBUG')
        variates.randint(1, 6)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_seed = _detect_seed() if seed is None else seed
    resolved_workers = _detect_workers() if workers is None else max(1, min(MAX_WORKERS, workers))

    # Configure logging first so the seeding event below is captured
    if log_level is not None:
        configure_logging(log_level, json_output=json_logs)

    set_source(UniformSource(resolved_seed))

    _config = VariatesConfig(
        seed=resolved_seed,
        workers=resolved_workers,
        log_level=log_level,
        json_logs=json_logs,
    )
    return _config


def get_config() -> VariatesConfig:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'variates not initialized. Call variates.init() first.'
        raise RuntimeError(msg)
    return _config


def current_workers() -> int:
    """Worker count from the active config, or detected when uninitialized."""
    if _config is None:
        return _detect_workers()
    return _config.workers
