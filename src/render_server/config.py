"""
Render defaults. Worker count and seed can be overridden from the
environment:

    PATHTRACER_WORKERS=4 PATHTRACER_SEED=123 python main.py
"""

import os
from typing import Optional

from core.errors import ConfigurationError

DEFAULT_TILE_SIZE = (32, 32)  # (rows, cols)

# Completed tiles that may wait for the consumer before workers block.
CHANNEL_CAPACITY = 1

# How often blocked workers and the consumer re-check for cancellation (seconds).
POLL_INTERVAL = 0.05

WORKERS_ENV = 'PATHTRACER_WORKERS'
SEED_ENV = 'PATHTRACER_SEED'


def _env_int(name: str) -> Optional[int]:
    raw = os.environ.get(name, '').strip()
    if not raw:
        return None
    try:
        return int(raw, 0)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


def resolve_workers(workers: Optional[int] = None) -> int:
    """Explicit value, then $PATHTRACER_WORKERS, then the hardware parallelism."""
    if workers is None:
        workers = _env_int(WORKERS_ENV)
    if workers is None:
        workers = os.cpu_count() or 1
    if workers < 1:
        raise ConfigurationError(f"worker count must be at least 1, got {workers}")
    return workers


def resolve_seed(seed: Optional[int] = None) -> Optional[int]:
    """Explicit value, then $PATHTRACER_SEED. None means seed from the clock."""
    if seed is None:
        seed = _env_int(SEED_ENV)
    return seed


def resolve_tile_size(tile_size) -> tuple:
    if isinstance(tile_size, int):
        tile_size = (tile_size, tile_size)
    rows, cols = tile_size
    if rows < 1 or cols < 1:
        raise ConfigurationError(f"tile size must be positive, got {rows}x{cols}")
    return rows, cols
