# src/settings.py
from __future__ import annotations

import logging
import os
from typing import Optional

import numpy as np

# Optional integer seed for a reproducible universe (unset -> fresh randomness)
DASHBOARD_SEED = os.getenv("DASHBOARD_SEED")
EXPORT_DIR = os.getenv("EXPORT_DIR", "output")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def _parse_seed(raw: Optional[str]) -> Optional[int]:
    if raw is None or not str(raw).strip():
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"DASHBOARD_SEED must be an integer, got {raw!r}")


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """
    Return a numpy Generator.

    Explicit seed wins; otherwise DASHBOARD_SEED is used; otherwise the
    generator is seeded from OS entropy.
    """
    if seed is None:
        seed = _parse_seed(DASHBOARD_SEED)
    return np.random.default_rng(seed)


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
