# feedforward/config.py
from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Optional

import numpy as np


def float_dtype(dtype) -> np.dtype:
    """Resolve ``dtype`` and require a floating-point kind."""
    try:
        resolved = np.dtype(dtype)
    except TypeError as e:
        raise ValueError(f"Unknown dtype: {dtype!r}") from e
    if not np.issubdtype(resolved, np.floating):
        raise ValueError(f"dtype must be a floating-point type, got {resolved.name!r}")
    return resolved


@dataclass(frozen=True)
class Config:
    seed: Optional[int] = None  # None -> fresh entropy on every network
    dtype: str = "float64"

    def __post_init__(self):
        float_dtype(self.dtype)

    @classmethod
    def from_env(cls) -> "Config":
        seed = os.environ.get("FEEDFORWARD_SEED")
        if seed in (None, ""):
            seed = None
        else:
            try:
                seed = int(seed)
            except ValueError:
                raise ValueError(f"FEEDFORWARD_SEED must be an integer, got {seed!r}") from None
        return cls(seed=seed, dtype=os.environ.get("FEEDFORWARD_DTYPE", "float64"))


CFG = Config.from_env()
