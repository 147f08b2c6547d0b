"""Small array utilities used across the evaluator."""
from __future__ import annotations
from typing import Any

import numpy as np


def is_batch(x: Any) -> bool:
    """True for trial containers: list, tuple or object-dtype ndarray.

    A numeric ndarray is always a single trial.
    """
    if isinstance(x, np.ndarray):
        return x.dtype == object
    return isinstance(x, (list, tuple))


def as_matrix(x: Any) -> np.ndarray | None:
    """Coerce a 1D or 2D numeric array to a float 2D array.

    1D input becomes a single column. Returns None for anything else.
    """
    try:
        arr = np.asarray(x, dtype=float)
    except (TypeError, ValueError):
        return None
    if arr.ndim == 1:
        return arr.reshape(-1, 1)
    if arr.ndim != 2:
        return None
    return arr


def repeat_first_row(x: np.ndarray, n: int) -> np.ndarray:
    """Prepend ``n`` copies of the first row of a 2D array."""
    if n <= 0:
        return x.copy()
    return np.vstack([np.repeat(x[:1], n, axis=0), x])
