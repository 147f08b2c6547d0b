"""Lag-window helpers for FIR design matrices."""
from __future__ import annotations
import numpy as np
from numpy.lib.stride_tricks import sliding_window_view


def lag_windows(x: np.ndarray, q: int, ii: int = 0) -> np.ndarray:
    """Stack the lagged samples feeding each predictable output sample.

    Row ``r`` holds the inputs for target sample ``n = r + q + ii``:
    ``[x[n - ii], x[n - ii - 1], ..., x[n - ii - q]]``, i.e. the newest
    sample first.

    Args:
        x: 1D input array of length N.
        q: Number of lag taps (window is ``q + 1`` samples).
        ii: Look-ahead; the newest input is ``ii`` samples before the target.
    Returns:
        Array of shape (N - q - ii, q + 1). Empty when N <= q + ii.
    """
    x = np.asarray(x, dtype=float)
    usable = x.size - ii
    if usable < q + 1:
        return np.empty((0, q + 1), dtype=float)
    return sliding_window_view(x[:usable], q + 1)[:, ::-1]
