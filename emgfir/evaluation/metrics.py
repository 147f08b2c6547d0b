"""Error metrics for FIR torque estimates.

Two independent choices define the error of one trial:

Combination (``Edist``)
    ``Component`` treats every output channel sample as one error term.
    ``Distance`` first collapses the outputs at each time step into the
    squared Euclidean distance :math:`d_n^2 = \\sum_k (\\hat{y}_{nk} - y_{nk})^2`.

Reduction (``Emeth``)
    ``MAV`` is a mean of magnitudes, ``RMS`` the root of a mean of squares.

==========  ==============================  ===============================
Edist       MAV                             RMS
==========  ==============================  ===============================
Component   :math:`mean(|e_{nk}|)`          :math:`\\sqrt{mean(e_{nk}^2)}`
Distance    :math:`mean_n(d_n)`             :math:`\\sqrt{mean_n(d_n^2)}`
==========  ==============================  ===============================

With a single output both combinations give the same value.
"""
from __future__ import annotations
import numpy as np
from sklearn.metrics import mean_absolute_error, mean_squared_error

from ..config import ErrorDistance, ErrorMethod, EvalConfig, ModelParams, Trim
from ..errors import InvalidRange


def rms(x: np.ndarray) -> float:
    """Root mean square of all values."""
    x = np.asarray(x, dtype=float)
    return float(np.sqrt(np.mean(x * x)))


def mav(x: np.ndarray) -> float:
    """Mean absolute value of all values."""
    x = np.asarray(x, dtype=float)
    return float(np.mean(np.abs(x)))


def scoring_window(n_samples: int, params: ModelParams, trim: Trim) -> slice:
    """Zero-based slice of the samples that are scored.

    Skips the ``Q + ii`` padded samples plus ``trim.head`` at the start and
    ``trim.tail`` at the end. In 1-indexed terms the window is
    ``1 + Q + ii + head .. N - tail``.

    Raises:
        InvalidRange: the window holds no samples.
    """
    start = params.lead + trim.head
    stop = n_samples - trim.tail
    if start >= stop:
        raise InvalidRange(f"Nothing left to score in {n_samples} samples: Q + ii = {params.lead}, "
                           f"Trim = [{trim.head}, {trim.tail}].")
    return slice(start, stop)


def component_error(diff: np.ndarray, method: ErrorMethod) -> float:
    """Error over every (time, output) element of ``diff``."""
    diff = np.asarray(diff, dtype=float)
    if method is ErrorMethod.MAV:
        return mav(diff.ravel())
    return rms(diff.ravel())


def distance_error(diff: np.ndarray, method: ErrorMethod) -> float:
    """Error of the per-time-step Euclidean distance across outputs."""
    diff = np.asarray(diff, dtype=float)
    if diff.ndim == 1:
        diff = diff.reshape(-1, 1)
    e2 = diff[:, 0] ** 2 if diff.shape[1] == 1 else np.sum(diff ** 2, axis=1)
    if method is ErrorMethod.MAV:
        return float(np.mean(np.sqrt(e2)))
    return float(np.sqrt(np.mean(e2)))


def trial_error(estimate: np.ndarray, target: np.ndarray, window: slice, config: EvalConfig) -> float:
    """Scalar error between aligned estimate and target over ``window``."""
    diff = np.asarray(estimate, dtype=float)[window] - np.asarray(target, dtype=float)[window]
    if config.edist is ErrorDistance.DISTANCE:
        return distance_error(diff, config.emeth)
    return component_error(diff, config.emeth)


def per_output_errors(estimate: np.ndarray, target: np.ndarray, window: slice, method: ErrorMethod) -> np.ndarray:
    """MAV or RMS of each output channel over ``window``.

    Non-finite samples make the breakdown NaN instead of raising, matching
    how the scalar error propagates them.
    """
    y_true = np.asarray(target, dtype=float)[window]
    y_pred = np.asarray(estimate, dtype=float)[window]
    if not (np.all(np.isfinite(y_true)) and np.all(np.isfinite(y_pred))):
        return np.full(y_true.shape[1], np.nan)
    if method is ErrorMethod.MAV:
        return mean_absolute_error(y_true, y_pred, multioutput="raw_values")
    return np.sqrt(mean_squared_error(y_true, y_pred, multioutput="raw_values"))
