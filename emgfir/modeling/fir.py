"""Apply fitted FIR coefficients and re-align estimates to the trial length."""
from __future__ import annotations
import logging
from typing import Callable

import numpy as np

from ..config import ModelParams
from ..errors import ShapeMismatch
from ..normalization import Trial
from ..utils.arrays import repeat_first_row

log = logging.getLogger(__name__)

DesignBuilder = Callable[[np.ndarray, np.ndarray, ModelParams], tuple[np.ndarray, np.ndarray]]


def apply_coefficients(A: np.ndarray, coefficients: np.ndarray, n_outputs: int) -> np.ndarray:
    """Return ``A @ coefficients`` as a (rows x n_outputs) array."""
    coefficients = np.asarray(coefficients, dtype=float)
    if coefficients.ndim == 1:
        coefficients = coefficients.reshape(-1, 1)
    if coefficients.ndim != 2 or coefficients.shape[0] != A.shape[1]:
        raise ShapeMismatch(f"Coefficients {coefficients.shape} do not match a design matrix "
                            f"with {A.shape[1]} columns.")
    if coefficients.shape[1] != n_outputs:
        raise ShapeMismatch(f"Coefficients predict {coefficients.shape[1]} output(s), "
                            f"torque has {n_outputs}.")
    return A @ coefficients


def estimate_trial(
    trial: Trial,
    coefficients: np.ndarray,
    params: ModelParams,
    builder: DesignBuilder,
) -> tuple[np.ndarray, np.ndarray]:
    """Estimate torque for one trial.

    The first ``Q + ii`` samples cannot be predicted. Both the estimate and
    the builder's target are padded there with copies of their first row,
    so the returned arrays have the trial's full length and each row lines
    up in time with the input EMG and torque. The padded rows are a flat
    line, not a prediction.

    Returns:
        (estimate, target), both (samples x outputs).
    """
    n_rows = trial.n_samples - params.lead
    A, b1 = builder(trial.emg, trial.torque, params)
    A = np.asarray(A, dtype=float)
    b1 = np.asarray(b1, dtype=float)
    if b1.ndim == 1:
        b1 = b1.reshape(-1, 1)
    if A.ndim != 2 or A.shape[0] != n_rows:
        raise ShapeMismatch(f"Design matrix has shape {A.shape}, expected {n_rows} rows.")
    if b1.shape != (n_rows, trial.n_outputs):
        raise ShapeMismatch(f"Target slice has shape {b1.shape}, expected {(n_rows, trial.n_outputs)}.")

    raw = apply_coefficients(A, coefficients, trial.n_outputs)
    log.debug("Estimated %d of %d samples (%d regressors)", n_rows, trial.n_samples, A.shape[1])
    return repeat_first_row(raw, params.lead), repeat_first_row(b1, params.lead)
