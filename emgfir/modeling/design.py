"""Reference design-matrix builder for non-linear FIR EMG-torque models.

The evaluator treats the builder as an injected collaborator with a single
contract: for a trial of N samples it returns

- ``A``: (N - Q - ii) x n_columns regressors
- ``b1``: (N - Q - ii) x outputs targets, the torque from sample Q + ii on

This module provides the polynomial lag builder used by default.

Regressors
----------
For target sample ``n`` (zero-based, ``Q + ii <= n < N``), channel ``c``,
degree ``d`` in ``1..D`` and lag ``q`` in ``0..Q``:

.. math:: A[n - Q - ii, ((d - 1) C + c)(Q + 1) + q] = e_c[n - ii - q]^d

so columns are grouped by degree, then channel, then lag, giving
``(Q + 1) * C * D`` columns. There is no intercept column.
"""
from __future__ import annotations
import numpy as np

from ..config import ModelParams
from ..errors import ShapeMismatch
from ..windowing import lag_windows


def build_design_matrix(emg: np.ndarray, torque: np.ndarray, params: ModelParams) -> tuple[np.ndarray, np.ndarray]:
    """Build ``(A, b1)`` for one trial.

    Args:
        emg: (samples x channels) EMG amplitude.
        torque: (samples x outputs) torque.
        params: Model parameters; ``q``, ``d`` and ``ii`` are used.
    Returns:
        (A, b1) as described in the module docstring.
    Raises:
        ShapeMismatch: sample counts differ, or the trial is not longer
            than Q + ii samples.
    """
    emg = np.asarray(emg, dtype=float)
    torque = np.asarray(torque, dtype=float)
    n = emg.shape[0]
    if torque.shape[0] != n:
        raise ShapeMismatch(f"Eamp and T time durations differ: {n} vs {torque.shape[0]}.")
    if n <= params.lead:
        raise ShapeMismatch(f"Trial of {n} samples is too short for Q + ii = {params.lead}.")

    lags = [lag_windows(emg[:, c], params.q, params.ii) for c in range(emg.shape[1])]
    blocks = [w ** d for d in range(1, params.d + 1) for w in lags]
    A = np.hstack(blocks)
    b1 = torque[params.lead:].copy()
    return A, b1
