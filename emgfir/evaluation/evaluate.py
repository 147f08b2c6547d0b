"""Evaluate a fitted non-linear FIR EMG-torque model on test trials.

Three entry points share one implementation:

- :func:`evaluate_batch` scores a container of trials and returns a
  :class:`BatchResult`.
- :func:`evaluate_single` scores one trial (as a batch of one) and returns
  a :class:`TrialResult`.
- :func:`evaluate` keeps the classic call style: options as name/value
  pairs, and ``(errors, estimates)`` returned as a scalar and a matrix for
  a single trial or as containers for a batch.

Estimates come back in canonical orientation (samples x outputs) and span
the whole trial. Their first ``Q + ii`` rows repeat the first predicted
row; scoring skips those rows plus the requested trim.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any

import numpy as np

from ..config import EvalConfig, ModelParams, Trim, parse_options
from ..errors import MalformedOptions, ShapeMismatch, TooFewArguments
from ..modeling.design import build_design_matrix
from ..modeling.fir import DesignBuilder, estimate_trial
from ..normalization import TrialBatch, normalize_batch
from ..utils.arrays import is_batch
from .metrics import per_output_errors, scoring_window, trial_error

log = logging.getLogger(__name__)


@dataclass
class TrialResult:
    """Outcome for one trial.

    Attributes:
        error: Scalar error over the scored window (>= 0).
        estimate: Time-aligned torque estimate, (samples x outputs).
        target: Torque aligned the same way, padded like the estimate.
        scored: Zero-based slice of the scored samples.
        per_output: Error of each output channel alone, same reduction.
    """
    error: float
    estimate: np.ndarray
    target: np.ndarray
    scored: slice
    per_output: np.ndarray


@dataclass
class BatchResult:
    """Outcome for a batch, arranged like the input container."""
    errors: np.ndarray
    estimates: Any
    trials: list[TrialResult]
    single: bool = False


def _run(
    coefficients: np.ndarray,
    batch: TrialBatch,
    params: ModelParams,
    trim: Trim,
    config: EvalConfig,
    builder: DesignBuilder,
) -> BatchResult:
    # trials share one shape, so the window is checked before any work
    window = scoring_window(batch.trials[0].n_samples, params, trim)

    results = []
    for m, trial in enumerate(batch):
        estimate, target = estimate_trial(trial, coefficients, params, builder)
        err = trial_error(estimate, target, window, config)
        results.append(TrialResult(
            error=err,
            estimate=estimate,
            target=target,
            scored=window,
            per_output=per_output_errors(estimate, target, window, config.emeth),
        ))
        log.debug("Trial %d: %s %s error %.6g over samples [%d, %d)",
                  m, config.edist.value, config.emeth.value, err, window.start, window.stop)

    errors = np.array([r.error for r in results], dtype=float).reshape(batch.shape)
    log.info("Evaluated %d trial(s) (%s, %s): mean error %.6g",
             len(results), config.edist.value, config.emeth.value, float(np.mean(errors)))
    return BatchResult(
        errors=errors,
        estimates=batch.arrange([r.estimate for r in results]),
        trials=results,
        single=batch.single,
    )


def evaluate_batch(
    coefficients: np.ndarray,
    emg_batch: Any,
    torque_batch: Any,
    params: Any,
    trim: Any,
    config: EvalConfig | None = None,
    builder: DesignBuilder | None = None,
) -> BatchResult:
    """Evaluate the model on every trial of a batch.

    Args:
        coefficients: Fitted coefficients, (n_columns x outputs) or a 1D
            vector for one output.
        emg_batch: list/tuple/object ndarray of (samples x channels) arrays.
        torque_batch: Same arrangement, (samples x outputs) arrays.
        params: ``[Q, D, Tol, ii]`` or a :class:`ModelParams`.
        trim: ``[head, tail]`` or a :class:`Trim`.
        config: Error options; defaults to Component/RMS.
        builder: Design-matrix builder; defaults to
            :func:`emgfir.modeling.design.build_design_matrix`.
    Returns:
        BatchResult with ``errors`` shaped like the batch and ``estimates``
        in the same kind of container.
    """
    config = config or EvalConfig()
    batch = normalize_batch(emg_batch, torque_batch, auto_orient=config.auto_orient)
    params = ModelParams.from_sequence(params)
    trim = Trim.from_sequence(trim)
    return _run(coefficients, batch, params, trim, config, builder or build_design_matrix)


def evaluate_single(
    coefficients: np.ndarray,
    emg: np.ndarray,
    torque: np.ndarray,
    params: Any,
    trim: Any,
    config: EvalConfig | None = None,
    builder: DesignBuilder | None = None,
) -> TrialResult:
    """Evaluate the model on one trial; see :func:`evaluate_batch`."""
    if is_batch(emg) or is_batch(torque):
        raise ShapeMismatch("evaluate_single takes one EMG and one torque array; use evaluate_batch.")
    result = evaluate_batch(coefficients, [emg], [torque], params, trim, config=config, builder=builder)
    return result.trials[0]


def evaluate(
    coefficients: np.ndarray | None = None,
    emg: Any = None,
    torque: Any = None,
    params: Any = None,
    trim: Any = None,
    *options: Any,
    config: EvalConfig | None = None,
    builder: DesignBuilder | None = None,
):
    """Estimate torque from EMG with a fitted FIR model and score it.

    ``emg`` and ``torque`` are either one numeric array each or parallel
    containers (list, tuple or object ndarray) of per-trial arrays. Options
    are name/value pairs, e.g.
    ``evaluate(x, emg, torque, [2, 1, 0, 1], [0, 0], "Edist", "Distance")``,
    or a structured ``config``.

    Returns:
        ``(error, estimate)`` for a single trial; ``(errors, estimates)``
        arranged like the input containers for a batch.
    Raises:
        TooFewArguments: any of the five inputs is missing.
        MalformedOptions: odd option count, or both pairs and ``config``.
        EvaluationError: any other validation failure (see ``emgfir.errors``).
    """
    supplied = (("coefficients", coefficients), ("emg", emg), ("torque", torque),
                ("params", params), ("trim", trim))
    missing = [name for name, value in supplied if value is None]
    if missing:
        raise TooFewArguments(f"Need >= 5 input arguments; missing {', '.join(missing)}.")
    if options and config is not None:
        raise MalformedOptions("Give options either as name/value pairs or as config, not both.")

    batch = normalize_batch(emg, torque, auto_orient=True if config is None else config.auto_orient)
    params = ModelParams.from_sequence(params)
    trim = Trim.from_sequence(trim)
    config = config or parse_options(options)

    result = _run(coefficients, batch, params, trim, config, builder or build_design_matrix)
    if result.single:
        return result.trials[0].error, result.trials[0].estimate
    return result.errors, result.estimates
