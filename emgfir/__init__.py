"""Evaluation of fitted non-linear FIR EMG-torque models.

Modules are organized by evaluation stage:
- config: option, parameter and trim dataclasses
- errors: exception taxonomy for invalid inputs
- normalization: batch/single coercion and orientation of EMG/torque
- windowing: lag windows for FIR regressors
- modeling: design matrices and time-aligned estimates
- evaluation: error metrics and entry points
- utils: small helpers
"""
from .config import ErrorDistance, ErrorMethod, EvalConfig, ModelParams, Trim
from .evaluation import BatchResult, TrialResult, evaluate, evaluate_batch, evaluate_single
from .utils.logging import configure_logging, install_null_handler

install_null_handler()

__all__ = [
    "ErrorDistance",
    "ErrorMethod",
    "EvalConfig",
    "ModelParams",
    "Trim",
    "BatchResult",
    "TrialResult",
    "evaluate",
    "evaluate_batch",
    "evaluate_single",
    "configure_logging",
]
