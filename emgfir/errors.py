"""Exceptions raised while validating and evaluating FIR EMG-torque models.

Every exception derives from :class:`EvaluationError`, which is a
``ValueError``, so callers that already guard numeric pipelines with
``except ValueError`` keep working. None of these failures are transient:
the caller has to fix the inputs and call again.
"""
from __future__ import annotations


class EvaluationError(ValueError):
    """Base class for all evaluator input failures."""


class TooFewArguments(EvaluationError, TypeError):
    """A required input (coefficients, EMG, torque, params or trim) is missing."""


class ShapeMismatch(EvaluationError):
    """EMG/torque batches or trials have inconsistent shapes."""


class InvalidParams(EvaluationError):
    """Model params are not ``[Q, D, Tol, ii]`` with Q >= 0, D >= 1, ii >= 0."""


class InvalidTrim(EvaluationError):
    """Trim is not two non-negative sample counts."""


class MalformedOptions(EvaluationError):
    """Options were not given as complete name/value pairs."""


class UnknownOption(EvaluationError):
    """Option name is not one of ``Edist`` or ``Emeth``."""


class InvalidOptionValue(EvaluationError):
    """Option value is outside the option's enumerated set."""


class InvalidRange(EvaluationError):
    """Scoring window is empty once lags, look-ahead and trim are removed."""
