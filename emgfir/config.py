"""Configuration dataclasses for FIR model evaluation.

This module centralizes the evaluator's options (error combination and
reduction), the model parameters shared with training, and the scoring
trim, so evaluation scripts and tests share one validated setup.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Sequence

import numpy as np

from .errors import (
    InvalidOptionValue,
    InvalidParams,
    InvalidTrim,
    MalformedOptions,
    UnknownOption,
)


class ErrorDistance(str, Enum):
    """How errors of multiple torque outputs are combined."""
    COMPONENT = "Component"
    DISTANCE = "Distance"


class ErrorMethod(str, Enum):
    """Statistical reduction applied over the scored window."""
    RMS = "RMS"
    MAV = "MAV"


@dataclass(frozen=True)
class EvalConfig:
    """Evaluation options.

    Attributes:
        edist: "Component" averages errors of every output channel;
            "Distance" first takes the Euclidean distance across outputs at
            each time step.
        emeth: "RMS" (root mean square) or "MAV" (mean absolute value).
        auto_orient: Transpose inputs whose shape suggests time runs along
            columns. This is a shape heuristic; disable it when inputs are
            already (samples x channels) and could be shorter than wide.
    """

    edist: ErrorDistance = ErrorDistance.COMPONENT
    emeth: ErrorMethod = ErrorMethod.RMS
    auto_orient: bool = True

    def __post_init__(self):
        # accept plain strings such as EvalConfig(edist="Distance")
        for name, label, enum_cls in (("edist", "Edist", ErrorDistance), ("emeth", "Emeth", ErrorMethod)):
            value = getattr(self, name)
            try:
                object.__setattr__(self, name, enum_cls(value))
            except ValueError:
                raise InvalidOptionValue(f'Bogus "{label}": "{value}".') from None


@dataclass(frozen=True)
class ModelParams:
    """FIR model parameters ``[Q, D, Tol, ii]``.

    Attributes:
        q: Number of lag taps (FIR memory length), >= 0.
        d: Polynomial degree / channel grouping factor, >= 1.
        tol: Training tolerance; carried along but unused by evaluation.
        ii: Look-ahead horizon in samples, >= 0.
    """

    q: int
    d: int
    tol: float
    ii: int

    def __post_init__(self):
        q = _as_count(self.q, "Q", InvalidParams)
        d = _as_count(self.d, "D", InvalidParams)
        ii = _as_count(self.ii, "ii", InvalidParams)
        tol = _as_number(self.tol, "Tol", InvalidParams)
        if q < 0:
            raise InvalidParams("Q less than zero.")
        if d < 1:
            raise InvalidParams("D less than one.")
        if ii < 0:
            raise InvalidParams("ii less than zero.")
        for name, value in (("q", q), ("d", d), ("tol", tol), ("ii", ii)):
            object.__setattr__(self, name, value)

    @property
    def lead(self) -> int:
        """Samples lost at the start of a trial (lags plus look-ahead)."""
        return self.q + self.ii

    @classmethod
    def from_sequence(cls, values: Any) -> "ModelParams":
        """Build params from a 4-element vector; checks run in ``__post_init__``."""
        if isinstance(values, ModelParams):
            return values
        arr = _as_vector(values, "Param", InvalidParams)
        if arr.size != 4:
            raise InvalidParams(f"length(Param) must be 4, got {arr.size}.")
        q, d, tol, ii = arr
        return cls(q=q, d=d, tol=tol, ii=ii)


@dataclass(frozen=True)
class Trim:
    """Extra samples excluded from scoring at the start and end of a trial."""

    head: int = 0
    tail: int = 0

    def __post_init__(self):
        head = _as_count(self.head, "Trim(1)", InvalidTrim)
        tail = _as_count(self.tail, "Trim(2)", InvalidTrim)
        if head < 0:
            raise InvalidTrim("Trim(1) must be non-negative.")
        if tail < 0:
            raise InvalidTrim("Trim(2) must be non-negative.")
        object.__setattr__(self, "head", head)
        object.__setattr__(self, "tail", tail)

    @classmethod
    def from_sequence(cls, values: Any) -> "Trim":
        if isinstance(values, Trim):
            return values
        arr = _as_vector(values, "Trim", InvalidTrim)
        if arr.size != 2:
            raise InvalidTrim(f"length(Trim) must be 2, got {arr.size}.")
        return cls(head=arr[0], tail=arr[1])


_OPTIONS = {
    "Edist": ("edist", ErrorDistance),
    "Emeth": ("emeth", ErrorMethod),
}


def parse_options(pairs: Sequence[Any], base: EvalConfig | None = None) -> EvalConfig:
    """Parse legacy name/value option pairs into an :class:`EvalConfig`.

    Names and values are matched exactly, e.g.
    ``parse_options(["Edist", "Distance", "Emeth", "MAV"])``. Later pairs
    override earlier ones.

    Raises:
        MalformedOptions: odd number of arguments.
        UnknownOption: name other than "Edist" or "Emeth".
        InvalidOptionValue: value outside the option's enumerated set.
    """
    if len(pairs) % 2 == 1:
        raise MalformedOptions("Need even number of optional args.")
    fields = {}
    for name, value in zip(pairs[0::2], pairs[1::2]):
        if not isinstance(name, str) or name not in _OPTIONS:
            raise UnknownOption(f'Bogus PropertyName "{name}".')
        field, enum_cls = _OPTIONS[name]
        try:
            fields[field] = enum_cls(value)
        except ValueError:
            raise InvalidOptionValue(f'Bogus "{name}": "{value}".') from None
    base = base or EvalConfig()
    return EvalConfig(
        edist=fields.get("edist", base.edist),
        emeth=fields.get("emeth", base.emeth),
        auto_orient=base.auto_orient,
    )


def _as_vector(values: Any, name: str, exc: type[Exception]) -> np.ndarray:
    try:
        arr = np.asarray(values, dtype=float)
    except (TypeError, ValueError):
        raise exc(f"{name} must be numeric, got {values!r}.") from None
    # row or column vectors are fine, matrices are not
    if arr.ndim == 0 or sum(n != 1 for n in arr.shape) > 1:
        raise exc(f"{name} not a vector.")
    return arr.ravel()


def _as_number(value: Any, name: str, exc: type[Exception]) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise exc(f"{name} must be numeric, got {value!r}.") from None
    if not np.isfinite(value):
        raise exc(f"{name} must be finite, got {value}.")
    return value


def _as_count(value: Any, name: str, exc: type[Exception]) -> int:
    value = _as_number(value, name, exc)
    if not value.is_integer():
        raise exc(f"{name} must be a whole number of samples, got {value}.")
    return int(value)
