"""Input normalization for model evaluation.

Turns the caller's EMG amplitude and torque inputs, given either as one
matrix each or as parallel containers of per-trial matrices, into a
:class:`TrialBatch` of canonically oriented float arrays.

Canonical orientation
---------------------
Both arrays are stored with time along axis 0:

- ``emg``: (samples x channels)
- ``torque``: (samples x outputs)

With ``auto_orient`` enabled, orientation is guessed from the shape: an EMG
array with more columns than rows, or a torque array with fewer rows than
columns, is transposed. This assumes every trial is longer than it is wide,
which holds for any realistic recording but is still a heuristic.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Iterator

import numpy as np

from .errors import ShapeMismatch
from .utils.arrays import as_matrix, is_batch

log = logging.getLogger(__name__)


@dataclass
class Trial:
    """One paired EMG/torque observation in canonical orientation."""
    emg: np.ndarray
    torque: np.ndarray

    @property
    def n_samples(self) -> int:
        return int(self.emg.shape[0])

    @property
    def n_outputs(self) -> int:
        return int(self.torque.shape[1])


@dataclass
class TrialBatch:
    """Ordered trials plus the arrangement they arrived in.

    Attributes:
        trials: Trials in flat (C) order.
        shape: Arrangement of the input container; ``(k,)`` for a list.
        single: True when the caller passed plain matrices, not containers.
        container: ``list`` or ``np.ndarray``; the kind of container results
            are returned in.
    """
    trials: list[Trial]
    shape: tuple[int, ...]
    single: bool = False
    container: type = field(default=list)

    def __len__(self) -> int:
        return len(self.trials)

    def __iter__(self) -> Iterator[Trial]:
        return iter(self.trials)

    def arrange(self, items: list) -> Any:
        """Place per-trial objects into a container shaped like the input."""
        if self.container is np.ndarray:
            out = np.empty(len(items), dtype=object)
            for i, item in enumerate(items):
                out[i] = item
            return out.reshape(self.shape)
        return list(items)


def orient_emg(emg: np.ndarray) -> np.ndarray:
    """Transpose EMG so channels are the narrow axis."""
    return emg.T if emg.shape[1] > emg.shape[0] else emg


def orient_torque(torque: np.ndarray) -> np.ndarray:
    """Transpose torque so outputs are the narrow axis."""
    return torque.T if torque.shape[0] < torque.shape[1] else torque


def _unpack(x: Any, name: str) -> tuple[list[np.ndarray], tuple[int, ...], type]:
    if is_batch(x):
        if isinstance(x, np.ndarray):
            elements, shape, container = list(x.flat), x.shape, np.ndarray
        else:
            elements, shape, container = list(x), (len(x),), list
    else:
        elements, shape, container = [x], (1,), list
    matrices = []
    for i, element in enumerate(elements):
        m = as_matrix(element)
        if m is None:
            raise ShapeMismatch(f"{name}[{i}] is not a 1D or 2D numeric array.")
        matrices.append(m)
    return matrices, shape, container


def normalize_batch(emg: Any, torque: Any, auto_orient: bool = True) -> TrialBatch:
    """Validate EMG/torque inputs and return a canonical :class:`TrialBatch`.

    Args:
        emg: A numeric array (one trial) or a list/tuple/object ndarray of
            per-trial arrays, each (samples x channels).
        torque: Same arrangement as ``emg``, each (samples x outputs).
        auto_orient: Apply the orientation heuristic described above.
    Raises:
        ShapeMismatch: container arrangements differ, a trial's shape differs
            from the first trial's, or EMG/torque sample counts differ.
    """
    single = not is_batch(emg) and not is_batch(torque)
    emg_list, emg_shape, container = _unpack(emg, "emg")
    torque_list, torque_shape, _ = _unpack(torque, "torque")

    if emg_shape != torque_shape:
        raise ShapeMismatch(f"T and Eamp dimensions differ: {torque_shape} vs {emg_shape}.")
    if not emg_list:
        raise ShapeMismatch("Batch holds no trials.")
    for i in range(1, len(emg_list)):
        if emg_list[i].shape != emg_list[0].shape:
            raise ShapeMismatch(f"{{Eamp}} sizes differ: trial {i} is {emg_list[i].shape}, "
                                f"trial 0 is {emg_list[0].shape}.")
        if torque_list[i].shape != torque_list[0].shape:
            raise ShapeMismatch(f"{{T}} sizes differ: trial {i} is {torque_list[i].shape}, "
                                f"trial 0 is {torque_list[0].shape}.")

    trials = []
    for i, (e, t) in enumerate(zip(emg_list, torque_list)):
        if auto_orient:
            e, t = orient_emg(e), orient_torque(t)
        if e.shape[0] != t.shape[0]:
            raise ShapeMismatch(f"Eamp and T time durations differ in trial {i}: "
                                f"{e.shape[0]} vs {t.shape[0]} samples.")
        trials.append(Trial(emg=e, torque=t))

    log.debug("Normalized %d trial(s): emg %s, torque %s",
              len(trials), trials[0].emg.shape, trials[0].torque.shape)
    return TrialBatch(trials=trials, shape=tuple(emg_shape), single=single, container=container)
