import math

import numpy as np
import pytest

from emgfir.config import ErrorDistance, ErrorMethod, EvalConfig, ModelParams, Trim
from emgfir.errors import InvalidRange
from emgfir.evaluation.metrics import (
    component_error,
    distance_error,
    mav,
    per_output_errors,
    rms,
    scoring_window,
    trial_error,
)


def test_rms_and_mav():
    x = np.array([3.0, -4.0])
    assert rms(x) == pytest.approx(math.sqrt(12.5))
    assert mav(x) == pytest.approx(3.5)


def test_scoring_window_with_trim():
    # 20 samples, Q=2, ii=1, Trim=[5, 3] -> 1-indexed samples 9..17
    window = scoring_window(20, ModelParams(2, 1, 0.0, 1), Trim(5, 3))
    assert (window.start, window.stop) == (8, 17)
    assert len(range(20)[window]) == 9


def test_scoring_window_rejects_empty_or_inverted():
    params = ModelParams(2, 1, 0.0, 1)
    with pytest.raises(InvalidRange):
        scoring_window(10, params, Trim(4, 3))
    with pytest.raises(InvalidRange):
        scoring_window(10, params, Trim(9, 9))
    assert len(range(10)[scoring_window(10, params, Trim(3, 3))]) == 1


def test_component_errors_average_over_time_and_outputs():
    diff = np.array([[1.0, -3.0], [2.0, 0.0]])
    assert component_error(diff, ErrorMethod.MAV) == pytest.approx(1.5)
    assert component_error(diff, ErrorMethod.RMS) == pytest.approx(math.sqrt(14.0 / 4))


def test_distance_errors_use_euclidean_distance_per_step():
    diff = np.array([[3.0, 4.0], [0.0, 0.0], [6.0, 8.0]])
    assert distance_error(diff, ErrorMethod.MAV) == pytest.approx(5.0)
    assert distance_error(diff, ErrorMethod.RMS) == pytest.approx(math.sqrt((25 + 0 + 100) / 3))


@pytest.mark.parametrize("method", [ErrorMethod.MAV, ErrorMethod.RMS])
def test_single_output_modes_agree_exactly(method):
    rng = np.random.default_rng(7)
    diff = rng.normal(size=(200, 1))
    assert component_error(diff, method) == distance_error(diff, method)


def test_trial_error_scores_only_the_window():
    estimate = np.zeros((10, 1))
    target = np.zeros((10, 1))
    target[:3] = 100.0  # outside the window
    target[3:] = 2.0
    cfg = EvalConfig(edist=ErrorDistance.COMPONENT, emeth=ErrorMethod.MAV)
    assert trial_error(estimate, target, slice(3, 10), cfg) == pytest.approx(2.0)


def test_per_output_errors():
    estimate = np.zeros((6, 2))
    target = np.column_stack([np.full(6, 2.0), np.array([0, 0, 3, -3, 3, -3], dtype=float)])
    np.testing.assert_allclose(per_output_errors(estimate, target, slice(2, 6), ErrorMethod.MAV), [2.0, 3.0])
    np.testing.assert_allclose(per_output_errors(estimate, target, slice(0, 6), ErrorMethod.RMS),
                               [2.0, math.sqrt(36.0 / 6)])
