"""Model evaluation: error metrics and the evaluation entry points."""
from .evaluate import BatchResult, TrialResult, evaluate, evaluate_batch, evaluate_single
from .metrics import component_error, distance_error, scoring_window
