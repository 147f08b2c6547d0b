"""FIR model application: design matrices and time-aligned estimates."""
from .design import build_design_matrix
from .fir import apply_coefficients, estimate_trial
