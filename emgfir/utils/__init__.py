"""Small helpers shared across the evaluator."""
