"""
Core infrastructure for statsengine.

Shared abstractions used by the descriptive and hypothesis subpackages.

Key components:
    dataset: Dataset / Observation containers
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, special functions and the t distribution
"""

from statsengine.core.dataset import Dataset, Observation
from statsengine.core.result import Result
from statsengine.core.exceptions import (
    StatsEngineError,
    InvalidInputError,
    DimensionError,
    InsufficientDataError,
    NumericalError,
    DegenerateVarianceError,
    ConvergenceError,
)

__all__ = [
    # Data
    "Dataset",
    "Observation",
    # Result
    "Result",
    # Exceptions
    "StatsEngineError",
    "InvalidInputError",
    "DimensionError",
    "InsufficientDataError",
    "NumericalError",
    "DegenerateVarianceError",
    "ConvergenceError",
]
