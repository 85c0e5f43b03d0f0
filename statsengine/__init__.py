"""
statsengine: grouped descriptive statistics and two-sample t-tests.

A small analysis library for one numeric response and categorical
factors. Results match R (median/mean/sd by group, t.test()) and carry
only numbers; formatting into prose, tables or figures is left to the
caller.

Submodules:
    core: Dataset, Result envelope, exceptions, t distribution
    descriptive: summarize() grouped n / mean / median / sd
    hypothesis: t_test() and compare_groups()
    datasets: ToothGrowth reference data
"""

__version__ = "0.1.0"

from statsengine import datasets
from statsengine.core import (
    Dataset,
    Observation,
    Result,
    StatsEngineError,
    InvalidInputError,
    DimensionError,
    InsufficientDataError,
    NumericalError,
    DegenerateVarianceError,
    ConvergenceError,
)
from statsengine.descriptive import summarize, GroupSummary, SummarySolution
from statsengine.hypothesis import t_test, compare_groups, TTestSolution

__all__ = [
    "__version__",
    "datasets",
    "Dataset",
    "Observation",
    "Result",
    "summarize",
    "GroupSummary",
    "SummarySolution",
    "t_test",
    "compare_groups",
    "TTestSolution",
    "StatsEngineError",
    "InvalidInputError",
    "DimensionError",
    "InsufficientDataError",
    "NumericalError",
    "DegenerateVarianceError",
    "ConvergenceError",
]
