"""
Descriptive statistics module.

Public API:
    summarize(dataset, by)  - Grouped n / mean / median / sd table
"""

from statsengine.descriptive.design import SummaryDesign
from statsengine.descriptive.solution import (
    GroupSummary,
    SummaryParams,
    SummarySolution,
)
from statsengine.descriptive.solvers import summarize

__all__ = [
    "summarize",
    "SummaryDesign",
    "GroupSummary",
    "SummaryParams",
    "SummarySolution",
]
