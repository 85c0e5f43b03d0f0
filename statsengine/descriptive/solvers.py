"""
Solver dispatch for descriptive statistics.

Provides summarize(), the grouped median / mean / sd table.
"""

from __future__ import annotations

from typing import Sequence

from statsengine.core.dataset import Dataset
from statsengine.core.exceptions import InvalidInputError
from statsengine.descriptive.design import SummaryDesign
from statsengine.descriptive.solution import SummarySolution
from statsengine.descriptive.backends.cpu import CPUDescriptiveBackend


def _get_backend(backend: str = 'cpu'):
    """Select backend. Grouped summaries are CPU-only."""
    if backend in ('cpu', 'auto'):
        return CPUDescriptiveBackend()
    raise InvalidInputError(f"Unknown backend: {backend!r}. Use 'cpu'.")


def summarize(
    dataset: Dataset | SummaryDesign,
    by: str | Sequence[str] = (),
    *,
    backend: str = 'cpu',
) -> SummarySolution:
    """
    Grouped descriptive statistics.

    Partitions the observations by the values of the ``by`` factors and
    reports n, mean, median and sample standard deviation (n - 1
    denominator) for every non-empty group.

    Parameters
    ----------
    dataset : Dataset or SummaryDesign
        Observations to summarise.
    by : str or sequence of str
        Factor names to group by. Empty (default) treats the whole
        dataset as one group.
    backend : str
        'cpu' (default).

    Returns
    -------
    SummarySolution
        Groups ordered by the declared level order of each factor. A group
        with a single observation reports sd = nan and adds a warning.

    Raises
    ------
    InvalidInputError
        If the dataset is empty or a field name is unknown or repeated.
    """
    if isinstance(dataset, SummaryDesign):
        design = dataset
    else:
        design = SummaryDesign.for_summary(dataset, by)

    be = _get_backend(backend)
    result = be.solve(design)
    return SummarySolution(_result=result, _design=design)
