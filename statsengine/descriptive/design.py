"""
SummaryDesign: validated input for grouped descriptive statistics.

Pairs a Dataset with the factor fields to group by. Follows the
statsengine Design pattern: built by a factory classmethod, immutable
after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from statsengine.core.dataset import Dataset
from statsengine.core.exceptions import InvalidInputError


@dataclass(frozen=True, eq=False)
class SummaryDesign:
    """
    Design for grouped summaries.

    Construction:
        SummaryDesign.for_summary(dataset, by=('supp', 'dose'))
    """
    _dataset: Dataset
    _by: tuple[str, ...]

    @classmethod
    def for_summary(
        cls,
        dataset: Dataset,
        by: str | Sequence[str] = (),
    ) -> SummaryDesign:
        """
        Build a SummaryDesign.

        Parameters
        ----------
        dataset : Dataset
            Observations to summarise. Must not be empty.
        by : str or sequence of str
            Factor names to group by. Empty means the whole dataset is
            one group.
        """
        if not isinstance(dataset, Dataset):
            raise InvalidInputError(
                f"dataset must be a Dataset, got {type(dataset).__name__}"
            )
        if isinstance(by, str):
            by = (by,)
        by = tuple(by)

        if len(set(by)) != len(by):
            raise InvalidInputError(f"by: duplicate field names in {by}")
        for name in by:
            dataset.check_factor(name)

        if dataset.n_observations == 0:
            raise InvalidInputError("dataset is empty; nothing to summarise")

        return cls(_dataset=dataset, _by=by)

    @property
    def dataset(self) -> Dataset:
        return self._dataset

    @property
    def by(self) -> tuple[str, ...]:
        return self._by

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._dataset.n_observations

    def __repr__(self) -> str:
        return f"SummaryDesign(n={self.n}, by={self._by})"
