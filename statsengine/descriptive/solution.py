"""
Grouped summary solution types.

Contains the per-group record, the parameter payload and the user-facing
solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, TYPE_CHECKING
import math

from statsengine.core.result import Result

if TYPE_CHECKING:
    import pandas as pd
    from statsengine.descriptive.design import SummaryDesign


@dataclass(frozen=True)
class GroupSummary:
    """
    Descriptive statistics of one group.

    Attributes
    ----------
    by : tuple of str
        Grouping factor names.
    key : tuple
        Factor values identifying the group, aligned with ``by``. Empty
        when the whole dataset is one group.
    n : int
        Number of observations (>= 1).
    mean, median : float
    sd : float
        Sample standard deviation (n - 1 denominator); nan when n == 1.
    """
    by: tuple[str, ...]
    key: tuple[Any, ...]
    n: int
    mean: float
    median: float
    sd: float

    @property
    def labels(self) -> dict[str, Any]:
        """Factor name -> value for this group."""
        return dict(zip(self.by, self.key))

    @property
    def variance(self) -> float:
        return self.sd * self.sd


@dataclass(frozen=True)
class SummaryParams:
    """Parameter payload for grouped summaries."""
    groups: tuple[GroupSummary, ...]
    by: tuple[str, ...]
    n_obs: int
    response_name: str


@dataclass
class SummarySolution:
    """
    User-facing grouped summary results.

    Wraps Result[SummaryParams]. Iterating yields GroupSummary records in
    level order; indexing looks a group up by its key.
    """
    _result: Result[SummaryParams]
    _design: 'SummaryDesign'

    @property
    def groups(self) -> tuple[GroupSummary, ...]:
        return self._result.params.groups

    @property
    def by(self) -> tuple[str, ...]:
        return self._result.params.by

    @property
    def n_obs(self) -> int:
        """Total number of observations summarised."""
        return self._result.params.n_obs

    @property
    def response_name(self) -> str:
        return self._result.params.response_name

    def __iter__(self) -> Iterator[GroupSummary]:
        return iter(self._result.params.groups)

    def __len__(self) -> int:
        return len(self._result.params.groups)

    def __getitem__(self, key: Any) -> GroupSummary:
        """
        Look up a group by key.

        For single-factor grouping a bare value is accepted in place of a
        one-element tuple.
        """
        if not isinstance(key, tuple):
            key = (key,)
        for group in self._result.params.groups:
            if group.key == key:
                return group
        raise KeyError(
            f"no group with key {key!r} for by={self.by}. "
            f"Available: {[g.key for g in self.groups]}"
        )

    def get(self, key: Any, default: GroupSummary | None = None) -> GroupSummary | None:
        try:
            return self[key]
        except KeyError:
            return default

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    # --- Formatting ---

    def to_dataframe(self) -> 'pd.DataFrame':
        """One row per group: factor columns, then n, mean, median, sd."""
        import pandas as pd
        rows = [
            {**g.labels, 'n': g.n, 'mean': g.mean, 'median': g.median, 'sd': g.sd}
            for g in self.groups
        ]
        return pd.DataFrame(rows, columns=[*self.by, 'n', 'mean', 'median', 'sd'])

    def summary(self, digits: int = 4) -> str:
        """Aligned text table of the group statistics."""
        header = [*self.by, 'n', 'mean', 'median', 'sd']
        rows = []
        for g in self.groups:
            rows.append([
                *(str(v) for v in g.key),
                str(g.n),
                _format_stat(g.mean, digits),
                _format_stat(g.median, digits),
                _format_stat(g.sd, digits),
            ])

        widths = [
            max([len(header[j]), *(len(r[j]) for r in rows)])
            for j in range(len(header))
        ]
        lines = [f"Summary of {self.response_name}"
                 + (f" by {', '.join(self.by)}" if self.by else "")]
        lines.append("  ".join(h.rjust(w) for h, w in zip(header, widths)))
        for r in rows:
            lines.append("  ".join(c.rjust(w) for c, w in zip(r, widths)))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"SummarySolution(by={self.by}, n_groups={len(self)}, "
            f"n_obs={self.n_obs})"
        )


def _format_stat(x: float, digits: int) -> str:
    if math.isnan(x):
        return "NA"
    return f"{x:.{digits}f}"
