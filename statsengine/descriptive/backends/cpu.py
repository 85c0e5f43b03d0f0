"""
CPU backend for grouped descriptive statistics.

Partitions the response by the integer codes of the grouping factors and
reduces each partition to mean, median and Bessel-corrected standard
deviation.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from statsengine.core.result import Result
from statsengine.core.compute.timing import Timer
from statsengine.descriptive.design import SummaryDesign
from statsengine.descriptive.solution import GroupSummary, SummaryParams


class CPUDescriptiveBackend:
    """CPU backend for grouped descriptive statistics."""

    @property
    def name(self) -> str:
        return 'cpu_descriptive'

    def solve(self, design: SummaryDesign) -> Result[SummaryParams]:
        """Partition by design.by and summarise every non-empty cell."""
        timer = Timer()
        timer.start()

        dataset = design.dataset
        by = design.by
        y = dataset.response
        warnings_list: list[str] = []

        with timer.section('partition'):
            cells = self._partition(design)

        groups = []
        with timer.section('reduce'):
            for key, rows in cells:
                values = y[rows]
                n = int(values.shape[0])
                if n == 1:
                    sd = float('nan')
                    label = ", ".join(f"{f}={v}" for f, v in zip(by, key)) or "all"
                    warnings_list.append(
                        f"group ({label}) has a single observation; sd is undefined"
                    )
                else:
                    sd = float(np.std(values, ddof=1))
                groups.append(GroupSummary(
                    by=by,
                    key=key,
                    n=n,
                    mean=float(np.mean(values)),
                    median=float(np.median(values)),
                    sd=sd,
                ))

        timer.stop()

        return Result(
            params=SummaryParams(
                groups=tuple(groups),
                by=by,
                n_obs=design.n,
                response_name=dataset.response_name,
            ),
            info={'method': 'grouped_summary', 'by': by, 'n_groups': len(groups)},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

    def _partition(
        self, design: SummaryDesign
    ) -> list[tuple[tuple[Any, ...], NDArray[np.intp]]]:
        """Row indices of every non-empty cell, ordered by level codes."""
        dataset = design.dataset
        n = design.n

        if not design.by:
            return [((), np.arange(n))]

        code_matrix = np.column_stack([dataset.codes(f) for f in design.by])
        cells, inverse = np.unique(code_matrix, axis=0, return_inverse=True)
        inverse = np.asarray(inverse).reshape(-1)

        out = []
        for cell_index, codes in enumerate(cells):
            key = tuple(
                dataset.levels(f)[int(c)] for f, c in zip(design.by, codes)
            )
            out.append((key, np.flatnonzero(inverse == cell_index)))
        return out
