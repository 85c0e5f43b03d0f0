"""
Hypothesis test solution types.

TTestSolution wraps Result[TTestParams] and provides R's print.htest format.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from statsengine.core.result import Result
from statsengine.hypothesis._common import TTestParams

if TYPE_CHECKING:
    from statsengine.hypothesis.design import TTestDesign


@dataclass
class TTestSolution:
    """
    User-facing two-sample t-test results.

    All fields of TTestParams are available as properties. The solution
    only holds numbers; summary() renders them in R's htest layout.
    """
    _result: Result[TTestParams]
    _design: 'TTestDesign | None'

    @property
    def statistic(self) -> float:
        """t statistic."""
        return self._result.params.statistic

    @property
    def df(self) -> float:
        """Degrees of freedom."""
        return self._result.params.df

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def conf_int(self) -> NDArray[np.floating[Any]]:
        """Confidence interval for mean(x) - mean(y), shape (2,)."""
        return self._result.params.conf_int

    @property
    def conf_level(self) -> float:
        return self._result.params.conf_level

    @property
    def estimate(self) -> float:
        """Difference in means, mean(x) - mean(y)."""
        return self._result.params.estimate

    @property
    def mean_x(self) -> float:
        return self._result.params.mean_x

    @property
    def mean_y(self) -> float:
        return self._result.params.mean_y

    @property
    def n_x(self) -> int:
        return self._result.params.n_x

    @property
    def n_y(self) -> int:
        return self._result.params.n_y

    @property
    def stderr(self) -> float:
        """Standard error of the difference in means."""
        return self._result.params.stderr

    @property
    def null_value(self) -> float:
        return self._result.params.null_value

    @property
    def alternative(self) -> str:
        return self._result.params.alternative

    @property
    def var_equal(self) -> bool:
        return self._result.params.var_equal

    @property
    def method(self) -> str:
        return self._result.params.method

    @property
    def data_name(self) -> str:
        return self._result.params.data_name

    def reject(self, alpha: float | None = None) -> bool:
        """
        Whether H0 is rejected at level alpha.

        alpha defaults to 1 - conf_level, in which case the decision agrees
        with whether the confidence interval excludes the null value.
        """
        if alpha is None:
            alpha = 1.0 - self.conf_level
        return bool(self.p_value < alpha)

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

    def summary(self) -> str:
        """
        Format as R's print.htest output.

        Produces output like:
            Welch Two Sample t-test

        data:  len by supp (OJ vs VC)
        t = 1.9153, df = 55.309, p-value = 0.06063
        alternative hypothesis: true difference in means is not equal to 0
        95 percent confidence interval:
         -0.1710156  7.5710156
        sample estimates:
        mean of x mean of y
         20.66333  16.96333
        """
        p = self._result.params
        lines = []

        lines.append(f"\t{p.method}")
        lines.append("")
        lines.append(f"data:  {p.data_name}")
        lines.append(
            f"t = {p.statistic:.5g}, df = {p.df:.5g}, "
            f"p-value = {_format_pvalue(p.p_value)}"
        )

        relation = {
            "two-sided": "is not equal to",
            "less": "is less than",
            "greater": "is greater than",
        }[p.alternative]
        lines.append(
            f"alternative hypothesis: true difference in means "
            f"{relation} {p.null_value:g}"
        )

        pct = f"{p.conf_level * 100:g}"
        lines.append(f"{pct} percent confidence interval:")
        lo, hi = p.conf_int
        lines.append(f" {_format_number(lo)}  {_format_number(hi)}")

        lines.append("sample estimates:")
        lines.append(f"{'mean of x':>14s} {'mean of y':>14s}")
        lines.append(f"{p.mean_x:14.7g} {p.mean_y:14.7g}")

        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"TTestSolution(method={p.method!r}, t={p.statistic:.4g}, "
            f"df={p.df:.4g}, p_value={p.p_value:.4g})"
        )


def _format_pvalue(p: float) -> str:
    """Format p-value like R does."""
    if p < 2.2e-16:
        return "< 2.2e-16"
    if p < 0.001:
        return f"{p:.4e}"
    return f"{p:.4g}"


def _format_number(x: float) -> str:
    """Format a number, handling infinity."""
    if np.isinf(x):
        return "-Inf" if x < 0 else "Inf"
    return f"{x:.7g}"
