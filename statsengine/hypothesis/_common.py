"""
Common types for hypothesis testing.

Defines TTestParams (the payload of a two-sample t-test, modelled on R's
htest structure) and the recognised alternatives.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray


VALID_ALTERNATIVES = ("two-sided", "less", "greater")


@dataclass(frozen=True)
class TTestParams:
    """
    Parameter payload for a two-sample t-test.

    Attributes
    ----------
    statistic : float
        t statistic, (mean(x) - mean(y) - null_value) / stderr.
    df : float
        Degrees of freedom; fractional for Welch's test.
    p_value : float
    conf_int : ndarray
        Confidence interval for mean(x) - mean(y), shape (2,). The open
        side of a one-sided interval is -inf or +inf.
    conf_level : float
    estimate : float
        mean(x) - mean(y).
    mean_x, mean_y : float
    n_x, n_y : int
    stderr : float
        Standard error of the difference in means.
    null_value : float
        Hypothesised difference in means under H0.
    alternative : str
        "two-sided", "less" or "greater".
    var_equal : bool
        True for the pooled-variance (Student) formulation.
    method : str
        "Welch Two Sample t-test" or "Two Sample t-test".
    data_name : str
        Description of the data, e.g. "x and y".
    """
    statistic: float
    df: float
    p_value: float
    conf_int: NDArray[np.floating[Any]]
    conf_level: float
    estimate: float
    mean_x: float
    mean_y: float
    n_x: int
    n_y: int
    stderr: float
    null_value: float
    alternative: str
    var_equal: bool
    method: str
    data_name: str
