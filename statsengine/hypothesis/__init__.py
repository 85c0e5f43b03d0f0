"""
Hypothesis testing module.

Provides the independent two-sample t-test matching R's t.test(),
validated against R to rtol=1e-10.

Public API:
    t_test(x, y)                          - Welch / pooled two-sample t-test
    compare_groups(dataset, factor, a, b) - t-test between two factor levels
"""

from statsengine.hypothesis.solvers import t_test, compare_groups
from statsengine.hypothesis.design import TTestDesign
from statsengine.hypothesis._common import TTestParams, VALID_ALTERNATIVES
from statsengine.hypothesis.solution import TTestSolution

__all__ = [
    "t_test",
    "compare_groups",
    "TTestDesign",
    "TTestParams",
    "TTestSolution",
    "VALID_ALTERNATIVES",
]
