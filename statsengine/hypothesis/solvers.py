"""
Solver dispatch for hypothesis tests.

Provides t_test() for two raw samples and compare_groups() for two
levels of a factor within a Dataset.
"""

from __future__ import annotations

from typing import Any, Literal, Mapping
from numpy.typing import ArrayLike

from statsengine.core.dataset import Dataset
from statsengine.core.exceptions import InvalidInputError, InsufficientDataError
from statsengine.hypothesis.design import TTestDesign
from statsengine.hypothesis.solution import TTestSolution
from statsengine.hypothesis.backends.cpu import CPUHypothesisBackend


Alternative = Literal["two-sided", "less", "greater"]


def _get_backend(backend: str = 'cpu'):
    """Select backend. Hypothesis tests are CPU-only."""
    if backend in ('cpu', 'auto'):
        return CPUHypothesisBackend()
    raise InvalidInputError(f"Unknown backend: {backend!r}. Use 'cpu'.")


def t_test(
    x: ArrayLike | TTestDesign,
    y: ArrayLike | None = None,
    *,
    alternative: Alternative = "two-sided",
    var_equal: bool = False,
    conf_level: float = 0.95,
    mu: float = 0.0,
    backend: str = 'cpu',
) -> TTestSolution:
    """
    Independent two-sample t-test. Matches R t.test(x, y).

    Parameters
    ----------
    x, y : array-like
        The two samples (group A and group B). Each needs at least 2
        finite observations. x may also be a pre-built TTestDesign, in
        which case y and the options are ignored.
    alternative : str
        "two-sided" (default), "less" (mean(x) < mean(y)) or
        "greater" (mean(x) > mean(y)).
    var_equal : bool
        If True, use pooled variance (Student's t) with
        df = n_x + n_y - 2. If False (default), use Welch's approximation
        with Welch-Satterthwaite degrees of freedom. **R defaults to Welch.**
    conf_level : float
        Confidence level for the interval, in (0, 1). Default 0.95.
    mu : float
        Hypothesised difference in means. Default 0.
    backend : str
        'cpu' (default).

    Returns
    -------
    TTestSolution
        statistic, df, p_value, conf_int, estimate and friends.

    Raises
    ------
    InvalidInputError
        Unknown alternative, conf_level outside (0, 1), non-finite data.
    InsufficientDataError
        Either sample has fewer than 2 observations.
    DegenerateVarianceError
        The standard error of the difference is zero.
    """
    if isinstance(x, TTestDesign):
        design = x
    else:
        if y is None:
            raise InvalidInputError(
                "y is required: only the two-sample t-test is supported"
            )
        design = TTestDesign.for_t_test(
            x, y,
            alternative=alternative,
            var_equal=var_equal,
            conf_level=conf_level,
            mu=mu,
        )

    be = _get_backend(backend)
    result = be.solve(design)
    return TTestSolution(_result=result, _design=design)


def compare_groups(
    dataset: Dataset,
    factor: str,
    a: Any,
    b: Any,
    *,
    where: Mapping[str, Any] | None = None,
    alternative: Alternative = "two-sided",
    var_equal: bool = False,
    conf_level: float = 0.95,
    mu: float = 0.0,
    backend: str = 'cpu',
) -> TTestSolution:
    """
    t-test of the response between two levels of one factor.

    Group A is the rows with ``factor == a`` and group B the rows with
    ``factor == b``, both optionally restricted to rows matching
    ``where`` (e.g. ``where={'dose': 2.0}``). The estimate is
    mean(A) - mean(B).

    Example
    -------
    >>> tg = toothgrowth()
    >>> compare_groups(tg, 'dose', 0.5, 1.0, alternative='less',
    ...                conf_level=0.99).reject()
    True
    """
    if not isinstance(dataset, Dataset):
        raise InvalidInputError(
            f"dataset must be a Dataset, got {type(dataset).__name__}"
        )
    levels = dataset.levels(factor)
    for level in (a, b):
        if level not in levels:
            raise InvalidInputError(
                f"{factor}: {level!r} is not a level. Levels: {levels}"
            )
    if a == b:
        raise InvalidInputError(f"{factor}: cannot compare level {a!r} with itself")

    criteria = dict(where or {})
    if factor in criteria:
        raise InvalidInputError(
            f"where must not constrain the compared factor {factor!r}"
        )

    samples = []
    for level in (a, b):
        values = dataset.responses({**criteria, factor: level})
        if len(values) < 2:
            name = f"{factor}={level}"
            raise InsufficientDataError(
                f"{name}: requires at least 2 observations, got {len(values)}",
                name=name,
                n=len(values),
                required=2,
            )
        samples.append(values)

    data_name = f"{dataset.response_name} by {factor} ({a} vs {b})"
    if criteria:
        data_name += " where " + ", ".join(f"{k}={v}" for k, v in criteria.items())

    design = TTestDesign.for_t_test(
        samples[0], samples[1],
        alternative=alternative,
        var_equal=var_equal,
        conf_level=conf_level,
        mu=mu,
        data_name=data_name,
    )
    return t_test(design, backend=backend)
