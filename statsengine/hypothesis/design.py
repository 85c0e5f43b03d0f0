"""
TTestDesign: validated inputs for the two-sample t-test.

Immutable after construction; built by the for_t_test() factory, which
performs all option and sample validation up front.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import math
import numpy as np
from numpy.typing import NDArray, ArrayLike

from statsengine.core.exceptions import InvalidInputError
from statsengine.core.validation import (
    check_array,
    check_finite,
    check_1d,
    check_min_samples,
    check_alternative,
    check_conf_level,
)
from statsengine.hypothesis._common import VALID_ALTERNATIVES


def _sample(values: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """Validate one sample: 1D, numeric, finite, at least 2 observations."""
    arr = check_array(values, name)
    if arr.ndim == 0:
        arr = arr.reshape(1)
    check_1d(arr, name)
    check_finite(arr, name)
    check_min_samples(arr, 2, name)
    return arr


@dataclass(frozen=True, eq=False)
class TTestDesign:
    """
    Design for an independent two-sample t-test.

    Do not construct directly; use TTestDesign.for_t_test().
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _mu: float
    _alternative: str
    _conf_level: float
    _var_equal: bool
    _data_name: str

    @classmethod
    def for_t_test(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        *,
        alternative: str = "two-sided",
        var_equal: bool = False,
        conf_level: float = 0.95,
        mu: float = 0.0,
        data_name: str = "x and y",
    ) -> TTestDesign:
        """Build design for t_test()."""
        alternative = check_alternative(alternative, VALID_ALTERNATIVES)
        conf_level = check_conf_level(conf_level)

        if not isinstance(var_equal, (bool, np.bool_)):
            raise InvalidInputError(
                f"var_equal must be a bool, got {var_equal!r}"
            )
        try:
            mu = float(mu)
        except (TypeError, ValueError) as e:
            raise InvalidInputError(f"mu must be a number, got {mu!r}") from e
        if not math.isfinite(mu):
            raise InvalidInputError(f"mu must be finite, got {mu}")

        x_arr = _sample(x, "x")
        y_arr = _sample(y, "y")

        return cls(
            _x=x_arr,
            _y=y_arr,
            _mu=mu,
            _alternative=alternative,
            _conf_level=conf_level,
            _var_equal=bool(var_equal),
            _data_name=data_name,
        )

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        return self._y

    @property
    def mu(self) -> float:
        return self._mu

    @property
    def alternative(self) -> str:
        return self._alternative

    @property
    def conf_level(self) -> float:
        return self._conf_level

    @property
    def var_equal(self) -> bool:
        return self._var_equal

    @property
    def data_name(self) -> str:
        return self._data_name

    def __repr__(self) -> str:
        return (
            f"TTestDesign(n_x={len(self._x)}, n_y={len(self._y)}, "
            f"alternative={self._alternative!r}, var_equal={self._var_equal})"
        )
