"""
CPU backend for hypothesis tests.

Validated against R's t.test() to rtol=1e-10.
"""

from __future__ import annotations

from statsengine.core.result import Result
from statsengine.core.compute.timing import Timer
from statsengine.hypothesis._common import TTestParams
from statsengine.hypothesis.backends._t_test import t_two_sample
from statsengine.hypothesis.design import TTestDesign


class CPUHypothesisBackend:
    """CPU backend for hypothesis tests."""

    @property
    def name(self) -> str:
        return 'cpu_hypothesis'

    def solve(self, design: TTestDesign) -> Result[TTestParams]:
        """Run the two-sample t-test described by design."""
        timer = Timer()
        timer.start()

        with timer.section('t_two_sample'):
            params = t_two_sample(design)

        timer.stop()

        return Result(
            params=params,
            info={
                'test_type': 't_two_sample',
                'method': params.method,
                'alternative': params.alternative,
            },
            timing=timer.result(),
            backend_name=self.name,
        )
