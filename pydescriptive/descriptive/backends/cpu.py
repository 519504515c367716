"""
CPU reference backend for descriptive statistics.

Single pass over an already-sorted observation vector. Sums use
math.fsum so that integer-valued inputs give exact results.

The backend does not call warnings.warn. Diagnostics are recorded in
Result.warnings and the public entry points emit them, using
warning_category() to pick the category.
"""

from __future__ import annotations

import math

from pydescriptive.core.result import Result
from pydescriptive.core.compute.timing import Timer
from pydescriptive.core.exceptions import NumericalWarning, ZeroVarianceWarning
from pydescriptive.descriptive.design import StatisticsDesign
from pydescriptive.descriptive.solution import StatisticsParams, DetailedParams
from pydescriptive.descriptive import _helpers


ZERO_VARIANCE_MESSAGE = "zero variance: skewness and kurtosis are undefined"
OVERFLOW_MESSAGE = "overflow: outside float64 range, reported as inf"


def warning_category(message: str) -> type[UserWarning]:
    """Warning category for a message recorded by the backend."""
    if message == ZERO_VARIANCE_MESSAGE:
        return ZeroVarianceWarning
    if message.startswith(OVERFLOW_MESSAGE):
        return NumericalWarning
    return UserWarning


class CPUStatisticsBackend:
    """CPU reference backend for descriptive statistics."""

    @property
    def name(self) -> str:
        return 'cpu_descriptive'

    def solve(
        self,
        design: StatisticsDesign,
        *,
        detailed: bool = False,
    ) -> Result[StatisticsParams]:
        """
        Compute the statistics record.

        Parameters
        ----------
        design : StatisticsDesign
            Non-empty, sorted observations.
        detailed : bool
            Also compute quartiles, IQR, skewness and kurtosis.
        """
        timer = Timer()
        timer.start()

        x = design.values
        n = design.n
        warnings_list: list[str] = []

        with timer.section('moments'):
            total = _helpers.total(x)
            mean = _helpers.mean(x)
            variance = _helpers.variance(x)
            # Finite even when variance is not
            sd = _helpers.standard_deviation(x)

        # x is sorted, so order statistics are direct lookups
        with timer.section('order_statistics'):
            lo = float(x[0])
            hi = float(x[-1])
            median = _helpers.median(x)
            mode = _helpers.mode(x)

        detailed_params = None
        if detailed:
            with timer.section('detailed'):
                q1 = _helpers.quartile(x, 1)
                q3 = _helpers.quartile(x, 3)
                if lo == hi:
                    warnings_list.append(ZERO_VARIANCE_MESSAGE)
                detailed_params = DetailedParams(
                    q1=q1,
                    q3=q3,
                    interquartile_range=q3 - q1,
                    skewness=_helpers.skewness(x),
                    kurtosis=_helpers.kurtosis(x),
                )

        timer.stop()

        params = StatisticsParams(
            count=n,
            sum=total,
            mean=mean,
            median=median,
            mode=mode,
            min=lo,
            max=hi,
            range=hi - lo,
            variance=variance,
            standard_deviation=sd,
            detailed=detailed_params,
        )

        overflowed = [
            label for label, value in (
                ('sum', params.sum),
                ('range', params.range),
                ('variance', params.variance),
                ('interquartile_range',
                 detailed_params.interquartile_range if detailed_params else 0.0),
            )
            if math.isinf(value)
        ]
        if overflowed:
            warnings_list.append(f"{OVERFLOW_MESSAGE} ({', '.join(overflowed)})")

        return Result(
            params=params,
            info={
                'detailed': detailed,
                'n_raw': design.n_raw,
                'n_dropped': design.n_dropped,
                'source': design.source,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
