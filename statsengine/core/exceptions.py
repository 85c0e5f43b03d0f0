"""
Exception hierarchy for statsengine.

All exceptions inherit from StatsEngineError to allow catching any
library-specific error. Errors are raised synchronously at the point of
detection; a failed call produces no partial result.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class StatsEngineError(Exception):
    """Base exception for all statsengine errors."""
    pass


class InvalidInputError(StatsEngineError):
    """
    Input validation failed.

    Raised for malformed options (unknown alternative, confidence level
    outside (0, 1)), empty datasets, unknown field names and non-finite
    responses.
    """
    pass


class DimensionError(InvalidInputError):
    """
    Vector lengths are inconsistent.

    Raised when a factor vector and the response vector of a dataset do
    not have the same number of observations.
    """
    pass


class InsufficientDataError(InvalidInputError):
    """
    Too few observations for the requested computation.

    Attributes:
        name: Name of the offending sample or group
        n: Number of observations actually available
        required: Minimum number of observations needed
    """

    def __init__(
        self,
        message: str,
        name: str | None = None,
        n: int | None = None,
        required: int | None = None,
    ):
        super().__init__(message)
        self.name = name
        self.n = n
        self.required = required


class NumericalError(StatsEngineError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class DegenerateVarianceError(NumericalError):
    """
    Standard error of the difference in means is zero.

    Raised when both samples are constant, so the t statistic is
    undefined and no meaningful test is possible.

    Attributes:
        stderr: The computed standard error (0.0)
        var_equal: Whether the pooled-variance formulation was in use
    """

    def __init__(
        self,
        message: str,
        stderr: float | None = None,
        var_equal: bool | None = None,
    ):
        super().__init__(message)
        self.stderr = stderr
        self.var_equal = var_equal


class ConvergenceError(NumericalError):
    """
    Iterative algorithm failed to converge.

    Raised when a continued-fraction or root-finding iteration in the
    special-function layer exceeds its iteration cap.

    Attributes:
        iterations: Number of iterations completed
        final_change: Final relative change, if available
        reason: Why convergence failed (e.g., 'max_iterations')
        threshold: The convergence threshold that was not met
    """

    def __init__(
        self,
        message: str,
        iterations: int,
        final_change: float | None = None,
        reason: str | None = None,
        threshold: float | None = None
    ):
        super().__init__(message)
        self.iterations = iterations
        self.final_change = final_change
        self.reason = reason
        self.threshold = threshold
