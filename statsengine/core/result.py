"""
Generic result container for all statsengine computations.

The Result class provides a standardized envelope that both the grouped
summary and the t-test use. Domains define their own parameter payloads;
the envelope carries the shared metadata (method info, timing, backend,
non-fatal warnings).

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, grouping fields)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True): every call returns a fresh, independent result
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (group summaries, test statistics)
        info: Structured metadata (method, grouping fields)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=SummaryParams(groups=groups, by=('supp',), n_obs=60),
        ...     info={'method': 'grouped_summary'},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_descriptive'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
