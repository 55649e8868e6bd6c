"""
Result envelope returned by every solver backend.

A backend fills in its own parameter payload (LU factors, a Jacobi iterate)
and the shared metadata: an ``info`` dict, a timing breakdown, its name and
any non-fatal warnings. The public solver functions unwrap it into the
user-facing solution objects.
"""

import warnings as _warnings
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

P = TypeVar('P')


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Frozen output of one backend run.

    Attributes:
        params: Backend payload, e.g. LUParams(L, U) or JacobiParams(x, ...)
        info: Method name, problem size and diagnostics such as
            'min_abs_pivot' or 'converged'
        timing: Output of Timer.result(), or None when not measured
        backend_name: '{storage}_{algorithm}', e.g. 'dense_jacobi'
        warnings: Messages for problems that did not stop the run

    Example:
        >>> Result(
        ...     params=JacobiParams(x=x, converged=False, ...),
        ...     info={'method': 'jacobi', 'converged': False, 'iterations': 100},
        ...     timing={'total_seconds': 0.02, 'iterations': 0.019},
        ...     backend_name='dense_jacobi',
        ...     warnings=("Jacobi did not converge after 100 iterations ...",),
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """True if any warning message contains ``substring``."""
        return any(substring in message for message in self.warnings)

    def emit_warnings(self, stacklevel: int = 3) -> None:
        """
        Issue every recorded message as a RuntimeWarning.

        The default stacklevel points at the caller of the public solver
        function that calls this.
        """
        for message in self.warnings:
            _warnings.warn(message, RuntimeWarning, stacklevel=stacklevel)
