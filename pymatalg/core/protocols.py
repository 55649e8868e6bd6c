"""
Core protocols for pymatalg.

These define structural interfaces that solver implementations must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) to allow
flexibility while maintaining type safety.
"""

from typing import Protocol, TypeVar, runtime_checkable

from pymatalg.core.result import Result

P = TypeVar('P', covariant=True)  # Parameter payload type
D = TypeVar('D', contravariant=True)  # Design type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for solver backends.

    Each backend knows how to take a validated design and produce an
    algorithm-specific parameter payload wrapped in a Result.

    Backends hold only their configuration (iteration limits, tolerances),
    which is fixed at construction time. This makes them easy to test and
    swap.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{storage}_{algorithm}'
        Examples: 'dense_doolittle', 'dense_jacobi'
        """
        ...

    def solve(self, design: D) -> Result[P]:
        """
        Execute the computation.

        Args:
            design: Validated design

        Returns:
            Result envelope containing parameter payload and metadata

        Raises:
            NumericalError: If numerical issues prevent a solution (zero pivot, etc.)
        """
        ...
