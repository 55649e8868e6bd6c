"""
Dense solver backends.

Each backend takes a validated design and returns a Result envelope.
"""

from pymatalg.linalg.backends.doolittle import DoolittleBackend
from pymatalg.linalg.backends.jacobi import JacobiBackend, is_diagonally_dominant
from pymatalg.linalg.backends.substitution import back_substitution, forward_substitution

__all__ = [
    "DoolittleBackend",
    "JacobiBackend",
    "is_diagonally_dominant",
    "forward_substitution",
    "back_substitution",
]
