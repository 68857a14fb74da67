"""
Error types for binary vector operations.

Two failures are part of the public contract: operands whose dimensions
differ and combination weights that cannot be normalized. A third,
ProbeBudgetExceeded, signals a broken internal invariant and
sits outside the BitSpaceError hierarchy.
"""

from typing import Optional, Any, Dict


class BitSpaceError(Exception):
    """
    Base exception for all bitspace contract violations.

    Carries a message plus a details dict for structured reporting.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize bitspace error.

        Args:
            message: Error message
            details: Optional detailed error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class DimensionMismatch(BitSpaceError, ValueError):
    """Raised when two operands of a binary operation differ in dimension."""

    def __init__(self, expected: int, actual: int,
                 operation: str = 'general',
                 details: Optional[Dict[str, Any]] = None):
        """
        Initialize dimension mismatch error.

        Args:
            expected: Dimension of the first operand
            actual: Dimension of the offending operand
            operation: Operation that rejected the operands
            details: Additional error context
        """
        message = (f"{operation}: dimension mismatch, "
                   f"expected {expected} but got {actual}")
        super().__init__(message, details)
        self.expected = expected
        self.actual = actual
        self.operation = operation

        self.details.update({
            'expected': expected,
            'actual': actual,
            'operation': operation
        })


class InvalidWeight(BitSpaceError, ValueError):
    """Raised when combination weights are negative, non-finite or sum to zero."""

    def __init__(self, weight_a: float, weight_b: float,
                 details: Optional[Dict[str, Any]] = None):
        message = (f"weights must be non-negative with a positive sum, "
                   f"got {weight_a} and {weight_b}")
        super().__init__(message, details)
        self.weight_a = weight_a
        self.weight_b = weight_b

        self.details.update({
            'weight_a': weight_a,
            'weight_b': weight_b
        })


class ProbeBudgetExceeded(RuntimeError):
    """
    Raised when the Hamming adjuster exhausts its draw budget.

    ``probes`` counts draws, one per eligible position visited.

    Never expected for valid inputs: every candidate is revisited on
    wraparound and accepted with probability one half.
    """

    def __init__(self, flips_made: int, flips_required: int, probes: int):
        super().__init__(
            f"adjuster made {flips_made}/{flips_required} flips "
            f"within {probes} draws"
        )
        self.flips_made = flips_made
        self.flips_required = flips_required
        self.probes = probes


def is_dimension_error(error: Exception) -> bool:
    """Check if error is a dimension mismatch."""
    return isinstance(error, DimensionMismatch)


def is_weight_error(error: Exception) -> bool:
    """Check if error is an invalid weight."""
    return isinstance(error, InvalidWeight)
