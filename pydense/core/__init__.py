"""
Core infrastructure for pydense.

This module provides the shared type aliases, the exception hierarchy,
input validators for the outer surface, and tolerance tiers used to
compare kernel results.

Key components:
    types: Vector / Matrix aliases
    exceptions: Exception hierarchy
    validation: Input validators
    tolerances: Tolerance tiers for numerical comparison
    comparison: Exact and tolerance-based equality checks
"""

from pydense.core.types import Matrix, Vector, SwapMode
from pydense.core.exceptions import (
    PyDenseError,
    ValidationError,
    DimensionError,
)
from pydense.core.tolerances import ToleranceTier, select_tolerance

__all__ = [
    # Types
    "Matrix",
    "Vector",
    "SwapMode",
    # Exceptions
    "PyDenseError",
    "ValidationError",
    "DimensionError",
    # Tolerances
    "ToleranceTier",
    "select_tolerance",
]
