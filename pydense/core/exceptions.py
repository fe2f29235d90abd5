"""
Exception hierarchy for pydense.

All exceptions inherit from PyDenseError to allow catching any
library-specific error.

Design principles:
    - Kernels never raise these for shape mismatches; shape correctness
      is the caller's responsibility on the hot path
    - Validating entry points (conversions, enumerated parameters) raise
      immediately with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyDenseError(Exception):
    """Base exception for all pydense errors."""
    pass


class ValidationError(PyDenseError):
    """
    Input validation failed.
    
    Raised when user-provided inputs to a validating entry point fail
    validation checks (non-numeric data, unknown mode strings).
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.
    
    Raised when an array handed to a validating entry point does not have
    the required number of dimensions or the required shape.
    """
    pass
