"""
Tolerance tiers for numerical comparison.

Defines precision expectations for the different kernels:
- Exact: elementwise kernels, copies, transposes and swaps reproduce
  values bit for bit
- Inverse FP64: Gauss-Jordan inversion of a well-conditioned matrix
- Inverse FP64, ill-conditioned: relaxed, the row-exchange pre-pass is not
  full partial pivoting so error grows quickly with the condition number

Used by the test suite and by pydense.core.comparison.matrix_close.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Loops that only move or add values
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Bitwise identical results',
)

# Accumulating kernels (products, norms)
CPU_FP64 = ToleranceTier(
    rtol=1e-12,
    atol=1e-12,
    name='cpu_fp64',
    description='Double precision accumulation',
)

# A @ inv(A) against the identity, cond(A) small
INVERSE_FP64 = ToleranceTier(
    rtol=0.0,
    atol=1e-9,
    name='inverse_fp64',
    description='Gauss-Jordan inversion, well-conditioned input',
)

# Condition number above ~1e4
INVERSE_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='inverse_fp64_ill_conditioned',
    description='Gauss-Jordan inversion, ill-conditioned input',
)


def select_tolerance(
    operation: str,
    is_ill_conditioned: bool = False,
) -> ToleranceTier:
    """Select appropriate tolerance tier for a given kernel name."""
    if 'invert' in operation:
        if is_ill_conditioned:
            return INVERSE_FP64_ILL_CONDITIONED
        return INVERSE_FP64
    if operation in ('mat_mul', 'mat_vec_prod', 'mat_norm_l2'):
        return CPU_FP64
    return EXACT
