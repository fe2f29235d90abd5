"""
Type aliases shared by every kernel.

pydense defines no container classes. A vector is a 1D float64 ndarray;
a matrix is a list of 1D float64 row views into one contiguous backing
buffer, so rows can be relabelled (see swap_rows) without touching data.
"""

from typing import Literal

import numpy as np
from numpy.typing import NDArray

Vector = NDArray[np.float64]
Matrix = list[NDArray[np.float64]]

SwapMode = Literal['alias', 'copy']
