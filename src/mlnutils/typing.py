"""Type definitions for the mlnutils package."""

from decimal import Decimal
from typing import Literal, Union

import numpy as np
from numpy.typing import NDArray

# Array types
ProbabilityArray = NDArray[np.float64]  # Values in the open interval (0, 1)
WeightArray = NDArray[np.float64]  # Log-odds, any real value

# Scalar-or-array inputs accepted by the converters
ProbabilityLike = Union[float, Decimal, ProbabilityArray]
WeightLike = Union[float, Decimal, WeightArray]

# Handling of probabilities outside (0, 1)
DomainPolicy = Literal["propagate", "raise"]
