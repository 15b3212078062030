"""Conversions between probability space and log-odds (weight) space.

This module provides the two transforms used to move formula weights of a
Markov Logic Network back and forth between probabilities and log-odds.
It depends only on the domain policy and the exception and type
definitions, avoiding circular import issues.
"""

from __future__ import annotations

import math
from decimal import Decimal

import numpy as np
from numpy.typing import NDArray

from mlnutils._domain_config import get_domain_policy
from mlnutils.exceptions import ProbabilityDomainError
from mlnutils.typing import ProbabilityLike, WeightLike


def _as_float64(value: object) -> NDArray[np.float64]:
    if isinstance(value, Decimal):
        # signalling NaN refuses float conversion
        value = math.nan if value.is_nan() else float(value)
    elif isinstance(value, int):
        try:
            value = float(value)
        except OverflowError:
            value = math.inf if value > 0 else -math.inf
    return np.asarray(value, dtype=np.float64)


def _check_domain(p: NDArray[np.float64], original: object) -> None:
    # NaN fails both comparisons, so it is rejected too
    inside = (p > 0.0) & (p < 1.0)
    if not np.all(inside):
        raise ProbabilityDomainError(original)


def _ieee_logit(p: NDArray[np.float64]) -> NDArray[np.float64]:
    with np.errstate(divide="ignore", invalid="ignore"):
        return -np.log((1.0 / p) - 1.0)


def _logit_float(
    probability: NDArray[np.floating] | float,
) -> NDArray[np.float64] | float:
    p = _as_float64(probability)

    if get_domain_policy() == "raise":
        _check_domain(p, probability)

    result = _ieee_logit(p)
    return float(result) if result.ndim == 0 else result


def logit_decimal(probability: Decimal) -> Decimal:
    """Compute the log-odds of a decimal probability.

    The decimal is converted to the nearest float before the logarithm is
    taken, and the float result is wrapped in a new ``Decimal``. The result
    is therefore only as precise as double-precision arithmetic.

    Parameters
    ----------
    probability : Decimal
        Probability in the open interval (0, 1).

    Returns
    -------
    Decimal
        Exact decimal expansion of the float log-odds.

    Raises
    ------
    ProbabilityDomainError
        If the input is not finite or the log-odds are infinite or NaN.
        Decimal results never carry special values.

    Examples
    --------
    >>> logit_decimal(Decimal("0.5")) == Decimal("0.0")
    True
    """
    if not probability.is_finite():
        raise ProbabilityDomainError(probability)

    weight = _ieee_logit(np.asarray(float(probability), dtype=np.float64))

    if not np.isfinite(weight):
        raise ProbabilityDomainError(
            probability, f"log-odds of {probability!r} are not finite in double precision"
        )
    return Decimal(float(weight))


def logit(
    probability: ProbabilityLike,
) -> NDArray[np.float64] | float | Decimal:
    """Convert a probability to log-odds.

    Computes ``-ln(1/p - 1)``, which equals ``ln(p / (1 - p))`` for ``p`` in
    (0, 1).

    Under the default ``"propagate"`` domain policy the input range is not
    checked and IEEE-754 special values flow through: ``logit(1.0)`` is
    ``inf``, ``logit(0.0)`` is ``-inf`` and any probability below zero or
    above one gives ``nan``. Under the ``"raise"`` policy such inputs raise
    :class:`~mlnutils.exceptions.ProbabilityDomainError`.

    Parameters
    ----------
    probability : float, array_like or Decimal
        Probability values. ``Decimal`` input is routed to
        :func:`logit_decimal`.

    Returns
    -------
    float, ndarray or Decimal
        Log-odds, same shape as input. ``Decimal`` in, ``Decimal`` out.

    Examples
    --------
    >>> logit(0.5)
    -0.0
    >>> round(logit(0.9), 6)
    2.197225
    """
    if isinstance(probability, Decimal):
        return logit_decimal(probability)
    return _logit_float(probability)


def logistic(
    weight: WeightLike,
) -> NDArray[np.float64] | float:
    """Convert log-odds back to a probability.

    Computes ``1 / (1 + exp(-w))``. The function is total: overflow of
    ``exp`` for very negative weights yields ``0.0``, ``+inf`` gives ``1.0``,
    ``-inf`` gives ``0.0`` and ``nan`` propagates. Integers too large for a
    float count as infinite and a signalling-NaN ``Decimal`` gives ``nan``.
    The domain policy does not apply here.

    Parameters
    ----------
    weight : float, array_like or Decimal
        Log-odds values. ``Decimal`` and ``int`` input is converted to float.

    Returns
    -------
    float or ndarray
        Probability, same shape as input.
    """
    w = _as_float64(weight)
    with np.errstate(over="ignore"):
        result = 1.0 / (1.0 + np.exp(-w))
    return float(result) if result.ndim == 0 else result
