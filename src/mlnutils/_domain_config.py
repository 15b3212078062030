"""Runtime selection of how out-of-domain probabilities are handled."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from mlnutils.typing import DomainPolicy

logger = logging.getLogger(__name__)

_VALID_POLICIES: tuple[DomainPolicy, ...] = ("propagate", "raise")

_CURRENT_POLICY: DomainPolicy = "propagate"


def set_domain_policy(policy: DomainPolicy) -> None:
    """Set the process-wide policy for probabilities outside (0, 1).

    ``"propagate"`` lets IEEE-754 infinities and NaN flow through
    :func:`~mlnutils.logit`; ``"raise"`` rejects such inputs with
    :class:`~mlnutils.exceptions.ProbabilityDomainError`.
    """
    global _CURRENT_POLICY

    if policy not in _VALID_POLICIES:
        raise ValueError(
            f"Invalid domain policy '{policy}'. Must be one of: 'propagate', 'raise'"
        )

    if policy != _CURRENT_POLICY:
        logger.info("Domain policy changed from %r to %r", _CURRENT_POLICY, policy)
    _CURRENT_POLICY = policy


def get_domain_policy() -> DomainPolicy:
    """Get the currently configured domain policy."""
    return _CURRENT_POLICY


@contextmanager
def domain_policy(policy: DomainPolicy) -> Iterator[None]:
    """Temporarily switch the domain policy inside a ``with`` block.

    The policy is process-wide, so other threads see the switched value
    while the block runs. Use it from one thread at a time, or set the
    policy once at start-up with :func:`set_domain_policy`.
    """
    previous = get_domain_policy()
    set_domain_policy(policy)
    try:
        yield
    finally:
        set_domain_policy(previous)


def get_domain_info() -> dict[str, Any]:
    """Get information about the configured domain handling."""
    return {
        "current_policy": _CURRENT_POLICY,
        "available_policies": list(_VALID_POLICIES),
    }
