"""Constants for probability/log-odds conversion and file helpers.

These are true constants that should not be user-configurable.
For configurable values, use function arguments with defaults.
"""

NEUTRAL_PROBABILITY: float = 0.5
"""Probability whose log-odds are exactly zero."""

NEUTRAL_WEIGHT: float = 0.0
"""Log-odds of an even chance; ``logistic(NEUTRAL_WEIGHT) == 0.5``."""

TEMP_PREFIX_MIN_LENGTH: int = 3
"""Minimum number of characters in a temp-file name prefix."""

DEFAULT_TEMP_SUFFIX: str = ".tmp"
"""Suffix used for temp files when none is given."""

DEFAULT_ENCODING: str = "utf-8"
"""Text encoding used when streaming lines from bytes."""
