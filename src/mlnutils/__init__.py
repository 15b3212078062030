from mlnutils._core import logistic, logit, logit_decimal
from mlnutils._domain_config import (
    domain_policy,
    get_domain_info,
    get_domain_policy,
    set_domain_policy,
)
from mlnutils._version import __version__
from mlnutils.exceptions import (
    MLNUtilsError,
    ProbabilityDomainError,
    StreamDecodeError,
)
from mlnutils.utils.io import LineStream, create_temp_file, create_temp_path, lines

__all__ = [
    "__version__",
    # Conversions
    "logit",
    "logit_decimal",
    "logistic",
    # Domain policy
    "set_domain_policy",
    "get_domain_policy",
    "get_domain_info",
    "domain_policy",
    # Exceptions
    "MLNUtilsError",
    "ProbabilityDomainError",
    "StreamDecodeError",
    # File and stream helpers
    "LineStream",
    "create_temp_file",
    "create_temp_path",
    "lines",
]
