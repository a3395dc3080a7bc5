"""Model domain and infrastructure errors as regular data."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("error-value")
except PackageNotFoundError:
    # Package not installed (e.g. running from source without pip install)
    __version__ = "0.0.0.dev0"

import logging

# Library convention: attach a NullHandler so that logging calls inside
# error_value are discarded unless the application configures handlers.
logging.getLogger(__name__).addHandler(logging.NullHandler())

from .core import ErrorKind, ErrorValue, ErrorValueException, InvalidArgument, Reason  # noqa: E402
from .application import (  # noqa: E402
    caused_by,
    details,
    domain,
    flatten,
    infra,
    is_domain_error,
    is_error,
    is_infra_error,
    kind,
    map_details,
    reason,
    root_cause,
    to_map,
    unwrap,
    wrap,
)

__all__ = [
    "__version__",
    "ErrorKind", "ErrorValue", "ErrorValueException", "InvalidArgument", "Reason",
    "domain", "infra",
    "kind", "reason", "details", "caused_by",
    "map_details", "wrap", "unwrap", "flatten", "root_cause", "to_map",
    "is_error", "is_domain_error", "is_infra_error",
]
