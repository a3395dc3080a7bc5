"""Application layer: the functional API over ErrorValue."""

from .api import (
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
    "domain", "infra",
    "kind", "reason", "details", "caused_by",
    "map_details", "wrap", "unwrap", "flatten", "root_cause", "to_map",
    "is_error", "is_domain_error", "is_infra_error",
]
