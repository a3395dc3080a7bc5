"""Functional API over ErrorValue: constructors, accessors, transforms and kind guards.

Every function is pure.  Constructors apply a reason policy on top of the
structural checks ``ErrorValue`` performs itself: ``DEFAULT_CONFIG`` unless a
``config`` is passed.  Nothing here reads the environment; callers who want
the file-based settings pass ``config=load_config()``.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional

from error_value.config import DEFAULT_CONFIG, ErrorValueConfig
from error_value.core.errors import InvalidArgument
from error_value.core.models import ErrorKind, ErrorValue, Reason

logger = logging.getLogger(__name__)


def _check_reason_policy(reason: Any, cfg: ErrorValueConfig) -> None:
    if isinstance(reason, Enum):
        if not cfg.allow_enum_reasons:
            logger.debug("Rejected enum reason %r (allow_enum_reasons is off)", reason)
            raise InvalidArgument("reason", reason, "enum reasons are disabled by configuration")
        return
    if cfg.strict_reasons and isinstance(reason, str) and reason and not reason.isidentifier():
        logger.debug("Rejected reason %r (strict_reasons is on)", reason)
        raise InvalidArgument("reason", reason, "must be a valid identifier")


def _build(
    kind: ErrorKind,
    reason: Reason,
    details: Optional[Mapping[str, Any]],
    config: Optional[ErrorValueConfig],
) -> ErrorValue:
    _check_reason_policy(reason, DEFAULT_CONFIG if config is None else config)
    return ErrorValue(kind=kind, reason=reason, details={} if details is None else details)


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

def domain(
    reason: Reason,
    details: Optional[Mapping[str, Any]] = None,
    *,
    config: Optional[ErrorValueConfig] = None,
) -> ErrorValue:
    """Create a domain error with *reason* and optional *details* (default: empty).

    *config* selects the reason policy; ``DEFAULT_CONFIG`` when omitted.
    """
    return _build(ErrorKind.DOMAIN, reason, details, config)


def infra(
    reason: Reason,
    details: Optional[Mapping[str, Any]] = None,
    *,
    config: Optional[ErrorValueConfig] = None,
) -> ErrorValue:
    """Create an infrastructure error with *reason* and optional *details* (default: empty)."""
    return _build(ErrorKind.INFRA, reason, details, config)


# ---------------------------------------------------------------------------
# Accessors
# ---------------------------------------------------------------------------

def kind(error: ErrorValue) -> ErrorKind:
    return error.kind


def reason(error: ErrorValue) -> Reason:
    return error.reason


def details(error: ErrorValue) -> Mapping[str, Any]:
    return error.details


def caused_by(error: ErrorValue) -> Optional[ErrorValue]:
    """The error *error* was wrapped on top of, or ``None``."""
    return error.caused_by


# ---------------------------------------------------------------------------
# Transforms and chain traversal
# ---------------------------------------------------------------------------

def map_details(
    error: ErrorValue, f: Callable[[Dict[str, Any]], Mapping[str, Any]]
) -> ErrorValue:
    """Return *error* with details replaced by ``f(details)``.

    Useful for adding, updating or removing details.  ``kind``, ``reason`` and
    ``caused_by`` are kept.  Exceptions from *f* are not caught.
    """
    return error.map_details(f)


def wrap(inner: ErrorValue, outer: ErrorValue) -> ErrorValue:
    """Return *outer* recorded as caused by *inner*.

    Kinds may differ (a domain error can wrap an infra error and vice versa).
    A cause already present on *outer* is replaced; build longer chains by
    wrapping each new error over the previous result.
    """
    if not isinstance(outer, ErrorValue):
        raise InvalidArgument("outer", outer, "must be an ErrorValue")
    return outer.wrap(inner)


def unwrap(error: ErrorValue) -> Optional[ErrorValue]:
    return error.unwrap()


def flatten(error: ErrorValue) -> List[ErrorValue]:
    """List the chain from *error* (first) down to its root cause (last)."""
    return error.flatten()


def root_cause(error: ErrorValue) -> ErrorValue:
    return error.root_cause()


def to_map(error: ErrorValue) -> Dict[str, Any]:
    """Convert *error* and its cause chain to nested dicts.

    Example::

        >>> to_map(infra("x", {"y": "z"}))
        {'kind': <ErrorKind.INFRA: 'infra'>, 'reason': 'x', 'details': {'y': 'z'}, 'caused_by': None}
    """
    return error.to_map()


# ---------------------------------------------------------------------------
# Kind guards
# ---------------------------------------------------------------------------

def is_error(value: Any) -> bool:
    return isinstance(value, ErrorValue)


def is_domain_error(value: Any) -> bool:
    return isinstance(value, ErrorValue) and value.kind is ErrorKind.DOMAIN


def is_infra_error(value: Any) -> bool:
    return isinstance(value, ErrorValue) and value.kind is ErrorKind.INFRA
