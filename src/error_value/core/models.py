"""Domain models: ErrorKind and ErrorValue. Pure data, no I/O."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from .errors import InvalidArgument

Reason = Union[str, Enum]


class ErrorKind(str, Enum):
    """Which of the two error variants a value belongs to."""

    DOMAIN = "domain"  # violated business rule
    INFRA = "infra"    # failure of the execution substrate or a dependency


def _freeze_details(details: Any) -> Mapping[str, Any]:
    """Return a read-only copy of *details*, or raise ``InvalidArgument``."""
    if not isinstance(details, Mapping):
        raise InvalidArgument("details", details, "must be a mapping")
    for key in details:
        if not isinstance(key, (str, Enum)):
            raise InvalidArgument("details", details, f"key {key!r} is not a string or enum member")
    return MappingProxyType(dict(details))


def _as_map(error: "ErrorValue", cause: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    return {
        "kind": error.kind,
        "reason": error.reason,
        "details": dict(error.details),
        "caused_by": cause,
    }


@dataclass(frozen=True, eq=False, repr=False)
class ErrorValue:
    """An application error as an immutable value.

    ``kind`` and ``reason`` never change.  ``details`` is a read-only copy of
    the mapping supplied at construction, so later mutation of the caller's
    dict has no effect.  ``caused_by`` is the error this one was wrapped on
    top of, or ``None``.

    ``map_details`` and ``wrap`` return new values; the receiver is untouched.
    Because every value is frozen and ``wrap`` can only point at an existing
    value, the chain reached through ``caused_by`` is finite and acyclic.

    Supports structural matching::

        match error:
            case ErrorValue(ErrorKind.INFRA, "db_down"):
                ...
    """

    kind: ErrorKind
    reason: Reason
    details: Mapping[str, Any] = field(default_factory=dict)
    caused_by: Optional["ErrorValue"] = None

    def __post_init__(self) -> None:
        try:
            kind = ErrorKind(self.kind)
        except ValueError:
            raise InvalidArgument("kind", self.kind, "must be 'domain' or 'infra'") from None
        object.__setattr__(self, "kind", kind)

        if isinstance(self.reason, bool) or not isinstance(self.reason, (str, Enum)):
            raise InvalidArgument("reason", self.reason, "must be a string or enum member")
        if isinstance(self.reason, str) and not isinstance(self.reason, Enum) and not self.reason:
            raise InvalidArgument("reason", self.reason, "must not be empty")

        object.__setattr__(self, "details", _freeze_details(self.details))

        if self.caused_by is not None and not isinstance(self.caused_by, ErrorValue):
            raise InvalidArgument("caused_by", self.caused_by, "must be an ErrorValue or None")

    # Details may hold unhashable values, so equal errors cannot promise equal hashes.
    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        """Structural equality over the whole chain, compared link by link."""
        if not isinstance(other, ErrorValue):
            return NotImplemented
        mine, theirs = self.flatten(), other.flatten()
        if len(mine) != len(theirs):
            return False
        for a, b in zip(mine, theirs):
            if a is b:
                # Shared tail from here on.
                return True
            if a.kind is not b.kind or a.reason != b.reason or a.details != b.details:
                return False
        return True

    def __repr__(self) -> str:
        cause = self.caused_by
        cause_repr = "None" if cause is None else f"<{cause.kind.value} {cause.reason!r}>"
        return (
            f"ErrorValue(kind={self.kind.value!r}, reason={self.reason!r}, "
            f"details={dict(self.details)!r}, caused_by={cause_repr})"
        )

    @property
    def is_domain(self) -> bool:
        return self.kind is ErrorKind.DOMAIN

    @property
    def is_infra(self) -> bool:
        return self.kind is ErrorKind.INFRA

    def map_details(self, f: Callable[[Dict[str, Any]], Mapping[str, Any]]) -> "ErrorValue":
        """Return a copy whose details are ``f(details)``.

        *f* receives a plain ``dict`` it may mutate and return.  Exceptions
        raised by *f* propagate unchanged.
        """
        return replace(self, details=f(dict(self.details)))

    def wrap(self, inner: "ErrorValue") -> "ErrorValue":
        """Return a copy of this error recorded as caused by *inner*.

        An existing cause is replaced, not appended.
        """
        if not isinstance(inner, ErrorValue):
            raise InvalidArgument("inner", inner, "must be an ErrorValue")
        return replace(self, caused_by=inner)

    def unwrap(self) -> Optional["ErrorValue"]:
        return self.caused_by

    def flatten(self) -> List["ErrorValue"]:
        """Outermost error first, root cause last."""
        chain: List[ErrorValue] = []
        current: Optional[ErrorValue] = self
        while current is not None:
            chain.append(current)
            current = current.caused_by
        return chain

    def root_cause(self) -> "ErrorValue":
        current = self
        while current.caused_by is not None:
            current = current.caused_by
        return current

    def to_map(self) -> Dict[str, Any]:
        """Convert this error and its whole cause chain to nested plain dicts.

        Keys are always ``kind``, ``reason``, ``details`` and ``caused_by``;
        the innermost ``caused_by`` is ``None``.
        """
        chain = self.flatten()
        converted = _as_map(chain[-1], None)
        # Build from the root outwards so long chains never recurse.
        for error in reversed(chain[:-1]):
            converted = _as_map(error, converted)
        return converted
