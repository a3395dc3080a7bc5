"""Tests for the kind guards: is_error, is_domain_error, is_infra_error."""

from __future__ import annotations

import pytest

from error_value import domain, infra, is_domain_error, is_error, is_infra_error, reason


def _reason_or_marker(value):
    if isinstance(value, int):
        return "no_reason"
    if is_error(value):
        return reason(value)
    return "not_matched"


def test_is_error_branches_on_error_values():
    assert _reason_or_marker(infra("my_reason", {"y": "z", "a": "b"})) == "my_reason"
    assert _reason_or_marker(3) == "no_reason"
    assert _reason_or_marker("my_reason") == "not_matched"


def test_is_infra_error_does_not_match_domain_error():
    assert not is_infra_error(domain("my_reason", {"y": "z"}))
    assert is_infra_error(infra("my_reason"))


def test_is_domain_error_does_not_match_infra_error():
    assert not is_domain_error(infra("my_reason", {"y": "z"}))
    assert is_domain_error(domain("my_reason"))


@pytest.mark.parametrize("value", [None, 0, "domain", {"kind": "domain", "reason": "x"}, ValueError("x")])
def test_guards_reject_non_error_values(value):
    assert not is_error(value)
    assert not is_domain_error(value)
    assert not is_infra_error(value)
