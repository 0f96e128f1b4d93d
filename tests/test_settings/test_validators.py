"""Проверки валидаторов настроек."""

from __future__ import annotations

import re

from dockdesk.settings.validators import (
    CompositeValidator,
    EnumValidator,
    RangeValidator,
    RegexValidator,
    TypeValidator,
)


def test_type_validator() -> None:
    assert TypeValidator(str).validate("docker") == (True, "")
    is_valid, error = TypeValidator(str).validate(123)
    assert not is_valid
    assert "str" in error


def test_type_validator_does_not_treat_bool_as_int() -> None:
    assert not TypeValidator(int).validate(True)[0]
    assert TypeValidator(bool).validate(False) == (True, "")


def test_range_validator() -> None:
    validator = RangeValidator(0, 3600)
    assert validator.validate(0) == (True, "")
    is_valid, error = validator.validate(3601)
    assert not is_valid
    assert "out of range" in error


def test_range_validator_rejects_non_integers() -> None:
    assert not RangeValidator(0, 10).validate("5")[0]
    assert not RangeValidator(0, 10).validate(2.5)[0]


def test_enum_validator() -> None:
    validator = EnumValidator(["DEBUG", "INFO"])
    assert validator.validate("INFO") == (True, "")
    is_valid, error = validator.validate("TRACE")
    assert not is_valid
    assert "allowed values" in error


def test_regex_validator() -> None:
    validator = RegexValidator(r"\S+")
    assert validator.validate("docker") == (True, "")
    assert "does not match" in validator.validate("two words")[1]
    assert "string" in validator.validate(5)[1]


def test_regex_validator_supports_compiled_pattern() -> None:
    assert RegexValidator(re.compile(r"[0-9]+")).validate("1234") == (True, "")


def test_composite_validator_stops_on_first_error() -> None:
    validator = CompositeValidator([TypeValidator(str), RegexValidator(r"\S+")])
    is_valid, error = validator.validate(42)
    assert not is_valid
    assert "type" in error
    assert validator.validate("podman") == (True, "")
