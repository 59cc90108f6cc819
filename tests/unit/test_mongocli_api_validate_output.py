"""Unit tests for mongocli.api.validate_output."""

import pytest
from pydantic import BaseModel

from mongocli.api._output_schemas import _registry
from mongocli.api.document.cmd_count import cmd_count
from mongocli.api.validate_output import validate_output


class MockOutput(BaseModel):
    key: str
    optional: str = "default"


def mock_cmd_func():
    """Mock command function."""
    pass


# Make the function look like it lives in mongocli.api.test_domain
mock_cmd_func.__module__ = "mongocli.api.test_domain"
mock_cmd_func.__name__ = "cmd_mock_command"


@pytest.fixture
def mock_schema(monkeypatch):
    monkeypatch.setitem(_registry._SCHEMA_REGISTRY, ("test_domain", "mock_command"), MockOutput)


def test_validate_output_success(mock_schema):
    """Defaults are filled in."""
    assert validate_output(mock_cmd_func, {"key": "value"}) == {"key": "value", "optional": "default"}


def test_validate_output_failure(mock_schema):
    with pytest.raises(ValueError, match="Output validation failed"):
        validate_output(mock_cmd_func, {"wrong": "value"})


def test_validate_output_skip_non_api():
    def non_api_func():
        pass

    non_api_func.__module__ = "other.module"
    output = {"foo": "bar"}
    assert validate_output(non_api_func, output) == output


def test_validate_output_skip_unregistered():
    def cmd_unknown():
        pass

    cmd_unknown.__module__ = "mongocli.api.nowhere"
    assert validate_output(cmd_unknown, {"anything": 1}) == {"anything": 1}


def test_real_schema_rejects_missing_field():
    with pytest.raises(ValueError, match="document.count"):
        validate_output(cmd_count, {"errors": [], "warnings": [], "collection": "users"})


def test_duplicate_registration_rejected():
    with pytest.raises(ValueError, match="already registered"):
        _registry.register_output_schema("document", "count", MockOutput)
