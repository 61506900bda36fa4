"""Tests for argument validation."""
import pytest

from core.errors import ValidationError
from core.models import QueryParameter
from core.validation import (
    optional_parameters,
    optional_string,
    require_object,
    require_string,
)


@pytest.mark.parametrize(
    "args, message",
    [
        ({}, "containerName is required"),
        ({"containerName": None}, "containerName is required"),
        ({"containerName": 42}, "containerName must be a string"),
        ({"containerName": "   "}, "containerName cannot be blank"),
    ],
)
def test_require_string_rejects(args, message):
    with pytest.raises(ValidationError) as exc_info:
        require_string(args, "containerName")
    assert exc_info.value.message == message
    assert exc_info.value.field == "containerName"


def test_require_string_returns_value_untrimmed():
    assert require_string({"id": " a "}, "id") == " a "


def test_require_object():
    assert require_object({"item": {"a": 1}}, "item") == {"a": 1}
    with pytest.raises(ValidationError, match="item is required"):
        require_object({"item": None}, "item")
    with pytest.raises(ValidationError, match="item must be an object"):
        require_object({"item": [1, 2]}, "item")


def test_require_object_returns_a_copy():
    original = {"a": 1}
    result = require_object({"item": original}, "item")
    result["id"] = "x"
    assert "id" not in original


def test_optional_string_defaults():
    assert optional_string({}, "partitionKey", default="id-1") == "id-1"
    assert optional_string({"partitionKey": None}, "partitionKey", default="id-1") == "id-1"
    assert optional_string({"partitionKey": ""}, "partitionKey", default="id-1") == "id-1"
    assert optional_string({"partitionKey": "tenant-a"}, "partitionKey", default="id-1") == "tenant-a"
    with pytest.raises(ValidationError, match="partitionKey must be a string"):
        optional_string({"partitionKey": 7}, "partitionKey", default="id-1")


def test_optional_parameters():
    assert optional_parameters({}) == []
    assert optional_parameters({"parameters": None}) == []
    assert optional_parameters({"parameters": [{"name": "@s", "value": "active"}]}) == [
        QueryParameter(name="@s", value="active")
    ]


@pytest.mark.parametrize(
    "parameters, message",
    [
        ("@s=1", "parameters must be an array"),
        (["@s"], "parameters[0] must be an object"),
        ([{"value": 1}], "parameters[0].name is required"),
        ([{"name": "@a", "value": 1}, {"name": " ", "value": 1}], "parameters[1].name cannot be blank"),
        ([{"name": "@a"}], "parameters[0].value is required"),
    ],
)
def test_optional_parameters_rejects(parameters, message):
    with pytest.raises(ValidationError) as exc_info:
        optional_parameters({"parameters": parameters})
    assert exc_info.value.message == message
