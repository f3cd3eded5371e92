from __future__ import annotations

import json

import pytest
from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from oaiapi.models import ApiError, ApiResultBase, MetadataNormalizer


@pytest.mark.parametrize(
    "value",
    [
        {"param": "x", "nested": [1, 2, 3]},
        {"provider_name": "OpenAI", "raw": {"deep": {"deeper": [{"a": None}, True]}}},
        [1, "two", 3.5, False, None],
        "plain string",
        42,
        -0.25,
        True,
        False,
        None,
        {},
        [],
        {"text": "привет"},
    ],
)
def test_metadata_captured_as_compact_json(value):
    # Pretty-printed on the wire; whitespace must not survive
    body = json.dumps({"error": {"code": 400, "message": "bad", "metadata": value}}, indent=4)

    result = ApiResultBase.model_validate_json(body)

    captured = result.error.metadata
    assert isinstance(captured, str)
    assert json.loads(captured) == value
    assert captured == json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def test_metadata_example_key_order_preserved():
    body = '{"error":{"code":400,"message":"bad request","metadata":{"param":"x","nested":[1,2,3]}}}'

    result = ApiResultBase.model_validate_json(body)

    assert result.error.code == 400
    assert result.error.message == "bad request"
    assert result.error.metadata == '{"param":"x","nested":[1,2,3]}'


def test_metadata_keys_not_sorted():
    body = '{"error": {"code": 1, "message": "m", "metadata": {"z": 1, "a": 2, "m": {"y": 0, "b": 0}}}}'

    result = ApiResultBase.model_validate_json(body)

    assert result.error.metadata == '{"z":1,"a":2,"m":{"y":0,"b":0}}'


def test_metadata_absent_is_none():
    error = ApiError.model_validate({"code": 500, "message": "oops"})
    assert error.metadata is None


def test_json_string_metadata_keeps_quotes():
    error = ApiError.model_validate_json('{"code": 1, "message": "m", "metadata": "abc"}')
    assert error.metadata == '"abc"'


def test_malformed_json_fails_whole_decode():
    body = '{"error": {"code": 400, "message": "bad", "metadata": {"param": }}}'
    with pytest.raises(ValidationError):
        ApiResultBase.model_validate_json(body)


def test_normalizer_is_opt_in_per_field():
    # message is a plain str field and must not be re-serialized
    error = ApiError.model_validate_json('{"code": 1, "message": "hello", "metadata": "hello"}')
    assert error.message == "hello"
    assert error.metadata == '"hello"'


class TestEncodeUnsupported:
    @pytest.mark.parametrize("value", [None, "", '{"a":1}', 0, [1], {"a": 1}])
    def test_encode_always_raises(self, value):
        with pytest.raises(NotImplementedError):
            MetadataNormalizer.encode(value)

    def test_model_dump_through_rule_raises(self):
        error = ApiError.model_validate({"code": 1, "message": "m", "metadata": {"a": 1}})
        with pytest.raises((NotImplementedError, PydanticSerializationError)):
            error.model_dump()

    def test_model_dump_json_through_rule_raises(self):
        error = ApiError.model_validate({"code": 1, "message": "m", "metadata": [1, 2]})
        with pytest.raises((NotImplementedError, PydanticSerializationError)):
            error.model_dump_json()


def test_overflowing_number_rejected():
    with pytest.raises(ValidationError):
        ApiError.model_validate_json('{"code": 1, "message": "m", "metadata": {"v": 1e400}}')


@pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan"), {"v": float("inf")}])
def test_non_finite_numbers_not_captured(value):
    with pytest.raises(ValueError):
        MetadataNormalizer.decode(value)


def test_python_construction_treats_string_as_json_value():
    error = ApiError(code=1, message="m", metadata='{"a":1}')
    assert error.metadata == '"{\\"a\\":1}"'
    assert json.loads(error.metadata) == '{"a":1}'
