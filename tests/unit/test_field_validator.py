"""
Unit tests for the multi-field validator (fieldcheck.validation.fields).
Tests: conversion, per-field dispatch, missing fields, error aggregation.
"""
import json
from dataclasses import dataclass

import pytest
from pydantic import BaseModel, ValidationError

from fieldcheck.models.outcome import ErrorKind, ValidationOutcome
from fieldcheck.models.rules import MinLen
from fieldcheck.validation.fields import ConversionError, FieldValidator, to_field_mapping, validators


class TestConversion:
    def test_none_rejected(self):
        with pytest.raises(ConversionError, match="input is None") as exc:
            validators(None)
        assert exc.value.kind is ErrorKind.CONVERSION_FAILURE

    @pytest.mark.parametrize("root", [42, "text", 1.5, True, ["a", "b"]])
    def test_non_object_root_rejected(self, root):
        with pytest.raises(ConversionError):
            validators(root)

    def test_schema_name_in_rejection(self):
        with pytest.raises(ConversionError, match="field_mapping"):
            validators([1, 2])

    def test_unserializable_rejected(self):
        with pytest.raises(ConversionError, match="not serializable"):
            validators({"handle": object()})

    def test_dict_accepted(self, valid_body):
        v = validators(valid_body)
        assert dict(v.fields) == valid_body
        assert not v.has_errors()

    def test_empty_dict_accepted(self):
        assert dict(validators({}).fields) == {}

    def test_dataclass_accepted(self):
        @dataclass
        class Signup:
            username: str
            age: int

        assert to_field_mapping(Signup("bob", 30)) == {"username": "bob", "age": 30}

    def test_pydantic_model_accepted(self):
        class Signup(BaseModel):
            username: str
            tags: list[str]

        v = validators(Signup(username="bob", tags=("a", "b")))
        assert v.fields["tags"] == ["a", "b"]

    def test_tuple_values_become_lists(self):
        assert to_field_mapping({"t": (1, 2)}) == {"t": [1, 2]}

    def test_fields_are_read_only(self, valid_body):
        v = validators(valid_body)
        with pytest.raises(TypeError):
            v.fields["username"] = "changed"

    def test_fields_detached_from_input(self, valid_body):
        v = validators(valid_body)
        valid_body["username"] = ""
        assert v.fields["username"] == "User Name"


class TestAllRulesPass:
    def test_valid_body_has_no_errors(self, valid_body):
        v = validators(valid_body)
        v.require("username")
        v.max_len("username", 9)
        v.min_len("username", 0)
        v.date("date")
        v.email("mail")
        v.min("min", 0)
        v.max("max", 15)
        v.url("url")
        v.number("number")
        v.match("username", "^User Name$")
        assert not v.has_errors()
        assert v.error_list() == []
        assert v.error_messages() == {}


class TestFailures:
    def test_three_fields_fail(self):
        v = validators({"username": "", "min": "4", "max": "10"})
        v.require("username")
        v.min("min", 5)
        v.max("max", 9)
        assert v.has_errors()
        assert set(v.errors) == {"username", "min", "max"}
        assert len(v.error_list()) == 3

    def test_each_field_keeps_one_error(self, invalid_body):
        v = validators(invalid_body)
        for _ in range(2):
            v.require("username")
            v.max_len("maxlen", 5)
            v.min_len("minlen", 7)
            v.date("date")
            v.email("mail")
            v.min("min", 5)
            v.max("max", 9)
            v.url("url")
            v.number("number")
            v.match("username", "^String$")
        assert len(v.errors) == 9
        assert v.error_messages() == {
            "username": "It is a required input item",
            "maxlen": "String too long. maxlen(6) > max(5)",
            "minlen": "String too short. minlen(6) < min(7)",
            "date": v.errors["date"].error_text(),
            "mail": "E-MAIL address is wrong",
            "min": "Exceeds the min value. 4 < 5",
            "max": "Exceeds the maximum value. 10 > 9",
            "url": "Not URL",
            "number": "invalid literal for int() with base 10: '999s'",
        }

    def test_later_failure_replaces_earlier(self):
        v = validators({"code": "abc"})
        v.number("code")
        v.max_len("code", 1)
        assert v.errors["code"].error_text() == "String too long. abc(3) > max(1)"
        assert v.errors["code"].kind is ErrorKind.LENGTH_OUT_OF_BOUNDS

    def test_lone_surrogate_from_json_body(self):
        v = validators(json.loads('{"name": "ab\\ud800"}'))
        v.min_len("name", 5)
        assert not v.has_errors()
        result = v.max_len("name", 1)
        assert result.kind is ErrorKind.LENGTH_OUT_OF_BOUNDS
        assert result.error_text().endswith("(5) > max(1)")
        assert v.errors["name"] is result

    def test_passing_rule_keeps_earlier_error(self):
        v = validators({"code": "abc"})
        v.number("code")
        passed = v.max_len("code", 10)
        assert not passed.failed
        assert v.errors["code"].kind is ErrorKind.NOT_A_NUMBER

    def test_passing_outcome_not_stored(self, valid_body):
        v = validators(valid_body)
        v.require("username").set_message("late")
        assert not v.has_errors()

    def test_caller_message_visible_in_errors(self, invalid_body):
        v = validators(invalid_body)
        v.email("mail").set_message("EMAIL ERROR")
        assert v.error_messages() == {"mail": "EMAIL ERROR"}


class TestMissingFields:
    def test_missing_field_recorded(self, valid_body):
        v = validators(valid_body)
        result = v.require("missing")
        assert result.error_text() == "missing: not found"
        assert result.kind is ErrorKind.FIELD_NOT_FOUND
        assert v.errors["missing"] is result

    def test_every_rule_reports_missing(self, invalid_body):
        v = validators(invalid_body)
        v.require("username2").set_message("NG")
        v.max_len("maxlen2", 5)
        v.min_len("minlen2", 7)
        v.date("date2")
        v.email("mail2")
        v.min("min2", 5)
        v.max("max2", 9)
        v.url("url2")
        v.number("number2")
        v.match("username3", "^String$")
        assert len(v.errors) == 10
        assert v.errors["username2"].error_text() == "NG"
        assert v.errors["url2"].error_text() == "url2: not found"

    def test_missing_field_overwritten_on_repeat(self):
        v = validators({})
        first = v.url("absent")
        second = v.url("absent")
        assert first is not second
        assert v.errors["absent"] is second
        assert len(v.error_list()) == 1

    def test_nested_key_is_not_a_field(self):
        v = validators({"profile": {"missing": "here"}})
        v.require("missing")
        assert v.errors["missing"].kind is ErrorKind.FIELD_NOT_FOUND


class TestListFields:
    def test_per_element_checks(self, list_body):
        v = validators(list_body)
        v.require("tags")
        v.max("scores", 9)
        v.min("scores", 1)
        assert not v.has_errors()

    def test_first_failing_element_reported(self, list_body):
        v = validators(list_body)
        v.email("mails")
        v.max("scores", 4)
        assert v.errors["mails"].kind is ErrorKind.INVALID_FORMAT
        assert v.errors["scores"].error_text() == "Exceeds the maximum value. 5 > 4"

    def test_empty_list_passes(self, list_body):
        v = validators(list_body)
        v.require("empty")
        assert "empty" not in v.errors


class TestTypedDispatch:
    def test_check_with_rule(self):
        v = FieldValidator({"name": "ab"})
        result = v.check("name", MinLen(min=3))
        assert result.kind is ErrorKind.LENGTH_OUT_OF_BOUNDS
        assert isinstance(result, ValidationOutcome)

    def test_bad_argument_type_raises(self, valid_body):
        v = validators(valid_body)
        with pytest.raises(ValidationError):
            v.max_len("username", "9")
        with pytest.raises(ValidationError):
            v.match("username", 5)
        assert not v.has_errors()

    def test_errors_view_is_read_only(self):
        v = validators({})
        v.require("x")
        with pytest.raises(TypeError):
            v.errors["y"] = ValidationOutcome()

    def test_repr(self):
        v = FieldValidator({"a": 1})
        v.require("b")
        assert repr(v) == "FieldValidator(fields=['a'], errors=['b'])"
