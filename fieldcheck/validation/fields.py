"""
Multi-field validator.

Converts an arbitrary object (dict, dataclass, Pydantic model, ...) into a
field-name → value mapping through its JSON-compatible form, then applies
rules to named fields. At most one outcome is kept per field name:

- a failing rule stores (or replaces) the outcome for that field
- a passing rule leaves any earlier failure in place
- a field absent from the input is recorded as ``"<name>: not found"``

Usage::

    v = validators(request_body)
    v.require("username")
    v.max_len("username", 32)
    v.email("mail")
    if v.has_errors():
        return v.error_messages()
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, List, Mapping

from jsonschema import ValidationError, validate
from pydantic_core import PydanticSerializationError, to_jsonable_python

from fieldcheck.config import constants
from fieldcheck.config.schemas import FIELD_MAPPING_SCHEMA
from fieldcheck.models.outcome import ErrorKind, ValidationOutcome
from fieldcheck.models.rules import (
    URL,
    Date,
    Email,
    Match,
    Max,
    MaxLen,
    Min,
    MinLen,
    Number,
    Require,
    Rule,
)
from fieldcheck.validation.metrics import record_conversion_failure
from fieldcheck.validation.single import Validator

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Custom exception
# ---------------------------------------------------------------------------

class ConversionError(Exception):
    """Raised when the input cannot be turned into a field mapping."""

    kind = ErrorKind.CONVERSION_FAILURE

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Cannot convert input to field mapping: {reason}")


# ---------------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------------

def to_field_mapping(obj: Any) -> Dict[str, Any]:
    """
    Convert *obj* to its structural form and require a keyed mapping.

    Raises:
        ConversionError: *obj* is None, not serializable, or not object-shaped.
    """
    if obj is None:
        record_conversion_failure()
        raise ConversionError("input is None")

    try:
        data = to_jsonable_python(obj)
    except (PydanticSerializationError, ValueError) as e:
        logger.warning("Input of type %s is not serializable: %s", type(obj).__name__, e)
        record_conversion_failure()
        raise ConversionError(f"not serializable: {e}") from e

    try:
        validate(instance=data, schema=FIELD_MAPPING_SCHEMA["schema"])
    except ValidationError as e:
        logger.warning("Input root rejected by %s: %s", FIELD_MAPPING_SCHEMA["name"], e.message)
        record_conversion_failure()
        raise ConversionError(f"{FIELD_MAPPING_SCHEMA['name']}: {e.message}") from e

    return data


# ---------------------------------------------------------------------------
# FieldValidator
# ---------------------------------------------------------------------------

class FieldValidator:
    """Applies rules to named fields and keeps one outcome per failing field."""

    def __init__(self, fields: Mapping[str, Any]) -> None:
        self._fields: Mapping[str, Any] = MappingProxyType(dict(fields))
        self._errors: Dict[str, ValidationOutcome] = {}

    @classmethod
    def from_object(cls, obj: Any) -> "FieldValidator":
        return cls(to_field_mapping(obj))

    @property
    def fields(self) -> Mapping[str, Any]:
        return self._fields

    @property
    def errors(self) -> Mapping[str, ValidationOutcome]:
        """Read-only view of field name → recorded outcome."""
        return MappingProxyType(self._errors)

    def __repr__(self) -> str:
        return f"FieldValidator(fields={list(self._fields)}, errors={list(self._errors)})"

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def check(self, name: str, rule: Rule) -> ValidationOutcome:
        """
        Apply *rule* to field *name*.

        A fresh Validator is built per call; only a failing outcome is kept.
        """
        if name not in self._fields:
            logger.warning("Field '%s' not found in input", name)
            result = ValidationOutcome().set_message(
                constants.NOT_FOUND_TEMPLATE.format(name=name), ErrorKind.FIELD_NOT_FOUND
            )
            self._errors[name] = result
            return result

        result = Validator(self._fields[name]).apply(rule)
        if result.failed:
            self._errors[name] = result
        return result

    # ------------------------------------------------------------------
    # Named rules
    # ------------------------------------------------------------------

    def require(self, name: str) -> ValidationOutcome:
        return self.check(name, Require())

    def max_len(self, name: str, max: int, unit: str | None = None) -> ValidationOutcome:
        return self.check(name, MaxLen(max=max, unit=unit))

    def min_len(self, name: str, min: int, unit: str | None = None) -> ValidationOutcome:
        return self.check(name, MinLen(min=min, unit=unit))

    def email(self, name: str) -> ValidationOutcome:
        return self.check(name, Email())

    def number(self, name: str) -> ValidationOutcome:
        return self.check(name, Number())

    def max(self, name: str, max: int) -> ValidationOutcome:
        return self.check(name, Max(max=max))

    def min(self, name: str, min: int) -> ValidationOutcome:
        return self.check(name, Min(min=min))

    def date(self, name: str) -> ValidationOutcome:
        return self.check(name, Date())

    def url(self, name: str) -> ValidationOutcome:
        return self.check(name, URL())

    def match(self, name: str, pattern: str) -> ValidationOutcome:
        return self.check(name, Match(pattern=pattern))

    # ------------------------------------------------------------------
    # Aggregate state
    # ------------------------------------------------------------------

    def has_errors(self) -> bool:
        return len(self._errors) > 0

    def error_list(self) -> List[ValidationOutcome]:
        """Recorded outcomes; order is not part of the contract."""
        return list(self._errors.values())

    def error_messages(self) -> Dict[str, str]:
        """Field name → message, e.g. for an API error response."""
        return {name: result.error_text() for name, result in self._errors.items()}


def validators(obj: Any) -> FieldValidator:
    """Create a FieldValidator from *obj*; raises ConversionError on bad input."""
    return FieldValidator.from_object(obj)
