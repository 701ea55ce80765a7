"""
Single-value validator.

Wraps one value (a scalar or a list of scalars) and one ValidationOutcome.
Every rule stringifies the value before checking it; list values are checked
element by element and stop at the first failing element. ``None`` renders
as the empty string rather than a placeholder such as ``<nil>``, so a null
value fails ``require()``.

Usage::

    v = validator("user@example.com")
    v.require()
    v.email()
    if v.has_errors():
        print(v.error())
"""
from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import Any, Callable, Dict, List, Type

from fieldcheck.config import constants, settings
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
from fieldcheck.validation.metrics import record_rule_failure

logger = logging.getLogger(__name__)


# ======================================================================
# Internal helpers
# ======================================================================

def stringify(item: Any) -> str:
    """
    Render a scalar the way it appears in its structural (JSON) form.

    ``None`` renders as the empty string so a null value fails ``require``.
    """
    if item is None:
        return ""
    if isinstance(item, bool):
        return "true" if item else "false"
    if isinstance(item, float) and item.is_integer():
        return str(int(item))
    return str(item)


def measure(value: str, unit: str) -> int:
    """Length of *value* in *unit* ("bytes" = UTF-8 length, "chars" = code points)."""
    if unit == "bytes":
        # Lone surrogates (e.g. from json.loads) count as their 3-byte encoding.
        return len(value.encode("utf-8", "surrogatepass"))
    if unit == "chars":
        return len(value)
    raise ValueError(f"Unknown length unit '{unit}', expected one of {constants.LENGTH_UNITS}")


def parse_int(value: str) -> int:
    """Strict base-10 integer parse: optional sign, ASCII digits, nothing else."""
    if not constants.INTEGER_PATTERN.fullmatch(value):
        raise ValueError(constants.INT_PARSE_TEMPLATE.format(value=value))
    return int(value)


# ======================================================================
# Validator
# ======================================================================

class Validator:
    """Applies rules to one value and records the last failure."""

    def __init__(self, value: Any) -> None:
        self.value = value
        self._result = ValidationOutcome()

    def result(self) -> ValidationOutcome:
        return self._result

    def has_errors(self) -> bool:
        return self._result.failed

    def error(self) -> str:
        return self._result.error_text()

    def __repr__(self) -> str:
        return f"Validator({self.value!r}, {self._result!r})"

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def apply(self, rule: Rule) -> ValidationOutcome:
        """Run *rule* against the wrapped value and return the outcome."""
        try:
            handler = _HANDLERS[type(rule)]
        except KeyError:
            raise TypeError(f"Unsupported rule: {rule!r}") from None
        handler(self, rule)
        return self._result

    def _confirm(self, check: Callable[[str], bool]) -> None:
        """
        Apply *check* to the stringified value.

        Lists and tuples are checked per element; iteration stops at the
        first element for which *check* returns False.
        """
        if isinstance(self.value, (list, tuple)):
            for item in self.value:
                if not check(stringify(item)):
                    break
        else:
            check(stringify(self.value))

    def _fail(self, rule: Rule, message: str, kind: ErrorKind) -> bool:
        self._result.set_message(message, kind)
        logger.debug("Rule %s failed: %s", rule.name, message)
        record_rule_failure(rule.name, kind.value)
        return False

    # ------------------------------------------------------------------
    # Rule implementations
    # ------------------------------------------------------------------

    def _require(self, rule: Require) -> None:
        def check(value: str) -> bool:
            if value == "":
                return self._fail(rule, constants.REQUIRED_MESSAGE, ErrorKind.EMPTY_VALUE)
            return True

        self._confirm(check)

    def _max_len(self, rule: MaxLen) -> None:
        unit = rule.unit or settings.LENGTH_UNIT

        def check(value: str) -> bool:
            length = measure(value, unit)
            if length > rule.max:
                message = constants.MAX_LEN_TEMPLATE.format(value=value, length=length, limit=rule.max)
                return self._fail(rule, message, ErrorKind.LENGTH_OUT_OF_BOUNDS)
            return True

        self._confirm(check)

    def _min_len(self, rule: MinLen) -> None:
        unit = rule.unit or settings.LENGTH_UNIT

        def check(value: str) -> bool:
            length = measure(value, unit)
            if length < rule.min:
                message = constants.MIN_LEN_TEMPLATE.format(value=value, length=length, limit=rule.min)
                return self._fail(rule, message, ErrorKind.LENGTH_OUT_OF_BOUNDS)
            return True

        self._confirm(check)

    def _email(self, rule: Email) -> None:
        def check(value: str) -> bool:
            # Empty means "not provided"; pair with require() to demand one.
            if value == "":
                return True
            parts = value.split("@")
            if len(parts) != 2 or not parts[0] or not parts[1]:
                return self._fail(rule, constants.EMAIL_MESSAGE, ErrorKind.INVALID_FORMAT)
            for part in parts:
                if any(ord(c) > constants.EMAIL_MAX_CODEPOINT for c in part):
                    return self._fail(rule, constants.EMAIL_MESSAGE, ErrorKind.INVALID_FORMAT)
            return True

        self._confirm(check)

    def _number(self, rule: Number) -> None:
        def check(value: str) -> bool:
            try:
                parse_int(value)
            except ValueError as e:
                return self._fail(rule, str(e), ErrorKind.NOT_A_NUMBER)
            return True

        self._confirm(check)

    def _max(self, rule: Max) -> None:
        def check(value: str) -> bool:
            try:
                number = parse_int(value)
            except ValueError as e:
                return self._fail(rule, str(e), ErrorKind.NOT_A_NUMBER)
            if number > rule.max:
                message = constants.MAX_TEMPLATE.format(number=number, limit=rule.max)
                return self._fail(rule, message, ErrorKind.OUT_OF_RANGE)
            return True

        self._confirm(check)

    def _min(self, rule: Min) -> None:
        def check(value: str) -> bool:
            try:
                number = parse_int(value)
            except ValueError as e:
                return self._fail(rule, str(e), ErrorKind.NOT_A_NUMBER)
            if number < rule.min:
                message = constants.MIN_TEMPLATE.format(number=number, limit=rule.min)
                return self._fail(rule, message, ErrorKind.OUT_OF_RANGE)
            return True

        self._confirm(check)

    def _date(self, rule: Date) -> None:
        def check(value: str) -> bool:
            # 2019-01-02, 2018/01/02, 2018/1/2, 2018/2/02
            date = value.replace("/", "-")
            if not constants.DATE_PATTERN.fullmatch(date):
                return self._fail(rule, constants.DATE_MESSAGE, ErrorKind.INVALID_FORMAT)
            try:
                datetime.strptime(date, constants.DATE_FORMAT)
            except ValueError as e:
                return self._fail(rule, str(e), ErrorKind.INVALID_FORMAT)
            return True

        self._confirm(check)

    def _url(self, rule: URL) -> None:
        def check(value: str) -> bool:
            if value == "":
                return True
            if not constants.URL_PATTERN.fullmatch(value):
                return self._fail(rule, constants.URL_MESSAGE, ErrorKind.INVALID_FORMAT)
            return True

        self._confirm(check)

    def _match(self, rule: Match) -> None:
        try:
            compiled = re.compile(rule.pattern)
        except re.error as e:
            logger.warning("Invalid regex pattern '%s': %s", rule.pattern, e)
            self._fail(rule, str(e), ErrorKind.INVALID_PATTERN)
            return

        def check(value: str) -> bool:
            if value == "":
                return True
            if compiled.search(value) is None:
                message = constants.NO_MATCH_TEMPLATE.format(pattern=rule.pattern)
                return self._fail(rule, message, ErrorKind.PATTERN_MISMATCH)
            return True

        self._confirm(check)

    # ------------------------------------------------------------------
    # Public rule methods
    # ------------------------------------------------------------------

    def require(self) -> ValidationOutcome:
        return self.apply(Require())

    def max_len(self, max: int, unit: str | None = None) -> ValidationOutcome:
        return self.apply(MaxLen(max=max, unit=unit))

    def min_len(self, min: int, unit: str | None = None) -> ValidationOutcome:
        return self.apply(MinLen(min=min, unit=unit))

    def email(self) -> ValidationOutcome:
        return self.apply(Email())

    def number(self) -> ValidationOutcome:
        return self.apply(Number())

    def max(self, max: int) -> ValidationOutcome:
        return self.apply(Max(max=max))

    def min(self, min: int) -> ValidationOutcome:
        return self.apply(Min(min=min))

    def date(self) -> ValidationOutcome:
        return self.apply(Date())

    def url(self) -> ValidationOutcome:
        return self.apply(URL())

    def match(self, pattern: str) -> ValidationOutcome:
        return self.apply(Match(pattern=pattern))


_HANDLERS: Dict[Type[Rule], Callable[[Validator, Any], None]] = {
    Require: Validator._require,
    MaxLen: Validator._max_len,
    MinLen: Validator._min_len,
    Email: Validator._email,
    Number: Validator._number,
    Max: Validator._max,
    Min: Validator._min,
    Date: Validator._date,
    URL: Validator._url,
    Match: Validator._match,
}


def validator(value: Any) -> Validator:
    """Create a Validator for *value* with an empty outcome."""
    return Validator(value)
