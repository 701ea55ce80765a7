"""
Constants used across the rule catalog.
Pinned so messages stay stable for callers that match on them.
"""
import re
from typing import List

# =============================================================================
# Failure messages
# =============================================================================
REQUIRED_MESSAGE: str = "It is a required input item"
EMAIL_MESSAGE: str = "E-MAIL address is wrong"
DATE_MESSAGE: str = "Not date"
URL_MESSAGE: str = "Not URL"

MAX_LEN_TEMPLATE: str = "String too long. {value}({length}) > max({limit})"
MIN_LEN_TEMPLATE: str = "String too short. {value}({length}) < min({limit})"
MAX_TEMPLATE: str = "Exceeds the maximum value. {number} > {limit}"
MIN_TEMPLATE: str = "Exceeds the min value. {number} < {limit}"
NO_MATCH_TEMPLATE: str = "{pattern} no match"
NOT_FOUND_TEMPLATE: str = "{name}: not found"
INT_PARSE_TEMPLATE: str = "invalid literal for int() with base 10: {value!r}"

# =============================================================================
# Patterns
# =============================================================================
# Optional sign followed by ASCII digits only.
INTEGER_PATTERN: re.Pattern = re.compile(r"[+-]?[0-9]+")

# 2019-01-02, 2018-1-2 (slashes are normalized to dashes beforehand)
DATE_PATTERN: re.Pattern = re.compile(r"[0-9]{4}-([0-9]{2}|[0-9])-([0-9]{2}|[0-9])")
DATE_FORMAT: str = "%Y-%m-%d"

URL_PATTERN: re.Pattern = re.compile(r"https?://[A-Za-z0-9_/:%#$&?()~.=+\-]+")

# Highest code point accepted in either part of an e-mail address.
EMAIL_MAX_CODEPOINT: int = 127

# =============================================================================
# Length units
# =============================================================================
LENGTH_UNITS: List[str] = ["bytes", "chars"]
