"""Built-in validation rules for formcheck.

Each arity-zero validator is a check with the signature::

    def rule(value: str) -> ValidatorOutcome:
        '''Return ValidatorOutcome.ok() or ValidatorOutcome.fail(message).'''

Arity-one validators are factory functions that take the coerced rule
argument and return a check::

    def min_length(n: int) -> Check:
        def check(value: str) -> ValidatorOutcome:
            if len(value) < n:
                return ValidatorOutcome.fail(f"{n} characters min required.")
            return PASSED
        return check

Custom validators follow the same protocol and are added through
``ValidatorRegistry.with_validator()``.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum


@dataclass(frozen=True, slots=True)
class ValidatorOutcome:
    """Result of one validator against one value.

    ``message`` is only meaningful when ``passed`` is False.
    """

    passed: bool
    message: str = ""

    @classmethod
    def ok(cls) -> ValidatorOutcome:
        return PASSED

    @classmethod
    def fail(cls, message: str) -> ValidatorOutcome:
        return cls(passed=False, message=message)

    def __bool__(self) -> bool:
        return self.passed


PASSED = ValidatorOutcome(passed=True)

# Type alias for a ready-to-run check
type Check = Callable[[str], ValidatorOutcome]


class RuleKind(StrEnum):
    """Names of the built-in validators, as written in rule strings."""

    REQUIRED = "required"
    MIN = "min"
    MAX = "max"
    ALPHA = "alpha"
    ALPHA_NUM = "alpha_num"
    NUMERIC = "numeric"
    EMAIL = "email"
    URL = "url"
    DATE = "date"
    PHONE = "phone"
    IP = "ip"
    CREDIT_CARD = "credit_card"


def _matches_any(
    value: str, message: str, *patterns: re.Pattern[str], full: bool = True
) -> ValidatorOutcome:
    """Pass when ANY of *patterns* matches the value."""
    for pattern in patterns:
        matched = pattern.fullmatch(value) if full else pattern.match(value)
        if matched:
            return PASSED
    return ValidatorOutcome.fail(message)


# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------


def required(value: str) -> ValidatorOutcome:
    """Field must be non-empty. Whitespace counts as content."""
    if len(value) == 0:
        return ValidatorOutcome.fail("This field is required.")
    return PASSED


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------


def min_length(n: int) -> Check:
    """String must be at least *n* characters."""

    def check(value: str) -> ValidatorOutcome:
        if len(value) < n:
            return ValidatorOutcome.fail(f"{n} characters min required.")
        return PASSED

    return check


def max_length(n: int) -> Check:
    """String must be at most *n* characters."""

    def check(value: str) -> ValidatorOutcome:
        if len(value) > n:
            return ValidatorOutcome.fail(f"{n} characters max required.")
        return PASSED

    return check


# ---------------------------------------------------------------------------
# Character classes
# ---------------------------------------------------------------------------

_ALPHA_RE = re.compile(r"[A-Za-zА-Яа-я]+")
_ALPHA_NUM_RE = re.compile(r"[A-Za-zА-Яа-я0-9]+")
_NUMERIC_RE = re.compile(r"[-+]?[0-9]+")


def alpha(value: str) -> ValidatorOutcome:
    """Latin or Cyrillic letters only."""
    return _matches_any(value, "Alphabetical characters only.", _ALPHA_RE)


def alpha_num(value: str) -> ValidatorOutcome:
    """Latin or Cyrillic letters and digits only."""
    return _matches_any(value, "Alphabetical and numeric characters only.", _ALPHA_NUM_RE)


def numeric(value: str) -> ValidatorOutcome:
    """Optionally signed integer."""
    return _matches_any(value, "Numbers only.", _NUMERIC_RE)


# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------

# Structure only, not deliverability
_EMAIL_RE = re.compile(r"[a-zа-я0-9._%+\-]+@[a-zа-я0-9.\-]+\.[a-zа-я]{2,6}", re.IGNORECASE)

# Matched as a prefix: paths and query strings may follow the TLD
_URL_RE = re.compile(r"(https?://)?(www\.)?[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,5}\.?")

# dd/mm/yyyy or dd-mm-yyyy
_DAY_FIRST_RE = re.compile(r"(0?[1-9]|[12][0-9]|3[01])[/\-](0?[1-9]|1[012])[/\-][0-9]{4}")
# mm/dd/yyyy or mm-dd-yyyy
_MONTH_FIRST_RE = re.compile(r"(0?[1-9]|1[012])[/\-](0?[1-9]|[12][0-9]|3[01])[/\-][0-9]{4}")

_PHONE_RE = re.compile(r"\+?[0-9\- ]+")

_OCTET = r"(25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)"
_IP_RE = re.compile(rf"{_OCTET}\.{_OCTET}\.{_OCTET}\.{_OCTET}")

_AMEX_RE = re.compile(r"3[47][0-9]{13}")
_VISA_RE = re.compile(r"4[0-9]{12}(?:[0-9]{3})?")
_MASTERCARD_RE = re.compile(r"5[1-5][0-9]{14}")


def email(value: str) -> ValidatorOutcome:
    """Value must look like local@domain.tld (basic format check)."""
    return _matches_any(value, "Incorrect email address format.", _EMAIL_RE)


def url(value: str) -> ValidatorOutcome:
    """Optional http(s) scheme, optional ``www.``, then domain and TLD."""
    return _matches_any(value, "Incorrect url format.", _URL_RE, full=False)


def date(value: str) -> ValidatorOutcome:
    """Day-first or month-first date with ``/`` or ``-`` separators.

    Valid when either ordering matches. ``31/01/2024`` passes as day-first
    even though it cannot be month-first.
    """
    return _matches_any(value, "Incorrect date format.", _DAY_FIRST_RE, _MONTH_FIRST_RE)


def phone(value: str) -> ValidatorOutcome:
    return _matches_any(value, "Incorrect phone number format.", _PHONE_RE)


def ip(value: str) -> ValidatorOutcome:
    """Dotted IPv4 address, each octet 0-255."""
    return _matches_any(value, "Incorrect IP address format.", _IP_RE)


def credit_card(value: str) -> ValidatorOutcome:
    """American Express, Visa, or Mastercard number (any network matches)."""
    return _matches_any(
        value,
        "Incorrect credit card format.",
        _AMEX_RE,
        _VISA_RE,
        _MASTERCARD_RE,
    )
