"""Rule-string validation — parse once, run on every submission.

Usage::

    from formcheck.validation import parse_rules, validate

    rule_set = parse_rules({
        "username": "required|alpha_num",
        "age": "numeric|min:1|max:3",
    })
    result = validate(form, rule_set)
    if not result:
        # result.errors == {"username": ["This field is required.", ...]}
        ...
"""

from formcheck.validation.executor import validate
from formcheck.validation.parser import (
    FieldRules,
    RuleDescriptor,
    RuleSet,
    check_rules,
    parse_rule_string,
    parse_rules,
    parse_token,
)
from formcheck.validation.registry import (
    BUILTIN_VALIDATORS,
    DEFAULT_REGISTRY,
    ValidatorDef,
    ValidatorRegistry,
)
from formcheck.validation.result import ValidationResult
from formcheck.validation.rules import Check, RuleKind, ValidatorOutcome

__all__ = [
    "BUILTIN_VALIDATORS",
    "DEFAULT_REGISTRY",
    "Check",
    "FieldRules",
    "RuleDescriptor",
    "RuleKind",
    "RuleSet",
    "ValidationResult",
    "ValidatorDef",
    "ValidatorOutcome",
    "ValidatorRegistry",
    "check_rules",
    "parse_rule_string",
    "parse_rules",
    "parse_token",
    "validate",
]
