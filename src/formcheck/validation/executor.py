"""Validation executor — one full pass over a form.

Clears every marker, then runs each configured field's rules left to
right. Every rule runs, even after a failure, so the user sees all of a
field's problems at once. Rules that cannot run (unknown name, bad
argument, a custom check that raises or returns something other than
a ``ValidatorOutcome``) fail the field with a diagnostic
marker and are logged; they never propagate to the caller.
"""

import logging

from formcheck.errors import RuleError
from formcheck.forms.annotator import ErrorAnnotator
from formcheck.forms.model import Field, FormView
from formcheck.validation.parser import FieldRules, RuleSet
from formcheck.validation.registry import DEFAULT_REGISTRY, ValidatorRegistry
from formcheck.validation.result import ValidationResult
from formcheck.validation.rules import ValidatorOutcome

logger = logging.getLogger("formcheck.validation")


def _fail_rule(
    field: Field,
    error: RuleError,
    annotator: ErrorAnnotator,
    problems: list[RuleError],
) -> str:
    """Record a rule that could not run and show a diagnostic for it."""
    problems.append(error)
    message = f"Invalid validation rule: {error.detail or error.token}"
    annotator.show_diagnostic(field, message, rule=error.token)
    return message


def _run_field(
    field: Field,
    field_rules: FieldRules,
    registry: ValidatorRegistry,
    annotator: ErrorAnnotator,
    problems: list[RuleError],
) -> list[str]:
    """Run all rules for one field. Returns the messages shown for it."""
    messages: list[str] = []
    for descriptor in field_rules:
        token = str(descriptor)
        try:
            check = registry.resolve(descriptor, field.id)
        except RuleError as exc:
            logger.error("Rule cannot run for field %r: %s", field.id, exc)
            messages.append(_fail_rule(field, exc, annotator, problems))
            continue

        try:
            outcome = check(field.value)
        except Exception as exc:
            logger.exception("Validator %r raised for field %r", descriptor.name, field.id)
            error = RuleError(field.id, token, f"validator raised {exc!r}")
            messages.append(_fail_rule(field, error, annotator, problems))
            continue

        if not isinstance(outcome, ValidatorOutcome):
            error = RuleError(
                field.id,
                token,
                f"validator returned {type(outcome).__name__}, expected ValidatorOutcome",
            )
            logger.error("Rule cannot run for field %r: %s", field.id, error)
            messages.append(_fail_rule(field, error, annotator, problems))
            continue

        if not outcome.passed:
            annotator.show(field, outcome.message, rule=descriptor.name)
            messages.append(outcome.message)
    return messages


def validate(
    form: FormView,
    rule_set: RuleSet,
    *,
    registry: ValidatorRegistry = DEFAULT_REGISTRY,
    annotator: ErrorAnnotator | None = None,
    focus_first_failure: bool = True,
) -> ValidationResult:
    """Run one validation pass over *form*.

    Args:
        form: The host form. Fields are visited in its order.
        rule_set: Parsed rules. Fields without an entry are skipped.
        registry: Where rule names are resolved.
        annotator: Marker manager; a fresh ``ErrorAnnotator`` by default.
        focus_first_failure: Focus the first field that failed.

    Returns:
        A ``ValidationResult``; falsy when submission must be vetoed.
    """
    annotator = annotator or ErrorAnnotator()
    annotator.clear_all(form)

    passed: dict[int, bool] = {}
    errors: dict[str, list[str]] = {}
    problems: list[RuleError] = []
    first_failed: Field | None = None

    for index, field in enumerate(form.fields):
        field_rules = rule_set.get(field.id.strip())
        if field_rules is None:
            continue
        messages = _run_field(field, field_rules, registry, annotator, problems)
        passed[index] = not messages
        if messages:
            errors[field.id] = messages
            if first_failed is None:
                first_failed = field

    if first_failed is not None and focus_first_failure:
        first_failed.focus()

    return ValidationResult(
        passed=passed,
        errors=errors,
        problems=tuple(problems),
        first_failure=first_failed.id if first_failed is not None else None,
    )
