"""Formcheck exception hierarchy.

Shared across the parser, registry, executor, and validator so every
module raises and catches the same types.
"""

from dataclasses import dataclass


class FormcheckError(Exception):
    """Base for all formcheck-specific errors."""


class ConfigurationError(FormcheckError):
    """Raised when validator configuration is unusable.

    Typically raised from ``FormValidator(...)`` when ``fail_fast`` is on
    and a rule string names something the registry cannot run.
    """

    def __init__(self, message: str, problems: list[RuleError] | None = None) -> None:
        self.problems = list(problems or [])
        if self.problems:
            details = "; ".join(str(p) for p in self.problems)
            message = f"{message}: {details}"
        super().__init__(message)


@dataclass(frozen=True, slots=True)
class RuleError(FormcheckError):
    """A rule token that cannot be executed for a field.

    Never escapes a validation pass: the executor fails the field, logs
    the error, and shows a diagnostic marker instead.
    """

    field_id: str
    token: str
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.field_id}: {self.token!r}: {self.detail}"
        return f"{self.field_id}: {self.token!r}"


class UnknownValidatorError(RuleError):
    """The rule names a validator that is not registered."""

    def __init__(self, field_id: str, name: str) -> None:
        super().__init__(
            field_id=field_id,
            token=name,
            detail=f"no validator registered as {name!r}",
        )


class MalformedRuleError(RuleError):
    """The rule token does not form a runnable descriptor.

    Empty tokens, a missing argument for an arity-one validator, an
    argument passed to an arity-zero validator, or an argument that does
    not coerce to the validator's argument type.
    """
