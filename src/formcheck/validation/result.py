"""Validation result — immutable summary of one validation pass."""

from dataclasses import dataclass, field

from formcheck.errors import RuleError


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """The outcome of one validation pass over a form.

    ``is_valid`` is True when every validated field passed.
    The result is falsy when invalid, so you can write::

        result = validator.validate()
        if not result:
            event.prevent_default()

    ``passed`` maps the index of each validated field (in form order) to
    whether it passed. Fields without rules do not appear.

    ``errors`` maps field ids to the messages shown for them::

        {"username": ["This field is required.",
                      "Alphabetical and numeric characters only."]}

    ``problems`` holds the configuration errors hit during the pass.
    """

    passed: dict[int, bool] = field(default_factory=dict)
    errors: dict[str, list[str]] = field(default_factory=dict)
    problems: tuple[RuleError, ...] = ()
    first_failure: str | None = None

    @property
    def is_valid(self) -> bool:
        """True if no validated field failed."""
        return all(self.passed.values())

    def __bool__(self) -> bool:
        """Falsy when invalid — enables ``if not result:`` pattern."""
        return self.is_valid
