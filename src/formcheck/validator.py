"""Form validator — initialization API and event wiring.

Parses the rule options once, then hooks into the form:

- field edit events clear that field's markers (no re-validation until
  the next submission)
- the submit event runs a full validation pass and vetoes submission
  when any configured field fails
"""

import logging
from collections.abc import Mapping

from formcheck.config import ValidatorConfig
from formcheck.errors import ConfigurationError
from formcheck.forms.annotator import ErrorAnnotator
from formcheck.forms.model import FormEvent, FormView
from formcheck.validation.executor import validate
from formcheck.validation.parser import RuleSet, check_rules, parse_rules
from formcheck.validation.registry import DEFAULT_REGISTRY, ValidatorRegistry
from formcheck.validation.result import ValidationResult

logger = logging.getLogger("formcheck.validation")


class FormValidator:
    """Validation bound to one form.

    The rule set is parsed once here and never changes afterwards.

    Usage::

        validator = FormValidator(form, {"username": "required|alpha_num"})
        form.submit()  # False, with markers after "username"
    """

    __slots__ = ("annotator", "config", "form", "registry", "rule_set")

    def __init__(
        self,
        form: FormView,
        options: Mapping[str, str],
        *,
        registry: ValidatorRegistry | None = None,
        config: ValidatorConfig | None = None,
    ) -> None:
        self.form = form
        self.config = config or ValidatorConfig()
        self.registry = registry or DEFAULT_REGISTRY
        self.annotator = ErrorAnnotator()
        self.rule_set: RuleSet = parse_rules(options, self.registry)

        if self.config.fail_fast:
            problems = check_rules(self.rule_set, self.registry)
            if problems:
                msg = f"{len(problems)} validation rule(s) cannot run"
                raise ConfigurationError(msg, problems)

        self._bind()

    def _bind(self) -> None:
        for event in self.config.clear_events:
            self.form.on(event, self._on_edit)
        self.form.on("submit", self._on_submit)

    def _on_edit(self, event: FormEvent) -> None:
        if event.target is not None:
            self.annotator.remove_for(event.target)

    def _on_submit(self, event: FormEvent) -> None:
        result = self.validate()
        if not result:
            logger.debug("Vetoing submission; failing fields: %s", ", ".join(result.errors))
            event.prevent_default()

    def validate(self) -> ValidationResult:
        """Run a full validation pass now, annotating failing fields."""
        return validate(
            self.form,
            self.rule_set,
            registry=self.registry,
            annotator=self.annotator,
            focus_first_failure=self.config.focus_first_failure,
        )


def init(
    form: FormView,
    options: Mapping[str, str],
    *,
    registry: ValidatorRegistry | None = None,
    config: ValidatorConfig | None = None,
) -> None:
    """Attach rule-string validation to *form*.

    *options* maps field ids to rule strings such as
    ``"required|min:3|email"``. The form's event handlers keep the
    validator alive; nothing is returned.

    Raises:
        ConfigurationError: With ``fail_fast`` on (the default), if any
            rule names an unknown validator or is malformed.
    """
    FormValidator(form, options, registry=registry, config=config)
