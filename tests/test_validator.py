"""Tests for formcheck.validator — init() and event wiring."""

import pytest

from formcheck import init
from formcheck.config import ValidatorConfig
from formcheck.errors import ConfigurationError, MalformedRuleError, UnknownValidatorError
from formcheck.forms.markers import Marker, MarkerKind
from formcheck.forms.model import Form, FormField
from formcheck.validation import DEFAULT_REGISTRY, ValidatorOutcome
from formcheck.validator import FormValidator


def _limit(n: int):
    if n < 0:
        raise ValueError("negative bound")
    return lambda value: ValidatorOutcome.ok()


LIMITED = DEFAULT_REGISTRY.with_validator("limit", _limit, arity=1, argument_type=int)


def _signup_form() -> Form:
    return Form(
        [
            FormField("username"),
            FormField("email"),
            FormField("age"),
            FormField("bio"),
        ],
        action="/signup",
    )


OPTIONS = {
    "username": "required|min:3|alpha_num",
    "email": "required|email",
    "age": "numeric|min:1|max:3",
}


def _messages(field: FormField) -> list[str]:
    return [n.message for n in field.trailing if isinstance(n, Marker)]


class TestInit:
    def test_returns_nothing(self) -> None:
        assert init(_signup_form(), OPTIONS) is None

    def test_submit_vetoed_until_valid(self) -> None:
        form = _signup_form()
        init(form, OPTIONS)

        assert form.submit() is False
        assert _messages(form.field("username")) == [
            "This field is required.",
            "3 characters min required.",
            "Alphabetical and numeric characters only.",
        ]
        assert form.focused is form.field("username")

        form.edit("username", "alice")
        form.edit("email", "alice@example.com")
        form.edit("age", "30")
        assert form.submit() is True
        assert all(f.trailing == [] for f in form.fields)

    def test_unruled_field_never_blocks(self) -> None:
        form = _signup_form()
        init(form, {"bio": ""})
        form.field("bio").value = "!!!"
        assert form.submit() is True


class TestEditEvents:
    @pytest.mark.parametrize("event", ["keyup", "input", "change"])
    def test_edit_clears_only_that_field(self, event: str) -> None:
        form = _signup_form()
        init(form, OPTIONS)
        form.submit()

        form.edit("username", "x", event=event)
        assert form.field("username").trailing == []
        assert _messages(form.field("email")) != []

    def test_edit_does_not_revalidate(self) -> None:
        form = _signup_form()
        init(form, OPTIONS)
        form.edit("username", "!")
        assert form.field("username").trailing == []

    def test_custom_clear_events(self) -> None:
        form = _signup_form()
        init(form, OPTIONS, config=ValidatorConfig(clear_events=("blur",)))
        form.submit()

        form.edit("username", "x", event="input")
        assert _messages(form.field("username")) != []
        form.edit("username", "x", event="blur")
        assert form.field("username").trailing == []

    def test_repeated_submissions_do_not_duplicate_markers(self) -> None:
        form = _signup_form()
        init(form, OPTIONS)
        for _ in range(3):
            form.submit()
        assert _messages(form.field("email")) == [
            "This field is required.",
            "Incorrect email address format.",
        ]


class TestFailFast:
    def test_unknown_rule_raises_at_init(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            init(_signup_form(), {"username": "required|zipcode"})
        assert len(exc_info.value.problems) == 1
        assert isinstance(exc_info.value.problems[0], UnknownValidatorError)
        assert "zipcode" in str(exc_info.value)

    def test_fail_late_vetoes_instead(self) -> None:
        form = _signup_form()
        form.field("username").value = "alice"
        init(form, {"username": "required|zipcode"}, config=ValidatorConfig(fail_fast=False))
        assert form.submit() is False

    def test_no_handlers_bound_when_init_fails(self) -> None:
        form = _signup_form()
        with pytest.raises(ConfigurationError):
            init(form, {"age": "max"})
        assert form.submit() is True


class TestRaisingCustomRules:
    def test_rejecting_factory_raises_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            FormValidator(_signup_form(), {"bio": "limit:-1"}, registry=LIMITED)
        assert isinstance(exc_info.value.problems[0], MalformedRuleError)
        assert "negative bound" in str(exc_info.value)

    def test_rejecting_factory_vetoes_when_fail_late(self) -> None:
        form = _signup_form()
        FormValidator(
            form,
            {"bio": "limit:-1"},
            registry=LIMITED,
            config=ValidatorConfig(fail_fast=False),
        )
        assert form.submit() is False
        assert form.field("bio").trailing[0].kind is MarkerKind.DIAGNOSTIC  # type: ignore[union-attr]

    def test_non_outcome_return_vetoes(self) -> None:
        registry = DEFAULT_REGISTRY.with_validator("truthy", lambda value: bool(value))
        form = _signup_form()
        form.field("bio").value = "hello"
        FormValidator(form, {"bio": "truthy"}, registry=registry)
        assert form.submit() is False


class TestFormValidator:
    def test_exposes_parsed_rules(self) -> None:
        validator = FormValidator(_signup_form(), OPTIONS)
        assert list(validator.rule_set) == ["username", "email", "age"]
        assert validator.registry is DEFAULT_REGISTRY

    def test_validate_on_demand(self) -> None:
        form = _signup_form()
        validator = FormValidator(form, {"email": "email"})
        form.field("email").value = "nope"
        result = validator.validate()
        assert result.errors == {"email": ["Incorrect email address format."]}

    def test_independent_registries_per_form(self) -> None:
        def shout(value: str) -> ValidatorOutcome:
            if value != value.upper():
                return ValidatorOutcome.fail("Uppercase only.")
            return ValidatorOutcome.ok()

        loud = Form([FormField("name", "quiet")])
        plain = Form([FormField("name", "quiet")])
        FormValidator(loud, {"name": "shout"}, registry=DEFAULT_REGISTRY.with_validator("shout", shout))

        with pytest.raises(ConfigurationError):
            FormValidator(plain, {"name": "shout"})
        assert loud.submit() is False
