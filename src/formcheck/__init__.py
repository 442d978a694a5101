"""Formcheck — declarative rule-string validation for forms.

Give it a form and a mapping of field ids to pipe-delimited rules; it
validates on submit, puts error markers after failing fields, and vetoes
submission until every rule passes.

Basic usage::

    from formcheck import Form, FormField, init

    form = Form([FormField("username"), FormField("email")])
    init(form, {
        "username": "required|min:3|alpha_num",
        "email": "required|email",
    })
    form.submit()  # False until both fields pass

Custom validators::

    from formcheck import DEFAULT_REGISTRY, ValidatorOutcome

    def postcode(value: str) -> ValidatorOutcome:
        ...

    registry = DEFAULT_REGISTRY.with_validator("postcode", postcode)
    init(form, {"zip": "required|postcode"}, registry=registry)
"""

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_REGISTRY",
    "ConfigurationError",
    "Decoration",
    "ErrorAnnotator",
    "Form",
    "FormEvent",
    "FormField",
    "FormValidator",
    "FormcheckError",
    "MalformedRuleError",
    "Marker",
    "MarkerKind",
    "RuleDescriptor",
    "RuleError",
    "RuleKind",
    "RuleSet",
    "UnknownValidatorError",
    "ValidationResult",
    "ValidatorConfig",
    "ValidatorDef",
    "ValidatorOutcome",
    "ValidatorRegistry",
    "init",
    "parse_rules",
    "render_form",
    "validate",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import formcheck`` fast (kida is only loaded for rendering)
    while providing a clean top-level API.
    """
    if name in ("FormValidator", "init"):
        from formcheck import validator as _validator

        return getattr(_validator, name)

    if name == "ValidatorConfig":
        from formcheck.config import ValidatorConfig

        return ValidatorConfig

    if name in (
        "DEFAULT_REGISTRY",
        "RuleDescriptor",
        "RuleKind",
        "RuleSet",
        "ValidationResult",
        "ValidatorDef",
        "ValidatorOutcome",
        "ValidatorRegistry",
        "parse_rules",
        "validate",
    ):
        from formcheck import validation as _validation

        return getattr(_validation, name)

    if name in ("Decoration", "ErrorAnnotator", "Form", "FormEvent", "FormField", "Marker", "MarkerKind"):
        from formcheck import forms as _forms

        return getattr(_forms, name)

    if name == "render_form":
        from formcheck.forms.render import render_form

        return render_form

    if name in (
        "ConfigurationError",
        "FormcheckError",
        "MalformedRuleError",
        "RuleError",
        "UnknownValidatorError",
    ):
        from formcheck import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
