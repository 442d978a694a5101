"""Validator registry — compiled name table with rule resolution.

``ValidatorDef`` is the frozen definition of one named validator,
``ValidatorRegistry`` is the compiled lookup table. A registry never
changes after construction: ``extend()`` and ``with_validator()`` return
a new registry, so independent forms (and tests) can carry their own
validators without touching ``DEFAULT_REGISTRY``.
"""

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from formcheck.errors import ConfigurationError, MalformedRuleError, UnknownValidatorError
from formcheck.validation import rules
from formcheck.validation.rules import Check, RuleKind

if TYPE_CHECKING:
    from formcheck.validation.parser import RuleDescriptor


@dataclass(frozen=True, slots=True)
class ValidatorDef:
    """A frozen validator definition.

    With ``arity=0``, ``impl`` is a check ``(value) -> ValidatorOutcome``.
    With ``arity=1``, ``impl`` is a factory taking the rule argument
    (coerced through ``argument_type``) and returning a check.
    """

    name: str
    impl: Callable[..., Any]
    arity: int = 0
    argument_type: Callable[[str], Any] = str

    def __post_init__(self) -> None:
        # RuleKind members become plain strings so reprs read like rule tokens
        object.__setattr__(self, "name", str(self.name))
        if self.arity not in (0, 1):
            msg = f"Validator {self.name!r} has unsupported arity {self.arity}"
            raise ConfigurationError(msg)

    def bind(self, argument: str | None, *, field_id: str = "") -> Check:
        """Return a ready-to-run check for *argument*.

        Raises ``MalformedRuleError`` when the argument does not fit the
        validator's arity or type, or when the factory rejects it.
        """
        token = self.name if argument is None else f"{self.name}:{argument}"
        if self.arity == 0:
            if argument is not None:
                raise MalformedRuleError(field_id, token, f"{self.name!r} takes no argument")
            return self.impl
        if not argument:
            raise MalformedRuleError(field_id, token, f"{self.name!r} requires an argument")
        try:
            return self.impl(self.argument_type(argument))
        except Exception as exc:
            raise MalformedRuleError(field_id, token, f"invalid argument: {exc!r}") from exc


class ValidatorRegistry:
    """Compiled validator table. Immutable once created.

    Provides ``resolve()`` for the executor and ``arity_one_names()`` for
    the rule parser.
    """

    __slots__ = ("_validators",)

    def __init__(self, validators: Iterable[ValidatorDef] = ()) -> None:
        table: dict[str, ValidatorDef] = {}
        for validator in validators:
            if validator.name in table:
                msg = f"Duplicate validator name: {validator.name!r}"
                raise ConfigurationError(msg)
            table[validator.name] = validator
        self._validators = table

    def get(self, name: str) -> ValidatorDef | None:
        """Look up a validator by name. Returns ``None`` if not found."""
        return self._validators.get(name)

    def resolve(self, descriptor: RuleDescriptor, field_id: str = "") -> Check:
        """Turn a parsed rule into a runnable check.

        Raises ``UnknownValidatorError`` if the name is not registered and
        ``MalformedRuleError`` if the token is empty or its argument does
        not fit.
        """
        if not descriptor.name:
            raise MalformedRuleError(field_id, str(descriptor), "empty rule")
        validator = self._validators.get(descriptor.name)
        if validator is None:
            raise UnknownValidatorError(field_id, descriptor.name)
        return validator.bind(descriptor.argument, field_id=field_id)

    def arity_one_names(self) -> frozenset[str]:
        """Names whose rule tokens carry a ``:argument`` suffix."""
        return frozenset(v.name for v in self._validators.values() if v.arity == 1)

    def names(self) -> list[str]:
        return list(self._validators)

    def extend(self, *validators: ValidatorDef) -> ValidatorRegistry:
        """Return a new registry with *validators* added.

        Raises ``ConfigurationError`` if a name is already registered.
        """
        return ValidatorRegistry([*self._validators.values(), *validators])

    def with_validator(
        self,
        name: str,
        impl: Callable[..., Any],
        *,
        arity: int = 0,
        argument_type: Callable[[str], Any] = str,
    ) -> ValidatorRegistry:
        """Return a new registry with one more validator.

        Usage::

            def postcode(value: str) -> ValidatorOutcome:
                ...

            registry = DEFAULT_REGISTRY.with_validator("postcode", postcode)
        """
        return self.extend(
            ValidatorDef(name=name, impl=impl, arity=arity, argument_type=argument_type)
        )

    def __len__(self) -> int:
        return len(self._validators)

    def __contains__(self, name: object) -> bool:
        return name in self._validators

    def __iter__(self) -> Iterator[ValidatorDef]:
        return iter(self._validators.values())

    def __repr__(self) -> str:
        return f"ValidatorRegistry({', '.join(self._validators)})"


BUILTIN_VALIDATORS: tuple[ValidatorDef, ...] = (
    ValidatorDef(RuleKind.REQUIRED, rules.required),
    ValidatorDef(RuleKind.MIN, rules.min_length, arity=1, argument_type=int),
    ValidatorDef(RuleKind.MAX, rules.max_length, arity=1, argument_type=int),
    ValidatorDef(RuleKind.ALPHA, rules.alpha),
    ValidatorDef(RuleKind.ALPHA_NUM, rules.alpha_num),
    ValidatorDef(RuleKind.NUMERIC, rules.numeric),
    ValidatorDef(RuleKind.EMAIL, rules.email),
    ValidatorDef(RuleKind.URL, rules.url),
    ValidatorDef(RuleKind.DATE, rules.date),
    ValidatorDef(RuleKind.PHONE, rules.phone),
    ValidatorDef(RuleKind.IP, rules.ip),
    ValidatorDef(RuleKind.CREDIT_CARD, rules.credit_card),
)

DEFAULT_REGISTRY = ValidatorRegistry(BUILTIN_VALIDATORS)
