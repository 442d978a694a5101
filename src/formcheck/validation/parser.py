"""Rule string parsing — compact grammar to ordered descriptors.

A rule string is a pipe-delimited list of tokens::

    "required|min:3|max:8|alpha"

Tokens that mention an arity-one validator (``min``, ``max``, or any
custom validator registered with ``arity=1``) are split on the first
``:`` into name and argument. Detection is a case-insensitive substring
test on the whole token, so ``"min:3"`` and ``" MIN:3 "`` both split.

Parsing never raises. Unknown names, empty tokens, and bad arguments
are kept as descriptors and surface when the registry resolves them,
either up front via ``check_rules()`` or during a validation pass.
"""

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from formcheck.errors import RuleError
from formcheck.validation.registry import DEFAULT_REGISTRY, ValidatorRegistry

logger = logging.getLogger("formcheck.validation")


@dataclass(frozen=True, slots=True)
class RuleDescriptor:
    """One parsed rule token: validator name plus optional argument."""

    name: str
    argument: str | None = None

    def __str__(self) -> str:
        if self.argument is None:
            return self.name
        return f"{self.name}:{self.argument}"


type FieldRules = tuple[RuleDescriptor, ...]


class RuleSet(Mapping[str, FieldRules]):
    """Immutable mapping of field id to its ordered rules.

    Fields that are not keys are never validated.
    """

    __slots__ = ("_rules",)

    def __init__(self, rules: Mapping[str, FieldRules] | None = None) -> None:
        self._rules: dict[str, FieldRules] = dict(rules or {})

    def __getitem__(self, field_id: str) -> FieldRules:
        return self._rules[field_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        items = ", ".join(
            f"{field_id!r}: {'|'.join(str(r) for r in rules)!r}"
            for field_id, rules in self._rules.items()
        )
        return f"RuleSet({{{items}}})"


def parse_token(token: str, arity_one: frozenset[str]) -> RuleDescriptor:
    """Parse a single rule token."""
    token = token.strip()
    lowered = token.lower()
    if any(name.lower() in lowered for name in arity_one):
        name, sep, argument = token.partition(":")
        return RuleDescriptor(name.strip(), argument.strip() if sep else None)
    return RuleDescriptor(token)


def parse_rule_string(rule_string: str, arity_one: frozenset[str]) -> FieldRules:
    """Parse one field's rule string, preserving token order.

    An empty or whitespace-only string yields no rules. Empty tokens
    between pipes are kept as nameless descriptors.
    """
    if not rule_string.strip():
        return ()
    return tuple(parse_token(token, arity_one) for token in rule_string.split("|"))


def parse_rules(
    options: Mapping[str, str],
    registry: ValidatorRegistry = DEFAULT_REGISTRY,
) -> RuleSet:
    """Parse a field id → rule string mapping into a ``RuleSet``.

    Field ids are trimmed. If two ids collide after trimming, the later
    entry wins.
    """
    arity_one = registry.arity_one_names()
    parsed: dict[str, FieldRules] = {}
    for raw_id, rule_string in options.items():
        field_id = raw_id.strip()
        if field_id in parsed:
            logger.warning("Duplicate rules for field %r; keeping the last entry", field_id)
        parsed[field_id] = parse_rule_string(rule_string, arity_one)
    return RuleSet(parsed)


def check_rules(
    rule_set: RuleSet,
    registry: ValidatorRegistry = DEFAULT_REGISTRY,
) -> list[RuleError]:
    """Resolve every descriptor against *registry* and collect the failures.

    Returns an empty list when every rule can run.
    """
    problems: list[RuleError] = []
    for field_id, field_rules in rule_set.items():
        for descriptor in field_rules:
            try:
                registry.resolve(descriptor, field_id)
            except RuleError as exc:
                problems.append(exc)
    return problems
