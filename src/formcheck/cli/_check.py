"""``formcheck check`` — rule string linting.

Parses each rule string and resolves every rule against the default
registry. Prints one line per problem. Exits with code 1 if any are found.
"""

import argparse

from formcheck.cli import parse_pairs
from formcheck.validation import DEFAULT_REGISTRY, check_rules, parse_rules


def run_check(args: argparse.Namespace) -> None:
    options = parse_pairs(args.rules, "RULES")
    rule_set = parse_rules(options, DEFAULT_REGISTRY)
    problems = check_rules(rule_set, DEFAULT_REGISTRY)

    for problem in problems:
        print(f"  ✗ {problem}")

    if problems:
        print(f"{len(problems)} problem(s) in {len(rule_set)} field(s)")
        raise SystemExit(1)

    print(f"✓ {len(rule_set)} field(s) OK")
