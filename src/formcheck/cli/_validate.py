"""``formcheck validate`` — run one validation pass from the command line.

Builds an in-memory form from ``--value`` pairs (plus an empty field for
every ruled field without a value), submits it, and reports the markers.
Exits with code 1 when the submission would be vetoed.
"""

import argparse
import sys

from formcheck.cli import parse_pairs
from formcheck.config import ValidatorConfig
from formcheck.errors import ConfigurationError
from formcheck.forms.annotator import ErrorAnnotator
from formcheck.forms.model import Form, FormField
from formcheck.forms.render import render_form
from formcheck.validator import FormValidator


def run_validate(args: argparse.Namespace) -> None:
    rules = parse_pairs(args.rule, "RULES")
    values = parse_pairs(args.value, "VALUE")

    form = Form(FormField(field_id, value) for field_id, value in values.items())
    for field_id in rules:
        if field_id not in values:
            form.add(FormField(field_id))

    config = ValidatorConfig()
    try:
        FormValidator(form, rules, config=config)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    allowed = form.submit()

    if args.html:
        print(render_form(form, config))
    else:
        annotator = ErrorAnnotator()
        for f in form.fields:
            for marker in annotator.markers_for(f):
                print(f"{f.id}: {marker.message}")

    if not allowed:
        raise SystemExit(1)
    if not args.html:
        print("✓ all fields passed")
