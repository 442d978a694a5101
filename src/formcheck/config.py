"""Validator configuration.

ValidatorConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ValidatorConfig:
    """Validator configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ValidatorConfig(fail_fast=False, marker_class="invalid")
    """

    # Rule resolution
    fail_fast: bool = True  # Resolve every rule at init, raise ConfigurationError on problems

    # Events
    clear_events: tuple[str, ...] = ("keyup", "input", "change")
    focus_first_failure: bool = True

    # Markers
    marker_tag: str = "span"
    marker_class: str = "error-message"
    diagnostic_class: str = "error-diagnostic"
    marker_style: str = "color: #f00; margin: 0 5px;"
