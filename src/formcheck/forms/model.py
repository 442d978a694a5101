"""Host form model — the capabilities the validator needs, plus an in-memory form.

The validator only talks to ``FormView`` and ``Field``. Anything that
exposes an ordered field sequence, per-field ``trailing`` annotations,
``focus()``, and ``on(event, handler)`` can be validated. ``Form`` and
``FormField`` are the in-memory implementation used by the CLI and tests.

Events are dispatched synchronously, one at a time, in subscription order.
"""

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Protocol

from formcheck.forms.markers import Annotation

logger = logging.getLogger("formcheck.forms")


class Field(Protocol):
    """A single input the validator can read, focus, and annotate."""

    @property
    def id(self) -> str: ...

    value: str
    trailing: list[Annotation]

    def focus(self) -> None: ...


@dataclass(slots=True)
class FormEvent:
    """An occurrence delivered to form handlers.

    ``target`` is the field that produced the event, or ``None`` for
    form-level events such as ``"submit"``.
    """

    type: str
    target: Field | None = None
    default_prevented: bool = field(default=False, init=False)

    def prevent_default(self) -> None:
        """Veto the default effect of this event (e.g. submission)."""
        self.default_prevented = True


type EventHandler = Callable[[FormEvent], None]


class FormView(Protocol):
    """An ordered sequence of fields with event subscription."""

    @property
    def fields(self) -> Sequence[Field]: ...

    def on(self, event: str, handler: EventHandler) -> None: ...


class FormField:
    """In-memory input field.

    Usage::

        username = FormField("username", value="alice")
    """

    __slots__ = ("_form", "id", "name", "trailing", "value")

    def __init__(
        self,
        id: str,
        value: str = "",
        *,
        name: str | None = None,
        trailing: Iterable[Annotation] = (),
    ) -> None:
        self.id = id
        self.name = name or id
        self.value = value
        self.trailing: list[Annotation] = list(trailing)
        self._form: Form | None = None

    def focus(self) -> None:
        if self._form is not None:
            self._form.focused = self

    def __repr__(self) -> str:
        return f"FormField({self.id!r}, value={self.value!r})"


class Form:
    """In-memory form: ordered fields, synchronous event dispatch.

    Usage::

        form = Form([FormField("username"), FormField("email")])
        form.on("submit", handler)
        allowed = form.submit()
    """

    __slots__ = ("_fields", "_handlers", "action", "focused")

    def __init__(self, fields: Iterable[FormField] = (), *, action: str = "") -> None:
        self.action = action
        self.focused: FormField | None = None
        self._fields: list[FormField] = []
        self._handlers: dict[str, list[EventHandler]] = {}
        for f in fields:
            self.add(f)

    @property
    def fields(self) -> tuple[FormField, ...]:
        return tuple(self._fields)

    def add(self, form_field: FormField) -> FormField:
        """Append a field. Field ids must be unique within the form."""
        if any(f.id == form_field.id for f in self._fields):
            msg = f"Duplicate field id: {form_field.id!r}"
            raise ValueError(msg)
        form_field._form = self
        self._fields.append(form_field)
        return form_field

    def field(self, field_id: str) -> FormField:
        """Look up a field by id. Raises ``KeyError`` if absent."""
        for f in self._fields:
            if f.id == field_id:
                return f
        raise KeyError(field_id)

    def on(self, event: str, handler: EventHandler) -> None:
        """Subscribe *handler* to *event*."""
        self._handlers.setdefault(event, []).append(handler)

    def dispatch(self, event: FormEvent) -> FormEvent:
        """Deliver *event* to every handler subscribed to its type."""
        for handler in list(self._handlers.get(event.type, ())):
            handler(event)
        return event

    def submit(self) -> bool:
        """Attempt submission. Returns False when a handler vetoed it."""
        event = self.dispatch(FormEvent("submit"))
        if event.default_prevented:
            logger.debug("Submission of form %r vetoed", self.action)
            return False
        return True

    def edit(self, field_id: str, value: str, *, event: str = "input") -> FormField:
        """Set a field's value as a user would, then fire *event* on it."""
        target = self.field(field_id)
        target.value = value
        self.dispatch(FormEvent(event, target=target))
        return target

    def __repr__(self) -> str:
        return f"Form({[f.id for f in self._fields]!r})"
