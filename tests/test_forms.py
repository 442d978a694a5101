"""Tests for formcheck.forms.model — the in-memory host form."""

import pytest

from formcheck.forms.model import Form, FormEvent, FormField


class TestFormField:
    def test_defaults(self) -> None:
        field = FormField("email")
        assert field.id == "email"
        assert field.name == "email"
        assert field.value == ""
        assert field.trailing == []

    def test_focus_detached_is_noop(self) -> None:
        FormField("email").focus()

    def test_focus_sets_form_focus(self) -> None:
        form = Form([FormField("a"), FormField("b")])
        form.field("b").focus()
        assert form.focused is form.field("b")


class TestForm:
    def test_fields_in_order(self) -> None:
        form = Form([FormField("a"), FormField("b")])
        form.add(FormField("c"))
        assert [f.id for f in form.fields] == ["a", "b", "c"]

    def test_duplicate_id_rejected(self) -> None:
        form = Form([FormField("a")])
        with pytest.raises(ValueError, match="Duplicate field id"):
            form.add(FormField("a"))

    def test_field_lookup_missing(self) -> None:
        with pytest.raises(KeyError):
            Form().field("nope")

    def test_submit_without_handlers(self) -> None:
        assert Form().submit() is True

    def test_submit_vetoed(self) -> None:
        form = Form()
        form.on("submit", lambda event: event.prevent_default())
        assert form.submit() is False

    def test_handlers_run_in_subscription_order(self) -> None:
        form = Form()
        seen: list[str] = []
        form.on("submit", lambda event: seen.append("first"))
        form.on("submit", lambda event: seen.append("second"))
        form.submit()
        assert seen == ["first", "second"]

    def test_edit_sets_value_and_fires_event(self) -> None:
        form = Form([FormField("a")])
        events: list[FormEvent] = []
        form.on("change", events.append)
        form.edit("a", "new", event="change")
        assert form.field("a").value == "new"
        assert len(events) == 1
        assert events[0].target is form.field("a")

    def test_event_default_not_prevented(self) -> None:
        event = FormEvent("submit")
        assert event.default_prevented is False
        event.prevent_default()
        assert event.default_prevented is True
