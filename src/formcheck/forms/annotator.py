"""Error annotator — adds and removes markers after fields.

Operates on each field's ``trailing`` list. A field's markers are the
run of ``Marker`` nodes directly after it; the run ends at the first
``Decoration``. New markers join the end of that run, so they read in
validator order.
"""

from formcheck.forms.markers import Marker, MarkerKind
from formcheck.forms.model import Field, FormView


class ErrorAnnotator:
    """Inserts, lists, and removes error markers.

    Stateless: it never keeps a marker between calls and rediscovers
    them from ``field.trailing`` every time.
    """

    __slots__ = ()

    def show(self, field: Field, message: str, *, rule: str | None = None) -> Marker:
        """Add an error marker after *field*, behind any markers already there."""
        return self._insert(field, Marker(message, rule=rule))

    def show_diagnostic(self, field: Field, message: str, *, rule: str | None = None) -> Marker:
        """Add a configuration diagnostic after *field*."""
        return self._insert(field, Marker(message, rule=rule, kind=MarkerKind.DIAGNOSTIC))

    def markers_for(self, field: Field) -> list[Marker]:
        """Return the markers directly following *field*."""
        return field.trailing[: _marker_run(field)]  # type: ignore[return-value]

    def remove_for(self, field: Field) -> int:
        """Remove the markers directly following *field*.

        Stops at the first non-marker node. Returns how many were removed;
        calling it again right away removes nothing.
        """
        count = _marker_run(field)
        del field.trailing[:count]
        return count

    def clear_all(self, form: FormView) -> int:
        """Remove every marker in the form, wherever it sits."""
        removed = 0
        for f in form.fields:
            kept = [node for node in f.trailing if not isinstance(node, Marker)]
            removed += len(f.trailing) - len(kept)
            f.trailing[:] = kept
        return removed

    def _insert(self, field: Field, marker: Marker) -> Marker:
        field.trailing.insert(_marker_run(field), marker)
        return marker


def _marker_run(field: Field) -> int:
    """Length of the consecutive run of markers at the start of ``trailing``."""
    count = 0
    for node in field.trailing:
        if not isinstance(node, Marker):
            break
        count += 1
    return count
