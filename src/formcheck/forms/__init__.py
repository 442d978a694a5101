"""Host form model, error markers, and their HTML rendering."""

from formcheck.forms.annotator import ErrorAnnotator
from formcheck.forms.markers import Annotation, Decoration, Marker, MarkerKind
from formcheck.forms.model import EventHandler, Field, Form, FormEvent, FormField, FormView

__all__ = [
    "Annotation",
    "Decoration",
    "ErrorAnnotator",
    "EventHandler",
    "Field",
    "Form",
    "FormEvent",
    "FormField",
    "FormView",
    "Marker",
    "MarkerKind",
]
