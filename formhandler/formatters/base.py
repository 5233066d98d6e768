"""
Formatters

A formatter turns an element into markup. Fields never build their
surrounding markup themselves: their string conversion goes through the
formatter configured on their form.
"""

import logging
from typing import Callable, Dict

from markupsafe import escape

from formhandler.fields.base import AbstractFormField, Element, ElementKind, attribute

logger = logging.getLogger(__name__)


class Formatter:
    """
    Base rendering strategy.

    Keeps a dispatch table from ElementKind to a render routine. Fields of a
    kind without an entry are rendered by form_field(); elements that are not
    form fields render themselves.
    """

    def __init__(self):
        self._renderers: Dict[ElementKind, Callable[[Element], str]] = {}

    def register(self, kind: ElementKind, renderer: Callable[[Element], str]):
        """Add or replace the render routine for a kind of element."""
        self._renderers[kind] = renderer
        return self

    def __call__(self, element: Element) -> str:
        return self.format(element)

    def format(self, element: Element) -> str:
        is_field = isinstance(element, AbstractFormField)
        if is_field:
            self.prepare(element)

        renderer = self._renderers.get(element.kind)
        if renderer is not None:
            logger.debug(f"Rendering {element.kind.value} element with {getattr(renderer, '__name__', renderer)!r}")
            return renderer(element)

        if is_field:
            return self.form_field(element)

        return element.render()

    def prepare(self, field: AbstractFormField):
        """Set transient presentation state on a field right before it is rendered."""
        pass

    def form_field(self, field: AbstractFormField) -> str:
        return field.render()


class PlainFormatter(Formatter):
    """
    Renders fields as they are.

    Labels of checkboxes and radio buttons are placed directly after the
    field, and help text, when set, directly after that.
    """

    def __init__(self):
        super().__init__()
        self.register(ElementKind.CHECKBOX, self.check_box)
        self.register(ElementKind.RADIO, self.radio_button)

    def form_field(self, field: AbstractFormField) -> str:
        return field.render() + self.help_text(field)

    def check_box(self, field) -> str:
        return field.render() + self.label(field) + self.help_text(field)

    def radio_button(self, field) -> str:
        return self.check_box(field)

    def label(self, field) -> str:
        if not field.get_label():
            return ""
        target = attribute("for", field.get_id()) if field.get_id() else ""
        # Labels are HTML by contract and are not escaped
        return f"<label{target}>{field.get_label()}</label>"

    def help_text(self, field: AbstractFormField) -> str:
        if not field.get_help_text():
            return ""
        return f' <span class="help">{escape(field.get_help_text())}</span>'
