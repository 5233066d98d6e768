"""
ErrorAsTitleFormatter

Renders like the PlainFormatter, but after a submit the error messages of
an invalid field are put in its title attribute, separated by a <br />.
The title the field had before is restored once the field renders
without errors again.
"""

from weakref import WeakKeyDictionary

from formhandler.config.constants import ERROR_SEPARATOR
from formhandler.fields.base import AbstractFormField
from formhandler.formatters.base import PlainFormatter


class ErrorAsTitleFormatter(PlainFormatter):

    def __init__(self):
        super().__init__()
        # field -> title it carried before the errors were put in it
        self._replaced_titles = WeakKeyDictionary()

    def prepare(self, field: AbstractFormField):
        if field in self._replaced_titles:
            field.set_title(self._replaced_titles.pop(field))

        if not field.get_form().is_submitted() or field.is_valid():
            return

        errors = field.get_error_messages()
        if errors:
            self._replaced_titles[field] = field.get_title()
            field.set_title(ERROR_SEPARATOR.join(errors))
