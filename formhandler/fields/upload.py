"""
Upload Field

After a submit, the value is an UploadedFile descriptor, or a list of them
when the field accepts multiple files. Moving the uploaded files is left to
the application.
"""

from typing import List

from formhandler.fields.base import AbstractFormField, ElementKind, attribute, flag
from formhandler.models import UploadedFile


class UploadField(AbstractFormField):
    """File input."""

    kind = ElementKind.UPLOAD

    def __init__(self, form, name: str = ""):
        self.size = None
        self.accept = None
        self.multiple = False
        super().__init__(form, name)

    def set_name(self, name: str):
        super().set_name(name)
        submitted = self.form.get_field_value(name)
        if submitted is not None:
            self.set_value(submitted)
        return self

    def set_value(self, value):
        if isinstance(value, dict):
            value = UploadedFile.model_validate(value)
        elif isinstance(value, (list, tuple)):
            value = [
                UploadedFile.model_validate(item) if isinstance(item, dict) else item
                for item in value
            ]
        return super().set_value(value)

    def get_files(self) -> List[UploadedFile]:
        if isinstance(self.value, list):
            return [item for item in self.value if isinstance(item, UploadedFile)]
        if isinstance(self.value, UploadedFile):
            return [self.value]
        return []

    def is_uploaded(self) -> bool:
        """True if the form was submitted and every received file arrived without error."""
        if not self.form.is_submitted():
            return False
        files = self.get_files()
        return bool(files) and all(item.is_ok for item in files)

    def set_accept(self, mime_type: str):
        """Mime types the browser should offer, e.g. "image/jpeg, image/png"."""
        self.accept = mime_type
        return self

    def get_accept(self):
        return self.accept

    def set_size(self, size: int):
        self.size = size
        return self

    def get_size(self):
        return self.size

    def set_multiple(self, multiple: bool):
        self.multiple = bool(multiple)
        return self

    def is_multiple(self) -> bool:
        return self.multiple

    def render(self) -> str:
        html = '<input type="file"'

        if self.name:
            name = self.name
            if self.multiple and not name.endswith("[]"):
                name += "[]"
            html += attribute("name", name)
        if self.size:
            html += attribute("size", self.size)
        if self.disabled:
            html += flag("disabled")
        if self.accept:
            html += attribute("accept", self.accept)
        if self.multiple:
            html += flag("multiple")

        html += super().render()
        html += " />"
        return html
