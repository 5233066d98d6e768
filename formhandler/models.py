"""
Pydantic Data Models

Structured values held by fields whose data is not a plain string.
"""

from pydantic import BaseModel, Field

from formhandler.config.constants import UPLOAD_ERR_OK


class UploadedFile(BaseModel):
    """Descriptor of one file received through an upload field."""
    name: str = Field("", description="Original client-side file name")
    type: str = Field("", description="Mime type reported by the client")
    tmp_name: str = Field("", description="Server-side temporary path")
    error: int = Field(UPLOAD_ERR_OK, description="Upload status code")
    size: int = Field(0, description="Size in bytes")

    @property
    def is_ok(self) -> bool:
        return self.error == UPLOAD_ERR_OK
