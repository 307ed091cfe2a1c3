"""Artwork inputs accepted by ``front``, ``back``, ``file``, ``logo``,
``check_bottom`` and ``attachment``.

Template ids, remote URLs and inline HTML travel as plain strings in the
request body. A ``LocalFile`` is pulled out of the body by the client and
uploaded as a multipart part named after the field.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _FileInputBase(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    def is_file(self) -> bool:
        return False

    def is_url(self) -> bool:
        return False


class TemplateId(_FileInputBase):
    kind: Literal["template_id"] = "template_id"
    id: str = Field(min_length=1)

    def wire_value(self) -> str:
        return self.id


class RemoteUrl(_FileInputBase):
    kind: Literal["url"] = "url"
    url: str = Field(min_length=1)

    def is_url(self) -> bool:
        return True

    def wire_value(self) -> str:
        return self.url


class Html(_FileInputBase):
    kind: Literal["html"] = "html"
    html: str

    def wire_value(self) -> str:
        return self.html


class LocalFile(_FileInputBase):
    kind: Literal["file"] = "file"
    filename: str = Field(min_length=1)
    data: bytes
    content_type: str = "application/octet-stream"

    def is_file(self) -> bool:
        return True

    def multipart_part(self) -> tuple[str, bytes, str]:
        return (self.filename, self.data, self.content_type)


FileInput = Annotated[Union[TemplateId, RemoteUrl, Html, LocalFile], Field(discriminator="kind")]

FILE_INPUT_TYPES = (TemplateId, RemoteUrl, Html, LocalFile)
