from __future__ import annotations

from pydantic import BaseModel


class Checkpoint(BaseModel):
    model_config = {"extra": "allow", "strict": True}

    id: str
    last_modified: str


class Content(BaseModel):
    model_config = {"extra": "allow", "strict": True}

    name: str
    path: str
    type: str
    created: str | None
    last_modified: str | None
    # these must be sent, but may be null
    mimetype: str | None
    content: list[dict] | str | dict | None
    format: str | None
    writable: bool | None = None
    size: int | None = None


class ContentsOptions(BaseModel):
    model_config = {"extra": "forbid"}

    type: str | None = None
    format: str | None = None
    content: bool | None = None
    ext: str | None = None
    name: str | None = None


class CreateContent(BaseModel):
    ext: str | None = None
    type: str | None = None


class CopyContent(BaseModel):
    copy_from: str


class RenameContent(BaseModel):
    path: str
