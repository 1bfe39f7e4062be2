"""Upload endpoint responses."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class UploadedFile(BaseModel):
    model_config = ConfigDict(extra="allow")

    url: str
    public_id: str | None = None
    folder: str | None = None
    width: int | None = None
    height: int | None = None
    format: str | None = None
    bytes: int | None = None


class UploadResult(BaseModel):
    """``{success, message, data: {...}}`` from /admin/upload/image.

    The older /admin/upload endpoint puts url/path/filename at the top level
    instead of under ``data``; ``file`` hides the difference.
    """

    model_config = ConfigDict(extra="allow")

    success: bool
    message: str | None = None
    data: UploadedFile | None = None
    url: str | None = None
    path: str | None = None
    filename: str | None = None
    type: str | None = None
    size: int | None = None

    @property
    def file(self) -> UploadedFile | None:
        if self.data is not None:
            return self.data
        if self.url:
            return UploadedFile(url=self.url, public_id=self.path)
        return None
