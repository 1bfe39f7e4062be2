"""File payloads for multipart create/update calls."""

from __future__ import annotations

import mimetypes
from pathlib import Path


class FileUpload:
    """A file to send as a multipart part (the client-side ``File``)."""

    __slots__ = ("filename", "content", "content_type")

    def __init__(
        self,
        filename: str,
        content: bytes,
        content_type: str = "application/octet-stream",
    ) -> None:
        self.filename = filename
        self.content = content
        self.content_type = content_type

    @classmethod
    def from_path(cls, path: str | Path, content_type: str | None = None) -> FileUpload:
        path = Path(path)
        guessed, _ = mimetypes.guess_type(path.name)
        return cls(
            filename=path.name,
            content=path.read_bytes(),
            content_type=content_type or guessed or "application/octet-stream",
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileUpload):
            return NotImplemented
        return (
            self.filename == other.filename
            and self.content == other.content
            and self.content_type == other.content_type
        )

    def __repr__(self) -> str:
        return (
            f"FileUpload(filename={self.filename!r}, size={len(self.content)}, "
            f"content_type={self.content_type!r})"
        )
