"""File uploads, proxied by the backend to the image host."""

from __future__ import annotations

import logging
from typing import Any, Literal

from greengroves.client.api_client import ApiClient
from greengroves.client.forms import build_form
from greengroves.errors import UploadError
from greengroves.models.files import FileUpload
from greengroves.models.upload import UploadResult

logger = logging.getLogger(__name__)


class UploadService:
    upload_path = "/admin/upload"
    image_path = "/admin/upload/image"

    def __init__(self, api: ApiClient) -> None:
        self.api = api

    @staticmethod
    def _result(body: Any) -> UploadResult:
        result = UploadResult.model_validate(body)
        if not result.success:
            raise UploadError(result.message or "Upload failed")
        return result

    async def upload_file(
        self, file: FileUpload, type: Literal["image", "video"] = "image"
    ) -> UploadResult:
        form = build_form({"file": file, "type": type})
        return self._result(await self.api.request(self.upload_path, "POST", body=form))

    async def upload_image(
        self,
        file: FileUpload,
        folder: str = "featured-images",
        model_type: str = "video",
    ) -> UploadResult:
        """Upload an image; the response keeps its full ``{success, message, data}`` envelope."""
        form = build_form({"file": file, "folder": folder, "model_type": model_type})
        result = self._result(await self.api.request(self.image_path, "POST", body=form))
        logger.info("Uploaded %s to %s", file.filename, result.file.url if result.file else "?")
        return result

    async def delete_file(self, path: str) -> Any:
        return await self.api.request(self.upload_path, "DELETE", body={"path": path})
