from typing import Optional

import httpx
import requests

from uploads_im.domain.image_models import UploadedImage, UploadOptions
from uploads_im.exception.exceptions import UploadError
from uploads_im.log.logger import get_upload_logger
from uploads_im.service.client.upload_client import (
    FilePath,
    async_send_upload,
    send_upload,
)
from uploads_im.service.upload.response_decoder import decode_upload_response

logger = get_upload_logger()


def _decode(file_path: FilePath, response_body: bytes) -> UploadedImage:
    logger.debug(f"Upload response data: {response_body!r}")
    try:
        uploaded_image = decode_upload_response(response_body)
    except UploadError as e:
        logger.error(f'Upload of "{file_path}" failed: {e}')
        raise
    logger.info(f'Uploaded "{file_path}" as {uploaded_image.name}: {uploaded_image.view_url}')
    return uploaded_image


def upload(
    client: requests.Session,
    file_path: FilePath,
    options: UploadOptions,
    timeout: Optional[float] = None,
) -> UploadedImage:
    """
    使用给定选项将 file_path 指向的图片上传到 Uploads.im

    Raises:
        UploadError: 上传流程中任一步骤失败
    """
    logger.info(f'Beginning upload of file "{file_path}" with {options!r}')
    response_body = send_upload(client, file_path, options, timeout=timeout)
    return _decode(file_path, response_body)


def upload_with_default_options(
    client: requests.Session, file_path: FilePath
) -> UploadedImage:
    """使用默认选项上传"""
    return upload(client, file_path, UploadOptions())


async def async_upload(
    client: httpx.AsyncClient,
    file_path: FilePath,
    options: UploadOptions,
    timeout: Optional[float] = None,
) -> UploadedImage:
    logger.info(f'Beginning upload of file "{file_path}" with {options!r}')
    response_body = await async_send_upload(client, file_path, options, timeout=timeout)
    return _decode(file_path, response_body)


async def async_upload_with_default_options(
    client: httpx.AsyncClient, file_path: FilePath
) -> UploadedImage:
    return await async_upload(client, file_path, UploadOptions())


class UploadsImUploader:
    """Uploads.im 图片上传器，绑定一个会话和一组上传选项"""

    def __init__(
        self,
        client: Optional[requests.Session] = None,
        options: Optional[UploadOptions] = None,
        timeout: Optional[float] = None,
    ):
        # 只关闭自己创建的会话
        self._owns_client = client is None
        self.client = client if client is not None else requests.Session()
        self.options = options or UploadOptions()
        self.timeout = timeout

    def upload(self, file_path: FilePath) -> UploadedImage:
        return upload(self.client, file_path, self.options, timeout=self.timeout)

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def __enter__(self) -> "UploadsImUploader":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
