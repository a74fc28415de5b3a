# uploads_im/service/client/upload_client.py

import asyncio
from pathlib import PurePath
from typing import Any, Dict, Optional, Tuple, Union

import httpx
import requests

from uploads_im.core.constants import UPLOAD_FORM_FIELD
from uploads_im.domain.image_models import UploadOptions
from uploads_im.exception.exceptions import (
    BuildingRequestError,
    InvalidFilenameError,
    SendingRequestError,
    UploadIoError,
    UploadRequestURLBuildError,
)
from uploads_im.log.logger import get_client_logger
from uploads_im.service.upload.url_builder import build_upload_url
from uploads_im.utils.helpers import extract_file_name

logger = get_client_logger()

FilePath = Union[str, PurePath]


def _prepare_request(file_path: FilePath, options: UploadOptions) -> Tuple[str, str]:
    """提取文件名并构建上传地址"""
    file_name = extract_file_name(file_path)
    if file_name is None:
        raise InvalidFilenameError(file_path)

    try:
        endpoint_url = build_upload_url(options)
    except UploadRequestURLBuildError as e:
        raise BuildingRequestError(e) from e

    logger.debug(f"Upload URL: {endpoint_url}")
    return file_name, endpoint_url


def _read_file(file_path: FilePath) -> bytes:
    with open(file_path, "rb") as upload_file:
        return upload_file.read()


def _timeout_kwargs(timeout: Optional[float]) -> Dict[str, Any]:
    # 未指定时沿用客户端自身的超时设置
    return {} if timeout is None else {"timeout": timeout}


def send_upload(
    client: requests.Session,
    file_path: FilePath,
    options: UploadOptions,
    timeout: Optional[float] = None,
) -> bytes:
    """
    以 multipart/form-data 形式发送上传请求并返回原始响应体

    Args:
        client: requests 会话
        file_path: 待上传文件路径
        options: 上传选项
        timeout: 传给 requests 的超时（秒）

    Returns:
        bytes: 未解析的响应体

    Raises:
        InvalidFilenameError: 路径中没有文件名
        BuildingRequestError: 上传地址构建失败
        UploadIoError: 文件无法读取
        SendingRequestError: 网络请求失败
    """
    file_name, endpoint_url = _prepare_request(file_path, options)

    try:
        upload_file = open(file_path, "rb")
    except OSError as e:
        raise UploadIoError(file_path, e) from e

    with upload_file:
        # 准备文件数据
        files = {UPLOAD_FORM_FIELD: (file_name, upload_file)}
        logger.debug("Request built, sending now...")
        try:
            response = client.post(
                endpoint_url, files=files, **_timeout_kwargs(timeout)
            )
            body = response.content
        except requests.RequestException as e:
            raise SendingRequestError(e) from e
        except OSError as e:
            # 发送过程中读取文件失败
            raise UploadIoError(file_path, e) from e

    logger.debug(f"Got upload response: HTTP {response.status_code}")
    return body


async def async_send_upload(
    client: httpx.AsyncClient,
    file_path: FilePath,
    options: UploadOptions,
    timeout: Optional[float] = None,
) -> bytes:
    """send_upload 的异步版本，使用 httpx.AsyncClient 发送请求"""
    file_name, endpoint_url = _prepare_request(file_path, options)

    try:
        file_content = await asyncio.to_thread(_read_file, file_path)
    except OSError as e:
        raise UploadIoError(file_path, e) from e

    files = {UPLOAD_FORM_FIELD: (file_name, file_content)}
    logger.debug("Request built, sending now...")
    try:
        response = await client.post(
            endpoint_url, files=files, **_timeout_kwargs(timeout)
        )
    except httpx.HTTPError as e:
        raise SendingRequestError(e) from e

    logger.debug(f"Got upload response: HTTP {response.status_code}")
    return response.content
