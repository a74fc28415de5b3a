"""
异常处理模块，定义上传流程中使用的错误类型
"""

from enum import Enum
from pathlib import PurePath
from typing import Optional, Union


class UploadRequestURLBuildError(Exception):
    """构建上传URL失败"""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.message = message
        self.original_error = original_error
        super().__init__(message)


class ParamsEncodingFailedError(UploadRequestURLBuildError):
    """查询参数序列化失败"""

    def __init__(self, original_error: Optional[Exception] = None):
        super().__init__("URL params serialization failed", original_error)


class URLValidationFailedError(UploadRequestURLBuildError):
    """生成的URL校验失败"""

    def __init__(self, url: str, original_error: Optional[Exception] = None):
        self.url = url
        super().__init__(f"URL validation failed for {url!r}", original_error)


class UploadErrorType(Enum):
    """上传错误类型枚举"""

    BUILDING_REQUEST = "building_request"  # 构建请求失败
    INVALID_FILENAME = "invalid_filename"  # 无效文件名
    SENDING_REQUEST = "sending_request"  # 网络请求错误
    RESPONSE_RETURNED_FAILURE = "response_returned_failure"  # 服务端返回失败
    IO = "io"  # 本地文件读取错误
    PARSING_RESPONSE = "parsing_response"  # 响应解析错误


class UploadError(Exception):
    """图片上传错误异常类"""

    def __init__(
        self,
        message: str,
        error_type: UploadErrorType,
        status_code: Optional[int] = None,
        details: Optional[dict] = None,
        original_error: Optional[Exception] = None,
    ):
        """
        初始化上传错误异常

        Args:
            message: 错误消息
            error_type: 错误类型
            status_code: 响应体中的HTTP状态码
            details: 详细错误信息
            original_error: 原始异常
        """
        self.message = message
        self.error_type = error_type
        self.status_code = status_code
        self.details = details or {}
        self.original_error = original_error

        # 构建完整错误信息
        full_message = f"[{error_type.value}] {message}"
        if status_code:
            full_message = f"{full_message} (Status: {status_code})"
        if details:
            full_message = f"{full_message} - Details: {details}"

        super().__init__(full_message)


class BuildingRequestError(UploadError):
    def __init__(self, original_error: UploadRequestURLBuildError):
        super().__init__(
            message=f"failed building upload request: {original_error.message}",
            error_type=UploadErrorType.BUILDING_REQUEST,
            original_error=original_error,
        )


class InvalidFilenameError(UploadError):
    def __init__(self, path: Union[str, PurePath]):
        self.path = path
        super().__init__(
            message=f'invalid filename "{path}"',
            error_type=UploadErrorType.INVALID_FILENAME,
        )


class SendingRequestError(UploadError):
    """上传请求发送失败，调用方可自行决定是否重试"""

    def __init__(self, original_error: Exception):
        super().__init__(
            message=f"could not transmit upload request: {original_error}",
            error_type=UploadErrorType.SENDING_REQUEST,
            original_error=original_error,
        )


class UploadIoError(UploadError):
    def __init__(self, path: Union[str, PurePath], original_error: OSError):
        self.path = path
        super().__init__(
            message=f'cannot access file to upload "{path}": {original_error}',
            error_type=UploadErrorType.IO,
            original_error=original_error,
        )


class ResponseReturnedFailureError(UploadError):
    """
    服务端返回的失败响应。

    status_code 来自响应*体*，而不是HTTP响应头。
    """

    def __init__(self, status_code: int, status_text: str):
        self.status_text = status_text
        super().__init__(
            message=f'the server returned HTTP error code {status_code} ("{status_text}")',
            error_type=UploadErrorType.RESPONSE_RETURNED_FAILURE,
            status_code=status_code,
        )


class ParsingResponseError(UploadError):
    def __init__(
        self,
        diagnostic: str,
        original_error: Optional[Exception] = None,
        body: Optional[str] = None,
    ):
        self.diagnostic = diagnostic
        self.body = body
        super().__init__(
            message=f"internal error: unable to parse upload response: {diagnostic}",
            error_type=UploadErrorType.PARSING_RESPONSE,
            original_error=original_error,
        )
