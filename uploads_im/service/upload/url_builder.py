from typing import List, Optional, Tuple
from urllib.parse import urlencode

from pydantic import HttpUrl, TypeAdapter, ValidationError

from uploads_im.core.constants import (
    FAMILY_UNSAFE_PARAM,
    RESIZE_WIDTH_PARAM,
    THUMBNAIL_WIDTH_PARAM,
    UPLOAD_API_PATH,
)
from uploads_im.domain.image_models import UploadOptions
from uploads_im.exception.exceptions import (
    ParamsEncodingFailedError,
    URLValidationFailedError,
)

_http_url_adapter = TypeAdapter(HttpUrl)

HOST_DELIMITERS = ("/", "\\", "?", "#", "@")


def _param_value(value) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query_params(options: UploadOptions) -> List[Tuple[str, str]]:
    """按固定顺序收集已设置的查询参数，未设置的参数直接省略"""
    candidates = [
        (RESIZE_WIDTH_PARAM, _param_value(options.resize_width)),
        (FAMILY_UNSAFE_PARAM, _param_value(options.family_unsafe)),
        (THUMBNAIL_WIDTH_PARAM, _param_value(options.thumbnail_width)),
    ]
    return [(key, value) for key, value in candidates if value is not None]


def build_upload_url(options: UploadOptions) -> str:
    """
    根据上传选项构建 Uploads.im 的上传接口地址

    Args:
        options: 上传选项

    Returns:
        str: 例如 http://uploads.im/api?upload&resize_width=800&thumb_width=100

    Raises:
        ParamsEncodingFailedError: 查询参数序列化失败
        URLValidationFailedError: 拼接出的地址不是合法的URL
    """
    try:
        params = urlencode(build_query_params(options))
    except (TypeError, ValueError, UnicodeError) as e:
        raise ParamsEncodingFailedError(e) from e

    initial_params_separator = "&" if params else ""
    url_string = f"http://{options.host}{UPLOAD_API_PATH}{initial_params_separator}{params}"

    # 主机名为空或包含路径分隔符时，URL解析器会把路径的一部分当作主机名
    if not options.host or any(c in options.host for c in HOST_DELIMITERS):
        raise URLValidationFailedError(url_string)

    try:
        parsed_url = _http_url_adapter.validate_python(url_string)
    except ValidationError as e:
        raise URLValidationFailedError(url_string, e) from e
    if not parsed_url.host:
        raise URLValidationFailedError(url_string)

    return url_string
