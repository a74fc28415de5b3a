import json
from typing import Any, List, Union

from pydantic import ValidationError

from uploads_im.domain.image_models import (
    FullSizeImageReference,
    ThumbnailImageReference,
    UploadedImage,
)
from uploads_im.domain.response_models import (
    RAW_RESPONSE_SHAPES,
    FailureResponse,
    RawUploadResponse,
)
from uploads_im.exception.exceptions import (
    ParsingResponseError,
    ResponseReturnedFailureError,
)
from uploads_im.log.logger import get_decoder_logger

logger = get_decoder_logger()


def parse_raw_upload_response(raw: Union[bytes, str]) -> RawUploadResponse:
    """
    将响应体解析为失败或成功两种结构之一

    Args:
        raw: 原始响应体

    Returns:
        RawUploadResponse: FailureResponse 或 SuccessResponse

    Raises:
        ParsingResponseError: 不是合法的 UTF-8/JSON，或两种结构都不匹配/都匹配
    """
    if isinstance(raw, bytes):
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParsingResponseError(
                f"response body is not valid UTF-8: {e}", original_error=e
            ) from e
    else:
        text = raw

    try:
        document: Any = json.loads(text)
    except (ValueError, RecursionError) as e:
        raise ParsingResponseError(str(e), original_error=e, body=text) from e

    matches: List[RawUploadResponse] = []
    errors: List[ValidationError] = []
    for shape in RAW_RESPONSE_SHAPES:
        try:
            matches.append(shape.model_validate(document))
        except ValidationError as e:
            errors.append(e)

    if not matches:
        diagnostic = "data did not match any known response shape\n" + "\n".join(
            str(e) for e in errors
        )
        raise ParsingResponseError(diagnostic, original_error=errors[-1], body=text)
    if len(matches) > 1:
        raise ParsingResponseError(
            "data matched more than one response shape: "
            + ", ".join(type(match).__name__ for match in matches),
            body=text,
        )

    logger.debug(f"Parsed response: {matches[0]!r}")
    return matches[0]


def to_uploaded_image(response: RawUploadResponse) -> UploadedImage:
    """将解析后的响应转换为 UploadedImage，失败响应抛出 ResponseReturnedFailureError"""
    if isinstance(response, FailureResponse):
        raise ResponseReturnedFailureError(response.status_code, response.status_txt)

    data = response.data
    return UploadedImage(
        name=data.img_name,
        full_size=FullSizeImageReference(
            url=data.img_url,
            dimensions={"height": data.img_height, "width": data.img_width},
        ),
        view_url=data.img_view,
        thumbnail=ThumbnailImageReference(
            url=data.thumb_url,
            dimensions={"height": data.thumb_height, "width": data.thumb_width},
        ),
        was_resized=data.resized,
    )


def decode_upload_response(raw: Union[bytes, str]) -> UploadedImage:
    """解码上传接口的响应体"""
    return to_uploaded_image(parse_raw_upload_response(raw))
