"""
上传接口原始响应模型（仅供解码器内部使用）

接口的响应没有类型字段，失败和成功两种结构需要按字段结构来区分：

    {"status_code": "503", "status_txt": "Service Unavailable"}
    {"data": {"img_name": ..., "img_height": "600", "thumb_height": 90, "resized": "0", ...}}
"""

from typing import Annotated, Union

from pydantic import AnyUrl, BaseModel, BeforeValidator, Field, StrictInt, StrictStr

from uploads_im.core.constants import U32_MAX
from uploads_im.utils.helpers import (
    parse_bool_number_string,
    parse_status_code_string,
    parse_u64_string,
)

StatusCodeString = Annotated[int, BeforeValidator(parse_status_code_string)]
U64String = Annotated[int, BeforeValidator(parse_u64_string)]
BoolNumberString = Annotated[bool, BeforeValidator(parse_bool_number_string)]
# 缩略图尺寸以原生数字返回，不做字符串转换
ThumbnailNumber = Annotated[StrictInt, Field(ge=0, le=U32_MAX)]


class FailureResponse(BaseModel):
    """上传失败"""

    status_code: StatusCodeString
    status_txt: StrictStr


class SuccessResponseData(BaseModel):
    """上传成功时 data 字段的内容"""

    img_name: StrictStr
    img_url: AnyUrl
    img_view: AnyUrl
    img_height: U64String
    img_width: U64String
    thumb_url: AnyUrl
    thumb_height: ThumbnailNumber
    thumb_width: ThumbnailNumber
    resized: BoolNumberString


class SuccessResponse(BaseModel):
    """上传成功"""

    data: SuccessResponseData


RawUploadResponse = Union[FailureResponse, SuccessResponse]

# 按固定顺序尝试匹配，失败结构更简单，优先尝试
RAW_RESPONSE_SHAPES = (FailureResponse, SuccessResponse)
