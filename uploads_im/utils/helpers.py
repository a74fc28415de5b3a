"""
通用工具函数模块

Uploads.im 的响应里有不少数字/布尔值以字符串形式返回，这里的函数负责把它们
严格地转换成对应的 Python 类型，转换失败时抛出 ValueError（pydantic 校验器会
将其包装为 ValidationError）。
"""

import os
import re
from pathlib import PurePath
from typing import Any, Optional, Union

from uploads_im.core.constants import (
    MAX_STATUS_CODE,
    MIN_STATUS_CODE,
    U16_MAX,
    U64_MAX,
)

UNSIGNED_INTEGER_PATTERN = re.compile(r"\+?[0-9]+")
PATH_SEPARATORS = tuple(sep for sep in (os.sep, os.altsep) if sep)


def _describe_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return f"boolean `{str(value).lower()}`"
    if isinstance(value, (int, float)):
        return f"number `{value}`"
    if isinstance(value, dict):
        return "map"
    if isinstance(value, list):
        return "sequence"
    return type(value).__name__


def _parse_unsigned(string_value: str, maximum: int) -> int:
    """将十进制字符串解析为不超过 maximum 的无符号整数，失败时抛出带原因描述的 ValueError"""
    if not string_value:
        raise ValueError("cannot parse integer from empty string")
    if not UNSIGNED_INTEGER_PATTERN.fullmatch(string_value):
        raise ValueError("invalid digit found in string")
    number = int(string_value)
    if number > maximum:
        raise ValueError("number too large to fit in target type")
    return number


def parse_u64_string(value: Any) -> int:
    """
    将整数字符串解析为 u64

    Args:
        value: JSON 中的原始值，必须是字符串

    Returns:
        int: 解析后的整数

    Raises:
        ValueError: 值不是字符串，或不是合法的 u64 十进制表示
    """
    if not isinstance(value, str):
        raise ValueError(f"invalid type: {_describe_type(value)}, expected a string")
    try:
        return _parse_unsigned(value, U64_MAX)
    except ValueError as e:
        raise ValueError(f'invalid value: string "{value}", expected {e}') from e


def parse_bool_number_string(value: Any) -> bool:
    """将 "0" / "1" 字符串解析为布尔值"""
    parsed_number = parse_u64_string(value)
    if parsed_number == 0:
        return False
    if parsed_number == 1:
        return True
    raise ValueError(
        f"invalid value: integer `{parsed_number}`, expected boolean integral value"
    )


def parse_status_code_string(value: Any) -> int:
    """
    将响应体中的状态码（字符串或数字）解析为合法的HTTP状态码

    Raises:
        ValueError: 非数字、超出 u16 范围或不在 100-599 之间
    """
    if isinstance(value, str):
        try:
            status_code = _parse_unsigned(value, U16_MAX)
        except ValueError as e:
            raise ValueError(
                f'invalid value: string "{value}", expected valid HTTP status code'
            ) from e
    elif isinstance(value, int) and not isinstance(value, bool):
        status_code = value
    else:
        raise ValueError(
            f"invalid type: {_describe_type(value)}, expected valid HTTP status code"
        )

    if not MIN_STATUS_CODE <= status_code <= MAX_STATUS_CODE:
        raise ValueError(
            f"invalid value: integer `{status_code}`, expected valid HTTP status code"
        )
    return status_code


def extract_file_name(file_path: Union[str, PurePath]) -> Optional[str]:
    """
    提取路径中的文件名部分

    以路径分隔符结尾、空路径、根目录或 "."/".." 都没有文件名，返回 None。
    """
    path_string = str(file_path)
    if not path_string or path_string.endswith(PATH_SEPARATORS):
        return None
    name = PurePath(path_string).name
    if name in ("", ".", ".."):
        return None
    return name
