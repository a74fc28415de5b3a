"""
应用程序配置模块
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings

from uploads_im.core.constants import DEFAULT_HOST, DEFAULT_TIMEOUT, U32_MAX, U64_MAX


class Settings(BaseSettings):
    # 服务配置
    UPLOADS_IM_HOST: str = DEFAULT_HOST
    TIME_OUT: int = Field(default=DEFAULT_TIMEOUT, gt=0)

    # 默认上传选项
    RESIZE_WIDTH: Optional[int] = Field(default=None, ge=0, le=U64_MAX)
    THUMBNAIL_WIDTH: Optional[int] = Field(default=None, ge=0, le=U32_MAX)
    FAMILY_UNSAFE: Optional[bool] = None

    # 日志配置
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"


# 创建全局配置实例
settings = Settings()
