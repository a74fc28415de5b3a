"""
上传相关的领域模型
"""

from typing import Annotated, Generic, Optional, TypeVar

from pydantic import AnyUrl, BaseModel, ConfigDict, Field

from uploads_im.config.config import Settings
from uploads_im.core.constants import DEFAULT_HOST, U32_MAX, U64_MAX

# 缩略图尺寸使用 u32，原图尺寸使用 u64
ThumbnailDimension = Annotated[int, Field(ge=0, le=U32_MAX)]
FullSizeDimension = Annotated[int, Field(ge=0, le=U64_MAX)]

Dimension = TypeVar("Dimension")


class UploadOptions(BaseModel):
    """上传接口可用的选项"""

    model_config = ConfigDict(frozen=True)

    host: str = Field(DEFAULT_HOST, description="Uploads.im 服务所在的域名")
    resize_width: Optional[FullSizeDimension] = Field(
        None, description="上传后将原图缩放到的宽度"
    )
    thumbnail_width: Optional[ThumbnailDimension] = Field(
        None, description="缩略图的宽度"
    )
    family_unsafe: Optional[bool] = Field(
        None, description="是否标记为成人内容（NSFW）"
    )

    @classmethod
    def from_settings(cls, settings: Settings) -> "UploadOptions":
        return cls(
            host=settings.UPLOADS_IM_HOST,
            resize_width=settings.RESIZE_WIDTH,
            thumbnail_width=settings.THUMBNAIL_WIDTH,
            family_unsafe=settings.FAMILY_UNSAFE,
        )


class Rectangle(BaseModel, Generic[Dimension]):
    """矩形区域"""

    model_config = ConfigDict(frozen=True)

    height: Dimension
    width: Dimension


class ImageReference(BaseModel, Generic[Dimension]):
    """Uploads.im 上某一尺寸版本的图片"""

    model_config = ConfigDict(frozen=True)

    url: AnyUrl
    dimensions: Rectangle[Dimension]


FullSizeImageReference = ImageReference[FullSizeDimension]
ThumbnailImageReference = ImageReference[ThumbnailDimension]


class UploadedImage(BaseModel):
    """A completed image upload to Uploads.im."""

    model_config = ConfigDict(frozen=True)

    # 服务端分配的文件名，通常是一个ID加上原始扩展名（例如 something.jpg -> vwk7b.jpg）
    name: str
    full_size: FullSizeImageReference
    view_url: AnyUrl
    thumbnail: ThumbnailImageReference
    was_resized: bool
