"""
Uploads.im 客户端
Client for the Uploads.im image upload API
"""

from .domain.image_models import (
    FullSizeImageReference,
    ImageReference,
    Rectangle,
    ThumbnailImageReference,
    UploadedImage,
    UploadOptions,
)
from .exception.exceptions import UploadError, UploadErrorType, UploadRequestURLBuildError
from .service.upload.response_decoder import decode_upload_response
from .service.upload.upload_service import (
    UploadsImUploader,
    async_upload,
    async_upload_with_default_options,
    upload,
    upload_with_default_options,
)
from .service.upload.url_builder import build_upload_url

__all__ = [
    "FullSizeImageReference",
    "ImageReference",
    "Rectangle",
    "ThumbnailImageReference",
    "UploadedImage",
    "UploadOptions",
    "UploadError",
    "UploadErrorType",
    "UploadRequestURLBuildError",
    "decode_upload_response",
    "UploadsImUploader",
    "async_upload",
    "async_upload_with_default_options",
    "upload",
    "upload_with_default_options",
    "build_upload_url",
]
