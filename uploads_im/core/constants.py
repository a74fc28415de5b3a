"""
常量定义模块
"""

# 服务相关常量
DEFAULT_HOST = "uploads.im"
UPLOAD_API_PATH = "/api?upload"
UPLOAD_FORM_FIELD = "fileupload"
DEFAULT_TIMEOUT = 60  # 秒

# 查询参数名称
RESIZE_WIDTH_PARAM = "resize_width"
FAMILY_UNSAFE_PARAM = "family_unsafe"
THUMBNAIL_WIDTH_PARAM = "thumb_width"

# 尺寸取值范围
U32_MAX = 2**32 - 1
U64_MAX = 2**64 - 1
U16_MAX = 2**16 - 1

# 响应体中合法的HTTP状态码范围
MIN_STATUS_CODE = 100
MAX_STATUS_CODE = 599
