"""
业务异常定义
服务层抛出，由 main.py 中注册的异常处理器统一转换为响应信封
"""
from typing import Any, List, Optional


class HotelOpsError(Exception):
    """业务异常基类"""

    status_code = 500
    error_code = "internal_error"
    default_message = "服务器内部错误"

    def __init__(self, message: Optional[str] = None, details: Optional[List[Any]] = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)


class ValidationError(HotelOpsError):
    """字段缺失或格式不合法"""

    status_code = 400
    error_code = "validation_error"
    default_message = "请求参数不合法"


class NotFoundError(HotelOpsError):
    """资源或其引用的上级资源不存在"""

    status_code = 404
    error_code = "not_found"
    default_message = "资源不存在"


class ConflictError(HotelOpsError):
    """唯一性冲突"""

    status_code = 409
    error_code = "conflict"
    default_message = "资源已存在"


class InternalError(HotelOpsError):
    """存储层故障"""

    status_code = 500
    error_code = "internal_error"
    default_message = "服务器内部错误"


__all__ = [
    "HotelOpsError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "InternalError",
]
