"""
统一异常体系

提供业务层和基础设施层的统一错误处理，包括:
- 业务异常基类 (ApplicationError)
- 常用业务异常类型
- HTTP 状态码映射
"""

from enum import Enum
from typing import Any, Dict, Optional
from dataclasses import dataclass


class ErrorCategory(str, Enum):
    """错误分类"""
    VALIDATION = "validation"                          # 请求体解析错误
    UNSUPPORTED_MEDIA_TYPE = "unsupported_media_type"  # Content-Type 不匹配
    NOT_FOUND = "not_found"                            # 资源不存在
    UNAUTHENTICATED = "unauthenticated"                # 凭证缺失或错误
    INTERNAL = "internal"                              # 内部错误


@dataclass(eq=False)
class ApplicationError(Exception):
    """
    应用层异常基类

    所有业务相关的异常都应继承此类。
    提供统一的错误结构，由 app.core.exceptions 转换为 HTTP 响应。

    使用示例:
        raise CandyNotFoundError("1700000000")
        raise UnsupportedMediaTypeError("text/plain")
        raise ValidationError("Invalid JSON: EOF while parsing a value")
    """
    code: str                                    # 错误码 (如 "NOT_FOUND", "VALIDATION_ERROR")
    message: str                                 # 用户可读的错误信息
    category: ErrorCategory = ErrorCategory.INTERNAL
    details: Optional[Dict[str, Any]] = None    # 附加详情
    cause: Optional[Exception] = None           # 原始异常

    def __post_init__(self):
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    @property
    def http_status_code(self) -> int:
        """映射到 HTTP 状态码"""
        mapping = {
            ErrorCategory.VALIDATION: 400,
            ErrorCategory.UNAUTHENTICATED: 401,
            ErrorCategory.NOT_FOUND: 404,
            ErrorCategory.UNSUPPORTED_MEDIA_TYPE: 415,
            ErrorCategory.INTERNAL: 500,
        }
        return mapping.get(self.category, 500)


# ==================== 客户端输入错误 ====================

class ClientInputError(ApplicationError):
    """客户端输入错误（4xx），请求被拒绝，存储不变"""


class ValidationError(ClientInputError):
    """请求体无法解码为记录结构"""
    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(
            code="VALIDATION_ERROR",
            message=message,
            category=ErrorCategory.VALIDATION,
            cause=cause,
        )


class UnsupportedMediaTypeError(ClientInputError):
    """Content-Type 不是 application/json"""
    def __init__(self, received: str, expected: str = "application/json"):
        super().__init__(
            code="UNSUPPORTED_MEDIA_TYPE",
            message=f"Need content-type '{expected}', but got '{received}'",
            category=ErrorCategory.UNSUPPORTED_MEDIA_TYPE,
            details={"expected": expected, "received": received},
        )
        self.received = received


# ==================== 资源不存在 ====================

class NotFoundError(ApplicationError):
    """资源不存在"""
    def __init__(
        self,
        resource_type: str,
        resource_id: Any,
        details: Optional[Dict] = None
    ):
        super().__init__(
            code="NOT_FOUND",
            message=f"{resource_type} not found: {resource_id}",
            category=ErrorCategory.NOT_FOUND,
            details=details or {"resource_type": resource_type, "resource_id": str(resource_id)}
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class CandyNotFoundError(NotFoundError):
    """糖果记录不存在"""
    def __init__(self, candy_id: str):
        super().__init__("candy", candy_id)
        self.candy_id = candy_id


class EmptyStoreError(NotFoundError):
    """存储为空，无法随机选取"""
    def __init__(self):
        super().__init__("candy", "random", details={"reason": "store is empty"})


# ==================== 认证 ====================

class AuthenticationError(ApplicationError):
    """凭证缺失或不匹配"""
    def __init__(self, message: str = "401 - unauthorized"):
        super().__init__(
            code="UNAUTHENTICATED",
            message=message,
            category=ErrorCategory.UNAUTHENTICATED,
        )


# ==================== 内部错误 ====================

class InternalError(ApplicationError):
    """内部错误（读取请求体失败、序列化失败），不重试"""
    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(
            code="INTERNAL_ERROR",
            message=message,
            category=ErrorCategory.INTERNAL,
            cause=cause,
        )


class ConfigurationError(ApplicationError):
    """配置错误，进程不应开始服务"""
    def __init__(
        self,
        config_key: str,
        message: str,
        details: Optional[Dict] = None
    ):
        super().__init__(
            code="CONFIGURATION_ERROR",
            message=f"Configuration error [{config_key}]: {message}",
            category=ErrorCategory.INTERNAL,
            details=details or {"config_key": config_key}
        )
        self.config_key = config_key


# ==================== 导出 ====================

__all__ = [
    # 基类
    "ErrorCategory",
    "ApplicationError",
    # 客户端输入
    "ClientInputError",
    "ValidationError",
    "UnsupportedMediaTypeError",
    # 资源不存在
    "NotFoundError",
    "CandyNotFoundError",
    "EmptyStoreError",
    # 其他
    "AuthenticationError",
    "InternalError",
    "ConfigurationError",
]
