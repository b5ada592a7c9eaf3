"""
Core - 通用应用基础设施

提供与具体协议无关的基础设施组件:
- 统一异常体系
- 结构化日志（见 domains.core.logging）
"""

from .exceptions import (
    ApplicationError,
    AuthenticationError,
    CandyNotFoundError,
    ClientInputError,
    ConfigurationError,
    EmptyStoreError,
    ErrorCategory,
    InternalError,
    NotFoundError,
    UnsupportedMediaTypeError,
    ValidationError,
)

__all__ = [
    # Exceptions
    "ErrorCategory",
    "ApplicationError",
    "ClientInputError",
    "ValidationError",
    "UnsupportedMediaTypeError",
    "NotFoundError",
    "CandyNotFoundError",
    "EmptyStoreError",
    "AuthenticationError",
    "InternalError",
    "ConfigurationError",
]
