"""Exception handling utilities for FastAPI routes.

统一异常处理，集成 domains.core 的 ApplicationError 体系。

错误响应均为纯文本:
- NotFoundError: 404，空响应体
- 其他 ApplicationError: 对应状态码，响应体为错误信息
- 框架层 HTTPException（未匹配路由、405 等）: 原状态码，响应体为 detail
- 未处理异常: 500，响应体为异常文本
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from domains.core import ApplicationError, AuthenticationError, NotFoundError

logger = logging.getLogger(__name__)


def error_response(exc: ApplicationError) -> Response:
    """将 ApplicationError 转换为 HTTP 响应"""
    if isinstance(exc, NotFoundError):
        return Response(status_code=exc.http_status_code)

    headers = None
    if isinstance(exc, AuthenticationError):
        headers = {"WWW-Authenticate": "Basic"}

    return PlainTextResponse(exc.message, status_code=exc.http_status_code, headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    """
    注册 FastAPI 异常处理器

    使用示例:
        app = FastAPI()
        register_exception_handlers(app)
    """

    @app.exception_handler(ApplicationError)
    async def application_error_handler(
        request: Request,
        exc: ApplicationError
    ) -> Response:
        """处理 ApplicationError 及其子类"""
        if exc.http_status_code >= 500:
            logger.error(
                f"Application error: [{exc.code}] {exc.message}",
                exc_info=exc.cause,
            )
        else:
            logger.info(f"Request rejected: [{exc.code}] {exc.message}")

        return error_response(exc)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException
    ) -> Response:
        """框架层 HTTP 异常统一输出纯文本"""
        return PlainTextResponse(
            str(exc.detail),
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception
    ) -> Response:
        """全局异常处理器 - 捕获所有未处理的异常"""
        logger.exception(
            f"Unhandled exception: {type(exc).__name__}: {exc}",
            extra={
                "path": request.url.path,
                "method": request.method,
            }
        )

        return PlainTextResponse(str(exc), status_code=500)


__all__ = [
    "error_response",
    "register_exception_handlers",
]
