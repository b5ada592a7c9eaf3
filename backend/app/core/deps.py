"""Dependency injection for FastAPI routes.

存储在 create_application 中构造一次并挂在 app.state 上，路由通过依赖取用。
"""

import base64
import binascii
import secrets
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security.utils import get_authorization_scheme_param

from app.core.config import ADMIN_USERNAME, Settings
from domains.core import AuthenticationError
from domains.candy_hub import CandyStore


def get_candy_store(request: Request) -> CandyStore:
    """Store owned by the running application."""
    return request.app.state.candy_store


def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


def parse_basic_credentials(authorization: str | None) -> tuple[str, str]:
    """
    解析 HTTP Basic 凭证

    缺失、非 Basic 方案、base64 损坏或缺少冒号时一律抛出 AuthenticationError。
    """
    scheme, param = get_authorization_scheme_param(authorization)
    if not authorization or scheme.lower() != "basic":
        raise AuthenticationError()

    try:
        decoded = base64.b64decode(param, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        raise AuthenticationError()

    username, separator, password = decoded.partition(":")
    if not separator:
        raise AuthenticationError()
    return username, password


def require_admin(
    request: Request,
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> str:
    """
    校验管理员 HTTP Basic 凭证

    用户名必须为固定值 admin，密码必须等于配置的 ADMIN_PASSWORD。
    """
    username, password = parse_basic_credentials(request.headers.get("Authorization"))

    expected = settings.ADMIN_PASSWORD.get_secret_value()
    username_ok = secrets.compare_digest(username.encode("utf-8"), ADMIN_USERNAME.encode("utf-8"))
    password_ok = secrets.compare_digest(password.encode("utf-8"), expected.encode("utf-8"))
    if not (username_ok and password_ok):
        raise AuthenticationError()
    return username
