"""Admin portal route."""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from app.core.deps import require_admin

router = APIRouter()

WELCOME_PAGE = "<html><h1>Welcome to the admin portal</h1></html>"


@router.get("", response_class=HTMLResponse)
async def admin_portal(_user: str = Depends(require_admin)):
    """管理员欢迎页（HTTP Basic 认证）"""
    return HTMLResponse(WELCOME_PAGE)
