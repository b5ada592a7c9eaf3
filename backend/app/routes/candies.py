"""Candy API routes.

提供糖果记录的创建、列表、按 ID 获取和随机获取接口。

线上记录结构为 {"id", "name", "kind"}，字段名保持稳定。

NOTE: 所有同步存储调用都使用 run_sync 包装，避免阻塞 event loop；
存储锁只在工作线程内短暂持有，不跨越序列化或网络 I/O。
"""

from typing import List

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import RedirectResponse
from pydantic import ValidationError as PydanticValidationError

from app.schemas.candy import Candy, CandyCreate
from app.core.deps import get_candy_store
from app.core.async_utils import run_sync
from domains.core import InternalError, UnsupportedMediaTypeError, ValidationError

router = APIRouter()

JSON_CONTENT_TYPE = "application/json"


@router.get("", response_model=List[Candy])
async def list_candies(store=Depends(get_candy_store)):
    """获取全部糖果记录（顺序不保证）"""
    candies = await run_sync(store.list_all)
    return [Candy(**c.to_dict()) for c in candies]


@router.post("", response_model=Candy, status_code=201)
async def create_candy(
    request: Request,
    response: Response,
    store=Depends(get_candy_store),
):
    """
    创建糖果记录

    校验顺序:
    1. 完整读取请求体，失败返回 500
    2. Content-Type 必须严格等于 application/json，否则 415
    3. 请求体解码为记录结构，失败返回 400 并附解码错误
    三步全部通过后才写入存储。
    """
    try:
        body = await request.body()
    except Exception as e:
        raise InternalError(f"failed to read request body: {e}", cause=e) from e

    content_type = request.headers.get("content-type", "")
    if content_type != JSON_CONTENT_TYPE:
        raise UnsupportedMediaTypeError(content_type)

    try:
        payload = CandyCreate.model_validate_json(body)
    except PydanticValidationError as e:
        raise ValidationError(str(e), cause=e) from e

    candy = await run_sync(store.insert, payload.name, payload.kind)

    response.headers["Location"] = f"/candies/{candy.id}"
    return Candy(**candy.to_dict())


@router.get("/random", status_code=302)
async def random_candy(store=Depends(get_candy_store)):
    """随机重定向到一条已存在的记录；存储为空时 404"""
    candy_id = await run_sync(store.random_id)
    return RedirectResponse(url=f"/candies/{candy_id}", status_code=302)


@router.get("/{candy_id}", response_model=Candy)
async def get_candy(candy_id: str, store=Depends(get_candy_store)):
    """获取糖果记录详情"""
    candy = await run_sync(store.get, candy_id)
    return Candy(**candy.to_dict())
