"""
异步工具函数

提供在异步上下文中安全执行同步代码的工具。
"""

import asyncio
from typing import TypeVar, Callable

T = TypeVar("T")


async def run_sync(func: Callable[..., T], *args, **kwargs) -> T:
    """
    在线程池中执行同步函数，避免阻塞 event loop。

    存储方法使用线程锁，放到工作线程执行，锁等待不会占住事件循环。

    Example:
        candy = await run_sync(store.get, candy_id)
    """
    return await asyncio.to_thread(func, *args, **kwargs)
