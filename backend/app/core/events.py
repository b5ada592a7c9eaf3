"""Application lifecycle event handlers."""

from typing import Callable

from fastapi import FastAPI

from domains.core.logging import get_logger

logger = get_logger(__name__)


def create_start_handler(app: FastAPI) -> Callable:
    """Create startup event handler."""

    async def start_app() -> None:
        logger.info("api_starting", component="api")
        logger.info(
            "candy_store_initialized",
            component="candy_store",
            total_candies=len(app.state.candy_store),
        )
        logger.info("api_started", component="api", status="success")

    return start_app


def create_stop_handler(app: FastAPI) -> Callable:
    """Create shutdown event handler."""

    async def stop_app() -> None:
        # 内存存储不做持久化，关闭即丢弃
        logger.info(
            "api_stopped",
            component="api",
            discarded_candies=len(app.state.candy_store),
        )

    return stop_app
