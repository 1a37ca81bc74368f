"""
路由公共工具
统一响应信封和分页参数
"""
from dataclasses import dataclass
from typing import Any, Callable, Optional, Type

from fastapi import Query
from pydantic import BaseModel

from hotelops.config import settings
from hotelops.models.schemas import PaginationMeta
from hotelops.services.base import Page


@dataclass
class PageParams:
    page: int
    page_size: int


def page_params(
    page: int = Query(1, ge=1, description="页码，从 1 开始"),
    page_size: int = Query(
        settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, description="每页条数"
    ),
) -> PageParams:
    """分页参数依赖"""
    return PageParams(page=page, page_size=page_size)


def success(data: Any = None, message: str = "操作成功") -> dict:
    """成功响应信封"""
    body = {"success": True, "message": message}
    if data is not None:
        body["data"] = data
    return body


def paginated(
    result: Page,
    schema: Optional[Type[BaseModel]] = None,
    message: str = "获取成功",
    project: Optional[Callable[[Any], Any]] = None,
) -> dict:
    """分页响应信封；schema 或 project 用于把实体转换为响应对象"""
    if project is None:
        project = schema.model_validate if schema is not None else (lambda item: item)
    return {
        "success": True,
        "message": message,
        "data": [project(item) for item in result.items],
        "meta": PaginationMeta(
            page=result.page,
            page_size=result.page_size,
            total=result.total,
            total_pages=result.total_pages,
        ),
    }
