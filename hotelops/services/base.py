"""
通用数据访问层
每个实体服务继承 CrudService，统一提供 list / get / create / update / delete
唯一性冲突、引用不存在、存储故障分别转换为 ConflictError / NotFoundError / InternalError
"""
import logging
import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar, Union

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from hotelops.exceptions import ConflictError, InternalError, NotFoundError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """带时区的时间统一转换为 UTC 的 naive datetime，与数据库存储保持一致"""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


@dataclass
class Page(Generic[ModelT]):
    """分页查询结果"""
    items: List[ModelT]
    total: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return math.ceil(self.total / self.page_size)


class CrudService(Generic[ModelT]):
    """实体服务基类"""

    model: Type[ModelT]
    entity_name: str = "资源"
    # 需要唯一的字段
    unique_fields: Sequence[str] = ()
    # 状态字段的约定取值；写入其他值只记录警告，不拒绝
    known_statuses: Sequence[str] = ()

    def __init__(self, db: Session):
        self.db = db

    # ============== 查询 ==============

    def _query(self):
        return self.db.query(self.model)

    def _ordering(self) -> tuple:
        return (self.model.id.asc(),)

    def list(self, filters: Optional[Dict[str, Any]] = None,
             page: int = 1, page_size: int = 10) -> Page[ModelT]:
        """按字段等值过滤并分页"""
        query = self._query()
        for field, value in (filters or {}).items():
            if value is not None:
                query = query.filter(getattr(self.model, field) == value)

        total = query.count()
        items = (
            query.order_by(*self._ordering())
            .offset((page - 1) * page_size)
            .limit(page_size)
            .all()
        )
        return Page(items=items, total=total, page=page, page_size=page_size)

    def find(self, entity_id: int) -> Optional[ModelT]:
        """获取单个对象，不存在返回 None"""
        return self.db.get(self.model, entity_id)

    def get(self, entity_id: int) -> ModelT:
        """获取单个对象，不存在抛出 NotFoundError"""
        obj = self.find(entity_id)
        if obj is None:
            raise NotFoundError(f"{self.entity_name}不存在")
        return obj

    # ============== 写操作 ==============

    def create(self, data: Union[BaseModel, Dict[str, Any]]) -> ModelT:
        """创建对象"""
        values = self._prepare_create(self._to_dict(data))
        self._check_unique(values)
        self._check_status(values.get("status"))

        obj = self._build(values)
        self.db.add(obj)
        self._on_create(obj)
        self._commit()
        self.db.refresh(obj)

        logger.info(f"{self.entity_name}已创建: id={obj.id}")
        return obj

    def update(self, entity_id: int, data: Union[BaseModel, Dict[str, Any]]) -> ModelT:
        """部分更新，只写入请求中出现的字段"""
        obj = self.get(entity_id)
        values = self._prepare_update(obj, self._to_dict(data, partial=True))
        self._check_unique(values, exclude_id=obj.id)
        if "status" in values:
            self._check_status(values["status"])

        for key, value in values.items():
            setattr(obj, key, value)

        self._commit()
        self.db.refresh(obj)

        logger.info(f"{self.entity_name}已更新: id={obj.id}, fields={sorted(values)}")
        return obj

    def delete(self, entity_id: int) -> None:
        """删除对象"""
        obj = self.get(entity_id)
        self._before_delete(obj)
        self.db.delete(obj)
        self._commit()
        logger.info(f"{self.entity_name}已删除: id={entity_id}")

    # ============== 子类钩子 ==============

    def _prepare_create(self, values: Dict[str, Any]) -> Dict[str, Any]:
        return values

    def _prepare_update(self, obj: ModelT, values: Dict[str, Any]) -> Dict[str, Any]:
        return values

    def _build(self, values: Dict[str, Any]) -> ModelT:
        return self.model(**values)

    def _on_create(self, obj: ModelT) -> None:
        """对象已加入会话、提交之前调用"""

    def _before_delete(self, obj: ModelT) -> None:
        pass

    # ============== 工具方法 ==============

    @staticmethod
    def _to_dict(data: Union[BaseModel, Dict[str, Any]], partial: bool = False) -> Dict[str, Any]:
        if isinstance(data, BaseModel):
            values = data.model_dump(exclude_unset=partial)
        else:
            values = dict(data)
        if partial:
            values = {k: v for k, v in values.items() if v is not None}
        return values

    def require(self, model: Type[Any], entity_id: int, name: str) -> Any:
        """校验引用对象存在"""
        obj = self.db.get(model, entity_id)
        if obj is None:
            raise NotFoundError(f"{name}不存在")
        return obj

    def _check_unique(self, values: Dict[str, Any], exclude_id: Optional[int] = None) -> None:
        for field in self.unique_fields:
            value = values.get(field)
            if value is None:
                continue
            query = self._query().filter(getattr(self.model, field) == value)
            if exclude_id is not None:
                query = query.filter(self.model.id != exclude_id)
            if query.first() is not None:
                raise ConflictError(f"{self.entity_name} {field} '{value}' 已存在")

    def _check_status(self, status: Optional[str]) -> None:
        if status is None or not self.known_statuses:
            return
        if status not in self.known_statuses:
            logger.warning(
                f"{self.entity_name}状态 '{status}' 不在约定取值 {list(self.known_statuses)} 中"
            )

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"{self.entity_name}写入违反约束: {e.orig}")
            raise ConflictError(f"{self.entity_name}违反唯一性约束") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception(f"{self.entity_name}写入失败")
            raise InternalError("数据库操作失败") from e
