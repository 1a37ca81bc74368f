"""
服务请求族公共逻辑
服务请求、送餐订单、客房清洁、维修问题都挂在预订下，
并在进入完成状态时记录完成时间
"""
import logging
from datetime import datetime
from typing import Any, Dict, Optional

from hotelops.exceptions import ValidationError
from hotelops.models.entities import Guest, Reservation
from hotelops.services.base import CrudService, Page, ModelT

logger = logging.getLogger(__name__)


class RequestFamilyService(CrudService[ModelT]):
    """挂在预订下的服务记录"""

    # 完成状态及对应的时间戳字段
    done_status: str = ""
    done_field: str = ""

    def _ordering(self) -> tuple:
        return (self.model.id.desc(),)

    def _prepare_create(self, values: Dict[str, Any]) -> Dict[str, Any]:
        reservation = self.require(Reservation, values["reservation_id"], "预订")
        self.require(Guest, values["guest_id"], "客人")
        if reservation.guest_id != values["guest_id"]:
            logger.warning(
                f"{self.entity_name}的客人 {values['guest_id']} "
                f"与预订 {reservation.booking_id} 的客人 {reservation.guest_id} 不一致"
            )
        return values

    def _prepare_update(self, obj: ModelT, values: Dict[str, Any]) -> Dict[str, Any]:
        self.stamp_done(obj, values.get("status"), values)
        return values

    def stamp_done(self, obj: ModelT, status: Optional[str], values: Dict[str, Any]) -> None:
        """进入完成状态时写入完成时间，已有时间不覆盖"""
        if status == self.done_status and getattr(obj, self.done_field) is None:
            values[self.done_field] = datetime.utcnow()

    def update_status(self, entity_id: int, status: str) -> ModelT:
        if not status:
            raise ValidationError("状态不能为空")
        return self.update(entity_id, {"status": status})

    # ============== 过滤查询 ==============

    def list_by_reservation(self, reservation_id: int,
                            page: int = 1, page_size: int = 10) -> Page[ModelT]:
        self.require(Reservation, reservation_id, "预订")
        return self.list({"reservation_id": reservation_id}, page, page_size)

    def list_by_guest(self, guest_id: int, page: int = 1, page_size: int = 10) -> Page[ModelT]:
        self.require(Guest, guest_id, "客人")
        return self.list({"guest_id": guest_id}, page, page_size)

    def list_by_status(self, status: str, page: int = 1, page_size: int = 10) -> Page[ModelT]:
        return self.list({"status": status}, page, page_size)
