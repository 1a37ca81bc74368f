"""
预订服务
管理 Reservation 对象：预订号生成、晚数计算、默认房费
"""
import logging
import math
import uuid
from datetime import datetime
from typing import Any, Dict

from hotelops.exceptions import ValidationError
from hotelops.models.entities import Reservation, ReservationStatus, Guest, Room
from hotelops.services.base import CrudService, Page, to_naive_utc

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 86400


def calculate_nights(check_in_date: datetime, check_out_date: datetime) -> int:
    """晚数 = 入住到离店的天数，不足一天按一天计"""
    if check_out_date <= check_in_date:
        raise ValidationError(
            "离店日期必须晚于入住日期",
            details=[{"field": "check_out_date", "message": "必须晚于 check_in_date"}]
        )
    seconds = (check_out_date - check_in_date).total_seconds()
    return math.ceil(seconds / SECONDS_PER_DAY)


def generate_booking_id() -> str:
    """生成预订号 BK-YYYYMMDD-XXXXXX"""
    return f"BK-{datetime.utcnow():%Y%m%d}-{uuid.uuid4().hex[:6].upper()}"


class ReservationService(CrudService[Reservation]):
    """预订服务"""

    model = Reservation
    entity_name = "预订"
    unique_fields = ("booking_id",)
    known_statuses = tuple(s.value for s in ReservationStatus)

    def _prepare_create(self, values: Dict[str, Any]) -> Dict[str, Any]:
        self.require(Guest, values["guest_id"], "客人")
        room = self.require(Room, values["room_id"], "房间")

        values["check_in_date"] = to_naive_utc(values["check_in_date"])
        values["check_out_date"] = to_naive_utc(values["check_out_date"])
        values["nights"] = calculate_nights(values["check_in_date"], values["check_out_date"])

        if values.get("total_price") is None:
            values["total_price"] = round((room.price_per_night or 0) * values["nights"], 2)
        if not values.get("status"):
            values["status"] = ReservationStatus.PENDING.value
        if not values.get("booking_id"):
            values["booking_id"] = generate_booking_id()
        return values

    def _prepare_update(self, reservation: Reservation, values: Dict[str, Any]) -> Dict[str, Any]:
        if "guest_id" in values:
            self.require(Guest, values["guest_id"], "客人")
        if "room_id" in values:
            self.require(Room, values["room_id"], "房间")

        if "check_in_date" in values or "check_out_date" in values:
            check_in = to_naive_utc(values.get("check_in_date", reservation.check_in_date))
            check_out = to_naive_utc(values.get("check_out_date", reservation.check_out_date))
            values["nights"] = calculate_nights(check_in, check_out)
            if "check_in_date" in values:
                values["check_in_date"] = check_in
            if "check_out_date" in values:
                values["check_out_date"] = check_out
        return values

    # ============== 过滤查询 ==============

    def list_by_guest(self, guest_id: int, page: int = 1, page_size: int = 10) -> Page[Reservation]:
        self.require(Guest, guest_id, "客人")
        return self.list({"guest_id": guest_id}, page, page_size)

    def list_by_room(self, room_id: int, page: int = 1, page_size: int = 10) -> Page[Reservation]:
        self.require(Room, room_id, "房间")
        return self.list({"room_id": room_id}, page, page_size)

    def list_by_status(self, status: str, page: int = 1, page_size: int = 10) -> Page[Reservation]:
        return self.list({"status": status}, page, page_size)
