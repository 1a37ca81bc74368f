"""
入住 / 退房服务
创建记录时在同一事务内推进预订状态和房态
"""
import logging
from typing import Any, Dict, Optional

from hotelops.exceptions import ConflictError, NotFoundError
from hotelops.models.entities import (
    CheckIn, CheckOut, Guest, Reservation, ReservationStatus, Room, RoomStatus,
    RoomCondition
)
from hotelops.services.base import CrudService, to_naive_utc

logger = logging.getLogger(__name__)


class _StayRecordService(CrudService):
    """入住和退房记录的公共部分"""

    time_field: str = ""
    reservation_status: str = ""
    room_status: str = ""

    def _prepare_create(self, values: Dict[str, Any]) -> Dict[str, Any]:
        self.require(Reservation, values["reservation_id"], "预订")
        self.require(Guest, values["guest_id"], "客人")
        self.require(Room, values["room_id"], "房间")

        if self.get_by_reservation(values["reservation_id"]) is not None:
            raise ConflictError(f"预订 {values['reservation_id']} 已有{self.entity_name}")

        if values.get(self.time_field) is None:
            values.pop(self.time_field, None)
        else:
            values[self.time_field] = to_naive_utc(values[self.time_field])
        return values

    def _prepare_update(self, obj, values: Dict[str, Any]) -> Dict[str, Any]:
        if self.time_field in values:
            values[self.time_field] = to_naive_utc(values[self.time_field])
        return values

    def _on_create(self, obj) -> None:
        reservation = self.db.get(Reservation, obj.reservation_id)
        room = self.db.get(Room, obj.room_id)
        if reservation.room_id != room.id:
            logger.warning(
                f"{self.entity_name}房间 {room.room_number} 与预订 {reservation.booking_id} 的房间不一致"
            )
        logger.info(
            f"预订 {reservation.booking_id}: {reservation.status} -> {self.reservation_status}, "
            f"房间 {room.room_number}: {room.status} -> {self.room_status}"
        )
        reservation.status = self.reservation_status
        room.status = self.room_status

    def get_by_reservation(self, reservation_id: int) -> Optional[Any]:
        return self._query().filter(self.model.reservation_id == reservation_id).first()

    def get_for_reservation(self, reservation_id: int):
        """按预订获取记录，预订或记录不存在都抛出 NotFoundError"""
        self.require(Reservation, reservation_id, "预订")
        record = self.get_by_reservation(reservation_id)
        if record is None:
            raise NotFoundError(f"预订 {reservation_id} 没有{self.entity_name}")
        return record


class CheckInService(_StayRecordService):
    """入住办理"""

    model = CheckIn
    entity_name = "入住记录"
    time_field = "check_in_time"
    reservation_status = ReservationStatus.CHECKED_IN.value
    room_status = RoomStatus.OCCUPIED.value


class CheckOutService(_StayRecordService):
    """退房办理，房间进入清洁状态"""

    model = CheckOut
    entity_name = "退房记录"
    time_field = "check_out_time"
    reservation_status = ReservationStatus.CHECKED_OUT.value
    room_status = RoomStatus.CLEANING.value

    def _prepare_create(self, values: Dict[str, Any]) -> Dict[str, Any]:
        values = super()._prepare_create(values)
        condition = values.get("room_condition")
        if condition and condition not in {c.value for c in RoomCondition}:
            logger.warning(f"退房房间状况 '{condition}' 不在约定取值中")
        return values
