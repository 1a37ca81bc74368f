"""
房间服务
管理 Room 对象和房态
"""
import logging

from hotelops.exceptions import ConflictError
from hotelops.models.entities import Room, RoomStatus, Reservation
from hotelops.services.base import CrudService, Page

logger = logging.getLogger(__name__)


class RoomService(CrudService[Room]):
    """房间服务"""

    model = Room
    entity_name = "房间"
    unique_fields = ("room_number",)
    known_statuses = tuple(s.value for s in RoomStatus)

    def _ordering(self) -> tuple:
        return (Room.room_number.asc(), Room.id.asc())

    def get_available_rooms(self, page: int = 1, page_size: int = 10) -> Page[Room]:
        """当前可用的房间"""
        return self.list({"status": RoomStatus.AVAILABLE.value}, page, page_size)

    def update_status(self, room_id: int, status: str) -> Room:
        """更新房态"""
        room = self.get(room_id)
        old_status = room.status
        self._check_status(status)
        room.status = status

        self._commit()
        self.db.refresh(room)
        logger.info(f"房间 {room.room_number} 状态变更: {old_status} -> {status}")
        return room

    def _before_delete(self, room: Room) -> None:
        has_reservations = (
            self.db.query(Reservation.id)
            .filter(Reservation.room_id == room.id)
            .first()
        )
        if has_reservations is not None:
            raise ConflictError(f"房间 {room.room_number} 仍有预订记录，无法删除")
