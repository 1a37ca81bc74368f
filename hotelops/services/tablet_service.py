"""
房内平板服务
面向客人的只读预订视图、在售菜单以及下单 / 报修入口
"""
from sqlalchemy.orm import Session

from hotelops.models.entities import (
    Reservation, RoomServiceOrder, HousekeepingRequest, MaintenanceIssue
)
from hotelops.models.schemas import (
    InRoomTabletReservationResponse, RoomServiceOrderCreate,
    HousekeepingRequestCreate, MaintenanceIssueCreate
)
from hotelops.services.base import Page
from hotelops.services.catalog_service import MenuItemService
from hotelops.services.housekeeping_service import HousekeepingService
from hotelops.services.maintenance_service import MaintenanceService
from hotelops.services.projections import tablet_reservation_view
from hotelops.services.reservation_service import ReservationService
from hotelops.services.room_service_order_service import RoomServiceOrderService


class TabletService:
    """房内平板"""

    def __init__(self, db: Session):
        self.db = db

    def get_reservation(self, reservation_id: int) -> InRoomTabletReservationResponse:
        reservation: Reservation = ReservationService(self.db).get(reservation_id)
        return tablet_reservation_view(reservation)

    def get_menu(self, page: int = 1, page_size: int = 10) -> Page:
        return MenuItemService(self.db).list_available(page, page_size)

    def place_order(self, data: RoomServiceOrderCreate) -> RoomServiceOrder:
        return RoomServiceOrderService(self.db).create(data)

    def request_housekeeping(self, data: HousekeepingRequestCreate) -> HousekeepingRequest:
        return HousekeepingService(self.db).create(data)

    def report_issue(self, data: MaintenanceIssueCreate) -> MaintenanceIssue:
        return MaintenanceService(self.db).create(data)
