# Services
from hotelops.services.base import CrudService, Page
from hotelops.services.guest_service import GuestService
from hotelops.services.room_service import RoomService
from hotelops.services.reservation_service import ReservationService
from hotelops.services.service_request_service import ServiceRequestService
from hotelops.services.room_service_order_service import RoomServiceOrderService
from hotelops.services.housekeeping_service import HousekeepingService
from hotelops.services.maintenance_service import MaintenanceService
from hotelops.services.catalog_service import MenuItemService, StaffService
from hotelops.services.stay_service import CheckInService, CheckOutService
from hotelops.services.dashboard_service import DashboardService
from hotelops.services.tablet_service import TabletService

__all__ = [
    'CrudService', 'Page',
    'GuestService', 'RoomService', 'ReservationService',
    'ServiceRequestService', 'RoomServiceOrderService',
    'HousekeepingService', 'MaintenanceService',
    'MenuItemService', 'StaffService',
    'CheckInService', 'CheckOutService',
    'DashboardService', 'TabletService',
]
