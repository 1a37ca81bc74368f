# Entity Models
from hotelops.models.entities import (
    Guest, GuestPreferences, GuestAIInsights, Room, Reservation,
    ServiceRequest, RoomServiceOrder, HousekeepingRequest, MaintenanceIssue,
    MenuItem, Staff, CheckIn, CheckOut
)

__all__ = [
    'Guest', 'GuestPreferences', 'GuestAIInsights', 'Room', 'Reservation',
    'ServiceRequest', 'RoomServiceOrder', 'HousekeepingRequest', 'MaintenanceIssue',
    'MenuItem', 'Staff', 'CheckIn', 'CheckOut'
]
