"""
客房清洁服务
"""
from hotelops.models.entities import HousekeepingRequest, RequestStatus
from hotelops.services.request_family import RequestFamilyService


class HousekeepingService(RequestFamilyService[HousekeepingRequest]):
    """客房清洁请求"""

    model = HousekeepingRequest
    entity_name = "清洁请求"
    known_statuses = tuple(s.value for s in RequestStatus)
    done_status = RequestStatus.COMPLETED.value
    done_field = "completed_at"
