"""
服务请求服务
"""
from hotelops.models.entities import ServiceRequest, RequestStatus
from hotelops.services.request_family import RequestFamilyService


class ServiceRequestService(RequestFamilyService[ServiceRequest]):
    """通用服务请求"""

    model = ServiceRequest
    entity_name = "服务请求"
    known_statuses = tuple(s.value for s in RequestStatus)
    done_status = RequestStatus.COMPLETED.value
    done_field = "completed_at"
