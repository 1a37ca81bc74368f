"""
维修问题服务
"""
from hotelops.models.entities import MaintenanceIssue, MaintenanceStatus
from hotelops.services.request_family import RequestFamilyService


class MaintenanceService(RequestFamilyService[MaintenanceIssue]):
    """维修问题报告"""

    model = MaintenanceIssue
    entity_name = "维修问题"
    known_statuses = tuple(s.value for s in MaintenanceStatus)
    done_status = MaintenanceStatus.RESOLVED.value
    done_field = "resolved_at"
