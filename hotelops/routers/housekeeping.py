"""
客房清洁与维修路由
"""
from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from hotelops.database import get_db
from hotelops.models.schemas import (
    HousekeepingRequestCreate, HousekeepingRequestUpdate, HousekeepingRequestResponse,
    MaintenanceIssueCreate, MaintenanceIssueUpdate, MaintenanceIssueResponse
)
from hotelops.routers.common import PageParams, page_params, paginated, success
from hotelops.services.housekeeping_service import HousekeepingService
from hotelops.services.maintenance_service import MaintenanceService

housekeeping_router = APIRouter(prefix="/housekeeping-requests", tags=["客房清洁"])
maintenance_router = APIRouter(prefix="/maintenance-issues", tags=["维修管理"])


# ============== 客房清洁 ==============

@housekeeping_router.get("")
def list_housekeeping_requests(
    reservation_id: Optional[int] = None,
    status: Optional[str] = None,
    paging: PageParams = Depends(page_params),
    db: Session = Depends(get_db)
):
    result = HousekeepingService(db).list(
        {"reservation_id": reservation_id, "status": status},
        paging.page, paging.page_size
    )
    return paginated(result, HousekeepingRequestResponse, "获取清洁请求成功")


@housekeeping_router.get("/reservation/{reservation_id}")
def list_housekeeping_by_reservation(
    reservation_id: int,
    paging: PageParams = Depends(page_params),
    db: Session = Depends(get_db)
):
    result = HousekeepingService(db).list_by_reservation(
        reservation_id, paging.page, paging.page_size
    )
    return paginated(result, HousekeepingRequestResponse, "获取清洁请求成功")


@housekeeping_router.get("/status/{request_status}")
def list_housekeeping_by_status(
    request_status: str,
    paging: PageParams = Depends(page_params),
    db: Session = Depends(get_db)
):
    result = HousekeepingService(db).list_by_status(
        request_status, paging.page, paging.page_size
    )
    return paginated(result, HousekeepingRequestResponse, "获取清洁请求成功")


@housekeeping_router.get("/{request_id}")
def get_housekeeping_request(request_id: int, db: Session = Depends(get_db)):
    request = HousekeepingService(db).get(request_id)
    return success(HousekeepingRequestResponse.model_validate(request), "获取清洁请求成功")


@housekeeping_router.post("", status_code=status.HTTP_201_CREATED)
def create_housekeeping_request(data: HousekeepingRequestCreate, db: Session = Depends(get_db)):
    request = HousekeepingService(db).create(data)
    return success(HousekeepingRequestResponse.model_validate(request), "清洁请求创建成功")


@housekeeping_router.put("/{request_id}")
def update_housekeeping_request(
    request_id: int,
    data: HousekeepingRequestUpdate,
    db: Session = Depends(get_db)
):
    """状态变为 completed 时记录完成时间"""
    request = HousekeepingService(db).update(request_id, data)
    return success(HousekeepingRequestResponse.model_validate(request), "清洁请求更新成功")


@housekeeping_router.delete("/{request_id}")
def delete_housekeeping_request(request_id: int, db: Session = Depends(get_db)):
    HousekeepingService(db).delete(request_id)
    return success(message="清洁请求已删除")


# ============== 维修 ==============

@maintenance_router.get("")
def list_maintenance_issues(
    reservation_id: Optional[int] = None,
    status: Optional[str] = None,
    paging: PageParams = Depends(page_params),
    db: Session = Depends(get_db)
):
    result = MaintenanceService(db).list(
        {"reservation_id": reservation_id, "status": status},
        paging.page, paging.page_size
    )
    return paginated(result, MaintenanceIssueResponse, "获取维修问题成功")


@maintenance_router.get("/reservation/{reservation_id}")
def list_maintenance_by_reservation(
    reservation_id: int,
    paging: PageParams = Depends(page_params),
    db: Session = Depends(get_db)
):
    result = MaintenanceService(db).list_by_reservation(
        reservation_id, paging.page, paging.page_size
    )
    return paginated(result, MaintenanceIssueResponse, "获取维修问题成功")


@maintenance_router.get("/status/{issue_status}")
def list_maintenance_by_status(
    issue_status: str,
    paging: PageParams = Depends(page_params),
    db: Session = Depends(get_db)
):
    result = MaintenanceService(db).list_by_status(issue_status, paging.page, paging.page_size)
    return paginated(result, MaintenanceIssueResponse, "获取维修问题成功")


@maintenance_router.get("/{issue_id}")
def get_maintenance_issue(issue_id: int, db: Session = Depends(get_db)):
    issue = MaintenanceService(db).get(issue_id)
    return success(MaintenanceIssueResponse.model_validate(issue), "获取维修问题成功")


@maintenance_router.post("", status_code=status.HTTP_201_CREATED)
def create_maintenance_issue(data: MaintenanceIssueCreate, db: Session = Depends(get_db)):
    issue = MaintenanceService(db).create(data)
    return success(MaintenanceIssueResponse.model_validate(issue), "维修问题已上报")


@maintenance_router.put("/{issue_id}")
def update_maintenance_issue(
    issue_id: int,
    data: MaintenanceIssueUpdate,
    db: Session = Depends(get_db)
):
    """状态变为 resolved 时记录解决时间"""
    issue = MaintenanceService(db).update(issue_id, data)
    return success(MaintenanceIssueResponse.model_validate(issue), "维修问题更新成功")


@maintenance_router.delete("/{issue_id}")
def delete_maintenance_issue(issue_id: int, db: Session = Depends(get_db)):
    MaintenanceService(db).delete(issue_id)
    return success(message="维修问题已删除")
