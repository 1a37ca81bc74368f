"""
服务请求路由
"""
from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from hotelops.database import get_db
from hotelops.models.schemas import (
    ServiceRequestCreate, ServiceRequestUpdate, ServiceRequestResponse
)
from hotelops.routers.common import PageParams, page_params, paginated, success
from hotelops.services.projections import service_request_detail
from hotelops.services.service_request_service import ServiceRequestService

router = APIRouter(prefix="/service-requests", tags=["服务请求"])


@router.get("")
def list_service_requests(
    reservation_id: Optional[int] = None,
    guest_id: Optional[int] = None,
    status: Optional[str] = None,
    service_type: Optional[str] = None,
    paging: PageParams = Depends(page_params),
    db: Session = Depends(get_db)
):
    """获取服务请求列表，最新的在前"""
    result = ServiceRequestService(db).list(
        {
            "reservation_id": reservation_id,
            "guest_id": guest_id,
            "status": status,
            "service_type": service_type,
        },
        paging.page, paging.page_size
    )
    return paginated(result, ServiceRequestResponse, "获取服务请求成功")


@router.get("/reservation/{reservation_id}")
def list_service_requests_by_reservation(
    reservation_id: int,
    paging: PageParams = Depends(page_params),
    db: Session = Depends(get_db)
):
    result = ServiceRequestService(db).list_by_reservation(
        reservation_id, paging.page, paging.page_size
    )
    return paginated(result, ServiceRequestResponse, "获取服务请求成功")


@router.get("/guest/{guest_id}")
def list_service_requests_by_guest(
    guest_id: int,
    paging: PageParams = Depends(page_params),
    db: Session = Depends(get_db)
):
    result = ServiceRequestService(db).list_by_guest(guest_id, paging.page, paging.page_size)
    return paginated(result, ServiceRequestResponse, "获取服务请求成功")


@router.get("/status/{request_status}")
def list_service_requests_by_status(
    request_status: str,
    paging: PageParams = Depends(page_params),
    db: Session = Depends(get_db)
):
    result = ServiceRequestService(db).list_by_status(
        request_status, paging.page, paging.page_size
    )
    return paginated(result, ServiceRequestResponse, "获取服务请求成功")


@router.get("/{request_id}")
def get_service_request(request_id: int, db: Session = Depends(get_db)):
    """获取服务请求详情（含客人和房间）"""
    request = ServiceRequestService(db).get(request_id)
    return success(service_request_detail(request), "获取服务请求详情成功")


@router.post("", status_code=status.HTTP_201_CREATED)
def create_service_request(data: ServiceRequestCreate, db: Session = Depends(get_db)):
    request = ServiceRequestService(db).create(data)
    return success(ServiceRequestResponse.model_validate(request), "服务请求创建成功")


@router.put("/{request_id}")
def update_service_request(
    request_id: int,
    data: ServiceRequestUpdate,
    db: Session = Depends(get_db)
):
    """更新服务请求，状态变为 completed 时记录完成时间"""
    request = ServiceRequestService(db).update(request_id, data)
    return success(ServiceRequestResponse.model_validate(request), "服务请求更新成功")


@router.delete("/{request_id}")
def delete_service_request(request_id: int, db: Session = Depends(get_db)):
    ServiceRequestService(db).delete(request_id)
    return success(message="服务请求已删除")
