"""
房内平板路由
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from hotelops.database import get_db
from hotelops.models.schemas import (
    RoomServiceOrderCreate, RoomServiceOrderResponse,
    HousekeepingRequestCreate, HousekeepingRequestResponse,
    MaintenanceIssueCreate, MaintenanceIssueResponse,
    InRoomTabletMenuResponse
)
from hotelops.routers.common import PageParams, page_params, paginated, success
from hotelops.services.tablet_service import TabletService

router = APIRouter(prefix="/in-room-tablet", tags=["房内平板"])


@router.get("/reservation/{reservation_id}")
def get_tablet_reservation(reservation_id: int, db: Session = Depends(get_db)):
    """客人视角的预订信息"""
    view = TabletService(db).get_reservation(reservation_id)
    return success(view, "获取预订信息成功")


@router.get("/menu")
def get_tablet_menu(
    paging: PageParams = Depends(page_params),
    db: Session = Depends(get_db)
):
    """在售菜单"""
    result = TabletService(db).get_menu(paging.page, paging.page_size)
    return paginated(result, InRoomTabletMenuResponse, "获取菜单成功")


@router.post("/room-service-order", status_code=status.HTTP_201_CREATED)
def place_room_service_order(data: RoomServiceOrderCreate, db: Session = Depends(get_db)):
    order = TabletService(db).place_order(data)
    return success(RoomServiceOrderResponse.model_validate(order), "下单成功")


@router.post("/housekeeping-request", status_code=status.HTTP_201_CREATED)
def request_housekeeping(data: HousekeepingRequestCreate, db: Session = Depends(get_db)):
    request = TabletService(db).request_housekeeping(data)
    return success(HousekeepingRequestResponse.model_validate(request), "清洁请求已提交")


@router.post("/maintenance-issue", status_code=status.HTTP_201_CREATED)
def report_maintenance_issue(data: MaintenanceIssueCreate, db: Session = Depends(get_db)):
    issue = TabletService(db).report_issue(data)
    return success(MaintenanceIssueResponse.model_validate(issue), "维修问题已上报")
