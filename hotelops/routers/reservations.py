"""
预订管理路由
"""
from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from hotelops.database import get_db
from hotelops.models.schemas import ReservationCreate, ReservationUpdate, ReservationResponse
from hotelops.routers.common import PageParams, page_params, paginated, success
from hotelops.services.projections import reservation_detail
from hotelops.services.reservation_service import ReservationService

router = APIRouter(prefix="/reservations", tags=["预订管理"])


@router.get("")
def list_reservations(
    guest_id: Optional[int] = None,
    room_id: Optional[int] = None,
    status: Optional[str] = None,
    paging: PageParams = Depends(page_params),
    db: Session = Depends(get_db)
):
    """获取预订列表"""
    result = ReservationService(db).list(
        {"guest_id": guest_id, "room_id": room_id, "status": status},
        paging.page, paging.page_size
    )
    return paginated(result, ReservationResponse, "获取预订列表成功")


@router.get("/guest/{guest_id}")
def list_reservations_by_guest(
    guest_id: int,
    paging: PageParams = Depends(page_params),
    db: Session = Depends(get_db)
):
    result = ReservationService(db).list_by_guest(guest_id, paging.page, paging.page_size)
    return paginated(result, ReservationResponse, "获取客人预订成功")


@router.get("/room/{room_id}")
def list_reservations_by_room(
    room_id: int,
    paging: PageParams = Depends(page_params),
    db: Session = Depends(get_db)
):
    result = ReservationService(db).list_by_room(room_id, paging.page, paging.page_size)
    return paginated(result, ReservationResponse, "获取房间预订成功")


@router.get("/status/{reservation_status}")
def list_reservations_by_status(
    reservation_status: str,
    paging: PageParams = Depends(page_params),
    db: Session = Depends(get_db)
):
    result = ReservationService(db).list_by_status(
        reservation_status, paging.page, paging.page_size
    )
    return paginated(result, ReservationResponse, "获取预订成功")


@router.get("/{reservation_id}")
def get_reservation(reservation_id: int, db: Session = Depends(get_db)):
    """获取预订详情（含客人、房间、服务请求）"""
    reservation = ReservationService(db).get(reservation_id)
    return success(reservation_detail(reservation), "获取预订详情成功")


@router.post("", status_code=status.HTTP_201_CREATED)
def create_reservation(data: ReservationCreate, db: Session = Depends(get_db)):
    """创建预订，晚数和默认房费自动计算"""
    reservation = ReservationService(db).create(data)
    return success(ReservationResponse.model_validate(reservation), "预订创建成功")


@router.put("/{reservation_id}")
def update_reservation(
    reservation_id: int,
    data: ReservationUpdate,
    db: Session = Depends(get_db)
):
    reservation = ReservationService(db).update(reservation_id, data)
    return success(ReservationResponse.model_validate(reservation), "预订更新成功")


@router.delete("/{reservation_id}")
def delete_reservation(reservation_id: int, db: Session = Depends(get_db)):
    """删除预订及其服务记录"""
    ReservationService(db).delete(reservation_id)
    return success(message="预订已删除")
