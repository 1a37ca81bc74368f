"""
房间管理路由
"""
from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from hotelops.database import get_db
from hotelops.models.schemas import RoomCreate, RoomUpdate, RoomResponse, RoomStatusUpdate
from hotelops.routers.common import PageParams, page_params, paginated, success
from hotelops.services.room_service import RoomService

router = APIRouter(prefix="/rooms", tags=["房间管理"])


@router.get("")
def list_rooms(
    status: Optional[str] = None,
    room_type: Optional[str] = None,
    floor: Optional[int] = None,
    paging: PageParams = Depends(page_params),
    db: Session = Depends(get_db)
):
    """获取房间列表，可按状态、房型、楼层过滤"""
    result = RoomService(db).list(
        {"status": status, "room_type": room_type, "floor": floor},
        paging.page, paging.page_size
    )
    return paginated(result, RoomResponse, "获取房间列表成功")


@router.get("/available")
def list_available_rooms(
    paging: PageParams = Depends(page_params),
    db: Session = Depends(get_db)
):
    """获取可用房间"""
    result = RoomService(db).get_available_rooms(paging.page, paging.page_size)
    return paginated(result, RoomResponse, "获取可用房间成功")


@router.get("/{room_id}")
def get_room(room_id: int, db: Session = Depends(get_db)):
    room = RoomService(db).get(room_id)
    return success(RoomResponse.model_validate(room), "获取房间成功")


@router.post("", status_code=status.HTTP_201_CREATED)
def create_room(data: RoomCreate, db: Session = Depends(get_db)):
    """创建房间"""
    room = RoomService(db).create(data)
    return success(RoomResponse.model_validate(room), "房间创建成功")


@router.put("/{room_id}")
def update_room(room_id: int, data: RoomUpdate, db: Session = Depends(get_db)):
    room = RoomService(db).update(room_id, data)
    return success(RoomResponse.model_validate(room), "房间更新成功")


@router.put("/{room_id}/status")
def update_room_status(room_id: int, data: RoomStatusUpdate, db: Session = Depends(get_db)):
    """更新房态"""
    room = RoomService(db).update_status(room_id, data.status)
    return success(RoomResponse.model_validate(room), "房态更新成功")


@router.delete("/{room_id}")
def delete_room(room_id: int, db: Session = Depends(get_db)):
    """删除房间，有预订记录的房间不能删除"""
    RoomService(db).delete(room_id)
    return success(message="房间已删除")
