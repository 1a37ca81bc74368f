"""
客房送餐订单路由
"""
from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from hotelops.database import get_db
from hotelops.models.schemas import (
    RoomServiceOrderCreate, RoomServiceOrderUpdate, RoomServiceOrderResponse,
    OrderStatusUpdate
)
from hotelops.routers.common import PageParams, page_params, paginated, success
from hotelops.services.room_service_order_service import RoomServiceOrderService

router = APIRouter(prefix="/room-service-orders", tags=["客房送餐"])


@router.get("")
def list_orders(
    reservation_id: Optional[int] = None,
    guest_id: Optional[int] = None,
    status: Optional[str] = None,
    paging: PageParams = Depends(page_params),
    db: Session = Depends(get_db)
):
    result = RoomServiceOrderService(db).list(
        {"reservation_id": reservation_id, "guest_id": guest_id, "status": status},
        paging.page, paging.page_size
    )
    return paginated(result, RoomServiceOrderResponse, "获取送餐订单成功")


@router.get("/reservation/{reservation_id}")
def list_orders_by_reservation(
    reservation_id: int,
    paging: PageParams = Depends(page_params),
    db: Session = Depends(get_db)
):
    result = RoomServiceOrderService(db).list_by_reservation(
        reservation_id, paging.page, paging.page_size
    )
    return paginated(result, RoomServiceOrderResponse, "获取送餐订单成功")


@router.get("/{order_id}")
def get_order(order_id: int, db: Session = Depends(get_db)):
    order = RoomServiceOrderService(db).get(order_id)
    return success(RoomServiceOrderResponse.model_validate(order), "获取送餐订单成功")


@router.post("", status_code=status.HTTP_201_CREATED)
def create_order(data: RoomServiceOrderCreate, db: Session = Depends(get_db)):
    """下单：校验菜品、快照价格、计算金额"""
    order = RoomServiceOrderService(db).create(data)
    return success(RoomServiceOrderResponse.model_validate(order), "送餐订单创建成功")


@router.put("/{order_id}")
def update_order(order_id: int, data: RoomServiceOrderUpdate, db: Session = Depends(get_db)):
    order = RoomServiceOrderService(db).update(order_id, data)
    return success(RoomServiceOrderResponse.model_validate(order), "送餐订单更新成功")


@router.put("/{order_id}/status")
def update_order_status(order_id: int, data: OrderStatusUpdate, db: Session = Depends(get_db)):
    """更新订单状态，delivered 时记录送达时间"""
    order = RoomServiceOrderService(db).update_status(order_id, data.status)
    return success(RoomServiceOrderResponse.model_validate(order), "订单状态更新成功")


@router.delete("/{order_id}")
def delete_order(order_id: int, db: Session = Depends(get_db)):
    RoomServiceOrderService(db).delete(order_id)
    return success(message="送餐订单已删除")
