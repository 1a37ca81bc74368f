"""
入住 / 退房路由
办理入住：预订 -> checked-in，房间 -> occupied
办理退房：预订 -> checked-out，房间 -> cleaning
"""
from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from hotelops.database import get_db
from hotelops.models.schemas import (
    CheckInCreate, CheckInUpdate, CheckInResponse,
    CheckOutCreate, CheckOutUpdate, CheckOutResponse
)
from hotelops.routers.common import PageParams, page_params, paginated, success
from hotelops.services.stay_service import CheckInService, CheckOutService

checkin_router = APIRouter(prefix="/check-ins", tags=["入住办理"])
checkout_router = APIRouter(prefix="/check-outs", tags=["退房办理"])


# ============== 入住 ==============

@checkin_router.get("")
def list_check_ins(
    reservation_id: Optional[int] = None,
    paging: PageParams = Depends(page_params),
    db: Session = Depends(get_db)
):
    result = CheckInService(db).list(
        {"reservation_id": reservation_id}, paging.page, paging.page_size
    )
    return paginated(result, CheckInResponse, "获取入住记录成功")


@checkin_router.get("/reservation/{reservation_id}")
def get_check_in_by_reservation(reservation_id: int, db: Session = Depends(get_db)):
    record = CheckInService(db).get_for_reservation(reservation_id)
    return success(CheckInResponse.model_validate(record), "获取入住记录成功")


@checkin_router.get("/{check_in_id}")
def get_check_in(check_in_id: int, db: Session = Depends(get_db)):
    record = CheckInService(db).get(check_in_id)
    return success(CheckInResponse.model_validate(record), "获取入住记录成功")


@checkin_router.post("", status_code=status.HTTP_201_CREATED)
def create_check_in(data: CheckInCreate, db: Session = Depends(get_db)):
    """办理入住"""
    record = CheckInService(db).create(data)
    return success(CheckInResponse.model_validate(record), "入住办理成功")


@checkin_router.put("/{check_in_id}")
def update_check_in(check_in_id: int, data: CheckInUpdate, db: Session = Depends(get_db)):
    record = CheckInService(db).update(check_in_id, data)
    return success(CheckInResponse.model_validate(record), "入住记录更新成功")


# ============== 退房 ==============

@checkout_router.get("")
def list_check_outs(
    reservation_id: Optional[int] = None,
    paging: PageParams = Depends(page_params),
    db: Session = Depends(get_db)
):
    result = CheckOutService(db).list(
        {"reservation_id": reservation_id}, paging.page, paging.page_size
    )
    return paginated(result, CheckOutResponse, "获取退房记录成功")


@checkout_router.get("/reservation/{reservation_id}")
def get_check_out_by_reservation(reservation_id: int, db: Session = Depends(get_db)):
    record = CheckOutService(db).get_for_reservation(reservation_id)
    return success(CheckOutResponse.model_validate(record), "获取退房记录成功")


@checkout_router.get("/{check_out_id}")
def get_check_out(check_out_id: int, db: Session = Depends(get_db)):
    record = CheckOutService(db).get(check_out_id)
    return success(CheckOutResponse.model_validate(record), "获取退房记录成功")


@checkout_router.post("", status_code=status.HTTP_201_CREATED)
def create_check_out(data: CheckOutCreate, db: Session = Depends(get_db)):
    """办理退房"""
    record = CheckOutService(db).create(data)
    return success(CheckOutResponse.model_validate(record), "退房办理成功")


@checkout_router.put("/{check_out_id}")
def update_check_out(check_out_id: int, data: CheckOutUpdate, db: Session = Depends(get_db)):
    record = CheckOutService(db).update(check_out_id, data)
    return success(CheckOutResponse.model_validate(record), "退房记录更新成功")
