"""
客人管理路由
包含入住历史、偏好和画像
"""
from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from hotelops.database import get_db
from hotelops.models.schemas import (
    GuestCreate, GuestUpdate, GuestResponse, ReservationResponse,
    GuestPreferencesUpdate, GuestAIInsightsUpdate
)
from hotelops.routers.common import PageParams, page_params, paginated, success
from hotelops.services.guest_service import GuestService
from hotelops.services.projections import guest_detail, preferences_view, ai_insights_view

router = APIRouter(prefix="/guests", tags=["客人管理"])


@router.get("")
def list_guests(
    nationality: Optional[str] = None,
    email: Optional[str] = None,
    paging: PageParams = Depends(page_params),
    db: Session = Depends(get_db)
):
    """获取客人列表"""
    service = GuestService(db)
    result = service.list(
        {"nationality": nationality, "email": email}, paging.page, paging.page_size
    )
    return paginated(result, GuestResponse, "获取客人列表成功")


@router.get("/{guest_id}")
def get_guest(guest_id: int, db: Session = Depends(get_db)):
    """获取客人详情（含历史、偏好、画像、统计）"""
    guest = GuestService(db).get(guest_id)
    return success(guest_detail(guest), "获取客人详情成功")


@router.post("", status_code=status.HTTP_201_CREATED)
def create_guest(data: GuestCreate, db: Session = Depends(get_db)):
    """创建客人"""
    guest = GuestService(db).create(data)
    return success(GuestResponse.model_validate(guest), "客人创建成功")


@router.put("/{guest_id}")
def update_guest(guest_id: int, data: GuestUpdate, db: Session = Depends(get_db)):
    """更新客人信息"""
    guest = GuestService(db).update(guest_id, data)
    return success(GuestResponse.model_validate(guest), "客人更新成功")


@router.delete("/{guest_id}")
def delete_guest(guest_id: int, db: Session = Depends(get_db)):
    """删除客人及其全部预订和服务记录"""
    GuestService(db).delete(guest_id)
    return success(message="客人已删除")


# ============== 历史 / 偏好 / 画像 ==============

@router.get("/{guest_id}/history")
def get_guest_history(guest_id: int, db: Session = Depends(get_db)):
    """客人入住历史"""
    reservations = GuestService(db).get_history(guest_id)
    return success(
        [ReservationResponse.model_validate(r) for r in reservations],
        "获取入住历史成功"
    )


@router.get("/{guest_id}/preferences")
def get_guest_preferences(guest_id: int, db: Session = Depends(get_db)):
    preferences = GuestService(db).get_preferences(guest_id)
    return success(preferences_view(preferences), "获取客人偏好成功")


@router.put("/{guest_id}/preferences")
def update_guest_preferences(
    guest_id: int,
    data: GuestPreferencesUpdate,
    db: Session = Depends(get_db)
):
    preferences = GuestService(db).update_preferences(guest_id, data)
    return success(preferences_view(preferences), "客人偏好更新成功")


@router.get("/{guest_id}/ai-insights")
def get_guest_ai_insights(guest_id: int, db: Session = Depends(get_db)):
    insights = GuestService(db).get_ai_insights(guest_id)
    return success(ai_insights_view(insights), "获取客人画像成功")


@router.put("/{guest_id}/ai-insights")
def update_guest_ai_insights(
    guest_id: int,
    data: GuestAIInsightsUpdate,
    db: Session = Depends(get_db)
):
    insights = GuestService(db).update_ai_insights(guest_id, data)
    return success(ai_insights_view(insights), "客人画像更新成功")
