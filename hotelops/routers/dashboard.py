"""
仪表盘路由
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from hotelops.database import get_db
from hotelops.routers.common import success
from hotelops.services.dashboard_service import DashboardService

router = APIRouter(prefix="/dashboard", tags=["仪表盘"])


@router.get("/stats")
def get_dashboard_stats(db: Session = Depends(get_db)):
    """总览：房态、待办、营收、入住率"""
    return success(DashboardService(db).get_stats(), "获取仪表盘统计成功")


@router.get("/room-status")
def get_room_status_summary(db: Session = Depends(get_db)):
    return success(DashboardService(db).get_room_status_summary(), "获取房态统计成功")


@router.get("/service-requests-summary")
def get_service_requests_summary(db: Session = Depends(get_db)):
    return success(DashboardService(db).get_service_request_summary(), "获取服务请求统计成功")


@router.get("/revenue")
def get_revenue_stats(db: Session = Depends(get_db)):
    return success(DashboardService(db).get_revenue_stats(), "获取营收统计成功")
