"""
仪表盘服务
请求时实时聚合房态、待办和营收，不做缓存

营收口径：预订已付金额（按创建时间）+ 未取消送餐订单总额（按下单时间）
"""
import logging
from collections import defaultdict
from datetime import datetime, timedelta
from typing import Dict, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Session

from hotelops.models.entities import (
    Guest, Room, RoomStatus, Reservation, ReservationStatus, ServiceRequest,
    RequestStatus, RoomServiceOrder, OrderStatus
)
from hotelops.models.schemas import (
    DashboardStatsResponse, RoomStatusSummaryResponse,
    ServiceRequestSummaryResponse, RevenueStatsResponse
)

logger = logging.getLogger(__name__)


class DashboardService:
    """仪表盘聚合"""

    def __init__(self, db: Session, now: Optional[datetime] = None):
        self.db = db
        self.now = now or datetime.utcnow()

    # ============== 时间窗口 ==============

    @property
    def today_start(self) -> datetime:
        return self.now.replace(hour=0, minute=0, second=0, microsecond=0)

    @property
    def week_start(self) -> datetime:
        """本周一零点"""
        return self.today_start - timedelta(days=self.today_start.weekday())

    @property
    def month_start(self) -> datetime:
        return self.today_start.replace(day=1)

    @property
    def tomorrow_start(self) -> datetime:
        return self.today_start + timedelta(days=1)

    # ============== 房态 ==============

    def _room_counts(self) -> Dict[str, int]:
        rows = (
            self.db.query(Room.status, func.count(Room.id))
            .group_by(Room.status)
            .all()
        )
        return {status: count for status, count in rows}

    def get_room_status_summary(self) -> RoomStatusSummaryResponse:
        counts = self._room_counts()
        return RoomStatusSummaryResponse(
            available=counts.get(RoomStatus.AVAILABLE.value, 0),
            occupied=counts.get(RoomStatus.OCCUPIED.value, 0),
            maintenance=counts.get(RoomStatus.MAINTENANCE.value, 0),
            cleaning=counts.get(RoomStatus.CLEANING.value, 0),
        )

    def get_service_request_summary(self) -> ServiceRequestSummaryResponse:
        rows = (
            self.db.query(ServiceRequest.status, func.count(ServiceRequest.id))
            .group_by(ServiceRequest.status)
            .all()
        )
        counts = {status: count for status, count in rows}
        return ServiceRequestSummaryResponse(
            pending=counts.get(RequestStatus.PENDING.value, 0),
            in_progress=counts.get(RequestStatus.IN_PROGRESS.value, 0),
            completed=counts.get(RequestStatus.COMPLETED.value, 0),
            cancelled=counts.get(RequestStatus.CANCELLED.value, 0),
        )

    # ============== 营收 ==============

    def _reservation_revenue(self, start: datetime, end: datetime) -> float:
        total = (
            self.db.query(func.coalesce(func.sum(Reservation.paid_amount), 0))
            .filter(Reservation.created_at >= start, Reservation.created_at < end)
            .scalar()
        )
        return float(total or 0)

    def _orders_in(self, start: datetime, end: datetime):
        return self.db.query(RoomServiceOrder).filter(
            RoomServiceOrder.ordered_at >= start,
            RoomServiceOrder.ordered_at < end,
            RoomServiceOrder.status != OrderStatus.CANCELLED.value,
        )

    def _order_revenue(self, start: datetime, end: datetime) -> float:
        total = (
            self._orders_in(start, end)
            .with_entities(func.coalesce(func.sum(RoomServiceOrder.total), 0))
            .scalar()
        )
        return float(total or 0)

    def revenue_between(self, start: datetime, end: datetime) -> float:
        return round(self._reservation_revenue(start, end) + self._order_revenue(start, end), 2)

    def _top_menu_item(self, start: datetime, end: datetime) -> Tuple[str, float]:
        """窗口内营收最高的菜品，按订单快照的价格计算"""
        revenue: Dict[str, float] = defaultdict(float)
        for order in self._orders_in(start, end).all():
            for item in order.items or []:
                name = item.get("name") or str(item.get("id", ""))
                revenue[name] += (item.get("price") or 0) * (item.get("quantity") or 0)

        if not revenue:
            return "", 0.0
        name, amount = max(revenue.items(), key=lambda kv: (kv[1], kv[0]))
        return name, round(amount, 2)

    def get_revenue_stats(self) -> RevenueStatsResponse:
        end = self.tomorrow_start
        month_revenue = self.revenue_between(self.month_start, end)
        days_elapsed = (self.today_start - self.month_start).days + 1
        top_service, top_service_revenue = self._top_menu_item(self.month_start, end)

        return RevenueStatsResponse(
            today_revenue=self.revenue_between(self.today_start, end),
            today_orders=self._orders_in(self.today_start, end).count(),
            week_revenue=self.revenue_between(self.week_start, end),
            month_revenue=month_revenue,
            average_daily_revenue=round(month_revenue / days_elapsed, 2),
            top_service=top_service,
            top_service_revenue=top_service_revenue,
        )

    # ============== 总览 ==============

    def get_stats(self) -> DashboardStatsResponse:
        room_counts = self._room_counts()
        total_rooms = sum(room_counts.values())
        occupied = room_counts.get(RoomStatus.OCCUPIED.value, 0)

        pending_check_ins = (
            self.db.query(func.count(Reservation.id))
            .filter(
                Reservation.status.in_([
                    ReservationStatus.PENDING.value,
                    ReservationStatus.CONFIRMED.value,
                ]),
                Reservation.check_in_date < self.tomorrow_start,
            )
            .scalar()
        )
        pending_check_outs = (
            self.db.query(func.count(Reservation.id))
            .filter(
                Reservation.status == ReservationStatus.CHECKED_IN.value,
                Reservation.check_out_date < self.tomorrow_start,
            )
            .scalar()
        )
        pending_requests = (
            self.db.query(func.count(ServiceRequest.id))
            .filter(ServiceRequest.status == RequestStatus.PENDING.value)
            .scalar()
        )

        stats = DashboardStatsResponse(
            total_guests=self.db.query(func.count(Guest.id)).scalar() or 0,
            total_rooms=total_rooms,
            occupied_rooms=occupied,
            available_rooms=room_counts.get(RoomStatus.AVAILABLE.value, 0),
            maintenance_rooms=room_counts.get(RoomStatus.MAINTENANCE.value, 0),
            cleaning_rooms=room_counts.get(RoomStatus.CLEANING.value, 0),
            pending_check_ins=pending_check_ins or 0,
            pending_check_outs=pending_check_outs or 0,
            pending_service_requests=pending_requests or 0,
            today_revenue=self.revenue_between(self.today_start, self.tomorrow_start),
            month_revenue=self.revenue_between(self.month_start, self.tomorrow_start),
            occupancy_rate=round(occupied / total_rooms, 4) if total_rooms else 0.0,
        )
        logger.debug(f"仪表盘统计: {stats.model_dump()}")
        return stats
