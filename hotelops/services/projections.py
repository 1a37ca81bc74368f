"""
响应投影
把实体组装成 API 返回的详情视图；JSON 字段统一展平为字符串列表
"""
import json
from collections import Counter
from datetime import datetime
from typing import Any, Iterable, List, Optional

from hotelops.config import settings
from hotelops.models.entities import (
    Guest, GuestAIInsights, GuestPreferences, Reservation, ReservationStatus,
    ServiceRequest
)
from hotelops.models.schemas import (
    GuestAIInsightsResponse, GuestDetailResponse, GuestPreferencesResponse,
    GuestResponse, GuestStatisticsResponse, InRoomTabletReservationResponse,
    ReservationDetailResponse, ReservationResponse, RoomResponse,
    ServiceRequestDetailResponse, ServiceRequestResponse, ServiceUsageResponse
)

# 对象元素优先取这些字段作为展示文本
LABEL_KEYS = ("name", "value", "label", "text")


# ============== JSON 展平 ==============

def flatten_json_list(raw: Any) -> List[str]:
    """
    把 JSON 列表展平为字符串列表

    - None -> []
    - JSON 字符串先解析，无法解析时整体作为一个元素
    - 标量转字符串，对象取 name/value/label/text，否则取其 JSON 文本
    - 嵌套列表递归展平
    """
    if raw is None:
        return []
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8")
    if isinstance(raw, str):
        if not raw.strip():
            return []
        try:
            raw = json.loads(raw)
        except ValueError:
            return [raw]
        if isinstance(raw, str):
            return [raw]

    if isinstance(raw, (list, tuple)):
        result: List[str] = []
        for item in raw:
            result.extend(_flatten_item(item))
        return result
    return _flatten_item(raw)


def _flatten_item(item: Any) -> List[str]:
    if item is None:
        return []
    if isinstance(item, (list, tuple)):
        return flatten_json_list(list(item))
    if isinstance(item, dict):
        for key in LABEL_KEYS:
            if item.get(key) not in (None, ""):
                return [str(item[key])]
        return [json.dumps(item, ensure_ascii=False, sort_keys=True)]
    if isinstance(item, bool):
        return ["true" if item else "false"]
    return [str(item)]


def flatten_preferences(preferences: Optional[GuestPreferences]) -> List[str]:
    """所有偏好列表合并为一个列表"""
    if preferences is None:
        return []
    return (
        flatten_json_list(preferences.room_floors)
        + flatten_json_list(preferences.meal_types)
        + flatten_json_list(preferences.room_types)
        + flatten_json_list(preferences.special_requests)
    )


def preferences_view(preferences: Optional[GuestPreferences]) -> GuestPreferencesResponse:
    if preferences is None:
        return GuestPreferencesResponse()
    return GuestPreferencesResponse(
        id=preferences.id,
        room_floors=flatten_json_list(preferences.room_floors),
        meal_types=flatten_json_list(preferences.meal_types),
        room_types=flatten_json_list(preferences.room_types),
        special_requests=flatten_json_list(preferences.special_requests),
    )


def ai_insights_view(insights: Optional[GuestAIInsights]) -> GuestAIInsightsResponse:
    if insights is None:
        return GuestAIInsightsResponse()
    return GuestAIInsightsResponse(
        id=insights.id,
        meal_preference=insights.meal_preference or "",
        room_preference=insights.room_preference or "",
        service_pattern=insights.service_pattern or "",
        risk_score=insights.risk_score or "",
        recommendations=flatten_json_list(insights.recommendations),
        complaints=flatten_json_list(insights.complaints),
    )


# ============== 客人统计 ==============

def guest_statistics(reservations: Iterable[Reservation]) -> GuestStatisticsResponse:
    """按未取消的预订统计入住次数、消费和常住房型"""
    stays = [
        r for r in reservations
        if r.status != ReservationStatus.CANCELLED.value
    ]
    if not stays:
        return GuestStatisticsResponse()

    stays.sort(key=lambda r: (r.check_in_date, r.id))
    total_spent = round(sum(r.total_price or 0 for r in stays), 2)

    # 次数相同时取最早入住过的房型
    room_types = [r.room.room_type for r in stays if r.room is not None]
    counts = Counter(room_types)
    most_common_room = ""
    if counts:
        top = max(counts.values())
        most_common_room = next(t for t in room_types if counts[t] == top)

    return GuestStatisticsResponse(
        total_stays=len(stays),
        total_spent=total_spent,
        average_spend=round(total_spent / len(stays), 2),
        last_visit=stays[-1].check_in_date,
        most_common_room=most_common_room,
    )


def humanize_label(value: str) -> str:
    """room-service -> Room Service"""
    words = value.replace("_", "-").split("-")
    return " ".join(w.capitalize() for w in words if w)


def service_usage(requests: Iterable[ServiceRequest]) -> List[ServiceUsageResponse]:
    """按服务类型分组计数，数量多的在前"""
    counts = Counter(r.service_type for r in requests)
    ordered = sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
    return [
        ServiceUsageResponse(type=service_type, count=count, label=humanize_label(service_type))
        for service_type, count in ordered
    ]


# ============== 详情视图 ==============

def guest_detail(guest: Guest) -> GuestDetailResponse:
    reservations = sorted(
        guest.reservations, key=lambda r: (r.check_in_date, r.id), reverse=True
    )
    base = GuestResponse.model_validate(guest).model_dump()
    return GuestDetailResponse(
        **base,
        reservations=[ReservationResponse.model_validate(r) for r in reservations],
        preferences=preferences_view(guest.preferences),
        ai_insights=ai_insights_view(guest.ai_insights),
        statistics=guest_statistics(guest.reservations),
        service_usage=service_usage(guest.service_requests),
    )


def _clock(value: Optional[datetime], default: str) -> str:
    return value.strftime("%H:%M") if value is not None else default


def stay_times(reservation: Reservation) -> tuple:
    """实际入住/退房时间，未办理时取酒店默认时间"""
    check_in = reservation.check_in.check_in_time if reservation.check_in else None
    check_out = reservation.check_out.check_out_time if reservation.check_out else None
    return (
        _clock(check_in, settings.DEFAULT_CHECK_IN_TIME),
        _clock(check_out, settings.DEFAULT_CHECK_OUT_TIME),
    )


def reservation_detail(reservation: Reservation) -> ReservationDetailResponse:
    check_in_time, check_out_time = stay_times(reservation)
    requests = sorted(reservation.service_requests, key=lambda r: r.id)
    return ReservationDetailResponse(
        id=reservation.id,
        booking_id=reservation.booking_id,
        guest=GuestResponse.model_validate(reservation.guest),
        room=RoomResponse.model_validate(reservation.room),
        check_in_date=reservation.check_in_date,
        check_out_date=reservation.check_out_date,
        check_in_time=check_in_time,
        check_out_time=check_out_time,
        nights=reservation.nights,
        total_price=reservation.total_price or 0,
        paid_amount=reservation.paid_amount or 0,
        status=reservation.status,
        preferences=flatten_preferences(reservation.guest.preferences),
        service_requests=[ServiceRequestResponse.model_validate(r) for r in requests],
        created_at=reservation.created_at,
        updated_at=reservation.updated_at,
    )


def service_request_detail(request: ServiceRequest) -> ServiceRequestDetailResponse:
    base = ServiceRequestResponse.model_validate(request).model_dump(exclude={"guest_id"})
    return ServiceRequestDetailResponse(
        **base,
        guest=GuestResponse.model_validate(request.guest),
        room=RoomResponse.model_validate(request.reservation.room),
    )


def tablet_reservation_view(reservation: Reservation) -> InRoomTabletReservationResponse:
    """房内平板展示的预订信息"""
    check_in_time, check_out_time = stay_times(reservation)
    return InRoomTabletReservationResponse(
        room_number=reservation.room.room_number,
        room_type=reservation.room.room_type,
        guest_name=reservation.guest.name,
        check_in_date=reservation.check_in_date,
        check_out_date=reservation.check_out_date,
        check_in_time=check_in_time,
        check_out_time=check_out_time,
        nights=reservation.nights,
        booking_id=reservation.booking_id,
        total_price=reservation.total_price or 0,
        paid_amount=reservation.paid_amount or 0,
        preferences=flatten_preferences(reservation.guest.preferences),
    )
