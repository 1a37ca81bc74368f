"""
Pydantic 模式定义
用于 API 请求验证和响应投影

状态字段均为普通字符串，不做枚举校验（约定取值见 entities.py）。
"""
from datetime import datetime
from typing import Optional, List, Any
from pydantic import BaseModel, Field, EmailStr, ConfigDict


# ============== 分页 ==============

class PaginationMeta(BaseModel):
    page: int
    page_size: int
    total: int
    total_pages: int


# ============== 客人 Schemas ==============

class GuestBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    phone: str = Field(..., min_length=1, max_length=30)
    nationality: str = Field(..., min_length=1, max_length=50)
    id_type: str = Field(..., min_length=1, max_length=50)
    id_number: str = Field(..., min_length=1, max_length=50)


class GuestCreate(GuestBase):
    join_date: Optional[datetime] = None


class GuestUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=30)
    nationality: Optional[str] = Field(None, max_length=50)
    id_type: Optional[str] = Field(None, max_length=50)
    id_number: Optional[str] = Field(None, max_length=50)
    join_date: Optional[datetime] = None


class GuestResponse(BaseModel):
    id: int
    name: str
    email: str
    phone: Optional[str] = None
    nationality: Optional[str] = None
    id_type: Optional[str] = None
    id_number: Optional[str] = None
    join_date: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class GuestPreferencesUpdate(BaseModel):
    """偏好写入，列表元素可以是任意 JSON 值"""
    room_floors: Optional[List[Any]] = None
    meal_types: Optional[List[Any]] = None
    room_types: Optional[List[Any]] = None
    special_requests: Optional[List[Any]] = None


class GuestPreferencesResponse(BaseModel):
    id: Optional[int] = None
    room_floors: List[str] = []
    meal_types: List[str] = []
    room_types: List[str] = []
    special_requests: List[str] = []


class GuestAIInsightsUpdate(BaseModel):
    meal_preference: Optional[str] = None
    room_preference: Optional[str] = None
    service_pattern: Optional[str] = None
    risk_score: Optional[str] = None
    recommendations: Optional[List[Any]] = None
    complaints: Optional[List[Any]] = None


class GuestAIInsightsResponse(BaseModel):
    id: Optional[int] = None
    meal_preference: str = ""
    room_preference: str = ""
    service_pattern: str = ""
    risk_score: str = ""
    recommendations: List[str] = []
    complaints: List[str] = []


class GuestStatisticsResponse(BaseModel):
    total_stays: int = 0
    total_spent: float = 0
    average_spend: float = 0
    last_visit: Optional[datetime] = None
    most_common_room: str = ""


class ServiceUsageResponse(BaseModel):
    type: str
    count: int
    label: str


# ============== 房间 Schemas ==============

class RoomBase(BaseModel):
    room_number: str = Field(..., min_length=1, max_length=10)
    room_type: str = Field(..., min_length=1, max_length=50)
    floor: int
    capacity: int = Field(default=2, ge=1)
    price_per_night: float = Field(..., ge=0)


class RoomCreate(RoomBase):
    status: str = Field(default="available", min_length=1)


class RoomUpdate(BaseModel):
    room_number: Optional[str] = Field(None, min_length=1, max_length=10)
    room_type: Optional[str] = Field(None, min_length=1, max_length=50)
    floor: Optional[int] = None
    capacity: Optional[int] = Field(None, ge=1)
    price_per_night: Optional[float] = Field(None, ge=0)
    status: Optional[str] = Field(None, min_length=1)


class RoomStatusUpdate(BaseModel):
    status: str = Field(..., min_length=1)


class RoomResponse(RoomBase):
    id: int
    status: str
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


# ============== 预订 Schemas ==============

class ReservationCreate(BaseModel):
    guest_id: int = Field(..., gt=0)
    room_id: int = Field(..., gt=0)
    check_in_date: datetime
    check_out_date: datetime
    # 未提供时按 房价 x 晚数 计算
    total_price: Optional[float] = Field(None, ge=0)
    paid_amount: float = Field(default=0, ge=0)
    status: Optional[str] = None
    booking_id: Optional[str] = Field(None, min_length=1, max_length=32)


class ReservationUpdate(BaseModel):
    guest_id: Optional[int] = Field(None, gt=0)
    room_id: Optional[int] = Field(None, gt=0)
    check_in_date: Optional[datetime] = None
    check_out_date: Optional[datetime] = None
    total_price: Optional[float] = Field(None, ge=0)
    paid_amount: Optional[float] = Field(None, ge=0)
    status: Optional[str] = Field(None, min_length=1)
    booking_id: Optional[str] = Field(None, min_length=1, max_length=32)


class ReservationResponse(BaseModel):
    id: int
    booking_id: str
    guest_id: int
    room_id: int
    check_in_date: datetime
    check_out_date: datetime
    nights: int
    total_price: float
    paid_amount: float
    status: str
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


# ============== 服务请求 Schemas ==============

class ServiceRequestCreate(BaseModel):
    reservation_id: int = Field(..., gt=0)
    guest_id: int = Field(..., gt=0)
    service_type: str = Field(..., min_length=1, max_length=50)
    priority: str = Field(..., min_length=1, max_length=20)
    description: str = Field(..., min_length=1)
    notes: str = ""
    assigned_to: str = ""


class ServiceRequestUpdate(BaseModel):
    service_type: Optional[str] = Field(None, min_length=1, max_length=50)
    status: Optional[str] = Field(None, min_length=1)
    priority: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    notes: Optional[str] = None
    assigned_to: Optional[str] = None


class ServiceRequestResponse(BaseModel):
    id: int
    reservation_id: int
    guest_id: int
    service_type: str
    status: str
    priority: str
    description: Optional[str] = ""
    notes: Optional[str] = ""
    assigned_to: Optional[str] = ""
    requested_at: datetime
    completed_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


# ============== 送餐订单 Schemas ==============

class RoomServiceOrderItemCreate(BaseModel):
    menu_item_id: int = Field(..., gt=0)
    quantity: int = Field(..., ge=1)


class RoomServiceOrderCreate(BaseModel):
    reservation_id: int = Field(..., gt=0)
    guest_id: int = Field(..., gt=0)
    items: List[RoomServiceOrderItemCreate] = Field(..., min_length=1)
    special_notes: str = ""


class RoomServiceOrderUpdate(BaseModel):
    status: Optional[str] = Field(None, min_length=1)
    special_notes: Optional[str] = None


class OrderStatusUpdate(BaseModel):
    status: str = Field(..., min_length=1)


class RoomServiceOrderItemResponse(BaseModel):
    id: int
    name: str
    price: float
    quantity: int


class RoomServiceOrderResponse(BaseModel):
    id: int
    order_id: str
    reservation_id: int
    guest_id: int
    items: List[RoomServiceOrderItemResponse]
    subtotal: float
    delivery_fee: float
    total: float
    status: str
    special_notes: Optional[str] = ""
    ordered_at: datetime
    delivered_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


# ============== 客房清洁 Schemas ==============

class HousekeepingRequestCreate(BaseModel):
    reservation_id: int = Field(..., gt=0)
    guest_id: int = Field(..., gt=0)
    request_type: str = Field(..., min_length=1, max_length=50)
    description: str = Field(..., min_length=1)
    schedule_time: str = ""


class HousekeepingRequestUpdate(BaseModel):
    request_type: Optional[str] = Field(None, min_length=1, max_length=50)
    description: Optional[str] = None
    schedule_time: Optional[str] = None
    status: Optional[str] = Field(None, min_length=1)
    assigned_to: Optional[str] = None


class HousekeepingRequestResponse(BaseModel):
    id: int
    reservation_id: int
    guest_id: int
    request_type: str
    description: Optional[str] = ""
    schedule_time: Optional[str] = ""
    status: str
    assigned_to: Optional[str] = ""
    requested_at: datetime
    completed_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


# ============== 维修 Schemas ==============

class MaintenanceIssueCreate(BaseModel):
    reservation_id: int = Field(..., gt=0)
    guest_id: int = Field(..., gt=0)
    issue_type: str = Field(..., min_length=1, max_length=50)
    description: str = Field(..., min_length=1)
    priority: str = Field(default="medium", min_length=1)


class MaintenanceIssueUpdate(BaseModel):
    issue_type: Optional[str] = Field(None, min_length=1, max_length=50)
    description: Optional[str] = None
    status: Optional[str] = Field(None, min_length=1)
    priority: Optional[str] = Field(None, min_length=1)
    assigned_to: Optional[str] = None
    notes: Optional[str] = None


class MaintenanceIssueResponse(BaseModel):
    id: int
    reservation_id: int
    guest_id: int
    issue_type: str
    description: Optional[str] = ""
    notes: Optional[str] = ""
    status: str
    priority: str
    assigned_to: Optional[str] = ""
    reported_at: datetime
    resolved_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


# ============== 菜单 Schemas ==============

class MenuItemCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: str = ""
    price: float = Field(..., gt=0)
    category: str = Field(..., min_length=1, max_length=50)
    available: bool = True


class MenuItemUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None
    price: Optional[float] = Field(None, gt=0)
    category: Optional[str] = Field(None, min_length=1, max_length=50)
    available: Optional[bool] = None


class MenuItemResponse(BaseModel):
    id: int
    name: str
    description: Optional[str] = ""
    price: float
    category: str
    available: bool
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


# ============== 员工 Schemas ==============

class StaffCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    phone: str = ""
    role: str = Field(..., min_length=1, max_length=30)
    status: str = Field(default="active", min_length=1)


class StaffUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    role: Optional[str] = Field(None, min_length=1, max_length=30)
    status: Optional[str] = Field(None, min_length=1)


class StaffResponse(BaseModel):
    id: int
    name: str
    email: str
    phone: Optional[str] = ""
    role: str
    status: str
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


# ============== 入住 / 退房 Schemas ==============

class CheckInCreate(BaseModel):
    reservation_id: int = Field(..., gt=0)
    guest_id: int = Field(..., gt=0)
    room_id: int = Field(..., gt=0)
    check_in_time: Optional[datetime] = None
    id_verified: bool = False
    key_issued: bool = False
    documents_signed: bool = False
    notes: str = ""


class CheckInUpdate(BaseModel):
    check_in_time: Optional[datetime] = None
    id_verified: Optional[bool] = None
    key_issued: Optional[bool] = None
    documents_signed: Optional[bool] = None
    notes: Optional[str] = None


class CheckInResponse(BaseModel):
    id: int
    reservation_id: int
    guest_id: int
    room_id: int
    check_in_time: datetime
    id_verified: bool
    key_issued: bool
    documents_signed: bool
    notes: Optional[str] = ""
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class CheckOutCreate(BaseModel):
    reservation_id: int = Field(..., gt=0)
    guest_id: int = Field(..., gt=0)
    room_id: int = Field(..., gt=0)
    check_out_time: Optional[datetime] = None
    room_condition: str = Field(default="good", min_length=1)
    charges: float = Field(default=0, ge=0)
    notes: str = ""


class CheckOutUpdate(BaseModel):
    check_out_time: Optional[datetime] = None
    room_condition: Optional[str] = Field(None, min_length=1)
    charges: Optional[float] = Field(None, ge=0)
    notes: Optional[str] = None


class CheckOutResponse(BaseModel):
    id: int
    reservation_id: int
    guest_id: int
    room_id: int
    check_out_time: datetime
    room_condition: str
    charges: float
    notes: Optional[str] = ""
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


# ============== 详情投影 ==============

class GuestDetailResponse(GuestResponse):
    """客人详情，包含历史、偏好、画像与统计"""
    reservations: List[ReservationResponse] = []
    preferences: GuestPreferencesResponse
    ai_insights: GuestAIInsightsResponse
    statistics: GuestStatisticsResponse
    service_usage: List[ServiceUsageResponse] = []


class ReservationDetailResponse(BaseModel):
    id: int
    booking_id: str
    guest: GuestResponse
    room: RoomResponse
    check_in_date: datetime
    check_out_date: datetime
    check_in_time: str
    check_out_time: str
    nights: int
    total_price: float
    paid_amount: float
    status: str
    preferences: List[str] = []
    service_requests: List[ServiceRequestResponse] = []
    created_at: datetime
    updated_at: datetime


class ServiceRequestDetailResponse(BaseModel):
    id: int
    reservation_id: int
    guest: GuestResponse
    room: RoomResponse
    service_type: str
    status: str
    priority: str
    description: Optional[str] = ""
    notes: Optional[str] = ""
    assigned_to: Optional[str] = ""
    requested_at: datetime
    completed_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


# ============== 平板 Schemas ==============

class InRoomTabletReservationResponse(BaseModel):
    room_number: str
    room_type: str
    guest_name: str
    check_in_date: datetime
    check_out_date: datetime
    check_in_time: str
    check_out_time: str
    nights: int
    booking_id: str
    total_price: float
    paid_amount: float
    preferences: List[str] = []


class InRoomTabletMenuResponse(BaseModel):
    id: int
    name: str
    description: Optional[str] = ""
    price: float
    category: str
    available: bool
    model_config = ConfigDict(from_attributes=True)


# ============== 仪表盘 Schemas ==============

class DashboardStatsResponse(BaseModel):
    total_guests: int
    total_rooms: int
    occupied_rooms: int
    available_rooms: int
    maintenance_rooms: int
    cleaning_rooms: int
    pending_check_ins: int
    pending_check_outs: int
    pending_service_requests: int
    today_revenue: float
    month_revenue: float
    occupancy_rate: float


class RoomStatusSummaryResponse(BaseModel):
    available: int = 0
    occupied: int = 0
    maintenance: int = 0
    cleaning: int = 0


class ServiceRequestSummaryResponse(BaseModel):
    pending: int = 0
    in_progress: int = 0
    completed: int = 0
    cancelled: int = 0


class RevenueStatsResponse(BaseModel):
    today_revenue: float
    today_orders: int
    week_revenue: float
    month_revenue: float
    average_daily_revenue: float
    top_service: str
    top_service_revenue: float
