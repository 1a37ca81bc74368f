"""
实体定义
客人、房间、预订以及依附于预订的服务记录

状态字段统一使用普通字符串列，下面的枚举只描述约定取值，
数据库层不做约束，任何取值都可以通过更新写入。
"""
from datetime import datetime
from enum import Enum
from sqlalchemy import (
    Column, Integer, String, Float, DateTime,
    ForeignKey, Text, Boolean, JSON
)
from sqlalchemy.orm import relationship
from hotelops.database import Base


# ============== 枚举定义 ==============

class RoomStatus(str, Enum):
    """房间状态"""
    AVAILABLE = "available"
    OCCUPIED = "occupied"
    MAINTENANCE = "maintenance"
    CLEANING = "cleaning"


class ReservationStatus(str, Enum):
    """预订状态"""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CHECKED_IN = "checked-in"
    CHECKED_OUT = "checked-out"
    CANCELLED = "cancelled"


class RequestStatus(str, Enum):
    """服务请求 / 客房清洁请求状态"""
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class MaintenanceStatus(str, Enum):
    """维修问题状态"""
    REPORTED = "reported"
    IN_PROGRESS = "in-progress"
    RESOLVED = "resolved"
    CANCELLED = "cancelled"


class OrderStatus(str, Enum):
    """送餐订单状态"""
    PENDING = "pending"
    PREPARING = "preparing"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class Priority(str, Enum):
    """优先级"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ServiceType(str, Enum):
    """服务类型"""
    ROOM_SERVICE = "room-service"
    HOUSEKEEPING = "housekeeping"
    MAINTENANCE = "maintenance"
    SPECIAL_REQUESTS = "special-requests"
    TRANSPORTATION = "transportation"
    GENERAL_ASSISTANCE = "general-assistance"


class StaffRole(str, Enum):
    """员工角色"""
    MANAGER = "manager"
    HOUSEKEEPING = "housekeeping"
    MAINTENANCE = "maintenance"
    FRONT_DESK = "front-desk"
    ROOM_SERVICE = "room-service"


class StaffStatus(str, Enum):
    """员工状态"""
    ACTIVE = "active"
    INACTIVE = "inactive"


class RoomCondition(str, Enum):
    """退房时房间状况"""
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


# ============== 客人 ==============

class Guest(Base):
    """客人对象，email 唯一"""
    __tablename__ = "guests"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    phone = Column(String(30))
    nationality = Column(String(50))
    id_type = Column(String(50))                         # Passport, Driver's License ...
    id_number = Column(String(50))
    join_date = Column(DateTime, default=datetime.utcnow)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # 链接
    preferences = relationship(
        "GuestPreferences", back_populates="guest", uselist=False,
        cascade="all, delete-orphan"
    )
    ai_insights = relationship(
        "GuestAIInsights", back_populates="guest", uselist=False,
        cascade="all, delete-orphan"
    )
    reservations = relationship(
        "Reservation", back_populates="guest", cascade="all, delete-orphan"
    )
    service_requests = relationship(
        "ServiceRequest", back_populates="guest", cascade="all, delete-orphan"
    )


class GuestPreferences(Base):
    """客人偏好，由外部系统填充的 JSON 列表"""
    __tablename__ = "guest_preferences"

    id = Column(Integer, primary_key=True, index=True)
    guest_id = Column(Integer, ForeignKey("guests.id", ondelete="CASCADE"), unique=True, nullable=False)
    room_floors = Column(JSON, default=list)
    meal_types = Column(JSON, default=list)
    room_types = Column(JSON, default=list)
    special_requests = Column(JSON, default=list)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    guest = relationship("Guest", back_populates="preferences")


class GuestAIInsights(Base):
    """客人画像，由外部系统填充"""
    __tablename__ = "guest_ai_insights"

    id = Column(Integer, primary_key=True, index=True)
    guest_id = Column(Integer, ForeignKey("guests.id", ondelete="CASCADE"), unique=True, nullable=False)
    meal_preference = Column(String(255), default="")
    room_preference = Column(String(255), default="")
    service_pattern = Column(String(255), default="")
    risk_score = Column(String(20), default="low")       # low, medium, high
    recommendations = Column(JSON, default=list)
    complaints = Column(JSON, default=list)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    guest = relationship("Guest", back_populates="ai_insights")


# ============== 房间 ==============

class Room(Base):
    """房间对象，房间号唯一"""
    __tablename__ = "rooms"

    id = Column(Integer, primary_key=True, index=True)
    room_number = Column(String(10), unique=True, nullable=False, index=True)
    room_type = Column(String(50), nullable=False)       # Standard, Deluxe, Suite
    floor = Column(Integer, nullable=False)
    capacity = Column(Integer, default=2)
    price_per_night = Column(Float, nullable=False, default=0)
    status = Column(String(20), default=RoomStatus.AVAILABLE.value, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    reservations = relationship("Reservation", back_populates="room")


# ============== 预订 ==============

class Reservation(Base):
    """预订对象，booking_id 为对外展示的唯一预订号"""
    __tablename__ = "reservations"

    id = Column(Integer, primary_key=True, index=True)
    booking_id = Column(String(32), unique=True, nullable=False, index=True)
    guest_id = Column(Integer, ForeignKey("guests.id", ondelete="CASCADE"), nullable=False, index=True)
    room_id = Column(Integer, ForeignKey("rooms.id"), nullable=False, index=True)
    check_in_date = Column(DateTime, nullable=False)
    check_out_date = Column(DateTime, nullable=False)
    nights = Column(Integer, nullable=False, default=1)
    total_price = Column(Float, default=0)
    paid_amount = Column(Float, default=0)
    status = Column(String(20), default=ReservationStatus.PENDING.value, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # 链接
    guest = relationship("Guest", back_populates="reservations")
    room = relationship("Room", back_populates="reservations")
    service_requests = relationship(
        "ServiceRequest", back_populates="reservation", cascade="all, delete-orphan"
    )
    room_service_orders = relationship(
        "RoomServiceOrder", back_populates="reservation", cascade="all, delete-orphan"
    )
    housekeeping_requests = relationship(
        "HousekeepingRequest", back_populates="reservation", cascade="all, delete-orphan"
    )
    maintenance_issues = relationship(
        "MaintenanceIssue", back_populates="reservation", cascade="all, delete-orphan"
    )
    check_in = relationship(
        "CheckIn", back_populates="reservation", uselist=False, cascade="all, delete-orphan"
    )
    check_out = relationship(
        "CheckOut", back_populates="reservation", uselist=False, cascade="all, delete-orphan"
    )


# ============== 服务请求族 ==============

class ServiceRequest(Base):
    """通用服务请求"""
    __tablename__ = "service_requests"

    id = Column(Integer, primary_key=True, index=True)
    reservation_id = Column(Integer, ForeignKey("reservations.id", ondelete="CASCADE"), nullable=False, index=True)
    guest_id = Column(Integer, ForeignKey("guests.id", ondelete="CASCADE"), nullable=False, index=True)
    service_type = Column(String(50), nullable=False)
    status = Column(String(20), default=RequestStatus.PENDING.value, index=True)
    priority = Column(String(20), default=Priority.MEDIUM.value)
    description = Column(Text, default="")
    notes = Column(Text, default="")
    assigned_to = Column(String(100), default="")
    requested_at = Column(DateTime, default=datetime.utcnow)
    completed_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    reservation = relationship("Reservation", back_populates="service_requests")
    guest = relationship("Guest", back_populates="service_requests")


class RoomServiceOrder(Base):
    """客房送餐订单，items 为下单时的菜品快照"""
    __tablename__ = "room_service_orders"

    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(String(32), unique=True, nullable=False, index=True)
    reservation_id = Column(Integer, ForeignKey("reservations.id", ondelete="CASCADE"), nullable=False, index=True)
    guest_id = Column(Integer, ForeignKey("guests.id", ondelete="CASCADE"), nullable=False, index=True)
    items = Column(JSON, default=list)                   # [{id, name, price, quantity}]
    subtotal = Column(Float, default=0)
    delivery_fee = Column(Float, default=0)
    total = Column(Float, default=0)
    status = Column(String(20), default=OrderStatus.PENDING.value, index=True)
    special_notes = Column(Text, default="")
    ordered_at = Column(DateTime, default=datetime.utcnow)
    delivered_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    reservation = relationship("Reservation", back_populates="room_service_orders")
    guest = relationship("Guest")


class HousekeepingRequest(Base):
    """客房清洁请求"""
    __tablename__ = "housekeeping_requests"

    id = Column(Integer, primary_key=True, index=True)
    reservation_id = Column(Integer, ForeignKey("reservations.id", ondelete="CASCADE"), nullable=False, index=True)
    guest_id = Column(Integer, ForeignKey("guests.id", ondelete="CASCADE"), nullable=False, index=True)
    request_type = Column(String(50), nullable=False)    # cleaning, linens, schedule
    description = Column(Text, default="")
    schedule_time = Column(String(20), default="")       # morning, afternoon, immediate
    status = Column(String(20), default=RequestStatus.PENDING.value, index=True)
    assigned_to = Column(String(100), default="")
    requested_at = Column(DateTime, default=datetime.utcnow)
    completed_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    reservation = relationship("Reservation", back_populates="housekeeping_requests")
    guest = relationship("Guest")


class MaintenanceIssue(Base):
    """维修问题报告"""
    __tablename__ = "maintenance_issues"

    id = Column(Integer, primary_key=True, index=True)
    reservation_id = Column(Integer, ForeignKey("reservations.id", ondelete="CASCADE"), nullable=False, index=True)
    guest_id = Column(Integer, ForeignKey("guests.id", ondelete="CASCADE"), nullable=False, index=True)
    issue_type = Column(String(50), nullable=False)      # ac, tv, wifi, plumbing, lights, door-lock, noise, other
    description = Column(Text, default="")
    notes = Column(Text, default="")
    status = Column(String(20), default=MaintenanceStatus.REPORTED.value, index=True)
    priority = Column(String(20), default=Priority.MEDIUM.value)
    assigned_to = Column(String(100), default="")
    reported_at = Column(DateTime, default=datetime.utcnow)
    resolved_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    reservation = relationship("Reservation", back_populates="maintenance_issues")
    guest = relationship("Guest")


# ============== 独立目录 ==============

class MenuItem(Base):
    """送餐菜单项"""
    __tablename__ = "menu_items"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    description = Column(Text, default="")
    price = Column(Float, nullable=False)
    category = Column(String(50), nullable=False, index=True)   # Food, Drinks
    available = Column(Boolean, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class Staff(Base):
    """员工对象，email 唯一"""
    __tablename__ = "staff"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    phone = Column(String(30), default="")
    role = Column(String(30), nullable=False, index=True)
    status = Column(String(20), default=StaffStatus.ACTIVE.value)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


# ============== 入住 / 退房 ==============

class CheckIn(Base):
    """入住记录，与预订一对一"""
    __tablename__ = "check_ins"

    id = Column(Integer, primary_key=True, index=True)
    reservation_id = Column(Integer, ForeignKey("reservations.id", ondelete="CASCADE"), unique=True, nullable=False)
    guest_id = Column(Integer, ForeignKey("guests.id", ondelete="CASCADE"), nullable=False)
    room_id = Column(Integer, ForeignKey("rooms.id"), nullable=False)
    check_in_time = Column(DateTime, default=datetime.utcnow)
    id_verified = Column(Boolean, default=False)
    key_issued = Column(Boolean, default=False)
    documents_signed = Column(Boolean, default=False)
    notes = Column(Text, default="")
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    reservation = relationship("Reservation", back_populates="check_in")
    guest = relationship("Guest")
    room = relationship("Room")


class CheckOut(Base):
    """退房记录，与预订一对一"""
    __tablename__ = "check_outs"

    id = Column(Integer, primary_key=True, index=True)
    reservation_id = Column(Integer, ForeignKey("reservations.id", ondelete="CASCADE"), unique=True, nullable=False)
    guest_id = Column(Integer, ForeignKey("guests.id", ondelete="CASCADE"), nullable=False)
    room_id = Column(Integer, ForeignKey("rooms.id"), nullable=False)
    check_out_time = Column(DateTime, default=datetime.utcnow)
    room_condition = Column(String(20), default=RoomCondition.GOOD.value)
    charges = Column(Float, default=0)
    notes = Column(Text, default="")
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    reservation = relationship("Reservation", back_populates="check_out")
    guest = relationship("Guest")
    room = relationship("Room")
