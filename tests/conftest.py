"""
Pytest 配置和共享 fixtures
"""
import os

# 应用启动时会建表，测试使用内存库，避免写出数据库文件
os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from hotelops.database import Base, get_db
from hotelops.main import app
from hotelops.models import entities  # noqa: F401
from hotelops.models.entities import (
    Guest, GuestPreferences, GuestAIInsights, Room, Reservation, MenuItem, Staff
)


@pytest.fixture(scope="function")
def db_engine():
    """创建内存数据库引擎"""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(db_engine):
    """创建数据库会话"""
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture(scope="function")
def client(db_session):
    """创建测试客户端"""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# ============== 实体相关 Fixtures ==============

def make_guest(db, name="John Smith", email="john.smith@example.com"):
    guest = Guest(
        name=name,
        email=email,
        phone="+1-555-0100",
        nationality="USA",
        id_type="Passport",
        id_number="P1234567",
    )
    guest.preferences = GuestPreferences()
    guest.ai_insights = GuestAIInsights()
    db.add(guest)
    db.commit()
    db.refresh(guest)
    return guest


def make_room(db, room_number="101", room_type="Deluxe", price=150.0, status="available", floor=1):
    room = Room(
        room_number=room_number,
        room_type=room_type,
        floor=floor,
        capacity=2,
        price_per_night=price,
        status=status,
    )
    db.add(room)
    db.commit()
    db.refresh(room)
    return room


def make_reservation(db, guest, room, check_in=None, nights=2, status="confirmed",
                     total_price=None, paid_amount=0.0, booking_id=None):
    check_in = check_in or datetime.utcnow().replace(hour=14, minute=0, second=0, microsecond=0)
    reservation = Reservation(
        booking_id=booking_id or f"BK-TEST-{guest.id}-{room.id}-{check_in:%m%d%H%M%S%f}",
        guest_id=guest.id,
        room_id=room.id,
        check_in_date=check_in,
        check_out_date=check_in + timedelta(days=nights),
        nights=nights,
        total_price=total_price if total_price is not None else room.price_per_night * nights,
        paid_amount=paid_amount,
        status=status,
    )
    db.add(reservation)
    db.commit()
    db.refresh(reservation)
    return reservation


def make_menu_item(db, name="Club Sandwich", price=12.5, category="Food", available=True):
    item = MenuItem(name=name, description="", price=price, category=category, available=available)
    db.add(item)
    db.commit()
    db.refresh(item)
    return item


@pytest.fixture
def guest_factory(db_session):
    return lambda **kwargs: make_guest(db_session, **kwargs)


@pytest.fixture
def room_factory(db_session):
    return lambda **kwargs: make_room(db_session, **kwargs)


@pytest.fixture
def reservation_factory(db_session):
    return lambda guest, room, **kwargs: make_reservation(db_session, guest, room, **kwargs)


@pytest.fixture
def menu_item_factory(db_session):
    return lambda **kwargs: make_menu_item(db_session, **kwargs)


@pytest.fixture
def sample_guest(db_session):
    """创建测试客人"""
    return make_guest(db_session)


@pytest.fixture
def sample_room(db_session):
    """创建测试房间"""
    return make_room(db_session)


@pytest.fixture
def sample_reservation(db_session, sample_guest, sample_room):
    """创建测试预订（今天入住，住两晚）"""
    return make_reservation(db_session, sample_guest, sample_room)


@pytest.fixture
def sample_menu_items(db_session):
    """创建测试菜品：两个在售，一个停售"""
    return [
        make_menu_item(db_session, "Club Sandwich", 12.5, "Food"),
        make_menu_item(db_session, "Orange Juice", 4.25, "Drinks"),
        make_menu_item(db_session, "Lobster", 45.0, "Food", available=False),
    ]


@pytest.fixture
def sample_staff(db_session):
    """创建测试员工"""
    staff = Staff(
        name="Alice Morgan",
        email="alice@hotelops.com",
        phone="+1-555-0101",
        role="manager",
        status="active",
    )
    db_session.add(staff)
    db_session.commit()
    db_session.refresh(staff)
    return staff
