"""
Tests for hotelops/init_data.py
"""
from hotelops.init_data import seed, room_layout, MENU, STAFF
from hotelops.models.entities import Room, MenuItem, Staff


def test_seed_creates_catalog(db_session):
    stats = seed(db_session)

    assert stats == {"rooms": len(room_layout()), "menu_items": len(MENU), "staff": len(STAFF)}
    assert db_session.query(Room).filter(Room.status == "available").count() == 30
    assert db_session.query(Room).filter(Room.room_type == "Suite").count() == 3


def test_seed_is_idempotent(db_session):
    seed(db_session)

    stats = seed(db_session)

    assert stats == {"rooms": 0, "menu_items": 0, "staff": 0}
    assert db_session.query(MenuItem).count() == len(MENU)
    assert db_session.query(Staff).count() == len(STAFF)
