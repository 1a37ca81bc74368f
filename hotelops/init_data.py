"""
初始化数据脚本
创建：房间、送餐菜单、员工名册

用法：
  python -m hotelops.init_data

重复执行只补齐缺失的数据，不会覆盖已有记录
"""
from hotelops.database import SessionLocal, init_db
from hotelops.models.entities import (
    Room, RoomStatus, MenuItem, Staff, StaffRole, StaffStatus
)

# 房型 -> (每晚价格, 容纳人数)
ROOM_TYPES = {
    "Standard": (120.0, 2),
    "Deluxe": (180.0, 2),
    "Suite": (320.0, 4),
}

MENU = [
    ("Club Sandwich", "Triple-decker with chicken, bacon and fries", 16.5, "Food"),
    ("Caesar Salad", "Romaine, parmesan, croutons", 12.0, "Food"),
    ("Margherita Pizza", "Tomato, mozzarella, basil", 18.0, "Food"),
    ("Grilled Salmon", "With seasonal vegetables", 28.0, "Food"),
    ("Beef Burger", "Cheddar, pickles, brioche bun", 21.0, "Food"),
    ("Continental Breakfast", "Pastries, fruit, coffee or tea", 19.5, "Breakfast"),
    ("Fresh Orange Juice", "", 6.0, "Drinks"),
    ("Espresso", "", 4.0, "Drinks"),
    ("Sparkling Water", "750ml", 5.0, "Drinks"),
    ("House Red Wine", "Glass", 11.0, "Drinks"),
]

STAFF = [
    ("Alice Morgan", "alice.morgan@hotelops.com", "+1-555-0101", StaffRole.MANAGER),
    ("Ben Carter", "ben.carter@hotelops.com", "+1-555-0102", StaffRole.FRONT_DESK),
    ("Chloe Diaz", "chloe.diaz@hotelops.com", "+1-555-0103", StaffRole.FRONT_DESK),
    ("Daniel Evans", "daniel.evans@hotelops.com", "+1-555-0104", StaffRole.HOUSEKEEPING),
    ("Emma Foster", "emma.foster@hotelops.com", "+1-555-0105", StaffRole.HOUSEKEEPING),
    ("Frank Green", "frank.green@hotelops.com", "+1-555-0106", StaffRole.MAINTENANCE),
    ("Grace Hall", "grace.hall@hotelops.com", "+1-555-0107", StaffRole.ROOM_SERVICE),
]


def room_layout():
    """2-4 楼每层 10 间（如 201-210）：01-05 标准间，06-09 豪华间，10 套房"""
    layout = []
    for floor in range(2, 5):
        for i in range(1, 11):
            if i <= 5:
                room_type = "Standard"
            elif i <= 9:
                room_type = "Deluxe"
            else:
                room_type = "Suite"
            layout.append((f"{floor}{i:02d}", floor, room_type))
    return layout


def init_rooms(db) -> int:
    """初始化房间"""
    created = 0
    for room_number, floor, room_type in room_layout():
        existing = db.query(Room).filter(Room.room_number == room_number).first()
        if existing:
            continue
        price, capacity = ROOM_TYPES[room_type]
        db.add(Room(
            room_number=room_number,
            room_type=room_type,
            floor=floor,
            capacity=capacity,
            price_per_night=price,
            status=RoomStatus.AVAILABLE.value,
        ))
        created += 1

    db.commit()
    total = db.query(Room).count()
    print(f"房间初始化完成: 新增 {created} 间，共 {total} 间")
    return created


def init_menu(db) -> int:
    """初始化送餐菜单"""
    created = 0
    for name, description, price, category in MENU:
        existing = db.query(MenuItem).filter(
            MenuItem.name == name, MenuItem.category == category
        ).first()
        if existing:
            continue
        db.add(MenuItem(
            name=name, description=description, price=price,
            category=category, available=True
        ))
        created += 1

    db.commit()
    print(f"菜单初始化完成: 新增 {created} 项")
    return created


def init_staff(db) -> int:
    """初始化员工"""
    created = 0
    for name, email, phone, role in STAFF:
        if db.query(Staff).filter(Staff.email == email).first():
            continue
        db.add(Staff(
            name=name, email=email, phone=phone,
            role=role.value, status=StaffStatus.ACTIVE.value
        ))
        created += 1

    db.commit()
    print(f"员工初始化完成: 新增 {created} 人")
    return created


def seed(db) -> dict:
    """执行全部初始化，返回各类新增数量"""
    return {
        "rooms": init_rooms(db),
        "menu_items": init_menu(db),
        "staff": init_staff(db),
    }


def main():
    """主函数"""
    print("=" * 50)
    print("HotelOps 初始化数据")
    print("=" * 50)

    init_db()
    print("数据库表创建完成")

    db = SessionLocal()
    try:
        stats = seed(db)
        print("=" * 50)
        print(f"初始化完成！{stats}")
        print("=" * 50)
    finally:
        db.close()


if __name__ == '__main__':
    main()
