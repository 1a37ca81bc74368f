"""
菜单与员工路由
"""
from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from hotelops.database import get_db
from hotelops.models.schemas import (
    MenuItemCreate, MenuItemUpdate, MenuItemResponse,
    StaffCreate, StaffUpdate, StaffResponse
)
from hotelops.routers.common import PageParams, page_params, paginated, success
from hotelops.services.catalog_service import MenuItemService, StaffService

menu_router = APIRouter(prefix="/menu-items", tags=["菜单管理"])
staff_router = APIRouter(prefix="/staff", tags=["员工管理"])


# ============== 菜单 ==============

@menu_router.get("")
def list_menu_items(
    category: Optional[str] = None,
    available: Optional[bool] = None,
    paging: PageParams = Depends(page_params),
    db: Session = Depends(get_db)
):
    result = MenuItemService(db).list(
        {"category": category, "available": available}, paging.page, paging.page_size
    )
    return paginated(result, MenuItemResponse, "获取菜单成功")


@menu_router.get("/category/{category}")
def list_menu_items_by_category(
    category: str,
    paging: PageParams = Depends(page_params),
    db: Session = Depends(get_db)
):
    result = MenuItemService(db).list_by_category(category, paging.page, paging.page_size)
    return paginated(result, MenuItemResponse, "获取菜单成功")


@menu_router.get("/{item_id}")
def get_menu_item(item_id: int, db: Session = Depends(get_db)):
    item = MenuItemService(db).get(item_id)
    return success(MenuItemResponse.model_validate(item), "获取菜品成功")


@menu_router.post("", status_code=status.HTTP_201_CREATED)
def create_menu_item(data: MenuItemCreate, db: Session = Depends(get_db)):
    item = MenuItemService(db).create(data)
    return success(MenuItemResponse.model_validate(item), "菜品创建成功")


@menu_router.put("/{item_id}")
def update_menu_item(item_id: int, data: MenuItemUpdate, db: Session = Depends(get_db)):
    item = MenuItemService(db).update(item_id, data)
    return success(MenuItemResponse.model_validate(item), "菜品更新成功")


@menu_router.delete("/{item_id}")
def delete_menu_item(item_id: int, db: Session = Depends(get_db)):
    MenuItemService(db).delete(item_id)
    return success(message="菜品已删除")


# ============== 员工 ==============

@staff_router.get("")
def list_staff(
    role: Optional[str] = None,
    status: Optional[str] = None,
    paging: PageParams = Depends(page_params),
    db: Session = Depends(get_db)
):
    result = StaffService(db).list({"role": role, "status": status}, paging.page, paging.page_size)
    return paginated(result, StaffResponse, "获取员工列表成功")


@staff_router.get("/role/{role}")
def list_staff_by_role(
    role: str,
    paging: PageParams = Depends(page_params),
    db: Session = Depends(get_db)
):
    result = StaffService(db).list_by_role(role, paging.page, paging.page_size)
    return paginated(result, StaffResponse, "获取员工列表成功")


@staff_router.get("/{staff_id}")
def get_staff(staff_id: int, db: Session = Depends(get_db)):
    staff = StaffService(db).get(staff_id)
    return success(StaffResponse.model_validate(staff), "获取员工成功")


@staff_router.post("", status_code=status.HTTP_201_CREATED)
def create_staff(data: StaffCreate, db: Session = Depends(get_db)):
    staff = StaffService(db).create(data)
    return success(StaffResponse.model_validate(staff), "员工创建成功")


@staff_router.put("/{staff_id}")
def update_staff(staff_id: int, data: StaffUpdate, db: Session = Depends(get_db)):
    staff = StaffService(db).update(staff_id, data)
    return success(StaffResponse.model_validate(staff), "员工更新成功")


@staff_router.delete("/{staff_id}")
def delete_staff(staff_id: int, db: Session = Depends(get_db)):
    StaffService(db).delete(staff_id)
    return success(message="员工已删除")
