"""
目录服务
菜单和员工是独立于预订的目录数据
"""
from hotelops.models.entities import MenuItem, Staff, StaffStatus
from hotelops.services.base import CrudService, Page


class MenuItemService(CrudService[MenuItem]):
    """送餐菜单"""

    model = MenuItem
    entity_name = "菜品"

    def _ordering(self) -> tuple:
        return (MenuItem.category.asc(), MenuItem.name.asc(), MenuItem.id.asc())

    def list_by_category(self, category: str, page: int = 1, page_size: int = 10) -> Page[MenuItem]:
        return self.list({"category": category}, page, page_size)

    def list_available(self, page: int = 1, page_size: int = 10) -> Page[MenuItem]:
        """在售菜品"""
        return self.list({"available": True}, page, page_size)


class StaffService(CrudService[Staff]):
    """员工名册"""

    model = Staff
    entity_name = "员工"
    unique_fields = ("email",)
    known_statuses = tuple(s.value for s in StaffStatus)

    def list_by_role(self, role: str, page: int = 1, page_size: int = 10) -> Page[Staff]:
        return self.list({"role": role}, page, page_size)
