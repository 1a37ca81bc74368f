"""
客房送餐订单服务
下单时校验菜品、快照价格并计算金额
"""
import logging
import uuid
from datetime import datetime
from typing import Any, Dict, List, Tuple

from hotelops.config import settings
from hotelops.exceptions import NotFoundError, ValidationError
from hotelops.models.entities import RoomServiceOrder, OrderStatus, MenuItem
from hotelops.services.request_family import RequestFamilyService

logger = logging.getLogger(__name__)


def generate_order_id() -> str:
    """生成订单号 RS-YYYYMMDD-XXXXXX"""
    return f"RS-{datetime.utcnow():%Y%m%d}-{uuid.uuid4().hex[:6].upper()}"


def calculate_order_totals(items: List[Dict[str, Any]], delivery_fee: float) -> Tuple[float, float, float]:
    """返回 (小计, 配送费, 总计)，均保留两位小数"""
    subtotal = round(sum(item["price"] * item["quantity"] for item in items), 2)
    delivery_fee = round(delivery_fee, 2)
    return subtotal, delivery_fee, round(subtotal + delivery_fee, 2)


class RoomServiceOrderService(RequestFamilyService[RoomServiceOrder]):
    """送餐订单"""

    model = RoomServiceOrder
    entity_name = "送餐订单"
    unique_fields = ("order_id",)
    known_statuses = tuple(s.value for s in OrderStatus)
    done_status = OrderStatus.DELIVERED.value
    done_field = "delivered_at"

    def _prepare_create(self, values: Dict[str, Any]) -> Dict[str, Any]:
        values = super()._prepare_create(values)

        line_items = [self._snapshot_item(item) for item in values["items"]]
        subtotal, delivery_fee, total = calculate_order_totals(line_items, settings.DELIVERY_FEE)

        values.update(
            order_id=generate_order_id(),
            items=line_items,
            subtotal=subtotal,
            delivery_fee=delivery_fee,
            total=total,
            status=OrderStatus.PENDING.value,
        )
        return values

    def _snapshot_item(self, item: Dict[str, Any]) -> Dict[str, Any]:
        """菜品必须存在且在售，记录下单时的名称和价格"""
        menu_item = self.db.get(MenuItem, item["menu_item_id"])
        if menu_item is None:
            raise NotFoundError(f"菜品 {item['menu_item_id']} 不存在")
        if not menu_item.available:
            raise ValidationError(
                f"菜品 '{menu_item.name}' 暂不供应",
                details=[{"field": "items", "message": f"menu_item_id {menu_item.id} 不可点"}]
            )
        return {
            "id": menu_item.id,
            "name": menu_item.name,
            "price": menu_item.price,
            "quantity": item["quantity"],
        }
