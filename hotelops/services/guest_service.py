"""
客人服务
管理 Guest 对象及其偏好、画像和入住历史
"""
import logging
from typing import Any, Dict, List

from hotelops.models.entities import (
    Guest, GuestPreferences, GuestAIInsights, Reservation
)
from hotelops.models.schemas import GuestPreferencesUpdate, GuestAIInsightsUpdate
from hotelops.services.base import CrudService, to_naive_utc

logger = logging.getLogger(__name__)


class GuestService(CrudService[Guest]):
    """客人服务"""

    model = Guest
    entity_name = "客人"
    unique_fields = ("email",)

    def _prepare_create(self, values: Dict[str, Any]) -> Dict[str, Any]:
        if values.get("join_date") is None:
            values.pop("join_date", None)
        else:
            values["join_date"] = to_naive_utc(values["join_date"])
        return values

    def _prepare_update(self, guest: Guest, values: Dict[str, Any]) -> Dict[str, Any]:
        if "join_date" in values:
            values["join_date"] = to_naive_utc(values["join_date"])
        return values

    def _build(self, values: Dict[str, Any]) -> Guest:
        # 偏好和画像随客人一起创建，内容由外部系统填充
        guest = Guest(**values)
        guest.preferences = GuestPreferences()
        guest.ai_insights = GuestAIInsights()
        return guest

    # ============== 入住历史 ==============

    def get_history(self, guest_id: int) -> List[Reservation]:
        """客人的全部预订，最近入住的排在前面"""
        self.get(guest_id)
        return (
            self.db.query(Reservation)
            .filter(Reservation.guest_id == guest_id)
            .order_by(Reservation.check_in_date.desc(), Reservation.id.desc())
            .all()
        )

    # ============== 偏好 ==============

    def get_preferences(self, guest_id: int) -> GuestPreferences:
        guest = self.get(guest_id)
        if guest.preferences is None:
            guest.preferences = GuestPreferences()
            self._commit()
        return guest.preferences

    def update_preferences(self, guest_id: int, data: GuestPreferencesUpdate) -> GuestPreferences:
        """覆盖写入请求中出现的偏好列表"""
        preferences = self.get_preferences(guest_id)
        for key, value in data.model_dump(exclude_unset=True).items():
            setattr(preferences, key, value if value is not None else [])

        self._commit()
        self.db.refresh(preferences)
        logger.info(f"客人偏好已更新: guest_id={guest_id}")
        return preferences

    # ============== 画像 ==============

    def get_ai_insights(self, guest_id: int) -> GuestAIInsights:
        guest = self.get(guest_id)
        if guest.ai_insights is None:
            guest.ai_insights = GuestAIInsights()
            self._commit()
        return guest.ai_insights

    def update_ai_insights(self, guest_id: int, data: GuestAIInsightsUpdate) -> GuestAIInsights:
        insights = self.get_ai_insights(guest_id)
        for key, value in data.model_dump(exclude_unset=True).items():
            if value is None:
                continue
            setattr(insights, key, value)

        self._commit()
        self.db.refresh(insights)
        logger.info(f"客人画像已更新: guest_id={guest_id}")
        return insights
