"""
InventoryService

드롭 아이템 보관과 인벤토리 조회를 담당합니다.
"""
import logging
from typing import Optional

from config import ItemSlot
from models import Inventory, Item

logger = logging.getLogger(__name__)


class InventoryService:
    """인벤토리 비즈니스 로직"""

    @staticmethod
    def add_drops(inventory: Inventory, drops: list[Item]) -> None:
        """재료는 materials로, 무기/방어구는 bag으로 (자동 장착 없음)"""
        for item in drops:
            if item.is_material:
                inventory.materials.append(item)
            else:
                inventory.bag.append(item)

    @staticmethod
    def find_item(inventory: Inventory, item_id: str) -> Optional[Item]:
        """bag → materials → 장착 무기 → 장착 방어구 순서로 검색"""
        for item in inventory.bag:
            if item.id == item_id:
                return item
        for item in inventory.materials:
            if item.id == item_id:
                return item
        if inventory.weapon and inventory.weapon.id == item_id:
            return inventory.weapon
        if inventory.armor and inventory.armor.id == item_id:
            return inventory.armor
        return None

    @staticmethod
    def items_by_slot(inventory: Inventory, slot: ItemSlot) -> list[Item]:
        """인벤토리 탭용 슬롯별 목록"""
        if slot == ItemSlot.MATERIAL:
            return list(inventory.materials)
        return [item for item in inventory.bag if item.slot == slot]
