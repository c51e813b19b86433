"""
EquipmentService

장비 착용과 장비 보너스 계산을 담당합니다.
"""
import logging

from config import ItemSlot, ItemStats
from exceptions import ItemNotEquippableError, ItemNotFoundError
from models import Inventory, Item
from service.item.inventory_service import InventoryService

logger = logging.getLogger(__name__)


class EquipmentService:
    """장비 비즈니스 로직"""

    @staticmethod
    def equip_item(inventory: Inventory, item_id: str) -> Item:
        """
        장비 착용

        기존 장착 아이템은 교체되며 bag으로 돌아가지 않습니다.
        착용한 아이템도 bag 목록에서 빠지지 않습니다.

        Args:
            inventory: 대상 인벤토리
            item_id: 아이템 ID

        Returns:
            장착된 아이템

        Raises:
            ItemNotFoundError: 아이템을 찾을 수 없음
            ItemNotEquippableError: 재료 아이템
        """
        item = InventoryService.find_item(inventory, item_id)
        if item is None:
            raise ItemNotFoundError(item_id)
        if item.is_material:
            raise ItemNotEquippableError(item.name)

        if item.slot == ItemSlot.WEAPON:
            inventory.weapon = item
        elif item.slot == ItemSlot.ARMOR:
            inventory.armor = item

        logger.info(f"Equipped {item.slot.value}: item_id={item.id}, item_name={item.name}")
        return item

    @staticmethod
    def get_equipment_bonus(inventory: Inventory) -> ItemStats:
        """장착 무기 + 방어구 스탯 합 (희귀도/구역 무관)"""
        bonus = ItemStats()
        for item in inventory.equipped_items():
            bonus = bonus + item.stats
        return bonus
