"""
StatService

장비 보너스를 합산한 유효 스탯 계산을 담당합니다.
"""
import dataclasses
import logging

from models import Inventory, PlayerStats
from service.item.equipment_service import EquipmentService

logger = logging.getLogger(__name__)


class StatService:
    """스탯 관련 서비스"""

    @staticmethod
    def get_effective_stats(player: PlayerStats, inventory: Inventory) -> PlayerStats:
        """
        기본 스탯 + 장비 보너스

        체력 보너스는 최대/현재 HP 모두에 더해지고, 현재 HP는 보너스 포함 최대치로 제한됩니다.
        입력 스탯은 변경하지 않고 사본을 반환합니다.
        """
        bonus = EquipmentService.get_equipment_bonus(inventory)
        max_health = player.max_health + bonus.health
        return dataclasses.replace(
            player,
            max_health=max_health,
            current_health=min(player.current_health + bonus.health, max_health),
            attack=player.attack + bonus.attack,
            defense=player.defense + bonus.defense,
        )
