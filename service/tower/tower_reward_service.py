"""
층 클리어 보상 서비스
"""
from dataclasses import dataclass, field

from models import Item
from service.item.drop_service import DropService
from service.item.inventory_service import InventoryService
from service.session import GameSession


@dataclass
class TowerReward:
    gold: int
    is_boss: bool
    drops: list[Item] = field(default_factory=list)


def calculate_floor_gold(floor: int) -> int:
    """N층 클리어 = N 골드"""
    return floor


def apply_floor_reward(session: GameSession, floor: int, is_boss: bool) -> TowerReward:
    """골드 지급 후 드롭을 굴려 인벤토리에 넣는다"""
    gold = calculate_floor_gold(floor)
    session.player.gold += gold

    drops = DropService.roll_drop(session, floor, is_boss)
    InventoryService.add_drops(session.inventory, drops)
    return TowerReward(gold=gold, is_boss=is_boss, drops=drops)
