"""
게임 연산 결과 모델

모든 실패 경로는 예외 대신 success=False 결과로 반환됩니다.
to_dict()는 HTTP 응답에 쓰는 camelCase 형태를 만듭니다.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from models.inventory import Inventory
from models.item import Item
from models.monster import MonsterSnapshot
from models.player import PlayerStats


class BattleStatus(str, Enum):
    """전투 틱 결과"""
    VICTORY = "victory"
    DEFEAT = "defeat"
    ONGOING = "ongoing"


@dataclass
class BattleResult:
    """전투 1틱 결과"""

    status: BattleStatus
    gold_earned: int
    new_floor: int
    best_floor: int
    user_health: float
    monster_health: float
    drops: list[Item] = field(default_factory=list)

    def summary(self) -> str:
        """상태 한 줄 요약"""
        if self.status == BattleStatus.DEFEAT:
            return f"패배! 1층으로 돌아갔습니다. (최고 {self.best_floor}층)"
        return f"현재 {self.new_floor}층 (최고 {self.best_floor}층)"

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "goldEarned": self.gold_earned,
            "newFloor": self.new_floor,
            "bestFloor": self.best_floor,
            "userHealth": self.user_health,
            "monsterHealth": self.monster_health,
            "drops": [item.to_dict() for item in self.drops],
        }


@dataclass
class UpgradeCosts:
    """스탯별 다음 1회 강화 비용"""
    health: int
    attack: int
    defense: int

    def to_dict(self) -> dict:
        return {"health": self.health, "attack": self.attack, "defense": self.defense}


@dataclass
class UpgradeResult:
    success: bool
    message: str
    spent_cost: Optional[int] = None
    next_costs: Optional[UpgradeCosts] = None

    def to_dict(self) -> dict:
        data = {"success": self.success, "message": self.message}
        if self.spent_cost is not None:
            data["spentCost"] = self.spent_cost
        if self.next_costs is not None:
            data["nextCosts"] = self.next_costs.to_dict()
        return data


@dataclass
class EquipResult:
    success: bool
    message: str
    inventory: Optional[Inventory] = None

    def to_dict(self) -> dict:
        data = {"success": self.success, "message": self.message}
        if self.inventory is not None:
            data["inventory"] = self.inventory.to_dict()
        return data


@dataclass
class GameState:
    """
    현재 게임 상태 조회 결과

    user는 장비 보너스가 합산된 유효 스탯입니다.
    """
    user: PlayerStats
    monster: MonsterSnapshot
    upgrade_costs: UpgradeCosts
    inventory: Inventory

    def to_dict(self) -> dict:
        return {
            "user": self.user.to_dict(),
            "monster": self.monster.to_dict(),
            "upgradeCosts": self.upgrade_costs.to_dict(),
            "inventory": self.inventory.to_dict(),
        }
