"""
플레이어 스탯 / 강화 횟수 모델
"""
from dataclasses import dataclass

from config import USER_STATS


@dataclass
class PlayerStats:
    """
    플레이어 기본 스탯

    장비 보너스는 포함하지 않습니다 (조회 시점에 합산).
    best_floor는 패배해도 줄어들지 않습니다.
    """

    max_health: float = USER_STATS.INITIAL_HP
    current_health: float = USER_STATS.INITIAL_HP
    attack: float = USER_STATS.INITIAL_ATTACK
    defense: float = USER_STATS.INITIAL_DEFENSE
    gold: int = USER_STATS.INITIAL_GOLD
    floor: int = USER_STATS.INITIAL_FLOOR
    best_floor: int = USER_STATS.INITIAL_FLOOR

    def heal_full(self) -> None:
        self.current_health = self.max_health

    def to_dict(self) -> dict:
        return {
            "maxHealth": self.max_health,
            "currentHealth": self.current_health,
            "attack": self.attack,
            "defense": self.defense,
            "gold": self.gold,
            "floor": self.floor,
            "bestFloor": self.best_floor,
        }


@dataclass
class UpgradeCounters:
    """스탯별 누적 강화 횟수 (다음 1회 비용 = 1 + 횟수)"""

    health: int = 0
    attack: int = 0
    defense: int = 0

    def get(self, stat: str) -> int:
        return getattr(self, stat)

    def add(self, stat: str, amount: int) -> None:
        setattr(self, stat, getattr(self, stat) + amount)

    def to_dict(self) -> dict:
        return {
            "health": self.health,
            "attack": self.attack,
            "defense": self.defense,
        }
