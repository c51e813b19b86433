"""
몬스터 스냅샷 모델

층 번호로부터 매번 계산되며, 현재 HP만 같은 층에 머무는 동안 유지됩니다.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class MonsterSnapshot:
    max_health: float
    current_health: float
    attack: float
    defense: float

    def to_dict(self) -> dict:
        return {
            "maxHealth": self.max_health,
            "currentHealth": self.current_health,
            "attack": self.attack,
            "defense": self.defense,
        }
