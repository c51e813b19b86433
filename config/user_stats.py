"""유저 스탯 관련 설정"""
from dataclasses import dataclass


@dataclass(frozen=True)
class UserStatsConfig:
    """유저 초기 스탯 설정"""

    INITIAL_HP: int = 100
    """초기 최대/현재 HP"""

    INITIAL_ATTACK: int = 100
    """초기 공격력"""

    INITIAL_DEFENSE: int = 0
    """초기 방어력"""

    INITIAL_GOLD: int = 0
    """초기 골드"""

    INITIAL_FLOOR: int = 1
    """시작 층 (패배 시 이 층으로 복귀)"""


USER_STATS = UserStatsConfig()
