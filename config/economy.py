"""스탯 강화 비용 설정"""
from dataclasses import dataclass


@dataclass(frozen=True)
class EconomyConfig:
    """강화 경제 설정"""

    BASE_UPGRADE_COST: int = 1
    """첫 강화 1회 비용"""

    COST_STEP: int = 1
    """강화 1회마다 증가하는 비용 (등차수열 공차)"""

    MIN_UPGRADE_AMOUNT: int = 1
    """최소 강화 수량 (0 이하/소수는 이 값으로 보정)"""

    PREVIEW_AMOUNTS: tuple[int, ...] = (1, 10, 100)
    """강화 패널에 표시할 일괄 강화 수량"""

    UPGRADE_STATS: tuple[str, ...] = ("health", "attack", "defense")
    """강화 가능한 스탯"""


ECONOMY = EconomyConfig()
