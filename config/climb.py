"""자동 전투(등반) 설정"""
from dataclasses import dataclass


@dataclass(frozen=True)
class ClimbConfig:
    """자동 전투 설정"""

    AUTO_BATTLE_INTERVAL_SECONDS: float = 1.0
    """자동 전투 틱 간격 (1초마다 1턴)"""

    AUTO_BATTLE_ENABLED_ON_START: bool = False
    """봇 시작 시 자동 전투 활성화 여부"""

    HEALTH_BAR_LENGTH: int = 10
    """임베드 HP 바 칸 수"""

    INVENTORY_PAGE_SIZE: int = 20
    """인벤토리 임베드에 표시할 최대 아이템 수"""


CLIMB = ClimbConfig()
