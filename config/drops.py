"""아이템 드롭 설정"""
from dataclasses import dataclass


@dataclass(frozen=True)
class DropConfig:
    """드롭 설정"""

    NORMAL_DROP_RATE: float = 0.02
    """일반 몬스터 처치 시 드롭 확률 (2%)"""

    BOSS_DROP_RATE: float = 0.10
    """보스 처치 시 드롭 확률 (10%)"""

    ITEM_ID_PREFIX: str = "it"
    """아이템 ID 접두사 (it-1, it-2 ...)"""

    LOG_RARITIES: tuple[str, ...] = ("epic", "mystic", "primal", "special")
    """INFO 로그로 남길 희귀 드롭 등급"""


DROP = DropConfig()
