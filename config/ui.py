"""Discord UI 관련 설정"""
from dataclasses import dataclass
from enum import IntEnum


class EmbedColor(IntEnum):
    """임베드 색상"""

    DEFAULT = 0x3498DB  # 파란색
    VICTORY = 0x2ECC71  # 초록색
    DEFEAT = 0xE74C3C  # 빨간색
    ONGOING = 0xF39C12  # 주황색
    INVENTORY = 0x9B59B6  # 보라색
    ITEM_COMMON = 0x95A5A6  # 회색
    ITEM_RARE = 0x3498DB  # 파란색
    ITEM_LEGENDARY = 0xF1C40F  # 노란색
    ITEM_EPIC = 0x9B59B6  # 보라색
    ITEM_MYSTIC = 0xE74C3C  # 빨간색
    ITEM_PRIMAL = 0x1ABC9C  # 청록색
    ITEM_SPECIAL = 0xE91E63  # 핑크색


@dataclass(frozen=True)
class UIConfig:
    """UI 설정"""

    HEALTH_BAR_FILLED: str = "🟩"
    """HP 바 채워진 칸"""

    MONSTER_BAR_FILLED: str = "🟥"
    """몬스터 HP 바 채워진 칸"""

    BAR_EMPTY: str = "⬛"
    """HP 바 빈 칸"""

    MAX_DROPS_SHOWN: int = 5
    """전투 결과에 표시할 최대 드롭 수"""


UI = UIConfig()
