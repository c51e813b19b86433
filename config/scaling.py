"""층별 몬스터 스케일링 설정"""
from dataclasses import dataclass


@dataclass(frozen=True)
class ScalingConfig:
    """몬스터 스탯 스케일링 설정"""

    EXPONENT_BASE: float = 1.0
    """기본 지수 (스탯 = 층^지수)"""

    EXPONENT_STEP: float = 0.05
    """구간마다 증가하는 지수"""

    EXPONENT_SEGMENT_FLOORS: int = 100000
    """지수 증가 구간 (10만층마다 +0.05, 무한히 증가)"""

    DEFENSE_RATIO: float = 0.5
    """방어력 = 기본 스탯 x 0.5"""

    BOSS_FLOOR_INTERVAL: int = 100
    """보스층 간격 (100, 200, 300...)"""

    BOSS_STAT_MULTIPLIER: float = 10.0
    """보스 스탯 배율 (직전 층 일반 몬스터 기준)"""

    ZONE_THRESHOLDS: tuple[tuple[int, int], ...] = (
        (500, 1),
        (3000, 2),
        (15000, 3),
        (500000, 4),
        (1000000, 5),
    )
    """(최대 층, 구역) 목록 - 상한 포함"""

    LAST_ZONE: int = 6
    """마지막 임계값을 넘는 층의 구역"""


SCALING = ScalingConfig()
