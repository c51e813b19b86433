"""
층별 몬스터 스케일링

층 번호 → 몬스터 기본 스탯, 보스 여부, 드롭 구역을 계산하는 순수 함수 모음입니다.
"""
import math
from dataclasses import dataclass

from config import SCALING


@dataclass(frozen=True)
class FloorStats:
    """층의 몬스터 기본 스탯 (현재 HP 제외)"""
    attack: float
    max_health: float
    defense: float

    def scaled(self, multiplier: float) -> "FloorStats":
        return FloorStats(
            attack=self.attack * multiplier,
            max_health=self.max_health * multiplier,
            defense=self.defense * multiplier,
        )


def get_exponent(floor: int) -> float:
    """10만층마다 지수가 0.05씩 증가 (상한 없음)"""
    safe_floor = max(1, floor)
    segment = max(0, math.floor((safe_floor - 1) / SCALING.EXPONENT_SEGMENT_FLOORS))
    return SCALING.EXPONENT_BASE + SCALING.EXPONENT_STEP * segment


def get_base_stats(floor: int) -> FloorStats:
    safe_floor = max(1, floor)
    base = math.pow(safe_floor, get_exponent(safe_floor))
    return FloorStats(
        attack=base,
        max_health=base,
        defense=base * SCALING.DEFENSE_RATIO,
    )


def is_boss_floor(floor: int) -> bool:
    return floor > 0 and floor % SCALING.BOSS_FLOOR_INTERVAL == 0


def get_monster_stats(floor: int) -> FloorStats:
    """
    층의 몬스터 스탯

    보스층은 자기 층이 아니라 바로 전 층 일반 몬스터 스탯의 10배입니다.
    """
    if is_boss_floor(floor):
        return get_base_stats(max(1, floor - 1)).scaled(SCALING.BOSS_STAT_MULTIPLIER)
    return get_base_stats(floor)


def get_zone(floor: int) -> int:
    """드롭 구역 (임계값 상한 포함)"""
    for max_floor, zone in SCALING.ZONE_THRESHOLDS:
        if floor <= max_floor:
            return zone
    return SCALING.LAST_ZONE
