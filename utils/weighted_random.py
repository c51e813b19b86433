"""
가중치 랜덤 선택 유틸리티

테이블 구조와 무관하게 (값, 가중치) 목록만 받아 누적합 탐색으로 하나를 고릅니다.
"""
import random
from typing import Sequence, TypeVar

T = TypeVar("T")


def pick_by_draw(entries: Sequence[tuple[T, float]], draw: float) -> T:
    """
    누적 가중치가 draw 이상이 되는 첫 항목 반환

    Args:
        entries: (값, 가중치) 순서 목록
        draw: [0, 총합) 범위의 값

    Returns:
        선택된 값 (부동소수 오차로 끝까지 못 찾으면 마지막 항목)
    """
    if not entries:
        raise ValueError("가중치 목록이 비어 있습니다")

    accumulated = 0.0
    for value, weight in entries:
        accumulated += weight
        if draw <= accumulated:
            return value
    return entries[-1][0]


def weighted_pick(entries: Sequence[tuple[T, float]], rng: random.Random) -> T:
    """[0, 총합) 균등 추첨 후 누적합 탐색"""
    total = sum(weight for _, weight in entries)
    return pick_by_draw(entries, rng.random() * total)
