"""데미지 계산 관련 설정"""
from dataclasses import dataclass


@dataclass(frozen=True)
class DamageConfig:
    """데미지 계산 설정"""

    MIN_DAMAGE: int = 1
    """최소 데미지 (방어력이 공격력보다 높아도 교착 상태 방지)"""


DAMAGE = DamageConfig()
