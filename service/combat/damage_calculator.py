"""
데미지 계산 시스템

공격력 - 방어력, 최소 데미지 보장을 처리합니다.
config의 DAMAGE 상수를 사용합니다.
"""
from dataclasses import dataclass

from config import DAMAGE


@dataclass
class DamageResult:
    """데미지 계산 결과"""

    damage: float
    """최종 데미지"""

    raw_damage: float
    """최소 데미지 보정 전 (공격력 - 방어력)"""

    @property
    def is_minimum(self) -> bool:
        """방어력이 높아 최소 데미지가 적용되었는지"""
        return self.raw_damage < DAMAGE.MIN_DAMAGE


class DamageCalculator:
    """
    데미지 계산기

    모든 계산은 config의 DAMAGE 상수를 기반으로 합니다.
    """

    @staticmethod
    def calculate_damage(attack: float, defense: float = 0) -> DamageResult:
        """
        공식: max(MIN_DAMAGE, attack - defense)

        Args:
            attack: 공격자의 공격력
            defense: 대상의 방어력

        Returns:
            DamageResult: 계산 결과
        """
        raw_damage = attack - defense
        return DamageResult(
            damage=max(DAMAGE.MIN_DAMAGE, raw_damage),
            raw_damage=raw_damage,
        )
