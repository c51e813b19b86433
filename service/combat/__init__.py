"""
전투 시스템 서비스 모듈

데미지 계산 등 전투 관련 로직을 담당합니다.
"""
from service.combat.damage_calculator import DamageCalculator, DamageResult

__all__ = ["DamageCalculator", "DamageResult"]
