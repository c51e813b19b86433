"""
UpgradeService

골드로 스탯을 강화하는 경제 로직을 담당합니다.

1회 비용 = 1 + 해당 스탯 누적 강화 횟수
n회 일괄 비용 = 시작 비용부터 연속된 n개 정수의 합 (등차수열)
"""
import logging
import math

from config import ECONOMY
from exceptions import InsufficientGoldError, InvalidStatError
from models import UpgradeCosts, UpgradeCounters
from service.session import GameSession

logger = logging.getLogger(__name__)


class UpgradeService:
    """스탯 강화 서비스"""

    @staticmethod
    def normalize_amount(amount: float) -> int:
        """소수는 버리고 최소 1회로 보정"""
        return max(ECONOMY.MIN_UPGRADE_AMOUNT, math.floor(amount))

    @staticmethod
    def validate_stat(stat: str) -> str:
        if stat not in ECONOMY.UPGRADE_STATS:
            raise InvalidStatError(stat)
        return stat

    @staticmethod
    def get_upgrade_cost(counters: UpgradeCounters, stat: str) -> int:
        return ECONOMY.BASE_UPGRADE_COST + counters.get(stat) * ECONOMY.COST_STEP

    @staticmethod
    def get_bulk_cost(counters: UpgradeCounters, stat: str, amount: float) -> int:
        """
        n회 일괄 강화 비용

        등차수열 합: n/2 * (2a + (n-1)d)
        """
        n = UpgradeService.normalize_amount(amount)
        start = UpgradeService.get_upgrade_cost(counters, stat)
        return n * (2 * start + (n - 1) * ECONOMY.COST_STEP) // 2

    @staticmethod
    def get_upgrade_costs(counters: UpgradeCounters) -> UpgradeCosts:
        return UpgradeCosts(
            health=UpgradeService.get_upgrade_cost(counters, "health"),
            attack=UpgradeService.get_upgrade_cost(counters, "attack"),
            defense=UpgradeService.get_upgrade_cost(counters, "defense"),
        )

    @staticmethod
    def preview_costs(
        counters: UpgradeCounters,
        amounts: tuple[int, ...] = ECONOMY.PREVIEW_AMOUNTS,
    ) -> dict[str, dict[int, int]]:
        """강화 패널용 스탯별 일괄 비용 미리보기"""
        return {
            stat: {
                amount: UpgradeService.get_bulk_cost(counters, stat, amount)
                for amount in amounts
            }
            for stat in ECONOMY.UPGRADE_STATS
        }

    @staticmethod
    def upgrade(session: GameSession, stat: str, amount: float = 1) -> tuple[int, int]:
        """
        스탯 일괄 강화 (전부 적용되거나 아무것도 바뀌지 않음)

        Args:
            session: 게임 세션
            stat: health / attack / defense
            amount: 강화 횟수 (소수/0 이하는 보정)

        Returns:
            (적용된 횟수, 사용한 골드)

        Raises:
            InvalidStatError: 알 수 없는 스탯
            InsufficientGoldError: 골드 부족
        """
        UpgradeService.validate_stat(stat)
        n = UpgradeService.normalize_amount(amount)
        cost = UpgradeService.get_bulk_cost(session.upgrade_counts, stat, n)

        player = session.player
        if player.gold < cost:
            raise InsufficientGoldError(cost, player.gold)

        player.gold -= cost
        session.upgrade_counts.add(stat, n)
        if stat == "health":
            player.max_health += n
            player.current_health += n
        elif stat == "attack":
            player.attack += n
        else:
            player.defense += n

        logger.info(f"Upgraded {stat} x{n}: cost={cost}, gold_left={player.gold}")
        return n, cost
