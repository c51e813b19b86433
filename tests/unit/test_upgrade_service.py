"""
UpgradeService 유닛 테스트

강화 비용 공식, 일괄 강화, 원자성을 테스트합니다.
"""
import pytest

from exceptions import InsufficientGoldError, InvalidStatError
from models import UpgradeCounters
from service.economy.upgrade_service import UpgradeService


class TestUpgradeCost:
    """비용 공식 테스트"""

    def test_single_cost_is_one_plus_count(self):
        counters = UpgradeCounters(attack=7)
        assert UpgradeService.get_upgrade_cost(counters, "attack") == 8
        assert UpgradeService.get_upgrade_cost(counters, "health") == 1

    @pytest.mark.parametrize("amount, expected", [(1, 1), (10, 55), (100, 5050)])
    def test_bulk_cost_from_zero(self, amount, expected):
        assert UpgradeService.get_bulk_cost(UpgradeCounters(), "defense", amount) == expected

    def test_bulk_cost_continues_from_counter(self):
        """11 + 12 + ... + 20 = 155"""
        counters = UpgradeCounters(health=10)
        assert UpgradeService.get_bulk_cost(counters, "health", 10) == 155

    def test_costs_per_stat(self):
        costs = UpgradeService.get_upgrade_costs(UpgradeCounters(health=2, attack=0, defense=5))
        assert costs.to_dict() == {"health": 3, "attack": 1, "defense": 6}

    def test_preview(self):
        preview = UpgradeService.preview_costs(UpgradeCounters())
        assert preview["attack"] == {1: 1, 10: 55, 100: 5050}
        assert set(preview) == {"health", "attack", "defense"}


class TestNormalizeAmount:
    @pytest.mark.parametrize("amount, expected", [(0, 1), (-5, 1), (2.7, 2), (1, 1), (0.5, 1)])
    def test_normalize(self, amount, expected):
        assert UpgradeService.normalize_amount(amount) == expected


class TestUpgrade:
    """강화 적용 테스트"""

    def test_attack_upgrade(self, session_factory):
        session = session_factory(gold=55)

        applied, cost = UpgradeService.upgrade(session, "attack", 10)

        assert (applied, cost) == (10, 55)
        assert session.player.gold == 0
        assert session.player.attack == 110
        assert session.upgrade_counts.attack == 10

    def test_health_upgrade_raises_max_and_current(self, session_factory):
        session = session_factory(gold=10, current_health=40)

        UpgradeService.upgrade(session, "health", 3)

        assert session.player.max_health == 103
        assert session.player.current_health == 43

    def test_defense_upgrade(self, session_factory):
        session = session_factory(gold=1)

        UpgradeService.upgrade(session, "defense")

        assert session.player.defense == 1
        assert session.player.gold == 0

    def test_fractional_amount_is_floored(self, session_factory):
        session = session_factory(gold=100)

        applied, cost = UpgradeService.upgrade(session, "attack", 2.7)

        assert (applied, cost) == (2, 3)

    def test_insufficient_gold_changes_nothing(self, session_factory):
        session = session_factory(gold=54)

        with pytest.raises(InsufficientGoldError) as exc_info:
            UpgradeService.upgrade(session, "attack", 10)

        assert exc_info.value.required == 55
        assert exc_info.value.current == 54
        assert session.player.gold == 54
        assert session.player.attack == 100
        assert session.upgrade_counts.attack == 0

    def test_invalid_stat(self, session_factory):
        session = session_factory(gold=100)

        with pytest.raises(InvalidStatError):
            UpgradeService.upgrade(session, "luck", 1)

        assert session.player.gold == 100
