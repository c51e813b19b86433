"""
pytest 설정 및 공통 픽스처 정의
"""
import random
import sys
from pathlib import Path

import pytest

# 프로젝트 루트를 Python 경로에 추가
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


# =============================================================================
# pytest 설정
# =============================================================================


def pytest_configure(config):
    """pytest 설정"""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )


# =============================================================================
# 난수 픽스처
# =============================================================================


class ScriptedRandom(random.Random):
    """
    미리 정한 값을 순서대로 돌려주는 난수 생성기

    값이 다 떨어지면 모든 확률 판정에 실패하는 값(0.999999)을 반환합니다.
    """

    EXHAUSTED = 0.999999

    def __init__(self, values=()):
        super().__init__(0)
        self.values = list(values)
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        if self.values:
            return self.values.pop(0)
        return self.EXHAUSTED


@pytest.fixture
def scripted_random():
    """ScriptedRandom 생성 팩토리"""
    return ScriptedRandom


# =============================================================================
# 게임 엔티티 팩토리 픽스처
# =============================================================================


@pytest.fixture
def session_factory():
    """테스트용 GameSession 생성 팩토리"""
    from service.session import GameSession

    def _create_session(
        rng_values=(),
        zone_tables=None,
        floor: int = 1,
        attack: float | None = None,
        defense: float | None = None,
        gold: int | None = None,
        current_health: float | None = None,
        best_floor: int | None = None,
    ) -> GameSession:
        session = GameSession(rng=ScriptedRandom(rng_values), zone_tables=zone_tables)
        player = session.player
        player.floor = floor
        player.best_floor = best_floor if best_floor is not None else floor
        if attack is not None:
            player.attack = attack
        if defense is not None:
            player.defense = defense
        if gold is not None:
            player.gold = gold
        if current_health is not None:
            player.current_health = current_health
        session.reset_monster(floor)
        return session

    return _create_session


@pytest.fixture
def game_session(session_factory):
    """기본 테스트 세션 (1층, 드롭 없음)"""
    return session_factory()


@pytest.fixture
def item_factory():
    """테스트용 Item 생성 팩토리"""
    from config import ItemRarity, ItemSlot, ItemStats
    from models import Item

    counter = iter(range(1000, 100000))

    def _create_item(
        slot: ItemSlot = ItemSlot.WEAPON,
        name: str = "테스트 장비",
        rarity: ItemRarity = ItemRarity.COMMON,
        attack: float = 0,
        defense: float = 0,
        health: float = 0,
        item_id: str | None = None,
        zone: int = 1,
    ) -> Item:
        return Item(
            id=item_id or f"test-{next(counter)}",
            name=name,
            slot=slot,
            rarity=rarity,
            stats=ItemStats(attack=attack, defense=defense, health=health),
            zone=zone,
        )

    return _create_item


@pytest.fixture
def zone_table_factory():
    """테스트용 단일 구역 테이블 생성 (모든 구역 번호에 같은 테이블 사용)"""
    from config import ItemRarity, ZoneTable

    def _create_tables(
        rarity_weights=((ItemRarity.COMMON, 1.0),),
        special_shard_chance: float = 0.0,
        items=None,
    ) -> dict[int, ZoneTable]:
        pools = {rarity: tuple((items or {}).get(rarity, ())) for rarity in ItemRarity}
        return {
            zone: ZoneTable(
                zone=zone,
                rarity_weights=tuple(rarity_weights),
                special_shard_chance=special_shard_chance,
                items=pools,
            )
            for zone in range(1, 7)
        }

    return _create_tables
