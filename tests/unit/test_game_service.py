"""
GameService 유닛 테스트

호스트가 호출하는 비동기 연산과 실패 결과 변환을 테스트합니다.
"""
import asyncio

import pytest

from config import ItemSlot
from models import BattleStatus
from service.game_service import GameService


@pytest.fixture
def game_factory(session_factory):
    def _create_game(**kwargs) -> GameService:
        return GameService(session_factory(**kwargs))

    return _create_game


class TestGetState:
    @pytest.mark.asyncio
    async def test_initial_state(self, game_factory):
        state = await game_factory().get_state()

        assert state.user.floor == 1
        assert state.user.current_health == 100
        assert state.monster.max_health == 1
        assert state.monster.current_health == 1
        assert state.upgrade_costs.to_dict() == {"health": 1, "attack": 1, "defense": 1}
        assert state.inventory.bag == []

    @pytest.mark.asyncio
    async def test_effective_stats_include_equipment(self, game_factory, item_factory):
        game = game_factory()
        game.session.inventory.weapon = item_factory(ItemSlot.WEAPON, attack=25)
        game.session.inventory.armor = item_factory(ItemSlot.ARMOR, defense=5, health=50)

        state = await game.get_state()

        assert state.user.attack == 125
        assert state.user.defense == 5
        assert state.user.max_health == 150
        assert state.user.current_health == 150
        # 저장된 기본 스탯은 그대로
        assert game.session.player.attack == 100
        assert game.session.player.max_health == 100

    @pytest.mark.asyncio
    async def test_stale_monster_is_resynced(self, game_factory):
        game = game_factory(floor=10)
        game.session.player.floor = 20

        state = await game.get_state()

        assert state.monster.max_health == 20
        assert state.monster.current_health == 20
        assert game.session.monster_floor == 20

    @pytest.mark.asyncio
    async def test_to_dict_uses_camel_case(self, game_factory):
        data = (await game_factory().get_state()).to_dict()

        assert set(data) == {"user", "monster", "upgradeCosts", "inventory"}
        assert "bestFloor" in data["user"]
        assert "currentHealth" in data["monster"]
        assert data["inventory"] == {"weapon": None, "armor": None, "materials": [], "bag": []}


class TestBattleTick:
    @pytest.mark.asyncio
    async def test_battle_tick(self, game_factory):
        result = await game_factory().battle_tick()

        assert result.status == BattleStatus.VICTORY
        assert result.to_dict()["newFloor"] == 2

    @pytest.mark.asyncio
    async def test_concurrent_ticks_are_serialized(self, game_factory):
        """동시 호출해도 한 틱씩 적용되어 층이 정확히 증가"""
        game = game_factory()

        results = await asyncio.gather(*(game.battle_tick() for _ in range(5)))

        assert [r.new_floor for r in results] == [2, 3, 4, 5, 6]
        assert game.session.player.gold == 1 + 2 + 3 + 4 + 5


class TestUpgrade:
    @pytest.mark.asyncio
    async def test_consecutive_bulk_upgrades(self, game_factory):
        """210골드: 체력 x10 (55) → 체력 x10 (155)"""
        game = game_factory(gold=210)

        first = await game.upgrade("health", 10)
        second = await game.upgrade("health", 10)

        assert first.success is True
        assert first.spent_cost == 55
        assert first.message == "체력이(가) 10 증가했습니다."
        assert first.next_costs.health == 11
        assert second.spent_cost == 155
        assert second.next_costs.health == 21

        player = game.session.player
        assert player.gold == 0
        assert player.max_health == 120

    @pytest.mark.asyncio
    async def test_insufficient_gold_result(self, game_factory):
        game = game_factory(gold=0)

        result = await game.upgrade("attack", 1)

        assert result.success is False
        assert result.message == "골드가 부족합니다."
        assert result.spent_cost is None
        assert result.to_dict() == {"success": False, "message": "골드가 부족합니다."}

    @pytest.mark.asyncio
    async def test_invalid_stat_result(self, game_factory):
        result = await game_factory(gold=100).upgrade("luck")

        assert result.success is False
        assert "luck" in result.message

    @pytest.mark.asyncio
    async def test_upgrade_preview(self, game_factory):
        game = game_factory(gold=100)
        await game.upgrade("attack", 10)

        preview = await game.get_upgrade_preview()

        assert preview["attack"][1] == 11
        assert preview["health"][10] == 55


class TestEquip:
    @pytest.mark.asyncio
    async def test_equip_success(self, game_factory, item_factory):
        game = game_factory()
        sword = item_factory(ItemSlot.WEAPON, "용살자 대검", attack=25)
        game.session.inventory.bag.append(sword)

        result = await game.equip(sword.id)

        assert result.success is True
        assert result.message == "용살자 대검 장착 완료"
        assert result.inventory.weapon is sword
        assert result.to_dict()["inventory"]["weapon"]["name"] == "용살자 대검"

    @pytest.mark.asyncio
    async def test_equip_material_fails(self, game_factory, item_factory):
        game = game_factory()
        shard = item_factory(ItemSlot.MATERIAL, "균열의 파편")
        game.session.inventory.materials.append(shard)

        result = await game.equip(shard.id)

        assert result.success is False
        assert result.message == "재료 아이템은 착용할 수 없습니다."
        assert result.inventory is None

    @pytest.mark.asyncio
    async def test_equip_unknown_fails(self, game_factory):
        result = await game_factory().equip("it-1")

        assert result.success is False
        assert result.message == "아이템을 찾을 수 없습니다."


class TestReset:
    @pytest.mark.asyncio
    async def test_reset_restores_initial_state(self, game_factory, item_factory):
        game = game_factory(floor=300, gold=999, best_floor=300)
        game.session.inventory.bag.append(item_factory())
        game.session.upgrade_counts.add("attack", 5)

        await game.reset_session()
        state = await game.get_state()

        assert state.user.to_dict() == {
            "maxHealth": 100,
            "currentHealth": 100,
            "attack": 100,
            "defense": 0,
            "gold": 0,
            "floor": 1,
            "bestFloor": 1,
        }
        assert state.upgrade_costs.attack == 1
        assert (await game.get_inventory()).bag == []

    @pytest.mark.asyncio
    async def test_item_ids_keep_increasing_after_reset(self, game_factory):
        game = game_factory()
        first = game.session.next_item_id()

        await game.reset_session()

        assert first == "it-1"
        assert game.session.next_item_id() == "it-2"
