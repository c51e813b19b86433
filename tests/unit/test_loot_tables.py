"""
구역 드롭 테이블 데이터 검증 테스트
"""
import pytest

from config import SPECIAL_SHARD_NAME, ZONE_TABLES, ItemRarity, ItemSlot


@pytest.mark.parametrize("zone", range(1, 7))
class TestZoneTable:
    def test_every_rarity_has_pool(self, zone):
        """정의되지 않은 희귀도도 빈 풀로 존재"""
        table = ZONE_TABLES[zone]
        assert set(table.items) == set(ItemRarity)

    def test_weights_positive(self, zone):
        table = ZONE_TABLES[zone]
        assert table.rarity_weights
        assert all(weight > 0 for _, weight in table.rarity_weights)

    def test_weighted_rarities_have_items(self, zone):
        table = ZONE_TABLES[zone]
        for rarity, _ in table.rarity_weights:
            assert table.pool(rarity), f"zone {zone} {rarity.value} 풀이 비어 있음"

    def test_special_not_in_weights(self, zone):
        """균열의 파편은 희귀도 추첨이 아닌 독립 판정"""
        table = ZONE_TABLES[zone]
        assert ItemRarity.SPECIAL not in dict(table.rarity_weights)
        assert 0 < table.special_shard_chance < 0.01

    def test_equipment_has_stats(self, zone):
        for pool in ZONE_TABLES[zone].items.values():
            for template in pool:
                if template.slot == ItemSlot.WEAPON:
                    assert template.stats.attack > 0
                elif template.slot == ItemSlot.ARMOR:
                    assert template.stats.defense > 0


class TestZoneTableData:
    def test_first_zone_common_pool(self):
        names = [t.name for t in ZONE_TABLES[1].pool(ItemRarity.COMMON)]
        assert names == ["낡은 단검", "가죽 갑옷", "목궁", "누더기 망토"]

    def test_shard_name(self):
        assert SPECIAL_SHARD_NAME == "균열의 파편"

