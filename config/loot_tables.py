"""구역별 희귀도 가중치와 아이템 풀"""
from config.items import ItemRarity, ItemSlot, ItemStats, ItemTemplate, ZoneTable


SPECIAL_SHARD_NAME = "균열의 파편"
"""모든 구역 공통 특수 재료 이름"""


def _weapon(name: str, attack: float) -> ItemTemplate:
    return ItemTemplate(name, ItemSlot.WEAPON, ItemStats(attack=attack))


def _armor(name: str, defense: float) -> ItemTemplate:
    return ItemTemplate(name, ItemSlot.ARMOR, ItemStats(defense=defense))


def _material(name: str, **stats: float) -> ItemTemplate:
    return ItemTemplate(name, ItemSlot.MATERIAL, ItemStats(**stats))


def _zone(
    zone: int,
    rarity_weights: list[tuple[ItemRarity, float]],
    special_shard_chance: float,
    items: dict[ItemRarity, list[ItemTemplate]],
) -> ZoneTable:
    # 정의되지 않은 희귀도도 빈 풀로 채워 조회 시 None이 나오지 않게 한다
    pools = {rarity: tuple(items.get(rarity, ())) for rarity in ItemRarity}
    return ZoneTable(
        zone=zone,
        rarity_weights=tuple(rarity_weights),
        special_shard_chance=special_shard_chance,
        items=pools,
    )


ZONE_TABLES: dict[int, ZoneTable] = {
    1: _zone(
        1,
        [
            (ItemRarity.COMMON, 97.9),
            (ItemRarity.RARE, 2.0),
        ],
        0.0005,
        {
            ItemRarity.COMMON: [
                _weapon("낡은 단검", 2),
                _armor("가죽 갑옷", 2),
                _weapon("목궁", 2),
                _armor("누더기 망토", 2),
            ],
            ItemRarity.RARE: [
                _weapon("강철 검", 5),
                _armor("판금 갑옷", 5),
                _weapon("강화 활", 5),
                _armor("가죽 망토", 5),
            ],
        },
    ),
    2: _zone(
        2,
        [
            (ItemRarity.COMMON, 89.9),
            (ItemRarity.RARE, 9.0),
            (ItemRarity.LEGENDARY, 1.0),
        ],
        0.001,
        {
            ItemRarity.COMMON: [
                _weapon("견고한 도끼", 8),
                _armor("두꺼운 가죽 갑옷", 8),
            ],
            ItemRarity.RARE: [
                _weapon("정교한 검", 14),
                _armor("강화 판금", 14),
            ],
            ItemRarity.LEGENDARY: [
                _weapon("용살자 대검", 25),
                _armor("수호자의 갑주", 25),
                _weapon("용 사냥꾼의 활", 25),
                _armor("기사의 망토", 25),
            ],
        },
    ),
    3: _zone(
        3,
        [
            (ItemRarity.COMMON, 77.9),
            (ItemRarity.RARE, 16.0),
            (ItemRarity.LEGENDARY, 5.5),
            (ItemRarity.EPIC, 0.5),
        ],
        0.001,
        {
            ItemRarity.COMMON: [
                _weapon("균형잡힌 장검", 35),
                _armor("견고한 흉갑", 35),
            ],
            ItemRarity.RARE: [
                _weapon("숙련된 암살검", 45),
                _armor("증강 갑주", 45),
            ],
            ItemRarity.LEGENDARY: [
                _weapon("용암의 클레이모어", 65),
                _armor("빙결의 흉갑", 65),
            ],
            ItemRarity.EPIC: [
                _weapon("지배자의 롱소드", 90),
                _armor("영겁의 흉갑", 90),
                _weapon("지배자의 컴포지트 보우", 90),
                _armor("영겁의 어깨덧옷", 90),
            ],
        },
    ),
    4: _zone(
        4,
        [
            (ItemRarity.COMMON, 64.9),
            (ItemRarity.RARE, 25.0),
            (ItemRarity.LEGENDARY, 9.0),
            (ItemRarity.EPIC, 0.98),
            (ItemRarity.MYSTIC, 0.03),
        ],
        0.001,
        {
            ItemRarity.COMMON: [
                _weapon("균형의 대검", 120),
                _armor("강철미늘 갑옷", 120),
            ],
            ItemRarity.RARE: [
                _weapon("폭풍 장검", 150),
                _armor("폭풍 갑주", 150),
            ],
            ItemRarity.LEGENDARY: [
                _weapon("태양의 클레이모어", 200),
                _armor("달빛의 흉갑", 200),
            ],
            ItemRarity.EPIC: [
                _weapon("지배자의 장창", 260),
                _armor("지배자의 갑주", 260),
            ],
            ItemRarity.MYSTIC: [
                _weapon("태풍의 눈", 400),
                _armor("폭풍의 망토", 400),
                _material("태초의 파편"),
                _material("세계수의 심장"),
            ],
        },
    ),
    5: _zone(
        5,
        [
            (ItemRarity.COMMON, 59.94995),
            (ItemRarity.RARE, 28.0),
            (ItemRarity.LEGENDARY, 11.0),
            (ItemRarity.EPIC, 1.02995),
            (ItemRarity.MYSTIC, 0.02),
            (ItemRarity.PRIMAL, 0.000001),
        ],
        0.001,
        {
            ItemRarity.COMMON: [
                _weapon("균형의 장검+", 320),
                _armor("강철미늘 갑옷+", 320),
            ],
            ItemRarity.RARE: [
                _weapon("폭풍 장검+", 380),
                _armor("폭풍 갑주+", 380),
            ],
            ItemRarity.LEGENDARY: [
                _weapon("태양의 클레이모어+", 480),
                _armor("달빛의 흉갑+", 480),
            ],
            ItemRarity.EPIC: [
                _weapon("지배자의 장창+", 600),
                _armor("지배자의 갑주+", 600),
            ],
            ItemRarity.MYSTIC: [
                _weapon("태풍의 눈+", 900),
                _armor("폭풍의 망토+", 900),
            ],
            ItemRarity.PRIMAL: [
                _weapon("Primal 블레이드", 1500),
                _armor("Primal 방패갑주", 1500),
            ],
        },
    ),
    6: _zone(
        6,
        [
            (ItemRarity.COMMON, 49.1995),
            (ItemRarity.RARE, 30.0),
            (ItemRarity.LEGENDARY, 13.0),
            (ItemRarity.EPIC, 1.9),
            (ItemRarity.MYSTIC, 0.16),
            (ItemRarity.PRIMAL, 0.00001),
        ],
        0.002,
        {
            ItemRarity.COMMON: [
                _weapon("균형의 장검++", 600),
                _armor("강철미늘 갑옷++", 600),
            ],
            ItemRarity.RARE: [
                _weapon("폭풍 장검++", 750),
                _armor("폭풍 갑주++", 750),
            ],
            ItemRarity.LEGENDARY: [
                _weapon("태양의 클레이모어++", 1000),
                _armor("달빛의 흉갑++", 1000),
            ],
            ItemRarity.EPIC: [
                _weapon("지배자의 장창++", 1300),
                _armor("지배자의 갑주++", 1300),
            ],
            ItemRarity.MYSTIC: [
                _weapon("태풍의 눈++", 1800),
                _armor("폭풍의 망토++", 1800),
            ],
            ItemRarity.PRIMAL: [
                _weapon("Primal 블레이드+", 2500),
                _armor("Primal 방패갑주+", 2500),
                _material("Primal 액세서리: 힘", attack=100),
            ],
        },
    ),
}
