"""아이템 슬롯/희귀도 및 드롭 테이블 구조 정의"""
from dataclasses import dataclass, field
from enum import Enum


class ItemSlot(str, Enum):
    """아이템 장착 슬롯"""
    WEAPON = "weapon"
    ARMOR = "armor"
    MATERIAL = "material"


class ItemRarity(str, Enum):
    """아이템 희귀도 (낮은 순서)"""
    COMMON = "common"
    RARE = "rare"
    LEGENDARY = "legendary"
    EPIC = "epic"
    MYSTIC = "mystic"
    PRIMAL = "primal"
    SPECIAL = "special"


@dataclass(frozen=True)
class ItemStats:
    """아이템 스탯 (없는 값은 0)"""

    attack: float = 0
    defense: float = 0
    health: float = 0

    def __add__(self, other: "ItemStats") -> "ItemStats":
        return ItemStats(
            attack=self.attack + other.attack,
            defense=self.defense + other.defense,
            health=self.health + other.health,
        )

    def to_dict(self) -> dict:
        """0이 아닌 스탯만 포함"""
        return {
            name: value
            for name, value in (
                ("attack", self.attack),
                ("defense", self.defense),
                ("health", self.health),
            )
            if value
        }


@dataclass(frozen=True)
class ItemTemplate:
    """드롭 테이블의 아이템 원형"""
    name: str
    slot: ItemSlot
    stats: ItemStats = field(default_factory=ItemStats)


@dataclass(frozen=True)
class ZoneTable:
    """구역별 드롭 테이블"""

    zone: int
    """구역 번호 (1~6)"""

    rarity_weights: tuple[tuple[ItemRarity, float], ...]
    """(희귀도, 가중치) 순서 목록"""

    special_shard_chance: float
    """균열의 파편 독립 드롭 확률 (0.0005 = 0.05%)"""

    items: dict[ItemRarity, tuple[ItemTemplate, ...]]
    """희귀도별 아이템 풀 (모든 희귀도 키 존재, 빈 풀 허용)"""

    def pool(self, rarity: ItemRarity) -> tuple[ItemTemplate, ...]:
        return self.items.get(rarity, ())
