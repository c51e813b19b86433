"""
Item 모델 정의

드롭으로 생성되는 아이템 인스턴스입니다. 생성 후에는 변경되지 않습니다.
"""
from dataclasses import dataclass, field

from config.items import ItemRarity, ItemSlot, ItemStats, ItemTemplate


@dataclass(frozen=True)
class Item:
    """아이템 인스턴스"""

    id: str
    """세션 내 유일한 ID (it-1, it-2 ...)"""

    name: str
    slot: ItemSlot
    rarity: ItemRarity
    stats: ItemStats = field(default_factory=ItemStats)

    zone: int = 1
    """드롭된 구역"""

    @classmethod
    def from_template(
        cls,
        item_id: str,
        zone: int,
        rarity: ItemRarity,
        template: ItemTemplate,
    ) -> "Item":
        return cls(
            id=item_id,
            name=template.name,
            slot=template.slot,
            rarity=rarity,
            stats=template.stats,
            zone=zone,
        )

    @property
    def is_material(self) -> bool:
        return self.slot == ItemSlot.MATERIAL

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "slot": self.slot.value,
            "rarity": self.rarity.value,
            "stats": self.stats.to_dict(),
            "zone": self.zone,
        }
