"""
인벤토리 모델

- weapon / armor: 장착 중인 장비 (슬롯 일치 보장)
- bag: 장착하지 않은 무기/방어구
- materials: 재료 아이템
"""
from dataclasses import dataclass, field
from typing import Optional

from models.item import Item


@dataclass
class Inventory:
    weapon: Optional[Item] = None
    armor: Optional[Item] = None
    materials: list[Item] = field(default_factory=list)
    bag: list[Item] = field(default_factory=list)

    def equipped_items(self) -> list[Item]:
        return [item for item in (self.weapon, self.armor) if item is not None]

    def to_dict(self) -> dict:
        return {
            "weapon": self.weapon.to_dict() if self.weapon else None,
            "armor": self.armor.to_dict() if self.armor else None,
            "materials": [item.to_dict() for item in self.materials],
            "bag": [item.to_dict() for item in self.bag],
        }
