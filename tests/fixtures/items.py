"""
테스트용 아이템 원형 픽스처 데이터
"""
from config import ItemSlot, ItemStats, ItemTemplate

# 무기 원형
WEAPON_TEMPLATES: list[ItemTemplate] = [
    ItemTemplate("테스트 단검", ItemSlot.WEAPON, ItemStats(attack=2)),
    ItemTemplate("테스트 대검", ItemSlot.WEAPON, ItemStats(attack=25)),
]

# 방어구 원형
ARMOR_TEMPLATES: list[ItemTemplate] = [
    ItemTemplate("테스트 갑옷", ItemSlot.ARMOR, ItemStats(defense=5)),
    ItemTemplate("테스트 망토", ItemSlot.ARMOR, ItemStats(defense=5, health=50)),
]

# 재료 원형
MATERIAL_TEMPLATES: list[ItemTemplate] = [
    ItemTemplate("테스트 파편", ItemSlot.MATERIAL),
    ItemTemplate("테스트 액세서리", ItemSlot.MATERIAL, ItemStats(attack=100)),
]
