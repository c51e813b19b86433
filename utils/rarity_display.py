"""
희귀도 표시 유틸리티

아이템 이름에 희귀도별 색상/이모지/한글 이름을 붙입니다.
"""
from config import EmbedColor, ItemRarity, ItemSlot


RARITY_NAMES = {
    ItemRarity.COMMON: "일반",
    ItemRarity.RARE: "레어",
    ItemRarity.LEGENDARY: "전설",
    ItemRarity.EPIC: "에픽",
    ItemRarity.MYSTIC: "신비",
    ItemRarity.PRIMAL: "태초",
    ItemRarity.SPECIAL: "특수",
}

RARITY_EMOJIS = {
    ItemRarity.COMMON: "⚪",
    ItemRarity.RARE: "🔵",
    ItemRarity.LEGENDARY: "🟡",
    ItemRarity.EPIC: "🟣",
    ItemRarity.MYSTIC: "🔴",
    ItemRarity.PRIMAL: "💠",
    ItemRarity.SPECIAL: "🌸",
}

RARITY_COLORS = {
    ItemRarity.COMMON: EmbedColor.ITEM_COMMON,
    ItemRarity.RARE: EmbedColor.ITEM_RARE,
    ItemRarity.LEGENDARY: EmbedColor.ITEM_LEGENDARY,
    ItemRarity.EPIC: EmbedColor.ITEM_EPIC,
    ItemRarity.MYSTIC: EmbedColor.ITEM_MYSTIC,
    ItemRarity.PRIMAL: EmbedColor.ITEM_PRIMAL,
    ItemRarity.SPECIAL: EmbedColor.ITEM_SPECIAL,
}

SLOT_NAMES = {
    ItemSlot.WEAPON: "무기",
    ItemSlot.ARMOR: "방어구",
    ItemSlot.MATERIAL: "재료",
}

SLOT_EMOJIS = {
    ItemSlot.WEAPON: "⚔️",
    ItemSlot.ARMOR: "🛡️",
    ItemSlot.MATERIAL: "📦",
}


def get_rarity_name(rarity: ItemRarity) -> str:
    return RARITY_NAMES.get(rarity, rarity.value)


def get_rarity_emoji(rarity: ItemRarity) -> str:
    return RARITY_EMOJIS.get(rarity, "⚫")


def get_rarity_color(rarity: ItemRarity) -> int:
    return RARITY_COLORS.get(rarity, EmbedColor.DEFAULT)


def get_slot_name(slot: ItemSlot) -> str:
    return SLOT_NAMES.get(slot, slot.value)


def format_item_name(item) -> str:
    """
    아이템 표시 이름

    Args:
        item: Item (name, rarity 속성 필요)

    Returns:
        "🟡 용살자 대검 (전설)" 형태
    """
    return f"{get_rarity_emoji(item.rarity)} {item.name} ({get_rarity_name(item.rarity)})"
