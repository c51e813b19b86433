"""
Tower Embeds

게임 상태, 전투 결과, 인벤토리의 Discord Embed 생성을 담당합니다.
"""
from typing import Optional

import discord

from config import CLIMB, UI, EmbedColor, ItemRarity, ItemSlot
from models import BattleResult, BattleStatus, GameState, Inventory, Item
from service.item.inventory_service import InventoryService
from utils.rarity_display import format_item_name, get_rarity_color, get_slot_name


def format_number(value: float) -> str:
    """정수면 소수점 없이, 아니면 한 자리까지"""
    if float(value).is_integer():
        return f"{value:,.0f}"
    return f"{value:,.1f}"


def create_health_bar(current: float, maximum: float, filled: str = UI.HEALTH_BAR_FILLED) -> str:
    """'🟩🟩🟩⬛⬛ 60 / 100' 형태 HP 바"""
    safe_max = max(1, maximum)
    safe_current = min(max(0, current), safe_max)
    length = CLIMB.HEALTH_BAR_LENGTH
    filled_count = round(safe_current / safe_max * length)
    bar = filled * filled_count + UI.BAR_EMPTY * (length - filled_count)
    return f"{bar} {round(safe_current):,} / {round(safe_max):,}"


def _format_stats(item: Item) -> str:
    parts = []
    if item.stats.attack:
        parts.append(f"공격력 +{format_number(item.stats.attack)}")
    if item.stats.defense:
        parts.append(f"방어력 +{format_number(item.stats.defense)}")
    if item.stats.health:
        parts.append(f"체력 +{format_number(item.stats.health)}")
    return ", ".join(parts) or "스탯 없음"


def format_item_line(item: Item) -> str:
    return f"`{item.id}` {format_item_name(item)} · {_format_stats(item)}"


def create_state_embed(state: GameState, preview: dict[str, dict[int, int]]) -> discord.Embed:
    """현재 상태 Embed (유저/몬스터/강화 패널)"""
    user = state.user
    monster = state.monster

    embed = discord.Embed(
        title=f"🗼 무한의 탑 {user.floor:,}층",
        description=f"최고 기록: **{user.best_floor:,}층** · 💰 {user.gold:,}원",
        color=EmbedColor.DEFAULT,
    )
    embed.add_field(
        name="🧍 유저 스탯",
        value=(
            f"{create_health_bar(user.current_health, user.max_health)}\n"
            f"⚔️ 공격력: **{format_number(user.attack)}**\n"
            f"🛡️ 방어력: **{format_number(user.defense)}**"
        ),
        inline=True,
    )
    embed.add_field(
        name="👹 몬스터 스탯",
        value=(
            f"{create_health_bar(monster.current_health, monster.max_health, UI.MONSTER_BAR_FILLED)}\n"
            f"⚔️ 공격력: **{format_number(monster.attack)}**\n"
            f"🛡️ 방어력: **{format_number(monster.defense)}**"
        ),
        inline=True,
    )

    labels = {"health": "❤️ 체력", "attack": "⚔️ 공격력", "defense": "🛡️ 방어력"}
    lines = []
    for stat, costs in preview.items():
        cost_text = " / ".join(f"+{amount} {cost:,}원" for amount, cost in costs.items())
        lines.append(f"{labels[stat]}: {cost_text}")
    embed.add_field(name="⬆️ 강화 비용", value="\n".join(lines), inline=False)

    inventory = state.inventory
    equipped = [
        f"무기: {format_item_name(inventory.weapon) if inventory.weapon else '없음'}",
        f"방어구: {format_item_name(inventory.armor) if inventory.armor else '없음'}",
    ]
    embed.add_field(name="🎒 장착 장비", value="\n".join(equipped), inline=False)
    return embed


def create_battle_embed(result: BattleResult) -> discord.Embed:
    """전투 1틱 결과 Embed"""
    titles = {
        BattleStatus.VICTORY: ("🎉 승리!", EmbedColor.VICTORY),
        BattleStatus.DEFEAT: ("💀 패배", EmbedColor.DEFEAT),
        BattleStatus.ONGOING: ("⚔️ 전투 중", EmbedColor.ONGOING),
    }
    title, color = titles[result.status]

    embed = discord.Embed(title=title, description=result.summary(), color=color)
    if result.gold_earned:
        embed.add_field(name="💰 골드", value=f"+{result.gold_earned:,}원", inline=True)
    embed.add_field(name="❤️ 유저 HP", value=f"{round(result.user_health):,}", inline=True)
    embed.add_field(name="👹 몬스터 HP", value=f"{round(result.monster_health):,}", inline=True)

    drop_text = create_drop_text(result.drops)
    if drop_text:
        embed.add_field(name="🎁 드롭 아이템", value=drop_text, inline=False)
        embed.color = get_rarity_color(max(result.drops, key=_rarity_rank).rarity)
    return embed


def create_drop_text(drops: list[Item]) -> Optional[str]:
    if not drops:
        return None
    lines = [format_item_line(item) for item in drops[:UI.MAX_DROPS_SHOWN]]
    return "\n".join(lines)


def create_inventory_embed(inventory: Inventory, slot: Optional[ItemSlot] = None) -> discord.Embed:
    """인벤토리 Embed (slot 지정 시 해당 탭만)"""
    embed = discord.Embed(title="🎒 인벤토리", color=EmbedColor.INVENTORY)

    slots = [slot] if slot else list(ItemSlot)
    for tab in slots:
        items = InventoryService.items_by_slot(inventory, tab)
        shown = items[:CLIMB.INVENTORY_PAGE_SIZE]
        value = "\n".join(format_item_line(item) for item in shown) or "비어 있음"
        if len(items) > len(shown):
            value += f"\n… 외 {len(items) - len(shown)}개"
        embed.add_field(name=f"{get_slot_name(tab)} ({len(items)})", value=value[:1024], inline=False)

    embed.set_footer(text="/장착 <아이템 ID> 로 장비를 착용합니다.")
    return embed


def _rarity_rank(item: Item) -> int:
    return list(ItemRarity).index(item.rarity)
