"""
무한의 탑 명령어 (상태, 전투, 강화, 장착, 인벤토리, 리셋)
"""
import logging
from typing import Optional

import discord
from discord import app_commands
from discord.ext import commands

from config import ItemSlot
from config.settings import GUILD_IDS
from service.game_service import GameService
from views.embeds import (
    create_battle_embed,
    create_inventory_embed,
    create_state_embed,
)

logger = logging.getLogger(__name__)

STAT_CHOICES = [
    app_commands.Choice(name="체력", value="health"),
    app_commands.Choice(name="공격력", value="attack"),
    app_commands.Choice(name="방어력", value="defense"),
]

TAB_CHOICES = [
    app_commands.Choice(name="무기", value=ItemSlot.WEAPON.value),
    app_commands.Choice(name="방어구", value=ItemSlot.ARMOR.value),
    app_commands.Choice(name="재료", value=ItemSlot.MATERIAL.value),
]


class TowerCommand(commands.Cog):
    """무한의 탑 명령어"""

    def __init__(self, bot: commands.Bot, game: GameService):
        self.bot = bot
        self.game = game

    @app_commands.command(name="상태", description="🗼 현재 탑 상태를 확인합니다")
    @app_commands.guilds(*GUILD_IDS)
    async def state(self, interaction: discord.Interaction):
        state = await self.game.get_state()
        preview = await self.game.get_upgrade_preview()
        await interaction.response.send_message(
            embed=create_state_embed(state, preview), ephemeral=True
        )

    @app_commands.command(name="전투", description="⚔️ 현재 층 몬스터와 한 번 공방을 주고받습니다")
    @app_commands.guilds(*GUILD_IDS)
    async def battle(self, interaction: discord.Interaction):
        result = await self.game.battle_tick()
        await interaction.response.send_message(embed=create_battle_embed(result), ephemeral=True)

    @app_commands.command(name="강화", description="⬆️ 골드로 스탯을 강화합니다")
    @app_commands.guilds(*GUILD_IDS)
    @app_commands.describe(stat="강화할 스탯", amount="강화 횟수 (기본 1)")
    @app_commands.choices(stat=STAT_CHOICES)
    async def upgrade(
        self,
        interaction: discord.Interaction,
        stat: app_commands.Choice[str],
        amount: Optional[int] = 1,
    ):
        result = await self.game.upgrade(stat.value, amount if amount is not None else 1)
        if not result.success:
            await interaction.response.send_message(f"❌ {result.message}", ephemeral=True)
            return

        costs = result.next_costs
        await interaction.response.send_message(
            f"✅ {result.message} (💰 -{result.spent_cost:,}원)\n"
            f"다음 비용 · 체력 {costs.health:,} / 공격력 {costs.attack:,} / 방어력 {costs.defense:,}",
            ephemeral=True,
        )

    @app_commands.command(name="장착", description="🛡️ 인벤토리의 장비를 착용합니다")
    @app_commands.guilds(*GUILD_IDS)
    @app_commands.describe(item_id="아이템 ID (예: it-3)")
    async def equip(self, interaction: discord.Interaction, item_id: str):
        result = await self.game.equip(item_id.strip())
        if not result.success:
            await interaction.response.send_message(f"❌ {result.message}", ephemeral=True)
            return

        await interaction.response.send_message(
            f"✅ {result.message}",
            embed=create_inventory_embed(result.inventory),
            ephemeral=True,
        )

    @app_commands.command(name="인벤토리", description="🎒 인벤토리를 확인합니다")
    @app_commands.guilds(*GUILD_IDS)
    @app_commands.describe(tab="표시할 탭 (기본: 전체)")
    @app_commands.choices(tab=TAB_CHOICES)
    async def inventory(
        self,
        interaction: discord.Interaction,
        tab: Optional[app_commands.Choice[str]] = None,
    ):
        inventory = await self.game.get_inventory()
        slot = ItemSlot(tab.value) if tab else None
        await interaction.response.send_message(
            embed=create_inventory_embed(inventory, slot), ephemeral=True
        )

    @app_commands.command(name="리셋", description="🔄 게임을 처음부터 다시 시작합니다")
    @app_commands.guilds(*GUILD_IDS)
    async def reset(self, interaction: discord.Interaction):
        await self.game.reset_session()
        logger.info(f"Game reset by {interaction.user.id}")
        await interaction.response.send_message("🔄 게임이 리셋되었습니다.", ephemeral=True)


async def setup(bot: commands.Bot):
    await bot.add_cog(TowerCommand(bot, bot.game))
