"""자동 전투 Cog - 일정 간격으로 전투 틱 실행"""
import logging
from typing import Optional

import discord
from discord import app_commands
from discord.ext import commands, tasks

from config import CLIMB
from config.settings import AUTO_BATTLE_INTERVAL_OVERRIDE, GUILD_IDS
from models import BattleStatus
from service.game_service import GameService
from views.embeds import create_battle_embed

logger = logging.getLogger(__name__)


class AutoBattleCog(commands.Cog):
    """자동 전투 관리"""

    def __init__(self, bot: commands.Bot, game: GameService):
        self.bot = bot
        self.game = game
        self.enabled = CLIMB.AUTO_BATTLE_ENABLED_ON_START
        self.notify_channel: Optional[discord.abc.Messageable] = None

        interval = AUTO_BATTLE_INTERVAL_OVERRIDE or CLIMB.AUTO_BATTLE_INTERVAL_SECONDS
        self.auto_battle.change_interval(seconds=interval)
        self.auto_battle.start()
        logger.info(f"AutoBattleCog initialized (interval={interval}s)")

    def cog_unload(self):
        """Cog 언로드 시 작업 정지"""
        self.auto_battle.cancel()
        logger.info("AutoBattleCog unloaded")

    @tasks.loop(seconds=CLIMB.AUTO_BATTLE_INTERVAL_SECONDS)
    async def auto_battle(self):
        """자동 전투 1틱"""
        if not self.enabled:
            return

        try:
            result = await self.game.battle_tick()
        except Exception as e:
            logger.error(f"Auto battle tick failed: {e}", exc_info=True)
            return

        # 패배와 드롭만 채널에 알린다
        if result.status == BattleStatus.DEFEAT or result.drops:
            await self._notify(result)

    async def _notify(self, result) -> None:
        if self.notify_channel is None:
            return
        try:
            await self.notify_channel.send(embed=create_battle_embed(result))
        except discord.HTTPException as e:
            logger.warning(f"Failed to send auto battle notification: {e}")

    @auto_battle.before_loop
    async def before_auto_battle(self):
        """봇 준비 대기"""
        await self.bot.wait_until_ready()
        logger.info("Auto battle task ready")

    @app_commands.command(name="자동전투", description="🔁 1초마다 자동으로 전투합니다")
    @app_commands.guilds(*GUILD_IDS)
    @app_commands.describe(enabled="켜기/끄기")
    async def toggle(self, interaction: discord.Interaction, enabled: bool):
        self.enabled = enabled
        self.notify_channel = interaction.channel if enabled else None
        logger.info(f"Auto battle {'enabled' if enabled else 'disabled'} by {interaction.user.id}")

        status = "켜졌습니다" if enabled else "꺼졌습니다"
        await interaction.response.send_message(f"🔁 자동 전투가 {status}.", ephemeral=True)


async def setup(bot: commands.Bot):
    """Cog 로드"""
    await bot.add_cog(AutoBattleCog(bot, bot.game))
