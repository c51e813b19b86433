# bot.py
import logging
import os

import discord
from discord.app_commands import CommandSignatureMismatch
from discord.ext import commands

from config.settings import APPLICATION_ID, DISCORD_TOKEN, GUILD_IDS, LOG_LEVEL
from service.game_service import GameService
from service.session import GameSession

# 로그 기본 설정
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)

COGS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "cogs")


class TowerBot(commands.Bot):
    def __init__(self, game: GameService):
        intents = discord.Intents.default()
        super().__init__(
            command_prefix="!",
            intents=intents,
            application_id=APPLICATION_ID
        )
        # 프로세스 전체에서 하나의 게임 세션만 유지 (재시작 시 초기화)
        self.game = game

    async def setup_hook(self):
        for fn in sorted(os.listdir(COGS_DIR)):
            if fn.endswith(".py") and not fn.startswith("_"):
                await self.load_extension(f"cogs.{fn[:-3]}")
                logging.info(f"Loaded cogs.{fn[:-3]}")

        for guild_id in GUILD_IDS:
            synced = await self.tree.sync(guild=discord.Object(id=guild_id))
            logging.info(f"길드 {guild_id}: {len(synced)}개 synced: {[c.name for c in synced]}")

    async def on_ready(self):
        logging.info(f"Logged in as {self.user} (ID: {self.user.id})")


def main():
    if not DISCORD_TOKEN or not APPLICATION_ID or not GUILD_IDS:
        raise RuntimeError("환경변수 DISCORD_TOKEN, APPLICATION_ID, GUILD_IDS를 .env에 모두 설정해주세요")

    bot = TowerBot(GameService(GameSession()))

    @bot.tree.error
    async def on_app_command_error(interaction: discord.Interaction, error):
        if isinstance(error, CommandSignatureMismatch):
            await interaction.response.defer(ephemeral=True, thinking=True)
            synced = []
            for guild_id in GUILD_IDS:
                synced += await bot.tree.sync(guild=discord.Object(id=guild_id))
            return await interaction.followup.send(
                f"⚠️ 명령 시그니처가 갱신되어 `{', '.join(c.name for c in synced)}` 명령어를 재등록했습니다 .\n "
                "다시 시도해 주세요.",
                ephemeral=True
            )
        raise error

    bot.run(DISCORD_TOKEN, log_handler=None)


if __name__ == "__main__":
    main()
