"""
런타임 환경 설정

.env 파일에서 Discord 접속 정보를 읽어옵니다.
검증은 bot.py 시작 시점에 수행합니다.
"""
import os

from dotenv import load_dotenv

load_dotenv()

IS_DEV = os.getenv("DEV") == "TRUE"

if IS_DEV:
    APPLICATION_ID = int(os.getenv("DEV_APPLICATION_ID") or 0)
    DISCORD_TOKEN = os.getenv("DEV_DISCORD_TOKEN")
else:
    APPLICATION_ID = int(os.getenv("APPLICATION_ID") or 0)
    DISCORD_TOKEN = os.getenv("DISCORD_TOKEN")

GUILD_IDS: list[int] = [
    int(guild_id)
    for guild_id in (os.getenv("GUILD_IDS") or os.getenv("GUILD_ID") or "").split(",")
    if guild_id.strip()
]

AUTO_BATTLE_INTERVAL_OVERRIDE = float(os.getenv("AUTO_BATTLE_INTERVAL") or 0)
"""0이면 config.climb 기본값 사용"""

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
