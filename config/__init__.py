"""
무한의 탑 게임 설정 상수

모든 매직 넘버와 게임 밸런스 관련 상수를 여기서 관리합니다.
각 도메인별 설정은 config/ 하위 모듈에 정의되어 있습니다.
런타임 환경 변수(.env)는 config.settings에서 별도로 읽습니다.
"""
from config.scaling import ScalingConfig, SCALING
from config.damage import DamageConfig, DAMAGE
from config.drops import DropConfig, DROP
from config.economy import EconomyConfig, ECONOMY
from config.user_stats import UserStatsConfig, USER_STATS
from config.climb import ClimbConfig, CLIMB
from config.ui import EmbedColor, UIConfig, UI
from config.items import ItemSlot, ItemRarity, ItemStats, ItemTemplate, ZoneTable
from config.loot_tables import ZONE_TABLES, SPECIAL_SHARD_NAME

__all__ = [
    # scaling
    "ScalingConfig", "SCALING",
    # damage
    "DamageConfig", "DAMAGE",
    # drops
    "DropConfig", "DROP",
    # economy
    "EconomyConfig", "ECONOMY",
    # user stats
    "UserStatsConfig", "USER_STATS",
    # climb
    "ClimbConfig", "CLIMB",
    # ui
    "EmbedColor", "UIConfig", "UI",
    # items & loot tables
    "ItemSlot", "ItemRarity", "ItemStats", "ItemTemplate", "ZoneTable",
    "ZONE_TABLES", "SPECIAL_SHARD_NAME",
]
