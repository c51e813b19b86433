from models.item import Item
from models.inventory import Inventory
from models.monster import MonsterSnapshot
from models.player import PlayerStats, UpgradeCounters
from models.results import (
    BattleStatus,
    BattleResult,
    UpgradeCosts,
    UpgradeResult,
    EquipResult,
    GameState,
)

__all__ = [
    "Item",
    "Inventory",
    "MonsterSnapshot",
    "PlayerStats",
    "UpgradeCounters",
    "BattleStatus",
    "BattleResult",
    "UpgradeCosts",
    "UpgradeResult",
    "EquipResult",
    "GameState",
]
