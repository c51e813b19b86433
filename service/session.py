"""
게임 세션 상태

호스트 프로세스가 한 번 생성해 모든 엔진 연산에 명시적으로 넘기는 상태 객체입니다.
플레이어 스탯, 몬스터 추적 정보, 강화 횟수, 인벤토리를 소유합니다.
"""
import itertools
import logging
import random
from typing import Optional

from config import DROP, ZONE_TABLES, ZoneTable
from models import Inventory, MonsterSnapshot, PlayerStats, UpgradeCounters
from service.tower.floor_scaling import get_monster_stats

logger = logging.getLogger(__name__)


class GameSession:
    def __init__(
        self,
        rng: Optional[random.Random] = None,
        zone_tables: Optional[dict[int, ZoneTable]] = None,
    ):
        self.rng = rng or random.Random()
        self.zone_tables = zone_tables if zone_tables is not None else ZONE_TABLES
        # 리셋해도 아이템 ID는 계속 증가한다
        self._item_ids = itertools.count(1)

        self.player: PlayerStats
        self.upgrade_counts: UpgradeCounters
        self.inventory: Inventory
        self.monster_floor: int
        self.monster_health: float
        self.reset()

    def reset(self) -> None:
        self.player = PlayerStats()
        self.upgrade_counts = UpgradeCounters()
        self.inventory = Inventory()
        self.reset_monster(self.player.floor)
        logger.info("Game session reset")

    def reset_monster(self, floor: int) -> None:
        """floor 몬스터를 최대 HP로 추적 시작"""
        self.monster_floor = floor
        self.monster_health = get_monster_stats(floor).max_health

    def next_item_id(self) -> str:
        return f"{DROP.ITEM_ID_PREFIX}-{next(self._item_ids)}"

    def monster_snapshot(self, floor: int) -> MonsterSnapshot:
        """
        floor 몬스터 스냅샷

        추적 중인 층과 같을 때만 저장된 HP를 쓰고, 아니면 최대 HP로 보입니다.
        """
        stats = get_monster_stats(floor)
        current = self.monster_health if self.monster_floor == floor else stats.max_health
        return MonsterSnapshot(
            max_health=stats.max_health,
            current_health=current,
            attack=stats.attack,
            defense=stats.defense,
        )
