"""
GameService

호스트(Discord 봇 등)가 엔진을 호출하는 유일한 진입점입니다.

- 모든 연산은 세션 전체에 대한 하나의 Lock으로 직렬화됩니다.
- 엔진 내부 예외(TowerBotError)는 success=False 결과로 변환되어 밖으로 던져지지 않습니다.
"""
import asyncio
import logging
from typing import Optional

from exceptions import TowerBotError
from models import BattleResult, EquipResult, GameState, Inventory, UpgradeResult
from service.economy.upgrade_service import UpgradeService
from service.item.equipment_service import EquipmentService
from service.player.stat_service import StatService
from service.session import GameSession
from service.tower.tower_service import battle_tick, sync_monster

logger = logging.getLogger(__name__)

STAT_NAMES = {
    "health": "체력",
    "attack": "공격력",
    "defense": "방어력",
}


class GameService:
    """단일 게임 세션 연산 파사드"""

    def __init__(self, session: Optional[GameSession] = None):
        self.session = session or GameSession()

        self._lock = asyncio.Lock()
        """세션 상태 read-modify-write 직렬화용 Lock"""

        logger.info("GameService initialized")

    async def get_state(self) -> GameState:
        """현재 상태 조회 (현재 층 몬스터 HP가 오래됐으면 다시 맞춘다)"""
        async with self._lock:
            session = self.session
            sync_monster(session)
            return GameState(
                user=StatService.get_effective_stats(session.player, session.inventory),
                monster=session.monster_snapshot(session.player.floor),
                upgrade_costs=UpgradeService.get_upgrade_costs(session.upgrade_counts),
                inventory=session.inventory,
            )

    async def battle_tick(self) -> BattleResult:
        async with self._lock:
            return battle_tick(self.session)

    async def upgrade(self, stat: str, amount: float = 1) -> UpgradeResult:
        async with self._lock:
            try:
                applied, cost = UpgradeService.upgrade(self.session, stat, amount)
            except TowerBotError as e:
                logger.debug(f"Upgrade rejected: stat={stat}, amount={amount}, reason={e.message}")
                return UpgradeResult(success=False, message=e.message)

            return UpgradeResult(
                success=True,
                message=f"{STAT_NAMES[stat]}이(가) {applied} 증가했습니다.",
                spent_cost=cost,
                next_costs=UpgradeService.get_upgrade_costs(self.session.upgrade_counts),
            )

    async def equip(self, item_id: str) -> EquipResult:
        async with self._lock:
            try:
                item = EquipmentService.equip_item(self.session.inventory, item_id)
            except TowerBotError as e:
                logger.debug(f"Equip rejected: item_id={item_id}, reason={e.message}")
                return EquipResult(success=False, message=e.message)

            return EquipResult(
                success=True,
                message=f"{item.name} 장착 완료",
                inventory=self.session.inventory,
            )

    async def reset_session(self) -> None:
        async with self._lock:
            self.session.reset()

    async def get_inventory(self) -> Inventory:
        async with self._lock:
            return self.session.inventory

    async def get_upgrade_preview(self) -> dict[str, dict[int, int]]:
        """스탯별 x1/x10/x100 일괄 강화 비용"""
        async with self._lock:
            return UpgradeService.preview_costs(self.session.upgrade_counts)
