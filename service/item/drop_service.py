"""
DropService

층 클리어 시 드롭 판정, 희귀도 롤링, 아이템 생성을 담당합니다.

드롭은 두 단계의 독립 판정입니다:
1. 드롭 여부 (보스 10% / 일반 2%) 통과 시 구역 테이블에서 희귀도 → 아이템
2. 같은 조건에서 구역별 확률로 균열의 파편 추가 판정
"""
import logging

from config import DROP, SPECIAL_SHARD_NAME, ItemRarity, ItemSlot, ItemTemplate, ZoneTable
from models import Item
from service.session import GameSession
from service.tower.floor_scaling import get_zone
from utils.weighted_random import weighted_pick

logger = logging.getLogger(__name__)

SPECIAL_SHARD = ItemTemplate(SPECIAL_SHARD_NAME, ItemSlot.MATERIAL)


class DropService:
    """드롭 비즈니스 로직"""

    @staticmethod
    def get_drop_rate(is_boss: bool) -> float:
        return DROP.BOSS_DROP_RATE if is_boss else DROP.NORMAL_DROP_RATE

    @staticmethod
    def roll_rarity(session: GameSession, table: ZoneTable) -> ItemRarity:
        """구역 가중치 테이블 기반 희귀도 결정"""
        return weighted_pick(table.rarity_weights, session.rng)

    @staticmethod
    def create_item(
        session: GameSession,
        zone: int,
        rarity: ItemRarity,
        template: ItemTemplate,
    ) -> Item:
        return Item.from_template(session.next_item_id(), zone, rarity, template)

    @staticmethod
    def roll_drop(session: GameSession, floor: int, is_boss: bool) -> list[Item]:
        """
        층 클리어 드롭 판정

        Args:
            session: 게임 세션
            floor: 클리어한 층
            is_boss: 보스층 여부

        Returns:
            드롭 아이템 목록 (0~2개)
        """
        drops: list[Item] = []
        if session.rng.random() >= DropService.get_drop_rate(is_boss):
            return drops

        zone = get_zone(floor)
        table = session.zone_tables[zone]

        rarity = DropService.roll_rarity(session, table)
        pool = table.pool(rarity)
        if pool:
            template = pool[int(session.rng.random() * len(pool))]
            drops.append(DropService.create_item(session, zone, rarity, template))
        else:
            logger.debug(f"Empty item pool: zone={zone}, rarity={rarity.value}")

        # 균열의 파편은 위 결과와 무관하게 독립 판정
        if session.rng.random() < table.special_shard_chance:
            drops.append(
                DropService.create_item(session, zone, ItemRarity.SPECIAL, SPECIAL_SHARD)
            )

        for item in drops:
            if item.rarity.value in DROP.LOG_RARITIES:
                logger.info(
                    f"Rare drop: floor={floor}, zone={zone}, "
                    f"item_id={item.id}, item_name={item.name}, rarity={item.rarity.value}"
                )

        return drops
