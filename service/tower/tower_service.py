"""
탑 전투 서비스

battle_tick 1회 = 유저 공격 → (생존 시) 몬스터 반격, 한 번의 공방입니다.
승리/패배 후에는 다음 전투를 위해 상태가 자동으로 초기화됩니다.
"""
import logging

from config import USER_STATS
from models import BattleResult, BattleStatus
from service.combat import DamageCalculator
from service.item.equipment_service import EquipmentService
from service.player.stat_service import StatService
from service.session import GameSession
from service.tower.floor_scaling import get_monster_stats, is_boss_floor
from service.tower.tower_reward_service import apply_floor_reward

logger = logging.getLogger(__name__)


def sync_monster(session: GameSession) -> None:
    """층이 바뀌었거나 몬스터가 쓰러진 상태면 현재 층 몬스터를 최대 HP로 초기화"""
    floor = session.player.floor
    if session.monster_floor != floor or session.monster_health <= 0:
        session.reset_monster(floor)


def battle_tick(session: GameSession) -> BattleResult:
    player = session.player
    floor = player.floor
    monster = get_monster_stats(floor)
    effective = StatService.get_effective_stats(player, session.inventory)
    bonus_health = EquipmentService.get_equipment_bonus(session.inventory).health

    sync_monster(session)

    user_damage = DamageCalculator.calculate_damage(effective.attack, monster.defense).damage
    monster_damage = DamageCalculator.calculate_damage(monster.attack, effective.defense).damage

    monster_hp = session.monster_health - user_damage
    if monster_hp <= 0:
        return _handle_floor_clear(session, floor)

    user_hp = effective.current_health - monster_damage
    session.monster_health = monster_hp
    player.current_health = max(0, user_hp - bonus_health)

    if user_hp <= 0:
        return _handle_tower_death(session, floor)

    logger.debug(
        f"Battle ongoing: floor={floor}, user_hp={player.current_health}, "
        f"monster_hp={session.monster_health}"
    )
    return BattleResult(
        status=BattleStatus.ONGOING,
        gold_earned=0,
        new_floor=player.floor,
        best_floor=player.best_floor,
        user_health=player.current_health,
        monster_health=session.monster_health,
    )


def _handle_floor_clear(session: GameSession, cleared_floor: int) -> BattleResult:
    """승리: 골드 획득, 층 상승, HP 전부 회복, 다음 층 몬스터 준비, 드롭"""
    player = session.player
    is_boss = is_boss_floor(cleared_floor)

    player.floor = cleared_floor + 1
    player.best_floor = max(player.best_floor, player.floor)
    player.heal_full()
    session.reset_monster(player.floor)

    reward = apply_floor_reward(session, cleared_floor, is_boss)

    if is_boss:
        logger.info(f"Boss floor {cleared_floor} cleared: gold={reward.gold}, drops={len(reward.drops)}")

    return BattleResult(
        status=BattleStatus.VICTORY,
        gold_earned=reward.gold,
        new_floor=player.floor,
        best_floor=player.best_floor,
        user_health=player.current_health,
        monster_health=0,
        drops=reward.drops,
    )


def _handle_tower_death(session: GameSession, floor: int) -> BattleResult:
    """패배: 1층으로 복귀, HP 전부 회복, 몬스터 초기화 (골드/최고 층 유지)"""
    player = session.player
    player.floor = USER_STATS.INITIAL_FLOOR
    player.heal_full()
    session.reset_monster(player.floor)

    logger.info(f"Defeated on floor {floor}: best_floor={player.best_floor}")

    return BattleResult(
        status=BattleStatus.DEFEAT,
        gold_earned=0,
        new_floor=player.floor,
        best_floor=player.best_floor,
        user_health=player.current_health,
        monster_health=session.monster_health,
    )
