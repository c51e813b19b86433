"""임베드 생성 유틸리티"""
from views.embeds.tower_embeds import (
    create_health_bar,
    create_state_embed,
    create_battle_embed,
    create_inventory_embed,
    create_drop_text,
)

__all__ = [
    "create_health_bar",
    "create_state_embed",
    "create_battle_embed",
    "create_inventory_embed",
    "create_drop_text",
]
