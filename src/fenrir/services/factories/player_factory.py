"""Factory for creating the player from a class definition."""
from __future__ import annotations

from fenrir.core.config import GameConfig
from fenrir.core.rng import RNG
from fenrir.data.repositories import ClassesRepository
from fenrir.domain.entities import Player, Stats
from fenrir.domain.inventory import Inventory
from fenrir.services.errors import FactoryError

from .id_factory import make_instance_id


def resolve_class_id(raw: str, classes_repo: ClassesRepository) -> str | None:
    """Return the class id for a typed name or alias, or None if unknown."""
    if not raw or not raw.strip():
        return None
    return classes_repo.resolve_alias(raw)


def create_player_from_class_id(
    class_id: str,
    classes_repo: ClassesRepository,
    rng: RNG,
    config: GameConfig | None = None,
) -> Player:
    """Instantiate a player with the class's base stats and starting items."""
    config = config or GameConfig()
    try:
        class_def = classes_repo.get(class_id)
    except KeyError as exc:
        raise FactoryError(f"Class '{class_id}' not found.") from exc

    stats = Stats(
        max_hp=class_def.base_hp,
        hp=class_def.base_hp,
        attack_min=class_def.attack_min,
        attack_max=class_def.attack_max,
        dodge_chance=class_def.dodge,
    )
    inventory = Inventory()
    for item_id, quantity in class_def.starting_items:
        inventory.add_item(item_id, quantity)

    return Player(
        id=make_instance_id("player", rng),
        class_id=class_def.id,
        class_name=class_def.name,
        special=class_def.special,
        stats=stats,
        xp_to_next=config.starting_xp_to_next,
        scan_charges=config.starting_scan_charges,
        inventory=inventory,
    )
