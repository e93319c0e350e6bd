from fenrir.core.rng import RNG
from fenrir.domain.defs import EffectKind, ItemDef
from fenrir.domain.entities.stats import MAX_DODGE_CHANCE
from fenrir.domain.item_effects import apply_item_effect

from tests.helpers import items_repo, make_state


def _player(class_id: str = "warrior"):
    return make_state(RNG(1), class_id=class_id).player


def test_heal_is_capped_at_max_hp() -> None:
    player = _player()
    player.stats.hp = 100

    result = apply_item_effect(player, items_repo.get("small_medkit"))

    assert player.stats.hp == 120
    assert result.amount == 20
    assert result.effect is EffectKind.HEAL


def test_heal_at_full_hp_changes_nothing() -> None:
    player = _player()

    result = apply_item_effect(player, items_repo.get("mega_medkit"))

    assert player.stats.hp == player.stats.max_hp
    assert result.amount == 0


def test_attack_boost_raises_both_bounds() -> None:
    player = _player()

    apply_item_effect(player, items_repo.get("combat_module"))

    assert (player.stats.attack_min, player.stats.attack_max) == (13, 19)


def test_dodge_boost_is_clamped() -> None:
    player = _player()
    player.stats.dodge_chance = 90

    result = apply_item_effect(player, items_repo.get("dodge_implant"))

    assert player.stats.dodge_chance == MAX_DODGE_CHANCE
    assert result.amount == 5


def test_hp_boost_raises_current_and_max() -> None:
    player = _player("sniper")
    player.stats.hp = 40

    apply_item_effect(player, items_repo.get("titanium_vest"))

    assert player.stats.max_hp == 130
    assert player.stats.hp == 90


def test_scan_boost_adds_charges() -> None:
    player = _player()

    apply_item_effect(player, items_repo.get("scanner"))

    assert player.scan_charges == 5


def test_every_effect_kind_has_a_message() -> None:
    player = _player()
    for kind in EffectKind:
        item = ItemDef(id=f"probe_{kind.value}", name=kind.value, description="", effect=kind, amount=1)
        result = apply_item_effect(player, item)
        assert result.message
