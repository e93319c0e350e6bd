from collections import Counter

from fenrir.core.rng import RNG
from fenrir.services.loot_service import LootService

from tests.helpers import ScriptedRNG, items_repo, loot_tables_repo


def _make_service() -> LootService:
    return LootService(loot_tables_repo, items_repo)


def test_chest_tier_boundaries() -> None:
    service = _make_service()

    assert service.draw_chest(ScriptedRNG(floats=[0.0])).tier == "common"
    assert service.draw_chest(ScriptedRNG(floats=[0.59])).tier == "common"
    assert service.draw_chest(ScriptedRNG(floats=[0.6])).tier == "rare"
    assert service.draw_chest(ScriptedRNG(floats=[0.89])).tier == "rare"
    assert service.draw_chest(ScriptedRNG(floats=[0.9])).tier == "epic"


def test_chest_picks_item_within_tier() -> None:
    service = _make_service()

    drop = service.draw_chest(ScriptedRNG(floats=[0.95], choices=[1]))

    assert drop.item.id == "titanium_vest"
    assert drop.tier == "epic"


def test_scanner_shared_between_common_and_epic_is_one_item() -> None:
    service = _make_service()

    common = service.draw_chest(ScriptedRNG(floats=[0.1], choices=[3])).item
    epic = service.draw_chest(ScriptedRNG(floats=[0.95], choices=[3])).item

    assert common is epic
    assert common.name == "Skanner"


def test_chest_tier_distribution_is_60_30_10() -> None:
    service = _make_service()
    rng = RNG(2024)
    draws = 20000

    tiers = Counter(service.draw_chest(rng).tier for _ in range(draws))

    assert abs(tiers["common"] / draws - 0.6) < 0.02
    assert abs(tiers["rare"] / draws - 0.3) < 0.02
    assert abs(tiers["epic"] / draws - 0.1) < 0.02


def test_basic_draw_is_uniform_over_six_items() -> None:
    service = _make_service()
    rng = RNG(77)

    seen = Counter(service.draw_basic(rng).id for _ in range(6000))

    assert set(seen) == {
        "small_medkit",
        "adrenaline",
        "fenrir_armour",
        "rusks",
        "power_elixir",
        "mega_medkit",
    }
    assert min(seen.values()) > 800
