from __future__ import annotations

from fenrir.domain.world import Direction, TileKind
from fenrir.services.events import ActionFailedEvent, ItemGainedEvent, NarrationEvent
from fenrir.services.world_service import (
    BattleRequestedEvent,
    MovedEvent,
    OasisEvent,
    PlayerDiedEvent,
    ScanEvent,
    TrapTriggeredEvent,
)

from tests.helpers import ScriptedRNG, make_services, make_state

_TRAP_MAP = ("...", ".T.", "...")


def _world_service():
    return make_services()[4]


def _events_of(events, event_type):
    return [event for event in events if isinstance(event, event_type)]


def test_explore_empty_tile_only_narrates() -> None:
    service = _world_service()
    state = make_state(ScriptedRNG())

    events = service.explore(state)

    assert all(isinstance(event, NarrationEvent) for event in events)
    assert events[-1].text == "Nothing interesting here."


def test_lethal_trap_ends_session_without_chest_roll() -> None:
    rng = ScriptedRNG(ints=[25])
    service = _world_service()
    state = make_state(rng, rows=_TRAP_MAP)
    state.player.stats.hp = 5

    events = service.explore(state)

    assert state.player.stats.hp == 0
    assert state.status == "defeated"
    assert state.is_over
    assert state.world.current_tile() is TileKind.TRAP
    assert _events_of(events, PlayerDiedEvent)
    assert not _events_of(events, ItemGainedEvent)
    assert rng.exhausted


def test_survived_trap_may_drop_chest_and_clears_tile() -> None:
    rng = ScriptedRNG(ints=[10], floats=[0.2, 0.5])
    service = _world_service()
    state = make_state(rng, rows=_TRAP_MAP)

    events = service.explore(state)

    assert _events_of(events, TrapTriggeredEvent)[0].damage == 10
    assert state.player.stats.hp == 110
    drop = _events_of(events, ItemGainedEvent)[0]
    assert (drop.item_id, drop.tier, drop.source) == ("small_medkit", "common", "trap")
    assert state.world.current_tile() is TileKind.EMPTY
    assert state.status == "active"


def test_survived_trap_without_chest() -> None:
    rng = ScriptedRNG(ints=[10], floats=[0.9])
    service = _world_service()
    state = make_state(rng, rows=_TRAP_MAP)

    events = service.explore(state)

    assert not _events_of(events, ItemGainedEvent)
    assert state.world.current_tile() is TileKind.EMPTY


def test_loot_tile_grants_basic_item() -> None:
    rng = ScriptedRNG(choices=[0, 5])
    service = _world_service()
    state = make_state(rng, rows=("...", ".L.", "..."))

    events = service.explore(state)

    drop = _events_of(events, ItemGainedEvent)[0]
    assert (drop.item_id, drop.source) == ("mega_medkit", "cache")
    assert state.player.inventory.count("mega_medkit") == 1
    assert state.world.current_tile() is TileKind.EMPTY


def test_oasis_heals_fully_and_may_raise_attack() -> None:
    rng = ScriptedRNG(floats=[0.1])
    service = _world_service()
    state = make_state(rng, rows=("...", ".O.", "..."))
    state.player.stats.hp = 30

    events = service.explore(state)

    oasis = _events_of(events, OasisEvent)[0]
    assert oasis.attack_bonus == 1
    assert state.player.stats.hp == 120
    assert (state.player.stats.attack_min, state.player.stats.attack_max) == (9, 15)
    assert state.world.current_tile() is TileKind.EMPTY


def test_oasis_without_bonus() -> None:
    rng = ScriptedRNG(floats=[0.3])
    service = _world_service()
    state = make_state(rng, rows=("...", ".O.", "..."))

    events = service.explore(state)

    assert _events_of(events, OasisEvent)[0].attack_bonus == 0
    assert state.player.stats.attack_min == 8


def test_combat_tile_requests_battle_and_keeps_tile_until_resolved() -> None:
    rng = ScriptedRNG(choices=[0, 0], floats=[0.1])
    _, _, battle_service, _, service = make_services()
    state = make_state(rng, rows=("...", ".W.", "..."))

    events = service.explore(state)

    request = _events_of(events, BattleRequestedEvent)[0]
    assert request.battle.enemy.enemy_id == "sand_worm"
    assert state.active_battle is request.battle
    assert state.world.current_tile() is TileKind.COMBAT

    battle_service.flee(request.battle, state)
    service.finish_encounter(state, request.battle)

    assert state.active_battle is None
    assert state.world.current_tile() is TileKind.EMPTY


def test_boss_fight_marks_boss_and_later_spawns_guard() -> None:
    rng = ScriptedRNG(floats=[0.1])
    _, _, battle_service, _, service = make_services()
    state = make_state(rng, rows=("...", "BB.", "..."), position=(0, 1))

    first = _events_of(service.explore(state), BattleRequestedEvent)[0].battle
    assert first.enemy.enemy_id == "fenrir_commander"
    assert first.is_boss
    battle_service.flee(first, state)
    service.finish_encounter(state, first)

    assert state.world.boss_fought
    assert state.world.current_tile() is TileKind.EMPTY

    service.move(state, Direction.EAST)
    second = _events_of(service.explore(state), BattleRequestedEvent)[0].battle
    assert second.enemy.enemy_id == "fenrir_guard"


def test_death_in_battle_defeats_session_and_keeps_tile() -> None:
    rng = ScriptedRNG(ints=[8, 0, 50, 12])
    _, _, battle_service, _, service = make_services()
    state = make_state(rng, rows=("...", ".W.", "..."))
    state.player.stats.hp = 5

    battle = _events_of(service.explore(state), BattleRequestedEvent)[0].battle
    battle_service.attack(battle, state)
    events = service.finish_encounter(state, battle)

    assert state.status == "defeated"
    assert _events_of(events, PlayerDiedEvent)
    assert state.world.current_tile() is TileKind.COMBAT
    assert state.active_battle is None


def test_scan_from_corner_reveals_three_cells() -> None:
    service = _world_service()
    state = make_state(ScriptedRNG(), rows=(".W.", "L..", "..."), position=(0, 0))

    events = service.scan(state)

    scan = events[0]
    assert isinstance(scan, ScanEvent)
    assert [(cell.x, cell.y, cell.tile) for cell in scan.cells] == [
        (1, 0, TileKind.COMBAT),
        (0, 1, TileKind.LOOT),
        (1, 1, TileKind.EMPTY),
    ]
    assert state.player.scan_charges == 2
    assert {(1, 0), (0, 1), (1, 1)} <= state.world.discovered


def test_scan_from_centre_reveals_eight_cells() -> None:
    service = _world_service()
    state = make_state(ScriptedRNG())

    events = service.scan(state)

    assert len(events[0].cells) == 8


def test_scan_without_charges_fails() -> None:
    service = _world_service()
    state = make_state(ScriptedRNG())
    state.player.scan_charges = 0

    events = service.scan(state)

    assert isinstance(events[0], ActionFailedEvent)
    assert events[0].reason == "out_of_resource"
    assert state.player.scan_charges == 0
    assert state.world.discovered == {(1, 1)}


def test_move_off_map_changes_nothing() -> None:
    rng = ScriptedRNG()
    service = _world_service()
    state = make_state(rng, position=(0, 0))

    events = service.move(state, Direction.NORTH)

    assert events[0].reason == "invalid_target"
    assert state.world.position == (0, 0)


def test_move_marks_destination_discovered() -> None:
    service = _world_service()
    state = make_state(ScriptedRNG(), position=(0, 0))

    events = service.move(state, Direction.SOUTH)

    assert isinstance(events[0], MovedEvent)
    assert events[0].flavour
    assert state.world.position == (0, 1)
    assert (0, 1) in state.world.discovered


def test_map_view_shows_only_discovered_cells() -> None:
    service = _world_service()
    state = make_state(ScriptedRNG(), rows=("W..", "...", "..T"))

    view = service.build_map_view(state)
    full = service.build_map_view(state, reveal_all=True)

    assert view.cells == {(1, 1): TileKind.EMPTY}
    assert view.position == (1, 1)
    assert len(full.cells) == 9
    assert full.cells[(2, 2)] is TileKind.TRAP
