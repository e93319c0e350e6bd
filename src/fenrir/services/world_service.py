"""Application service for movement, scanning and tile events."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Tuple

from fenrir.core.config import GameConfig
from fenrir.core.types import Coord
from fenrir.data.repositories import EnemiesRepository, FlavourRepository
from fenrir.domain.battle_models import BattleState
from fenrir.domain.state import GameState
from fenrir.domain.world import Direction, TileKind
from fenrir.services.battle_service import BattleService
from fenrir.services.events import GameEvent, ItemGainedEvent, NarrationEvent, failure
from fenrir.services.factories import spawn_enemy_for_tile
from fenrir.services.inventory_service import InventoryService
from fenrir.services.loot_service import LootService
from fenrir.services.npc_service import NpcService

logger = logging.getLogger(__name__)

EXPLORE_FLAVOUR_ID = "explore"
MOVE_FLAVOUR_ID = "move"


@dataclass(slots=True)
class MovedEvent(GameEvent):
    direction: Direction
    position: Coord
    flavour: str

    def describe(self) -> str:
        return self.flavour


@dataclass(slots=True)
class ScannedCell:
    x: int
    y: int
    tile: TileKind


@dataclass(slots=True)
class ScanEvent(GameEvent):
    cells: Tuple[ScannedCell, ...]
    charges_left: int

    def describe(self) -> str:
        lines = ["You scan your surroundings..."]
        lines.extend(f"Cell ({cell.x},{cell.y}): {cell.tile.value}" for cell in self.cells)
        return "\n".join(lines)


@dataclass(slots=True)
class BattleRequestedEvent(GameEvent):
    """Exploring started a fight; the caller drives ``battle`` to its end."""

    battle: BattleState

    def describe(self) -> str:
        return f"{self.battle.enemy.name} attacks!"


@dataclass(slots=True)
class OasisEvent(GameEvent):
    hp: int
    attack_bonus: int

    def describe(self) -> str:
        text = "You find an oasis! Cool water quenches your thirst and your wounds vanish."
        if self.attack_bonus:
            text += " Among the palms lies a strange elixir. You feel your strength grow."
        return text


@dataclass(slots=True)
class TrapTriggeredEvent(GameEvent):
    damage: int
    player_hp: int

    def describe(self) -> str:
        return f"You fell into a trap! You lose {self.damage} HP."


@dataclass(slots=True)
class PlayerDiedEvent(GameEvent):
    cause: str

    def describe(self) -> str:
        return f"{self.cause} You are dead."


@dataclass(slots=True)
class MapViewEvent(GameEvent):
    """Known cells and the player's position; symbols are the renderer's job."""

    width: int
    height: int
    position: Coord
    cells: Dict[Coord, TileKind]

    def describe(self) -> str:
        return f"Map {self.width}x{self.height}, {len(self.cells)} cell(s) known."


class WorldService:
    """Coordinates the player's movement and the events of the current tile."""

    def __init__(
        self,
        enemies_repo: EnemiesRepository,
        flavour_repo: FlavourRepository,
        loot_service: LootService,
        inventory_service: InventoryService,
        battle_service: BattleService,
        npc_service: NpcService,
        config: GameConfig | None = None,
    ) -> None:
        self._enemies_repo = enemies_repo
        self._flavour_repo = flavour_repo
        self._loot_service = loot_service
        self._inventory_service = inventory_service
        self._battle_service = battle_service
        self._npc_service = npc_service
        self._config = config or GameConfig()

    # -----------------------
    # Movement & scanning
    # -----------------------
    def move(self, state: GameState, direction: Direction) -> List[GameEvent]:
        world = state.world
        x, y = world.position
        target = (x + direction.dx, y + direction.dy)
        if not world.in_bounds(*target):
            return [failure("invalid_target", "You can't go further. There is a chasm there... or the end of the map.")]
        world.position = target
        world.discover(*target)
        logger.debug("Moved %s to %s", direction.name, target)
        return [MovedEvent(direction=direction, position=target, flavour=self._flavour(state, MOVE_FLAVOUR_ID))]

    def scan(self, state: GameState) -> List[GameEvent]:
        player = state.player
        if player.scan_charges <= 0:
            return [failure("out_of_resource", "No scan charges left!")]
        player.scan_charges -= 1
        world = state.world
        cells = []
        for nx, ny in world.neighbours(*world.position):
            world.discover(nx, ny)
            cells.append(ScannedCell(x=nx, y=ny, tile=world.tile_at(nx, ny)))
        return [ScanEvent(cells=tuple(cells), charges_left=player.scan_charges)]

    def build_map_view(self, state: GameState, *, reveal_all: bool = False) -> MapViewEvent:
        world = state.world
        if reveal_all:
            coords = [(x, y) for y in range(world.height) for x in range(world.width)]
        else:
            coords = sorted(world.discovered, key=lambda coord: (coord[1], coord[0]))
        return MapViewEvent(
            width=world.width,
            height=world.height,
            position=world.position,
            cells={coord: world.tile_at(*coord) for coord in coords},
        )

    # -----------------------
    # Tile events
    # -----------------------
    def explore(self, state: GameState) -> List[GameEvent]:
        """Trigger whatever waits on the player's current cell."""
        world = state.world
        world.discover(*world.position)
        tile = world.current_tile()
        logger.debug("Exploring %s at %s", tile.value, world.position)
        events: List[GameEvent] = [NarrationEvent(self._flavour(state, EXPLORE_FLAVOUR_ID))]

        if tile is TileKind.EMPTY:
            events.append(NarrationEvent("Nothing interesting here."))
        elif tile in (TileKind.COMBAT, TileKind.BOSS):
            events.extend(self._start_encounter(state, tile))
        elif tile is TileKind.LOOT:
            item = self._loot_service.draw_basic(state.rng)
            self._inventory_service.grant(state.player, item)
            events.append(
                ItemGainedEvent(item_id=item.id, item_name=item.name, description=item.description, source="cache")
            )
            world.clear_current_tile()
        elif tile is TileKind.NPC:
            events.extend(self._npc_service.interact(state))
            world.clear_current_tile()
        elif tile is TileKind.OASIS:
            events.append(self._visit_oasis(state))
            world.clear_current_tile()
        elif tile is TileKind.TRAP:
            events.extend(self._spring_trap(state))
        return events

    def finish_encounter(self, state: GameState, battle: BattleState) -> List[GameEvent]:
        """Apply a resolved battle to the world: clear the tile or end the session."""
        if not battle.is_over:
            raise ValueError(f"Battle '{battle.battle_id}' is still ongoing.")
        if state.active_battle is battle:
            state.active_battle = None
        if not battle.player_survived:
            state.status = "defeated"
            logger.info("Player died fighting %s", battle.enemy.enemy_id)
            return [PlayerDiedEvent(cause=f"{battle.enemy.name} was too strong.")]

        events: List[GameEvent] = []
        state.world.clear_current_tile()
        if battle.is_boss and not state.world.boss_fought:
            state.world.boss_fought = True
            events.append(NarrationEvent("The Fenrir command falls silent. Only guards remain in the wastes."))
        return events

    def _start_encounter(self, state: GameState, tile: TileKind) -> List[GameEvent]:
        enemy = spawn_enemy_for_tile(tile, state.world.boss_fought, self._enemies_repo, state.rng)
        battle, events = self._battle_service.start_battle(enemy, state, is_boss=tile is TileKind.BOSS)
        state.active_battle = battle
        events.append(BattleRequestedEvent(battle=battle))
        return events

    def _visit_oasis(self, state: GameState) -> OasisEvent:
        stats = state.player.stats
        stats.hp = stats.max_hp
        bonus = 0
        if state.rng.random() < self._config.oasis_bonus_chance:
            bonus = 1
            stats.raise_attack(bonus)
        return OasisEvent(hp=stats.hp, attack_bonus=bonus)

    def _spring_trap(self, state: GameState) -> List[GameEvent]:
        stats = state.player.stats
        damage = state.rng.randint(self._config.trap_damage_min, self._config.trap_damage_max)
        stats.hp = max(0, stats.hp - damage)
        events: List[GameEvent] = [TrapTriggeredEvent(damage=damage, player_hp=stats.hp)]
        if not stats.is_alive:
            state.status = "defeated"
            logger.info("Player killed by a trap at %s", state.world.position)
            events.append(PlayerDiedEvent(cause="The trap proved deadly."))
            return events

        if state.rng.random() < self._config.trap_chest_chance:
            drop = self._loot_service.draw_chest(state.rng)
            self._inventory_service.grant(state.player, drop.item)
            events.append(
                ItemGainedEvent(
                    item_id=drop.item.id,
                    item_name=drop.item.name,
                    description=drop.item.description,
                    source="trap",
                    tier=drop.tier,
                )
            )
        state.world.clear_current_tile()
        return events

    def _flavour(self, state: GameState, pool_id: str) -> str:
        return state.rng.choice(self._flavour_repo.get(pool_id).lines)
