"""Command dispatch for a play session."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Literal, Tuple

from fenrir.core.config import GameConfig
from fenrir.core.rng import RNG
from fenrir.core.types import SessionStatus
from fenrir.data.repositories import (
    ClassesRepository,
    EnemiesRepository,
    FlavourRepository,
    ItemsRepository,
    LootTablesRepository,
    NpcsRepository,
)
from fenrir.domain.battle_models import BattleState
from fenrir.domain.defs import ClassDef
from fenrir.domain.state import GameState
from fenrir.domain.world import Direction
from fenrir.services.battle_service import BattleService
from fenrir.services.errors import FactoryError
from fenrir.services.events import GameEvent, NarrationEvent, failure
from fenrir.services.factories import create_player_from_class_id, create_world, resolve_class_id
from fenrir.services.inventory_service import InventoryService
from fenrir.services.loot_service import LootService
from fenrir.services.npc_service import NpcService
from fenrir.services.world_service import MapViewEvent, WorldService

logger = logging.getLogger(__name__)

CommandKind = Literal["move", "explore", "inventory", "use", "status", "scan", "map", "help", "quit"]

HELP_LINES: Tuple[Tuple[str, str], ...] = (
    ("move <north|south|east|west>", "walk one cell"),
    ("explore", "search the current cell"),
    ("inventory", "list your items"),
    ("use <item>", "use an item from your pack"),
    ("status", "show your stats"),
    ("scan", "reveal the surrounding cells"),
    ("map", "show the explored map"),
    ("help", "show this list"),
    ("quit", "leave the wastes"),
)


@dataclass(slots=True)
class Command:
    kind: CommandKind
    argument: str = ""


@dataclass(slots=True)
class CommandResult:
    """Events produced by one command plus the session status afterwards."""

    events: List[GameEvent] = field(default_factory=list)
    status: SessionStatus = "active"


@dataclass(slots=True)
class StatusEvent(GameEvent):
    class_name: str
    level: int
    hp: int
    max_hp: int
    attack_min: int
    attack_max: int
    dodge_chance: int
    xp: int
    xp_to_next: int
    scan_charges: int

    def describe(self) -> str:
        return (
            f"{self.class_name} | Level {self.level} | HP {self.hp}/{self.max_hp} | "
            f"Damage {self.attack_min}-{self.attack_max} | Dodge {self.dodge_chance}% | "
            f"XP {self.xp}/{self.xp_to_next} | Scans {self.scan_charges}"
        )


@dataclass(slots=True)
class HelpEvent(GameEvent):
    lines: Tuple[Tuple[str, str], ...]

    def describe(self) -> str:
        return "\n".join(f"{usage} - {summary}" for usage, summary in self.lines)


class GameService:
    """Owns the services and routes player commands to them."""

    def __init__(
        self,
        classes_repo: ClassesRepository,
        inventory_service: InventoryService,
        battle_service: BattleService,
        npc_service: NpcService,
        world_service: WorldService,
        config: GameConfig | None = None,
    ) -> None:
        self._classes_repo = classes_repo
        self._inventory_service = inventory_service
        self._battle_service = battle_service
        self._npc_service = npc_service
        self._world_service = world_service
        self._config = config or GameConfig()
        self._handlers: Dict[str, Callable[[GameState, str], List[GameEvent]]] = {
            "move": self._move,
            "explore": lambda state, _: self._world_service.explore(state),
            "inventory": lambda state, _: [self._inventory_service.build_inventory_view(state)],
            "use": self._inventory_service.use_item,
            "status": lambda state, _: [self.build_status(state)],
            "scan": lambda state, _: self._world_service.scan(state),
            "map": lambda state, _: [self._world_service.build_map_view(state)],
            "help": lambda state, _: [HelpEvent(lines=HELP_LINES)],
            "quit": self._quit,
        }

    def new_game(self, seed: int, class_id: str) -> GameState:
        """Create a fresh session for the given class id or alias."""
        resolved = resolve_class_id(class_id, self._classes_repo)
        if resolved is None:
            raise FactoryError(f"Unknown class '{class_id}'.")
        rng = RNG(seed)
        player = create_player_from_class_id(resolved, self._classes_repo, rng, self._config)
        world = create_world(self._config, rng)
        logger.info("New game: seed=%d class=%s", seed, resolved)
        return GameState(seed=seed, rng=rng, player=player, world=world)

    def execute(self, state: GameState, command: Command) -> CommandResult:
        if state.is_over:
            return self._result(state, [failure("invalid_command", "The journey is over.")])
        if state.active_battle is not None:
            return self._result(state, [failure("invalid_command", "You are in the middle of a fight!")])
        if state.pending_trade_npc_id is not None:
            return self._result(state, [failure("invalid_command", "The trader is waiting for your answer.")])
        handler = self._handlers.get(command.kind)
        if handler is None:
            return self._result(state, [failure("invalid_command", f"Unknown command '{command.kind}'.")])
        return self._result(state, handler(state, command.argument))

    def battle_action(self, state: GameState, battle: BattleState, action: str) -> CommandResult:
        """Play one combat turn; a resolved battle is closed out on the map."""
        if state.is_over:
            return self._result(state, [failure("invalid_command", "The journey is over.")])
        events = self._battle_service.perform_action(battle, state, action)
        if battle.is_over:
            events.extend(self._world_service.finish_encounter(state, battle))
        return self._result(state, events)

    def trade(self, state: GameState, item_name: str | None) -> CommandResult:
        return self._result(state, self._npc_service.complete_trade(state, item_name))

    def available_classes(self) -> List[ClassDef]:
        return self._classes_repo.all()

    def reveal_map(self, state: GameState) -> MapViewEvent:
        """Full map view for debugging sessions."""
        return self._world_service.build_map_view(state, reveal_all=True)

    def build_status(self, state: GameState) -> StatusEvent:
        player = state.player
        stats = player.stats
        return StatusEvent(
            class_name=player.class_name,
            level=player.level,
            hp=stats.hp,
            max_hp=stats.max_hp,
            attack_min=stats.attack_min,
            attack_max=stats.attack_max,
            dodge_chance=stats.dodge_chance,
            xp=player.xp,
            xp_to_next=player.xp_to_next,
            scan_charges=player.scan_charges,
        )

    def _move(self, state: GameState, argument: str) -> List[GameEvent]:
        try:
            direction = Direction[argument.strip().upper()]
        except KeyError:
            return [failure("invalid_command", "Which way? north, south, east or west.")]
        return self._world_service.move(state, direction)

    @staticmethod
    def _quit(state: GameState, _: str) -> List[GameEvent]:
        state.status = "quit"
        return [NarrationEvent("You leave the wastes behind.")]

    @staticmethod
    def _result(state: GameState, events: List[GameEvent]) -> CommandResult:
        return CommandResult(events=events, status=state.status)


def build_game_service(config: GameConfig | None = None) -> GameService:
    """Wire every service against the packaged definitions."""
    config = config or GameConfig()
    items_repo = ItemsRepository()
    classes_repo = ClassesRepository(items_repo=items_repo)
    loot_service = LootService(LootTablesRepository(items_repo=items_repo), items_repo)
    inventory_service = InventoryService(items_repo)
    battle_service = BattleService(items_repo, loot_service, inventory_service, config)
    npc_service = NpcService(NpcsRepository(), loot_service, inventory_service)
    world_service = WorldService(
        EnemiesRepository(),
        FlavourRepository(),
        loot_service,
        inventory_service,
        battle_service,
        npc_service,
        config,
    )
    return GameService(classes_repo, inventory_service, battle_service, npc_service, world_service, config)
