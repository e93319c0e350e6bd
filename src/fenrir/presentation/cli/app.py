"""Console-driven UI loops for Fenrir Wastes."""
from __future__ import annotations

import logging
import secrets

from fenrir.core.config import GameConfig
from fenrir.domain.battle_models import BattleState
from fenrir.domain.state import GameState
from fenrir.services import BattleRequestedEvent, CommandResult, FactoryError, GameService, build_game_service
from fenrir.utils.logging import setup_logging

from .commands import is_decline, parse_battle_action, parse_command
from .config import load_config
from .render import debug_enabled, render_events, render_heading, render_map, render_menu

_MAX_RANDOM_SEED = 2**31 - 1

logger = logging.getLogger(__name__)


def main() -> None:
    """Start the interactive CLI session."""
    user_config = load_config()
    setup_logging(str(user_config["log_level"]))
    game_service = _build_game_service(user_config)
    print("=== Fenrir Wastes ===")
    print("A desert of sand and scrap. Somewhere out there the Fenrir command waits.")
    state = _start_new_game(game_service)
    _run_exploration_loop(game_service, state)
    if state.status == "defeated":
        print("\nGAME OVER")
    print("Goodbye!")


def _build_game_service(user_config: dict) -> GameService:
    """Construct the GameService from the user's map settings."""
    config = GameConfig(map_width=int(user_config["map_width"]), map_height=int(user_config["map_height"]))
    return build_game_service(config)


def _start_new_game(game_service: GameService) -> GameState:
    seed = _prompt_seed()
    while True:
        class_name = _prompt_class(game_service)
        try:
            state = game_service.new_game(seed=seed, class_id=class_name)
        except FactoryError:
            print("Unknown class. Pick one of the listed names.")
            continue
        break
    print(f"Game started with seed: {seed}")
    print(f"You are a {state.player.class_name}. Type 'help' for the list of commands.")
    return state


def _prompt_seed() -> int:
    while True:
        raw_value = input("Enter seed (blank for random): ").strip()
        if not raw_value:
            return secrets.randbelow(_MAX_RANDOM_SEED)
        try:
            return int(raw_value)
        except ValueError:
            print("Invalid seed. Please enter a valid integer.")


def _prompt_class(game_service: GameService) -> str:
    classes = game_service.available_classes()
    render_menu(
        "Choose your class",
        [
            f"{cls.name} - HP {cls.base_hp}, damage {cls.attack_min}-{cls.attack_max}, dodge {cls.dodge}%"
            for cls in classes
        ],
    )
    raw = input("Class: ").strip()
    if raw.isdigit() and 1 <= int(raw) <= len(classes):
        return classes[int(raw) - 1].id
    return raw


def _run_exploration_loop(game_service: GameService, state: GameState) -> None:
    while not state.is_over:
        raw = input("\n> ")
        command = parse_command(raw)
        if command is None:
            print("Unknown command. Type 'help'.")
            continue
        if command.kind == "map" and debug_enabled():
            render_map(game_service.reveal_map(state))
            continue
        result = game_service.execute(state, command)
        _handle_result(game_service, state, result)


def _handle_result(game_service: GameService, state: GameState, result: CommandResult) -> None:
    render_events(result.events)
    for event in result.events:
        if isinstance(event, BattleRequestedEvent):
            _run_battle_loop(game_service, state, event.battle)
    if state.pending_trade_npc_id is not None and not state.is_over:
        _run_trade_prompt(game_service, state)


def _run_battle_loop(game_service: GameService, state: GameState, battle: BattleState) -> None:
    render_heading(f"Battle: {battle.enemy.name}")
    while not battle.is_over:
        print(
            f"\nYour HP: {state.player.stats.hp}/{state.player.stats.max_hp} | "
            f"{battle.enemy.name} HP: {battle.enemy.stats.hp}"
        )
        raw = input("[attack / heal / flee / block / special] > ")
        result = game_service.battle_action(state, battle, parse_battle_action(raw))
        render_events(result.events)
    logger.debug("Battle loop finished with %s", battle.outcome.value)


def _run_trade_prompt(game_service: GameService, state: GameState) -> None:
    while state.pending_trade_npc_id is not None:
        raw = input("Item to hand over (blank to decline): ")
        item_name = None if is_decline(raw) else raw.strip()
        render_events(game_service.trade(state, item_name).events)
