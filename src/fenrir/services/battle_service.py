"""Battle service resolving turn-based player-versus-enemy combat."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List

from fenrir.core.config import GameConfig
from fenrir.core.rng import RNG
from fenrir.core.types import BattleActionType
from fenrir.data.repositories import ItemsRepository
from fenrir.domain.battle_models import DODGE_BONUS, DODGE_BONUS_TURNS, BattleState, CombatOutcome
from fenrir.domain.defs import SpecialKind
from fenrir.domain.entities import EnemyInstance, Player
from fenrir.domain.progression import grant_xp
from fenrir.domain.state import GameState
from fenrir.services.events import (
    GameEvent,
    ItemGainedEvent,
    LevelUpEvent,
    XpGainedEvent,
    failure,
)
from fenrir.services.factories import make_instance_id
from fenrir.services.inventory_service import InventoryService
from fenrir.services.loot_service import LootService

logger = logging.getLogger(__name__)

# Items the heal action reaches for, in no particular priority; the first one
# found in inventory order wins.
HEALING_ITEM_IDS = frozenset({"small_medkit", "mega_medkit", "rusks"})
SABOTAGE_REDUCTION = 3
BATTLE_ACTIONS: tuple[BattleActionType, ...] = ("attack", "heal", "flee", "block", "special")


@dataclass(slots=True)
class BattleEvent(GameEvent):
    """Base battle event."""


@dataclass(slots=True)
class BattleStartedEvent(BattleEvent):
    battle_id: str
    enemy_name: str
    enemy_hp: int
    flavour: str

    def describe(self) -> str:
        return self.flavour or f"{self.enemy_name} blocks your way."


@dataclass(slots=True)
class PlayerAttackEvent(BattleEvent):
    enemy_name: str
    damage: int
    dodged: bool
    enemy_hp: int

    def describe(self) -> str:
        if self.dodged:
            return f"{self.enemy_name} dodges your attack!"
        return f"You deal {self.damage} damage."


@dataclass(slots=True)
class EnemyAttackEvent(BattleEvent):
    enemy_name: str
    damage: int
    dodged: bool
    blocked: bool
    player_hp: int

    def describe(self) -> str:
        if self.dodged:
            return f"You dodge the attack of {self.enemy_name}!"
        if self.blocked:
            return f"Your block reduces the blow. {self.enemy_name} deals {self.damage} damage."
        return f"{self.enemy_name} deals {self.damage} damage to you."


@dataclass(slots=True)
class BlockRaisedEvent(BattleEvent):
    def describe(self) -> str:
        return "You tense up, ready to block the incoming blow."


@dataclass(slots=True)
class FleeAttemptEvent(BattleEvent):
    succeeded: bool

    def describe(self) -> str:
        return "You manage to escape!" if self.succeeded else "You fail to escape!"


@dataclass(slots=True)
class SpecialUsedEvent(BattleEvent):
    special: SpecialKind
    damage: int
    enemy_hp: int

    def describe(self) -> str:
        if self.special is SpecialKind.DOUBLE_STRIKE:
            return f"You fly into a rage! A mighty blow deals {self.damage} damage."
        if self.special is SpecialKind.TRIPLE_SHOT:
            return f"Critical hit! Your shot deals {self.damage} damage."
        if self.special is SpecialKind.SABOTAGE:
            return "You inject a virus into the enemy's systems. Its attacks weaken."
        return "Your movements quicken; for a moment you are almost untouchable."


@dataclass(slots=True)
class CombatantDefeatedEvent(BattleEvent):
    combatant_name: str
    is_player: bool

    def describe(self) -> str:
        if self.is_player:
            return "You have died. Your journey ends here."
        return f"You defeated {self.combatant_name}!"


@dataclass(slots=True)
class BattleResolvedEvent(BattleEvent):
    outcome: CombatOutcome
    rounds: int

    def describe(self) -> str:
        return f"Battle over after {self.rounds} round(s): {self.outcome.value.replace('_', ' ')}."


class BattleService:
    """Resolves one exchange per player action.

    Each action is followed by exactly one enemy counterattack unless the
    enemy died or the player got away. Outcomes are checked after every
    exchange.
    """

    def __init__(
        self,
        items_repo: ItemsRepository,
        loot_service: LootService,
        inventory_service: InventoryService,
        config: GameConfig | None = None,
    ) -> None:
        self._items_repo = items_repo
        self._loot_service = loot_service
        self._inventory_service = inventory_service
        self._config = config or GameConfig()
        self._actions: Dict[str, Callable[[BattleState, GameState], List[GameEvent]]] = {
            "attack": self.attack,
            "heal": self.heal,
            "flee": self.flee,
            "block": self.block,
            "special": self.special,
        }

    # -----------------------
    # Battle Lifecycle
    # -----------------------
    def start_battle(
        self, enemy: EnemyInstance, state: GameState, *, is_boss: bool = False
    ) -> tuple[BattleState, List[GameEvent]]:
        battle_id = make_instance_id("battle", state.rng)
        battle = BattleState(battle_id=battle_id, enemy=enemy, is_boss=is_boss)
        logger.info("Battle %s started against %s", battle_id, enemy.enemy_id)
        events: List[GameEvent] = [
            BattleStartedEvent(
                battle_id=battle_id,
                enemy_name=enemy.name,
                enemy_hp=enemy.stats.hp,
                flavour=enemy.flavour,
            )
        ]
        return battle, events

    def perform_action(self, battle: BattleState, state: GameState, action: str) -> List[GameEvent]:
        """Dispatch a combat token; unknown tokens cost nothing."""
        handler = self._actions.get(action)
        if handler is None:
            self._ensure_ongoing(battle)
            return [failure("invalid_command", f"Unknown combat action '{action}'. Try: {', '.join(BATTLE_ACTIONS)}.")]
        return handler(battle, state)

    # -----------------------
    # Player Actions
    # -----------------------
    def attack(self, battle: BattleState, state: GameState) -> List[GameEvent]:
        self._begin_round(battle)
        events: List[GameEvent] = [self._player_strike(battle, state.player, state.rng)]
        return self._finish_exchange(battle, state, events)

    def heal(self, battle: BattleState, state: GameState) -> List[GameEvent]:
        self._begin_round(battle)
        player = state.player
        healing_id = next((item_id for item_id, _ in player.inventory.entries() if item_id in HEALING_ITEM_IDS), None)
        events: List[GameEvent] = []
        if healing_id is None:
            events.append(failure("out_of_resource", "You have nothing to heal yourself with!"))
        else:
            item = self._items_repo.get(healing_id)
            events.append(self._inventory_service.consume(player, item))
        return self._finish_exchange(battle, state, events)

    def flee(self, battle: BattleState, state: GameState) -> List[GameEvent]:
        self._begin_round(battle)
        succeeded = state.rng.random() < self._config.flee_chance
        events: List[GameEvent] = [FleeAttemptEvent(succeeded=succeeded)]
        if succeeded:
            return events + self._resolve(battle, state, CombatOutcome.PLAYER_FLED)
        return self._finish_exchange(battle, state, events)

    def block(self, battle: BattleState, state: GameState) -> List[GameEvent]:
        self._begin_round(battle)
        battle.block_pending = True
        return self._finish_exchange(battle, state, [BlockRaisedEvent()])

    def special(self, battle: BattleState, state: GameState) -> List[GameEvent]:
        self._begin_round(battle)
        if battle.special_used:
            events: List[GameEvent] = [
                failure("out_of_resource", "You have already used your special ability in this fight!")
            ]
            return self._finish_exchange(battle, state, events)

        battle.special_used = True
        player = state.player
        enemy_stats = battle.enemy.stats
        damage = 0
        if player.special is SpecialKind.DOUBLE_STRIKE:
            damage = self._roll_player_damage(player, state.rng) * 2
        elif player.special is SpecialKind.TRIPLE_SHOT:
            damage = self._roll_player_damage(player, state.rng) * 3
        elif player.special is SpecialKind.SABOTAGE:
            enemy_stats.attack_min = max(1, enemy_stats.attack_min - SABOTAGE_REDUCTION)
            enemy_stats.attack_max = max(enemy_stats.attack_min, enemy_stats.attack_max - SABOTAGE_REDUCTION)
        elif player.special is SpecialKind.EVASION:
            battle.dodge_bonus_turns = DODGE_BONUS_TURNS
        if damage:
            enemy_stats.hp = max(0, enemy_stats.hp - damage)
        logger.debug("Special %s used in %s (damage=%d)", player.special.value, battle.battle_id, damage)
        events = [SpecialUsedEvent(special=player.special, damage=damage, enemy_hp=enemy_stats.hp)]
        return self._finish_exchange(battle, state, events)

    # -----------------------
    # Helpers
    # -----------------------
    def _begin_round(self, battle: BattleState) -> None:
        self._ensure_ongoing(battle)
        battle.round += 1

    @staticmethod
    def _ensure_ongoing(battle: BattleState) -> None:
        if battle.is_over:
            raise ValueError(f"Battle '{battle.battle_id}' is already resolved.")

    @staticmethod
    def _roll_player_damage(player: Player, rng: RNG) -> int:
        return rng.randint(player.stats.attack_min, player.stats.attack_max)

    def _player_strike(self, battle: BattleState, player: Player, rng: RNG) -> PlayerAttackEvent:
        enemy = battle.enemy
        damage = self._roll_player_damage(player, rng)
        dodged = rng.percent_roll(enemy.stats.dodge_chance)
        if not dodged:
            enemy.stats.hp = max(0, enemy.stats.hp - damage)
        return PlayerAttackEvent(
            enemy_name=enemy.name,
            damage=0 if dodged else damage,
            dodged=dodged,
            enemy_hp=enemy.stats.hp,
        )

    def _enemy_counterattack(self, battle: BattleState, player: Player, rng: RNG) -> EnemyAttackEvent:
        """Shared dodge/block resolution used after every non-final action."""
        enemy = battle.enemy
        effective_dodge = player.stats.dodge_chance + (DODGE_BONUS if battle.dodge_bonus_turns > 0 else 0)
        dodged = rng.percent_roll(effective_dodge)
        blocked = False
        damage = 0
        if not dodged:
            damage = rng.randint(enemy.stats.attack_min, enemy.stats.attack_max)
            if battle.block_pending:
                damage //= 2
                blocked = True
            player.stats.hp = max(0, player.stats.hp - damage)
        battle.block_pending = False
        if battle.dodge_bonus_turns > 0:
            battle.dodge_bonus_turns -= 1
        return EnemyAttackEvent(
            enemy_name=enemy.name,
            damage=damage,
            dodged=dodged,
            blocked=blocked,
            player_hp=player.stats.hp,
        )

    def _finish_exchange(
        self, battle: BattleState, state: GameState, events: List[GameEvent]
    ) -> List[GameEvent]:
        if battle.enemy.is_alive:
            events.append(self._enemy_counterattack(battle, state.player, state.rng))
        logger.debug(
            "Battle %s round %d: player hp %d, enemy hp %d",
            battle.battle_id,
            battle.round,
            state.player.stats.hp,
            battle.enemy.stats.hp,
        )
        if not battle.enemy.is_alive:
            events.append(CombatantDefeatedEvent(combatant_name=battle.enemy.name, is_player=False))
            events.extend(self._resolve(battle, state, CombatOutcome.PLAYER_VICTORY))
        elif not state.player.is_alive:
            events.append(CombatantDefeatedEvent(combatant_name="You", is_player=True))
            events.extend(self._resolve(battle, state, CombatOutcome.PLAYER_DEFEAT))
        return events

    def _resolve(self, battle: BattleState, state: GameState, outcome: CombatOutcome) -> List[GameEvent]:
        battle.outcome = outcome
        battle.block_pending = False
        logger.info("Battle %s resolved: %s", battle.battle_id, outcome.value)
        events: List[GameEvent] = []
        if outcome is CombatOutcome.PLAYER_VICTORY:
            events.extend(self.apply_victory_rewards(battle, state))
        events.append(BattleResolvedEvent(outcome=outcome, rounds=battle.round))
        return events

    def apply_victory_rewards(self, battle: BattleState, state: GameState) -> List[GameEvent]:
        """Grant the enemy's XP, then one chest item."""
        player = state.player
        xp = battle.enemy.xp_reward
        level_ups = grant_xp(player, xp, state.rng)
        events: List[GameEvent] = [XpGainedEvent(amount=xp, xp=player.xp, xp_to_next=player.xp_to_next)]
        for level_up in level_ups:
            logger.info("Player reached level %d", level_up.level)
            events.append(
                LevelUpEvent(
                    level=level_up.level,
                    hp_gain=level_up.hp_gain,
                    attack_gain=level_up.attack_gain,
                    dodge_gain=level_up.dodge_gain,
                )
            )
        drop = self._loot_service.draw_chest(state.rng)
        self._inventory_service.grant(player, drop.item)
        events.append(
            ItemGainedEvent(
                item_id=drop.item.id,
                item_name=drop.item.name,
                description=drop.item.description,
                source="battle spoils",
                tier=drop.tier,
            )
        )
        return events
