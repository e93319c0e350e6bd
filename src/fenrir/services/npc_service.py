"""One-shot NPC encounters."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple

from fenrir.data.repositories import NpcsRepository
from fenrir.domain.defs import NpcDef, NpcKind
from fenrir.domain.state import GameState
from fenrir.domain.world import TileKind
from fenrir.services.events import GameEvent, ItemGainedEvent, NarrationEvent, failure
from fenrir.services.inventory_service import InventoryService
from fenrir.services.loot_service import LootService

logger = logging.getLogger(__name__)

BLESSING_HP_RANGE = (10, 30)
BLESSING_ATTACK = 2
BLESSING_DODGE = 5
DRIFTER_GIFT_CHANCE = 0.5


@dataclass(slots=True)
class NpcMetEvent(GameEvent):
    npc_id: str
    npc_name: str
    greeting: str

    def describe(self) -> str:
        return f"You meet someone: {self.npc_name}.\n{self.greeting}"


@dataclass(slots=True)
class TradeOfferedEvent(GameEvent):
    """The trader waits for the player to pick an item (or decline)."""

    npc_name: str
    offers: Tuple[Tuple[str, int], ...]

    def describe(self) -> str:
        lines = ["You can hand over one item in exchange for a random new one. Your items:"]
        lines.extend(f" - {name} x{quantity}" for name, quantity in self.offers)
        return "\n".join(lines)


@dataclass(slots=True)
class TradeCompletedEvent(GameEvent):
    given_name: str
    received_id: str
    received_name: str

    def describe(self) -> str:
        return f"The trader takes {self.given_name}; in return you receive {self.received_name}."


@dataclass(slots=True)
class BlessingEvent(GameEvent):
    stat: str
    amount: int

    def describe(self) -> str:
        if self.stat == "max_hp":
            return f"Energy fills your body. Max HP +{self.amount}."
        if self.stat == "attack":
            return f"The shaman touches your weapon. Damage +{self.amount}."
        return f"A sign is drawn on your forehead. Dodge +{self.amount}%."


@dataclass(slots=True)
class HintEvent(GameEvent):
    x: int
    y: int
    tile: TileKind

    def describe(self) -> str:
        return f"\"I saw something interesting north of here...\" The cell ({self.x},{self.y}) holds: {self.tile.value}."


class NpcService:
    """Picks an archetype and resolves its interaction."""

    def __init__(
        self,
        npcs_repo: NpcsRepository,
        loot_service: LootService,
        inventory_service: InventoryService,
    ) -> None:
        self._npcs_repo = npcs_repo
        self._loot_service = loot_service
        self._inventory_service = inventory_service

    def interact(self, state: GameState) -> List[GameEvent]:
        npc = state.rng.choice(self._npcs_repo.all())
        logger.debug("NPC encounter: %s", npc.id)
        events: List[GameEvent] = [NpcMetEvent(npc_id=npc.id, npc_name=npc.name, greeting=npc.greeting)]
        if npc.kind is NpcKind.TRADER:
            events.extend(self._offer_trade(state, npc))
        elif npc.kind is NpcKind.BLESSING:
            events.append(self._bless(state))
        elif npc.kind is NpcKind.STORY:
            events.append(self._tell_story(state))
        elif npc.kind is NpcKind.HINT:
            events.append(self._give_hint(state))
        return events

    def complete_trade(self, state: GameState, id_or_name: str | None) -> List[GameEvent]:
        """Resolve a pending trade; ``None`` declines it."""
        if state.pending_trade_npc_id is None:
            return [failure("invalid_command", "Nobody is waiting to trade with you.")]
        if id_or_name is None:
            state.pending_trade_npc_id = None
            return [NarrationEvent("You decline the swap. The trader shrugs.")]
        item = self._inventory_service.find_owned(state.player, id_or_name)
        if item is None:
            return [failure("invalid_target", "You don't have that item.")]

        state.player.inventory.remove_item(item.id)
        received = self._loot_service.draw_basic(state.rng)
        self._inventory_service.grant(state.player, received)
        state.pending_trade_npc_id = None
        logger.debug("Traded %s for %s", item.id, received.id)
        return [TradeCompletedEvent(given_name=item.name, received_id=received.id, received_name=received.name)]

    def _offer_trade(self, state: GameState, npc: NpcDef) -> List[GameEvent]:
        inventory = state.player.inventory
        if inventory.is_empty():
            return [NarrationEvent("You have nothing to trade. The trader waves you off and leaves.")]
        state.pending_trade_npc_id = npc.id
        view = self._inventory_service.build_inventory_view(state)
        offers = tuple((entry.name, entry.quantity) for entry in view.entries)
        return [TradeOfferedEvent(npc_name=npc.name, offers=offers)]

    def _bless(self, state: GameState) -> BlessingEvent:
        stats = state.player.stats
        roll = state.rng.randint(0, 2)
        if roll == 0:
            bonus = state.rng.randint(*BLESSING_HP_RANGE)
            stats.max_hp += bonus
            stats.hp += bonus
            return BlessingEvent(stat="max_hp", amount=bonus)
        if roll == 1:
            stats.raise_attack(BLESSING_ATTACK)
            return BlessingEvent(stat="attack", amount=BLESSING_ATTACK)
        before = stats.dodge_chance
        stats.raise_dodge(BLESSING_DODGE)
        return BlessingEvent(stat="dodge", amount=stats.dodge_chance - before)

    def _tell_story(self, state: GameState) -> GameEvent:
        if state.rng.random() < DRIFTER_GIFT_CHANCE:
            item = self._loot_service.draw_basic(state.rng)
            self._inventory_service.grant(state.player, item)
            return ItemGainedEvent(
                item_id=item.id,
                item_name=item.name,
                description=item.description,
                source="drifter's hands",
            )
        return NarrationEvent(
            "The drifter tells you his tragic story. Nothing comes of it, but you feel strangely unsettled."
        )

    def _give_hint(self, state: GameState) -> GameEvent:
        world = state.world
        x, y = world.position
        if not world.in_bounds(x, y - 1):
            return NarrationEvent("\"North of here? Only the edge of the world,\" the informant whispers.")
        world.discover(x, y - 1)
        return HintEvent(x=x, y=y - 1, tile=world.tile_at(x, y - 1))
