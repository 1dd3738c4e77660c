"""RandomStrategy: picks a random legal attack or switch each turn."""

from __future__ import annotations

import random
import uuid

from tactics.schema import AttackAction, BattleAction, BattleState, Inventory, SwitchAction
from tactics.support import resolve_sides, switch_candidates, usable_moves


class RandomStrategy:
    """Chooses uniformly at random between all usable moves and switches."""

    def __init__(self, trainer_id: int, *, rng: random.Random | None = None) -> None:
        self.trainer_id = trainer_id
        self._rng = rng or random.Random()
        self._name = f"random-{uuid.uuid4().hex[:6]}"

    @property
    def name(self) -> str:
        return self._name

    def choose_action(self, state: BattleState, inventory: Inventory) -> BattleAction:
        team, active, _ = resolve_sides(state, self.trainer_id)

        all_options: list[BattleAction] = [
            AttackAction(move_id=m.id, combatant_id=active.id, trainer_id=self.trainer_id)
            for m in usable_moves(active)
        ] + [
            SwitchAction(trainer_id=self.trainer_id, target_id=c.id)
            for c in switch_candidates(team, active)
        ]
        return self._rng.choice(all_options)
