"""
CautiousStrategy: survival first.

Cascade, first branch that produces an action wins:
  1. below half health, a basic heal, or a revive when knocked out and out of heals
  2. retreat from a losing or immune matchup
  3. shield with a protective move when low
  4. best defensive move
"""

from __future__ import annotations

import logging
import random
import uuid

from tactics.params import CAUTIOUS, CautiousParams
from tactics.schema import (
    AttackAction,
    BattleAction,
    BattleState,
    Combatant,
    Inventory,
    ItemKind,
    Move,
    SwitchAction,
    Team,
    UseItemAction,
)
from tactics.status import reduces_stat
from tactics.support import (
    accuracy_score,
    capped_effectiveness,
    defense_pair,
    jitter,
    matchup,
    pick_best,
    protective_move,
    resolve_sides,
    switch_candidates,
    usable_items,
    usable_moves,
)
from tactics.typechart import PokeEnvTypeChart, TypeLookup, effectiveness

logger = logging.getLogger(__name__)


class CautiousStrategy:
    def __init__(
        self,
        trainer_id: int,
        *,
        chart: TypeLookup | None = None,
        rng: random.Random | None = None,
        params: CautiousParams = CAUTIOUS,
    ) -> None:
        self.trainer_id = trainer_id
        self._chart = chart or PokeEnvTypeChart()
        self._rng = rng or random.Random()
        self._params = params
        self._name = f"cautious-{uuid.uuid4().hex[:6]}"

    @property
    def name(self) -> str:
        return self._name

    def choose_action(self, state: BattleState, inventory: Inventory) -> BattleAction:
        team, active, opponent = resolve_sides(state, self.trainer_id)

        action = self._consider_item(active, inventory)
        if action is not None:
            return action

        if self._should_switch(active, opponent):
            action = self._best_switch(team, active, opponent)
            if action is not None:
                return action

        shield = self._shield_move(active)
        if shield is not None:
            logger.debug("[%s] %s shields with %s", self._name, active.name, shield.name)
            return AttackAction(move_id=shield.id, combatant_id=active.id, trainer_id=self.trainer_id)

        return self._best_move(active, opponent)

    def _consider_item(self, active: Combatant, inventory: Inventory) -> UseItemAction | None:
        if active.health_ratio >= self._params.low_health:
            return None

        available = usable_items(inventory)
        if ItemKind.POTION in available:
            kind = ItemKind.POTION
        elif ItemKind.REVIVE in available and active.fainted:
            kind = ItemKind.REVIVE
        else:
            return None

        logger.debug("[%s] using %s on %s (%.0f%% HP)", self._name, kind.value, active.name, active.health_ratio * 100)
        return UseItemAction(trainer_id=self.trainer_id, target_id=active.id, item=kind)

    def _should_switch(self, active: Combatant, opponent: Combatant) -> bool:
        eff = matchup(self._chart, active, opponent)
        if eff < self._params.type_disadvantage and active.health_ratio < self._params.low_health:
            return True
        return eff == 0

    def _best_switch(self, team: Team, active: Combatant, opponent: Combatant) -> SwitchAction | None:
        candidates = switch_candidates(team, active)
        if not candidates:
            logger.debug("[%s] switch wanted but no candidates, falling through", self._name)
            return None

        best = pick_best(candidates, lambda c: self._score_switch(c, opponent))
        logger.debug("[%s] switching %s -> %s", self._name, active.name, best.name)
        return SwitchAction(trainer_id=self.trainer_id, target_id=best.id)

    def _score_switch(self, candidate: Combatant, opponent: Combatant) -> float:
        p = self._params
        score = capped_effectiveness(matchup(self._chart, candidate, opponent)) * p.switch_type_weight
        score += defense_pair(candidate, average=True) * p.switch_defense_weight
        score += candidate.health_ratio * p.switch_health_weight
        score += jitter(self._rng, p.switch_random_weight)
        return score

    def _shield_move(self, active: Combatant) -> Move | None:
        if active.health_ratio >= self._params.low_health:
            return None
        if self._rng.random() >= self._params.shield_probability:
            return None
        return protective_move(active)

    def _best_move(self, active: Combatant, opponent: Combatant) -> AttackAction:
        best = pick_best(usable_moves(active), lambda m: self.score_move(m, opponent))
        logger.debug("[%s] %s uses %s", self._name, active.name, best.name)
        return AttackAction(move_id=best.id, combatant_id=active.id, trainer_id=self.trainer_id)

    def score_move(self, move: Move, opponent: Combatant) -> float:
        p = self._params
        score = 0.0
        if move.inflicts_status:
            score += p.status_move_bonus
            if reduces_stat(move.status):
                score += p.stat_drop_bonus
        score += effectiveness(self._chart, move.type, opponent.type) * p.move_type_weight
        score += accuracy_score(move) * p.move_accuracy_weight
        score += jitter(self._rng, p.move_random_weight)
        return score
