"""
OptimizingStrategy: tempo first.

Revives unconditionally, heals with the smallest item that covers the missing
health, switches on a probability that grows with the matchup and health
deficit, and otherwise ranks moves by a composite offensive score.
"""

from __future__ import annotations

import logging
import random
import uuid

from tactics.params import OPTIMIZING, OptimizingParams
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
from tactics.status import status_value
from tactics.support import (
    accuracy_score,
    defense_pair,
    jitter,
    matchup,
    pick_best,
    resolve_sides,
    switch_candidates,
    usable_items,
    usable_moves,
)
from tactics.typechart import PokeEnvTypeChart, TypeLookup

logger = logging.getLogger(__name__)


class OptimizingStrategy:
    def __init__(
        self,
        trainer_id: int,
        *,
        chart: TypeLookup | None = None,
        rng: random.Random | None = None,
        params: OptimizingParams = OPTIMIZING,
    ) -> None:
        self.trainer_id = trainer_id
        self._chart = chart or PokeEnvTypeChart()
        self._rng = rng or random.Random()
        self._params = params
        self._name = f"optimizing-{uuid.uuid4().hex[:6]}"

    @property
    def name(self) -> str:
        return self._name

    def choose_action(self, state: BattleState, inventory: Inventory) -> BattleAction:
        team, active, opponent = resolve_sides(state, self.trainer_id)

        item = self._choose_item(active, inventory)
        if item is not None:
            logger.debug("[%s] using %s on %s", self._name, item.value, active.name)
            return UseItemAction(trainer_id=self.trainer_id, target_id=active.id, item=item)

        if self._should_switch(active, opponent):
            action = self._best_switch(team, active, opponent)
            if action is not None:
                return action

        return self._best_move(active, opponent)

    # ── items ────────────────────────────────────────────────────────────────

    def _choose_item(self, active: Combatant, inventory: Inventory) -> ItemKind | None:
        available = usable_items(inventory)

        if active.fainted and ItemKind.REVIVE in available:
            return ItemKind.REVIVE

        p = self._params
        ratio = active.health_ratio
        missing = active.missing_hp

        if ratio < p.critical_health and missing > p.mega_heal_missing and ItemKind.MEGA_POTION in available:
            return ItemKind.MEGA_POTION
        if ratio < p.low_health and missing > p.hyper_heal_missing and ItemKind.HYPER_POTION in available:
            return ItemKind.HYPER_POTION
        if ratio < p.low_health and missing > p.super_heal_missing and ItemKind.SUPER_POTION in available:
            return ItemKind.SUPER_POTION
        if (
            ratio < p.low_health
            and self._rng.random() < p.basic_heal_probability
            and ItemKind.POTION in available
        ):
            return ItemKind.POTION
        return None

    # ── switching ────────────────────────────────────────────────────────────

    def switch_probability(self, eff: float, ratio: float) -> float:
        p = self._params
        prob = p.base_switch_probability
        if eff < 1.0:
            prob += (1.0 - eff) * p.switch_type_penalty
        if ratio < p.low_health:
            prob += (1.0 - ratio) * p.switch_health_penalty
        return min(p.max_switch_probability, prob)

    def _should_switch(self, active: Combatant, opponent: Combatant) -> bool:
        eff = matchup(self._chart, active, opponent)
        ratio = active.health_ratio
        if eff == 0:
            return True
        if eff < self._params.type_disadvantage and ratio < self._params.low_health:
            return True
        return self._rng.random() < self.switch_probability(eff, ratio)

    def _best_switch(self, team: Team, active: Combatant, opponent: Combatant) -> SwitchAction | None:
        candidates = switch_candidates(team, active)
        if not candidates:
            return None

        best = pick_best(candidates, lambda c: self._score_switch(c, opponent))
        logger.debug("[%s] switching %s -> %s", self._name, active.name, best.name)
        return SwitchAction(trainer_id=self.trainer_id, target_id=best.id)

    def _score_switch(self, candidate: Combatant, opponent: Combatant) -> float:
        p = self._params
        score = matchup(self._chart, candidate, opponent) * p.switch_type_weight
        score += defense_pair(candidate, average=False) * p.switch_defense_weight
        score += candidate.health_ratio * p.switch_health_weight
        score += jitter(self._rng, p.switch_random_weight)
        return score

    # ── moves ────────────────────────────────────────────────────────────────

    def _best_move(self, active: Combatant, opponent: Combatant) -> AttackAction:
        best = pick_best(usable_moves(active), lambda m: self.score_move(m, opponent))
        logger.debug("[%s] %s uses %s", self._name, active.name, best.name)
        return AttackAction(move_id=best.id, combatant_id=active.id, trainer_id=self.trainer_id)

    def score_move(self, move: Move, opponent: Combatant) -> float:
        """Composite offensive score.

        The chart is queried strictly here: a failed lookup, or any other fault
        while scoring, replaces this move's score with a fresh uniform draw.
        """
        p = self._params
        try:
            score = self._chart.multiplier(move.type, opponent.type) * p.move_type_weight
            score += move.power / p.power_scale * p.move_power_weight
            if move.inflicts_status:
                score += status_value(move.status) * p.move_status_weight
            score += accuracy_score(move) * p.move_accuracy_weight
            score += move.pp_ratio * p.move_pp_weight
        except Exception:
            logger.debug("[%s] scoring %s failed, using a random score", self._name, move.name)
            score = self._rng.random()
        return score
