"""
DecisionRunner: asks one or more strategies for a decision on the same
scenario, many times, and records what they chose.

The battle engine is not involved: every sample sees the same snapshot, so
the spread of answers comes only from each strategy's random draws.
"""

from __future__ import annotations

import logging
import time

from benchmark.types import DecisionReport, DecisionStat
from tactics.agent import BattleStrategy
from tactics.errors import StrategyError
from tactics.schema import AttackAction, BattleAction, SwitchAction, UseItemAction
from tactics.scenario import Scenario
from tactics.typechart import PokeEnvTypeChart, effectiveness

logger = logging.getLogger(__name__)


class DecisionRunner:
    def __init__(self, scenario: Scenario) -> None:
        self._scenario = scenario
        self._chart = scenario.chart or PokeEnvTypeChart()

    def run(self, strategies: list[BattleStrategy], n_samples: int) -> DecisionReport:
        report = DecisionReport(
            scenario=self._scenario.name,
            strategies=[s.name for s in strategies],
            n_samples=n_samples,
        )
        logger.info(
            "Decision session: %s · %d sample(s) · scenario=%s",
            " vs ".join(report.strategies),
            n_samples,
            self._scenario.name,
        )

        start = time.time()
        for strategy in strategies:
            for i in range(n_samples):
                report.stats.append(self._sample(strategy, i))
        report.total_duration_s = time.time() - start
        return report

    def _sample(self, strategy: BattleStrategy, index: int) -> DecisionStat:
        scenario = self._scenario
        t0 = time.perf_counter()
        try:
            action = strategy.choose_action(scenario.state, scenario.inventory)
        except StrategyError as e:
            decision_ms = (time.perf_counter() - t0) * 1000
            logger.warning("[%s] sample %d faulted: %s", strategy.name, index, e)
            return DecisionStat(
                scenario=scenario.name,
                strategy=strategy.name,
                sample=index,
                decision_ms=decision_ms,
                action_type="fault",
                label=type(e).__name__,
                fault=str(e),
            )
        decision_ms = (time.perf_counter() - t0) * 1000

        action_type, label, eff = self._describe(strategy, action)
        logger.debug("[%s] sample %d → %s %s", strategy.name, index, action_type, label)
        return DecisionStat(
            scenario=scenario.name,
            strategy=strategy.name,
            sample=index,
            decision_ms=decision_ms,
            action_type=action_type,
            label=label,
            effectiveness=eff,
        )

    def _describe(self, strategy: BattleStrategy, action: BattleAction) -> tuple[str, str, float | None]:
        state = self._scenario.state
        team = state.team_of(strategy.trainer_id)
        if isinstance(action, AttackAction):
            attacker = team.get(action.combatant_id)
            move = next(m for m in attacker.moves if m.id == action.move_id)
            opponent = state.opponent_active(strategy.trainer_id)
            return "attack", move.name, effectiveness(self._chart, move.type, opponent.type)
        if isinstance(action, SwitchAction):
            return "switch", team.get(action.target_id).name, None
        if isinstance(action, UseItemAction):
            return "item", action.item.value, None
        raise TypeError(f"Unknown action type {type(action).__name__}")
