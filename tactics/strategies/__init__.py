from __future__ import annotations

import random as _random

from tactics.agent import BattleStrategy
from tactics.strategies.cautious import CautiousStrategy
from tactics.strategies.optimizing import OptimizingStrategy
from tactics.strategies.random import RandomStrategy
from tactics.typechart import TypeLookup

STRATEGY_NAMES = ("cautious", "optimizing", "random")


def build_strategy(
    name: str,
    trainer_id: int,
    *,
    seed: int | None = None,
    chart: TypeLookup | None = None,
) -> BattleStrategy:
    """Strategy registry. Add new profiles here; nothing else needs to change.

    Available strategies:
      cautious     survival first (heal, retreat, shield, defensive moves)
      optimizing   tempo first (tiered heals, probabilistic switch, offensive moves)
      random       uniform over legal attacks and switches
    """
    rng = _random.Random(seed)
    if name == "cautious":
        return CautiousStrategy(trainer_id, chart=chart, rng=rng)
    if name == "optimizing":
        return OptimizingStrategy(trainer_id, chart=chart, rng=rng)
    if name == "random":
        return RandomStrategy(trainer_id, rng=rng)
    raise ValueError(f"Unknown strategy '{name}'. Available: {', '.join(STRATEGY_NAMES)}")


__all__ = [
    "CautiousStrategy",
    "OptimizingStrategy",
    "RandomStrategy",
    "STRATEGY_NAMES",
    "build_strategy",
]
