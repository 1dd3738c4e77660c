"""
Extension point: anything with choose_action() can drive an AI-controlled side.

Strategies do not share a base class. Common scaffolding lives as plain
functions in tactics.support; a new profile only needs to satisfy this protocol.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from tactics.schema import BattleAction, BattleState, Inventory


@runtime_checkable
class BattleStrategy(Protocol):
    """Decision engine for one trainer.

    Receives the full battle state and the trainer's inventory snapshot,
    returns exactly one BattleAction. Raises a StrategyError subclass when the
    state is inconsistent.
    """

    trainer_id: int

    @property
    def name(self) -> str:
        """Human-readable identifier used in logs and reports."""
        ...

    def choose_action(self, state: BattleState, inventory: Inventory) -> BattleAction:
        """Choose this turn's action."""
        ...
