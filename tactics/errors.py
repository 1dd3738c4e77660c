"""
Domain faults raised when the battle state handed to a strategy is inconsistent.

These propagate out of choose_action() untouched. The host engine decides
whether to abort the turn or substitute a default action.
"""

from __future__ import annotations


class StrategyError(Exception):
    """Base class for every fault a strategy reports to its caller."""


class TeamNotFoundError(StrategyError):
    def __init__(self, trainer_id: int) -> None:
        super().__init__(f"No team found for trainer {trainer_id}")
        self.trainer_id = trainer_id


class CombatantNotFoundError(StrategyError):
    def __init__(self, trainer_id: int, combatant_id: int) -> None:
        super().__init__(f"Combatant {combatant_id} is not on the roster of trainer {trainer_id}")
        self.trainer_id = trainer_id
        self.combatant_id = combatant_id


class NoActiveOpponentError(StrategyError):
    def __init__(self, trainer_id: int) -> None:
        super().__init__(f"No active opponent found for trainer {trainer_id}")
        self.trainer_id = trainer_id


class NoUsableMoveError(StrategyError):
    def __init__(self, combatant_name: str) -> None:
        super().__init__(f"No usable move available for {combatant_name}")
        self.combatant_name = combatant_name
