from tactics.agent import BattleStrategy
from tactics.errors import (
    CombatantNotFoundError,
    NoActiveOpponentError,
    NoUsableMoveError,
    StrategyError,
    TeamNotFoundError,
)
from tactics.schema import (
    AttackAction,
    BattleAction,
    BattleState,
    Combatant,
    Inventory,
    ItemKind,
    Move,
    MoveCategory,
    SwitchAction,
    Team,
    UseItemAction,
)

__all__ = [
    "BattleStrategy",
    "StrategyError",
    "TeamNotFoundError",
    "CombatantNotFoundError",
    "NoActiveOpponentError",
    "NoUsableMoveError",
    "AttackAction",
    "BattleAction",
    "BattleState",
    "Combatant",
    "Inventory",
    "ItemKind",
    "Move",
    "MoveCategory",
    "SwitchAction",
    "Team",
    "UseItemAction",
]
