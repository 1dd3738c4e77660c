"""
Data contract between the battle engine and the decision strategies.

The engine owns and mutates every object here. Strategies only read them
and answer with one of the action dataclasses at the bottom of this module.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from tactics.errors import CombatantNotFoundError, NoActiveOpponentError, TeamNotFoundError

PROTECTIVE_MOVES = frozenset({"protect", "detect", "king's shield", "spiky shield", "baneful bunker"})


class MoveCategory(str, Enum):
    DAMAGE = "damage"
    STATUS = "status"


class ItemKind(str, Enum):
    POTION = "potion"
    SUPER_POTION = "super_potion"
    HYPER_POTION = "hyper_potion"
    MEGA_POTION = "mega_potion"
    REVIVE = "revive"
    GUARD = "guard"  # status shield


@dataclass
class Move:
    id: int
    name: str
    type: str
    power: int = 0
    accuracy: int = 100  # 0–100
    pp: int = 10  # uses remaining
    max_pp: int = 10
    category: MoveCategory = MoveCategory.DAMAGE
    status: str | None = None  # condition a status move tries to inflict

    @property
    def inflicts_status(self) -> bool:
        return self.category is MoveCategory.STATUS and bool(self.status)

    @property
    def pp_ratio(self) -> float:
        return self.pp / self.max_pp

    @property
    def is_protective(self) -> bool:
        return self.name.strip().lower() in PROTECTIVE_MOVES


@dataclass
class Combatant:
    id: int
    name: str
    type: str
    hp: int
    max_hp: int
    attack: int = 50
    defense: int = 50
    special_defense: int = 50
    speed: int = 50
    fainted: bool = False
    active: bool = False
    moves: list[Move] = field(default_factory=list)
    statuses: set[str] = field(default_factory=set)

    @property
    def health_ratio(self) -> float:
        if self.max_hp <= 0:
            return 0.0
        return self.hp / self.max_hp

    @property
    def missing_hp(self) -> int:
        return self.max_hp - self.hp


@dataclass
class Team:
    trainer_id: int
    members: list[Combatant]
    active_id: int

    def get(self, combatant_id: int) -> Combatant:
        for member in self.members:
            if member.id == combatant_id:
                return member
        raise CombatantNotFoundError(self.trainer_id, combatant_id)

    @property
    def active(self) -> Combatant:
        return self.get(self.active_id)


@dataclass
class Inventory:
    counts: dict[ItemKind, int] = field(default_factory=dict)

    def count(self, kind: ItemKind) -> int:
        return self.counts.get(kind, 0)


@dataclass
class BattleState:
    teams: list[Team]
    turn: int = 0

    def team_of(self, trainer_id: int) -> Team:
        for team in self.teams:
            if team.trainer_id == trainer_id:
                return team
        raise TeamNotFoundError(trainer_id)

    def opponent_active(self, trainer_id: int) -> Combatant:
        """First combatant flagged active on any team not owned by ``trainer_id``."""
        for team in self.teams:
            if team.trainer_id == trainer_id:
                continue
            for member in team.members:
                if member.active:
                    return member
        raise NoActiveOpponentError(trainer_id)


@dataclass(frozen=True)
class AttackAction:
    move_id: int
    combatant_id: int
    trainer_id: int


@dataclass(frozen=True)
class SwitchAction:
    trainer_id: int
    target_id: int


@dataclass(frozen=True)
class UseItemAction:
    trainer_id: int
    target_id: int
    item: ItemKind


BattleAction = AttackAction | SwitchAction | UseItemAction
