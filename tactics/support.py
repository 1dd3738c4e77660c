"""
Decision support shared by every strategy: candidate enumeration and pure
scoring primitives.

Nothing here keeps state. Randomness always comes in through the caller's
generator so each strategy stays reproducible under its own seed.
"""

from __future__ import annotations

import random
from typing import Callable, Iterable, TypeVar

from tactics.errors import NoUsableMoveError
from tactics.schema import BattleState, Combatant, Inventory, ItemKind, Move, Team
from tactics.typechart import TypeLookup, effectiveness

T = TypeVar("T")

# Defensive stats are normalized against this ceiling.
DEFENSE_SCALE = 200.0


# ── Candidate enumeration ────────────────────────────────────────────────────


def usable_moves(combatant: Combatant) -> list[Move]:
    moves = [m for m in combatant.moves if m.pp > 0]
    if not moves:
        raise NoUsableMoveError(combatant.name)
    return moves


def switch_candidates(team: Team, current: Combatant) -> list[Combatant]:
    return [m for m in team.members if m.id != current.id and not m.fainted]


def usable_items(inventory: Inventory) -> list[ItemKind]:
    return [kind for kind in ItemKind if inventory.count(kind) > 0]


def protective_move(combatant: Combatant) -> Move | None:
    return next((m for m in combatant.moves if m.is_protective and m.pp > 0), None)


def resolve_sides(state: BattleState, trainer_id: int) -> tuple[Team, Combatant, Combatant]:
    """Own team, own active combatant and the opposing active combatant.

    Raises the matching StrategyError when any of the three is missing.
    """
    team = state.team_of(trainer_id)
    return team, team.active, state.opponent_active(trainer_id)


# ── Scoring primitives ───────────────────────────────────────────────────────


def matchup(chart: TypeLookup, attacker: Combatant, defender: Combatant) -> float:
    return effectiveness(chart, attacker.type, defender.type)


def capped_effectiveness(value: float) -> float:
    return min(value, 1.0)


def defense_pair(combatant: Combatant, *, average: bool) -> float:
    total = combatant.defense + combatant.special_defense
    if average:
        total /= 2.0
    return total / DEFENSE_SCALE


def accuracy_score(move: Move) -> float:
    return move.accuracy / 100.0


def jitter(rng: random.Random, weight: float) -> float:
    return rng.random() * weight


def pick_best(candidates: Iterable[T], score: Callable[[T], float]) -> T:
    """Highest-scoring candidate; the first one seen wins ties."""
    best: T | None = None
    best_score = float("-inf")
    for candidate in candidates:
        s = score(candidate)
        if best is None or s > best_score:
            best, best_score = candidate, s
    if best is None:
        raise ValueError("pick_best() needs at least one candidate")
    return best
