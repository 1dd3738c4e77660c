"""
Status catalog: the qualitative view of status conditions that scoring needs.

Application, duration and immunity rules belong to the battle engine. This
module only answers two questions about a condition name: does it lower a
stat of the target, and how much is inflicting it worth.
"""

from __future__ import annotations

from enum import Enum


class StatusKind(str, Enum):
    SLEEP = "sleep"
    FREEZE = "freeze"
    PARALYSIS = "paralysis"
    CONFUSION = "confusion"
    BURN = "burn"
    POISON = "poison"
    TOXIC = "toxic"
    ATTACK_DOWN = "attack_down"
    DEFENSE_DOWN = "defense_down"
    SP_ATTACK_DOWN = "sp_attack_down"
    SP_DEFENSE_DOWN = "sp_defense_down"
    SPEED_DOWN = "speed_down"
    ACCURACY_DOWN = "accuracy_down"
    EVASION_DOWN = "evasion_down"


# Showdown short codes plus the verb forms that move data tends to use.
_ALIASES: dict[str, StatusKind] = {
    "slp": StatusKind.SLEEP,
    "asleep": StatusKind.SLEEP,
    "frz": StatusKind.FREEZE,
    "frozen": StatusKind.FREEZE,
    "par": StatusKind.PARALYSIS,
    "paralyze": StatusKind.PARALYSIS,
    "paralyzed": StatusKind.PARALYSIS,
    "confuse": StatusKind.CONFUSION,
    "confused": StatusKind.CONFUSION,
    "brn": StatusKind.BURN,
    "psn": StatusKind.POISON,
    "tox": StatusKind.TOXIC,
    "atk_down": StatusKind.ATTACK_DOWN,
    "def_down": StatusKind.DEFENSE_DOWN,
    "spa_down": StatusKind.SP_ATTACK_DOWN,
    "spd_down": StatusKind.SP_DEFENSE_DOWN,
    "spe_down": StatusKind.SPEED_DOWN,
}

STAT_DROPS: frozenset[StatusKind] = frozenset(
    {
        StatusKind.ATTACK_DOWN,
        StatusKind.DEFENSE_DOWN,
        StatusKind.SP_ATTACK_DOWN,
        StatusKind.SP_DEFENSE_DOWN,
        StatusKind.SPEED_DOWN,
        StatusKind.ACCURACY_DOWN,
        StatusKind.EVASION_DOWN,
    }
)

STATUS_VALUES: dict[StatusKind, float] = {
    StatusKind.SLEEP: 1.0,
    StatusKind.FREEZE: 1.0,
    StatusKind.PARALYSIS: 0.8,
    StatusKind.CONFUSION: 0.8,
    StatusKind.ATTACK_DOWN: 0.7,
    StatusKind.SP_ATTACK_DOWN: 0.7,
    StatusKind.SPEED_DOWN: 0.7,
    StatusKind.DEFENSE_DOWN: 0.6,
    StatusKind.SP_DEFENSE_DOWN: 0.6,
}
DEFAULT_STATUS_VALUE = 0.3

# Unlisted names are valued by the family their name falls in, checked in order.
_VALUE_FAMILIES: tuple[tuple[tuple[str, ...], float], ...] = (
    (("sleep", "freeze"), 1.0),
    (("paraly", "confus"), 0.8),
    (("attack_down", "speed_down"), 0.7),
    (("defense_down",), 0.6),
)


def _normalize(name: str) -> str:
    return name.strip().lower().replace("-", "_").replace(" ", "_")


def parse_status(name: str | None) -> StatusKind | None:
    """Map a condition name, alias or short code onto a StatusKind.

    Returns None for anything the catalog does not know.
    """
    if not name:
        return None
    key = _normalize(name)
    try:
        return StatusKind(key)
    except ValueError:
        return _ALIASES.get(key)


def reduces_stat(name: str | None) -> bool:
    kind = parse_status(name)
    if kind is not None:
        return kind in STAT_DROPS
    # Unknown stat-lowering effects still follow the "<stat>_down" / "reduce" naming.
    key = _normalize(name or "")
    return key.endswith("_down") or "reduce" in key


def status_value(name: str | None) -> float:
    kind = parse_status(name)
    if kind is not None:
        return STATUS_VALUES.get(kind, DEFAULT_STATUS_VALUE)
    key = _normalize(name or "")
    for needles, value in _VALUE_FAMILIES:
        if any(n in key for n in needles):
            return value
    return DEFAULT_STATUS_VALUE
