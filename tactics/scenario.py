"""
Loads a battle snapshot from JSON.

    {
      "name": "low-health",
      "turn": 4,
      "side": 1,
      "inventory": {"potion": 1, "revive": 0},
      "type_chart": {"fire": {"grass": 2.0, "water": 0.5}},   # optional
      "teams": [
        {"trainer_id": 1, "active_id": 10, "members": [{...combatant...}]},
        {"trainer_id": 2, "active_id": 20, "members": [...]}
      ]
    }

``side`` is the AI-controlled trainer. Without ``type_chart`` the strategies
fall back to the poke-env chart.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from tactics.schema import BattleState, Combatant, Inventory, ItemKind, Move, MoveCategory, Team
from tactics.typechart import TypeChart, TypeLookup


@dataclass
class Scenario:
    name: str
    side: int
    state: BattleState
    inventory: Inventory
    chart: TypeLookup | None = None


def _require(data: dict, keys: set[str], where: str) -> None:
    missing = keys - data.keys()
    if missing:
        raise ValueError(f"{where} missing required keys: {sorted(missing)}")


def _parse_move(data: dict) -> Move:
    _require(data, {"id", "name", "type"}, "move")
    return Move(
        id=int(data["id"]),
        name=data["name"],
        type=data["type"],
        power=int(data.get("power", 0)),
        accuracy=int(data.get("accuracy", 100)),
        pp=int(data.get("pp", 10)),
        max_pp=int(data.get("max_pp", data.get("pp", 10))),
        category=MoveCategory(data.get("category", "damage")),
        status=data.get("status"),
    )


def _parse_combatant(data: dict, active_id: int) -> Combatant:
    _require(data, {"id", "name", "type", "hp", "max_hp"}, f"combatant {data.get('name', '?')}")
    cid = int(data["id"])
    return Combatant(
        id=cid,
        name=data["name"],
        type=data["type"],
        hp=int(data["hp"]),
        max_hp=int(data["max_hp"]),
        attack=int(data.get("attack", 50)),
        defense=int(data.get("defense", 50)),
        special_defense=int(data.get("special_defense", 50)),
        speed=int(data.get("speed", 50)),
        fainted=bool(data.get("fainted", int(data["hp"]) <= 0)),
        active=cid == active_id,
        moves=[_parse_move(m) for m in data.get("moves", [])],
        statuses=set(data.get("statuses", [])),
    )


def _parse_team(data: dict) -> Team:
    _require(data, {"trainer_id", "active_id", "members"}, "team")
    active_id = int(data["active_id"])
    return Team(
        trainer_id=int(data["trainer_id"]),
        members=[_parse_combatant(m, active_id) for m in data["members"]],
        active_id=active_id,
    )


def _parse_inventory(data: dict) -> Inventory:
    try:
        return Inventory({ItemKind(kind): int(count) for kind, count in data.items()})
    except ValueError as e:
        raise ValueError(f"inventory: {e}") from e


def parse_scenario(data: dict, default_name: str = "scenario") -> Scenario:
    _require(data, {"side", "teams"}, "scenario")
    chart = TypeChart(data["type_chart"]) if data.get("type_chart") else None
    return Scenario(
        name=data.get("name", default_name),
        side=int(data["side"]),
        state=BattleState(teams=[_parse_team(t) for t in data["teams"]], turn=int(data.get("turn", 0))),
        inventory=_parse_inventory(data.get("inventory", {})),
        chart=chart,
    )


def load_scenario(path: str | Path) -> Scenario:
    p = Path(path)
    with p.open(encoding="utf-8") as f:
        data = json.load(f)
    return parse_scenario(data, default_name=p.stem)
