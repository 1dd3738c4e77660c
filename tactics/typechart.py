"""
Type-effectiveness lookup.

A chart maps (attacking type, defending type) to a non-negative multiplier.
0.0 means total immunity and is branched on explicitly by the strategies.
Unknown types raise UnknownTypeError; effectiveness() is the fail-soft wrapper
scoring code goes through.
"""

from __future__ import annotations

import logging
from typing import Mapping, Protocol

logger = logging.getLogger(__name__)

NEUTRAL = 1.0


class UnknownTypeError(KeyError):
    """Raised when a type name has no entry in the chart."""


class TypeLookup(Protocol):
    def multiplier(self, attacking: str, defending: str) -> float: ...


def _key(type_name: str) -> str:
    return type_name.strip().upper()


class TypeChart:
    """Mapping-backed chart: attacking -> defending -> multiplier.

    Only non-neutral entries need to be stored. Every type that appears on
    either side of the table counts as known; extra neutral-only types can be
    declared through ``types``.
    """

    def __init__(
        self,
        table: Mapping[str, Mapping[str, float]],
        types: set[str] | None = None,
    ) -> None:
        self._table = {
            _key(att): {_key(dfn): float(m) for dfn, m in row.items()} for att, row in table.items()
        }
        known = set(self._table)
        for row in self._table.values():
            known.update(row)
        known.update(_key(t) for t in types or ())
        self._types = frozenset(known)

    @property
    def types(self) -> frozenset[str]:
        return self._types

    def multiplier(self, attacking: str, defending: str) -> float:
        att, dfn = _key(attacking), _key(defending)
        for name in (att, dfn):
            if name not in self._types:
                raise UnknownTypeError(name)
        return self._table.get(att, {}).get(dfn, NEUTRAL)


_GEN_CHARTS: dict[int, dict] = {}


def _get_type_chart(gen: int) -> dict:
    if gen not in _GEN_CHARTS:
        from poke_env.data.gen_data import GenData

        _GEN_CHARTS[gen] = GenData.from_gen(gen).type_chart
    return _GEN_CHARTS[gen]


class PokeEnvTypeChart:
    """Chart backed by the type data bundled with poke-env.

    The underlying table is loaded on first use and shared between instances
    of the same generation.
    """

    def __init__(self, gen: int = 9) -> None:
        self.gen = gen

    def multiplier(self, attacking: str, defending: str) -> float:
        from poke_env.battle.pokemon_type import PokemonType

        try:
            att = PokemonType[_key(attacking)]
            dfn = PokemonType[_key(defending)]
        except KeyError as e:
            raise UnknownTypeError(e.args[0]) from e
        return float(att.damage_multiplier(dfn, type_chart=_get_type_chart(self.gen)))


def effectiveness(chart: TypeLookup, attacking: str, defending: str) -> float:
    """Multiplier of ``attacking`` against ``defending``, neutral on any lookup failure."""
    try:
        return chart.multiplier(attacking, defending)
    except Exception:
        logger.debug("type lookup failed for %s -> %s, using neutral", attacking, defending)
        return NEUTRAL
