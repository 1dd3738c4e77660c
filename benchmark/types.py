"""Typed result containers for decision benchmark runs."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class DecisionStat:
    scenario: str
    strategy: str  # strategy.name
    sample: int
    decision_ms: float
    action_type: str  # "attack" | "switch" | "item" | "fault"
    label: str  # move name, switch target name, item kind or fault class
    effectiveness: float | None = None  # chosen attack vs the opposing active
    fault: str | None = None


@dataclass
class DecisionReport:
    scenario: str
    strategies: list[str]
    n_samples: int
    stats: list[DecisionStat] = field(default_factory=list)
    total_duration_s: float = 0.0

    def _rows(self, strategy: str) -> list[DecisionStat]:
        return [s for s in self.stats if s.strategy == strategy]

    def action_mix(self, strategy: str) -> dict[str, float]:
        rows = self._rows(strategy)
        if not rows:
            return {}
        mix: dict[str, float] = {}
        for row in rows:
            mix[row.action_type] = mix.get(row.action_type, 0) + 1
        return {k: v / len(rows) for k, v in mix.items()}

    def avg_decision_ms(self, strategy: str) -> float | None:
        rows = self._rows(strategy)
        if not rows:
            return None
        return sum(r.decision_ms for r in rows) / len(rows)

    def fault_rate(self, strategy: str) -> float | None:
        rows = self._rows(strategy)
        if not rows:
            return None
        return sum(1 for r in rows if r.fault) / len(rows)
