"""Reads decision benchmark runs back from disk and merges runs of one scenario."""

from __future__ import annotations

import json
from pathlib import Path

_REPORT_KEYS = {"summary", "decisions"}
_DECISION_KEYS = {"strategy", "action_type", "label", "decision_ms"}


def load_report(path: str | Path) -> dict:
    with Path(path).open(encoding="utf-8") as f:
        data = json.load(f)

    missing = _REPORT_KEYS - data.keys()
    if missing:
        raise ValueError(f"Report missing required keys: {missing}")

    for i, row in enumerate(data["decisions"]):
        gaps = _DECISION_KEYS - row.keys()
        if gaps:
            raise ValueError(f"Decision #{i} in {path} missing keys: {sorted(gaps)}")

    return data


def merge_reports(reports: list[dict]) -> dict:
    """Combine runs of the same scenario into one report.

    Per-strategy summary entries are merged by strategy name; a later run
    overrides an earlier one for the same strategy.
    """
    if not reports:
        raise ValueError("Nothing to merge")
    if len(reports) == 1:
        return reports[0]

    scenarios = {r["summary"]["scenario"] for r in reports}
    if len(scenarios) > 1:
        raise ValueError(f"Cannot merge runs of different scenarios: {sorted(scenarios)}")

    strategies: list[str] = []
    summary: dict = {"scenario": scenarios.pop(), "n_samples": 0, "total_duration_s": 0.0}
    per_strategy = ("action_mix", "avg_decision_ms", "fault_rate")
    for key in per_strategy:
        summary[key] = {}

    decisions: list[dict] = []
    for r in reports:
        s = r["summary"]
        strategies.extend(name for name in s["strategies"] if name not in strategies)
        summary["n_samples"] = max(summary["n_samples"], s["n_samples"])
        summary["total_duration_s"] += s.get("total_duration_s", 0.0)
        for key in per_strategy:
            summary[key].update(s.get(key, {}))
        decisions.extend(r["decisions"])

    summary["strategies"] = strategies
    return {"summary": summary, "decisions": decisions}
