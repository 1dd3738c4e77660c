"""Export a DecisionReport to a structured JSON file."""

from __future__ import annotations

import dataclasses
import json

from benchmark.types import DecisionReport


def report_to_dict(report: DecisionReport) -> dict:
    return {
        "summary": {
            "scenario": report.scenario,
            "strategies": report.strategies,
            "n_samples": report.n_samples,
            "total_duration_s": report.total_duration_s,
            "action_mix": {s: report.action_mix(s) for s in report.strategies},
            "avg_decision_ms": {s: report.avg_decision_ms(s) for s in report.strategies},
            "fault_rate": {s: report.fault_rate(s) for s in report.strategies},
        },
        "decisions": [dataclasses.asdict(s) for s in report.stats],
    }


def write_report(report: DecisionReport, path: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(report_to_dict(report), f, indent=2)
