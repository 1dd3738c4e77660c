import json
import random
from pathlib import Path

import pytest

from benchmark.export import report_to_dict, write_report
from benchmark.runner import DecisionRunner
from benchmark.types import DecisionReport, DecisionStat
from tactics.scenario import load_scenario
from tactics.strategies import CautiousStrategy, OptimizingStrategy, RandomStrategy
from viz.charts import effectiveness_bucket
from viz.loader import load_report, merge_reports

SCENARIOS = Path(__file__).resolve().parent.parent / "scenarios"


@pytest.fixture
def scenario():
    return load_scenario(SCENARIOS / "low_health.json")


def test_runner_records_every_sample(scenario):
    cautious = CautiousStrategy(scenario.side, chart=scenario.chart, rng=random.Random(1))
    optimizing = OptimizingStrategy(scenario.side, chart=scenario.chart, rng=random.Random(2))
    report = DecisionRunner(scenario).run([cautious, optimizing], n_samples=25)

    assert report.scenario == "low-health"
    assert report.strategies == [cautious.name, optimizing.name]
    assert len(report.stats) == 50
    assert [s.sample for s in report.stats[:3]] == [0, 1, 2]
    assert report.total_duration_s >= 0


def test_cautious_always_heals_in_the_low_health_scenario(scenario):
    cautious = CautiousStrategy(scenario.side, chart=scenario.chart, rng=random.Random(7))
    report = DecisionRunner(scenario).run([cautious], n_samples=10)

    assert report.action_mix(cautious.name) == {"item": 1.0}
    assert {s.label for s in report.stats} == {"potion"}
    assert report.fault_rate(cautious.name) == 0.0


def test_attack_rows_carry_effectiveness(scenario):
    strategy = RandomStrategy(scenario.side, rng=random.Random(4))
    report = DecisionRunner(scenario).run([strategy], n_samples=40)

    attacks = [s for s in report.stats if s.action_type == "attack"]
    assert attacks
    for row in attacks:
        assert row.effectiveness is not None
        if row.label == "Ember":
            assert row.effectiveness == 2.0
    assert all(s.effectiveness is None for s in report.stats if s.action_type == "switch")


def test_faults_are_recorded_not_raised(scenario):
    stray = CautiousStrategy(99, chart=scenario.chart)
    report = DecisionRunner(scenario).run([stray], n_samples=3)

    assert report.fault_rate(stray.name) == 1.0
    assert {s.label for s in report.stats} == {"TeamNotFoundError"}
    assert all(s.action_type == "fault" and s.fault for s in report.stats)


def test_report_aggregates_for_unknown_strategy_are_empty():
    report = DecisionReport(scenario="s", strategies=["a"], n_samples=0)
    assert report.action_mix("a") == {}
    assert report.avg_decision_ms("a") is None
    assert report.fault_rate("a") is None


def test_avg_decision_ms():
    report = DecisionReport(
        scenario="s",
        strategies=["a"],
        n_samples=2,
        stats=[
            DecisionStat("s", "a", 0, 1.0, "attack", "Tackle", 1.0),
            DecisionStat("s", "a", 1, 3.0, "switch", "Squirtle"),
        ],
    )
    assert report.avg_decision_ms("a") == 2.0
    assert report.action_mix("a") == {"attack": 0.5, "switch": 0.5}


def test_write_report_round_trips_through_the_loader(scenario, tmp_path):
    cautious = CautiousStrategy(scenario.side, chart=scenario.chart, rng=random.Random(1))
    report = DecisionRunner(scenario).run([cautious], n_samples=5)
    path = tmp_path / "run.json"
    write_report(report, str(path))

    data = load_report(path)
    assert data == json.loads(json.dumps(report_to_dict(report)))
    assert data["summary"]["action_mix"][cautious.name] == {"item": 1.0}
    assert len(data["decisions"]) == 5


def test_loader_rejects_incomplete_reports(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"summary": {}}), encoding="utf-8")
    with pytest.raises(ValueError, match="decisions"):
        load_report(path)


def test_loader_rejects_decision_rows_without_a_strategy(tmp_path):
    path = tmp_path / "rows.json"
    row = {"action_type": "attack", "label": "Ember", "decision_ms": 0.1}
    path.write_text(json.dumps({"summary": {}, "decisions": [row]}), encoding="utf-8")
    with pytest.raises(ValueError, match="strategy"):
        load_report(path)


def test_merge_reports_combines_runs_of_one_scenario(scenario):
    first = report_to_dict(DecisionRunner(scenario).run([CautiousStrategy(scenario.side, chart=scenario.chart)], 3))
    optimizing = OptimizingStrategy(scenario.side, chart=scenario.chart, rng=random.Random(5))
    second = report_to_dict(DecisionRunner(scenario).run([optimizing], 4))

    merged = merge_reports([first, second])

    assert merged["summary"]["strategies"] == first["summary"]["strategies"] + [optimizing.name]
    assert merged["summary"]["n_samples"] == 4
    assert set(merged["summary"]["fault_rate"]) == set(merged["summary"]["strategies"])
    assert len(merged["decisions"]) == 7


def test_merge_reports_refuses_mixed_scenarios():
    run = {"summary": {"scenario": "a", "strategies": [], "n_samples": 1}, "decisions": []}
    other = {"summary": {"scenario": "b", "strategies": [], "n_samples": 1}, "decisions": []}
    with pytest.raises(ValueError, match="different scenarios"):
        merge_reports([run, other])


@pytest.mark.parametrize(
    "value, bucket",
    [(0.0, "immune"), (0.5, "not very effective"), (1.0, "neutral"), (2.0, "super effective")],
)
def test_effectiveness_bucket(value, bucket):
    assert effectiveness_bucket(value) == bucket


def test_build_report_renders_html(scenario):
    from viz.report import build_report

    strategies = [
        RandomStrategy(scenario.side, rng=random.Random(4)),
        CautiousStrategy(99, chart=scenario.chart),
    ]
    data = report_to_dict(DecisionRunner(scenario).run(strategies, n_samples=8))
    page = build_report(data)

    assert page.startswith("<!DOCTYPE html>")
    assert "low-health" in page
    assert "Faults" in page


def test_build_report_needs_decisions():
    from viz.report import build_report

    with pytest.raises(ValueError):
        build_report({"summary": {"strategies": [], "scenario": "s", "n_samples": 0}, "decisions": []})
