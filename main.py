"""
Battle Tactics: decision benchmark entry point.

    python main.py --scenario scenarios/low_health.json --p1 cautious
    python main.py --scenario scenarios/immune_matchup.json --p1 cautious --p2 optimizing --n 200

Log level (default INFO, set via env or flag):
    LOG_LEVEL=DEBUG python main.py ...
    python main.py --log-level DEBUG ...

Reproducible runs: pass --seed or set TACTICS_SEED.
"""

from __future__ import annotations

import argparse
import logging
import os
import re
import uuid
from pathlib import Path

from dotenv import load_dotenv

from benchmark.export import write_report
from benchmark.runner import DecisionRunner
from tactics.scenario import load_scenario
from tactics.strategies import STRATEGY_NAMES, build_strategy
from tactics.typechart import PokeEnvTypeChart

logger = logging.getLogger(__name__)


def _setup_logging(level_name: str) -> None:
    level = getattr(logging, level_name)
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s [%(levelname)-8s] %(name)s — %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)  # silence third-party noise by default

    # Our packages follow the user-specified level.
    for name in ("__main__", "benchmark", "tactics"):
        logging.getLogger(name).setLevel(level)


def _safe(name: str) -> str:
    """Sanitize a strategy name for use in a filename."""
    return re.sub(r"[^a-zA-Z0-9_-]", "-", name)


def _default_output(p1: str, p2: str | None, n: int) -> str:
    tag = uuid.uuid4().hex[:6]
    versus = f"{_safe(p1)}_vs_{_safe(p2)}" if p2 else _safe(p1)
    return str(Path("runs") / f"{versus}_n{n}_{tag}.json")


def _env_int(name: str) -> int | None:
    value = os.getenv(name)
    return int(value) if value else None


def main() -> None:
    load_dotenv()
    parser = argparse.ArgumentParser(description="Battle Tactics decision benchmark")
    parser.add_argument("--scenario", required=True, metavar="PATH", help="Battle snapshot JSON")
    parser.add_argument("--p1", default="cautious", choices=STRATEGY_NAMES, help="First strategy")
    parser.add_argument("--p2", default=None, choices=STRATEGY_NAMES, help="Optional second strategy")
    parser.add_argument("--n", type=int, default=100, help="Decisions sampled per strategy")
    parser.add_argument(
        "--seed",
        type=int,
        default=_env_int("TACTICS_SEED"),
        help="Seed for the strategies' generators (also reads TACTICS_SEED). Default: OS entropy.",
    )
    parser.add_argument(
        "--type-gen",
        type=int,
        default=_env_int("TACTICS_TYPE_GEN") or 9,
        help="poke-env type chart generation when the scenario has no chart of its own. Default: 9.",
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv("LOG_LEVEL", "INFO").upper(),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log verbosity (also reads LOG_LEVEL env var). Default: INFO.",
    )
    parser.add_argument(
        "--output",
        default=None,
        metavar="PATH",
        help="Write JSON report to this path (default: runs/<p1>_vs_<p2>_n<n>_<hash>.json).",
    )
    args = parser.parse_args()
    if args.n < 1:
        parser.error("--n must be at least 1")

    _setup_logging(args.log_level)

    scenario = load_scenario(args.scenario)
    if scenario.chart is None:
        scenario.chart = PokeEnvTypeChart(gen=args.type_gen)

    names = [args.p1] + ([args.p2] if args.p2 else [])
    strategies = [
        build_strategy(
            name,
            scenario.side,
            seed=None if args.seed is None else args.seed + i,
            chart=scenario.chart,
        )
        for i, name in enumerate(names)
    ]

    logger.info(
        "Starting: %s · scenario %s · %d decision(s) each · seed=%s",
        " vs ".join(names),
        scenario.name,
        args.n,
        args.seed,
    )

    report = DecisionRunner(scenario).run(strategies, n_samples=args.n)

    print(f"Battle Tactics: {' vs '.join(names)} · scenario {scenario.name} · {args.n} decision(s)")
    print()
    for strategy in report.strategies:
        mix = ", ".join(f"{k} {v:.0%}" for k, v in sorted(report.action_mix(strategy).items()))
        print(f"  {strategy}: {mix}  (avg {report.avg_decision_ms(strategy):.3f} ms)")

    out = args.output or _default_output(args.p1, args.p2, args.n)
    Path(out).parent.mkdir(parents=True, exist_ok=True)
    write_report(report, out)
    print(f"  Report saved to {out}")


if __name__ == "__main__":
    main()
