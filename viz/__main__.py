"""Render one or more decision runs of a scenario as a single HTML page.

    python -m viz runs/cautious_vs_optimizing_n200_ab12cd.json
    python -m viz runs/a.json runs/b.json --output reports/combined.html
"""

from __future__ import annotations

import argparse
from pathlib import Path

from viz.loader import load_report, merge_reports
from viz.report import build_report


def main() -> None:
    parser = argparse.ArgumentParser(prog="python -m viz", description="Decision benchmark HTML report")
    parser.add_argument("runs", nargs="+", type=Path, metavar="RUN", help="Decision run JSON written by main.py")
    parser.add_argument("--output", type=Path, default=None, metavar="FILE", help="Default: reports/<first run>.html")
    args = parser.parse_args()

    absent = [str(p) for p in args.runs if not p.is_file()]
    if absent:
        parser.error(f"run file(s) not found: {', '.join(absent)}")

    try:
        data = merge_reports([load_report(p) for p in args.runs])
    except ValueError as e:
        parser.error(str(e))

    out = args.output or Path("reports") / args.runs[0].with_suffix(".html").name
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(build_report(data), encoding="utf-8")
    print(f"{len(data['decisions'])} decision(s) across {len(args.runs)} run(s) -> {out}")


if __name__ == "__main__":
    main()
