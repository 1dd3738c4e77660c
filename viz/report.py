"""Assembles chart figures into a single self-contained HTML decision report."""

from __future__ import annotations

import datetime
import html

import plotly.io as pio

from viz.charts import (
    action_mix,
    choice_frequency,
    latency_percentile_bars,
    latency_violin,
    type_effectiveness_bar,
)

_CSS = """
* { box-sizing: border-box; margin: 0; padding: 0; }
body {
    background: #0e0e0e;
    color: #e0e0e0;
    font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", sans-serif;
    padding: 2.5rem 3rem;
    max-width: 1400px;
    margin: 0 auto;
}
header { margin-bottom: 2.5rem; }
h1 { font-size: 1.5rem; font-weight: 600; letter-spacing: -0.02em; }
.meta { color: #666; font-size: 0.85rem; margin-top: 0.4rem; }
.meta span { margin-right: 1.5rem; }
h2 {
    font-size: 0.75rem;
    font-weight: 600;
    letter-spacing: 0.1em;
    text-transform: uppercase;
    color: #555;
    margin: 2.5rem 0 1rem;
    padding-bottom: 0.5rem;
    border-bottom: 1px solid #1e1e1e;
}
.charts { display: flex; flex-wrap: wrap; gap: 1rem; }
.chart { flex: 1 1 560px; min-width: 0; background: #141414; border-radius: 8px; overflow: hidden; }
.chart-full { flex: 1 1 100%; background: #141414; border-radius: 8px; overflow: hidden; }
.fault-log {
    background: #141414;
    border-radius: 8px;
    overflow: auto;
    max-height: 520px;
    font-size: 0.8rem;
}
.fault-log table { width: 100%; border-collapse: collapse; }
.fault-log th {
    position: sticky; top: 0;
    background: #1a1a1a;
    color: #666;
    font-weight: 600;
    letter-spacing: 0.07em;
    text-transform: uppercase;
    font-size: 0.68rem;
    padding: 0.55rem 0.9rem;
    text-align: left;
    border-bottom: 1px solid #2a2a2a;
}
.fault-log td {
    padding: 0.45rem 0.9rem;
    border-bottom: 1px solid #1c1c1c;
    vertical-align: top;
    color: #bbb;
}
.fault-log tr:last-child td { border-bottom: none; }
.fault-log td.dim { color: #555; }
"""

_HTML_BASE = """\
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>Battle Tactics: {title}</title>
  <style>{css}</style>
</head>
<body>
  <header>
    <h1>Battle Tactics Decision Report</h1>
    <p class="meta">
      <span>{title}</span>
      <span>scenario {scenario}</span>
      <span>{n_samples} samples per strategy</span>
      <span>{date}</span>
    </p>
  </header>

  <h2>Decisions</h2>
  <div class="charts">
    <div class="chart">{action_mix}</div>
    <div class="chart">{choice_frequency}</div>
    {effectiveness_slot}
  </div>

  <h2>Latency</h2>
  <div class="charts">
    <div class="chart">{latency_violin}</div>
    <div class="chart">{latency_percentile_bars}</div>
  </div>
  {fault_section}
</body>
</html>
"""


def _build_fault_section(decisions: list[dict]) -> str:
    faults = [d for d in decisions if d.get("fault")]
    if not faults:
        return ""

    rows_html = [
        f"<tr>"
        f'<td class="dim">{html.escape(d["strategy"])}</td>'
        f'<td class="dim">{d["sample"]}</td>'
        f"<td>{html.escape(d['label'])}</td>"
        f"<td>{html.escape(d['fault'])}</td>"
        f"</tr>"
        for d in faults
    ]
    table = (
        "<table>"
        "<thead><tr><th>strategy</th><th>sample</th><th>fault</th><th>message</th></tr></thead>"
        f"<tbody>{''.join(rows_html)}</tbody>"
        "</table>"
    )
    return f'\n  <h2>Faults</h2>\n  <div class="fault-log">{table}</div>'


def _fig_div(fig, *, first: bool) -> str:
    return pio.to_html(
        fig,
        full_html=False,
        include_plotlyjs=first,
        config={"displayModeBar": False, "responsive": True},
    )


def build_report(data: dict) -> str:
    s = data["summary"]
    decisions = data["decisions"]
    if not decisions:
        raise ValueError("Report has no decisions to chart")

    figs = [
        action_mix(decisions),
        choice_frequency(decisions),
        latency_violin(decisions),
        latency_percentile_bars(decisions),
    ]
    divs = [_fig_div(fig, first=(i == 0)) for i, fig in enumerate(figs)]

    effectiveness_slot = ""
    if any(d.get("effectiveness") is not None for d in decisions):
        eff_div = _fig_div(type_effectiveness_bar(decisions), first=False)
        effectiveness_slot = f'<div class="chart-full">{eff_div}</div>'

    date = datetime.datetime.now().strftime("%Y-%m-%d %H:%M")

    return _HTML_BASE.format(
        css=_CSS,
        title=html.escape(" vs ".join(s["strategies"])),
        scenario=html.escape(s["scenario"]),
        n_samples=s["n_samples"],
        date=date,
        action_mix=divs[0],
        choice_frequency=divs[1],
        latency_violin=divs[2],
        latency_percentile_bars=divs[3],
        effectiveness_slot=effectiveness_slot,
        fault_section=_build_fault_section(decisions),
    )
