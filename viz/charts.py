"""Chart factories: one function per chart, each returns a go.Figure."""

from __future__ import annotations

import numpy as np
import pandas as pd
import plotly.graph_objects as go

_TEMPLATE = "plotly_dark"
_PALETTE = ["#6EE7F7", "#F76E6E", "#F7D56E", "#9B8CF7"]
_ACTION_COLORS = {
    "attack": "#6EE7F7",
    "switch": "#F76E6E",
    "item": "#7EF79B",
    "fault": "#444444",
}
_ACTION_ORDER = ["attack", "switch", "item", "fault"]


def _strategy_color(strategies: list[str], strategy: str) -> str:
    return _PALETTE[strategies.index(strategy) % len(_PALETTE)]


def action_mix(decisions: list[dict]) -> go.Figure:
    df = pd.DataFrame(decisions)
    strategies = list(df["strategy"].unique())

    fig = go.Figure()
    for action in _ACTION_ORDER:
        pcts = []
        for strategy in strategies:
            rows = df[df["strategy"] == strategy]
            pcts.append((rows["action_type"] == action).sum() / len(rows) * 100)
        if not any(pcts):
            continue
        fig.add_trace(
            go.Bar(
                name=action,
                x=strategies,
                y=pcts,
                marker_color=_ACTION_COLORS[action],
                text=[f"{p:.1f}%" for p in pcts],
                textposition="inside",
                hovertemplate=f"{action}: %{{y:.1f}}%<extra></extra>",
            )
        )

    fig.update_layout(
        title="Action Mix: attack vs switch vs item",
        template=_TEMPLATE,
        height=320,
        barmode="stack",
        xaxis_title="strategy",
        yaxis=dict(title="% of decisions", ticksuffix="%", range=[0, 100]),
        showlegend=True,
        legend=dict(orientation="h", yanchor="bottom", y=1.02),
        margin=dict(t=60, b=60, l=60, r=20),
    )
    return fig


def choice_frequency(decisions: list[dict]) -> go.Figure:
    df = pd.DataFrame(decisions)
    strategies = list(df["strategy"].unique())
    df = df.assign(choice=df["action_type"] + ": " + df["label"])

    fig = go.Figure()
    for strategy in strategies:
        counts = df[df["strategy"] == strategy]["choice"].value_counts()
        fig.add_trace(
            go.Bar(
                name=strategy,
                x=counts.values,
                y=counts.index,
                orientation="h",
                marker_color=_strategy_color(strategies, strategy),
                hovertemplate="%{y}: %{x}<extra></extra>",
            )
        )

    fig.update_layout(
        title="Chosen Actions",
        template=_TEMPLATE,
        height=max(320, 28 * df["choice"].nunique() + 120),
        barmode="group",
        xaxis_title="times chosen",
        yaxis=dict(autorange="reversed"),
        showlegend=True,
        legend=dict(orientation="h", yanchor="bottom", y=1.02),
        margin=dict(t=60, b=50, l=160, r=20),
    )
    return fig


def latency_violin(decisions: list[dict]) -> go.Figure:
    df = pd.DataFrame(decisions)
    strategies = list(df["strategy"].unique())
    fig = go.Figure()

    for strategy in strategies:
        subset = df[df["strategy"] == strategy]["decision_ms"]
        fig.add_trace(
            go.Violin(
                x=subset,
                name=strategy,
                orientation="h",
                side="positive",
                marker_color=_strategy_color(strategies, strategy),
                points="outliers",
                hovertemplate="%{x:.3f} ms<extra></extra>",
            )
        )

    fig.update_layout(
        title="Decision Latency Distribution",
        template=_TEMPLATE,
        height=320,
        xaxis=dict(title="latency (ms)", type="log"),
        yaxis_title="strategy",
        showlegend=False,
        margin=dict(t=60, b=50, l=20, r=20),
    )
    return fig


def latency_percentile_bars(decisions: list[dict]) -> go.Figure:
    df = pd.DataFrame(decisions)
    strategies = list(df["strategy"].unique())
    percentiles = [25, 50, 75, 95]
    labels = ["p25", "p50", "p75", "p95"]

    fig = go.Figure()
    for strategy in strategies:
        rows = df[df["strategy"] == strategy]["decision_ms"]
        values = [float(np.percentile(rows, p)) for p in percentiles]
        fig.add_trace(
            go.Bar(
                name=strategy,
                x=labels,
                y=values,
                marker_color=_strategy_color(strategies, strategy),
                text=[f"{v:.3f} ms" for v in values],
                textposition="outside",
                hovertemplate="%{x}: %{y:.3f} ms<extra></extra>",
            )
        )

    fig.update_layout(
        title="Latency Percentiles (p25 / p50 / p75 / p95)",
        template=_TEMPLATE,
        height=320,
        barmode="group",
        xaxis_title="percentile",
        yaxis_title="latency (ms)",
        showlegend=True,
        legend=dict(orientation="h", yanchor="bottom", y=1.02),
        margin=dict(t=60, b=50, l=60, r=20),
    )
    return fig


def effectiveness_bucket(v: float) -> str:
    if v == 0:
        return "immune"
    if v < 1:
        return "not very effective"
    if v == 1:
        return "neutral"
    return "super effective"


def type_effectiveness_bar(decisions: list[dict]) -> go.Figure:
    df = pd.DataFrame(decisions)
    strategies = list(df["strategy"].unique())
    # Only attack decisions carry an effectiveness value
    df = df[df["effectiveness"].notna() & (df["action_type"] == "attack")].copy()
    df["bucket"] = df["effectiveness"].apply(effectiveness_bucket)

    buckets = ["immune", "not very effective", "neutral", "super effective"]
    colors = ["#444444", "#F76E6E", "#888888", "#6EE7F7"]

    fig = go.Figure()
    for bucket, color in zip(buckets, colors, strict=True):
        pcts = []
        for strategy in strategies:
            rows = df[df["strategy"] == strategy]
            pct = (rows["bucket"] == bucket).sum() / len(rows) * 100 if len(rows) else 0
            pcts.append(pct)
        fig.add_trace(
            go.Bar(
                name=bucket,
                x=strategies,
                y=pcts,
                marker_color=color,
                text=[f"{p:.1f}%" for p in pcts],
                textposition="inside",
                hovertemplate=f"{bucket}: %{{y:.1f}}%<extra></extra>",
            )
        )

    fig.update_layout(
        title="Type Effectiveness of chosen attacks",
        template=_TEMPLATE,
        height=320,
        barmode="stack",
        xaxis_title="strategy",
        yaxis=dict(title="% of attacks", ticksuffix="%", range=[0, 100]),
        showlegend=True,
        legend=dict(orientation="h", yanchor="bottom", y=1.02),
        margin=dict(t=60, b=60, l=60, r=20),
    )
    return fig
