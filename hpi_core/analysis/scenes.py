# scenes.py
from __future__ import annotations

from typing import Iterable, Optional, Sequence

import pandas as pd
import plotly.graph_objects as go
from plotly.colors import qualitative

from hpi_core.analysis.stats_utils import date_extent, padded_domain, value_extent, widen
from hpi_core.config import PREFERRED_REGIONS, SNAPSHOT_TOP_N, TREND_PADDING, TREND_REGION_COUNT
from hpi_core.normalize.dates import DATE_DTYPE
from hpi_core.normalize.series import FRAME_COLUMNS, Observation, SeriesIndex
from hpi_core.session import Scene, SessionState

PALETTE = qualitative.D3  # category10
DRILLDOWN_COLOR = "orange"
SNAPSHOT_COLOR = "steelblue"
# room for outside bar labels and end markers
SNAPSHOT_HEADROOM = 1.1
DRILLDOWN_MARGIN = 0.05


def _layout(fig: go.Figure, title: str, **kw) -> go.Figure:
    fig.update_layout(
        height=460,
        margin=dict(l=10, r=10, t=50, b=10),
        title=title,
        showlegend=False,
        **kw,
    )
    return fig


def trend_regions(
    index: SeriesIndex,
    preferred: Iterable[str] = PREFERRED_REGIONS,
    count: int = TREND_REGION_COUNT,
) -> list[str]:
    """
    Preferred regions present in the index; if there are fewer than `count`,
    pad with the other regions in first-appearance order.
    """
    pref = [r for r in preferred if r in index]
    if len(pref) >= count:
        return pref[:count]
    rest = [r for r in index.by_region if r not in pref]
    return (pref + rest)[:count]


def trend_figure(
    index: SeriesIndex,
    regions: Optional[Sequence[str]] = None,
    padding: tuple[float, float] = TREND_PADDING,
) -> go.Figure:
    """Multi-region trend lines on axes shared with the full dataset."""
    regions = trend_regions(index) if regions is None else [r for r in regions if r in index]

    fig = go.Figure()
    for i, region in enumerate(regions):
        obs = index.series(region)
        color = PALETTE[i % len(PALETTE)]
        fig.add_trace(go.Scatter(
            x=[o.date for o in obs],
            y=[o.value for o in obs],
            mode="lines",
            name=region,
            line=dict(color=color, width=2),
        ))
        last = obs[-1]
        fig.add_annotation(
            x=1.0, xref="paper", xanchor="right",
            y=last.value, yref="y",
            text=region, showarrow=False,
            font=dict(color=color, size=12),
        )

    x_ext = date_extent(o.date for o in index.observations)
    y_dom = padded_domain((o.value for o in index.observations), *padding)
    _layout(fig, "House Price Trends", xaxis_title="Date (UTC)", yaxis_title="Index", hovermode="x")
    if x_ext is not None:
        fig.update_xaxes(range=list(x_ext))
    if y_dom is not None:
        fig.update_yaxes(range=list(y_dom))
    return fig


def latest_snapshot(index: SeriesIndex, top_n: int = SNAPSHOT_TOP_N) -> pd.DataFrame:
    """Most recent observation per region, ranked by value (descending), top N."""
    latest = [index.latest(r) for r in index.by_region]
    if not latest:
        return pd.DataFrame(columns=FRAME_COLUMNS)
    df = pd.DataFrame({
        "region": [o.region for o in latest],
        "date": pd.Series([o.date for o in latest], dtype=DATE_DTYPE),
        "value": [o.value for o in latest],
    })
    return (
        df.sort_values("value", ascending=False, kind="stable")
        .head(int(top_n))
        .reset_index(drop=True)
    )


def snapshot_figure(index: SeriesIndex, top_n: int = SNAPSHOT_TOP_N) -> go.Figure:
    top = latest_snapshot(index, top_n)
    fig = go.Figure(go.Bar(
        x=top["region"],
        y=top["value"],
        text=[f"{v:.0f}" for v in top["value"]],
        textposition="outside",
        marker_color=SNAPSHOT_COLOR,
    ))
    _layout(fig, f"Most Recent Index — Top {len(top)} Regions", yaxis_title="Index")
    fig.update_xaxes(type="category")
    if not top.empty and float(top["value"].max()) > 0:
        fig.update_yaxes(range=[0, float(top["value"].max()) * SNAPSHOT_HEADROOM])
    return fig


def first_last(index: SeriesIndex, region: str) -> tuple[Observation, Observation]:
    """First and last observation of a region (KeyError if unknown)."""
    obs = index.series(region)
    return obs[0], obs[-1]


def drilldown_figure(index: SeriesIndex, region: str) -> go.Figure:
    """Single-region line with its first/last points marked and labelled YYYY-MM."""
    obs = index.series(region)
    first, last = first_last(index, region)

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=[o.date for o in obs],
        y=[o.value for o in obs],
        mode="lines",
        name=region,
        line=dict(color=DRILLDOWN_COLOR, width=2),
    ))
    fig.add_trace(go.Scatter(
        x=[first.date, last.date],
        y=[first.value, last.value],
        mode="markers+text",
        text=[first.date.strftime("%Y-%m"), last.date.strftime("%Y-%m")],
        textposition=["top right", "top left"],
        marker=dict(color=DRILLDOWN_COLOR, size=7),
        name="first/last",
    ))

    _layout(fig, f"House Price Trend — {region}", xaxis_title="Date (UTC)", yaxis_title="Index", hovermode="x")
    x_ext = date_extent(o.date for o in obs)
    y_ext = value_extent(o.value for o in obs)
    if x_ext is not None and x_ext[0] != x_ext[1]:
        fig.update_xaxes(range=list(widen(*x_ext, DRILLDOWN_MARGIN)))
    if y_ext is not None and y_ext[0] != y_ext[1]:
        fig.update_yaxes(range=list(widen(*y_ext, DRILLDOWN_MARGIN)))
    return fig


def scene_figure(index: SeriesIndex, state: SessionState) -> go.Figure:
    """Figure for the session's active scene."""
    if state.active_scene is Scene.TRENDS:
        return trend_figure(index)
    if state.active_scene is Scene.SNAPSHOT:
        return snapshot_figure(index)
    if state.selected_region is None:
        raise KeyError("no region selected")
    return drilldown_figure(index, state.selected_region)
