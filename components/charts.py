"""Plotly chart builders for the Cabin Seat Map."""

import plotly.express as px
import plotly.graph_objects as go
import pandas as pd
from typing import Dict, List

from config.defaults import HEAT_MAP_BUCKETS


def _bucket_colorscale() -> list:
    """Stepped colorscale matching the heat-map buckets over 0-100."""
    scale = []
    buckets = sorted(HEAT_MAP_BUCKETS)  # lowest first
    edges = [b[0] for b in buckets] + [100]
    for (low, color, _), high in zip(buckets, edges[1:]):
        scale.append([low / 100, color])
        scale.append([high / 100, color])
    return scale


def popularity_heatmap(matrix: pd.DataFrame, title: str = "Seat Popularity") -> go.Figure:
    """Heatmap of popularity scores, one cell per seat."""
    fig = go.Figure(data=go.Heatmap(
        z=matrix.values,
        x=list(matrix.columns),
        y=[str(r) for r in matrix.index],
        colorscale=_bucket_colorscale(),
        zmin=0,
        zmax=100,
        text=matrix.values,
        texttemplate="%{text}",
        hovertemplate="Row %{y}, Seat %{x}<br>Score: %{z}<extra></extra>",
    ))
    fig.update_layout(
        title=title,
        xaxis_title="Seat",
        yaxis_title="Row",
        yaxis_autorange="reversed",
        height=max(400, len(matrix) * 22),
    )
    return fig


def class_popularity_bar(avg_by_class: Dict[str, float]) -> go.Figure:
    """Average popularity per seat class."""
    df = pd.DataFrame([{"Class": k, "Average Score": v} for k, v in avg_by_class.items()])
    fig = px.bar(
        df, x="Class", y="Average Score",
        title="Average Popularity by Class",
        color="Class",
        color_discrete_map={"business": "#C9A227", "economy-plus": "#5DA271", "economy": "#7F8C8D"},
        range_y=[0, 100],
    )
    fig.update_layout(showlegend=False, height=350)
    return fig


def occupancy_donut(occupied: int, total: int, title: str = "Cabin Occupancy") -> go.Figure:
    """Donut chart of occupied vs open seats."""
    available = total - occupied
    fig = go.Figure(data=[go.Pie(
        labels=["Occupied", "Available"],
        values=[occupied, available],
        hole=0.6,
        marker_colors=["#B0B0B0", "#4A90D9"],
        textinfo="percent+label",
    )])
    fig.update_layout(
        title=title,
        height=350,
        showlegend=True,
        annotations=[dict(text=f"{occupied}/{total}", x=0.5, y=0.5, font_size=16, showarrow=False)],
    )
    return fig


def score_distribution(scores: List[int]) -> go.Figure:
    fig = px.histogram(x=scores, nbins=20, range_x=[0, 100], title="Score Distribution",
                       labels={"x": "Popularity Score"})
    fig.update_layout(height=350, yaxis_title="Seats")
    return fig
