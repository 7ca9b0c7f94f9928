"""
Plotly chart factory functions with consistent styling for the dashboard.
"""

from __future__ import annotations

from typing import Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st


DEFAULT_TEMPLATE = "plotly_dark"
DEFAULT_COLOR_SEQUENCE = [
    "#2563eb",  # blue for skills
    "#facc15",  # yellow for scores
    "#10b981",
    "#ef4444",
]


def _configure_layout(
    fig: go.Figure,
    title: Optional[str] = None,
    xaxis_title: Optional[str] = None,
) -> go.Figure:
    fig.update_layout(
        template=DEFAULT_TEMPLATE,
        colorway=DEFAULT_COLOR_SEQUENCE,
        title=title,
        showlegend=False,
        margin=dict(l=40, r=20, t=60, b=40),
    )
    if xaxis_title:
        fig.update_xaxes(title=xaxis_title)
    fig.update_xaxes(showgrid=False)
    return fig


def render_plotly(fig: go.Figure) -> None:
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})


def bar_chart(
    df: pd.DataFrame,
    x: str,
    y: str,
    orientation: str = "v",
    title: Optional[str] = None,
    xaxis_title: Optional[str] = None,
    text_auto: bool = False,
) -> go.Figure:
    fig = px.bar(
        df,
        x=x,
        y=y,
        orientation=orientation,
        text_auto=text_auto,
    )
    fig = _configure_layout(fig, title, xaxis_title)
    if orientation == "h":
        fig.update_yaxes(autorange="reversed")
    if text_auto:
        fig.update_traces(textposition="outside", cliponaxis=False)
    return fig
