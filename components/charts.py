"""
Plotly charts for the dictionary: light theme matching the card grid.
"""

import pandas as pd
import plotly.graph_objects as go

LIGHT_LAYOUT = dict(
    paper_bgcolor="rgba(255,255,255,0)",
    plot_bgcolor="rgba(240,249,255,0.8)",
    font=dict(color="#0c4a6e", size=12),
    margin=dict(t=40, b=30, l=40, r=20),
    xaxis=dict(gridcolor="#bae6fd", zerolinecolor="#bae6fd"),
    yaxis=dict(gridcolor="#bae6fd", zerolinecolor="#bae6fd"),
    height=260,
)

SUBJECT_COLORS = {
    "Physics": "#6366f1",
    "Mathematics": "#10b981",
    "Biology": "#f59e0b",
}


def _apply_light(fig: go.Figure) -> go.Figure:
    fig.update_layout(**LIGHT_LAYOUT)
    return fig


def subject_count_chart(counts_df: pd.DataFrame, label_col: str = "subject", count_col: str = "term_count") -> go.Figure:
    """Terms per subject bar chart."""
    if counts_df.empty or label_col not in counts_df.columns or count_col not in counts_df.columns:
        fig = go.Figure()
        fig.add_annotation(text="No terms loaded", xref="paper", yref="paper", x=0.5, y=0.5, showarrow=False, font=dict(size=14, color="#0369a1"))
        return _apply_light(fig)
    fig = go.Figure(
        go.Bar(
            x=counts_df[label_col],
            y=counts_df[count_col],
            marker=dict(color=[SUBJECT_COLORS.get(s, "#0284c7") for s in counts_df[label_col]]),
            text=counts_df[count_col],
            textposition="outside",
        )
    )
    fig.update_layout(
        title=dict(text="Terms per subject", font=dict(size=14, color="#0369a1")),
        xaxis_title="",
        yaxis_title="Terms",
        showlegend=False,
    )
    return _apply_light(fig)
