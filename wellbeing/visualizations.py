from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from wellbeing.constants import MOOD_COLORS, MOOD_EMOJIS, MOOD_RATINGS
from wellbeing.formatting import humanize_tag


def mood_logs_frame(mood_logs):
    rows = [
        {
            "created_at": log.created_at,
            "rating": int(log.rating),
            "tags": ", ".join(humanize_tag(tag) for tag in log.tags),
        }
        for log in mood_logs or []
    ]
    frame = pd.DataFrame(rows, columns=["created_at", "rating", "tags"])
    if frame.empty:
        return frame
    frame["created_at"] = pd.to_datetime(frame["created_at"], utc=True)
    return frame.sort_values("created_at").reset_index(drop=True)


def apply_common_plot_style(fig, title, height=280):
    fig.update_layout(
        title=title,
        height=height,
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        margin=dict(l=40, r=20, t=40, b=30),
        showlegend=False,
        xaxis=dict(showgrid=False, zeroline=False),
        yaxis=dict(
            range=[0.5, 5.5],
            tickmode="array",
            tickvals=MOOD_RATINGS,
            ticktext=[f"{MOOD_EMOJIS[r]} {r}" for r in MOOD_RATINGS],
            zeroline=False,
        ),
    )
    return fig


def mood_trend_chart(mood_logs, title="Mood over time"):
    frame = mood_logs_frame(mood_logs)
    if frame.empty:
        return None
    fig = go.Figure(
        data=go.Scatter(
            x=frame["created_at"],
            y=frame["rating"],
            mode="lines+markers",
            line=dict(color="#9CA3AF", width=2),
            marker=dict(size=10, color=[MOOD_COLORS[r] for r in frame["rating"]]),
            text=frame["tags"],
            hovertemplate="%{x|%d %b %H:%M}<br>Rating %{y}<br>%{text}<extra></extra>",
        )
    )
    return apply_common_plot_style(fig, title)
